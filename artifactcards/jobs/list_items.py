"""
List items from every registered card set.

Fetches all card sets and logs one "Name / Gold" line per matching item.
Run with: python -m artifactcards.jobs.list_items --gold-cost 3
"""

import argparse
import logging
import sys

from artifactcards.config import settings
from artifactcards.models.failure import CardSetRequestError
from artifactcards.services.card_filter import FindItemsParams
from artifactcards.services.card_set_api import CardSetApi

logger = logging.getLogger(__name__)


def run_list_items(params: FindItemsParams, api: CardSetApi) -> list[str]:
    """
    Fetch all cards and describe the matching items.

    Args:
        params: Item search parameters
        api: Card set API to load cards through

    Returns:
        One info line per matching card, in aggregated order

    Raises:
        CardSetRequestError: If any card set fails to load
    """
    cards = api.get_all_cards()
    logger.info("Loaded %d cards from %d sets", len(cards), len(api.set_ids))

    lines: list[str] = []
    for card in params.apply(cards):
        info = card.item_info()
        if info is not None:
            logger.info("%s", info)
            lines.append(info)

    logger.info("Found %d items at gold cost %d", len(lines), params.gold_cost)
    return lines


def parse_args(argv: list[str] | None = None) -> FindItemsParams:
    parser = argparse.ArgumentParser(description="List Artifact items by gold cost")
    parser.add_argument("--gold-cost", type=int, required=True, help="Target gold cost")
    parser.add_argument(
        "--include-adjacent",
        action="store_true",
        help="Also list cards costing one gold less",
    )
    args = parser.parse_args(argv)
    return FindItemsParams(gold_cost=args.gold_cost, include_adjacent=args.include_adjacent)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    params = parse_args(argv)

    with CardSetApi(settings) as api:
        try:
            run_list_items(params, api)
        except CardSetRequestError as e:
            logger.error("Failed to load card set %s: %s", e.set_id, e)
            return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
