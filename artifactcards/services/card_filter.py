"""
Item search over an aggregated card list.

Selects items by gold cost. With include_adjacent, cards one gold below
the target are also selected whatever their type, which lets a shopper
see what they could buy while holding back one gold.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from artifactcards.models.card import Card

ITEM_CARD_TYPE = "Item"


@dataclass(frozen=True)
class FindItemsParams:
    """
    Item search parameters.

    Attributes:
        gold_cost: Target gold cost
        include_adjacent: Also select cards costing gold_cost - 1
    """

    gold_cost: int
    include_adjacent: bool = False

    def apply(self, cards: Iterable[Card]) -> list[Card]:
        return find_items(cards, self.gold_cost, self.include_adjacent)


def _matches(card: Card, gold_cost: int, include_adjacent: bool) -> bool:
    if card.gold_cost is None:
        return False
    if card.card_type == ITEM_CARD_TYPE and card.gold_cost == gold_cost:
        return True
    return include_adjacent and card.gold_cost == gold_cost - 1


def find_items(
    cards: Iterable[Card],
    gold_cost: int,
    include_adjacent: bool = False,
) -> list[Card]:
    """
    Select cards by gold cost, preserving input order.

    A card matches if it is an Item costing exactly gold_cost, or if
    include_adjacent is set and it costs gold_cost - 1 (any card type).
    Cards without a gold cost never match.

    Args:
        cards: Cards to search
        gold_cost: Target gold cost
        include_adjacent: Also select cards one gold below the target

    Returns:
        Matching cards in input order
    """
    return [card for card in cards if _matches(card, gold_cost, include_adjacent)]
