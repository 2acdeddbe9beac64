"""
Card endpoints.

Renders the aggregated card list as an image gallery and exposes the item
search. Endpoints are plain functions: card set requests block, so FastAPI
runs them in its worker thread pool.

Any failure to load the card sets fails the whole request with 502.
"""

import logging
from html import escape
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.responses import HTMLResponse
from pydantic import BaseModel

from artifactcards.api.dependencies import get_card_set_api
from artifactcards.models.card import Card, ImageRole, Rarity
from artifactcards.models.failure import CardSetRequestError, describe_failure
from artifactcards.services.card_filter import FindItemsParams
from artifactcards.services.card_set_api import CardSetApi

logger = logging.getLogger(__name__)

router = APIRouter(tags=["cards"])

GALLERY_IMAGE_WIDTH = "20%"


class ItemResponse(BaseModel):
    """Response model for one matching card."""

    card_id: int
    name: str
    card_type: str
    gold_cost: int | None = None
    rarity: Rarity | None = None
    image_url: str | None = None


def _load_cards(api: CardSetApi) -> list[Card]:
    try:
        return api.get_all_cards()
    except CardSetRequestError as e:
        logger.warning("Failed to load card sets (set %s): %s", e.set_id, e)
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=describe_failure(e).model_dump(mode="json"),
        ) from e


def render_gallery(cards: list[Card]) -> str:
    """Render one <img> tag per card that has a large image."""
    tags: list[str] = []
    for card in cards:
        image_url = card.image(ImageRole.LARGE).default
        if image_url:
            tags.append(
                f'<img src="{escape(image_url)}" width="{GALLERY_IMAGE_WIDTH}" />'
            )
    return "".join(tags)


@router.get("/", response_class=HTMLResponse)
def gallery(api: Annotated[CardSetApi, Depends(get_card_set_api)]) -> HTMLResponse:
    """Image gallery of every card in every registered set."""
    cards = _load_cards(api)
    return HTMLResponse(content=render_gallery(cards))


@router.get("/items", response_model=list[ItemResponse])
def list_items(
    api: Annotated[CardSetApi, Depends(get_card_set_api)],
    gold_cost: Annotated[int, Query(ge=0)],
    include_adjacent: bool = False,
) -> list[ItemResponse]:
    """
    Items at a gold cost.

    With include_adjacent, cards costing one gold less are included too.
    """
    params = FindItemsParams(gold_cost=gold_cost, include_adjacent=include_adjacent)
    cards = params.apply(_load_cards(api))

    return [
        ItemResponse(
            card_id=card.card_id,
            name=card.display_name,
            card_type=card.card_type,
            gold_cost=card.gold_cost,
            rarity=card.rarity,
            image_url=card.image(ImageRole.LARGE).default,
        )
        for card in cards
    ]
