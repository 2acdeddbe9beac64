"""Payload builders and respx routes for card set API tests."""

from typing import Any

import httpx
import respx

REQUEST_URL = "https://playartifact.com/cardset/"
CDN_ROOT = "https://cdn.example/"


def card_payload(
    card_id: int,
    card_type: str = "Item",
    gold_cost: int | None = None,
    name: str | None = None,
    **fields: Any,
) -> dict[str, Any]:
    """Card JSON as the CDN serves it."""
    card: dict[str, Any] = {
        "card_id": card_id,
        "base_card_id": card_id,
        "card_type": card_type,
        "card_name": {"english": name if name is not None else f"Card {card_id}"},
        "card_text": {},
        "mini_image": {},
        "large_image": {"default": f"https://img.example/large/{card_id}.png"},
        "ingame_image": {},
        "references": [],
    }
    if gold_cost is not None:
        card["gold_cost"] = gold_cost
    card.update(fields)
    return card


def card_set_payload(set_id: int, cards: list[dict[str, Any]]) -> dict[str, Any]:
    return {
        "card_set": {
            "version": 1,
            "set_info": {
                "set_id": set_id,
                "pack_item_def": 1000 + set_id,
                "name": {"english": f"Set {set_id}"},
            },
            "card_list": cards,
        }
    }


def descriptor_payload(set_id: str, expire_time: int = 0) -> dict[str, Any]:
    return {
        "cdn_root": CDN_ROOT,
        "url": f"/sets/{set_id}.json",
        "expire_time": expire_time,
    }


def mock_card_set(
    set_id: str,
    payload: dict[str, Any],
    expire_time: int = 0,
) -> tuple[respx.Route, respx.Route]:
    """
    Register the resolver and CDN routes for one set.

    Must be called while respx is mocking.

    Returns:
        (request route, CDN route)
    """
    request_route = respx.get(f"{REQUEST_URL}{set_id}").mock(
        return_value=httpx.Response(200, json=descriptor_payload(set_id, expire_time))
    )
    cdn_route = respx.get(f"{CDN_ROOT}sets/{set_id}.json").mock(
        return_value=httpx.Response(200, json=payload)
    )
    return request_route, cdn_route
