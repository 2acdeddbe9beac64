from collections.abc import Iterator

import httpx
import pytest

from tests.factories import card_payload, card_set_payload


@pytest.fixture
def http_client() -> Iterator[httpx.Client]:
    """Plain httpx client; requests are intercepted by respx."""
    with httpx.Client() as client:
        yield client


@pytest.fixture
def base_set_payload() -> dict:
    """Base set with a hero, two items and a spell."""
    return card_set_payload(
        0,
        [
            card_payload(4000, card_type="Hero", name="Axe", is_red=True, rarity="Rare"),
            card_payload(4001, card_type="Item", gold_cost=3, name="Blink Dagger"),
            card_payload(4002, card_type="Item", gold_cost=2, name="Leather Armor"),
            card_payload(4003, card_type="Spell", mana_cost=3, name="Berserker's Call"),
        ],
    )


@pytest.fixture
def call_to_arms_payload() -> dict:
    """Call to Arms set with one item and one creep."""
    return card_set_payload(
        1,
        [
            card_payload(5001, card_type="Item", gold_cost=3, name="Ring of Tarrasque"),
            card_payload(5002, card_type="Creep", gold_cost=None, name="Satyr Magician"),
        ],
    )
