from pydantic import BaseModel, ConfigDict, Field

from artifactcards.models.card import Card, TranslationSet


class SetInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    set_id: int
    pack_item_def: int
    name: TranslationSet = Field(default_factory=TranslationSet)


class CardSet(BaseModel):
    """
    One released card set.

    Attributes:
        version: Schema version reported by the API
        set_info: Set id, pack item def and localized name
        card_list: Cards in the order the API lists them
    """

    model_config = ConfigDict(frozen=True)

    version: int
    set_info: SetInfo
    card_list: list[Card] = Field(default_factory=list)


class CardSetResponse(BaseModel):
    """CDN payload for one card set. This is the unit the cache stores."""

    model_config = ConfigDict(frozen=True)

    card_set: CardSet
