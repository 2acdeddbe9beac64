"""
Card models for the Artifact card set API.

Cards are decoded straight from the card set JSON. Most attributes are
optional because the schema varies by card type (hero, creep, item, spell,
improvement). Localized strings only model the english value.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Rarity(str, Enum):
    """Card rarity as published by the card set API."""

    COMMON = "Common"
    UNCOMMON = "Uncommon"
    RARE = "Rare"


class ImageRole(str, Enum):
    """Which rendering of a card an image is for."""

    MINI = "mini"
    LARGE = "large"
    INGAME = "ingame"


class CardColor(str, Enum):
    GREEN = "green"
    RED = "red"
    BLACK = "black"
    BLUE = "blue"


class TranslationSet(BaseModel):
    """Localized text. Only the english value is modeled."""

    model_config = ConfigDict(frozen=True)

    english: str | None = None

    @property
    def value(self) -> str:
        """English value, or an empty string when the text is absent."""
        return self.english if self.english is not None else ""


class ImageSet(BaseModel):
    model_config = ConfigDict(frozen=True)

    default: str | None = None


class CardReference(BaseModel):
    """
    A relation from one card to another.

    Attributes:
        card_id: Referenced card
        ref_type: Relation kind (e.g. "includes", "passive_ability")
        count: Number of copies, for included cards
    """

    model_config = ConfigDict(frozen=True)

    card_id: int
    ref_type: str
    count: int | None = None


class Card(BaseModel):
    """
    A single card from a card set.

    card_id is unique within one set. The same id may appear in more than
    one set and nothing deduplicates across sets.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    card_id: int
    base_card_id: int
    card_type: str
    name: TranslationSet = Field(default_factory=TranslationSet, alias="card_name")
    text: TranslationSet = Field(default_factory=TranslationSet, alias="card_text")
    mini_image: ImageSet = Field(default_factory=ImageSet)
    large_image: ImageSet = Field(default_factory=ImageSet)
    ingame_image: ImageSet = Field(default_factory=ImageSet)
    references: list[CardReference] = Field(default_factory=list)
    attack: int | None = None
    hit_points: int | None = None
    illustrator: str | None = None
    gold_cost: int | None = None
    mana_cost: int | None = None
    sub_type: str | None = None
    is_green: bool | None = None
    is_red: bool | None = None
    is_black: bool | None = None
    is_blue: bool | None = None
    item_def: int | None = None
    rarity: Rarity | None = None

    @property
    def display_name(self) -> str:
        return self.name.value

    @property
    def display_text(self) -> str:
        return self.text.value

    def image(self, role: ImageRole) -> ImageSet:
        """Get the image set for a rendering role."""
        if role is ImageRole.MINI:
            return self.mini_image
        if role is ImageRole.LARGE:
            return self.large_image
        return self.ingame_image

    def colors(self) -> frozenset[CardColor]:
        """Colors whose flag is set on this card. Missing flags count as unset."""
        flags = {
            CardColor.GREEN: self.is_green,
            CardColor.RED: self.is_red,
            CardColor.BLACK: self.is_black,
            CardColor.BLUE: self.is_blue,
        }
        return frozenset(color for color, flag in flags.items() if flag)

    def item_info(self) -> str | None:
        """
        One-line summary of name and gold cost.

        Returns:
            "Name: <name> / Gold: <cost>", or None for cards without a gold cost.
        """
        if self.gold_cost is None:
            return None
        return f"Name: {self.display_name} / Gold: {self.gold_cost}"
