from artifactcards.models.card import (
    Card,
    CardColor,
    CardReference,
    ImageRole,
    ImageSet,
    Rarity,
    TranslationSet,
)
from artifactcards.models.card_set import CardSet, CardSetResponse, SetInfo
from artifactcards.models.failure import (
    STANDARD_MESSAGES,
    CardSetRequestError,
    DecodeError,
    ExpiredDescriptorError,
    FailureDetail,
    FailureKind,
    MalformedIdentifierError,
    TransportError,
    describe_failure,
)
from artifactcards.models.registry import (
    BASE_SET_ID,
    CALL_TO_ARMS_SET_ID,
    CARD_SET_REQUEST_URL,
    SET_IDS,
)
from artifactcards.models.request import CardSetRequest

__all__ = [
    "BASE_SET_ID",
    "CALL_TO_ARMS_SET_ID",
    "CARD_SET_REQUEST_URL",
    "Card",
    "CardColor",
    "CardReference",
    "CardSet",
    "CardSetRequest",
    "CardSetRequestError",
    "CardSetResponse",
    "DecodeError",
    "ExpiredDescriptorError",
    "FailureDetail",
    "FailureKind",
    "ImageRole",
    "ImageSet",
    "MalformedIdentifierError",
    "Rarity",
    "SET_IDS",
    "STANDARD_MESSAGES",
    "SetInfo",
    "TransportError",
    "TranslationSet",
    "describe_failure",
]
