"""
Card set request failures.

Every error raised while resolving or downloading a card set is a
CardSetRequestError carrying a FailureKind, so callers (the front-end and
the jobs) can classify the failure without inspecting httpx or pydantic
exceptions.

Errors propagate unchanged from the resolver and fetcher through the cache
and the aggregator. Nothing below the front-end recovers from them.
"""

from enum import Enum

from pydantic import BaseModel, Field


class FailureKind(str, Enum):
    """Classification of card set request failures."""

    # Set identifier cannot be joined onto the request endpoint
    MALFORMED_IDENTIFIER = "malformed_identifier"

    # Connection failure, timeout or non-success status
    TRANSPORT = "transport"

    # Response body is not the expected JSON shape
    DECODE = "decode"

    # Descriptor expire_time has passed (only when expiry is enforced)
    EXPIRED_DESCRIPTOR = "expired_descriptor"


STANDARD_MESSAGES: dict[FailureKind, str] = {
    FailureKind.MALFORMED_IDENTIFIER: "The card set identifier is not valid.",
    FailureKind.TRANSPORT: "The card set service could not be reached.",
    FailureKind.DECODE: "The card set service returned data we could not read.",
    FailureKind.EXPIRED_DESCRIPTOR: "The card set download link has expired.",
}


class CardSetRequestError(Exception):
    """Raised when a card set cannot be resolved or downloaded."""

    kind: FailureKind = FailureKind.TRANSPORT

    def __init__(self, message: str, set_id: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.set_id = set_id


class MalformedIdentifierError(CardSetRequestError):
    kind = FailureKind.MALFORMED_IDENTIFIER


class TransportError(CardSetRequestError):
    kind = FailureKind.TRANSPORT


class DecodeError(CardSetRequestError):
    kind = FailureKind.DECODE


class ExpiredDescriptorError(CardSetRequestError):
    kind = FailureKind.EXPIRED_DESCRIPTOR


class FailureDetail(BaseModel):
    """Detailed information about a failure, as returned by the front-end."""

    kind: FailureKind = Field(
        ...,
        description="Classification of the failure",
    )
    message: str = Field(
        ...,
        description="User-appropriate explanation of what went wrong",
    )
    detail: str | None = Field(
        default=None,
        description="Additional technical detail (optional)",
    )
    set_id: str | None = Field(
        default=None,
        description="Card set identifier that failed, when known",
    )


def describe_failure(error: CardSetRequestError) -> FailureDetail:
    """Build the user-facing failure detail for a card set error."""
    return FailureDetail(
        kind=error.kind,
        message=STANDARD_MESSAGES[error.kind],
        detail=error.message,
        set_id=error.set_id,
    )
