"""
Card set fetcher.

Downloads a card set payload from the CDN location a CardSetRequest
points to.
"""

import logging
from collections.abc import Callable

import httpx

from artifactcards.models.card_set import CardSetResponse
from artifactcards.models.failure import DecodeError, ExpiredDescriptorError
from artifactcards.models.request import CardSetRequest
from artifactcards.services.transport import get_model

logger = logging.getLogger(__name__)


def fetch_card_set(
    request: CardSetRequest,
    client: httpx.Client,
    enforce_expiry: bool = False,
    now: Callable[[], float] | None = None,
    set_id: str | None = None,
) -> CardSetResponse:
    """
    Download and decode the card set a descriptor points to.

    Args:
        request: Descriptor returned by the resolver
        client: HTTP client to send the request with
        enforce_expiry: Refuse descriptors whose expire_time has passed.
            When False, expire_time is informational only.
        now: Clock returning epoch seconds. Defaults to time.time.
        set_id: Card set the descriptor is for, attached to errors

    Returns:
        Decoded card set payload

    Raises:
        ExpiredDescriptorError: If enforce_expiry is set and the descriptor expired
        TransportError: If the download fails
        DecodeError: If the descriptor or payload is malformed
    """
    if request.is_expired(now() if now is not None else None):
        if enforce_expiry:
            raise ExpiredDescriptorError(
                f"Descriptor expired at {request.expire_time}", set_id=set_id
            )
        logger.debug(
            "Descriptor for set %s expired at %d, following it anyway",
            set_id,
            request.expire_time,
        )

    try:
        url = request.download_url()
    except (ValueError, httpx.InvalidURL) as e:
        raise DecodeError(f"Invalid download descriptor: {e}", set_id=set_id) from e

    return get_model(client, url, CardSetResponse, set_id=set_id)
