"""
Card set request resolver.

Asks the card set endpoint where the payload of a set currently lives.
The answer is a CardSetRequest pointing at the CDN.
"""

import logging
import re

import httpx

from artifactcards.models.failure import MalformedIdentifierError
from artifactcards.models.registry import CARD_SET_REQUEST_URL
from artifactcards.models.request import CardSetRequest
from artifactcards.services.transport import get_model

logger = logging.getLogger(__name__)

# RFC 3986 path segment: unreserved, percent-escapes, sub-delims, ":" and "@"
_SET_ID_PATTERN = re.compile(r"(?:[A-Za-z0-9._~!$&'()*+,;=:@-]|%[0-9A-Fa-f]{2})+")

# A leading "name:" would be read as a URL scheme instead of a path segment
_SCHEME_PREFIX = re.compile(r"[A-Za-z][A-Za-z0-9+.-]*:")


def build_request_url(set_id: str, base_url: str = CARD_SET_REQUEST_URL) -> str:
    """
    Join a set identifier onto the request endpoint as a path segment.

    Args:
        set_id: Card set identifier (e.g. "00")
        base_url: Request endpoint. A trailing slash is added if missing.

    Returns:
        Absolute request URL (e.g. "https://playartifact.com/cardset/00")

    Raises:
        MalformedIdentifierError: If set_id is not a single valid path segment
    """
    if (
        not _SET_ID_PATTERN.fullmatch(set_id)
        or _SCHEME_PREFIX.match(set_id)
        or set_id in {".", ".."}
    ):
        raise MalformedIdentifierError(
            f"Invalid card set identifier: {set_id!r}", set_id=set_id
        )

    if not base_url.endswith("/"):
        base_url = f"{base_url}/"

    try:
        return str(httpx.URL(base_url).join(set_id))
    except httpx.InvalidURL as e:
        raise MalformedIdentifierError(
            f"Cannot join {set_id!r} onto {base_url}: {e}", set_id=set_id
        ) from e


def resolve_set_request(
    set_id: str,
    client: httpx.Client,
    base_url: str = CARD_SET_REQUEST_URL,
) -> CardSetRequest:
    """
    Resolve a set identifier into its CDN download descriptor.

    No retries: the first failure is raised to the caller.

    Raises:
        MalformedIdentifierError: If set_id cannot form a request URL
        TransportError: If the request fails
        DecodeError: If the body is not a CardSetRequest
    """
    url = build_request_url(set_id, base_url)
    request = get_model(client, url, CardSetRequest, set_id=set_id)
    logger.debug("Resolved set %s to %s%s", set_id, request.cdn_root, request.url)
    return request
