"""
Blocking JSON GET shared by the resolver and the fetcher.

Wraps httpx and pydantic failures in the card set failure taxonomy.
"""

import logging
from typing import TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from artifactcards.models.failure import DecodeError, TransportError

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


def get_model(client: httpx.Client, url: str, model: type[M], set_id: str | None = None) -> M:
    """
    GET a URL and decode its JSON body as a pydantic model.

    Args:
        client: HTTP client to send the request with
        url: Absolute URL to fetch
        model: Model class the body must validate against
        set_id: Card set the request is for, attached to errors

    Returns:
        Decoded model instance

    Raises:
        TransportError: On connection failure, timeout or non-2xx status
        DecodeError: If the body is not JSON or does not match the model
    """
    logger.debug("GET %s", url)

    try:
        response = client.get(url)
        response.raise_for_status()
    except httpx.HTTPStatusError as e:
        raise TransportError(
            f"Request to {url} failed: HTTP {e.response.status_code}", set_id=set_id
        ) from e
    except httpx.RequestError as e:
        raise TransportError(f"Request to {url} failed: {e}", set_id=set_id) from e

    try:
        return model.model_validate_json(response.content)
    except ValidationError as e:
        raise DecodeError(
            f"Response from {url} is not a valid {model.__name__}: {e}", set_id=set_id
        ) from e
