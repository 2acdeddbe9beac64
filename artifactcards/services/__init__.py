from artifactcards.services.card_filter import FindItemsParams, find_items
from artifactcards.services.card_set_api import CardSetApi, CardSetCache
from artifactcards.services.fetcher import fetch_card_set
from artifactcards.services.resolver import build_request_url, resolve_set_request

__all__ = [
    "CardSetApi",
    "CardSetCache",
    "FindItemsParams",
    "build_request_url",
    "fetch_card_set",
    "find_items",
    "resolve_set_request",
]
