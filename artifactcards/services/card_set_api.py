"""
Card set API client.

Resolves, downloads and caches Artifact card sets, and aggregates every
registered set into one card list.

Flow per set: cache lookup -> on miss, resolve descriptor -> download
payload -> store in cache. The cache never expires entries; a set is
fetched at most once per CardSetCache instance.
"""

import logging
from collections.abc import Callable, MutableMapping, Sequence
from threading import Lock
from types import TracebackType

import httpx

from artifactcards.config import Settings, settings
from artifactcards.models.card import Card
from artifactcards.models.card_set import CardSetResponse
from artifactcards.models.registry import CARD_SET_REQUEST_URL
from artifactcards.services.fetcher import fetch_card_set
from artifactcards.services.resolver import resolve_set_request

logger = logging.getLogger(__name__)


class CardSetCache:
    """
    Memoizes decoded card set responses by set identifier.

    Entries are created on the first successful fetch and never replaced or
    removed. A failed fetch leaves no entry, so the next call retries both
    stages. Callers always receive copies, never the stored objects.
    """

    def __init__(
        self,
        client: httpx.Client,
        base_url: str = CARD_SET_REQUEST_URL,
        enforce_expiry: bool = False,
        now: Callable[[], float] | None = None,
        storage: MutableMapping[str, CardSetResponse] | None = None,
    ) -> None:
        """
        Initialize cache.

        Args:
            client: HTTP client used for both the resolver and the CDN
            base_url: Card set request endpoint
            enforce_expiry: Refuse expired download descriptors
            now: Clock for expiry checks (epoch seconds)
            storage: Backing map. Defaults to a new dict.
        """
        self._client = client
        self._base_url = base_url
        self._enforce_expiry = enforce_expiry
        self._now = now
        self._cached_sets: MutableMapping[str, CardSetResponse] = (
            storage if storage is not None else {}
        )
        # Held across lookup, fetch and insert so a set is fetched at most once
        self._lock = Lock()

    def __contains__(self, set_id: object) -> bool:
        return set_id in self._cached_sets

    def __len__(self) -> int:
        return len(self._cached_sets)

    def cached_set_ids(self) -> list[str]:
        """Set identifiers currently cached."""
        return list(self._cached_sets)

    def get_or_fetch(self, set_id: str) -> CardSetResponse:
        """
        Get a card set, fetching it on first use.

        Args:
            set_id: Card set identifier

        Returns:
            Copy of the cached card set response

        Raises:
            CardSetRequestError: If the set is not cached and fetching fails
        """
        with self._lock:
            cached_set = self._cached_sets.get(set_id)
            if cached_set is not None:
                logger.info(
                    "Found cached set response for set %d",
                    cached_set.card_set.set_info.set_id,
                )
                return cached_set.model_copy(deep=True)

            logger.info("Fetching set_id %s from server...", set_id)
            request = resolve_set_request(set_id, self._client, self._base_url)
            card_set_response = fetch_card_set(
                request,
                self._client,
                enforce_expiry=self._enforce_expiry,
                now=self._now,
                set_id=set_id,
            )

            self._cached_sets[set_id] = card_set_response
            logger.info(
                "Cached set %s with %d cards",
                set_id,
                len(card_set_response.card_set.card_list),
            )
            return card_set_response.model_copy(deep=True)


class CardSetApi:
    """
    Aggregates the cards of every registered set.

    Builds and owns an HTTP client only when neither a client nor a cache is
    passed in. Use as a context manager, or call close(), to release it.
    """

    def __init__(
        self,
        config: Settings | None = None,
        client: httpx.Client | None = None,
        cache: CardSetCache | None = None,
        set_ids: Sequence[str] | None = None,
    ) -> None:
        config = config or settings

        # An injected cache carries its own client
        self._owns_client = False
        if cache is None:
            if client is None:
                client = httpx.Client(
                    headers={"User-Agent": config.user_agent},
                    follow_redirects=True,
                    timeout=config.request_timeout,
                )
                self._owns_client = True
            cache = CardSetCache(
                client,
                base_url=config.card_set_request_url,
                enforce_expiry=config.enforce_descriptor_expiry,
            )
        self._client = client
        self.cache = cache
        self.set_ids: tuple[str, ...] = tuple(set_ids if set_ids is not None else config.set_ids)

    def __enter__(self) -> "CardSetApi":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_client and self._client is not None:
            self._client.close()

    def get_set(self, set_id: str) -> CardSetResponse:
        """Get one card set through the cache."""
        return self.cache.get_or_fetch(set_id)

    def get_all_cards(self) -> list[Card]:
        """
        Get the cards of every registered set.

        Sets are loaded in registry order and their card lists concatenated
        in their own order. Fails fast: the first set that cannot be loaded
        aborts the call and no partial list is returned. Sets loaded before
        the failure stay cached.

        Raises:
            CardSetRequestError: From the first set that fails to load
        """
        card_list: list[Card] = []

        for set_id in self.set_ids:
            card_set_response = self.get_set(set_id)
            card_list.extend(card_set_response.card_set.card_list)

        return card_list
