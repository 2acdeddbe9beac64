"""
Card set request descriptor.

The card set endpoint does not return cards. It returns a short-lived
pointer to the CDN copy of the set: a CDN root, a path relative to it and
an expiry timestamp.
"""

import time

import httpx
from pydantic import BaseModel, ConfigDict


class CardSetRequest(BaseModel):
    """
    Download descriptor for one card set.

    Attributes:
        cdn_root: Base URL of the CDN (e.g. "https://steamcdn-a.akamaihd.net/")
        url: Path of the set payload, resolved against cdn_root
        expire_time: Epoch seconds after which the descriptor is stale
    """

    model_config = ConfigDict(frozen=True)

    cdn_root: str
    url: str
    expire_time: int

    def download_url(self) -> str:
        """
        Resolve url against cdn_root using standard URL joining.

        A relative url is appended to the root, an absolute path replaces
        the root's path, and a full URL replaces the root entirely.

        Raises:
            ValueError: If cdn_root is not an absolute URL
            httpx.InvalidURL: If either part cannot be parsed
        """
        root = httpx.URL(self.cdn_root)
        if not root.is_absolute_url:
            raise ValueError(f"cdn_root is not an absolute URL: {self.cdn_root!r}")
        return str(root.join(self.url))

    def is_expired(self, now: float | None = None) -> bool:
        """Check whether expire_time is in the past."""
        if now is None:
            now = time.time()
        return self.expire_time < now
