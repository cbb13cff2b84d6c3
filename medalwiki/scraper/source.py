"""The document source: the only network-facing seam the query core uses.

:class:`DocumentSource` resolves relative links against a fixed base URL,
fetches pages through :func:`~medalwiki.scraper.fetcher.fetch_url`, parses
them, and optionally keeps every parsed page for the lifetime of the source
so that a link reached twice in one session is fetched once.

Fetch failures never escape: they are logged and reported as ``None``.
"""

from __future__ import annotations

import logging
import threading
from urllib.parse import urljoin

import httpx
from bs4 import Tag

from medalwiki.scraper import fetcher
from medalwiki.scraper.models import Document, Link

logger = logging.getLogger(__name__)

# urljoin and httpx URL parsing raise these for malformed hrefs.
_FETCH_ERRORS = (httpx.HTTPError, httpx.InvalidURL, ValueError)


class DocumentSource:
    """Fetches and parses pages relative to *base_url*.

    Args:
        base_url: Site root that relative ``href`` values are resolved against.
        cache: Keep parsed documents keyed by absolute URL for the lifetime
            of this object.
        client: Optional shared ``httpx.Client``; the caller owns it.
    """

    def __init__(
        self,
        base_url: str,
        cache: bool = True,
        client: httpx.Client | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/") + "/"
        self.cache_enabled = cache
        self.client = client
        self._cache: dict[str, Document] = {}
        self._lock = threading.Lock()
        self.fetch_count = 0

    def resolve(self, href: str) -> str:
        """Return the absolute URL for *href*."""
        return urljoin(self.base_url, href)

    def fetch(self, locator: str) -> Document | None:
        """Return the parsed page at *locator*, or ``None`` if it cannot be fetched."""
        try:
            url = self.resolve(locator)
        except ValueError as exc:
            logger.warning("Malformed link %r: %s", locator, exc)
            return None
        if self.cache_enabled:
            with self._lock:
                cached = self._cache.get(url)
            if cached is not None:
                logger.debug("Document cache hit: %s", url)
                return cached

        try:
            raw = fetcher.fetch_url(url, client=self.client)
        except _FETCH_ERRORS as exc:
            logger.warning("Couldn't connect to %s: %s", url, exc)
            return None

        with self._lock:
            self.fetch_count += 1
        document = Document.parse(url, raw.html)
        logger.debug("Fetched %s (HTTP %s)", url, raw.status_code)

        if self.cache_enabled:
            with self._lock:
                # Another worker may have stored the same page meanwhile.
                document = self._cache.setdefault(url, document)
        return document

    def follow(self, anchor: Tag | Link | None) -> Document | None:
        """Fetch the target of an anchor tag or :class:`Link`."""
        if anchor is None:
            return None
        link = anchor if isinstance(anchor, Link) else Link.from_anchor(anchor)
        if link is None:
            return None
        return self.fetch(link.href)

    def fetch_bytes(self, url: str) -> bytes | None:
        """Return the body at *url* (not cached), or ``None`` on failure."""
        target = url
        try:
            target = self.resolve(url)
            return fetcher.fetch_bytes(target, client=self.client)
        except _FETCH_ERRORS as exc:
            logger.warning("Failed to download %s: %s", target, exc)
            return None

    def clear(self) -> None:
        """Drop every cached document."""
        with self._lock:
            self._cache.clear()
