"""Multi-hop traversal of linked pages.

:class:`PageGraphWalker` follows links from one document to the next and
fans out over many links at once.  Fan-out fetches run on a bounded
``ThreadPoolExecutor`` (``max_workers`` at a time); results are gathered as
they complete, so every reduction applied to them must not depend on order
(counting distinct values, summing).

A branch whose page cannot be fetched, or whose page yields nothing,
contributes nothing.  Exceptions raised by a *resolve* callback (e.g.
:class:`~medalwiki.errors.ParseError`) are not swallowed.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import TypeVar

from bs4 import Tag

from medalwiki.scraper.models import Document, Link
from medalwiki.scraper.source import DocumentSource

logger = logging.getLogger(__name__)

T = TypeVar("T")

Target = str | Tag | Link


class PageGraphWalker:
    """Follows links through a :class:`DocumentSource`.

    Args:
        source: Where pages come from.
        max_workers: Upper bound on concurrent fetches during fan-out.
    """

    def __init__(self, source: DocumentSource, max_workers: int = 4) -> None:
        if max_workers < 1:
            raise ValueError("max_workers must be at least 1")
        self.source = source
        self.max_workers = max_workers

    def fetch(self, locator: str) -> Document | None:
        return self.source.fetch(locator)

    def follow(self, target: Target | None) -> Document | None:
        """Fetch the page behind a URL, anchor tag or :class:`Link`."""
        if target is None:
            return None
        if isinstance(target, str):
            return self.source.fetch(target) if target else None
        return self.source.follow(target)

    @staticmethod
    def _key(target: Target) -> str | None:
        if isinstance(target, str):
            return target or None
        if isinstance(target, Link):
            return target.href
        href = target.get("href")
        return str(href) if href else None

    def fan_out(
        self,
        targets: Iterable[Target],
        resolve: Callable[[Document], T | None],
    ) -> list[T]:
        """Fetch every distinct target and map each page through *resolve*.

        Targets pointing at the same href are fetched once.  Unreachable pages
        and ``None`` results are dropped.  The returned list is in completion
        order, not input order.
        """
        unique: dict[str, Target] = {}
        for target in targets:
            key = self._key(target)
            if key is not None and key not in unique:
                unique[key] = target
        if not unique:
            return []

        def work(target: Target) -> T | None:
            document = self.follow(target)
            if document is None:
                return None
            return resolve(document)

        results: list[T] = []
        workers = min(self.max_workers, len(unique))
        with ThreadPoolExecutor(max_workers=workers) as pool:
            future_to_key = {pool.submit(work, target): key for key, target in unique.items()}
            for future in as_completed(future_to_key):
                key = future_to_key[future]
                value = future.result()
                if value is None:
                    logger.debug("No contribution from %s", key)
                    continue
                logger.info("Resolved %s -> %r", key, value)
                results.append(value)
        return results

    def count_distinct(
        self,
        targets: Iterable[Target],
        resolve: Callable[[Document], T | None],
    ) -> int:
        """Number of distinct non-empty values *resolve* yields over *targets*."""
        return len(set(self.fan_out(targets, resolve)))

    def sum_over(
        self,
        targets: Iterable[Target],
        resolve: Callable[[Document], int | None],
    ) -> int:
        """Sum of the integers *resolve* yields over *targets*."""
        return sum(self.fan_out(targets, resolve))
