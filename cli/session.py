"""Per-invocation state for the medalwiki CLI.

A :class:`Session` owns the document source (and with it the page cache),
the walker and the query catalogue, and remembers the home page once it
has been fetched so that an interactive menu run fetches it only once.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

import typer

from medalwiki.config import settings
from medalwiki.queries import OlympicsQueries
from medalwiki.scraper.models import Document
from medalwiki.scraper.source import DocumentSource
from medalwiki.walker import PageGraphWalker

logger = logging.getLogger(__name__)


@dataclass
class Session:
    source: DocumentSource
    queries: OlympicsQueries
    _home: Document | None = field(default=None, repr=False)

    @classmethod
    def create(cls, cache: bool | None = None) -> Session:
        """Build a session from ``settings``; *cache* overrides ``cache_documents``."""
        source = DocumentSource(
            settings.base_url,
            cache=settings.cache_documents if cache is None else cache,
        )
        walker = PageGraphWalker(source, max_workers=settings.max_concurrent_fetches)
        return cls(source=source, queries=OlympicsQueries(walker, settings.home_url))

    def home(self) -> Document | None:
        """The home page, fetched on first use; ``None`` while unreachable."""
        if self._home is None:
            self._home = self.source.fetch(settings.home_url)
            if self._home is None:
                logger.warning("Home page %s is unreachable", settings.home_url)
        return self._home


def get_session(ctx: typer.Context) -> Session:
    """Return the session stored on the Typer context, creating one if needed."""
    if not isinstance(ctx.obj, Session):
        ctx.obj = Session.create()
    return ctx.obj
