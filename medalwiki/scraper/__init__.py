"""Scraper package — page fetch & parsed document access."""

from medalwiki.scraper.fetcher import fetch_url
from medalwiki.scraper.models import Document, Link, RawPage
from medalwiki.scraper.source import DocumentSource

__all__ = ["fetch_url", "DocumentSource", "Document", "Link", "RawPage"]
