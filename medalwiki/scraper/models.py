"""Data models for the scraper layer."""

from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import urljoin

from bs4 import BeautifulSoup, Tag


@dataclass
class RawPage:
    """The raw HTTP response for a single URL fetch."""

    url: str
    html: str
    status_code: int


@dataclass(frozen=True)
class Link:
    """Display text and target of an anchor element."""

    text: str
    href: str

    def resolve(self, base_url: str) -> str:
        """Return the absolute target URL, resolved against *base_url*."""
        return urljoin(base_url, self.href)

    @classmethod
    def from_anchor(cls, anchor: Tag) -> Link | None:
        """Build a link from an ``<a>`` tag; ``None`` when it has no href."""
        href = anchor.get("href")
        if not href:
            return None
        return cls(text=" ".join(anchor.get_text().split()), href=str(href))


@dataclass(frozen=True)
class Document:
    """One fetched page: its URL and the parsed markup tree.

    The tree is treated as read-only; extraction helpers hand out views
    (``Tag`` objects) into it that must not outlive the document.
    """

    url: str
    soup: BeautifulSoup

    @classmethod
    def parse(cls, url: str, html: str) -> Document:
        return cls(url=url, soup=BeautifulSoup(html, "html.parser"))

    def select(self, css: str) -> list[Tag]:
        return self.soup.select(css)

    def select_one(self, css: str) -> Tag | None:
        return self.soup.select_one(css)

    def find_all(self, name: str | list[str]) -> list[Tag]:
        return self.soup.find_all(name)
