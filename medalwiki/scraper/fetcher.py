"""HTTP fetcher for encyclopedia pages."""

from __future__ import annotations

import httpx

from medalwiki.config import settings
from medalwiki.scraper.models import RawPage


def _default_headers() -> dict[str, str]:
    return {"User-Agent": settings.user_agent}


def _get(url: str, client: httpx.Client | None) -> httpx.Response:
    """GET *url* and return the fully read response.

    When *client* is given it is reused (and left open); otherwise a
    short-lived client is created for this single request.
    """
    if client is not None:
        response = client.get(url)
        response.raise_for_status()
        return response

    with httpx.Client(
        headers=_default_headers(),
        timeout=settings.request_timeout,
        follow_redirects=True,
    ) as own_client:
        response = own_client.get(url)
        response.raise_for_status()
    return response


def fetch_url(url: str, client: httpx.Client | None = None) -> RawPage:
    """Fetch *url* and return a :class:`RawPage`.

    Raises:
        httpx.HTTPStatusError: If the server returns a 4xx/5xx status code.
        httpx.HTTPError: On any other transport failure.
    """
    response = _get(url, client)
    return RawPage(url=url, html=response.text, status_code=response.status_code)


def fetch_bytes(url: str, client: httpx.Client | None = None) -> bytes:
    """Fetch *url* and return the raw response body (images and the like).

    Raises:
        httpx.HTTPError: On a 4xx/5xx status or any transport failure.
    """
    return _get(url, client).content
