"""Page fetching for the scrapers."""

import logging
from typing import Optional
from urllib.parse import urlparse

import httpx

from recipe_ingest.app.core.config import get_settings
from recipe_ingest.app.services.errors import FetchError, InvalidInputError

logger = logging.getLogger(__name__)


def validate_url(url: str) -> str:
    """Return the trimmed URL, or raise InvalidInputError if it is not http(s)."""
    if not isinstance(url, str):
        raise InvalidInputError("Invalid URL format")
    url = url.strip()
    try:
        parsed = urlparse(url)
        # Raises ValueError for a non-numeric or out-of-range port.
        parsed.port
    except ValueError as exc:
        raise InvalidInputError("Invalid URL format") from exc
    if parsed.scheme not in {"http", "https"} or not parsed.netloc:
        raise InvalidInputError("Invalid URL format")
    return url


def build_headers(extra_headers: Optional[dict] = None) -> dict:
    """Browser-like request headers so sites do not reject us as a bot outright."""
    settings = get_settings()
    headers = {
        "User-Agent": settings.scraper_user_agent,
        "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
        "Accept-Language": settings.scraper_accept_language,
    }
    return headers | (extra_headers or {})


async def fetch_html(url: str, extra_headers: Optional[dict] = None) -> str:
    """Fetch a URL once and return its body as text.

    Any transport failure or non-2xx status raises ``FetchError``; there is no
    retry, so a single failure ends the extraction attempt.
    """
    settings = get_settings()
    timeout = httpx.Timeout(settings.scraper_timeout_seconds)

    try:
        async with httpx.AsyncClient(
            timeout=timeout, follow_redirects=True, headers=build_headers(extra_headers)
        ) as client:
            response = await client.get(url)
        response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        logger.warning("Fetching %s returned status %s", url, exc.response.status_code)
        raise FetchError(url, exc) from exc
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        logger.warning("Fetching %s failed: %s", url, exc)
        raise FetchError(url, exc) from exc

    logger.debug("Fetched %s (%d bytes)", url, len(response.content))
    return response.text
