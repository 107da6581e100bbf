"""Routes recipe website URLs to the matching site adapter."""

import logging
from typing import List, Optional, Sequence

from recipe_ingest.app.services.errors import UnsupportedSourceError
from recipe_ingest.app.services.url_parsing.html_fetcher import validate_url
from recipe_ingest.app.services.url_parsing.models import ScrapeResult
from recipe_ingest.app.services.url_parsing.sites import SITE_ADAPTERS, SiteAdapter

logger = logging.getLogger(__name__)


def get_supported_sites(adapters: Sequence[SiteAdapter] = SITE_ADAPTERS) -> List[str]:
    return [adapter.name for adapter in adapters]


def find_site_adapter(url: str, adapters: Sequence[SiteAdapter] = SITE_ADAPTERS) -> Optional[SiteAdapter]:
    """Pick the adapter for a URL: host match first, then priority order."""
    for adapter in adapters:
        if adapter.owns_host(url):
            return adapter
    for adapter in adapters:
        if adapter.recognizes(url):
            return adapter
    return None


async def scrape_recipe_from_url(url: str) -> ScrapeResult:
    """Scrape a recipe from a supported recipe website.

    Raises InvalidInputError before any network access for a malformed URL,
    UnsupportedSourceError for an unknown site, FetchError when the page
    cannot be fetched and NoStructuredDataError when it has no recipe schema.
    """
    url = validate_url(url)

    adapter = find_site_adapter(url)
    if adapter is None:
        supported = get_supported_sites()
        raise UnsupportedSourceError(
            "Unsupported recipe source. Currently supported: " + ", ".join(supported),
            supported=supported,
        )

    logger.info("Scraping %s with the %s adapter", url, adapter.name)
    recipe = await adapter.scrape(url)
    return ScrapeResult(
        recipe=recipe,
        source_site=adapter.name,
        source_url=url,
        source_recipe_id=adapter.recipe_id(url),
    )
