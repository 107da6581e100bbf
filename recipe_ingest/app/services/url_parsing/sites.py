"""Adapters for the recipe websites we know how to scrape."""

import logging
import re
from dataclasses import dataclass
from typing import Optional, Tuple
from urllib.parse import urlparse

from recipe_ingest.app.services.errors import NoStructuredDataError
from recipe_ingest.app.services.url_parsing.extractors.schema_org import (
    build_scraped_recipe,
    parse_structured_data,
)
from recipe_ingest.app.services.url_parsing.html_fetcher import fetch_html
from recipe_ingest.app.services.url_parsing.models import ScrapedRecipe

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SiteAdapter:
    """A recipe website that publishes schema.org Recipe JSON-LD."""

    name: str
    domain: str
    recipe_id_pattern: Optional[str] = None

    def recognizes(self, url: str) -> bool:
        return self.domain in url

    def owns_host(self, url: str) -> bool:
        host = (urlparse(url).hostname or "").lower()
        return host == self.domain or host.endswith("." + self.domain)

    def recipe_id(self, url: str) -> Optional[str]:
        if not self.recipe_id_pattern:
            return None
        match = re.search(self.recipe_id_pattern, url)
        return match.group(1) if match else None

    async def scrape(self, url: str) -> ScrapedRecipe:
        html = await fetch_html(url)
        schema = parse_structured_data(html)
        if schema is None:
            logger.warning("No recipe schema found for %s (%s)", url, self.name)
            raise NoStructuredDataError(url)
        recipe = build_scraped_recipe(schema)
        logger.info(
            "Scraped %s recipe '%s': ingredients=%d, cook_time=%s",
            self.name,
            recipe.title[:50],
            len(recipe.ingredients),
            recipe.cook_time,
        )
        return recipe


# https://www.allrecipes.com/recipe/12345/name/
ALLRECIPES = SiteAdapter(
    name="AllRecipes",
    domain="allrecipes.com",
    recipe_id_pattern=r"/recipe/(\d+)",
)

# https://www.foodnetwork.com/recipes/recipe-name-1234567
FOOD_NETWORK = SiteAdapter(
    name="Food Network",
    domain="foodnetwork.com",
    recipe_id_pattern=r"/recipes/([^/?#]+)",
)

# Priority order for dispatch.
SITE_ADAPTERS: Tuple[SiteAdapter, ...] = (ALLRECIPES, FOOD_NETWORK)
