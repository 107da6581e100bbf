"""Recipe extraction services: website scraping and video recipe extraction."""

from recipe_ingest.app.services.errors import (
    FetchError,
    InvalidInputError,
    NoStructuredDataError,
    NotARecipeError,
    RecipeScrapeError,
    UnsupportedSourceError,
    VideoMetadataError,
)
from recipe_ingest.app.services.recipe_scraper import get_supported_sites, scrape_recipe_from_url
from recipe_ingest.app.services.video_recipe_scraper import (
    get_supported_video_platforms,
    scrape_video_recipe_from_url,
)

__all__ = [
    "FetchError",
    "InvalidInputError",
    "NoStructuredDataError",
    "NotARecipeError",
    "RecipeScrapeError",
    "UnsupportedSourceError",
    "VideoMetadataError",
    "get_supported_sites",
    "get_supported_video_platforms",
    "scrape_recipe_from_url",
    "scrape_video_recipe_from_url",
]
