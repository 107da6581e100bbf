"""URL recipe parsing package.

This package extracts recipes from supported recipe websites by reading the
schema.org JSON-LD the sites embed for search engines.
"""

from recipe_ingest.app.services.url_parsing.extractors import (
    build_scraped_recipe,
    parse_structured_data,
)
from recipe_ingest.app.services.url_parsing.html_fetcher import build_headers, fetch_html
from recipe_ingest.app.services.url_parsing.ingredient_parser import (
    extract_ingredients,
    parse_ingredient_line,
)
from recipe_ingest.app.services.url_parsing.models import (
    RecipeSchema,
    ScrapedIngredient,
    ScrapedRecipe,
    ScrapeResult,
)
from recipe_ingest.app.services.url_parsing.parsing_utils import (
    clean_text,
    extract_image,
    extract_instructions,
    is_known_unit,
    normalize_fraction_display,
    normalize_unit_token,
    parse_duration,
    parse_servings,
)
from recipe_ingest.app.services.url_parsing.quantity_parser import parse_quantity
from recipe_ingest.app.services.url_parsing.sites import (
    ALLRECIPES,
    FOOD_NETWORK,
    SITE_ADAPTERS,
    SiteAdapter,
)

__all__ = [
    # Models
    "RecipeSchema",
    "ScrapedIngredient",
    "ScrapedRecipe",
    "ScrapeResult",
    # HTML fetching
    "build_headers",
    "fetch_html",
    # Structured data
    "build_scraped_recipe",
    "parse_structured_data",
    # Ingredient parsing
    "extract_ingredients",
    "parse_ingredient_line",
    "parse_quantity",
    # Parsing utilities
    "clean_text",
    "extract_image",
    "extract_instructions",
    "is_known_unit",
    "normalize_fraction_display",
    "normalize_unit_token",
    "parse_duration",
    "parse_servings",
    # Site adapters
    "ALLRECIPES",
    "FOOD_NETWORK",
    "SITE_ADAPTERS",
    "SiteAdapter",
]
