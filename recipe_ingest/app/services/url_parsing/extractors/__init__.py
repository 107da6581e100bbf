"""Recipe extractors for embedded structured data."""

from recipe_ingest.app.services.url_parsing.extractors.schema_org import (
    build_scraped_recipe,
    parse_structured_data,
)

__all__ = [
    "build_scraped_recipe",
    "parse_structured_data",
]
