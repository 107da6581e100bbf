"""Schema.org JSON-LD recipe extraction."""

import json
import logging
from typing import Iterator, Optional

from bs4 import BeautifulSoup
from pydantic import ValidationError

from recipe_ingest.app.services.url_parsing.constants import DEFAULT_RECIPE_TITLE
from recipe_ingest.app.services.url_parsing.ingredient_parser import extract_ingredients
from recipe_ingest.app.services.url_parsing.models import RecipeSchema, ScrapedRecipe
from recipe_ingest.app.services.url_parsing.parsing_utils import (
    clean_text,
    extract_image,
    extract_instructions,
    parse_duration,
    parse_servings,
)

logger = logging.getLogger(__name__)


def _candidates(data) -> Iterator[dict]:
    """Yield the objects of one JSON-LD block in document order."""
    if isinstance(data, list):
        for item in data:
            if isinstance(item, dict):
                yield item
        return
    if not isinstance(data, dict):
        return
    yield data
    graph = data.get("@graph")
    if isinstance(graph, list):
        logger.debug("Found @graph with %d items", len(graph))
        for item in graph:
            if isinstance(item, dict):
                yield item


def parse_structured_data(html: str) -> Optional[RecipeSchema]:
    """Return the first schema.org Recipe embedded in the page, or None.

    Malformed blocks are skipped. ``None`` is the normal answer for a page
    without recipe markup and must not be confused with a fetch failure.
    """
    soup = BeautifulSoup(html, "lxml")
    scripts = soup.find_all("script", attrs={"type": "application/ld+json"})
    logger.info("Found %d JSON-LD script blocks", len(scripts))

    for idx, script in enumerate(scripts):
        raw_json = script.string or script.get_text()
        if not raw_json or not raw_json.strip():
            logger.debug("JSON-LD block %d is empty", idx)
            continue
        try:
            data = json.loads(raw_json)
        except json.JSONDecodeError as exc:
            logger.warning(
                "JSON-LD block %d failed to parse: %s (first 200 chars: %s)",
                idx,
                exc,
                raw_json[:200],
            )
            continue

        for obj_idx, obj in enumerate(_candidates(data)):
            try:
                schema = RecipeSchema.model_validate(obj)
            except ValidationError as exc:
                logger.warning("JSON-LD block %d candidate %d is malformed: %s", idx, obj_idx, exc)
                continue
            if not schema.is_recipe():
                logger.debug(
                    "Block %d candidate %d is not a Recipe (type: %s), skipping",
                    idx,
                    obj_idx,
                    schema.schema_type,
                )
                continue
            logger.info("Using Recipe from JSON-LD block %d candidate %d", idx, obj_idx)
            return schema
    return None


def build_scraped_recipe(schema: RecipeSchema) -> ScrapedRecipe:
    """Normalize a RecipeSchema into the uniform website recipe shape."""
    return ScrapedRecipe(
        title=clean_text(schema.name or "") or DEFAULT_RECIPE_TITLE,
        description=schema.description or None,
        instructions=extract_instructions(schema),
        cook_time=parse_duration(schema.cook_time),
        servings=parse_servings(schema.recipe_yield),
        image_url=extract_image(schema.image),
        ingredients=extract_ingredients(schema),
    )
