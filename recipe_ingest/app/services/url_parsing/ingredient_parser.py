"""Ingredient line splitting for structured recipe data."""

import logging
import re
from typing import List

from recipe_ingest.app.services.url_parsing.constants import FRACTION_CHARS
from recipe_ingest.app.services.url_parsing.models import RecipeSchema, ScrapedIngredient
from recipe_ingest.app.services.url_parsing.parsing_utils import clean_text, is_known_unit
from recipe_ingest.app.services.url_parsing.quantity_parser import parse_quantity

logger = logging.getLogger(__name__)

QUANTITY_UNIT_RE = re.compile(
    rf"^\s*([\d\s\/\.\-+{FRACTION_CHARS}]+)\s+([A-Za-z][A-Za-z\.]*)(?:\s+(.*))?$"
)
QUANTITY_ONLY_RE = re.compile(rf"^\s*([\d\s\/\.\-+{FRACTION_CHARS}]+)\s+(.*)$")


def parse_ingredient_line(line: str) -> ScrapedIngredient:
    """Split "1/2 cup flour" into quantity, unit and name.

    Never raises: a quantity that cannot be evaluated is left as ``None`` and
    a line that does not start with a quantity becomes the name as a whole.
    """
    raw = clean_text(line)

    # qty + unit + name; "2 cups" alone keeps the whole line as its name
    m = QUANTITY_UNIT_RE.match(raw)
    if m and is_known_unit(m.group(2)):
        name = clean_text(m.group(3))
        return ScrapedIngredient(
            name=name or raw,
            quantity=parse_quantity(m.group(1)),
            unit=m.group(2).rstrip("."),
        )

    # qty + name (no unit)
    m = QUANTITY_ONLY_RE.match(raw)
    if m:
        name = clean_text(m.group(2))
        return ScrapedIngredient(name=name or raw, quantity=parse_quantity(m.group(1)))

    return ScrapedIngredient(name=raw)


def extract_ingredients(schema: RecipeSchema) -> List[ScrapedIngredient]:
    """Parse every recipeIngredient line, preserving source order."""
    parsed: List[ScrapedIngredient] = []
    for idx, raw in enumerate(schema.recipe_ingredient or []):
        if not clean_text(raw):
            logger.debug("Ingredient %d: string was empty after cleaning", idx)
            continue
        ingredient = parse_ingredient_line(raw)
        parsed.append(ingredient)
        logger.debug(
            "Ingredient %d: '%s' -> name='%s', qty=%s, unit='%s'",
            idx,
            raw[:50],
            ingredient.name[:30],
            ingredient.quantity,
            ingredient.unit,
        )

    logger.info("Extracted %d ingredients from schema", len(parsed))
    return parsed
