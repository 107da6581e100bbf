"""General parsing utilities for recipe extraction."""

import re
from typing import List, Optional

from recipe_ingest.app.services.url_parsing.constants import (
    COMMON_UNITS,
    FRACTION_MAP,
    INSTRUCTION_SEPARATOR,
)
from recipe_ingest.app.services.url_parsing.models import RecipeSchema

ISO_DURATION_RE = re.compile(r"PT(?:(\d+)H)?(?:(\d+)M)?")


def clean_text(text: str) -> str:
    """Normalize whitespace in text."""
    return re.sub(r"\s+", " ", text or "").strip()


def normalize_unit_token(unit: str) -> str:
    """Normalize a unit token for comparison."""
    token = unit.lower().strip(".")
    if token in COMMON_UNITS:
        return token
    if token.endswith("es") and token[:-2] in COMMON_UNITS:
        return token[:-2]
    if token.endswith("s"):
        token = token[:-1]
    return token


def is_known_unit(unit: str) -> bool:
    """Check if a unit string is a recognized cooking unit."""
    return normalize_unit_token(unit) in COMMON_UNITS


def normalize_fraction_display(qty: Optional[str]) -> Optional[str]:
    """Normalize fraction characters and quantity display strings."""
    if not qty:
        return qty
    s = qty
    # "1½" -> "1 ½" so the whole part and fraction stay separate tokens
    fraction_chars = "".join(FRACTION_MAP.keys())
    s = re.sub(rf"(\d)([{fraction_chars}])", r"\1 \2", s)
    for k, v in FRACTION_MAP.items():
        s = s.replace(k, v)
    s = re.sub(r"\s*/\s*", "/", s)
    s = re.sub(r"\s+", " ", s).strip()
    return s or None


def parse_duration(duration: Optional[str]) -> Optional[int]:
    """Parse a PT[n]H[n]M duration into whole minutes.

    Returns ``None`` when the value does not contain the pattern or carries
    neither hours nor minutes, so an unknown time is never reported as zero.
    """
    if not duration or not isinstance(duration, str):
        return None
    match = ISO_DURATION_RE.search(duration)
    if not match or (match.group(1) is None and match.group(2) is None):
        return None
    hours = int(match.group(1) or 0)
    minutes = int(match.group(2) or 0)
    return hours * 60 + minutes


def parse_servings(value) -> Optional[int]:
    """Parse servings from a recipeYield value ("4", "4 servings", 4, ["4"])."""
    if value is None:
        return None
    if isinstance(value, list):
        for item in value:
            servings = parse_servings(item)
            if servings is not None:
                return servings
        return None
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return int(value)
    if isinstance(value, str):
        match = re.search(r"\d+", value)
        if match:
            return int(match.group())
    return None


def extract_image(value) -> Optional[str]:
    """Extract an image URL from schema.org image formats."""
    if isinstance(value, str):
        return value or None
    if isinstance(value, dict):
        url = value.get("url") or value.get("contentUrl")
        return url if isinstance(url, str) and url else None
    if isinstance(value, list):
        for item in value:
            url = extract_image(item)
            if url:
                return url
    return None


def instruction_lines(instructions) -> List[str]:
    """Flatten a recipeInstructions list into step texts, dropping blanks."""
    lines: List[str] = []
    for entry in instructions or []:
        if isinstance(entry, str):
            text = entry.strip()
        elif isinstance(entry, dict):
            section_items = entry.get("itemListElement")
            if isinstance(section_items, list):
                lines.extend(instruction_lines(section_items))
                continue
            text_val = entry.get("text")
            text = text_val.strip() if isinstance(text_val, str) else ""
        else:
            text = ""
        if text:
            lines.append(text)
    return lines


def extract_instructions(schema: RecipeSchema) -> str:
    """Return the recipe's instructions as a single newline-separated string."""
    instructions = schema.recipe_instructions
    if instructions is None:
        return ""
    if isinstance(instructions, str):
        return instructions
    return INSTRUCTION_SEPARATOR.join(instruction_lines(instructions))
