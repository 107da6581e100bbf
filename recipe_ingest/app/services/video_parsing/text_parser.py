"""Heuristic recipe extraction from captions, descriptions and transcripts.

Video platforms publish no structured recipe data, so this module guesses.
Each stage is a small matcher that returns an empty result instead of
raising; ``parse_recipe_from_text`` chains them and falls back to cruder
segmentation when the targeted patterns find nothing.
"""

import logging
import math
import re
from typing import Iterable, List, Optional

from recipe_ingest.app.services.video_parsing.constants import (
    ACTION_VERBS,
    COOK_TIME_KEYWORDS,
    COOKING_UNITS,
    COUNTABLE_FOODS,
    INGREDIENT_KEYWORDS,
    INGREDIENT_SECTION_MARKERS,
    INSTRUCTION_KEYWORDS,
    INSTRUCTION_SECTION_MARKERS,
    MAX_INGREDIENT_LENGTH,
    MAX_INGREDIENTS,
    MAX_INSTRUCTION_LENGTH,
    MAX_INSTRUCTIONS,
    MIN_INSTRUCTION_LENGTH,
    PORTION_WORDS,
    SECONDS_MAGNITUDE_THRESHOLD,
    SECTION_END_MARKERS,
    SERVINGS_KEYWORDS,
    SUMMARY_LENGTH,
)
from recipe_ingest.app.services.video_parsing.models import ParsedTextRecipe

logger = logging.getLogger(__name__)


def _alternation(words: Iterable[str]) -> str:
    # Longest first so "tablespoon" wins over "tbsp"-style prefixes.
    return "|".join(re.escape(w) for w in sorted(set(words), key=len, reverse=True))


INGREDIENT_KEYWORD_RE = re.compile(rf"\b(?:{_alternation(INGREDIENT_KEYWORDS)})\b", re.I)
INSTRUCTION_KEYWORD_RE = re.compile(
    rf"\b(?:{_alternation(INSTRUCTION_KEYWORDS)})(?:s|es|ed|ing)?\b", re.I
)

_QUANTITY = r"\d+(?:\s+\d+/\d+|[./]\d+)?"

INGREDIENT_PATTERNS = (
    # "2 cups flour", "1/2 tsp salt"
    re.compile(rf"\b{_QUANTITY}\s*(?:{_alternation(COOKING_UNITS)})(?:es|s)?\b\s+[^,\n.]+", re.I),
    # "2 whole chickens", "1 half lemon"
    re.compile(rf"\b\d+\s*(?:{_alternation(PORTION_WORDS)})s?\s+[^,\n.]+", re.I),
    # "1 egg", "3 cloves garlic", "2 large tomatoes"
    re.compile(
        rf"\b\d+\s+(?:(?:large|medium|small|ripe)\s+)?(?:{_alternation(COUNTABLE_FOODS)})(?:es|s)?\b[^,\n.]*",
        re.I,
    ),
)

# A step runs to the end of its sentence or line, or up to the next "step N".
NUMBERED_STEP_RE = re.compile(
    r"(?:\bstep\s*\d+|^\s*\d+[.)](?=\s))[\s:.)\-]*((?:(?!\bstep\s*\d)[^.!?\n])+[.!?]?)", re.I | re.M
)
ACTION_STEP_RE = re.compile(rf"\b(?:{_alternation(ACTION_VERBS)})\s+[^.!?\n]+[.!?]", re.I)
SENTENCE_SPLIT_RE = re.compile(r"[.!?\n]")

INGREDIENT_SECTION_RE = re.compile(
    rf"\b(?:{_alternation(INGREDIENT_SECTION_MARKERS)})\b[\s:]*(.*?)\b(?:{_alternation(INSTRUCTION_SECTION_MARKERS)})\b",
    re.I | re.S,
)
INSTRUCTION_SECTION_RE = re.compile(
    rf"\b(?:{_alternation(INSTRUCTION_SECTION_MARKERS)})\b[\s:]*(.*?)(?:\b(?:{_alternation(SECTION_END_MARKERS)})\b|\Z)",
    re.I | re.S,
)
# Bullets: line breaks, "•", and a dash standing alone ("- flour"), not "all-purpose".
SECTION_ITEM_SPLIT_RE = re.compile(r"[\n•]|(?<!\S)-(?=\s)")

_TIME_KEYWORD = rf"\b(?:{_alternation(COOK_TIME_KEYWORDS)})(?:ing|ed|s)?"
COOK_TIME_RE = re.compile(
    rf"{_TIME_KEYWORD}(?:\s+time)?(?:\s+for)?[\s:]*(?:about\s+)?(\d+)\s*"
    r"(hours?|hrs?|minutes?|mins?|seconds?|secs?)\b"
    r"(?:\s*(?:and\s+)?(\d+)\s*(?:minutes?|mins?)\b)?",
    re.I,
)
# "cook time: 45" with no unit at all.
COOK_TIME_NO_UNIT_RE = re.compile(rf"{_TIME_KEYWORD}\s+time[\s:]*(\d+)\b(?![.,]?\d)(?!\s*[A-Za-z])", re.I)
SERVINGS_RE = re.compile(rf"\b(?:{_alternation(SERVINGS_KEYWORDS)})\b[\s:]*(\d+)", re.I)


def _dedupe(items: Iterable[str]) -> List[str]:
    seen = set()
    unique: List[str] = []
    for item in items:
        if item not in seen:
            seen.add(item)
            unique.append(item)
    return unique


def looks_like_recipe(text: str) -> bool:
    """True when the text mentions ingredients or cooking instructions at all."""
    return bool(INGREDIENT_KEYWORD_RE.search(text) or INSTRUCTION_KEYWORD_RE.search(text))


def find_ingredient_phrases(text: str) -> List[str]:
    """Quantity-led ingredient phrases, in pattern order."""
    found: List[str] = []
    for pattern in INGREDIENT_PATTERNS:
        for match in pattern.finditer(text):
            phrase = match.group(0).strip()
            if phrase and len(phrase) < MAX_INGREDIENT_LENGTH:
                found.append(phrase)
    return _dedupe(found)[:MAX_INGREDIENTS]


def split_ingredient_lines(text: str) -> List[str]:
    """Fallback: treat short hashtag- or line-separated chunks as ingredients."""
    lines = []
    for chunk in re.split(r"[#\n]", text):
        cleaned = chunk.strip()
        if len(cleaned) <= 3 or len(cleaned) >= MAX_INGREDIENT_LENGTH:
            continue
        if cleaned.startswith("@") or cleaned.lower().startswith("http"):
            continue
        lines.append(cleaned)
    return _dedupe(lines)[:MAX_INGREDIENTS]


def _section_items(section: str) -> List[str]:
    return [item.strip(" \t.,;") for item in SECTION_ITEM_SPLIT_RE.split(section)]


def split_ingredient_section(text: str) -> List[str]:
    """Bulleted items between an ingredients heading and an instructions heading."""
    match = INGREDIENT_SECTION_RE.search(text)
    if not match:
        return []
    items = []
    for item in _section_items(match.group(1)):
        if len(item) <= 3 or len(item) >= MAX_INGREDIENT_LENGTH or item.isdigit():
            continue
        if item.startswith("@") or item.lower().startswith("http"):
            continue
        items.append(item)
    return _dedupe(items)[:MAX_INGREDIENTS]


def extract_ingredients(text: str) -> List[str]:
    return find_ingredient_phrases(text) or split_ingredient_section(text) or split_ingredient_lines(text)


def _is_step_length(step: str) -> bool:
    return MIN_INSTRUCTION_LENGTH < len(step) < MAX_INSTRUCTION_LENGTH


def find_instruction_phrases(text: str) -> List[str]:
    """Numbered steps first, then sentences led by a cooking verb."""
    steps = [m.group(1).strip() for m in NUMBERED_STEP_RE.finditer(text)]
    steps += [m.group(0).strip() for m in ACTION_STEP_RE.finditer(text)]
    return _dedupe(s for s in steps if _is_step_length(s))


def split_sentences(text: str) -> List[str]:
    return [s.strip() for s in SENTENCE_SPLIT_RE.split(text) if _is_step_length(s.strip())]


def instruction_section(text: str) -> str:
    match = INSTRUCTION_SECTION_RE.search(text)
    return match.group(1).strip() if match else ""


def split_instruction_section(text: str) -> List[str]:
    """Bulleted items following an instructions heading."""
    return _dedupe(item for item in _section_items(instruction_section(text)) if _is_step_length(item))


def extract_instructions(text: str) -> List[str]:
    steps = find_instruction_phrases(text) or split_instruction_section(text)
    if len(steps) < 2:
        found = [s.rstrip(".!?").lower() for s in steps]
        # Keep the sentence fallback out of the ingredient list when a heading marks the steps.
        for sentence in split_sentences(instruction_section(text) or text):
            lowered = sentence.lower()
            # Skip sentences that restate a step we already have.
            if any(f in lowered or lowered in f for f in found):
                continue
            steps.append(sentence)
    return _dedupe(steps)[:MAX_INSTRUCTIONS]


def _seconds_to_minutes(seconds: int) -> int:
    return math.ceil(seconds / 60)


def extract_cook_time(text: str) -> Optional[int]:
    """Cook time in whole minutes, or None.

    A value with no unit is ambiguous: under SECONDS_MAGNITUDE_THRESHOLD it
    is taken as seconds and rounded up to minutes, otherwise as minutes.
    """
    match = COOK_TIME_RE.search(text)
    if match:
        value = int(match.group(1))
        unit = match.group(2).lower()
        if unit.startswith("h"):
            return value * 60 + int(match.group(3) or 0)
        if unit.startswith("s"):
            return _seconds_to_minutes(value)
        return value

    match = COOK_TIME_NO_UNIT_RE.search(text)
    if match:
        value = int(match.group(1))
        if value < SECONDS_MAGNITUDE_THRESHOLD:
            return _seconds_to_minutes(value)
        return value
    return None


def extract_servings(text: str) -> Optional[int]:
    match = SERVINGS_RE.search(text)
    return int(match.group(1)) if match else None


def summarize(text: str) -> str:
    return re.sub(r"\s+", " ", text[:SUMMARY_LENGTH]).strip()


def parse_recipe_from_text(primary_text: str, fallback_text: str = "") -> Optional[ParsedTextRecipe]:
    """Recover a recipe from free text, preferring ``primary_text``.

    Returns None when the text is not recipe-shaped: either it mentions
    neither ingredients nor cooking steps, or nothing could be extracted.
    """
    text = (primary_text or "").strip() or (fallback_text or "").strip()
    if not text:
        return None

    if not looks_like_recipe(text):
        logger.info("Text has no ingredient or instruction keywords; not a recipe")
        return None

    ingredients = extract_ingredients(text)
    instructions = extract_instructions(text)
    if not ingredients and not instructions:
        logger.info("Recipe keywords present but nothing extractable")
        return None

    parsed = ParsedTextRecipe(
        ingredients=ingredients,
        instructions=instructions,
        cook_time=extract_cook_time(text),
        servings=extract_servings(text),
        summary=summarize(text),
    )
    logger.info(
        "Parsed text recipe: ingredients=%d, instructions=%d, cook_time=%s, servings=%s",
        len(parsed.ingredients),
        len(parsed.instructions),
        parsed.cook_time,
        parsed.servings,
    )
    return parsed
