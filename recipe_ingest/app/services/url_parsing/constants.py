"""Lookup tables shared by the structured-data parsers."""

FRACTION_MAP = {
    "½": "1/2",
    "⅓": "1/3",
    "⅔": "2/3",
    "¼": "1/4",
    "¾": "3/4",
    "⅕": "1/5",
    "⅖": "2/5",
    "⅗": "3/5",
    "⅘": "4/5",
    "⅙": "1/6",
    "⅚": "5/6",
    "⅛": "1/8",
    "⅜": "3/8",
    "⅝": "5/8",
    "⅞": "7/8",
    "⁄": "/",
}

FRACTION_CHARS = "".join(FRACTION_MAP.keys())

# Singular, lower-case unit tokens. Plurals and trailing periods are
# normalized away by ``normalize_unit_token`` before lookup.
COMMON_UNITS = frozenset(
    {
        "bag",
        "bottle",
        "box",
        "bunch",
        "c",
        "can",
        "clove",
        "container",
        "cup",
        "dash",
        "drop",
        "envelope",
        "fl",
        "g",
        "gal",
        "gallon",
        "gram",
        "handful",
        "head",
        "inch",
        "jar",
        "kg",
        "kilogram",
        "l",
        "lb",
        "liter",
        "litre",
        "mg",
        "milligram",
        "milliliter",
        "millilitre",
        "ml",
        "ounce",
        "oz",
        "package",
        "packet",
        "piece",
        "pinch",
        "pint",
        "pkg",
        "pound",
        "pt",
        "qt",
        "quart",
        "slice",
        "sprig",
        "stalk",
        "stick",
        "t",
        "tablespoon",
        "tb",
        "tbs",
        "tbsp",
        "teaspoon",
        "tsp",
    }
)

DEFAULT_RECIPE_TITLE = "Untitled Recipe"

INSTRUCTION_SEPARATOR = "\n"
