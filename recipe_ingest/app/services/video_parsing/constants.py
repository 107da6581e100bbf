"""Vocabularies for the free-text recipe heuristics."""

# Phrases that suggest the text lists what to buy or gather.
INGREDIENT_KEYWORDS = (
    "ingredients",
    "ingredient",
    "ingredient list",
    "you need",
    "you will need",
    "what you need",
    "supplies",
)

# Phrases and verbs that suggest the text explains how to cook.
INSTRUCTION_KEYWORDS = (
    "instructions",
    "instruction",
    "steps",
    "step",
    "directions",
    "direction",
    "how to",
    "preparation",
    "mix",
    "add",
    "combine",
    "cook",
    "bake",
)

# Units that mark a measured ingredient in a caption, e.g. "2 cups flour".
COOKING_UNITS = (
    "tablespoon",
    "teaspoon",
    "kilogram",
    "handful",
    "package",
    "bottle",
    "pound",
    "ounce",
    "pinch",
    "gram",
    "cup",
    "tbsp",
    "tsp",
    "can",
    "oz",
    "ml",
    "lb",
    "kg",
    "g",
)

# Fractional counts, e.g. "2 half lemons".
PORTION_WORDS = ("whole", "half", "quarter")

# Foods usually counted rather than measured, e.g. "1 egg" or "3 cloves garlic".
COUNTABLE_FOODS = (
    "avocado",
    "banana",
    "carrot",
    "clove",
    "egg",
    "lemon",
    "lime",
    "onion",
    "orange",
    "apple",
    "potato",
    "shallot",
    "tomato",
    "tortilla",
    "zucchini",
)

# Verbs that open a cooking step.
ACTION_VERBS = (
    "add",
    "mix",
    "combine",
    "stir",
    "fold",
    "pour",
    "place",
    "bake",
    "cook",
    "heat",
    "cut",
    "chop",
    "blend",
    "whisk",
)

# Words that introduce a cook time ("bake for 20 minutes", "cook time: 1 hour").
COOK_TIME_KEYWORDS = ("cook", "bake", "baking", "mix", "prep", "total")

# Words that introduce a serving count ("serves 4", "makes 12").
SERVINGS_KEYWORDS = ("serves", "servings", "serving", "yields", "yield", "makes")

MAX_INGREDIENTS = 15
MAX_INSTRUCTIONS = 10
MAX_INGREDIENT_LENGTH = 100
MIN_INSTRUCTION_LENGTH = 10
MAX_INSTRUCTION_LENGTH = 200
SUMMARY_LENGTH = 200

# Below this, a cook time with no clear unit is read as seconds.
SECONDS_MAGNITUDE_THRESHOLD = 100

# Headings that open or close a section of a description, e.g.
# "Ingredients: • flour • sugar  How to: ...".
INGREDIENT_SECTION_MARKERS = ("ingredients", "ingredient list", "ingredient", "you will need", "what you need")
INSTRUCTION_SECTION_MARKERS = (
    "instructions",
    "instruction",
    "steps",
    "step",
    "preparation",
    "directions",
    "direction",
    "how to",
    "cook",
)
SECTION_END_MARKERS = (
    "tips",
    "tip",
    "notes",
    "note",
    "serve",
    "storage",
    "cook time",
    "prep time",
    "yield",
    "ingredients",
    "ingredient",
)
