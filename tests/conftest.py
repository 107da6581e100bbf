import json

import pytest

from recipe_ingest.app.core.config import get_settings


@pytest.fixture(autouse=True)
def fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def recipe_page(*blocks) -> str:
    """Wrap JSON-LD blocks in a minimal HTML page; strings are embedded verbatim."""
    scripts = []
    for block in blocks:
        body = block if isinstance(block, str) else json.dumps(block)
        scripts.append(f'<script type="application/ld+json">{body}</script>')
    return "<html><head><title>Recipe</title>" + "".join(scripts) + "</head><body></body></html>"


SOUP_RECIPE = {
    "@context": "https://schema.org",
    "@type": "Recipe",
    "name": "Soup",
    "recipeIngredient": ["2 cups broth"],
    "recipeInstructions": "Heat and serve.",
    "cookTime": "PT20M",
    "recipeYield": "4",
}


@pytest.fixture
def soup_page():
    return recipe_page(SOUP_RECIPE)
