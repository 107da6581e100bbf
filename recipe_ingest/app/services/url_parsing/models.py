"""Pydantic models for URL recipe parsing."""

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class RecipeSchema(BaseModel):
    """A schema.org Recipe object as published in a page's JSON-LD.

    Sites disagree on the shape of almost every field, so each field is
    optional and coerced at the boundary: values of an unexpected type become
    ``None`` rather than failing validation. ``None`` means the field was
    absent; an empty string or list means the site published it empty.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    schema_type: Optional[Union[str, List[str]]] = Field(None, alias="@type")
    name: Optional[str] = None
    description: Optional[str] = None
    recipe_ingredient: Optional[List[str]] = Field(None, alias="recipeIngredient")
    recipe_instructions: Optional[Union[str, List[Union[str, Dict[str, Any]]]]] = Field(
        None, alias="recipeInstructions"
    )
    cook_time: Optional[str] = Field(None, alias="cookTime")
    recipe_yield: Optional[Union[int, str, List[Union[int, str]]]] = Field(None, alias="recipeYield")
    image: Optional[Union[str, Dict[str, Any], List[Any]]] = None

    @field_validator("schema_type", mode="before")
    @classmethod
    def _coerce_type(cls, value):
        if isinstance(value, str):
            return value
        if isinstance(value, list):
            return [str(item) for item in value if isinstance(item, str)]
        return None

    @field_validator("name", "description", "cook_time", mode="before")
    @classmethod
    def _coerce_text(cls, value):
        if isinstance(value, str):
            return value
        if isinstance(value, list):
            for item in value:
                if isinstance(item, str):
                    return item
        return None

    @field_validator("recipe_ingredient", mode="before")
    @classmethod
    def _coerce_ingredients(cls, value):
        if isinstance(value, str):
            return [value]
        if not isinstance(value, list):
            return None
        lines: List[str] = []
        for item in value:
            if isinstance(item, str):
                lines.append(item)
            elif isinstance(item, dict):
                text_val = item.get("text") or item.get("name")
                if isinstance(text_val, str):
                    lines.append(text_val)
        return lines

    @field_validator("recipe_instructions", mode="before")
    @classmethod
    def _coerce_instructions(cls, value):
        if isinstance(value, str):
            return value
        if isinstance(value, dict):
            return [value]
        if isinstance(value, list):
            return [item for item in value if isinstance(item, (str, dict))]
        return None

    @field_validator("recipe_yield", mode="before")
    @classmethod
    def _coerce_yield(cls, value):
        if isinstance(value, bool):
            return None
        if isinstance(value, float):
            return int(value)
        if isinstance(value, (int, str)):
            return value
        if isinstance(value, list):
            items = []
            for item in value:
                if isinstance(item, float):
                    items.append(int(item))
                elif isinstance(item, (int, str)) and not isinstance(item, bool):
                    items.append(item)
            return items
        return None

    @field_validator("image", mode="before")
    @classmethod
    def _coerce_image(cls, value):
        if isinstance(value, (str, dict, list)):
            return value
        return None

    def is_recipe(self) -> bool:
        types = [self.schema_type] if isinstance(self.schema_type, str) else self.schema_type or []
        return any(t.lower() == "recipe" for t in types)


class ScrapedIngredient(BaseModel):
    """A structured ingredient line: name with optional quantity and unit."""

    name: str
    quantity: Optional[float] = None
    unit: Optional[str] = None


class ScrapedRecipe(BaseModel):
    """A recipe extracted from a supported recipe website."""

    title: str
    description: Optional[str] = None
    instructions: str = ""
    cook_time: Optional[int] = None
    servings: Optional[int] = None
    image_url: Optional[str] = None
    ingredients: List[ScrapedIngredient] = Field(default_factory=list)


class ScrapeResult(BaseModel):
    """A scraped recipe plus the provenance of where it came from."""

    recipe: ScrapedRecipe
    source_site: str
    source_url: str
    source_recipe_id: Optional[str] = None
