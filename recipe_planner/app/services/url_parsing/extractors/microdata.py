"""Schema.org microdata (itemprop/itemtype) recipe extraction."""

import logging
import re
from typing import Optional

from bs4 import BeautifulSoup, Tag

from recipe_planner.app.services.url_parsing.image_resolver import extract_recipe_image
from recipe_planner.app.services.url_parsing.ingredient_parser import parse_ingredient
from recipe_planner.app.services.url_parsing.models import ExtractedInstruction, ExtractedRecipe
from recipe_planner.app.services.url_parsing.parsing_utils import (
    clean_text,
    parse_servings,
    parse_time,
)

logger = logging.getLogger(__name__)


def _item_value(el: Optional[Tag], attributes=("content",)) -> str:
    """Value of a microdata property: an explicit attribute wins over element text."""
    if el is None:
        return ""
    for attr in attributes:
        value = el.get(attr)
        if isinstance(value, str) and value.strip():
            return clean_text(value)
    return clean_text(el.get_text(" ", strip=True))


def _first_prop(scope: Tag, prop: str) -> Optional[Tag]:
    return scope.find(attrs={"itemprop": prop})


def _image_from_prop(scope: Tag) -> Optional[str]:
    el = _first_prop(scope, "image")
    if el is None:
        return None
    for attr in ("src", "data-src", "content"):
        value = el.get(attr)
        if isinstance(value, str) and value.strip():
            return value.strip()
    return None


def extract_recipe_from_microdata(soup: BeautifulSoup, url: str) -> Optional[ExtractedRecipe]:
    """Extract a recipe from the first element whose itemtype mentions Recipe."""
    scope = soup.find(attrs={"itemtype": re.compile("Recipe")})
    if scope is None:
        logger.debug("No microdata Recipe scope on %s", url)
        return None

    name = _item_value(_first_prop(scope, "name"))
    if not name:
        logger.warning("Microdata Recipe on %s has no name", url)
        return None

    ingredients = []
    for el in scope.find_all(attrs={"itemprop": "recipeIngredient"}):
        ingredient = parse_ingredient(_item_value(el))
        if ingredient is not None:
            ingredients.append(ingredient)

    instructions = []
    for el in scope.find_all(attrs={"itemprop": "recipeInstructions"}):
        step = clean_text(el.get_text(" ", strip=True))
        if step:
            instructions.append(ExtractedInstruction(step=step))

    times = {}
    for prop in ("prepTime", "cookTime", "totalTime"):
        times[prop] = parse_time(_item_value(_first_prop(scope, prop), ("content", "datetime")))

    image_url = _image_from_prop(scope) or extract_recipe_image(soup, name)

    logger.info(
        "Microdata recipe found: name=%s, ingredients=%d, steps=%d",
        name[:50],
        len(ingredients),
        len(instructions),
    )
    return ExtractedRecipe(
        name=name,
        description=_item_value(_first_prop(scope, "description")) or None,
        prep_time=times["prepTime"],
        cook_time=times["cookTime"],
        total_time=times["totalTime"],
        servings=parse_servings(_item_value(_first_prop(scope, "recipeYield")) or None),
        image_url=image_url,
        ingredients=ingredients,
        instructions=instructions,
    )
