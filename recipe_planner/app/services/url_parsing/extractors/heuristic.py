"""Heuristic recipe extraction from common recipe-site markup."""

import logging
from typing import List, Optional, Sequence

from bs4 import BeautifulSoup

from recipe_planner.app.services.url_parsing.constants import (
    INGREDIENT_SELECTORS,
    INSTRUCTION_SELECTORS,
    TITLE_SELECTORS,
)
from recipe_planner.app.services.url_parsing.image_resolver import extract_recipe_image
from recipe_planner.app.services.url_parsing.ingredient_parser import parse_ingredient
from recipe_planner.app.services.url_parsing.models import ExtractedInstruction, ExtractedRecipe
from recipe_planner.app.services.url_parsing.parsing_utils import clean_text

logger = logging.getLogger(__name__)


def find_title(soup: BeautifulSoup) -> Optional[str]:
    """First non-empty <h1>, else the first title-like element in selector order."""
    for h1 in soup.find_all("h1"):
        title = clean_text(h1.get_text(" ", strip=True))
        if title:
            return title
    for selector in TITLE_SELECTORS:
        el = soup.select_one(selector)
        if el is not None:
            title = clean_text(el.get_text(" ", strip=True))
            if title:
                return title
    return None


def first_matching_texts(soup: BeautifulSoup, selectors: Sequence[str]) -> List[str]:
    """Texts from the first selector that matches at least one non-empty element.

    Later selectors are not consulted once one has produced results.
    """
    for selector in selectors:
        texts = [clean_text(el.get_text(" ", strip=True)) for el in soup.select(selector)]
        texts = [t for t in texts if t]
        if texts:
            logger.debug("Selector %s matched %d items", selector, len(texts))
            return texts
    return []


def extract_recipe_heuristic(soup: BeautifulSoup, url: str) -> Optional[ExtractedRecipe]:
    """Extract a recipe using common CSS class conventions."""
    name = find_title(soup)
    if not name:
        logger.info("No title found for heuristic extraction on %s", url)
        return None

    ingredients = []
    for text in first_matching_texts(soup, INGREDIENT_SELECTORS):
        ingredient = parse_ingredient(text)
        if ingredient is not None:
            ingredients.append(ingredient)
    instructions = [
        ExtractedInstruction(step=text)
        for text in first_matching_texts(soup, INSTRUCTION_SELECTORS)
    ]

    logger.info(
        "Heuristic recipe: name=%s, ingredients=%d, steps=%d",
        name[:50],
        len(ingredients),
        len(instructions),
    )
    return ExtractedRecipe(
        name=name,
        image_url=extract_recipe_image(soup, name),
        ingredients=ingredients,
        instructions=instructions,
    )
