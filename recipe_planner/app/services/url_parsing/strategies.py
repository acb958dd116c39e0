"""Ordered fallback over the recipe extraction strategies."""

import logging
from typing import Callable, NamedTuple, Optional

from bs4 import BeautifulSoup

from recipe_planner.app.services.url_parsing.extractors import (
    extract_recipe_from_json_ld,
    extract_recipe_from_microdata,
    extract_recipe_heuristic,
)
from recipe_planner.app.services.url_parsing.models import ExtractedRecipe, ParseResult

logger = logging.getLogger(__name__)

NO_RECIPE_FOUND = "no_recipe_found"


class ExtractionStrategy(NamedTuple):
    name: str
    extract: Callable[[BeautifulSoup, str], Optional[ExtractedRecipe]]


EXTRACTION_STRATEGIES = (
    ExtractionStrategy("json_ld", extract_recipe_from_json_ld),
    ExtractionStrategy("microdata", extract_recipe_from_microdata),
    ExtractionStrategy("heuristic", extract_recipe_heuristic),
)


def extract_recipe(soup: BeautifulSoup, url: str, strategies=EXTRACTION_STRATEGIES) -> ParseResult:
    """Run each strategy in order and return the first recipe produced."""
    for strategy in strategies:
        recipe = strategy.extract(soup, url)
        if recipe is not None:
            logger.info("Recipe extracted from %s using %s", url, strategy.name)
            return ParseResult(success=True, recipe=recipe, parser_strategy=strategy.name)
        logger.debug("Strategy %s found no recipe on %s", strategy.name, url)

    logger.info("No recipe extractable from %s", url)
    return ParseResult(
        success=False,
        error_code=NO_RECIPE_FOUND,
        error_message="Could not extract recipe from URL",
    )


def extract_recipe_from_html(html: str, url: str) -> ParseResult:
    return extract_recipe(BeautifulSoup(html, "lxml"), url)
