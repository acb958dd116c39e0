"""Schema.org JSON-LD recipe extraction."""

import json
import logging
from typing import List, Optional

from bs4 import BeautifulSoup

from recipe_planner.app.services.url_parsing.image_resolver import extract_recipe_image
from recipe_planner.app.services.url_parsing.ingredient_parser import parse_ingredient
from recipe_planner.app.services.url_parsing.models import (
    ExtractedIngredient,
    ExtractedInstruction,
    ExtractedRecipe,
)
from recipe_planner.app.services.url_parsing.parsing_utils import (
    clean_text,
    extract_instruction_text,
    parse_servings,
    parse_time,
)

logger = logging.getLogger(__name__)


def _is_recipe_type(obj_type) -> bool:
    types = [obj_type] if isinstance(obj_type, str) else obj_type
    if not isinstance(types, list):
        return False
    return "Recipe" in types


def _structured_image(value) -> Optional[str]:
    """Image URL from a schema.org image field: string, list, or ImageObject."""
    if isinstance(value, list):
        if not value:
            return None
        value = value[0]
    if isinstance(value, str):
        return value.strip() or None
    if isinstance(value, dict):
        url = value.get("url")
        if isinstance(url, str):
            return url.strip() or None
    return None


def _ingredients(raw) -> List[ExtractedIngredient]:
    if isinstance(raw, str):
        raw = [raw]
    if not isinstance(raw, list):
        logger.debug("recipeIngredient is not a list or string: %s", type(raw).__name__)
        return []
    parsed: List[ExtractedIngredient] = []
    for entry in raw:
        if isinstance(entry, dict):
            entry = entry.get("text") or entry.get("name")
        if not isinstance(entry, str):
            continue
        ingredient = parse_ingredient(entry)
        if ingredient is not None:
            parsed.append(ingredient)
    return parsed


def _candidates(data) -> list:
    candidates = []
    if isinstance(data, dict) and "@graph" in data:
        graph = data.get("@graph") or []
        if isinstance(graph, list):
            candidates.extend(graph)
    if isinstance(data, list):
        candidates.extend(data)
    elif isinstance(data, dict):
        candidates.append(data)
    return candidates


def extract_recipe_from_json_ld(soup: BeautifulSoup, url: str) -> Optional[ExtractedRecipe]:
    """Extract the first named Recipe object from the page's JSON-LD blocks."""
    scripts = soup.find_all("script", attrs={"type": "application/ld+json"})
    logger.info("Found %d JSON-LD script blocks on %s", len(scripts), url)

    for idx, script in enumerate(scripts):
        raw_json = script.string or script.get_text()
        if not raw_json or not raw_json.strip():
            logger.debug("JSON-LD block %d is empty", idx)
            continue
        try:
            data = json.loads(raw_json)
        except json.JSONDecodeError as exc:
            logger.warning(
                "JSON-LD block %d failed to parse: %s (first 200 chars: %s)",
                idx,
                exc,
                raw_json[:200],
            )
            continue

        for obj in _candidates(data):
            if not isinstance(obj, dict) or not _is_recipe_type(obj.get("@type")):
                continue

            name = clean_text(obj.get("name") if isinstance(obj.get("name"), str) else "")
            if not name:
                logger.warning("JSON-LD block %d has a Recipe without a name, skipping", idx)
                continue

            ingredients = _ingredients(obj.get("recipeIngredient") or [])
            steps = extract_instruction_text(obj.get("recipeInstructions") or [])

            image_url = _structured_image(obj.get("image"))
            if not image_url:
                image_url = extract_recipe_image(soup, name)

            description = obj.get("description")
            description = clean_text(description) if isinstance(description, str) else ""
            logger.info(
                "JSON-LD recipe found: name=%s, ingredients=%d, steps=%d",
                name[:50],
                len(ingredients),
                len(steps),
            )
            return ExtractedRecipe(
                name=name,
                description=description or None,
                prep_time=parse_time(obj.get("prepTime")),
                cook_time=parse_time(obj.get("cookTime")),
                total_time=parse_time(obj.get("totalTime")),
                servings=parse_servings(obj.get("recipeYield")),
                image_url=image_url,
                ingredients=ingredients,
                instructions=[ExtractedInstruction(step=step) for step in steps],
            )
    return None
