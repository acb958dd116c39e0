"""Ingredient line parsing: amount, unit and name extraction."""

import logging
import re
from typing import Optional

from recipe_planner.app.services.url_parsing.constants import COOKING_UNITS, QUALIFIER_PHRASES
from recipe_planner.app.services.url_parsing.models import ExtractedIngredient
from recipe_planner.app.services.url_parsing.parsing_utils import (
    clean_text,
    normalize_fraction_display,
)

logger = logging.getLogger(__name__)

LEADING_AMOUNT_RE = re.compile(r"^\s*(\.?\d[\d\s/.\-–]*)")
# A unit must not be glued to other letters, but may follow digits ("100g").
UNIT_RE = re.compile(
    r"(?<![A-Za-z])(" + "|".join(re.escape(u) for u in COOKING_UNITS) + r")s?\b",
    re.I,
)
QUALIFIER_RE = re.compile(
    r"\b(?:" + "|".join(re.escape(q) for q in QUALIFIER_PHRASES) + r")\b",
    re.I,
)
PAREN_RE = re.compile(r"\([^)]*\)")


def extract_amount(text: Optional[str]) -> Optional[str]:
    """Return the leading quantity of an ingredient line ("1 1/2", "2-3"), if any."""
    if not text:
        return None
    match = LEADING_AMOUNT_RE.match(text)
    if not match:
        return None
    amount = match.group(1).rstrip(" -–/.")
    return amount or None


def has_amount(text: Optional[str]) -> bool:
    return extract_amount(normalize_fraction_display(text)) is not None


def extract_unit(text: Optional[str]) -> Optional[str]:
    """Return the first cooking unit found anywhere in text, lower-cased."""
    if not text:
        return None
    match = UNIT_RE.search(text)
    return match.group(1).lower() if match else None


def clean_ingredient_name(
    text: Optional[str], amount: Optional[str] = None, unit: Optional[str] = None
) -> str:
    """Strip amount, unit and descriptive qualifiers from an ingredient line."""
    if not text:
        return ""
    cleaned = clean_text(text)

    if amount:
        cleaned = re.sub(rf"^\s*{re.escape(amount)}\s*", "", cleaned, count=1)
    if unit:
        cleaned = re.sub(
            rf"(?<![A-Za-z]){re.escape(unit)}s?\.?(?![A-Za-z])",
            " ",
            cleaned,
            count=1,
            flags=re.I,
        )

    cleaned = PAREN_RE.sub(" ", cleaned)
    cleaned = QUALIFIER_RE.sub(" ", cleaned)
    cleaned = re.sub(r"^\s*of\s+", "", cleaned, flags=re.I)

    # Collapse punctuation left behind by the removals
    cleaned = re.sub(r"\s+([,;:])", r"\1", cleaned)
    cleaned = re.sub(r"([,;:])(?:\s*[,;:])+", r"\1", cleaned)
    cleaned = clean_text(cleaned)
    return cleaned.strip(" ,;:-.")


def parse_ingredient(text: Optional[str]) -> Optional[ExtractedIngredient]:
    """Split one ingredient line into name, amount and unit.

    Returns None for blank lines. When cleaning removes everything, the line
    itself is used as the name.
    """
    line = normalize_fraction_display(text)
    if not line:
        return None
    amount = extract_amount(line)
    unit = extract_unit(line)
    name = clean_ingredient_name(line, amount, unit) or line
    logger.debug("Ingredient '%s' -> name='%s', amount=%s, unit=%s", line[:50], name[:30], amount, unit)
    return ExtractedIngredient(name=name, amount=amount, unit=unit)
