"""General parsing utilities for recipe extraction."""

import math
import re
from typing import List, Optional

from recipe_planner.app.services.url_parsing.constants import FRACTION_CHARS, FRACTION_MAP

ISO_DURATION_RE = re.compile(r"PT(?:(\d+)H)?(?:(\d+)M)?")
PHRASE_DURATION_RE = re.compile(r"(\d+)\s*(min|minute|hour|hr)", re.I)


def clean_text(text: Optional[str]) -> str:
    """Normalize whitespace in text."""
    return re.sub(r"\s+", " ", text or "").strip()


def normalize_fraction_display(text: Optional[str]) -> str:
    """Rewrite unicode vulgar fractions as ASCII, e.g. "1½ cups" -> "1 1/2 cups"."""
    if not text:
        return ""
    # Ensure a space before a unicode fraction attached to a digit
    s = re.sub(rf"(\d)([{FRACTION_CHARS}])", r"\1 \2", text)
    for char, ascii_fraction in FRACTION_MAP.items():
        s = s.replace(char, ascii_fraction)
    return clean_text(s)


def parse_time(value) -> Optional[int]:
    """Convert an ISO-8601 duration or a phrase like "45 min" into minutes.

    Returns None when the value is not understood; None means unknown, not zero.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, (int, float)):
        return int(value)
    if not isinstance(value, str) or not value:
        return None

    match = ISO_DURATION_RE.search(value)
    if match:
        hours = int(match.group(1) or 0)
        minutes = int(match.group(2) or 0)
        return hours * 60 + minutes

    match = PHRASE_DURATION_RE.search(value)
    if match:
        amount = int(match.group(1))
        unit = match.group(2).lower()
        return amount * 60 if unit.startswith("h") else amount
    return None


def parse_servings(value) -> Optional[int]:
    """Parse servings from a recipeYield value (number, string, or list)."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, (int, float)):
        return int(value) or None
    if isinstance(value, list):
        for item in value:
            servings = parse_servings(item)
            if servings:
                return servings
        return None
    if isinstance(value, str):
        match = re.search(r"\d+", value)
        if match:
            return int(match.group()) or None
    return None


def extract_instruction_text(instructions) -> List[str]:
    """Extract step text from the various recipeInstructions shapes.

    Accepts a bare string, a list of strings, HowToStep objects (``text`` or
    ``name``) and HowToSection objects, whose ``itemListElement`` is flattened.
    """
    steps: List[str] = []
    if isinstance(instructions, str):
        cleaned = clean_text(instructions)
        if cleaned:
            steps.append(cleaned)
    elif isinstance(instructions, list):
        for entry in instructions:
            steps.extend(extract_instruction_text(entry))
    elif isinstance(instructions, dict):
        if "itemListElement" in instructions:
            steps.extend(extract_instruction_text(instructions.get("itemListElement")))
        else:
            text_val = instructions.get("text") or instructions.get("name")
            if isinstance(text_val, str):
                cleaned = clean_text(text_val)
                if cleaned:
                    steps.append(cleaned)
    return steps
