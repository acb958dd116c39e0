import math
import re
from decimal import Decimal, InvalidOperation
from typing import Optional

from recipe_planner.app.services.url_parsing.constants import DISPLAY_FRACTIONS
from recipe_planner.app.services.url_parsing.ingredient_parser import extract_unit
from recipe_planner.app.services.url_parsing.models import AmountRange, ParsedAmount
from recipe_planner.app.services.url_parsing.parsing_utils import normalize_fraction_display

RANGE_RE = re.compile(r"^([\d.][\d\s/.]*?)\s*[-–]\s*([\d.][\d\s/.]*)(.*)$")
AMOUNT_RE = re.compile(r"^([\d.][\d\s/.]*)(.*)$")


def parse_fraction(raw: Optional[str]) -> Optional[float]:
    """Parse "2", "0.5", "1/2" or "1 1/2" into a float; None if not a number."""
    if raw is None:
        return None
    value = raw.strip()
    if not value:
        return None

    try:
        if "/" not in value and " " not in value:
            result = Decimal(value)
        elif " " in value:
            whole_part, frac_part = value.split(None, 1)
            num_str, denom_str = frac_part.split("/", 1)
            denom = Decimal(denom_str)
            if denom == 0:
                return None
            result = Decimal(whole_part) + Decimal(num_str) / denom
        else:
            num_str, denom_str = value.split("/", 1)
            denom = Decimal(denom_str)
            if denom == 0:
                return None
            result = Decimal(num_str) / denom
    except (InvalidOperation, ValueError):
        return None

    number = float(result)
    return number if math.isfinite(number) else None


def parse_range(raw: Optional[str]) -> Optional[AmountRange]:
    """Parse "1-2" or "1/2–3/4" into its endpoints; a single quantity has min == max."""
    text = normalize_fraction_display(raw)
    if not text:
        return None
    match = RANGE_RE.match(text)
    if match:
        low = parse_fraction(match.group(1))
        high = parse_fraction(match.group(2))
        if low is not None and high is not None:
            return AmountRange(min=low, max=high)
    match = AMOUNT_RE.match(text)
    if match:
        value = parse_fraction(match.group(1))
        if value is not None:
            return AmountRange(min=value, max=value)
    return None


def _unit_from_remainder(remainder: str) -> Optional[str]:
    for token in remainder.split():
        token = token.strip(".,;:()-–/")
        if not token:
            continue
        if not re.search(r"[A-Za-z]", token):
            return None
        return extract_unit(token) or token
    return None


def parse_amount(text: Optional[str]) -> ParsedAmount:
    """Parse a quantity such as "2 cups", "1 1/2 tsp" or "1-2 cloves".

    A range yields the mean of its endpoints. Missing or unparseable numbers
    default to 1; the unit is the token following the number.
    """
    if not text or not isinstance(text, str):
        return ParsedAmount(value=1, unit=None, original=text or "")
    trimmed = normalize_fraction_display(text)
    if not trimmed:
        return ParsedAmount(value=1, unit=None, original=text)

    match = RANGE_RE.match(trimmed)
    if match:
        amount_range = parse_range(trimmed)
        if amount_range is not None:
            return ParsedAmount(
                value=amount_range.min / 2 + amount_range.max / 2,
                unit=_unit_from_remainder(match.group(3)),
                original=text,
            )

    match = AMOUNT_RE.match(trimmed)
    if match:
        value = parse_fraction(match.group(1))
        return ParsedAmount(
            value=value if value is not None else 1,
            unit=_unit_from_remainder(match.group(2)),
            original=text,
        )

    return ParsedAmount(value=1, unit=extract_unit(trimmed), original=text)


def format_amount(value: Optional[float], unit: Optional[str] = None) -> str:
    """Render a numeric amount for display: 2 -> "2", 1.5 -> "1 1/2", 0.2 -> "0.2"."""
    # A zero amount renders as the bare unit when one is given
    if not value or not math.isfinite(value):
        return unit or "0"

    fractional, whole = math.modf(value)
    if fractional == 0:
        formatted = str(int(whole))
    else:
        fraction = DISPLAY_FRACTIONS.get(round(fractional, 3))
        if fraction:
            formatted = f"{int(whole)} {fraction}" if whole > 0 else fraction
        else:
            formatted = f"{value:.2f}".rstrip("0").rstrip(".")

    return f"{formatted} {unit}" if unit else formatted


def combine_amounts(first: ParsedAmount, second: ParsedAmount) -> ParsedAmount:
    """Add two amounts, keeping the first available unit. No unit conversion."""
    value = first.value + second.value
    unit = first.unit or second.unit
    return ParsedAmount(value=value, unit=unit, original=format_amount(value, unit))
