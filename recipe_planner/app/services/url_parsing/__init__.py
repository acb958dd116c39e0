"""URL recipe parsing package.

This package extracts recipes from web pages using, in order, schema.org
JSON-LD, schema.org microdata and heuristic HTML parsing, with a separate
fallback chain for discovering the recipe image.
"""

from recipe_planner.app.services.url_parsing.html_fetcher import (
    UnsupportedContentTypeError,
    fetch_html,
    is_private_host,
    validate_url,
)
from recipe_planner.app.services.url_parsing.image_resolver import (
    ImageFallbackRules,
    extract_recipe_image,
    is_valid_image_url,
)
from recipe_planner.app.services.url_parsing.ingredient_parser import (
    clean_ingredient_name,
    extract_amount,
    extract_unit,
    has_amount,
    parse_ingredient,
)
from recipe_planner.app.services.url_parsing.models import (
    AmountRange,
    ExtractedIngredient,
    ExtractedInstruction,
    ExtractedRecipe,
    ParsedAmount,
    ParseResult,
)
from recipe_planner.app.services.url_parsing.parsing_utils import (
    clean_text,
    extract_instruction_text,
    normalize_fraction_display,
    parse_servings,
    parse_time,
)
from recipe_planner.app.services.url_parsing.quantity_parser import (
    combine_amounts,
    format_amount,
    parse_amount,
    parse_fraction,
    parse_range,
)
from recipe_planner.app.services.url_parsing.strategies import (
    EXTRACTION_STRATEGIES,
    ExtractionStrategy,
    extract_recipe,
    extract_recipe_from_html,
)

__all__ = [
    # Models
    "AmountRange",
    "ExtractedIngredient",
    "ExtractedInstruction",
    "ExtractedRecipe",
    "ParsedAmount",
    "ParseResult",
    # HTML fetching
    "UnsupportedContentTypeError",
    "fetch_html",
    "is_private_host",
    "validate_url",
    # Amount/unit normalization
    "clean_ingredient_name",
    "combine_amounts",
    "extract_amount",
    "extract_unit",
    "format_amount",
    "has_amount",
    "parse_amount",
    "parse_fraction",
    "parse_ingredient",
    "parse_range",
    # Parsing utilities
    "clean_text",
    "extract_instruction_text",
    "normalize_fraction_display",
    "parse_servings",
    "parse_time",
    # Images
    "ImageFallbackRules",
    "extract_recipe_image",
    "is_valid_image_url",
    # Orchestration
    "EXTRACTION_STRATEGIES",
    "ExtractionStrategy",
    "extract_recipe",
    "extract_recipe_from_html",
]
