"""Recipe extractors for the different parsing strategies."""

from recipe_planner.app.services.url_parsing.extractors.heuristic import (
    extract_recipe_heuristic,
)
from recipe_planner.app.services.url_parsing.extractors.json_ld import (
    extract_recipe_from_json_ld,
)
from recipe_planner.app.services.url_parsing.extractors.microdata import (
    extract_recipe_from_microdata,
)

__all__ = [
    "extract_recipe_from_json_ld",
    "extract_recipe_from_microdata",
    "extract_recipe_heuristic",
]
