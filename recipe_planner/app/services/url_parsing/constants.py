"""Static lookup tables used by the recipe extraction engine."""

# Cooking units recognized in ingredient text. Longer forms come first so the
# alternation in the unit regex prefers "tablespoons" over "tablespoon".
COOKING_UNITS = (
    "tablespoons",
    "tablespoon",
    "teaspoons",
    "teaspoon",
    "ounces",
    "ounce",
    "cloves",
    "clove",
    "cups",
    "cup",
    "tbsp",
    "tsp",
    "oz",
    "lb",
    "kg",
    "ml",
    "g",
    "l",
)

# Phrases stripped from ingredient names after the quantity is removed.
QUALIFIER_PHRASES = (
    "plus more",
    "to taste",
    "as needed",
    "for serving",
    "for garnish",
    "or more",
    "optional",
    "divided",
    "fresh",
    "freshly",
    "dried",
    "chopped",
    "finely",
    "roughly",
    "minced",
    "diced",
    "sliced",
    "grated",
    "crushed",
    "extra-large",
    "large",
    "medium",
    "small",
)

FRACTION_MAP = {
    "¼": "1/4",
    "½": "1/2",
    "¾": "3/4",
    "⅐": "1/7",
    "⅑": "1/9",
    "⅒": "1/10",
    "⅓": "1/3",
    "⅔": "2/3",
    "⅕": "1/5",
    "⅖": "2/5",
    "⅗": "3/5",
    "⅘": "4/5",
    "⅙": "1/6",
    "⅚": "5/6",
    "⅛": "1/8",
    "⅜": "3/8",
    "⅝": "5/8",
    "⅞": "7/8",
}

FRACTION_CHARS = "".join(FRACTION_MAP.keys())

# Rounded fractional parts rendered as common fractions by format_amount.
DISPLAY_FRACTIONS = {
    0.25: "1/4",
    0.333: "1/3",
    0.5: "1/2",
    0.667: "2/3",
    0.75: "3/4",
}

IMAGE_EXTENSIONS = (".jpg", ".jpeg", ".png", ".gif", ".webp", ".avif", ".svg")

# Substrings that mark a URL as probably pointing at an image even without an
# extension (image paths and known image hosts/CDNs).
IMAGE_URL_MARKERS = (
    "/images/",
    "/photos/",
    "/recipe",
    "nyt.com",
    "cloudinary",
    "amazonaws.com",
)

# Attributes holding an image URL, in lookup order. "srcset" is handled
# separately since only its first candidate is used.
IMAGE_SOURCE_ATTRIBUTES = ("src", "data-src", "data-lazy-src", "data-original")

RECIPE_IMAGE_SELECTORS = (
    # Site specific containers
    ".recipe-photo img",
    ".recipe-image img",
    ".nyt-recipe-image img",
    "article img:first-child",
    ".recipe-header img",
    ".recipe-top-image img",
    # Common recipe/blog themes
    ".featured-image img",
    ".recipe-card img",
    ".entry-content img:first-child",
    ".post-content img:first-child",
    ".wp-post-image",
    '[class*="recipe"] img:first-child',
    '[class*="hero"] img',
    '[class*="banner"] img',
    ".content img:first-child",
    # Responsive and lazy-loaded markup
    "picture img",
    "figure img",
    ".img-responsive",
    '[role="img"]',
)

FOOD_KEYWORDS = ("recipe", "food", "dish", "cooking", "meal", "kitchen")

TITLE_SELECTORS = (".recipe-title", ".entry-title", ".post-title")

INGREDIENT_SELECTORS = (
    ".recipe-ingredients li",
    ".ingredients li",
    '[class*="ingredient"] li',
    ".recipe-ingredient",
    ".ingredient",
)

INSTRUCTION_SELECTORS = (
    ".recipe-instructions li",
    ".instructions li",
    ".recipe-instruction",
    ".instruction",
    ".directions li",
    ".method li",
)
