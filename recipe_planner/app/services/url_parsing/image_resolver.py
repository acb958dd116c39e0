"""Recipe image discovery.

Structured data often omits the photo, so the extractors fall back to
``extract_recipe_image``, which walks five strategies in order and returns the
first URL accepted by ``is_valid_image_url``:

1. Open Graph ``og:image`` meta tag
2. Twitter Card ``twitter:image`` meta tag
3. Known recipe-photo containers (``RECIPE_IMAGE_SELECTORS``)
4. ``<img>`` alt text matching the recipe name, then generic food keywords
5. The first reasonably sized ``<img>`` that is not a logo/icon/avatar
"""

import logging
import re
from typing import Iterable, Optional, Tuple

from bs4 import BeautifulSoup, Tag
from pydantic import BaseModel, ConfigDict

from recipe_planner.app.core.config import get_settings
from recipe_planner.app.services.url_parsing.constants import (
    FOOD_KEYWORDS,
    IMAGE_EXTENSIONS,
    IMAGE_SOURCE_ATTRIBUTES,
    IMAGE_URL_MARKERS,
    RECIPE_IMAGE_SELECTORS,
)

logger = logging.getLogger(__name__)


class ImageFallbackRules(BaseModel):
    """Size thresholds and URL blocklist for the last-resort image scan."""

    model_config = ConfigDict(frozen=True)

    min_width: int
    min_height: int
    blocked_markers: Tuple[str, ...]

    @classmethod
    def from_settings(cls) -> "ImageFallbackRules":
        settings = get_settings()
        return cls(
            min_width=settings.recipe_image_min_width,
            min_height=settings.recipe_image_min_height,
            blocked_markers=tuple(settings.recipe_image_blocked_markers),
        )


def is_valid_image_url(url: Optional[str]) -> bool:
    """Check whether a URL plausibly points at a recipe photo.

    Either an image file extension (query and fragment ignored) or a known
    image path/host marker is enough.
    """
    if not url:
        return False
    path = url.split("?")[0].split("#")[0].lower()
    if path.endswith(IMAGE_EXTENSIONS):
        return True
    return any(marker in url for marker in IMAGE_URL_MARKERS)


def _first_srcset_candidate(srcset: Optional[str]) -> Optional[str]:
    if not srcset:
        return None
    first = srcset.split(",")[0].strip()
    return first.split(" ")[0] or None


def image_source(img: Tag, attributes: Iterable[str] = IMAGE_SOURCE_ATTRIBUTES) -> Optional[str]:
    """Return the first URL found in an image's src/lazy-load attributes or srcset."""
    for attr in attributes:
        value = img.get(attr)
        if isinstance(value, str) and value.strip():
            return value.strip()
    return _first_srcset_candidate(img.get("srcset"))


def _meta_content(soup: BeautifulSoup, selector: str) -> Optional[str]:
    tag = soup.select_one(selector)
    if tag is None:
        return None
    content = tag.get("content")
    return content.strip() if isinstance(content, str) and content.strip() else None


def _declared_size(img: Tag, attr: str) -> int:
    """Leading integer of a width/height attribute ("300px" -> 300); 0 when absent."""
    match = re.match(r"\s*(\d+)", img.get(attr) or "")
    return int(match.group(1)) if match else 0


def _from_meta_tags(soup: BeautifulSoup) -> Optional[str]:
    for selector in ('meta[property="og:image"]', 'meta[name="twitter:image"]'):
        url = _meta_content(soup, selector)
        if url and is_valid_image_url(url):
            logger.debug("Image found via %s", selector)
            return url
    return None


def _from_recipe_containers(soup: BeautifulSoup) -> Optional[str]:
    for selector in RECIPE_IMAGE_SELECTORS:
        img = soup.select_one(selector)
        if img is None:
            continue
        url = image_source(img)
        if url and is_valid_image_url(url):
            logger.debug("Image found via selector %s", selector)
            return url
    return None


def _from_alt_text(soup: BeautifulSoup, recipe_name: str) -> Optional[str]:
    name_words = [w for w in (recipe_name or "").lower().split() if len(w) > 3]
    candidates = []
    for img in soup.find_all("img"):
        url = image_source(img)
        if url and is_valid_image_url(url):
            candidates.append(((img.get("alt") or "").lower(), url))

    if name_words:
        for alt, url in candidates:
            if any(word in alt for word in name_words):
                return url
    for alt, url in candidates:
        if any(keyword in alt for keyword in FOOD_KEYWORDS):
            return url
    return None


def _from_first_content_image(soup: BeautifulSoup, rules: ImageFallbackRules) -> Optional[str]:
    for img in soup.find_all("img"):
        url = image_source(img, attributes=("src", "data-src"))
        if not url or not is_valid_image_url(url):
            continue
        width = _declared_size(img, "width")
        height = _declared_size(img, "height")
        if (0 < width < rules.min_width) or (0 < height < rules.min_height):
            continue
        if any(marker in url for marker in rules.blocked_markers):
            continue
        return url
    return None


def extract_recipe_image(
    soup: BeautifulSoup,
    recipe_name: str,
    rules: Optional[ImageFallbackRules] = None,
) -> Optional[str]:
    """Find the most plausible recipe photo on the page; None if nothing qualifies."""
    url = _from_meta_tags(soup) or _from_recipe_containers(soup) or _from_alt_text(soup, recipe_name)
    if url:
        return url
    url = _from_first_content_image(soup, rules or ImageFallbackRules.from_settings())
    if url:
        logger.debug("Image found via first content image fallback")
    else:
        logger.info("No recipe image found for '%s'", (recipe_name or "")[:50])
    return url
