import pytest
from bs4 import BeautifulSoup

from recipe_planner.app.services.url_parsing.image_resolver import (
    ImageFallbackRules,
    extract_recipe_image,
    is_valid_image_url,
)


def _soup(body: str, head: str = "") -> BeautifulSoup:
    return BeautifulSoup(f"<html><head>{head}</head><body>{body}</body></html>", "lxml")


@pytest.mark.parametrize(
    "url",
    [
        "https://example.com/a.JPG?w=100",
        "https://example.com/a.jpg#top",
        "https://example.com/pic.avif",
        "https://example.com/images/abc",
        "https://example.com/photos/123",
        "https://res.cloudinary.com/demo/upload/abc",
        "https://bucket.s3.amazonaws.com/abc",
    ],
)
def test_is_valid_image_url_accepts(url):
    assert is_valid_image_url(url) is True


@pytest.mark.parametrize("url", ["https://example.com/page", "", None, "data:image/gif;base64,R0lG"])
def test_is_valid_image_url_rejects(url):
    assert is_valid_image_url(url) is False


def test_og_image_wins_over_img_candidates():
    soup = _soup(
        '<img src="https://cdn.example.com/images/dish.jpg" alt="Pasta bake">',
        head='<meta property="og:image" content="https://cdn.example.com/og.jpg">',
    )
    assert extract_recipe_image(soup, "Pasta bake") == "https://cdn.example.com/og.jpg"


def test_invalid_og_image_falls_back_to_twitter_card():
    soup = _soup(
        "",
        head=(
            '<meta property="og:image" content="https://example.com/share">'
            '<meta name="twitter:image" content="https://cdn.example.com/card.png">'
        ),
    )
    assert extract_recipe_image(soup, "Soup") == "https://cdn.example.com/card.png"


def test_recipe_container_uses_lazy_load_attribute():
    soup = _soup(
        '<div class="recipe-photo"><img src="data:image/gif;base64,R0lG" '
        'data-lazy-src="https://cdn.example.com/lazy.webp"></div>'
    )
    # src is checked first, even when it is only a placeholder
    assert extract_recipe_image(soup, "Soup") is None
    soup = _soup('<div class="recipe-photo"><img data-lazy-src="https://cdn.example.com/lazy.webp"></div>')
    assert extract_recipe_image(soup, "Soup") == "https://cdn.example.com/lazy.webp"


def test_recipe_container_uses_first_srcset_candidate():
    soup = _soup(
        '<picture><img srcset="https://cdn.example.com/small.jpg 1x, '
        'https://cdn.example.com/large.jpg 2x"></picture>'
    )
    assert extract_recipe_image(soup, "Soup") == "https://cdn.example.com/small.jpg"


def test_alt_text_prefers_recipe_name_over_keywords():
    soup = _soup(
        '<div><img src="https://cdn.example.com/a.jpg" alt="Our favourite meal"></div>'
        '<div><img src="https://cdn.example.com/b.jpg" alt="Bowl of creamy tomato soup"></div>'
    )
    assert extract_recipe_image(soup, "Creamy Tomato Soup") == "https://cdn.example.com/b.jpg"


def test_alt_text_food_keyword():
    soup = _soup(
        '<div><img src="https://cdn.example.com/a.jpg" alt="Team photo"></div>'
        '<div><img src="https://cdn.example.com/b.jpg" alt="Finished dish"></div>'
    )
    assert extract_recipe_image(soup, "Soup") == "https://cdn.example.com/b.jpg"


def test_first_content_image_skips_small_and_blocked_images():
    soup = _soup(
        '<div><img src="https://cdn.example.com/logo.png"></div>'
        '<div><img src="https://cdn.example.com/thumb.jpg" width="100" height="100"></div>'
        '<div><img src="https://cdn.example.com/short.jpg" height="120px"></div>'
        '<div><img src="https://cdn.example.com/hero.jpg" width="600"></div>'
    )
    assert extract_recipe_image(soup, "Soup") == "https://cdn.example.com/hero.jpg"


def test_first_content_image_rules_are_configurable():
    soup = _soup(
        '<div><img src="https://cdn.example.com/logo.png"></div>'
        '<div><img src="https://cdn.example.com/hero.jpg" width="600"></div>'
    )
    rules = ImageFallbackRules(min_width=50, min_height=50, blocked_markers=("sprite",))
    assert extract_recipe_image(soup, "Soup", rules=rules) == "https://cdn.example.com/logo.png"


def test_rules_from_settings(monkeypatch):
    monkeypatch.setenv("RECIPE_IMAGE_MIN_WIDTH", "320")
    monkeypatch.setenv("RECIPE_IMAGE_BLOCKED_MARKERS", '["sprite"]')
    rules = ImageFallbackRules.from_settings()
    assert rules.min_width == 320
    assert rules.min_height == 150
    assert rules.blocked_markers == ("sprite",)


def test_no_image_found():
    soup = _soup('<div><img src="/static/pixel"></div>')
    assert extract_recipe_image(soup, "Soup") is None
