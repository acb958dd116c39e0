import logging

import httpx

from recipe_planner.app.services.url_parsing.html_fetcher import (
    UnsupportedContentTypeError,
    fetch_html,
)
from recipe_planner.app.services.url_parsing.models import ParseResult
from recipe_planner.app.services.url_parsing.strategies import extract_recipe_from_html

logger = logging.getLogger(__name__)


async def parse_recipe_from_url(url: str) -> ParseResult:
    """Fetch a page and run the extraction strategies over it."""
    try:
        html = await fetch_html(url)
    except UnsupportedContentTypeError as exc:
        return ParseResult(success=False, error_code="unsupported_content_type", error_message=str(exc))
    except ValueError as exc:
        return ParseResult(success=False, error_code="invalid_url", error_message=str(exc))
    except httpx.HTTPStatusError as exc:
        logger.exception("Failed to fetch URL %s (status=%s)", url, exc.response.status_code)
        return ParseResult(
            success=False,
            error_code="fetch_failed",
            error_message=f"status_{exc.response.status_code}",
            warnings=["blocked_by_site" if exc.response.status_code == 403 else "fetch_http_error"],
        )
    except httpx.HTTPError as exc:
        logger.exception("Failed to fetch URL %s", url)
        return ParseResult(
            success=False,
            error_code="fetch_failed",
            error_message=str(exc),
            warnings=["fetch_http_error"],
        )

    try:
        return extract_recipe_from_html(html, url)
    except Exception as exc:  # noqa: BLE001
        logger.exception("Recipe extraction crashed for %s", url)
        return ParseResult(success=False, error_code="extraction_failed", error_message=str(exc))
