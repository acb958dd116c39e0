"""HTML fetching and URL validation utilities."""

import ipaddress
import logging
from typing import Optional
from urllib.parse import urlparse

import httpx

from recipe_planner.app.core.config import get_settings

logger = logging.getLogger(__name__)


class UnsupportedContentTypeError(ValueError):
    """The URL answered with something other than an HTML page."""


def is_private_host(hostname: str) -> bool:
    """Check if a bare hostname (no port or brackets) is private, local or reserved."""
    try:
        ip = ipaddress.ip_address(hostname)
    except ValueError:
        return hostname.lower().rstrip(".") in {"", "localhost"}
    if ip.version == 6 and ip.ipv4_mapped is not None:
        ip = ip.ipv4_mapped
    return ip.is_private or ip.is_loopback or ip.is_link_local or ip.is_unspecified or ip.is_reserved


def validate_url(url: str) -> None:
    """Raise ValueError unless url is a public http(s) URL."""
    parsed_url = urlparse(url)
    if parsed_url.scheme not in {"http", "https"} or not parsed_url.netloc:
        raise ValueError("Invalid URL")
    if is_private_host(parsed_url.hostname or ""):
        raise ValueError("URL points to a private or disallowed host")


async def fetch_html(url: str) -> str:
    """Fetch a recipe page and return its HTML.

    Raises ValueError for unusable URLs or non-HTML responses and
    httpx.HTTPError for network or HTTP status failures.
    """
    validate_url(url)

    settings = get_settings()
    headers = {
        "User-Agent": settings.scraper_user_agent,
        "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
        "Accept-Language": "en-US,en;q=0.9",
        "Connection": "keep-alive",
    }
    if settings.scraper_cookies:
        headers["Cookie"] = settings.scraper_cookies
    timeout = httpx.Timeout(settings.scraper_timeout_seconds, connect=5.0)

    async def _try_fetch(extra_headers: Optional[dict] = None) -> httpx.Response:
        merged_headers = headers | (extra_headers or {})
        async with httpx.AsyncClient(
            timeout=timeout, follow_redirects=True, headers=merged_headers
        ) as client:
            return await client.get(url)

    response = await _try_fetch()
    if response.status_code in {401, 403}:
        # Some sites reject the browser Accept header from unknown clients
        logger.info("Fetch of %s returned %d; retrying with generic Accept", url, response.status_code)
        response = await _try_fetch({"Accept": "*/*"})
    response.raise_for_status()

    content_type = response.headers.get("content-type", "")
    if content_type and "text/html" not in content_type and "application/xhtml" not in content_type:
        raise UnsupportedContentTypeError(f"Unsupported content type: {content_type}")
    logger.info("Fetched %s (%d bytes)", url, len(response.content))
    return response.text
