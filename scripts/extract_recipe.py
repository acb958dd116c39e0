#!/usr/bin/env python
"""
Extract recipes from one or more URLs, or from a saved HTML file, and print
the results as JSON.

Run manually:
    python scripts/extract_recipe.py https://example.com/some-recipe
    python scripts/extract_recipe.py --file page.html --url https://example.com/some-recipe
"""
import argparse
import asyncio
import json
import logging
from pathlib import Path

from recipe_planner.app.services.url_parsing.strategies import extract_recipe_from_html
from recipe_planner.app.services.url_recipe_parser import parse_recipe_from_url

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("extract_recipe")


def _print_result(url: str, result) -> None:
    if result.success:
        output = {"url": url, "strategy": result.parser_strategy, "recipe": result.recipe.to_response()}
    else:
        output = {"url": url, "error_code": result.error_code, "error": result.error_message}
    print(json.dumps(output, indent=2, ensure_ascii=False))


async def run(urls: list[str]) -> int:
    failures = 0
    for url in urls:
        result = await parse_recipe_from_url(url)
        if not result.success:
            failures += 1
            logger.warning("No recipe for %s: %s", url, result.error_code)
        _print_result(url, result)
    return failures


def main() -> int:
    parser = argparse.ArgumentParser(description="Extract recipes from web pages.")
    parser.add_argument("urls", nargs="*", help="Recipe page URLs to fetch")
    parser.add_argument("--file", type=Path, help="Parse a saved HTML file instead of fetching")
    parser.add_argument("--url", default="", help="Page URL for --file, used only for logging")
    args = parser.parse_args()

    if args.file:
        result = extract_recipe_from_html(args.file.read_text(encoding="utf-8"), args.url or str(args.file))
        _print_result(args.url or str(args.file), result)
        return 0 if result.success else 1
    if not args.urls:
        parser.error("provide at least one URL or --file")
    return 1 if asyncio.run(run(args.urls)) else 0


if __name__ == "__main__":
    raise SystemExit(main())
