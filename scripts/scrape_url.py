#!/usr/bin/env python
"""
Scrape one recipe URL and print the result as JSON.

Run manually:
    python scripts/scrape_url.py https://www.allrecipes.com/recipe/12345/
    python scripts/scrape_url.py --video https://www.youtube.com/shorts/abcdefghijk
"""
import argparse
import asyncio
import logging
import sys

from recipe_ingest.app.services import (
    RecipeScrapeError,
    scrape_recipe_from_url,
    scrape_video_recipe_from_url,
)

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("scrape_url")


async def run(url: str, video: bool) -> int:
    try:
        if video:
            result = await scrape_video_recipe_from_url(url)
        else:
            result = await scrape_recipe_from_url(url)
    except RecipeScrapeError as exc:
        logger.error("%s: %s", exc.error_code, exc)
        return 1
    print(result.model_dump_json(indent=2))
    return 0


def main() -> None:
    parser = argparse.ArgumentParser(description="Scrape one recipe URL and print the result as JSON.")
    parser.add_argument("url")
    parser.add_argument("--video", action="store_true", help="treat the URL as a YouTube or TikTok video")
    args = parser.parse_args()
    sys.exit(asyncio.run(run(args.url, args.video)))


if __name__ == "__main__":
    main()
