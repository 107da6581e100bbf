"""TikTok recipe extraction from a video page's Open Graph tags.

TikTok offers no public API for captions, so everything comes from the meta
tags of the public video page. Duration is not published there and is
reported as a fixed estimate.
"""

import logging
import re
from typing import Optional

from bs4 import BeautifulSoup

from recipe_ingest.app.core.config import get_settings
from recipe_ingest.app.services.url_parsing.html_fetcher import fetch_html
from recipe_ingest.app.services.video_parsing.models import (
    ScrapedVideoRecipe,
    TikTokVideoInfo,
    VideoSourceType,
)
from recipe_ingest.app.services.video_parsing.text_parser import parse_recipe_from_text

logger = logging.getLogger(__name__)

TIKTOK_ID_PATTERNS = (re.compile(r"/video/(\d+)"), re.compile(r"^(\d+)$"))
TIKTOK_HOST_RE = re.compile(r"tiktok\.com|vm\.tiktok|vt\.tiktok")
TIKTOK_HANDLE_RE = re.compile(r"@([a-zA-Z0-9._-]+)")

DEFAULT_TITLE = "TikTok Recipe"
DEFAULT_AUTHOR = "TikTok Creator"
UNKNOWN_VIDEO_ID = "unknown"


def get_tiktok_id(url: str) -> Optional[str]:
    """Return the numeric id from a /video/<id> URL or a bare id."""
    for pattern in TIKTOK_ID_PATTERNS:
        match = pattern.search(url.strip())
        if match:
            return match.group(1)
    return None


def is_tiktok_url(url: str) -> bool:
    return bool(TIKTOK_HOST_RE.search(url))


def get_tiktok_handle(url: str) -> Optional[str]:
    match = TIKTOK_HANDLE_RE.search(url)
    return match.group(1) if match else None


def _meta_content(soup: BeautifulSoup, prop: str) -> Optional[str]:
    tag = soup.find("meta", attrs={"property": prop}) or soup.find("meta", attrs={"name": prop})
    if tag is None:
        return None
    content = tag.get("content")
    return content.strip() if isinstance(content, str) and content.strip() else None


def parse_video_info(page: str, url: str) -> TikTokVideoInfo:
    """Build video metadata from the page's og:* tags, with placeholders for gaps."""
    soup = BeautifulSoup(page, "lxml")
    title = _meta_content(soup, "og:title")
    description = _meta_content(soup, "og:description")
    cover_url = _meta_content(soup, "og:image")
    # Short links (vm.tiktok.com/...) only reveal the id and handle after redirect.
    canonical_url = _meta_content(soup, "og:url") or ""

    return TikTokVideoInfo(
        video_id=get_tiktok_id(url) or get_tiktok_id(canonical_url) or UNKNOWN_VIDEO_ID,
        title=title or DEFAULT_TITLE,
        description=description or "",
        author_name=get_tiktok_handle(url) or get_tiktok_handle(canonical_url) or DEFAULT_AUTHOR,
        duration=get_settings().tiktok_default_duration_seconds,
        cover_url=cover_url,
    )


async def fetch_tiktok_video_info(url: str) -> TikTokVideoInfo:
    page = await fetch_html(url)
    info = parse_video_info(page, url)
    logger.info(
        "TikTok video %s: title='%s', author=%s, description=%d chars",
        info.video_id,
        info.title[:50],
        info.author_name,
        len(info.description),
    )
    return info


async def extract_tiktok_recipe(url: str) -> Optional[ScrapedVideoRecipe]:
    """Extract a recipe from a TikTok caption, or None if it is not a recipe video."""
    info = await fetch_tiktok_video_info(url)
    recipe = parse_recipe_from_text(info.description)
    if recipe is None:
        logger.info("TikTok video %s does not look like a recipe", info.video_id)
        return None

    return ScrapedVideoRecipe(
        title=info.title,
        description=recipe.summary,
        ingredients=recipe.ingredients,
        instructions=recipe.instructions,
        cook_time=recipe.cook_time,
        servings=recipe.servings,
        source_type=VideoSourceType.TIKTOK,
        video_id=info.video_id,
        source_url=url,
        author_name=info.author_name,
        duration=info.duration,
        thumbnail_url=info.cover_url,
    )
