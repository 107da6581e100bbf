"""Routes video URLs to the matching platform extractor."""

import logging
from dataclasses import dataclass
from typing import Awaitable, Callable, List, Optional, Sequence, Tuple
from urllib.parse import urlparse

from recipe_ingest.app.services.errors import NotARecipeError, UnsupportedSourceError
from recipe_ingest.app.services.url_parsing.html_fetcher import validate_url
from recipe_ingest.app.services.video_parsing import tiktok, youtube
from recipe_ingest.app.services.video_parsing.models import ScrapedVideoRecipe

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class VideoPlatform:
    name: str
    hosts: Tuple[str, ...]
    matches: Callable[[str], bool]
    extract: Callable[[str], Awaitable[Optional[ScrapedVideoRecipe]]]

    def owns_host(self, url: str) -> bool:
        host = (urlparse(url).hostname or "").lower()
        return any(host == h or host.endswith("." + h) for h in self.hosts)


# Priority order for dispatch. Extractors are looked up through their module
# at call time so they can be replaced in tests.
VIDEO_PLATFORMS: Tuple[VideoPlatform, ...] = (
    VideoPlatform(
        name="YouTube",
        hosts=("youtube.com", "youtu.be"),
        matches=lambda url: youtube.is_youtube_url(url),
        extract=lambda url: youtube.extract_youtube_recipe(url),
    ),
    VideoPlatform(
        name="TikTok",
        hosts=("tiktok.com",),
        matches=lambda url: tiktok.is_tiktok_url(url),
        extract=lambda url: tiktok.extract_tiktok_recipe(url),
    ),
)


def get_supported_video_platforms() -> List[str]:
    return ["YouTube", "YouTube Shorts", "TikTok"]


def find_video_platform(
    url: str, platforms: Sequence[VideoPlatform] = VIDEO_PLATFORMS
) -> Optional[VideoPlatform]:
    """Pick the platform for a URL: host match first, then priority order."""
    for platform in platforms:
        if platform.owns_host(url):
            return platform
    for platform in platforms:
        if platform.matches(url):
            return platform
    return None


async def scrape_video_recipe_from_url(url: str) -> ScrapedVideoRecipe:
    """Extract a recipe from a YouTube or TikTok video.

    Raises UnsupportedSourceError for other platforms and NotARecipeError when
    the video's text holds nothing recipe-shaped. Fetch failures propagate as
    FetchError.
    """
    url = validate_url(url)

    platform = find_video_platform(url)
    if platform is None:
        supported = get_supported_video_platforms()
        raise UnsupportedSourceError(
            "Unsupported video platform. Supported platforms: " + ", ".join(supported),
            supported=supported,
        )

    logger.info("Extracting %s video recipe from %s", platform.name, url)
    recipe = await platform.extract(url)
    if recipe is None:
        raise NotARecipeError(url, platform.name)
    return recipe
