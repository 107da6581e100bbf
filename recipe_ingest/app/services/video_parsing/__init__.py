"""Video recipe parsing package.

Short-form cooking videos carry no structured recipe data; this package pulls
platform metadata and caption text and runs it through a heuristic parser.
"""

from recipe_ingest.app.services.video_parsing.models import (
    ParsedTextRecipe,
    ScrapedVideoRecipe,
    TikTokVideoInfo,
    VideoSourceType,
    YouTubeVideoInfo,
)
from recipe_ingest.app.services.video_parsing.text_parser import parse_recipe_from_text
from recipe_ingest.app.services.video_parsing.tiktok import (
    extract_tiktok_recipe,
    get_tiktok_id,
    is_tiktok_url,
)
from recipe_ingest.app.services.video_parsing.youtube import (
    extract_youtube_recipe,
    get_youtube_id,
    is_youtube_url,
)

__all__ = [
    # Models
    "ParsedTextRecipe",
    "ScrapedVideoRecipe",
    "TikTokVideoInfo",
    "VideoSourceType",
    "YouTubeVideoInfo",
    # Free-text parsing
    "parse_recipe_from_text",
    # Platforms
    "extract_tiktok_recipe",
    "extract_youtube_recipe",
    "get_tiktok_id",
    "get_youtube_id",
    "is_tiktok_url",
    "is_youtube_url",
]
