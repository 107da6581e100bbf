"""YouTube recipe extraction from the watch page and its caption track."""

import html
import json
import logging
import re
from typing import List, Optional

from recipe_ingest.app.core.config import get_settings
from recipe_ingest.app.services.errors import FetchError, InvalidInputError, VideoMetadataError
from recipe_ingest.app.services.url_parsing.html_fetcher import fetch_html
from recipe_ingest.app.services.video_parsing.models import (
    CaptionTrack,
    ScrapedVideoRecipe,
    VideoSourceType,
    YouTubeVideoInfo,
)
from recipe_ingest.app.services.video_parsing.text_parser import parse_recipe_from_text

logger = logging.getLogger(__name__)

YOUTUBE_ID_RE = re.compile(
    r"(?:youtube\.com/watch\?(?:[^#]*&)?v=|youtu\.be/|youtube\.com/shorts/)([a-zA-Z0-9_-]{11})"
)
YOUTUBE_HOST_RE = re.compile(r"youtube\.com|youtu\.be")
PLAYER_RESPONSE_MARKER_RE = re.compile(r"ytInitialPlayerResponse\s*=\s*")
CAPTION_TEXT_RE = re.compile(r"<text[^>]*>(.*?)</text>", re.S)
MARKUP_RE = re.compile(r"<[^>]*>")

WATCH_URL = "https://www.youtube.com/watch?v={video_id}"


def get_youtube_id(url: str) -> Optional[str]:
    """Return the 11-character id from a watch, youtu.be or shorts URL."""
    match = YOUTUBE_ID_RE.search(url)
    return match.group(1) if match else None


def is_youtube_url(url: str) -> bool:
    return bool(YOUTUBE_HOST_RE.search(url))


def _load_player_response(page: str) -> Optional[dict]:
    """Decode the ytInitialPlayerResponse object embedded in a watch page."""
    marker = PLAYER_RESPONSE_MARKER_RE.search(page)
    if not marker:
        return None
    try:
        data, _ = json.JSONDecoder().raw_decode(page, marker.end())
    except json.JSONDecodeError as exc:
        logger.warning("ytInitialPlayerResponse is not valid JSON: %s", exc)
        return None
    return data if isinstance(data, dict) else None


def _pick_thumbnail(thumbnails) -> Optional[str]:
    candidates = [t for t in thumbnails or [] if isinstance(t, dict) and t.get("url")]
    if not candidates:
        return None
    return max(candidates, key=lambda t: t.get("width") or 0)["url"]


def _caption_tracks(player_response: dict) -> List[CaptionTrack]:
    renderer = (player_response.get("captions") or {}).get("playerCaptionsTracklistRenderer") or {}
    tracks = []
    for raw in renderer.get("captionTracks") or []:
        if isinstance(raw, dict) and raw.get("baseUrl"):
            tracks.append(
                CaptionTrack(
                    base_url=raw["baseUrl"],
                    language_code=raw.get("languageCode"),
                    kind=raw.get("kind"),
                )
            )
    return tracks


def parse_video_info(page: str, video_id: str) -> Optional[YouTubeVideoInfo]:
    """Read title, description, duration, channel and captions from a watch page."""
    player_response = _load_player_response(page)
    if not player_response:
        return None
    details = player_response.get("videoDetails")
    if not isinstance(details, dict) or not details.get("title"):
        return None

    try:
        duration = int(details.get("lengthSeconds") or 0)
    except (TypeError, ValueError):
        duration = 0

    return YouTubeVideoInfo(
        video_id=details.get("videoId") or video_id,
        title=details["title"],
        description=details.get("shortDescription") or "",
        duration=duration,
        channel_title=details.get("author") or "",
        thumbnail_url=_pick_thumbnail((details.get("thumbnail") or {}).get("thumbnails")),
        caption_tracks=_caption_tracks(player_response),
    )


async def fetch_youtube_video_info(video_id: str) -> YouTubeVideoInfo:
    """Fetch the watch page and decode its metadata.

    Raises FetchError when the page cannot be fetched and VideoMetadataError
    when it carries no readable video details.
    """
    url = WATCH_URL.format(video_id=video_id)
    page = await fetch_html(url)
    info = parse_video_info(page, video_id)
    if info is None:
        raise VideoMetadataError(url, f"Failed to read YouTube video info for {video_id}")
    logger.info(
        "YouTube video %s: title='%s', duration=%ss, caption_tracks=%d",
        info.video_id,
        info.title[:50],
        info.duration,
        len(info.caption_tracks),
    )
    return info


def choose_caption_track(tracks: List[CaptionTrack]) -> Optional[CaptionTrack]:
    """Prefer a track in the configured language, otherwise the first one."""
    if not tracks:
        return None
    language = get_settings().youtube_caption_language.lower()
    for track in tracks:
        if (track.language_code or "").lower().startswith(language):
            return track
    return tracks[0]


def decode_captions(payload: str) -> str:
    """Flatten a timedtext caption document into plain text."""
    parts = []
    for fragment in CAPTION_TEXT_RE.findall(payload):
        # Caption text arrives entity-escaped twice ("&amp;#39;").
        text = html.unescape(html.unescape(MARKUP_RE.sub("", fragment)))
        text = re.sub(r"\s+", " ", text).strip()
        if text:
            parts.append(text)
    return " ".join(parts)


async def fetch_youtube_transcript(info: YouTubeVideoInfo) -> str:
    """Return the video's transcript, or "" when none can be had.

    A missing or broken transcript never fails the extraction; the caller
    falls back to the description.
    """
    track = choose_caption_track(info.caption_tracks)
    if track is None:
        logger.info("No caption tracks for YouTube video %s", info.video_id)
        return ""
    try:
        payload = await fetch_html(track.base_url)
    except FetchError as exc:
        logger.warning("Transcript fetch failed for %s: %s", info.video_id, exc)
        return ""
    transcript = decode_captions(payload)
    if not transcript:
        logger.warning("Caption track for %s had no readable text", info.video_id)
    return transcript


async def extract_youtube_recipe(url: str) -> Optional[ScrapedVideoRecipe]:
    """Extract a recipe from a YouTube video, or None if it is not a recipe video."""
    video_id = get_youtube_id(url)
    if not video_id:
        raise InvalidInputError("Invalid YouTube URL")

    info = await fetch_youtube_video_info(video_id)
    transcript = await fetch_youtube_transcript(info)
    recipe = parse_recipe_from_text(transcript, info.description)
    if recipe is None:
        logger.info("YouTube video %s does not look like a recipe", video_id)
        return None

    return ScrapedVideoRecipe(
        title=info.title,
        description=recipe.summary,
        ingredients=recipe.ingredients,
        instructions=recipe.instructions,
        cook_time=recipe.cook_time,
        servings=recipe.servings,
        source_type=VideoSourceType.YOUTUBE,
        video_id=info.video_id,
        source_url=url,
        author_name=info.channel_title,
        duration=info.duration,
        thumbnail_url=info.thumbnail_url,
    )
