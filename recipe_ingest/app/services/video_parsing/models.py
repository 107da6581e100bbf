"""Pydantic models for video recipe extraction."""

import enum
from typing import List, Optional

from pydantic import BaseModel, Field


class VideoSourceType(str, enum.Enum):
    YOUTUBE = "YouTube"
    TIKTOK = "TikTok"


class ParsedTextRecipe(BaseModel):
    """Best-effort recipe fields recovered from a caption or transcript."""

    ingredients: List[str] = Field(default_factory=list)
    instructions: List[str] = Field(default_factory=list)
    cook_time: Optional[int] = None
    servings: Optional[int] = None
    summary: str = ""


class CaptionTrack(BaseModel):
    base_url: str
    language_code: Optional[str] = None
    kind: Optional[str] = None


class YouTubeVideoInfo(BaseModel):
    video_id: str
    title: str
    description: str = ""
    duration: int = 0
    channel_title: str = ""
    thumbnail_url: Optional[str] = None
    caption_tracks: List[CaptionTrack] = Field(default_factory=list)


class TikTokVideoInfo(BaseModel):
    video_id: str
    title: str
    description: str = ""
    author_name: str
    duration: int
    cover_url: Optional[str] = None


class ScrapedVideoRecipe(BaseModel):
    """A recipe extracted from a short-form cooking video.

    Ingredients stay raw strings; unlike the website path they are not split
    into quantity, unit and name.
    """

    title: str
    description: str = ""
    ingredients: List[str] = Field(default_factory=list)
    instructions: List[str] = Field(default_factory=list)
    cook_time: Optional[int] = None
    servings: Optional[int] = None
    source_type: VideoSourceType
    video_id: str
    source_url: str
    author_name: str
    duration: int
    thumbnail_url: Optional[str] = None
