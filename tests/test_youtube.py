import json

import pytest

from recipe_ingest.app.services.errors import FetchError, InvalidInputError, VideoMetadataError
from recipe_ingest.app.services.video_parsing import youtube
from recipe_ingest.app.services.video_parsing.models import CaptionTrack, VideoSourceType
from recipe_ingest.app.services.video_parsing.youtube import (
    choose_caption_track,
    decode_captions,
    extract_youtube_recipe,
    get_youtube_id,
    is_youtube_url,
    parse_video_info,
)

VIDEO_ID = "dQw4w9WgXcQ"
WATCH_URL = f"https://www.youtube.com/watch?v={VIDEO_ID}"
CAPTIONS_URL = f"https://www.youtube.com/api/timedtext?v={VIDEO_ID}&lang=en"


def watch_page(description="Quick weeknight dinner", caption_tracks=None):
    player_response = {
        "videoDetails": {
            "videoId": VIDEO_ID,
            "title": "Easy Pancakes",
            "shortDescription": description,
            "lengthSeconds": "95",
            "author": "Chef Sam",
            "thumbnail": {
                "thumbnails": [
                    {"url": "https://i.ytimg.com/vi/small.jpg", "width": 120},
                    {"url": "https://i.ytimg.com/vi/large.jpg", "width": 1280},
                    {"url": "https://i.ytimg.com/vi/medium.jpg", "width": 480},
                ]
            },
        },
        "captions": {
            "playerCaptionsTracklistRenderer": {
                "captionTracks": caption_tracks
                if caption_tracks is not None
                else [{"baseUrl": CAPTIONS_URL, "languageCode": "en", "kind": "asr"}]
            }
        },
    }
    return (
        "<html><head><script>var ytInitialPlayerResponse = "
        + json.dumps(player_response)
        + ";var meta = {};</script></head><body></body></html>"
    )


CAPTIONS = (
    '<?xml version="1.0" encoding="utf-8" ?><transcript>'
    '<text start="0.1" dur="2.5">Ingredients: 2 cups flour, 1 egg.</text>'
    '<text start="2.6" dur="3.0">Steps: mix everything and bake for 20 minutes.</text>'
    "</transcript>"
)


def fake_fetch(pages, calls=None):
    async def _fetch(url, extra_headers=None):
        if calls is not None:
            calls.append(url)
        if url not in pages:
            raise FetchError(url)
        return pages[url]

    return _fetch


@pytest.mark.parametrize(
    "url",
    [
        f"https://www.youtube.com/watch?v={VIDEO_ID}",
        f"https://www.youtube.com/watch?feature=share&v={VIDEO_ID}",
        f"https://youtu.be/{VIDEO_ID}?t=42",
        f"https://www.youtube.com/shorts/{VIDEO_ID}",
        f"https://m.youtube.com/watch?v={VIDEO_ID}&list=PL123",
    ],
)
def test_get_youtube_id(url):
    assert get_youtube_id(url) == VIDEO_ID
    assert is_youtube_url(url)


def test_get_youtube_id_without_id():
    assert get_youtube_id("https://www.youtube.com/channel/UC123") is None
    assert get_youtube_id("https://vimeo.com/123456") is None
    assert not is_youtube_url("https://vimeo.com/123456")


def test_parse_video_info_reads_player_response():
    info = parse_video_info(watch_page(), VIDEO_ID)
    assert info is not None
    assert info.video_id == VIDEO_ID
    assert info.title == "Easy Pancakes"
    assert info.description == "Quick weeknight dinner"
    assert info.duration == 95
    assert info.channel_title == "Chef Sam"
    assert info.thumbnail_url == "https://i.ytimg.com/vi/large.jpg"
    assert [t.base_url for t in info.caption_tracks] == [CAPTIONS_URL]


def test_parse_video_info_missing_or_broken():
    assert parse_video_info("<html>no player</html>", VIDEO_ID) is None
    assert parse_video_info("var ytInitialPlayerResponse = {broken", VIDEO_ID) is None
    assert parse_video_info('var ytInitialPlayerResponse = {"videoDetails": {}};', VIDEO_ID) is None


def test_choose_caption_track_prefers_configured_language():
    tracks = [
        CaptionTrack(base_url="https://example.com/es", language_code="es"),
        CaptionTrack(base_url="https://example.com/en", language_code="en-US"),
    ]
    assert choose_caption_track(tracks).base_url == "https://example.com/en"
    assert choose_caption_track(tracks[:1]).base_url == "https://example.com/es"
    assert choose_caption_track([]) is None


def test_decode_captions_unescapes_twice():
    payload = (
        "<transcript>"
        '<text start="0">It&amp;#39;s   time</text>'
        '<text start="1"></text>'
        '<text start="2">salt &amp;amp; pepper</text>'
        "</transcript>"
    )
    assert decode_captions(payload) == "It's time salt & pepper"


@pytest.mark.asyncio
async def test_extract_recipe_from_transcript(monkeypatch):
    calls = []
    monkeypatch.setattr(youtube, "fetch_html", fake_fetch({WATCH_URL: watch_page(), CAPTIONS_URL: CAPTIONS}, calls))

    url = f"https://youtu.be/{VIDEO_ID}"
    recipe = await extract_youtube_recipe(url)

    assert calls == [WATCH_URL, CAPTIONS_URL]
    assert recipe is not None
    assert recipe.title == "Easy Pancakes"
    assert recipe.source_type == VideoSourceType.YOUTUBE
    assert recipe.video_id == VIDEO_ID
    assert recipe.source_url == url
    assert recipe.author_name == "Chef Sam"
    assert recipe.duration == 95
    assert recipe.thumbnail_url == "https://i.ytimg.com/vi/large.jpg"
    assert "2 cups flour" in recipe.ingredients
    assert recipe.cook_time == 20


@pytest.mark.asyncio
async def test_transcript_failure_falls_back_to_description(monkeypatch):
    page = watch_page(description="Ingredients: 3 cups rice, 1 onion. Cook for 15 minutes until tender.")
    # Caption URL is missing from the fake, so the transcript fetch fails.
    monkeypatch.setattr(youtube, "fetch_html", fake_fetch({WATCH_URL: page}))

    recipe = await extract_youtube_recipe(WATCH_URL)

    assert recipe is not None
    assert recipe.ingredients == ["3 cups rice", "1 onion"]
    assert recipe.cook_time == 15


@pytest.mark.asyncio
async def test_video_without_recipe_text_returns_none(monkeypatch):
    page = watch_page(description="My trip to the beach #vlog", caption_tracks=[])
    monkeypatch.setattr(youtube, "fetch_html", fake_fetch({WATCH_URL: page}))

    assert await extract_youtube_recipe(WATCH_URL) is None


@pytest.mark.asyncio
async def test_unreadable_watch_page_raises(monkeypatch):
    monkeypatch.setattr(youtube, "fetch_html", fake_fetch({WATCH_URL: "<html>consent wall</html>"}))

    with pytest.raises(VideoMetadataError) as excinfo:
        await extract_youtube_recipe(WATCH_URL)
    assert excinfo.value.error_code == "parse_failed"


@pytest.mark.asyncio
async def test_watch_page_fetch_failure_propagates(monkeypatch):
    monkeypatch.setattr(youtube, "fetch_html", fake_fetch({}))

    with pytest.raises(FetchError):
        await extract_youtube_recipe(WATCH_URL)


@pytest.mark.asyncio
async def test_youtube_url_without_id_is_invalid(monkeypatch):
    calls = []
    monkeypatch.setattr(youtube, "fetch_html", fake_fetch({}, calls))

    with pytest.raises(InvalidInputError):
        await extract_youtube_recipe("https://www.youtube.com/feed/trending")
    assert calls == []
