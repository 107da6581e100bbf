import pytest

from recipe_ingest.app.services.errors import FetchError
from recipe_ingest.app.services.video_parsing import tiktok
from recipe_ingest.app.services.video_parsing.models import VideoSourceType
from recipe_ingest.app.services.video_parsing.tiktok import (
    extract_tiktok_recipe,
    get_tiktok_handle,
    get_tiktok_id,
    is_tiktok_url,
    parse_video_info,
)

VIDEO_URL = "https://www.tiktok.com/@chef.sam/video/7234567890123456789"


def video_page(title="Easy Pancakes &quot;fast&quot;", description=None, og_url=None):
    tags = [
        f'<meta property="og:title" content="{title}">',
        '<meta property="og:image" content="https://p16.tiktokcdn.com/cover.jpg">',
    ]
    if description is not None:
        tags.append(f'<meta property="og:description" content="{description}">')
    if og_url is not None:
        tags.append(f'<meta property="og:url" content="{og_url}">')
    return "<html><head>" + "".join(tags) + "</head><body></body></html>"


def fake_fetch(page):
    async def _fetch(url, extra_headers=None):
        return page

    return _fetch


def test_get_tiktok_id():
    assert get_tiktok_id(VIDEO_URL) == "7234567890123456789"
    assert get_tiktok_id(" 7234567890123456789 ") == "7234567890123456789"
    assert get_tiktok_id("https://vm.tiktok.com/ZMabc123/") is None


def test_is_tiktok_url_and_handle():
    assert is_tiktok_url(VIDEO_URL)
    assert is_tiktok_url("https://vm.tiktok.com/ZMabc123/")
    assert not is_tiktok_url("https://www.instagram.com/reel/abc/")
    assert get_tiktok_handle(VIDEO_URL) == "chef.sam"
    assert get_tiktok_handle("https://vm.tiktok.com/ZMabc123/") is None


def test_parse_video_info_reads_open_graph_tags():
    info = parse_video_info(video_page(description="Ingredients: 2 cups flour"), VIDEO_URL)
    assert info.video_id == "7234567890123456789"
    assert info.title == 'Easy Pancakes "fast"'
    assert info.description == "Ingredients: 2 cups flour"
    assert info.author_name == "chef.sam"
    assert info.cover_url == "https://p16.tiktokcdn.com/cover.jpg"
    assert info.duration == 30


def test_parse_video_info_short_link_uses_canonical_url():
    page = video_page(og_url="https://www.tiktok.com/@baker/video/111222333")
    info = parse_video_info(page, "https://vm.tiktok.com/ZMabc123/")
    assert info.video_id == "111222333"
    assert info.author_name == "baker"


def test_parse_video_info_placeholders():
    info = parse_video_info("<html><head></head></html>", "https://vm.tiktok.com/ZMabc123/")
    assert info.video_id == "unknown"
    assert info.title == "TikTok Recipe"
    assert info.author_name == "TikTok Creator"
    assert info.description == ""
    assert info.cover_url is None


def test_duration_comes_from_settings(monkeypatch):
    monkeypatch.setenv("TIKTOK_DEFAULT_DURATION_SECONDS", "45")
    assert parse_video_info(video_page(), VIDEO_URL).duration == 45


@pytest.mark.asyncio
async def test_extract_recipe_from_caption(monkeypatch):
    caption = "Ingredients: 2 cups flour, 1 egg. Steps: mix everything and bake for 20 minutes. Serves 4"
    monkeypatch.setattr(tiktok, "fetch_html", fake_fetch(video_page(description=caption)))

    recipe = await extract_tiktok_recipe(VIDEO_URL)

    assert recipe is not None
    assert recipe.source_type == VideoSourceType.TIKTOK
    assert recipe.video_id == "7234567890123456789"
    assert recipe.author_name == "chef.sam"
    assert recipe.thumbnail_url == "https://p16.tiktokcdn.com/cover.jpg"
    assert recipe.duration == 30
    assert "1 egg" in recipe.ingredients
    assert recipe.cook_time == 20
    assert recipe.servings == 4


@pytest.mark.asyncio
async def test_non_recipe_caption_returns_none(monkeypatch):
    monkeypatch.setattr(tiktok, "fetch_html", fake_fetch(video_page(description="#fyp #dance #viral")))

    assert await extract_tiktok_recipe(VIDEO_URL) is None


@pytest.mark.asyncio
async def test_missing_caption_returns_none(monkeypatch):
    monkeypatch.setattr(tiktok, "fetch_html", fake_fetch(video_page()))

    assert await extract_tiktok_recipe(VIDEO_URL) is None


@pytest.mark.asyncio
async def test_fetch_failure_propagates(monkeypatch):
    async def failing_fetch(url, extra_headers=None):
        raise FetchError(url)

    monkeypatch.setattr(tiktok, "fetch_html", failing_fetch)
    with pytest.raises(FetchError):
        await extract_tiktok_recipe(VIDEO_URL)
