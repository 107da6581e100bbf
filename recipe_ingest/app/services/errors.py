"""Exceptions raised by the recipe scraping pipeline.

Each error carries an ``error_code`` so request handlers can map failures to
responses without inspecting messages.
"""

from typing import Optional, Sequence


class RecipeScrapeError(Exception):
    """Base class for every failure surfaced by the scrapers."""

    error_code = "scrape_failed"


class InvalidInputError(RecipeScrapeError, ValueError):
    """The URL is malformed; raised before any network access."""

    error_code = "invalid_url"


class UnsupportedSourceError(RecipeScrapeError):
    """The URL is valid but no site adapter or video platform handles it."""

    error_code = "unsupported_source"

    def __init__(self, message: str, supported: Sequence[str] = ()):
        super().__init__(message)
        self.supported = list(supported)


class FetchError(RecipeScrapeError):
    """The source could not be reached or answered with a non-2xx status."""

    error_code = "fetch_failed"

    def __init__(self, url: str, cause: Optional[BaseException] = None):
        detail = f": {cause}" if cause else ""
        super().__init__(f"Failed to fetch {url}{detail}")
        self.url = url
        self.cause = cause

    @property
    def status_code(self) -> Optional[int]:
        response = getattr(self.cause, "response", None)
        return getattr(response, "status_code", None)


class NoStructuredDataError(RecipeScrapeError):
    """The page was fetched but carries no schema.org Recipe block."""

    error_code = "no_structured_data"

    def __init__(self, url: str):
        super().__init__("Could not find recipe data in HTML (no recipe schema found)")
        self.url = url


class VideoMetadataError(RecipeScrapeError):
    """The video page was fetched but its metadata could not be decoded."""

    error_code = "parse_failed"

    def __init__(self, url: str, message: str):
        super().__init__(message)
        self.url = url


class NotARecipeError(RecipeScrapeError):
    """The video text was readable but contained nothing recipe-shaped."""

    error_code = "not_a_recipe"

    def __init__(self, url: str, platform: str):
        super().__init__(
            f"Could not extract recipe from this {platform} video. "
            "Make sure it contains recipe ingredients and instructions."
        )
        self.url = url
        self.platform = platform
