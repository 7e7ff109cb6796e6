"""Utility functions for working with YouTube URLs."""

import re
from typing import Optional

from ..core.config import config
from ..core.exceptions import InvalidUrlError

VIDEO_ID_PATTERN = re.compile(r"^[A-Za-z0-9_-]{11}$")

# Ordered from most to least specific; the last one is the generic
# "v=" or path-segment rule for URL shapes not listed explicitly.
VIDEO_URL_PATTERNS = [
    re.compile(r"[?&]v=([A-Za-z0-9_-]{11})(?![A-Za-z0-9_-])"),
    re.compile(r"youtu\.be/([A-Za-z0-9_-]{11})(?![A-Za-z0-9_-])"),
    re.compile(r"youtube(?:-nocookie)?\.com/(?:embed|shorts|live|v)/([A-Za-z0-9_-]{11})(?![A-Za-z0-9_-])"),
    re.compile(r"(?:v=|/)([A-Za-z0-9_-]{11})(?![A-Za-z0-9_-])"),
]

THUMBNAIL_QUALITIES = {
    "default": "default",      # 120x90
    "medium": "mqdefault",     # 320x180
    "high": "hqdefault",       # 480x360
    "standard": "sddefault",   # 640x480
    "maxres": "maxresdefault", # 1280x720
}


def extract_video_id(url: Optional[str]) -> Optional[str]:
    """
    Extract the 11-character video ID from a YouTube URL.

    Query parameters around the ID are ignored.

    Args:
        url: YouTube URL

    Returns:
        The video ID, or None when no ID can be found
    """
    if not url or not isinstance(url, str):
        return None

    candidate = url.strip()
    for pattern in VIDEO_URL_PATTERNS:
        match = pattern.search(candidate)
        if match:
            return match.group(1)

    return None


def is_valid_video_id(video_id: Optional[str]) -> bool:
    """Check that *video_id* is exactly 11 URL-safe characters."""
    return bool(video_id) and bool(VIDEO_ID_PATTERN.match(video_id))


def resolve_video_id(url: str) -> str:
    """Like extract_video_id but raises InvalidUrlError instead of returning None."""
    video_id = extract_video_id(url)
    if not video_id:
        raise InvalidUrlError(f"Invalid YouTube URL: {url}")
    return video_id


def is_youtube_url(url: Optional[str]) -> bool:
    """Check whether *url* points at one of the two YouTube hosts."""
    if not url or not isinstance(url, str):
        return False
    return "youtube.com/" in url or "youtu.be/" in url


def get_thumbnail_url(video_id: str, quality: str = "maxres") -> str:
    """
    Build the thumbnail URL for a video. No network access.

    Args:
        video_id: The YouTube video ID
        quality: One of default, medium, high, standard, maxres

    Returns:
        Thumbnail image URL

    Raises:
        ValueError: If *quality* is not a known thumbnail quality
    """
    suffix = THUMBNAIL_QUALITIES.get(quality)
    if suffix is None:
        raise ValueError(
            f"Unknown thumbnail quality: {quality}. "
            f"Use one of {', '.join(THUMBNAIL_QUALITIES)}"
        )
    return f"{config.youtube.thumbnail_base_url}/{video_id}/{suffix}.jpg"


def get_watch_url(video_id: str) -> str:
    """Canonical watch page URL for a video ID."""
    return f"{config.youtube.base_url}/watch?v={video_id}"


def get_channel_url(channel_id: Optional[str]) -> str:
    """Canonical channel URL, or an empty string when no channel ID is known."""
    if not channel_id:
        return ""
    return f"{config.youtube.base_url}/channel/{channel_id}"
