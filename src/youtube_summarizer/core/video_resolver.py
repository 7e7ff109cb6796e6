"""Resolve a YouTube URL to a video ID and the API key embedded in its watch page."""

import re
from dataclasses import dataclass
from typing import Optional

from .config import config
from .exceptions import CredentialExtractionError, HttpRequestError, PageFetchError
from .http_client import HttpClient
from ..models import VideoMetadata
from ..utils.logging import get_logger
from ..utils.youtube_utils import get_watch_url, resolve_video_id

logger = get_logger("video_resolver")

# The one rule that knows how the page embeds its API key. Matches both the
# ytcfg JSON blob ("INNERTUBE_API_KEY":"...") and the older
# ytcfg.set('INNERTUBE_API_KEY', '...') call. Update here when the page changes.
API_KEY_PATTERN = re.compile(r"""["']INNERTUBE_API_KEY["']\s*[:,]\s*["']([A-Za-z0-9_-]+)["']""")

CLIENT_VERSION_PATTERN = re.compile(
    r"""["']INNERTUBE_CONTEXT_CLIENT_VERSION["']\s*[:,]\s*["']([0-9.]+)["']"""
)

# Watch page metadata, used when the player response omits videoDetails
TITLE_PATTERN = re.compile(r'<meta\s+name="title"\s+content="([^"]*)"\s*/?>')
AUTHOR_PATTERN = re.compile(r'<link\s+itemprop="name"\s+content="([^"]+)"\s*/?>')
CHANNEL_ID_PATTERN = re.compile(r'"channelId"\s*:\s*"([^"]+)"')


@dataclass(frozen=True)
class PageCredential:
    """API key scraped from a watch page, plus what else the page told us."""
    video_id: str
    api_key: str
    client_version: str
    page_html: str = ""


def _first_group(pattern: re.Pattern, text: str) -> Optional[str]:
    match = pattern.search(text or "")
    return match.group(1) if match else None


def extract_api_key(html: str) -> str:
    """
    Extract the page-embedded API key from watch page markup.

    Raises:
        CredentialExtractionError: If the key pattern is not present
    """
    api_key = _first_group(API_KEY_PATTERN, html)
    if not api_key:
        raise CredentialExtractionError("Failed to find INNERTUBE_API_KEY in video page")
    return api_key


def extract_client_version(html: str) -> str:
    """Client version advertised by the page, or the configured default."""
    return _first_group(CLIENT_VERSION_PATTERN, html) or config.youtube.client_version


def extract_page_metadata(html: str) -> VideoMetadata:
    """Best-effort title, author and channel ID from watch page markup, still entity-encoded."""
    return VideoMetadata(
        title=_first_group(TITLE_PATTERN, html) or "",
        author=_first_group(AUTHOR_PATTERN, html) or "",
        channel_id=_first_group(CHANNEL_ID_PATTERN, html)
    )


class VideoResolver:
    """Turns a URL into a video ID and a usable API key."""

    def __init__(self, http_client: HttpClient):
        self.http_client = http_client

    @staticmethod
    def resolve(url: str) -> str:
        """
        Derive the video ID from a URL.

        Raises:
            InvalidUrlError: If no 11-character ID can be extracted
        """
        video_id = resolve_video_id(url)
        logger.debug(f"Resolved {url} -> {video_id}")
        return video_id

    async def fetch_page(self, video_id: str) -> str:
        """
        Fetch the watch page markup for *video_id*.

        Raises:
            PageFetchError: On network failure or a non-2xx response
        """
        page_url = get_watch_url(video_id)
        try:
            html = await self.http_client.get(page_url)
        except HttpRequestError as e:
            raise PageFetchError(f"Failed to fetch video page: {e.message}") from e
        logger.debug(f"Fetched watch page for {video_id} ({len(html)} chars)")
        return html

    async def fetch_page_credential(self, video_id: str) -> PageCredential:
        """
        Fetch the watch page and extract the API key from it.

        Raises:
            PageFetchError: If the page cannot be fetched
            CredentialExtractionError: If the page carries no API key
        """
        html = await self.fetch_page(video_id)
        api_key = extract_api_key(html)
        client_version = extract_client_version(html)
        logger.debug(f"Extracted API key for {video_id} (client version {client_version})")
        return PageCredential(
            video_id=video_id,
            api_key=api_key,
            client_version=client_version,
            page_html=html
        )
