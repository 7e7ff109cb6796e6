"""
YouTube transcript fetching pipeline.

Resolves the video ID, scrapes the API key from the watch page, queries the
player endpoint for caption tracks and returns the parsed transcript with
its video metadata. Every step either advances or raises a
`TranscriptError` subclass; nothing is retried.
"""

from typing import Optional

from .caption_acquirer import CaptionAcquirer
from .config import config
from .http_client import AiohttpClient, HttpClient
from .video_resolver import VideoResolver, extract_page_metadata
from ..models import TranscriptResult, VideoMetadata
from ..utils.logging import get_logger
from ..utils.text_utils import decode_entities
from ..utils.youtube_utils import get_channel_url

logger = get_logger("transcript_fetcher")


def _merge_metadata(primary: VideoMetadata, fallback: VideoMetadata) -> VideoMetadata:
    return VideoMetadata(
        title=primary.title or fallback.title,
        author=primary.author or fallback.author,
        channel_id=primary.channel_id or fallback.channel_id
    )


class TranscriptFetcher:
    """
    Single-shot transcript pipeline.

    Holds no state between calls beyond the HTTP client it was given, so one
    instance per call or one shared instance behave the same.
    """

    def __init__(self, http_client: HttpClient):
        self.http_client = http_client
        self.resolver = VideoResolver(http_client)
        self.acquirer = CaptionAcquirer(http_client)

    async def fetch_transcript(self, url: str, lang_code: Optional[str] = None) -> TranscriptResult:
        """
        Fetch the transcript of the video at *url*.

        Args:
            url: YouTube video URL
            lang_code: Preferred caption language (default from config, "en")

        Returns:
            TranscriptResult with metadata and at least one line

        Raises:
            TranscriptError: Any pipeline failure, see core.exceptions
        """
        lang_code = lang_code or config.youtube.default_language

        video_id = self.resolver.resolve(url)
        credential = await self.resolver.fetch_page_credential(video_id)
        captions = await self.acquirer.fetch_captions(
            video_id,
            credential.api_key,
            lang_code,
            client_version=credential.client_version
        )

        page_metadata = extract_page_metadata(credential.page_html)
        # Page markup is entity-encoded; videoDetails JSON is plain text
        page_metadata.title = decode_entities(page_metadata.title)
        page_metadata.author = decode_entities(page_metadata.author)
        metadata = _merge_metadata(captions.metadata, page_metadata)
        logger.debug(f"Fetched {len(captions.lines)} transcript lines for {video_id}")

        return TranscriptResult(
            url=url,
            video_id=video_id,
            title=metadata.title,
            author=metadata.author,
            channel_url=get_channel_url(metadata.channel_id),
            lines=captions.lines,
            language_code=captions.track.language_code,
            is_auto_generated=captions.track.is_auto_generated
        )


async def fetch_transcript(
    url: str,
    lang_code: str = "en",
    http_client: Optional[HttpClient] = None
) -> TranscriptResult:
    """
    Fetch the transcript of a YouTube video.

    When no *http_client* is given a temporary `AiohttpClient` is created and
    closed afterwards; a caller-supplied client is left open.
    """
    if http_client is not None:
        return await TranscriptFetcher(http_client).fetch_transcript(url, lang_code)

    async with AiohttpClient() as client:
        return await TranscriptFetcher(client).fetch_transcript(url, lang_code)
