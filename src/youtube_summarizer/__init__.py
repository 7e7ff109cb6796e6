"""YouTube transcript extraction and summarization."""

__version__ = "0.1.0"

from .core.exceptions import TranscriptError
from .core.http_client import HttpClient, AiohttpClient, RequestsHttpClient
from .core.transcript_fetcher import TranscriptFetcher, fetch_transcript
from .models import CaptionTrack, TranscriptLine, TranscriptResult
from .utils.youtube_utils import get_thumbnail_url, is_youtube_url

__all__ = [
    "__version__",
    "TranscriptError",
    "HttpClient",
    "AiohttpClient",
    "RequestsHttpClient",
    "TranscriptFetcher",
    "fetch_transcript",
    "CaptionTrack",
    "TranscriptLine",
    "TranscriptResult",
    "get_thumbnail_url",
    "is_youtube_url"
]
