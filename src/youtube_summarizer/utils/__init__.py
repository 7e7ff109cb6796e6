"""
Utility modules for the YouTube summarizer.
"""

from .logging import setup_logger, get_logger
from .text_utils import decode_entities, seconds_to_ms, format_timestamp, clean_code_fences
from .youtube_utils import (
    extract_video_id,
    resolve_video_id,
    is_valid_video_id,
    is_youtube_url,
    get_thumbnail_url,
    get_watch_url,
    get_channel_url
)

__all__ = [
    'setup_logger',
    'get_logger',
    'decode_entities',
    'seconds_to_ms',
    'format_timestamp',
    'clean_code_fences',
    'extract_video_id',
    'resolve_video_id',
    'is_valid_video_id',
    'is_youtube_url',
    'get_thumbnail_url',
    'get_watch_url',
    'get_channel_url'
]
