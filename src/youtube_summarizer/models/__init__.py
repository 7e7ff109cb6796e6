"""Data models for the YouTube summarizer."""

from .video_data import (
    CaptionTrack,
    TranscriptLine,
    VideoMetadata,
    CaptionResult,
    TranscriptResult
)
from .summary import StructuredSummary, TechnicalTerm, PARSE_FAILURE_SUMMARY

__all__ = [
    "CaptionTrack",
    "TranscriptLine",
    "VideoMetadata",
    "CaptionResult",
    "TranscriptResult",
    "StructuredSummary",
    "TechnicalTerm",
    "PARSE_FAILURE_SUMMARY"
]
