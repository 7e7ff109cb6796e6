"""Core modules for transcript extraction."""

from .config import config, Config, validate_config
from .exceptions import (
    TranscriptError,
    InvalidUrlError,
    PageFetchError,
    CredentialExtractionError,
    AgeRestrictedError,
    VideoUnavailableError,
    TranscriptsDisabledError,
    NoMatchingTrackError,
    CaptionFetchError,
    CaptionParseError,
    HttpRequestError,
    AlreadyProcessingError
)

__all__ = [
    'config',
    'Config',
    'validate_config',
    'TranscriptError',
    'InvalidUrlError',
    'PageFetchError',
    'CredentialExtractionError',
    'AgeRestrictedError',
    'VideoUnavailableError',
    'TranscriptsDisabledError',
    'NoMatchingTrackError',
    'CaptionFetchError',
    'CaptionParseError',
    'HttpRequestError',
    'AlreadyProcessingError'
]
