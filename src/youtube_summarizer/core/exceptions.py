"""Exceptions raised by the transcript pipeline and the summary workflow."""

from typing import Dict


class TranscriptError(Exception):
    """Base class for transcript pipeline failures."""

    kind = "TranscriptError"
    default_message = "Transcript extraction failed"

    def __init__(self, message: str = ""):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, str]:
        """Convert error to a serializable dictionary."""
        return {
            "kind": self.kind,
            "message": self.message
        }


class InvalidUrlError(TranscriptError):
    """URL does not contain a recognizable video identifier."""

    kind = "InvalidUrl"
    default_message = "Invalid YouTube URL"


class PageFetchError(TranscriptError):
    """Watch page or player endpoint could not be fetched."""

    kind = "PageFetchFailed"
    default_message = "Failed to fetch video page"


class CredentialExtractionError(TranscriptError):
    """The page-embedded API key was not found in the watch page."""

    kind = "CredentialExtractionFailed"
    default_message = "Failed to extract API key from video page"


class AgeRestrictedError(TranscriptError):
    """Playability status requires a signed-in user."""

    kind = "AgeRestricted"
    default_message = "Video is age restricted and requires sign-in"


class VideoUnavailableError(TranscriptError):
    """Playability status reports an explicit error."""

    kind = "VideoUnavailable"
    default_message = "Video is unavailable"


class TranscriptsDisabledError(TranscriptError):
    """Video is playable but exposes no caption tracks."""

    kind = "TranscriptsDisabled"
    default_message = "No captions available"


class NoMatchingTrackError(TranscriptError):
    """No caption track could be selected."""

    kind = "NoMatchingTrack"
    default_message = "No matching caption track"


class CaptionFetchError(TranscriptError):
    """The selected caption document could not be fetched."""

    kind = "CaptionFetchFailed"
    default_message = "Failed to fetch captions"


class CaptionParseError(TranscriptError):
    """The caption document is malformed or contains no cues."""

    kind = "CaptionParseFailed"
    default_message = "Failed to parse captions"


class HttpRequestError(Exception):
    """Transport-level failure raised by an HttpClient."""

    def __init__(self, message: str, status: int = 0, url: str = ""):
        self.message = message
        self.status = status
        self.url = url
        super().__init__(message)


class AlreadyProcessingError(Exception):
    """A summary is already being generated."""

    def __init__(self, message: str = "Already processing a video, please wait..."):
        self.message = message
        super().__init__(message)
