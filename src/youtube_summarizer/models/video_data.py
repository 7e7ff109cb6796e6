"""Data models for video transcripts."""

from dataclasses import dataclass, field
from typing import List, Optional, Dict, Any

from ..utils.text_utils import format_timestamp

ASR_KIND = "asr"


@dataclass(frozen=True)
class CaptionTrack:
    """One available caption track of a video."""
    language_code: str
    source_url: str
    kind: Optional[str] = None  # "asr" for auto-generated, None for manual
    name: str = ""

    @property
    def is_auto_generated(self) -> bool:
        """Check whether the track was produced by speech recognition."""
        return self.kind == ASR_KIND

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Optional["CaptionTrack"]:
        """
        Build a track from a player response ``captionTracks`` entry.

        Returns None when the entry lacks a source URL or language code.
        """
        if not isinstance(data, dict):
            return None

        base_url = data.get("baseUrl")
        language_code = data.get("languageCode")
        if not isinstance(base_url, str) or not base_url:
            return None
        if not isinstance(language_code, str) or not language_code:
            return None

        kind = data.get("kind")
        if not isinstance(kind, str) and str(data.get("vssId", "")).startswith("a."):
            kind = ASR_KIND

        name_obj = data.get("name") or {}
        name = ""
        if isinstance(name_obj, dict):
            runs = name_obj.get("runs")
            runs = runs if isinstance(runs, list) else []
            simple_text = name_obj.get("simpleText")
            name = simple_text if isinstance(simple_text, str) and simple_text else "".join(
                run["text"] for run in runs if isinstance(run, dict) and isinstance(run.get("text"), str)
            )

        return cls(
            language_code=language_code,
            source_url=base_url,
            kind=kind if isinstance(kind, str) else None,
            name=name
        )


@dataclass(frozen=True)
class TranscriptLine:
    """A single timed caption cue."""
    text: str
    offset_ms: int
    duration_ms: int

    @property
    def end_ms(self) -> int:
        """Calculate end time."""
        return self.offset_ms + self.duration_ms

    @property
    def timestamp_str(self) -> str:
        """Get formatted timestamp string."""
        return format_timestamp(self.offset_ms)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "text": self.text,
            "offset_ms": self.offset_ms,
            "duration_ms": self.duration_ms
        }


@dataclass
class VideoMetadata:
    """Video details accompanying the caption tracks."""
    title: str = ""
    author: str = ""
    channel_id: Optional[str] = None


@dataclass
class CaptionResult:
    """Output of the caption acquisition step, before the URL is attached."""
    video_id: str
    metadata: VideoMetadata
    track: CaptionTrack
    lines: List[TranscriptLine]


@dataclass
class TranscriptResult:
    """Complete transcript of one video together with its metadata."""
    url: str
    video_id: str
    title: str
    author: str
    channel_url: str
    lines: List[TranscriptLine] = field(default_factory=list)
    language_code: Optional[str] = None
    is_auto_generated: bool = False

    @property
    def text(self) -> str:
        """Get plain text transcript with all lines joined."""
        return " ".join(line.text for line in self.lines)

    @property
    def timestamped_text(self) -> str:
        """Get transcript text with timestamps prefixed."""
        return "\n".join(
            f"[{line.timestamp_str}] {line.text}"
            for line in self.lines
        )

    @property
    def duration_ms(self) -> int:
        """End of the last cue, or 0 for an empty transcript."""
        return max((line.end_ms for line in self.lines), default=0)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "url": self.url,
            "video_id": self.video_id,
            "title": self.title,
            "author": self.author,
            "channel_url": self.channel_url,
            "language_code": self.language_code,
            "is_auto_generated": self.is_auto_generated,
            "lines": [line.to_dict() for line in self.lines]
        }
