"""Formatting of the final note and the targets it can be inserted into."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Union

from ..models import TranscriptResult
from ..utils.logging import get_logger

logger = get_logger("note_service")


def format_note(
    transcript: TranscriptResult,
    thumbnail_url: str,
    url: str,
    summary_text: str
) -> str:
    """
    Build the note inserted into the document.

    Args:
        transcript: Transcript with title, author and channel URL
        thumbnail_url: URL of the video thumbnail
        url: URL of the video as given by the user
        summary_text: Model output, free-form or rendered structured summary

    Returns:
        The formatted note
    """
    parts = [
        f"# {transcript.title}\n",
        f"![Thumbnail]({thumbnail_url})\n",
        f"👤 [{transcript.author}]({transcript.channel_url})  🔗 [Watch video]({url})",
        summary_text,
    ]
    return "\n".join(parts)


class NoteWriter(ABC):
    """Target that receives the final formatted note."""

    @abstractmethod
    def insert(self, text: str) -> None:
        """Insert *text* into the target."""


class FileNoteWriter(NoteWriter):
    """Appends notes to a text file, separated by a blank line."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def insert(self, text: str) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        needs_separator = self.path.exists() and self.path.stat().st_size > 0
        with open(self.path, "a", encoding="utf-8") as f:
            if needs_separator:
                f.write("\n\n")
            f.write(text)
        logger.info(f"Note written to {self.path}")
