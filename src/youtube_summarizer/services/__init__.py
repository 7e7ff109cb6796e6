"""Service layer: prompts, summaries, settings and notes."""

from .prompt_service import PromptService, DEFAULT_PROMPT
from .summary_service import SummaryService, parse_structured_response
from .settings_store import SettingsStore, UserSettings
from .note_service import NoteWriter, FileNoteWriter, format_note
from .video_summarizer import VideoSummarizer

__all__ = [
    "PromptService",
    "DEFAULT_PROMPT",
    "SummaryService",
    "parse_structured_response",
    "SettingsStore",
    "UserSettings",
    "NoteWriter",
    "FileNoteWriter",
    "format_note",
    "VideoSummarizer"
]
