"""Workflow: fetch a transcript, summarize it and insert the resulting note."""

from typing import Optional

from ..core.exceptions import AlreadyProcessingError, InvalidUrlError, TranscriptError
from ..core.http_client import HttpClient
from ..core.llm_manager import LLMManager, LLMSettings
from ..core.transcript_fetcher import fetch_transcript
from ..models import TranscriptResult
from ..utils.logging import get_logger
from ..utils.youtube_utils import get_thumbnail_url, is_youtube_url
from .note_service import NoteWriter, format_note
from .prompt_service import PromptService
from .settings_store import SettingsStore, UserSettings
from .summary_service import SummaryService

logger = get_logger("video_summarizer")


class VideoSummarizer:
    """
    Host-side workflow around the transcript pipeline.

    Only one video is processed at a time; a second call while one is in
    flight is rejected with AlreadyProcessingError.
    """

    def __init__(
        self,
        settings_store: Optional[SettingsStore] = None,
        summary_service: Optional[SummaryService] = None,
        note_writer: Optional[NoteWriter] = None,
        http_client: Optional[HttpClient] = None,
        llm_manager: Optional[LLMManager] = None
    ):
        self.settings_store = settings_store or SettingsStore()
        self.summary_service = summary_service
        self.note_writer = note_writer
        self.http_client = http_client
        self.llm_manager = llm_manager or LLMManager()
        self.is_processing = False

    def _summary_service_for(self, settings: UserSettings) -> SummaryService:
        if self.summary_service is not None:
            return self.summary_service
        return SummaryService(
            llm_manager=self.llm_manager,
            settings=LLMSettings(
                model=settings.model,
                temperature=settings.temperature,
                max_tokens=settings.max_tokens,
                provider=settings.provider
            )
        )

    async def get_transcript(self, url: str, lang_code: Optional[str] = None) -> TranscriptResult:
        """Fetch the transcript of *url* in the configured or given language."""
        if not is_youtube_url(url):
            raise InvalidUrlError(f"Not a valid YouTube URL: {url}")
        settings = self.settings_store.get_settings()
        return await fetch_transcript(url, lang_code or settings.language, http_client=self.http_client)

    async def summarize_video(
        self,
        url: str,
        prompt: Optional[str] = None,
        structured: bool = False,
        lang_code: Optional[str] = None
    ) -> str:
        """
        Summarize the video at *url* and insert the note into the writer.

        Args:
            url: YouTube video URL
            prompt: Instruction overriding the stored custom prompt
            structured: Ask for a JSON summary and render it as markdown
            lang_code: Caption language overriding the stored setting

        Returns:
            The formatted note

        Raises:
            AlreadyProcessingError: If another video is being processed
            TranscriptError: If the transcript cannot be fetched
            RuntimeError: If the model call fails
        """
        if self.is_processing:
            raise AlreadyProcessingError()

        self.is_processing = True
        try:
            settings = self.settings_store.get_settings()

            logger.info("Fetching video transcript...")
            try:
                transcript = await self.get_transcript(url, lang_code)
            except TranscriptError as e:
                logger.error(f"Failed to fetch transcript: {e.message}")
                raise

            thumbnail_url = get_thumbnail_url(transcript.video_id)
            prompt_service = PromptService(prompt or settings.custom_prompt)
            summary_service = self._summary_service_for(settings)

            logger.info("Generating summary...")
            if structured:
                structured_summary = await summary_service.summarize_structured(
                    prompt_service.build_structured_prompt(transcript.text)
                )
                summary_text = structured_summary.to_markdown()
            else:
                summary_text = await summary_service.summarize(prompt_service.build_prompt(transcript.text))

            note = format_note(transcript, thumbnail_url, url, summary_text)
            if self.note_writer is not None:
                self.note_writer.insert(note)

            logger.info("Summary generated successfully!")
            return note
        finally:
            self.is_processing = False
