"""Unit tests for prompt, summary, settings and note services."""

import json
from unittest.mock import AsyncMock, MagicMock

import pytest

from youtube_summarizer.services import (
    DEFAULT_PROMPT,
    FileNoteWriter,
    PromptService,
    SummaryService,
    UserSettings,
    format_note,
    parse_structured_response
)
from youtube_summarizer.services.prompt_service import STRUCTURED_RESPONSE_FORMAT


class TestPromptService:
    """Tests for prompt construction."""

    def test_build_prompt(self):
        service = PromptService("Summarize briefly")
        assert service.build_prompt("hello world") == "Summarize briefly\n\nTranscript:\nhello world"

    def test_empty_prompt_uses_default(self):
        assert PromptService("").custom_prompt == DEFAULT_PROMPT

    def test_structured_prompt_appends_format(self):
        prompt = PromptService("Summarize").build_structured_prompt("text")

        assert prompt.startswith("Summarize\n\nTranscript:\ntext\n\n")
        assert prompt.endswith(STRUCTURED_RESPONSE_FORMAT)


class TestParseStructuredResponse:
    """Tests for validating model output."""

    VALID = {
        "summary": "About testing",
        "keyPoints": ["one"],
        "technicalTerms": [{"term": "mock", "explanation": "a double"}],
        "conclusion": "done"
    }

    def test_plain_json(self):
        summary = parse_structured_response(json.dumps(self.VALID))
        assert summary.summary == "About testing"

    def test_fenced_json(self):
        summary = parse_structured_response(f"```json\n{json.dumps(self.VALID, indent=2)}\n```")
        assert summary.key_points == ["one"]

    @pytest.mark.parametrize("text", [
        "Sorry, I cannot do that.",
        "[1, 2, 3]",
        '{"summary": "missing fields"}',
        '{"summary": "x", "keyPoints": "not a list", "technicalTerms": [], "conclusion": ""}',
        "",
    ])
    def test_invalid_output_yields_placeholder(self, text):
        assert parse_structured_response(text).is_parse_failure


class TestSummaryService:
    """Tests for the SummaryService class."""

    @pytest.mark.asyncio
    async def test_summarize(self, mock_llm_manager, mock_llm):
        # Arrange
        service = SummaryService(llm_manager=mock_llm_manager)

        # Act
        result = await service.summarize("prompt text")

        # Assert
        assert result == "A short summary."
        messages = mock_llm.ainvoke.call_args.args[0]
        assert messages[0].content == "prompt text"

    @pytest.mark.asyncio
    async def test_summarize_flattens_content_parts(self, mock_llm_manager, mock_llm):
        mock_llm.ainvoke.return_value = MagicMock(content=[{"type": "text", "text": "Part one. "}, "Part two."])

        result = await SummaryService(llm_manager=mock_llm_manager).summarize("p")

        assert result == "Part one. Part two."

    @pytest.mark.asyncio
    async def test_summarize_wraps_model_errors(self, mock_llm_manager, mock_llm):
        mock_llm.ainvoke = AsyncMock(side_effect=Exception("quota exceeded"))

        with pytest.raises(RuntimeError) as exc_info:
            await SummaryService(llm_manager=mock_llm_manager).summarize("p")

        assert str(exc_info.value) == "Error generating summary: quota exceeded"

    @pytest.mark.asyncio
    async def test_model_construction_errors_are_wrapped(self, mock_llm_manager):
        mock_llm_manager.get_llm.side_effect = ValueError("Unsupported model/provider combination")

        with pytest.raises(RuntimeError) as exc_info:
            await SummaryService(llm_manager=mock_llm_manager).summarize("p")

        assert str(exc_info.value) == "Error generating summary: Unsupported model/provider combination"

    @pytest.mark.asyncio
    async def test_summarize_structured(self, mock_llm_manager, mock_llm):
        mock_llm.ainvoke.return_value = MagicMock(content=json.dumps(TestParseStructuredResponse.VALID))

        summary = await SummaryService(llm_manager=mock_llm_manager).summarize_structured("p")

        assert summary.conclusion == "done"


class TestSettingsStore:
    """Tests for persisted user settings."""

    def test_defaults_without_file(self, settings_store):
        settings = settings_store.get_settings()

        assert settings.custom_prompt == DEFAULT_PROMPT
        assert settings.max_tokens == 3000
        assert settings.temperature == 1.0

    def test_update_persists(self, settings_store):
        # Act
        settings_store.update_settings(model="gpt-4o", temperature=0.3, unknown="ignored")

        # Assert
        stored = json.loads(settings_store.path.read_text(encoding="utf-8"))
        assert stored["settings"]["model"] == "gpt-4o"
        assert stored["settings"]["temperature"] == 0.3
        assert "unknown" not in stored["settings"]

    def test_stored_values_merge_over_defaults(self, settings_store):
        settings_store.path.write_text(json.dumps({"settings": {"model": "claude-3-haiku"}}), encoding="utf-8")

        settings = settings_store.load()

        assert settings.model == "claude-3-haiku"
        assert settings.custom_prompt == DEFAULT_PROMPT

    def test_corrupt_file_uses_defaults(self, settings_store):
        settings_store.path.write_text("{not json", encoding="utf-8")

        assert settings_store.load() == UserSettings()

    def test_get_settings_returns_copy(self, settings_store):
        settings = settings_store.get_settings()
        settings.model = "changed"

        assert settings_store.get_settings().model != "changed"


class TestNotes:
    """Tests for note formatting and writing."""

    def test_format_note(self, sample_transcript):
        # Act
        note = format_note(
            sample_transcript,
            "https://img.youtube.com/vi/dQw4w9WgXcQ/maxresdefault.jpg",
            "https://youtu.be/dQw4w9WgXcQ",
            "The summary."
        )

        # Assert
        assert note == (
            "# Never Gonna Give You Up\n\n"
            "![Thumbnail](https://img.youtube.com/vi/dQw4w9WgXcQ/maxresdefault.jpg)\n\n"
            "👤 [Rick Astley](https://www.youtube.com/channel/UCuAXFkgsw1L7xaCfnd5JJOw)  "
            "🔗 [Watch video](https://youtu.be/dQw4w9WgXcQ)\n"
            "The summary."
        )

    def test_file_writer_appends_with_separator(self, tmp_path):
        path = tmp_path / "notes" / "summary.md"
        writer = FileNoteWriter(path)

        writer.insert("first")
        writer.insert("second")

        assert path.read_text(encoding="utf-8") == "first\n\nsecond"
