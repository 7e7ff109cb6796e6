"""Pytest configuration and fixtures for the summarizer tests."""

import os
import sys
import pytest
from unittest.mock import AsyncMock, MagicMock

# Add the project root and src to path
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, ROOT)
sys.path.insert(0, os.path.join(ROOT, 'src'))

os.environ.setdefault("LOG_LEVEL", "WARNING")

from youtube_summarizer.core.config import config
from youtube_summarizer.models import TranscriptLine, TranscriptResult
from youtube_summarizer.services import SettingsStore

from tests.fixtures.youtube_pages import (
    CAPTION_BASE,
    CAPTION_XML,
    PLAYER_URL,
    WATCH_PAGE_JSON,
    WATCH_URL,
    caption_track,
    player_response,
)
from tests.mocks.mock_http_client import FakeHttpClient


@pytest.fixture
def fake_http():
    """Fake transport serving a captioned English video."""
    return FakeHttpClient({
        WATCH_URL: WATCH_PAGE_JSON,
        PLAYER_URL: player_response([caption_track("en")]),
        CAPTION_BASE: CAPTION_XML,
    })


@pytest.fixture
def sample_transcript():
    """Small transcript with metadata."""
    return TranscriptResult(
        url="https://youtu.be/dQw4w9WgXcQ",
        video_id="dQw4w9WgXcQ",
        title="Never Gonna Give You Up",
        author="Rick Astley",
        channel_url=f"{config.youtube.base_url}/channel/UCuAXFkgsw1L7xaCfnd5JJOw",
        lines=[
            TranscriptLine(text="Hello", offset_ms=0, duration_ms=1500),
            TranscriptLine(text="world", offset_ms=1500, duration_ms=2000),
        ],
        language_code="en"
    )


@pytest.fixture
def settings_store(tmp_path):
    """Settings store backed by a temporary file."""
    return SettingsStore(tmp_path / "settings.json")


@pytest.fixture
def mock_llm():
    """Chat model double whose ainvoke returns a fixed answer."""
    llm = MagicMock()
    llm.ainvoke = AsyncMock(return_value=MagicMock(content="A short summary."))
    return llm


@pytest.fixture
def mock_llm_manager(mock_llm):
    manager = MagicMock()
    manager.get_llm.return_value = mock_llm
    return manager
