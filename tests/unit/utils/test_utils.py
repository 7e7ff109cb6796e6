"""Unit tests for utility functions."""

import pytest

from youtube_summarizer.core.exceptions import InvalidUrlError
from youtube_summarizer.utils.text_utils import (
    clean_code_fences,
    decode_entities,
    format_timestamp,
    seconds_to_ms
)
from youtube_summarizer.utils.youtube_utils import (
    extract_video_id,
    get_channel_url,
    get_thumbnail_url,
    is_valid_video_id,
    is_youtube_url,
    resolve_video_id
)


class TestYouTubeUrlUtils:
    """Tests for YouTube URL utility functions."""

    @pytest.mark.parametrize("url,expected", [
        ("https://www.youtube.com/watch?v=dQw4w9WgXcQ", "dQw4w9WgXcQ"),
        ("https://youtu.be/dQw4w9WgXcQ", "dQw4w9WgXcQ"),
        ("https://youtube.com/watch?v=dQw4w9WgXcQ", "dQw4w9WgXcQ"),
        ("https://www.youtube.com/watch?v=dQw4w9WgXcQ&feature=youtu.be", "dQw4w9WgXcQ"),
        ("https://www.youtube.com/watch?v=dQw4w9WgXcQ&t=42s", "dQw4w9WgXcQ"),
        ("https://www.youtube.com/watch?feature=share&v=dQw4w9WgXcQ", "dQw4w9WgXcQ"),
        ("https://youtu.be/dQw4w9WgXcQ?si=abcdef", "dQw4w9WgXcQ"),
        ("https://www.youtube.com/embed/dQw4w9WgXcQ", "dQw4w9WgXcQ"),
        ("https://www.youtube.com/shorts/dQw4w9WgXcQ", "dQw4w9WgXcQ"),
        ("https://www.youtube.com/live/dQw4w9WgXcQ?feature=shared", "dQw4w9WgXcQ"),
        ("https://www.youtube-nocookie.com/embed/dQw4w9WgXcQ", "dQw4w9WgXcQ"),
        ("https://m.youtube.com/watch?v=dQw4w9WgXcQ", "dQw4w9WgXcQ"),
        ("https://example.com", None),
        ("https://www.youtube.com/watch?v=short", None),
        ("invalid-url", None),
        ("", None),
        (None, None),
    ])
    def test_extract_video_id(self, url, expected):
        """Test YouTube video ID extraction with various inputs."""
        # Act
        result = extract_video_id(url)

        # Assert
        assert result == expected

    def test_resolve_video_id_raises_for_unrecognized_url(self):
        """Test that an URL without an ID raises InvalidUrlError."""
        with pytest.raises(InvalidUrlError) as exc_info:
            resolve_video_id("https://example.com/page")

        assert exc_info.value.kind == "InvalidUrl"
        assert "https://example.com/page" in exc_info.value.message

    @pytest.mark.parametrize("video_id,expected", [
        ("dQw4w9WgXcQ", True),
        ("abc_DEF-123", True),
        ("dQw4w9WgXc", False),
        ("dQw4w9WgXcQQ", False),
        ("dQw4w9WgXc!", False),
        ("", False),
        (None, False),
    ])
    def test_is_valid_video_id(self, video_id, expected):
        assert is_valid_video_id(video_id) == expected

    @pytest.mark.parametrize("url,expected", [
        ("https://www.youtube.com/watch?v=dQw4w9WgXcQ", True),
        ("https://youtu.be/dQw4w9WgXcQ", True),
        ("https://vimeo.com/12345", False),
        ("youtube", False),
        ("", False),
        (None, False),
    ])
    def test_is_youtube_url(self, url, expected):
        assert is_youtube_url(url) == expected


class TestThumbnailUrl:
    """Tests for thumbnail URL construction."""

    @pytest.mark.parametrize("quality,suffix", [
        ("default", "default"),
        ("medium", "mqdefault"),
        ("high", "hqdefault"),
        ("standard", "sddefault"),
        ("maxres", "maxresdefault"),
    ])
    def test_thumbnail_qualities(self, quality, suffix):
        assert get_thumbnail_url("dQw4w9WgXcQ", quality) == \
            f"https://img.youtube.com/vi/dQw4w9WgXcQ/{suffix}.jpg"

    def test_default_quality_is_maxres(self):
        assert get_thumbnail_url("dQw4w9WgXcQ").endswith("/dQw4w9WgXcQ/maxresdefault.jpg")

    def test_unknown_quality_raises(self):
        with pytest.raises(ValueError):
            get_thumbnail_url("dQw4w9WgXcQ", "huge")

    def test_channel_url(self):
        assert get_channel_url("UC123") == "https://www.youtube.com/channel/UC123"
        assert get_channel_url(None) == ""


class TestDecodeEntities:
    """Tests for HTML entity decoding."""

    @pytest.mark.parametrize("text,expected", [
        ("Tom &amp; Jerry", "Tom & Jerry"),
        ("&lt;b&gt;", "<b>"),
        ("say &quot;hi&quot;", 'say "hi"'),
        ("it&#39;s", "it's"),
        ("it&apos;s", "it's"),
        ("&amp;lt;", "&lt;"),
        ("&nbsp;&copy;", "&nbsp;&copy;"),
        ("plain text", "plain text"),
        ("", ""),
    ])
    def test_decode_entities(self, text, expected):
        assert decode_entities(text) == expected


class TestTimeConversion:
    """Tests for seconds to milliseconds conversion."""

    @pytest.mark.parametrize("value,expected", [
        ("0", 0),
        ("1.5", 1500),
        ("12.345", 12345),
        ("0.0005", 1),
        ("1.0004", 1000),
        ("2.0015", 2002),
        ("  3.2 ", 3200),
    ])
    def test_seconds_to_ms(self, value, expected):
        assert seconds_to_ms(value) == expected

    @pytest.mark.parametrize("value", ["abc", "", "NaN", "inf"])
    def test_seconds_to_ms_rejects_invalid(self, value):
        with pytest.raises(ValueError):
            seconds_to_ms(value)

    @pytest.mark.parametrize("ms,expected", [
        (0, "00:00"),
        (61500, "01:01"),
        (3600000, "01:00:00"),
        (3725000, "01:02:05"),
    ])
    def test_format_timestamp(self, ms, expected):
        assert format_timestamp(ms) == expected


def test_clean_code_fences():
    text = "```json\n{\"a\": 1}\n```"
    assert clean_code_fences(text) == '{"a": 1}'
