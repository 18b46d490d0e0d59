"""Tests for video ID extraction and thumbnail URLs."""
import pytest

from ytlesson.video_id import extract_youtube_video_id, get_youtube_thumbnail_url


class TestExtractYouTubeVideoId:
    """Test extract_youtube_video_id across URL shapes."""

    @pytest.mark.parametrize("url", [
        "https://www.youtube.com/watch?v=dQw4w9WgXcQ",
        "https://youtube.com/watch?v=dQw4w9WgXcQ&t=42s",
        "https://youtu.be/dQw4w9WgXcQ",
        "https://youtu.be/dQw4w9WgXcQ?t=10",
        "https://www.youtube.com/embed/dQw4w9WgXcQ",
        "https://www.youtube.com/v/dQw4w9WgXcQ?version=3",
        "https://www.youtube.com/u/1/dQw4w9WgXcQ",
        "https://www.youtube.com/watch?feature=share&v=dQw4w9WgXcQ",
        "https://www.youtube.com/watch?v=dQw4w9WgXcQ#comments",
    ])
    def test_known_url_shapes(self, url):
        assert extract_youtube_video_id(url) == "dQw4w9WgXcQ"

    def test_watch_url_returns_exact_id(self):
        assert extract_youtube_video_id("https://www.youtube.com/watch?v=ABCDEFGHIJK") == "ABCDEFGHIJK"

    def test_ten_character_candidate_rejected(self):
        assert extract_youtube_video_id("https://www.youtube.com/watch?v=dQw4w9WgXc") is None

    def test_twelve_character_candidate_rejected(self):
        assert extract_youtube_video_id("https://youtu.be/dQw4w9WgXcQQ") is None

    def test_no_separator_returns_none(self):
        assert extract_youtube_video_id("https://example.com/video/dQw4w9WgXcQ") is None

    def test_empty_string_returns_none(self):
        assert extract_youtube_video_id("") is None

    def test_character_set_is_not_checked(self):
        """Any 11 characters after a separator are accepted."""
        assert extract_youtube_video_id("https://youtu.be/!!!!!!!!!!!") == "!!!!!!!!!!!"

    def test_last_separator_wins(self):
        url = "https://www.youtube.com/embed/AAAAAAAAAAA?list=x&v=BBBBBBBBBBB"
        assert extract_youtube_video_id(url) == "BBBBBBBBBBB"

    def test_idempotent(self):
        url = "https://youtu.be/dQw4w9WgXcQ"
        assert extract_youtube_video_id(url) == extract_youtube_video_id(url)


class TestGetYouTubeThumbnailUrl:
    """Test get_youtube_thumbnail_url formatting."""

    def test_thumbnail_url(self):
        assert get_youtube_thumbnail_url("abc") == "https://img.youtube.com/vi/abc/0.jpg"

    def test_thumbnail_url_for_real_id(self, video_id):
        assert get_youtube_thumbnail_url(video_id) == f"https://img.youtube.com/vi/{video_id}/0.jpg"
