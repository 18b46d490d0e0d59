"""Test configuration and fixtures."""
import pytest
import os
import sys
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

TRANSCRIPT_BASE_URL = "https://lessons.test"
TRANSCRIPT_PATH = "/api/transcript"


@pytest.fixture
def transcript_endpoint():
    """Transcript endpoint URL used by client tests."""
    return TRANSCRIPT_BASE_URL + TRANSCRIPT_PATH


@pytest.fixture
def video_id():
    """A well-formed 11-character video ID."""
    return "dQw4w9WgXcQ"


@pytest.fixture
def sample_transcript_response():
    """Successful transcript service response body."""
    return {
        "success": True,
        "transcript": "Today we will learn about fractions.",
    }
