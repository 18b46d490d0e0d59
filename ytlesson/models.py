"""Data models for transcript results."""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class TranscriptResult:
    """Transcript text handed back to callers."""
    transcript: str
    is_mock_transcript: bool = False  # True when the text is the placeholder


@dataclass(frozen=True)
class RealTranscript:
    """Transcript provided by the transcript service."""
    text: str
    flagged_mock: bool = False  # The service may itself report mock content

    def to_result(self) -> TranscriptResult:
        return TranscriptResult(transcript=self.text, is_mock_transcript=self.flagged_mock)


@dataclass(frozen=True)
class MockTranscript:
    """Placeholder used when the real transcript could not be fetched."""
    text: str

    def to_result(self) -> TranscriptResult:
        return TranscriptResult(transcript=self.text, is_mock_transcript=True)


TranscriptOutcome = Union[RealTranscript, MockTranscript]
