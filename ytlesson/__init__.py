"""Video IDs, thumbnails, transcripts and time offsets for YouTube videos."""

from ytlesson.models import TranscriptResult
from ytlesson.timestamps import convert_youtube_time_to_seconds
from ytlesson.transcript_client import get_youtube_transcript
from ytlesson.video_id import extract_youtube_video_id, get_youtube_thumbnail_url

__all__ = [
    "TranscriptResult",
    "convert_youtube_time_to_seconds",
    "extract_youtube_video_id",
    "get_youtube_thumbnail_url",
    "get_youtube_transcript",
]
