"""YouTube video ID extraction and thumbnail URLs."""

import re
from typing import Optional

# Greedy prefix: when a URL holds several separators the last one wins
VIDEO_ID_PATTERN = re.compile(
    r'^.*(youtu.be/|v/|u/\w/|embed/|watch\?v=|&v=)([^#&?]*).*',
    re.ASCII,
)

VIDEO_ID_LENGTH = 11

THUMBNAIL_URL_TEMPLATE = "https://img.youtube.com/vi/{video_id}/0.jpg"


def extract_youtube_video_id(url: str) -> Optional[str]:
    """
    Extract the video ID from a YouTube URL.

    Handles youtu.be/, /v/, /u/<x>/, /embed/, watch?v= and &v= URLs. The
    text following the separator, up to the next '#', '&' or '?', is the
    candidate; it is accepted only when it is exactly 11 characters long.

    Args:
        url: YouTube video URL

    Returns:
        The 11-character video ID, or None if none was found
    """
    match = VIDEO_ID_PATTERN.match(url)
    if match and len(match.group(2)) == VIDEO_ID_LENGTH:
        return match.group(2)
    return None


def get_youtube_thumbnail_url(video_id: str) -> str:
    """Get the thumbnail image URL for a video ID."""
    return THUMBNAIL_URL_TEMPLATE.format(video_id=video_id)
