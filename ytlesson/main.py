"""Interactive main entry point for YouTube video lookups."""

import sys
from dataclasses import dataclass
from typing import Optional

from ytlesson.config import Config
from ytlesson.logger import setup_logging
from ytlesson.models import TranscriptResult
from ytlesson.timestamps import extract_start_time, format_seconds
from ytlesson.transcript_client import fetch_transcript
from ytlesson.video_id import extract_youtube_video_id, get_youtube_thumbnail_url

PREVIEW_CHARS = 500


@dataclass
class VideoInfo:
    """Everything looked up for a single video URL."""
    video_id: str
    thumbnail_url: str
    start_seconds: int
    transcript: TranscriptResult


def process_url(url: str) -> Optional[VideoInfo]:
    """
    Look up a single video: ID, thumbnail, start offset and transcript.

    Args:
        url: YouTube video URL

    Returns:
        VideoInfo, or None if no video ID could be found in the URL
    """
    video_id = extract_youtube_video_id(url)
    if video_id is None:
        print(f"⚠ Could not find a video ID in: {url}")
        return None

    print(f"✓ Video ID: {video_id}")
    print("Fetching transcript...")
    transcript = fetch_transcript(video_id)

    return VideoInfo(
        video_id=video_id,
        thumbnail_url=get_youtube_thumbnail_url(video_id),
        start_seconds=extract_start_time(url),
        transcript=transcript,
    )


def print_video_info(info: VideoInfo) -> None:
    print("=" * 60)
    print(f"Video ID:   {info.video_id}")
    print(f"Thumbnail:  {info.thumbnail_url}")
    print(f"Starts at:  {format_seconds(info.start_seconds)}")
    print("=" * 60)
    if info.transcript.is_mock_transcript:
        print("⚠ Transcript unavailable - showing placeholder text")
    text = info.transcript.transcript
    print(text[:PREVIEW_CHARS] + ("..." if len(text) > PREVIEW_CHARS else ""))
    print("=" * 60)


def main():
    """Interactive main function."""
    print("=" * 60)
    print("YouTube Lesson Lookup")
    print("=" * 60)
    print()

    # Validate configuration
    try:
        Config.validate()
    except ValueError as e:
        print(f"✗ Configuration Error: {str(e)}", file=sys.stderr)
        print("\nPlease set TRANSCRIPT_API_URL in your .env file.")
        sys.exit(1)

    setup_logging(Config.LOG_LEVEL)

    while True:
        print()
        print("-" * 60)
        url = input("Please paste the URL of the YouTube video: ").strip()

        if not url:
            print("No URL provided. Exiting...")
            break

        print()
        info = process_url(url)
        if info:
            print()
            print_video_info(info)

        print()
        another = input("Would you like to look up another video? (y/n): ").strip().lower()
        if another not in ('y', 'yes'):
            break

    print()
    print("Thank you for using YouTube Lesson Lookup!")


if __name__ == "__main__":
    main()
