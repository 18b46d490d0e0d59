"""Transcript fetching through the server-side transcript endpoint."""

import asyncio
import logging
from typing import Any, Dict, Optional

import httpx

from ytlesson.config import Config
from ytlesson.models import MockTranscript, RealTranscript, TranscriptOutcome, TranscriptResult

logger = logging.getLogger(__name__)

DEFAULT_ERROR_MESSAGE = "Failed to fetch transcript"

# Returned whenever the real transcript can't be fetched
MOCK_TRANSCRIPT = """Good morning class! Today we're going to be learning about fractions.
Fractions are a way to represent parts of a whole.
For example, if I have a pizza and cut it into 8 slices, each slice is 1/8 of the whole pizza.
Now, who can tell me what the top number in a fraction is called?
[Student responds]
That's right, it's called the numerator. And the bottom number?
[Student responds]
Correct! It's called the denominator.
Let's practice with some examples. If I have 3 out of 4 pieces of a chocolate bar, what fraction would that be?
[Students respond]
Yes, that would be 3/4. The numerator is 3, and the denominator is 4.
Now let's talk about equivalent fractions..."""


class TranscriptServiceError(Exception):
    """The transcript endpoint failed or answered with something unusable."""


def _read_body(response: httpx.Response) -> Dict[str, Any]:
    """Parse a response body that must be a JSON object."""
    try:
        data = response.json()
    except ValueError as e:
        raise TranscriptServiceError(f"Invalid JSON from transcript service: {e}") from e
    if not isinstance(data, dict):
        raise TranscriptServiceError(f"Unexpected response from transcript service: {data!r}")
    return data


async def _request_transcript(
    client: httpx.AsyncClient,
    endpoint: str,
    video_id: str,
) -> TranscriptOutcome:
    """Make a single request to the transcript endpoint; raises on any failure."""
    response = await client.post(endpoint, json={'videoId': video_id})

    if not response.is_success:
        error_data = _read_body(response)
        raise TranscriptServiceError(
            f"HTTP {response.status_code}: {error_data.get('error') or DEFAULT_ERROR_MESSAGE}"
        )

    data = _read_body(response)

    if not data.get('success'):
        raise TranscriptServiceError(data.get('error') or DEFAULT_ERROR_MESSAGE)

    transcript = data.get('transcript')
    if not isinstance(transcript, str) or not transcript:
        raise TranscriptServiceError("Transcript service reported success without a transcript")

    return RealTranscript(text=transcript, flagged_mock=bool(data.get('isMockTranscript') or False))


async def fetch_transcript_outcome(
    video_id: str,
    client: Optional[httpx.AsyncClient] = None,
    endpoint: Optional[str] = None,
) -> TranscriptOutcome:
    """
    Fetch the transcript for a video, falling back to placeholder text.

    Args:
        video_id: YouTube video ID
        client: Optional shared HTTP client; a short-lived one is used if omitted
        endpoint: Transcript endpoint URL (defaults to Config.TRANSCRIPT_API_URL)

    Returns:
        RealTranscript on success, MockTranscript on any failure
    """
    endpoint = endpoint or Config.TRANSCRIPT_API_URL

    try:
        if client is not None:
            outcome = await _request_transcript(client, endpoint, video_id)
        else:
            async with httpx.AsyncClient(timeout=Config.REQUEST_TIMEOUT) as own_client:
                outcome = await _request_transcript(own_client, endpoint, video_id)
    except Exception as e:
        logger.error(f"Error fetching YouTube transcript for {video_id}: {e}")
        return MockTranscript(text=MOCK_TRANSCRIPT)

    if outcome.flagged_mock:
        logger.warning(f"Transcript service returned mock content for {video_id}")
    else:
        logger.info(f"Fetched transcript for {video_id} ({len(outcome.text)} chars)")
    return outcome


async def get_youtube_transcript(
    video_id: str,
    *,
    client: Optional[httpx.AsyncClient] = None,
    endpoint: Optional[str] = None,
) -> TranscriptResult:
    """
    Fetch the transcript for a YouTube video via the transcript endpoint.

    Never raises: when the endpoint is unreachable or reports a failure, the
    result holds placeholder text and is_mock_transcript is True.
    """
    outcome = await fetch_transcript_outcome(video_id, client=client, endpoint=endpoint)
    return outcome.to_result()


def fetch_transcript(video_id: str, endpoint: Optional[str] = None) -> TranscriptResult:
    """
    Blocking wrapper around get_youtube_transcript for synchronous callers.

    Starts its own event loop, so it raises RuntimeError when called while a
    loop is already running (async code, notebooks); await
    get_youtube_transcript there instead.
    """
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        return asyncio.run(get_youtube_transcript(video_id, endpoint=endpoint))
    raise RuntimeError(
        "fetch_transcript() cannot be called from a running event loop; "
        "await get_youtube_transcript() instead"
    )
