"""Conversion of YouTube time offsets (like 1h2m3s) to seconds."""

import re
from urllib.parse import urlsplit, parse_qs

HOURS_PATTERN = re.compile(r'(\d+)h', re.ASCII)
MINUTES_PATTERN = re.compile(r'(\d+)m', re.ASCII)
SECONDS_PATTERN = re.compile(r'(\d+)s', re.ASCII)
BARE_SECONDS_PATTERN = re.compile(r'\d+', re.ASCII)

# Stays under the interpreter's int/str conversion digit limit (4300)
CHUNK_DIGITS = 4000
CHUNK_BASE = 10 ** CHUNK_DIGITS


def _parse_digits(digits: str) -> int:
    """Convert a digit run of any length to an int."""
    value = 0
    for start in range(0, len(digits), CHUNK_DIGITS):
        chunk = digits[start:start + CHUNK_DIGITS]
        value = value * 10 ** len(chunk) + int(chunk)
    return value


def _int_to_str(value: int) -> str:
    """Render a non-negative int of any size as decimal digits."""
    chunks = []
    while value >= CHUNK_BASE:
        value, chunk = divmod(value, CHUNK_BASE)
        chunks.append(f"{chunk:0{CHUNK_DIGITS}d}")
    chunks.append(str(value))
    return "".join(reversed(chunks))


def convert_youtube_time_to_seconds(time: str) -> int:
    """
    Convert YouTube time format (like 1h2m3s) to seconds.

    Each unit is looked up on its own, so order does not matter and missing
    units count as zero. Input without any unit group gives 0.
    """
    hours = HOURS_PATTERN.search(time)
    minutes = MINUTES_PATTERN.search(time)
    seconds = SECONDS_PATTERN.search(time)

    total_seconds = 0
    if hours:
        total_seconds += _parse_digits(hours.group(1)) * 3600
    if minutes:
        total_seconds += _parse_digits(minutes.group(1)) * 60
    if seconds:
        total_seconds += _parse_digits(seconds.group(1))

    return total_seconds


def extract_start_time(url: str) -> int:
    """
    Get the playback offset a shared link points at, in seconds.

    Reads the 't' parameter from the query string or the fragment
    (watch?v=...&t=1h2m3s, youtu.be/...?t=90, ...#t=2m). Returns 0 when the
    link has no offset.
    """
    parts = urlsplit(url)
    for section in (parts.query, parts.fragment):
        values = parse_qs(section).get('t')
        if not values:
            continue
        value = values[0]
        # Plain numbers are already seconds
        if BARE_SECONDS_PATTERN.fullmatch(value):
            return _parse_digits(value)
        return convert_youtube_time_to_seconds(value)
    return 0


def format_seconds(seconds: int) -> str:
    """Format seconds as HH:MM:SS."""
    hours = seconds // 3600
    minutes = (seconds % 3600) // 60
    secs = seconds % 60
    return f"{_int_to_str(hours).zfill(2)}:{minutes:02d}:{secs:02d}"
