"""Transcript parsing and validation."""
import json
import re
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from study_processing_core.sources.models import TranscriptSegment
from study_processing_core.util.errors import (
    InvalidVideoURLError,
    TranscriptParseError,
    TranscriptUnavailableError,
)

VIDEO_URL = re.compile(
    r"^(https?://)?(www\.)?(youtube\.com/watch\?v=|youtu\.be/)[\w-]{11}"
)

MIN_TRANSCRIPT_CHARS = 100

ERROR_CODES = {
    "ERROR: INCOMPLETE_CONTENT": (
        "Video is too long to process fully. "
        "Please try a shorter video or paste the transcript."
    ),
    "ERROR: NO_CAPTIONS": (
        "This video has no captions/subtitles, which are required for analysis."
    ),
    "ERROR: ACCESS_DENIED": (
        "Unable to access this video. It might be private or region-locked."
    ),
}

FAILURE_PHRASES = (
    "cannot access",
    "unable to access",
    "text-based ai",
    "don't have access",
    "no transcript",
    "no subtitles",
    "caption unavailable",
)

_FENCE = re.compile(r"^\s*```(?:json)?\s*|\s*```\s*$", re.IGNORECASE)


def is_video_url(text: str) -> bool:
    """Check whether text looks like a video link."""
    return "youtube.com" in text or "youtu.be" in text


def validate_video_url(url: str) -> str:
    """Return the stripped URL, or raise if it is not a standard video link."""
    url = url.strip()
    if not VIDEO_URL.match(url):
        raise InvalidVideoURLError(
            "Invalid YouTube URL format. Please use a standard video link."
        )
    return url


def strip_code_fences(raw: str) -> str:
    """Remove a surrounding ``` or ```json fence."""
    return _FENCE.sub("", raw)


def segments_from_data(data: Any) -> tuple[str, list[TranscriptSegment]]:
    """Extract the title and segments from decoded transcript JSON."""
    title = ""
    items = data
    if isinstance(data, dict):
        title = str(data.get("title") or "")
        items = data.get("chunks", data.get("segments"))
    if not isinstance(items, list):
        raise TranscriptParseError("Transcript has no list of segments")

    segments = []
    for i, item in enumerate(items):
        if not isinstance(item, dict):
            raise TranscriptParseError(f"Transcript segment {i + 1} is not an object")
        try:
            segments.append(TranscriptSegment.model_validate(item))
        except PydanticValidationError as e:
            raise TranscriptParseError(f"Transcript segment {i + 1} is invalid: {e}") from e
    return title, segments


def parse_transcript_response(raw: str) -> tuple[str, list[TranscriptSegment]]:
    """Parse a JSON transcript, optionally wrapped in a code fence."""
    try:
        data = json.loads(strip_code_fences(raw))
    except json.JSONDecodeError as e:
        raise TranscriptParseError(f"Transcript JSON parse error: {e}") from e
    return segments_from_data(data)


def linearize_segments(segments: list[TranscriptSegment]) -> str:
    """Join segments into one text, a paragraph per segment."""
    return "\n\n".join(s.render() for s in segments)


def validate_transcript(text: str | None, min_chars: int = MIN_TRANSCRIPT_CHARS) -> str:
    """Reject transcripts that report an error, an access failure, or are too short."""
    text = text or ""
    for code, message in ERROR_CODES.items():
        if code in text:
            raise TranscriptUnavailableError(message)

    lowered = text.lower()
    if any(phrase in lowered for phrase in FAILURE_PHRASES):
        raise TranscriptUnavailableError(
            "Unable to process video: Transcript unavailable or access restricted."
        )

    if len(text) < min_chars:
        raise TranscriptUnavailableError(
            "Transcript too short or unavailable. Please try a different video."
        )
    return text
