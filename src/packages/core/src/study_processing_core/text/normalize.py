"""Whitespace normalization and light text statistics."""
import math
import re

_LINE_BREAKS = re.compile(r"\r\n?")
_INLINE_SPACE = re.compile(r"[ \t\f\v]+")
_PARAGRAPH_BREAK = re.compile(r"[ \t]*\n\s*\n[ \t]*")

WORDS_PER_MINUTE = 200


def normalize(text: str | None) -> str:
    """Collapse whitespace runs, reduce blank-line runs to one paragraph break, trim."""
    if not text:
        return ""
    text = _LINE_BREAKS.sub("\n", text)
    text = _INLINE_SPACE.sub(" ", text)
    text = _PARAGRAPH_BREAK.sub("\n\n", text)
    return text.strip()


def split_into_paragraphs(text: str | None) -> list[str]:
    """Split text on blank lines, dropping empty paragraphs."""
    if not text:
        return []
    return [p for p in re.split(r"\n\s*\n", text) if p.strip()]


def count_words(text: str | None) -> int:
    """Count whitespace-separated words."""
    if not text:
        return 0
    return len(text.split())


def estimate_reading_time(text: str | None, words_per_minute: int = WORDS_PER_MINUTE) -> int:
    """Estimate reading time in whole minutes, rounded up."""
    words = count_words(text)
    if words == 0:
        return 0
    return math.ceil(words / max(words_per_minute, 1))
