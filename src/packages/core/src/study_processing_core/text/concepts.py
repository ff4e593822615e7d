"""Frequency-based concept extraction."""
import re
from collections import Counter

MAX_CONCEPTS = 15
MIN_WORD_LENGTH = 4

STOP_WORDS = frozenset(
    {
        "the", "is", "at", "which", "on", "and", "a", "an", "in", "to", "of",
        "for", "it", "this", "that", "with", "as", "by", "from", "be", "or",
        "are", "was", "were", "but", "not", "have", "has", "had", "they",
        "you", "we", "can", "will", "if", "your", "their", "about", "more",
        "when", "what", "who", "all", "also", "how", "why", "so", "just",
    }
)

_SYMBOLS = re.compile(r"[^\w\s]")
_NUMERIC = re.compile(r"\d+")


def _is_concept(word: str, min_length: int) -> bool:
    return (
        len(word) >= min_length
        and word not in STOP_WORDS
        and not _NUMERIC.fullmatch(word)
    )


def extract_concepts(
    text: str | None, limit: int = MAX_CONCEPTS, min_length: int = MIN_WORD_LENGTH
) -> list[str]:
    """Return the most frequent non-trivial words, most frequent first.

    Ties keep the order in which the words first appear.
    """
    if not text or limit <= 0:
        return []
    words = _SYMBOLS.sub("", text.lower()).split()
    counts = Counter(w for w in words if _is_concept(w, min_length))
    return [w for w, _ in counts.most_common(limit)]
