"""Boundary-aware text chunking.

Text longer than the chunk size is cut into sections at natural boundaries
(blank lines, markdown headings, chapter/section labels, timestamps) and the
sections are packed greedily into chunks. A section too large for any chunk
on its own falls back to fixed-size windows snapped to whitespace. Each chunk
after the first starts with the tail of the previous one.
"""
import re

import structlog

from study_processing_core.text.models import ChunkingConfig, ChunkRecord
from study_processing_core.util.ids import chunk_id

logger = structlog.get_logger()

# Matches where a new section starts. The match itself stays at the head of
# the section it introduces.
SECTION_BOUNDARY = re.compile(
    r"\n{2,}"
    r"|(?:\r?\n|^)(?:#{1,3}\s|(?:chapter|section)\s|\[?\d{1,2}:\d{2}\]?)",
    re.IGNORECASE,
)

_WHITESPACE = " \n\t\r\f\v"


def resolve_config(
    config: ChunkingConfig | None = None,
    chunk_size: int | None = None,
    overlap: int | None = None,
    mode: str | None = None,
) -> ChunkingConfig:
    """Merge overrides into a config and re-run its clamping."""
    values = (config or ChunkingConfig()).model_dump()
    overrides = {"chunk_size": chunk_size, "overlap": overlap, "mode": mode}
    values.update({k: v for k, v in overrides.items() if v is not None})
    return ChunkingConfig(**values)


def split_sections(text: str) -> list[str]:
    """Split text before every boundary marker.

    Joining the returned sections gives back the input unchanged.
    """
    starts = [m.start() for m in SECTION_BOUNDARY.finditer(text)]
    bounds = [0] + [s for s in starts if s > 0] + [len(text)]
    return [text[a:b] for a, b in zip(bounds, bounds[1:]) if a < b]


def _last_whitespace(text: str, start: int, end: int) -> int:
    """Index of the last whitespace in (start, end], or -1."""
    return max(text.rfind(c, start + 1, end + 1) for c in _WHITESPACE)


def slice_windows(text: str, config: ChunkingConfig) -> list[str]:
    """Cut text into windows of at most chunk_size characters.

    A window ends on the last whitespace at or before its size limit when
    there is one; otherwise it is a hard cut. The next window starts
    `overlap` characters before the previous window's end.
    """
    size, overlap = config.chunk_size, config.overlap
    text = text.rstrip()
    pieces: list[str] = []
    offset = 0
    n = len(text)
    while offset < n:
        end = offset + size
        if end >= n:
            tail = text[offset:].strip()
            if tail:
                pieces.append(tail)
            break
        cut = _last_whitespace(text, offset, end)
        if cut > offset:
            end = cut
        piece = text[offset:end].strip()
        if piece:
            pieces.append(piece)
        next_offset = end - overlap
        # a window snapped far back can leave no room for overlap
        offset = next_offset if next_offset > offset else end
    return pieces


def _carry_overlap(previous: str, section: str, config: ChunkingConfig) -> str:
    """Start a new buffer with the tail of the previous chunk and the section."""
    body = section.lstrip()
    if not body:
        return ""
    keep = min(config.overlap, config.chunk_size - len(body) - 1)
    if keep <= 0 or not previous:
        return body
    return previous[-keep:] + "\n" + body


def _pack_sections(text: str, config: ChunkingConfig) -> list[str]:
    chunks: list[str] = []
    buffer = ""
    for section in split_sections(text):
        if len(buffer) + len(section) <= config.chunk_size:
            buffer += section
            continue

        if buffer.strip():
            chunks.append(buffer.strip())

        if len(section) > config.chunk_size:
            chunks.extend(slice_windows(section, config))
            buffer = ""
        else:
            buffer = _carry_overlap(chunks[-1] if chunks else "", section, config)

    if buffer.strip():
        chunks.append(buffer.strip())
    return chunks


def chunk_text(
    text: str | None,
    config: ChunkingConfig | None = None,
    *,
    chunk_size: int | None = None,
    overlap: int | None = None,
    mode: str | None = None,
) -> list[str]:
    """Split text into ordered, overlapping chunks of at most chunk_size characters."""
    cfg = resolve_config(config, chunk_size=chunk_size, overlap=overlap, mode=mode)
    if not text or not text.strip():
        return []
    if len(text) <= cfg.chunk_size:
        return [text]

    if cfg.mode == "simple":
        chunks = slice_windows(text, cfg)
    else:
        chunks = _pack_sections(text, cfg)

    logger.debug(
        "chunking_complete",
        mode=cfg.mode,
        chars=len(text),
        chunk_size=cfg.chunk_size,
        overlap=cfg.overlap,
        chunks=len(chunks),
    )
    return chunks


def build_chunk_records(chunks: list[str], parent_id: str) -> list[ChunkRecord]:
    """Attach 1-indexed positions and IDs to a chunk list."""
    return [
        ChunkRecord(
            chunk_id=chunk_id(parent_id, i),
            parent_id=parent_id,
            position=i,
            content=c,
        )
        for i, c in enumerate(chunks, start=1)
    ]
