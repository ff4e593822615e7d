"""Text normalization, chunking and concept extraction."""
from study_processing_core.text.models import (
    ChunkingConfig,
    ChunkRecord,
    DEFAULT_CHUNK_SIZE,
    DEFAULT_OVERLAP,
)
from study_processing_core.text.normalize import (
    normalize,
    split_into_paragraphs,
    count_words,
    estimate_reading_time,
)
from study_processing_core.text.chunk import chunk_text, split_sections, build_chunk_records
from study_processing_core.text.concepts import extract_concepts, STOP_WORDS

__all__ = [
    "ChunkingConfig",
    "ChunkRecord",
    "DEFAULT_CHUNK_SIZE",
    "DEFAULT_OVERLAP",
    "normalize",
    "split_into_paragraphs",
    "count_words",
    "estimate_reading_time",
    "chunk_text",
    "split_sections",
    "build_chunk_records",
    "extract_concepts",
    "STOP_WORDS",
]
