"""Utility modules."""
from study_processing_core.util.ids import generate_id, chunk_id
from study_processing_core.util.time import utc_now_iso
from study_processing_core.util.errors import (
    ProcessingError,
    ValidationError,
    UnsupportedSourceError,
    SourceLoadError,
    TranscriptParseError,
    TranscriptUnavailableError,
    InvalidVideoURLError,
    AllStrategiesFailedError,
)

__all__ = [
    "generate_id",
    "chunk_id",
    "utc_now_iso",
    "ProcessingError",
    "ValidationError",
    "UnsupportedSourceError",
    "SourceLoadError",
    "TranscriptParseError",
    "TranscriptUnavailableError",
    "InvalidVideoURLError",
    "AllStrategiesFailedError",
]
