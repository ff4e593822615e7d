"""Source format detection and loading."""
from pathlib import Path

import structlog

from study_processing_core.sources.loaders import (
    TextLoader,
    TranscriptCSVLoader,
    TranscriptJSONLoader,
)
from study_processing_core.sources.models import ExtractedText
from study_processing_core.util.errors import UnsupportedSourceError

logger = structlog.get_logger()

LOADERS = [TranscriptJSONLoader(), TranscriptCSVLoader(), TextLoader()]


def detect_source(file_path: str) -> str | None:
    """Detect the format of a source file."""
    path = Path(file_path)
    if not path.is_file():
        return None
    with open(file_path, "rb") as f:
        head = f.read(8192)
    for loader in LOADERS:
        if loader.detect(head, path.suffix.lower()):
            return loader.name
    return None


def get_loader(format_name: str):
    """Get a loader by format name."""
    for loader in LOADERS:
        if loader.name == format_name:
            return loader
    raise UnsupportedSourceError(f"Unknown format: {format_name}")


def load_source(
    file_path: str, format_name: str | None = None, options: dict | None = None
) -> ExtractedText:
    """Load a source file, detecting its format when not given."""
    format_name = format_name or detect_source(file_path)
    if not format_name:
        raise UnsupportedSourceError(
            f"Unsupported or unrecognized source: {Path(file_path).name}"
        )
    extracted = get_loader(format_name).load(file_path, options or {})
    logger.info(
        "source_loaded",
        file=Path(file_path).name,
        format=format_name,
        chars=len(extracted.text),
        segments=len(extracted.segments or []),
    )
    return extracted
