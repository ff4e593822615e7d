"""JSON transcript loader."""
from pathlib import Path

from study_processing_core.sources.loaders.base import BaseLoader
from study_processing_core.sources.models import ExtractedText
from study_processing_core.sources.transcript import (
    linearize_segments,
    parse_transcript_response,
    strip_code_fences,
)
from study_processing_core.util.errors import SourceLoadError, TranscriptParseError


class TranscriptJSONLoader(BaseLoader):
    """Loader for timestamped transcripts stored as JSON."""

    name = "transcript_json"

    def detect(self, head: bytes, suffix: str) -> bool:
        if suffix != ".json":
            return False
        text = strip_code_fences(head.decode("utf-8", errors="replace")).strip()
        return text.startswith("{") or text.startswith("[")

    def load(self, file_path: str, options: dict) -> ExtractedText:
        path = Path(file_path)
        try:
            raw = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise SourceLoadError(f"Could not read {path.name}: {e}") from e
        try:
            title, segments = parse_transcript_response(raw)
        except TranscriptParseError as e:
            raise SourceLoadError(f"Transcript JSON parse error in {path.name}: {e}") from e
        return ExtractedText(
            source_type="video",
            text=linearize_segments(segments),
            title=title or path.stem,
            segments=segments,
            metadata={"file_name": path.name},
        )
