"""Plain text and markdown loader."""
from pathlib import Path

from study_processing_core.sources.loaders.base import BaseLoader
from study_processing_core.sources.models import ExtractedText
from study_processing_core.util.errors import SourceLoadError

TEXT_SUFFIXES = (".txt", ".text", ".md", ".markdown")


class TextLoader(BaseLoader):
    """Loader for plain text notes."""

    name = "text"

    def detect(self, head: bytes, suffix: str) -> bool:
        return suffix in TEXT_SUFFIXES and b"\x00" not in head

    def load(self, file_path: str, options: dict) -> ExtractedText:
        path = Path(file_path)
        encoding = options.get("encoding", "utf-8")
        try:
            text = path.read_text(encoding=encoding, errors="replace")
        except (OSError, LookupError) as e:
            raise SourceLoadError(f"Could not read {path.name}: {e}") from e
        return ExtractedText(
            source_type="text",
            text=text,
            title=path.stem,
            metadata={"file_name": path.name},
        )
