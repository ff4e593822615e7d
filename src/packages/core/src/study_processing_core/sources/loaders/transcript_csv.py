"""CSV transcript loader."""
import csv
from pathlib import Path
from typing import Any

import pandas as pd

from study_processing_core.sources.loaders.base import BaseLoader
from study_processing_core.sources.models import ExtractedText, TranscriptSegment
from study_processing_core.sources.transcript import linearize_segments
from study_processing_core.util.errors import SourceLoadError

CONTENT_COLUMNS = ("content", "text", "caption")


def _cell(v: Any) -> str:
    if v is None or (isinstance(v, float) and pd.isna(v)):
        return ""
    return str(v).strip()


class TranscriptCSVLoader(BaseLoader):
    """Loader for caption exports with timestamp and content columns."""

    name = "transcript_csv"

    def detect(self, head: bytes, suffix: str) -> bool:
        if suffix != ".csv":
            return False
        try:
            text = head.decode("utf-8", errors="replace")
            header = next(csv.reader([text.split("\n")[0]]), [])
        except csv.Error:
            return False
        columns = {c.strip().lower() for c in header}
        return "timestamp" in columns and any(c in columns for c in CONTENT_COLUMNS)

    def load(self, file_path: str, options: dict) -> ExtractedText:
        path = Path(file_path)
        try:
            df = pd.read_csv(
                file_path,
                dtype=str,
                keep_default_na=False,
                encoding="utf-8",
                on_bad_lines="skip",
            )
        except Exception as e:
            raise SourceLoadError(f"CSV parse error: {e}") from e

        df.columns = [str(c).strip().lower() for c in df.columns]
        content_col = next((c for c in CONTENT_COLUMNS if c in df.columns), None)
        if "timestamp" not in df.columns or content_col is None:
            raise SourceLoadError(
                f"CSV transcript needs 'timestamp' and 'content' columns, got: {list(df.columns)}"
            )

        segments = []
        for row in df.fillna("").to_dict("records"):
            content = _cell(row.get(content_col))
            if not content:
                continue
            segments.append(
                TranscriptSegment(
                    timestamp=_cell(row.get("timestamp")),
                    topic=_cell(row.get("topic")),
                    content=content,
                )
            )
        return ExtractedText(
            source_type="video",
            text=linearize_segments(segments),
            title=path.stem,
            segments=segments,
            metadata={"file_name": path.name, "rows": len(df)},
        )
