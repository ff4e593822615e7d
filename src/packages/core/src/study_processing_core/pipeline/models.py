"""Processing result models."""
from pydantic import BaseModel, Field

from study_processing_core.sources.models import SourceType, TranscriptSegment
from study_processing_core.text.chunk import build_chunk_records
from study_processing_core.text.models import ChunkRecord


class ContentMetadata(BaseModel):
    """Size and study-time estimates for processed content."""

    word_count: int
    estimated_study_time_minutes: int
    chunk_count: int


class ProcessedContent(BaseModel):
    """Normalized text, its chunks and concepts."""

    content_id: str
    source_type: SourceType
    text: str
    chunks: list[str]
    metadata: ContentMetadata
    concepts: list[str] = Field(default_factory=list)
    segments: list[TranscriptSegment] | None = None
    title: str = ""
    processed_at: str

    def chunk_records(self) -> list[ChunkRecord]:
        return build_chunk_records(self.chunks, self.content_id)
