"""Chunking configuration and chunk models."""
from typing import Literal

from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator

DEFAULT_CHUNK_SIZE = 1200
DEFAULT_OVERLAP = 200

ChunkMode = Literal["boundary", "simple"]


class ChunkingConfig(BaseModel):
    """Chunk size and overlap, corrected rather than rejected when out of range."""

    model_config = ConfigDict(frozen=True)

    chunk_size: int = DEFAULT_CHUNK_SIZE
    overlap: int = DEFAULT_OVERLAP
    mode: ChunkMode = "boundary"

    @field_validator("chunk_size")
    @classmethod
    def _default_non_positive_size(cls, v: int) -> int:
        return v if v > 0 else DEFAULT_CHUNK_SIZE

    @field_validator("overlap")
    @classmethod
    def _clamp_overlap(cls, v: int, info: ValidationInfo) -> int:
        if v < 0:
            return 0
        size = info.data.get("chunk_size", DEFAULT_CHUNK_SIZE)
        if v >= size:
            # keeps the slicing step (size - overlap) strictly positive
            return size // 2
        return v

    @property
    def step(self) -> int:
        return self.chunk_size - self.overlap


class ChunkRecord(BaseModel):
    """A chunk with its 1-indexed position inside the parent content."""

    chunk_id: str
    parent_id: str
    position: int
    content: str
