"""Source models."""
from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator

SourceType = Literal["text", "document", "video"]


class TranscriptSegment(BaseModel):
    """A timestamped piece of a transcript."""

    timestamp: str
    topic: str = ""
    content: str

    @field_validator("timestamp", "topic", "content", mode="before")
    @classmethod
    def _stringify(cls, v: Any) -> Any:
        if v is None:
            return ""
        if isinstance(v, (int, float)):
            return str(v)
        return v

    def render(self) -> str:
        """Render as a single transcript line."""
        if self.topic:
            return f"[{self.timestamp}] {self.topic}: {self.content}"
        return f"[{self.timestamp}] {self.content}"


class ExtractedText(BaseModel):
    """Raw text produced by a source loader."""

    source_type: SourceType = "text"
    text: str = ""
    title: str = ""
    pages: list[str] | None = None
    segments: list[TranscriptSegment] | None = None
    metadata: dict[str, Any] = Field(default_factory=dict)
