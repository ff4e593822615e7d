"""Processing settings."""
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from study_processing_core.text.models import (
    DEFAULT_CHUNK_SIZE,
    DEFAULT_OVERLAP,
    ChunkingConfig,
    ChunkMode,
)


class Settings(BaseSettings):
    """Application settings, read from STUDY_* environment variables."""

    model_config = SettingsConfigDict(env_prefix="STUDY_", env_file=".env", extra="ignore")

    chunk_size: int = DEFAULT_CHUNK_SIZE
    chunk_overlap: int = DEFAULT_OVERLAP
    chunk_mode: ChunkMode = "boundary"
    max_concepts: int = 15
    words_per_minute: int = 200
    min_transcript_chars: int = 100
    log_level: str = "INFO"
    log_json: bool = True

    def chunking_config(self) -> ChunkingConfig:
        """Build the chunking config these settings describe."""
        return ChunkingConfig(
            chunk_size=self.chunk_size,
            overlap=self.chunk_overlap,
            mode=self.chunk_mode,
        )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings."""
    return Settings()
