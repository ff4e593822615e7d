"""Text processing core for study material."""
from study_processing_core.text import chunk_text, extract_concepts, normalize, ChunkingConfig

__all__ = ["chunk_text", "extract_concepts", "normalize", "ChunkingConfig"]
