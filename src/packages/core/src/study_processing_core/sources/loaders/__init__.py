"""Source loaders for notes and transcripts."""
from study_processing_core.sources.loaders.base import BaseLoader
from study_processing_core.sources.loaders.text import TextLoader
from study_processing_core.sources.loaders.transcript_json import TranscriptJSONLoader
from study_processing_core.sources.loaders.transcript_csv import TranscriptCSVLoader

__all__ = ["BaseLoader", "TextLoader", "TranscriptJSONLoader", "TranscriptCSVLoader"]
