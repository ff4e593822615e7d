"""Processing pipeline."""
from study_processing_core.pipeline.models import ContentMetadata, ProcessedContent
from study_processing_core.pipeline.process import (
    process_text,
    process_document,
    process_transcript,
    process_extracted,
    process_file,
    process_video,
    process_input,
)

__all__ = [
    "ContentMetadata",
    "ProcessedContent",
    "process_text",
    "process_document",
    "process_transcript",
    "process_extracted",
    "process_file",
    "process_video",
    "process_input",
]
