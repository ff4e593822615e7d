"""Source loading, transcripts and fallback strategies."""
from study_processing_core.sources.models import ExtractedText, TranscriptSegment, SourceType
from study_processing_core.sources.detect import detect_source, get_loader, load_source
from study_processing_core.sources.transcript import (
    is_video_url,
    validate_video_url,
    parse_transcript_response,
    linearize_segments,
    validate_transcript,
)
from study_processing_core.sources.fallback import StrategyResult, run_strategies

__all__ = [
    "ExtractedText",
    "TranscriptSegment",
    "SourceType",
    "detect_source",
    "get_loader",
    "load_source",
    "is_video_url",
    "validate_video_url",
    "parse_transcript_response",
    "linearize_segments",
    "validate_transcript",
    "StrategyResult",
    "run_strategies",
]
