"""Processing pipeline: source text to normalized chunks, metadata and concepts."""
from pathlib import Path
from typing import Sequence

import structlog

from study_processing_core.settings import Settings, get_settings
from study_processing_core.sources.detect import load_source
from study_processing_core.sources.fallback import Strategy, run_strategies
from study_processing_core.sources.models import (
    ExtractedText,
    SourceType,
    TranscriptSegment,
)
from study_processing_core.sources.transcript import (
    is_video_url,
    linearize_segments,
    parse_transcript_response,
    segments_from_data,
    validate_transcript,
    validate_video_url,
)
from study_processing_core.text import (
    ChunkingConfig,
    chunk_text,
    count_words,
    estimate_reading_time,
    extract_concepts,
    normalize,
)
from study_processing_core.pipeline.models import ContentMetadata, ProcessedContent
from study_processing_core.util import (
    ProcessingError,
    TranscriptParseError,
    ValidationError,
    generate_id,
    utc_now_iso,
)

logger = structlog.get_logger()


def _finish(
    source_type: SourceType,
    text: str,
    chunks: list[str],
    settings: Settings,
    title: str = "",
    segments: list[TranscriptSegment] | None = None,
) -> ProcessedContent:
    metadata = ContentMetadata(
        word_count=count_words(text),
        estimated_study_time_minutes=estimate_reading_time(text, settings.words_per_minute),
        chunk_count=len(chunks),
    )
    result = ProcessedContent(
        content_id=generate_id(),
        source_type=source_type,
        text=text,
        chunks=chunks,
        metadata=metadata,
        concepts=extract_concepts(text, limit=settings.max_concepts),
        segments=segments,
        title=title,
        processed_at=utc_now_iso(),
    )
    logger.info(
        "content_processed",
        content_id=result.content_id,
        source_type=source_type,
        words=metadata.word_count,
        chunks=metadata.chunk_count,
        concepts=len(result.concepts),
    )
    return result


def process_text(
    text: str | None,
    config: ChunkingConfig | None = None,
    settings: Settings | None = None,
    source_type: SourceType = "text",
    title: str = "",
) -> ProcessedContent:
    """Normalize and chunk a single text."""
    settings = settings or get_settings()
    cfg = config or settings.chunking_config()
    cleaned = normalize(text)
    chunks = chunk_text(cleaned, cfg)
    return _finish(source_type, cleaned, chunks, settings, title=title)


def process_document(
    pages: Sequence[str],
    config: ChunkingConfig | None = None,
    settings: Settings | None = None,
    title: str = "",
) -> ProcessedContent:
    """Normalize and chunk a document page by page.

    Chunks never span a page break; empty pages are skipped.
    """
    settings = settings or get_settings()
    cfg = config or settings.chunking_config()
    kept: list[str] = []
    chunks: list[str] = []
    for number, page in enumerate(pages, start=1):
        cleaned = normalize(page)
        if not cleaned:
            logger.debug("page_empty", page=number)
            continue
        page_chunks = chunk_text(cleaned, cfg)
        chunks.extend(page_chunks)
        kept.append(cleaned)
        logger.debug("page_chunked", page=number, chunks=len(page_chunks))
    return _finish("document", "\n\n".join(kept), chunks, settings, title=title)


def process_transcript(
    segments: Sequence[TranscriptSegment],
    settings: Settings | None = None,
    title: str = "",
) -> ProcessedContent:
    """Use transcript segments directly as chunks, without re-chunking."""
    settings = settings or get_settings()
    kept = [s for s in segments if s.content.strip()]
    chunks = [normalize(s.render()) for s in kept]
    text = normalize(linearize_segments(kept))
    return _finish("video", text, chunks, settings, title=title, segments=kept)


def process_extracted(
    extracted: ExtractedText,
    config: ChunkingConfig | None = None,
    settings: Settings | None = None,
) -> ProcessedContent:
    """Process loader output according to what it carries."""
    if extracted.segments:
        return process_transcript(extracted.segments, settings, title=extracted.title)
    if extracted.pages:
        return process_document(extracted.pages, config, settings, title=extracted.title)
    return process_text(
        extracted.text,
        config,
        settings,
        source_type=extracted.source_type,
        title=extracted.title,
    )


def process_file(
    file_path: str | Path,
    config: ChunkingConfig | None = None,
    settings: Settings | None = None,
) -> ProcessedContent:
    """Load a source file and process it."""
    extracted = load_source(str(file_path))
    return process_extracted(extracted, config, settings)


def process_video(
    url: str,
    strategies: Sequence[Strategy],
    config: ChunkingConfig | None = None,
    settings: Settings | None = None,
) -> ProcessedContent:
    """Fetch a transcript through ordered strategies and process it.

    A strategy's value may be a list of segments, decoded or raw segment
    JSON, or plain transcript text.
    """
    settings = settings or get_settings()
    url = validate_video_url(url)
    result = run_strategies(strategies, url)
    value = result.value
    logger.info("transcript_fetched", url=url, strategy=result.strategy)

    if isinstance(value, list):
        segments = [TranscriptSegment.model_validate(s) for s in value]
        return process_transcript(segments, settings)
    if isinstance(value, dict):
        title, segments = segments_from_data(value)
        return process_transcript(segments, settings, title=title)

    raw = validate_transcript(value, settings.min_transcript_chars)
    try:
        title, segments = parse_transcript_response(raw)
    except TranscriptParseError:
        return process_text(raw, config, settings, source_type="video")
    return process_transcript(segments, settings, title=title)


def process_input(
    data: str | Path,
    strategies: Sequence[Strategy] | None = None,
    config: ChunkingConfig | None = None,
    settings: Settings | None = None,
) -> ProcessedContent:
    """Process a file path, a video link or raw text.

    Processing errors are logged before they propagate.
    """
    try:
        if isinstance(data, Path):
            return process_file(data, config, settings)
        if is_video_url(data):
            if not strategies:
                raise ValidationError("Video links need at least one transcript strategy")
            return process_video(data, strategies, config, settings)
        return process_text(data, config, settings)
    except ProcessingError as e:
        logger.error("processing_failed", error=str(e), error_type=type(e).__name__)
        raise
