"""Generation request structures."""
from study_processing_core.generation.request import (
    TextRequest,
    DocumentRequest,
    GenerationRequest,
    parse_request,
    build_parts,
    build_payload,
    requests_for_chunks,
)

__all__ = [
    "TextRequest",
    "DocumentRequest",
    "GenerationRequest",
    "parse_request",
    "build_parts",
    "build_payload",
    "requests_for_chunks",
]
