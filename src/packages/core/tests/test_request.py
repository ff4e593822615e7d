"""Tests for generation requests."""
import base64

import pytest
from pydantic import ValidationError

from study_processing_core.generation import (
    DocumentRequest,
    TextRequest,
    build_parts,
    build_payload,
    parse_request,
    requests_for_chunks,
)


def test_parse_request_by_kind():
    text = parse_request({"kind": "text", "content": "hello"})
    assert isinstance(text, TextRequest)
    doc = parse_request({"kind": "document", "content": b"%PDF", "mime_type": "application/pdf"})
    assert isinstance(doc, DocumentRequest)
    with pytest.raises(ValidationError):
        parse_request({"kind": "audio", "content": "x"})
    with pytest.raises(ValidationError):
        parse_request({"kind": "document", "content": b"x"})


def test_text_parts():
    parts = build_parts(TextRequest(content="chunk"), instruction="Summarize")
    assert parts == [{"text": "Summarize"}, {"text": "chunk"}]


def test_document_parts():
    request = DocumentRequest(content=b"%PDF-1.7", mime_type="application/pdf")
    payload = build_payload(request)
    inline = payload["contents"][0]["parts"][0]["inline_data"]
    assert inline["mime_type"] == "application/pdf"
    assert base64.b64decode(inline["data"]) == b"%PDF-1.7"


def test_requests_for_chunks_keep_order():
    requests = requests_for_chunks(["one", "two", "three"])
    assert [r.content for r in requests] == ["one", "two", "three"]
    assert all(r.kind == "text" for r in requests)


def test_requests_for_chunks_carry_instruction():
    requests = requests_for_chunks(["first", "second"], instruction="Make flashcards")
    assert [r.instruction for r in requests] == ["Make flashcards"] * 2
    assert build_parts(requests[1]) == [{"text": "Make flashcards"}, {"text": "second"}]
    assert build_parts(requests[0], instruction="Summarize")[0] == {"text": "Summarize"}
    assert build_payload(requests_for_chunks(["bare"])[0]) == {"contents": [{"parts": [{"text": "bare"}]}]}
