"""Requests handed to the downstream generation service.

A request is either text or an inline document; the shape is fixed by the
`kind` tag, never inferred from how a caller passed its arguments.
"""
import base64
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field, TypeAdapter


class TextRequest(BaseModel):
    """Plain text content."""

    kind: Literal["text"] = "text"
    content: str
    instruction: str | None = None


class DocumentRequest(BaseModel):
    """Binary document content with its MIME type."""

    kind: Literal["document"] = "document"
    content: bytes
    mime_type: str
    instruction: str | None = None


GenerationRequest = Annotated[Union[TextRequest, DocumentRequest], Field(discriminator="kind")]

_request_adapter = TypeAdapter(GenerationRequest)


def parse_request(data: dict) -> TextRequest | DocumentRequest:
    """Validate a request dict into its concrete type."""
    return _request_adapter.validate_python(data)


def build_parts(
    request: TextRequest | DocumentRequest, instruction: str | None = None
) -> list[dict]:
    """Render a request as content parts, instruction first.

    An explicit instruction takes precedence over the one on the request.
    """
    instruction = instruction or request.instruction
    parts: list[dict] = []
    if instruction:
        parts.append({"text": instruction})
    if isinstance(request, TextRequest):
        parts.append({"text": request.content})
    else:
        parts.append(
            {
                "inline_data": {
                    "mime_type": request.mime_type,
                    "data": base64.b64encode(request.content).decode("ascii"),
                }
            }
        )
    return parts


def build_payload(
    request: TextRequest | DocumentRequest, instruction: str | None = None
) -> dict:
    """Wrap request parts in a single-turn contents payload."""
    return {"contents": [{"parts": build_parts(request, instruction)}]}


def requests_for_chunks(
    chunks: list[str], instruction: str | None = None
) -> list[TextRequest]:
    """One text request per chunk, in chunk order, sharing one instruction."""
    return [TextRequest(content=c, instruction=instruction) for c in chunks]
