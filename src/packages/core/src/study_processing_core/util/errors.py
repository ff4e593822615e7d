"""Error types raised around the text processing core.

The text functions themselves (normalize, chunk, extract concepts) never
raise; these errors belong to the collaborators that feed them.
"""


class ProcessingError(Exception):
    """Base class for processing errors."""


class ValidationError(ProcessingError):
    """Input failed validation before processing."""


class UnsupportedSourceError(ProcessingError):
    """No loader recognizes the source."""


class SourceLoadError(ProcessingError, ValueError):
    """A recognized source could not be read or parsed."""


class TranscriptParseError(ProcessingError, ValueError):
    """A transcript payload is not valid segment JSON."""


class TranscriptUnavailableError(ProcessingError):
    """The transcript is missing, truncated or inaccessible."""


class InvalidVideoURLError(ValidationError):
    """The video link is not a standard video URL."""


class AllStrategiesFailedError(ProcessingError):
    """Every strategy in a fallback chain failed."""

    def __init__(self, message: str, errors: dict[str, str] | None = None):
        super().__init__(message)
        self.errors = errors or {}
