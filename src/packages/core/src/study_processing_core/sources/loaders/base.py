"""Base loader interface."""
from abc import ABC, abstractmethod

from study_processing_core.sources.models import ExtractedText


class BaseLoader(ABC):
    """Abstract base class for source loaders."""

    name: str = ""

    @abstractmethod
    def detect(self, head: bytes, suffix: str) -> bool:
        """Detect if this loader can handle the file."""
        pass

    @abstractmethod
    def load(self, file_path: str, options: dict) -> ExtractedText:
        """Load the file's text."""
        pass
