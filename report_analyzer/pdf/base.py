from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class PositionedWord:
    """A word and its top-left position on the page (y grows downward).

    ``x1`` is the right edge when the backend reports it.
    """

    text: str
    x: float
    y: float
    x1: float | None = None


@dataclass(frozen=True)
class PdfHandle:
    """An opened document as returned by a backend."""

    document: Any
    page_count: int


class BasePdfBackend(ABC):
    """Contract for all PDF decoding adapters."""

    @abstractmethod
    def open(self, pdf_bytes: bytes) -> PdfHandle:
        """Decode PDF bytes into a document handle.

        Raises:
            PdfExtractionError: if the bytes cannot be decoded.
        """

    @abstractmethod
    def page_words(self, handle: PdfHandle, page_index: int) -> list[PositionedWord]:
        """Return the positioned words of one zero-based page.

        Raises:
            PdfExtractionError: if the page cannot be read.
        """

    @abstractmethod
    def close(self, handle: PdfHandle) -> None:
        """Release the document."""
