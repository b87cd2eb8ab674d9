from dataclasses import dataclass, field
from enum import Enum


class MediaRoute(str, Enum):
    """Extraction path chosen for an artifact."""

    PAGINATED = "paginated"
    RASTER = "raster"


@dataclass(frozen=True)
class SourceArtifact:
    """An accepted upload: raw bytes plus the metadata declared by the caller."""

    data: bytes = field(repr=False)
    media_type: str
    name: str
    size_bytes: int

    @classmethod
    def from_bytes(cls, data: bytes, media_type: str, name: str) -> "SourceArtifact":
        return cls(data=data, media_type=media_type, name=name, size_bytes=len(data))


@dataclass(frozen=True)
class ExtractionResult:
    """Text produced by whichever extractor handled the artifact.

    ``text`` is never empty: extractors substitute a placeholder summary and
    set ``is_synthetic`` instead of returning nothing.
    """

    text: str
    page_count: int
    warnings: tuple[str, ...] = ()
    is_synthetic: bool = False
    enhanced_ocr_applied: bool = False
    headings: tuple[str, ...] = ()
    toc_entries: tuple[str, ...] = ()
