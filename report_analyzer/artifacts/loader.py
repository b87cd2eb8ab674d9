import mimetypes
from pathlib import Path

from report_analyzer.artifacts.exceptions import ArtifactTooLargeError
from report_analyzer.artifacts.models import SourceArtifact

_FALLBACK_MEDIA_TYPE = "application/octet-stream"


class ArtifactLoader:
    """Reads an upload from disk and enforces the byte-size ceiling."""

    def __init__(self, max_bytes: int) -> None:
        self._max_bytes = max_bytes

    def load(self, path: Path, media_type: str | None = None) -> SourceArtifact:
        """Read *path* into a SourceArtifact.

        The media type is guessed from the file extension when not given.

        Raises:
            FileNotFoundError: if the file does not exist.
            ArtifactTooLargeError: if the file is larger than the ceiling.
        """
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")
        size = path.stat().st_size
        self.check_size(size, path.name)
        data = path.read_bytes()
        return SourceArtifact(
            data=data,
            media_type=media_type or self._guess_media_type(path),
            name=path.name,
            size_bytes=len(data),
        )

    def accept(self, data: bytes, media_type: str, name: str) -> SourceArtifact:
        """Accept an in-memory upload."""
        self.check_size(len(data), name)
        return SourceArtifact.from_bytes(data, media_type, name)

    def check_size(self, size: int, name: str) -> None:
        if size > self._max_bytes:
            raise ArtifactTooLargeError(
                f"'{name}' is {size} bytes, above the {self._max_bytes} byte limit"
            )

    @staticmethod
    def _guess_media_type(path: Path) -> str:
        guessed, _encoding = mimetypes.guess_type(path.name)
        return guessed or _FALLBACK_MEDIA_TYPE
