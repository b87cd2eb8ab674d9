from abc import ABC, abstractmethod
from collections.abc import Callable

from report_analyzer.artifacts.models import ExtractionResult, SourceArtifact

ProgressCallback = Callable[[float, str], None]
"""Receives (fraction of the extraction stage completed in 0..1, message)."""


def report(on_progress: ProgressCallback | None, fraction: float, message: str) -> None:
    if on_progress is not None:
        on_progress(max(0.0, min(1.0, fraction)), message)


class BaseExtractor(ABC):
    """Contract for all artifact-to-text extractors."""

    @abstractmethod
    async def extract(
        self,
        artifact: SourceArtifact,
        on_progress: ProgressCallback | None = None,
    ) -> ExtractionResult:
        """Turn *artifact* into text.

        Args:
            artifact: The accepted upload.
            on_progress: Optional callback for sub-stage progress.

        Returns:
            ExtractionResult whose ``text`` is never empty.
        """
