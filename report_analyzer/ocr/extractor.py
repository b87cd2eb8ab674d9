"""Raster OCR extractor with an optional enhanced second pass."""

import asyncio
import io

from PIL import Image, UnidentifiedImageError

from report_analyzer.analysis.indicators import detect_visual_indicators
from report_analyzer.artifacts.base import BaseExtractor, ProgressCallback, report
from report_analyzer.artifacts.models import ExtractionResult, SourceArtifact
from report_analyzer.logging.logger import Log
from report_analyzer.ocr.base import BaseOcrEngine
from report_analyzer.ocr.enhance import enhance_for_ocr
from report_analyzer.ocr.exceptions import OcrError, OcrFailureError

ENHANCED_MARKER = "--- Enhanced recognition applied (chart/table content detected) ---"
_RETRY_HINT = "Please try another image or a higher-resolution version."


class RasterOcrExtractor(BaseExtractor):
    """Extracts text from images; re-reads chart-like images after enhancement."""

    def __init__(self, *, engine: BaseOcrEngine, binarize_threshold: int = 128) -> None:
        self._engine = engine
        self._binarize_threshold = binarize_threshold

    async def extract(
        self,
        artifact: SourceArtifact,
        on_progress: ProgressCallback | None = None,
    ) -> ExtractionResult:
        report(on_progress, 0.0, "Processing image with OCR...")
        image = self._open_image(artifact)

        first_pass = await self._recognize(image, artifact, "first")
        report(on_progress, 0.5, "First recognition pass complete")

        indicators = detect_visual_indicators(first_pass)
        if not indicators.any:
            report(on_progress, 1.0, "Recognition complete")
            return self._result(artifact, first_pass, enhanced=False)

        Log.info(
            f"Chart/table indicators in '{artifact.name}', running enhanced pass",
            chart_terms=",".join(indicators.chart_terms),
            numeric_density=indicators.numeric_density,
            time_series=indicators.has_time_series,
        )
        report(on_progress, 0.5, "Enhancing image for chart and table recognition...")
        try:
            enhanced_image = await asyncio.to_thread(
                enhance_for_ocr, image, self._binarize_threshold
            )
        except (OSError, ValueError, MemoryError) as exc:
            Log.error(f"Image enhancement failed for '{artifact.name}': {exc}")
            raise OcrFailureError(
                f"Failed to enhance image '{artifact.name}': {exc}. {_RETRY_HINT}"
            ) from exc
        second_pass = await self._recognize(enhanced_image, artifact, "enhanced")
        report(on_progress, 1.0, "Enhanced recognition complete")

        merged = f"{first_pass.strip()}\n\n{ENHANCED_MARKER}\n{second_pass.strip()}"
        return self._result(artifact, merged, enhanced=True)

    @staticmethod
    def _open_image(artifact: SourceArtifact) -> Image.Image:
        try:
            image = Image.open(io.BytesIO(artifact.data))
            image.load()
        except (UnidentifiedImageError, Image.DecompressionBombError, OSError, ValueError) as exc:
            raise OcrFailureError(
                f"Failed to read image '{artifact.name}': {exc}. {_RETRY_HINT}"
            ) from exc
        if image.mode not in ("RGB", "L"):
            image = image.convert("RGB")
        return image

    async def _recognize(
        self,
        image: Image.Image,
        artifact: SourceArtifact,
        pass_name: str,
    ) -> str:
        try:
            return await asyncio.to_thread(self._engine.recognize, image)
        except OcrError as exc:
            Log.error(f"OCR {pass_name} pass failed for '{artifact.name}': {exc}")
            raise OcrFailureError(
                f"Failed to extract text from image '{artifact.name}' "
                f"({pass_name} pass): {exc}. {_RETRY_HINT}"
            ) from exc

    @staticmethod
    def _result(artifact: SourceArtifact, text: str, *, enhanced: bool) -> ExtractionResult:
        recognized = text.replace(ENHANCED_MARKER, "").strip()
        if recognized:
            return ExtractionResult(text=text.strip(), page_count=1, enhanced_ocr_applied=enhanced)
        Log.warning(f"OCR found no text in '{artifact.name}'")
        return ExtractionResult(
            text=f"No text could be recognized in image '{artifact.name}'.",
            page_count=1,
            warnings=("OCR produced no text",),
            is_synthetic=True,
            enhanced_ocr_applied=enhanced,
        )
