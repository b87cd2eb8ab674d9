from report_analyzer.config.settings import Settings
from report_analyzer.ocr.base import BaseOcrEngine
from report_analyzer.ocr.extractor import RasterOcrExtractor
from report_analyzer.ocr.tesseract_adapter import TesseractAdapter


class OcrExtractorFactory:
    """Creates the raster extractor with the configured OCR engine."""

    ENGINES: dict[str, type[TesseractAdapter]] = {
        "tesseract": TesseractAdapter,
    }

    @classmethod
    def create_engine(cls, settings: Settings) -> BaseOcrEngine:
        engine = settings.ocr_engine.lower()
        engine_cls = cls.ENGINES.get(engine)
        if engine_cls is None:
            raise ValueError(
                f"Unknown OCR engine '{engine}'. Choose from: {list(cls.ENGINES)}"
            )
        return engine_cls(languages=settings.ocr_languages)

    @classmethod
    def create(cls, settings: Settings) -> RasterOcrExtractor:
        return RasterOcrExtractor(
            engine=cls.create_engine(settings),
            binarize_threshold=settings.ocr_binarize_threshold,
        )
