class OcrError(Exception):
    """Base exception for all OCR-related errors."""


class OcrEngineError(OcrError):
    """Raised by an OCR engine adapter when recognition fails."""


class OcrFailureError(OcrError):
    """Raised when the raster path cannot produce text. Terminal for a run."""
