class PdfExtractionError(Exception):
    """Raised when a PDF backend cannot decode a document or read a page."""


class PdfDecodeTimeoutError(PdfExtractionError):
    """Raised when decoding a document exceeds the configured ceiling."""
