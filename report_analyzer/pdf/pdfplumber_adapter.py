import io

import pdfplumber

from report_analyzer.pdf.base import BasePdfBackend, PdfHandle, PositionedWord
from report_analyzer.pdf.exceptions import PdfExtractionError


class PdfPlumberAdapter(BasePdfBackend):
    """Reads positioned words from PDF using pdfplumber."""

    def open(self, pdf_bytes: bytes) -> PdfHandle:
        try:
            pdf = pdfplumber.open(io.BytesIO(pdf_bytes))
        except Exception as exc:
            raise PdfExtractionError(f"pdfplumber decode failed: {exc}") from exc
        try:
            page_count = len(pdf.pages)
        except Exception as exc:
            pdf.close()
            raise PdfExtractionError(f"pdfplumber decode failed: {exc}") from exc
        return PdfHandle(document=pdf, page_count=page_count)

    def page_words(self, handle: PdfHandle, page_index: int) -> list[PositionedWord]:
        try:
            page = handle.document.pages[page_index]
            words = page.extract_words(keep_blank_chars=False, use_text_flow=False)
        except Exception as exc:
            raise PdfExtractionError(
                f"pdfplumber failed on page {page_index + 1}: {exc}"
            ) from exc
        return [
            PositionedWord(
                text=word["text"],
                x=float(word["x0"]),
                y=float(word["top"]),
                x1=float(word["x1"]),
            )
            for word in words
            if word.get("text")
        ]

    def close(self, handle: PdfHandle) -> None:
        handle.document.close()
