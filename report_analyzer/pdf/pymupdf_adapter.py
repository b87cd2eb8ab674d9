import pymupdf

from report_analyzer.pdf.base import BasePdfBackend, PdfHandle, PositionedWord
from report_analyzer.pdf.exceptions import PdfExtractionError


class PyMuPdfAdapter(BasePdfBackend):
    """Reads positioned words from PDF using PyMuPDF."""

    def open(self, pdf_bytes: bytes) -> PdfHandle:
        try:
            doc = pymupdf.open(stream=pdf_bytes, filetype="pdf")  # type: ignore[no-untyped-call]
        except Exception as exc:
            raise PdfExtractionError(f"pymupdf decode failed: {exc}") from exc
        return PdfHandle(document=doc, page_count=doc.page_count)

    def page_words(self, handle: PdfHandle, page_index: int) -> list[PositionedWord]:
        try:
            page = handle.document.load_page(page_index)
            # (x0, y0, x1, y1, word, block_no, line_no, word_no)
            words = page.get_text("words")
        except Exception as exc:
            raise PdfExtractionError(
                f"pymupdf failed on page {page_index + 1}: {exc}"
            ) from exc
        return [
            PositionedWord(
                text=word[4],
                x=float(word[0]),
                y=float(word[1]),
                x1=float(word[2]),
            )
            for word in words
            if word[4]
        ]

    def close(self, handle: PdfHandle) -> None:
        handle.document.close()
