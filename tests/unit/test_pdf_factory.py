import pytest

from report_analyzer.config.settings import Settings
from report_analyzer.pdf.extractor import PaginatedDocumentExtractor
from report_analyzer.pdf.factory import PdfExtractorFactory
from report_analyzer.pdf.pdfplumber_adapter import PdfPlumberAdapter
from report_analyzer.pdf.pymupdf_adapter import PyMuPdfAdapter


class TestPdfExtractorFactory:
    def test_creates_pdfplumber_backend(self) -> None:
        backend = PdfExtractorFactory.create_backend(Settings(pdf_engine="pdfplumber"))
        assert isinstance(backend, PdfPlumberAdapter)

    def test_creates_pymupdf_backend(self) -> None:
        backend = PdfExtractorFactory.create_backend(Settings(pdf_engine="pymupdf"))
        assert isinstance(backend, PyMuPdfAdapter)

    def test_is_case_insensitive(self) -> None:
        backend = PdfExtractorFactory.create_backend(Settings(pdf_engine="PdfPlumber"))
        assert isinstance(backend, PdfPlumberAdapter)

    def test_raises_for_unknown_engine(self) -> None:
        with pytest.raises(ValueError, match="Unknown PDF engine"):
            PdfExtractorFactory.create(Settings(pdf_engine="unknown"))

    def test_creates_extractor(self) -> None:
        extractor = PdfExtractorFactory.create(Settings())
        assert isinstance(extractor, PaginatedDocumentExtractor)
