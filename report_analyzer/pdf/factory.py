from report_analyzer.config.settings import Settings
from report_analyzer.pdf.base import BasePdfBackend
from report_analyzer.pdf.extractor import PaginatedDocumentExtractor
from report_analyzer.pdf.pdfplumber_adapter import PdfPlumberAdapter
from report_analyzer.pdf.pymupdf_adapter import PyMuPdfAdapter


class PdfExtractorFactory:
    """Creates the paginated-document extractor with the configured backend."""

    ADAPTERS: dict[str, type[BasePdfBackend]] = {
        "pdfplumber": PdfPlumberAdapter,
        "pymupdf": PyMuPdfAdapter,
    }

    @classmethod
    def create_backend(cls, settings: Settings) -> BasePdfBackend:
        engine = settings.pdf_engine.lower()
        adapter_cls = cls.ADAPTERS.get(engine)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown PDF engine '{engine}'. Choose from: {list(cls.ADAPTERS)}"
            )
        return adapter_cls()

    @classmethod
    def create(cls, settings: Settings) -> PaginatedDocumentExtractor:
        return PaginatedDocumentExtractor(
            backend=cls.create_backend(settings),
            decode_timeout_seconds=settings.pdf_decode_timeout_seconds,
            max_pages=settings.pdf_max_pages,
            page_char_limit=settings.pdf_page_char_limit,
            structure_scan_pages=settings.pdf_structure_scan_pages,
            line_tolerance=settings.pdf_line_tolerance,
            paragraph_gap=settings.pdf_paragraph_gap,
        )
