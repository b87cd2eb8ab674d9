"""Paginated-document extractor.

Processing flow:
1. Decode the bytes with the configured backend, bounded by a deadline.
2. Read positioned words page by page (up to a page cap) and rebuild lines.
3. Scan the first pages for headings and table-of-contents entries.
4. Truncate oversized pages, marking the cut in the text.
5. On decode failure, timeout or no readable text, fall back to a summary
   built from file metadata. This path never raises.
"""

import asyncio

from report_analyzer.analysis.structure import find_headings, find_toc_entries
from report_analyzer.artifacts.base import BaseExtractor, ProgressCallback, report
from report_analyzer.artifacts.models import ExtractionResult, SourceArtifact
from report_analyzer.logging.logger import Log
from report_analyzer.pdf.base import BasePdfBackend, PdfHandle
from report_analyzer.pdf.exceptions import PdfDecodeTimeoutError, PdfExtractionError
from report_analyzer.pdf.fallback import build_metadata_summary, estimate_page_count
from report_analyzer.pdf.layout import reconstruct_lines

_MAX_STRUCTURE_ENTRIES = 20

# Share of the extraction stage spent decoding; the rest is split across pages.
_DECODE_SHARE = 0.1


class PaginatedDocumentExtractor(BaseExtractor):
    """Extracts layout-aware text from PDF documents."""

    def __init__(
        self,
        *,
        backend: BasePdfBackend,
        decode_timeout_seconds: float = 5.0,
        max_pages: int = 15,
        page_char_limit: int = 2000,
        structure_scan_pages: int = 3,
        line_tolerance: float = 3.0,
        paragraph_gap: float = 18.0,
    ) -> None:
        self._backend = backend
        self._decode_timeout_seconds = decode_timeout_seconds
        self._max_pages = max_pages
        self._page_char_limit = page_char_limit
        self._structure_scan_pages = structure_scan_pages
        self._line_tolerance = line_tolerance
        self._paragraph_gap = paragraph_gap

    async def extract(
        self,
        artifact: SourceArtifact,
        on_progress: ProgressCallback | None = None,
    ) -> ExtractionResult:
        report(on_progress, 0.0, "Loading PDF document...")
        try:
            handle = await self._decode(artifact.data)
        except PdfExtractionError as exc:
            Log.warning(f"PDF decode failed for '{artifact.name}', using metadata: {exc}")
            return self._fallback(artifact, str(exc), [])

        try:
            return await self._read_pages(artifact, handle, on_progress)
        finally:
            self._backend.close(handle)

    # ------------------------------------------------------------------
    # Decode
    # ------------------------------------------------------------------

    async def _decode(self, data: bytes) -> PdfHandle:
        task = asyncio.ensure_future(asyncio.to_thread(self._backend.open, data))
        done, _pending = await asyncio.wait({task}, timeout=self._decode_timeout_seconds)
        if not done:
            # The decode keeps running in its thread; release whatever it returns.
            task.add_done_callback(self._close_late)
            raise PdfDecodeTimeoutError(
                f"PDF decode exceeded {self._decode_timeout_seconds:g}s"
            )
        try:
            return task.result()
        except PdfExtractionError:
            raise
        except Exception as exc:
            raise PdfExtractionError(f"PDF decode failed: {exc}") from exc

    def _close_late(self, task: "asyncio.Future[PdfHandle]") -> None:
        if task.cancelled() or task.exception() is not None:
            return
        self._backend.close(task.result())

    # ------------------------------------------------------------------
    # Pages
    # ------------------------------------------------------------------

    async def _read_pages(
        self,
        artifact: SourceArtifact,
        handle: PdfHandle,
        on_progress: ProgressCallback | None,
    ) -> ExtractionResult:
        total = min(handle.page_count, self._max_pages)
        warnings: list[str] = []
        if handle.page_count > self._max_pages:
            warnings.append(
                f"Only the first {self._max_pages} of {handle.page_count} pages were read"
            )

        sections: list[str] = []
        headings: list[str] = []
        toc_entries: list[str] = []
        pages_read = 0

        for index in range(total):
            number = index + 1
            report(
                on_progress,
                _DECODE_SHARE + (1 - _DECODE_SHARE) * index / max(total, 1),
                f"Extracting text from page {number} of {total}",
            )
            try:
                words = await asyncio.to_thread(self._backend.page_words, handle, index)
            except PdfExtractionError as exc:
                Log.warning(f"Skipping page {number} of '{artifact.name}': {exc}")
                warnings.append(f"Page {number} could not be extracted: {exc}")
                continue

            pages_read += 1
            lines = reconstruct_lines(words, self._line_tolerance, self._paragraph_gap)
            if index < self._structure_scan_pages:
                toc_entries.extend(find_toc_entries(lines))
                headings.extend(find_headings(lines))

            page_text = "\n".join(lines).strip()
            if not page_text:
                continue
            if len(page_text) > self._page_char_limit:
                page_text = (
                    page_text[: self._page_char_limit].rstrip()
                    + f"\n[... page {number} truncated at {self._page_char_limit} characters]"
                )
                warnings.append(f"Page {number} truncated to {self._page_char_limit} characters")
            sections.append(f"--- Page {number} ---\n{page_text}")

        report(on_progress, 1.0, f"Read {pages_read} of {total} pages")

        if pages_read == 0:
            return self._fallback(artifact, "no pages could be read", warnings)
        if not sections:
            return self._fallback(artifact, "the document has no text layer", warnings)

        headings = _unique(headings)[:_MAX_STRUCTURE_ENTRIES]
        toc_entries = _unique(toc_entries)[:_MAX_STRUCTURE_ENTRIES]
        structure = _structure_block(headings, toc_entries)
        if structure:
            sections.append(structure)

        Log.info(
            f"Extracted {pages_read} pages from '{artifact.name}'",
            headings=len(headings),
            toc_entries=len(toc_entries),
        )
        return ExtractionResult(
            text="\n\n".join(sections),
            page_count=handle.page_count,
            warnings=tuple(warnings),
            headings=tuple(headings),
            toc_entries=tuple(toc_entries),
        )

    @staticmethod
    def _fallback(
        artifact: SourceArtifact,
        reason: str,
        warnings: list[str],
    ) -> ExtractionResult:
        return ExtractionResult(
            text=build_metadata_summary(artifact, reason),
            page_count=estimate_page_count(artifact.size_bytes),
            warnings=(*warnings, f"Synthetic summary used: {reason}"),
            is_synthetic=True,
        )


def _unique(items: list[str]) -> list[str]:
    return list(dict.fromkeys(items))


def _structure_block(headings: list[str], toc_entries: list[str]) -> str:
    if not headings and not toc_entries:
        return ""
    lines = ["--- Document Structure ---"]
    if headings:
        lines.append(f"Headings detected: {' | '.join(headings)}")
    if toc_entries:
        lines.append(f"Table of contents entries: {' | '.join(toc_entries)}")
    return "\n".join(lines)
