"""
PDF conversion through HTML and a headless browser.

HTML sources are rendered directly. Word and Excel sources are first rendered
to a temporary HTML file with the matching HTML strategy; that file is deleted
after the render, whatever its outcome.

The render is one awaited coroutine bounded by a timeout. Synchronous wrappers
are provided for callers without an event loop.
"""

import asyncio
import logging
import os
import time
from pathlib import Path
from typing import Awaitable, Callable, Optional

from pypdf import PdfReader

from .. import config
from ..exceptions import NotFoundError, OfficeToolkitError, UnclassifiedConversionError
from ..utils.temp_file_manager import TempFileManager, get_temp_manager
from .browser_locator import resolve_browser_executable
from .strategies import ChromePdfRenderer, ConversionResult, ConversionStrategy, DocxToHtmlStrategy, XlsxToHtmlStrategy

RUNNING_LOOP_MESSAGE = (
    "Blocking PDF conversion called from a running event loop; await PdfConverter instead"
)


def count_pdf_pages(pdf_path: str) -> int:
    """Open a rendered PDF and return its page count."""
    return len(PdfReader(pdf_path).pages)


class PdfConverter:
    """
    Orchestrates HTML generation, browser discovery and PDF rendering.

    Architecture:
    - Word/Excel sources reuse the HTML strategies through a temporary file
    - The renderer owns the browser process for exactly one render
    - Every failure is returned as a failed ConversionResult
    """

    def __init__(self,
                 timeout_seconds: float = config.DEFAULT_RENDER_TIMEOUT_SECONDS,
                 renderer: Optional[ChromePdfRenderer] = None,
                 temp_manager: Optional[TempFileManager] = None,
                 exists: Callable[[str], bool] = os.path.isfile):
        self.timeout_seconds = timeout_seconds
        self.renderer = renderer or ChromePdfRenderer()
        self.temp_manager = temp_manager or get_temp_manager()
        self.exists = exists
        self.logger = logging.getLogger(__name__)

    async def html_to_pdf(self, html_path: str, pdf_path: str,
                          executable_path: Optional[str] = None) -> ConversionResult:
        """
        Render an HTML file to PDF.

        Args:
            html_path: Path to the input HTML file
            pdf_path: Path to the output PDF file
            executable_path: Browser executable; discovered when omitted

        Returns:
            ConversionResult with the page count in ``messages``
        """
        start_time = time.time()
        try:
            result = await self._render_html_file(html_path, pdf_path, executable_path)
        except Exception as e:
            result = self._failure(e, html_path)

        result.method = "html-to-pdf"
        result.processing_time = time.time() - start_time
        return result

    async def document_to_pdf(self, docx_path: str, pdf_path: str,
                              executable_path: Optional[str] = None) -> ConversionResult:
        """Convert a .docx file to PDF through a temporary HTML rendering."""
        return await self._convert_via_html(
            DocxToHtmlStrategy(), "docx-to-pdf", docx_path, pdf_path, executable_path
        )

    async def spreadsheet_to_pdf(self, xlsx_path: str, pdf_path: str,
                                 executable_path: Optional[str] = None) -> ConversionResult:
        """Convert an .xlsx file to PDF through a temporary HTML rendering."""
        return await self._convert_via_html(
            XlsxToHtmlStrategy(), "xlsx-to-pdf", xlsx_path, pdf_path, executable_path
        )

    async def _render_html_file(self, html_path: str, pdf_path: str,
                                executable_path: Optional[str]) -> ConversionResult:
        if not os.path.isfile(html_path):
            raise NotFoundError(f"Input file not found: {html_path}")

        executable = resolve_browser_executable(executable_path, exists=self.exists)

        with open(html_path, encoding='utf-8', errors='replace') as f:
            html_content = f.read()

        Path(os.path.abspath(pdf_path)).parent.mkdir(parents=True, exist_ok=True)
        self.logger.info(f"Rendering {html_path} to PDF with {executable}")
        await asyncio.wait_for(
            self.renderer.render(html_content, pdf_path, executable),
            timeout=self.timeout_seconds,
        )

        pages = count_pdf_pages(pdf_path)
        self.logger.info(f"Created {pdf_path} ({pages} pages)")
        return ConversionResult.success_result(
            pdf_path,
            items_processed=1,
            messages=[f"Rendered {pages} page(s)"],
        )

    async def _convert_via_html(self, strategy: ConversionStrategy, method: str,
                                source_path: str, pdf_path: str,
                                executable_path: Optional[str]) -> ConversionResult:
        start_time = time.time()
        try:
            if not os.path.isfile(source_path):
                raise NotFoundError(f"Input file not found: {source_path}")

            with self.temp_manager.temporary_file(suffix='.html') as temp_html:
                html_result = strategy.convert(source_path, temp_html)
                if not html_result.success:
                    return html_result

                result = await self.html_to_pdf(temp_html, pdf_path, executable_path)
                if result.success:
                    result.items_processed = html_result.items_processed
        except Exception as e:
            result = self._failure(e, source_path)

        result.method = method
        result.processing_time = time.time() - start_time
        return result

    def _failure(self, e: Exception, source_path: str) -> ConversionResult:
        if isinstance(e, asyncio.TimeoutError):
            message = f"PDF generation timed out after {self.timeout_seconds}s"
        elif isinstance(e, OfficeToolkitError):
            message = str(e)
        else:
            self.logger.debug("Unexpected error traceback:", exc_info=True)
            message = str(UnclassifiedConversionError(f"PDF generation failed: {e}"))

        self.logger.error(f"PDF conversion failed for {source_path}: {message}")
        return ConversionResult.failure_result(message)


def run_blocking(make_coroutine: Callable[[], Awaitable[ConversionResult]], method: str) -> ConversionResult:
    """
    Run a PDF conversion coroutine to completion on a new event loop.

    The blocking entry points are for synchronous callers only. Inside a running
    event loop a failed result is returned and no coroutine is created.
    """
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        pass
    else:
        logging.getLogger(__name__).error(RUNNING_LOOP_MESSAGE)
        return ConversionResult.failure_result(RUNNING_LOOP_MESSAGE, method=method)

    return asyncio.run(make_coroutine())


def convert_html_to_pdf(html_path: str, pdf_path: str, executable_path: Optional[str] = None,
                        timeout_seconds: float = config.DEFAULT_RENDER_TIMEOUT_SECONDS) -> ConversionResult:
    """Render an HTML file to PDF (blocking, not for use inside an event loop)."""
    return run_blocking(
        lambda: PdfConverter(timeout_seconds).html_to_pdf(html_path, pdf_path, executable_path),
        "html-to-pdf",
    )


def convert_docx_to_pdf(docx_path: str, pdf_path: str, executable_path: Optional[str] = None,
                        timeout_seconds: float = config.DEFAULT_RENDER_TIMEOUT_SECONDS) -> ConversionResult:
    """Convert a Word document to PDF (blocking, not for use inside an event loop)."""
    return run_blocking(
        lambda: PdfConverter(timeout_seconds).document_to_pdf(docx_path, pdf_path, executable_path),
        "docx-to-pdf",
    )


def convert_xlsx_to_pdf(xlsx_path: str, pdf_path: str, executable_path: Optional[str] = None,
                        timeout_seconds: float = config.DEFAULT_RENDER_TIMEOUT_SECONDS) -> ConversionResult:
    """Convert an Excel workbook to PDF (blocking, not for use inside an event loop)."""
    return run_blocking(
        lambda: PdfConverter(timeout_seconds).spreadsheet_to_pdf(xlsx_path, pdf_path, executable_path),
        "xlsx-to-pdf",
    )
