"""
Document conversion registry.

Maps every conversion name accepted by the ``office-convert`` command to the
strategy or PDF pipeline that performs it:

- HTML strategies: strategies/docx_html.py, strategies/xlsx_html.py
- Text strategies: strategies/text_html.py
- PDF pipelines: pdf_converter.py
"""

import logging
from pathlib import Path
from typing import Optional

from .. import config
from .pdf_converter import PdfConverter, run_blocking
from .strategies import (
    CleanHtmlStrategy,
    ConversionResult,
    ConversionStrategy,
    DocxToHtmlStrategy,
    HtmlToDocxStrategy,
    HtmlToTextStrategy,
    HtmlToXlsxStrategy,
    TextToHtmlStrategy,
    XlsxToHtmlStrategy,
)

PDF_CONVERSIONS = ('docx-to-pdf', 'xlsx-to-pdf', 'html-to-pdf')

CONVERSIONS = (
    'docx-to-html',
    'html-to-docx',
    'xlsx-to-html',
    'html-to-xlsx',
    *PDF_CONVERSIONS,
    'text-to-html',
    'html-to-text',
    'clean-html',
)


class DocumentConverter:
    """
    Document converter selecting a strategy by conversion name.

    Architecture:
    - Synchronous conversions are ConversionStrategy instances keyed by method name
    - PDF conversions go through a PdfConverter created per call, so the
      timeout and browser path can differ between calls
    """

    def __init__(self):
        strategies: list[ConversionStrategy] = [
            DocxToHtmlStrategy(),
            HtmlToDocxStrategy(),
            XlsxToHtmlStrategy(),
            HtmlToXlsxStrategy(),
            TextToHtmlStrategy(),
            HtmlToTextStrategy(),
            CleanHtmlStrategy(),
        ]
        self.strategies = {strategy.get_method_name(): strategy for strategy in strategies}
        self.logger = logging.getLogger(__name__)

    def convert(self, conversion: str, input_path: str, output_path: str,
                executable_path: Optional[str] = None,
                timeout_seconds: float = config.DEFAULT_RENDER_TIMEOUT_SECONDS) -> ConversionResult:
        """
        Run the named conversion.

        Blocking: PDF conversions run on their own event loop, so this is not
        for use inside a running loop (a failed result is returned there).

        Args:
            conversion: One of CONVERSIONS
            input_path: Path to input file
            output_path: Path to output file
            executable_path: Browser executable for PDF conversions
            timeout_seconds: Render timeout for PDF conversions

        Returns:
            ConversionResult; an unknown conversion name yields a failed result
        """
        if conversion in PDF_CONVERSIONS:
            pdf_converter = PdfConverter(timeout_seconds=timeout_seconds)
            return run_blocking(
                lambda: self._convert_pdf(pdf_converter, conversion, input_path, output_path, executable_path),
                conversion,
            )

        strategy = self.strategies.get(conversion)
        if strategy is None:
            self.logger.error(f"Unsupported conversion: {conversion}")
            return ConversionResult.failure_result(f"Unsupported conversion: {conversion}",
                                                   method='unsupported')

        ext = Path(input_path).suffix.lower()
        if ext and not strategy.supports_format(ext):
            self.logger.warning(f"{conversion} does not usually accept {ext} files")

        return strategy.convert(input_path, output_path)

    @staticmethod
    async def _convert_pdf(pdf_converter: PdfConverter, conversion: str, input_path: str,
                           output_path: str, executable_path: Optional[str]) -> ConversionResult:
        if conversion == 'docx-to-pdf':
            return await pdf_converter.document_to_pdf(input_path, output_path, executable_path)
        if conversion == 'xlsx-to-pdf':
            return await pdf_converter.spreadsheet_to_pdf(input_path, output_path, executable_path)
        return await pdf_converter.html_to_pdf(input_path, output_path, executable_path)

    def get_conversions(self) -> list[str]:
        """
        Get the names of all available conversions.

        Returns:
            Conversion names in the order they are listed on the command line
        """
        return list(CONVERSIONS)


def convert_document(conversion: str, input_path: str, output_path: str, **kwargs) -> ConversionResult:
    """
    Run the named conversion with a fresh DocumentConverter.

    Args:
        conversion: One of CONVERSIONS
        input_path: Path to input file
        output_path: Path to output file
        **kwargs: ``executable_path`` and ``timeout_seconds`` for PDF conversions

    Returns:
        ConversionResult
    """
    return DocumentConverter().convert(conversion, input_path, output_path, **kwargs)
