"""
Word document <-> HTML conversion strategies.
"""

from ... import config
from ...processors import DocxProcessor, HtmlProcessor
from ..docx_writer import write_docx
from ..html_renderer import render_document
from .base import ConversionResult, ConversionStrategy


class DocxToHtmlStrategy(ConversionStrategy):
    """
    Strategy for rendering a .docx package as a self-contained HTML page.

    Headings keep their level, tables keep their rows and cells; everything
    else about formatting is dropped.
    """

    SUPPORTED_FORMATS = config.SUPPORTED_DOCUMENT_FORMATS

    def __init__(self):
        super().__init__()
        self.reader = DocxProcessor()

    def _convert(self, input_path: str, output_path: str) -> ConversionResult:
        model = self.reader.process(input_path)
        self._write_text(output_path, render_document(model))
        return ConversionResult.success_result(output_path, items_processed=len(model))

    def get_method_name(self) -> str:
        return "docx-to-html"


class HtmlToDocxStrategy(ConversionStrategy):
    """
    Strategy for building a .docx package from the top-level elements of an HTML body.

    Tables in the HTML are not rebuilt; their text becomes a plain paragraph.
    """

    SUPPORTED_FORMATS = config.SUPPORTED_HTML_FORMATS

    def __init__(self):
        super().__init__()
        self.reader = HtmlProcessor()

    def _convert(self, input_path: str, output_path: str) -> ConversionResult:
        model = self.reader.process(input_path)
        write_docx(model, output_path)
        return ConversionResult.success_result(output_path, items_processed=len(model))

    def get_method_name(self) -> str:
        return "html-to-docx"
