"""
Excel workbook <-> HTML conversion strategies.
"""

from ... import config
from ...processors import ExcelDataProcessor, HtmlProcessor
from ..html_renderer import render_workbook
from ..xlsx_writer import write_xlsx
from .base import ConversionResult, ConversionStrategy


class XlsxToHtmlStrategy(ConversionStrategy):
    """
    Strategy for rendering every sheet of a workbook as an HTML table.

    The first row of each sheet is always rendered as header cells.
    """

    SUPPORTED_FORMATS = config.SUPPORTED_SPREADSHEET_FORMATS

    def __init__(self):
        super().__init__()
        self.reader = ExcelDataProcessor()

    def _convert(self, input_path: str, output_path: str) -> ConversionResult:
        model = self.reader.process(input_path)
        self._write_text(output_path, render_workbook(model))
        return ConversionResult.success_result(output_path, items_processed=len(model))

    def get_method_name(self) -> str:
        return "xlsx-to-html"


class HtmlToXlsxStrategy(ConversionStrategy):
    """
    Strategy for turning every HTML <table> into a worksheet named Sheet1..SheetN.
    """

    SUPPORTED_FORMATS = config.SUPPORTED_HTML_FORMATS

    def __init__(self):
        super().__init__()
        self.reader = HtmlProcessor()

    def _convert(self, input_path: str, output_path: str) -> ConversionResult:
        model = self.reader.read_tables(input_path)
        write_xlsx(model, output_path)
        return ConversionResult.success_result(output_path, items_processed=len(model))

    def get_method_name(self) -> str:
        return "html-to-xlsx"
