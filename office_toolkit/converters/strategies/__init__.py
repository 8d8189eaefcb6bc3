"""
Conversion strategies between Office documents, HTML, text and PDF.

Each strategy converts one input format into one output format and reports
the outcome as a ConversionResult.
"""

from .base import ConversionResult, ConversionStrategy
from .chrome_pdf import ChromePdfRenderer
from .docx_html import DocxToHtmlStrategy, HtmlToDocxStrategy
from .text_html import CleanHtmlStrategy, HtmlToTextStrategy, TextToHtmlStrategy, extract_links
from .xlsx_html import HtmlToXlsxStrategy, XlsxToHtmlStrategy

__all__ = [
    'ConversionResult',
    'ConversionStrategy',
    'ChromePdfRenderer',
    'DocxToHtmlStrategy',
    'HtmlToDocxStrategy',
    'XlsxToHtmlStrategy',
    'HtmlToXlsxStrategy',
    'TextToHtmlStrategy',
    'HtmlToTextStrategy',
    'CleanHtmlStrategy',
    'extract_links',
]
