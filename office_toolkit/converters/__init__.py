"""
Document converters module.

This module provides the conversion strategies and the registry that maps
conversion names (``docx-to-html``, ``xlsx-to-pdf``, ...) to them.
"""

from .document_converter import (
    CONVERSIONS,
    DocumentConverter,
    convert_document,
)
from .pdf_converter import PdfConverter, convert_docx_to_pdf, convert_html_to_pdf, convert_xlsx_to_pdf
from .strategies import ConversionResult

__all__ = [
    'CONVERSIONS',
    'ConversionResult',
    'DocumentConverter',
    'PdfConverter',
    'convert_document',
    'convert_docx_to_pdf',
    'convert_html_to_pdf',
    'convert_xlsx_to_pdf',
]
