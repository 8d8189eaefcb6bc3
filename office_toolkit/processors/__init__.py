"""
Reader module: turns source files into document and workbook models.
"""

from .base import FileProcessorBase
from .docx_processor import DocxProcessor
from .excel_processor import ExcelDataProcessor, load_workbook
from .html_processor import HtmlProcessor
from .text_file_processor import TextFileProcessor

__all__ = [
    'FileProcessorBase',
    'DocxProcessor',
    'ExcelDataProcessor',
    'HtmlProcessor',
    'TextFileProcessor',
    'load_workbook',
]
