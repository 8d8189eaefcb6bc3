"""
Workbook and document services operating directly on Office packages.
"""

from .base import OfficeSession
from .document_service import (
    DocumentInfo,
    DocumentSession,
    extract_images,
    extract_text,
    get_document_info,
    merge_documents,
    search_and_replace,
)
from .workbook_service import (
    WorkbookInfo,
    WorkbookSession,
    convert_to_csv,
    extract_sheet,
    get_workbook_info,
    list_sheets,
)

__all__ = [
    'OfficeSession',
    'DocumentInfo',
    'DocumentSession',
    'get_document_info',
    'extract_text',
    'search_and_replace',
    'extract_images',
    'merge_documents',
    'WorkbookInfo',
    'WorkbookSession',
    'get_workbook_info',
    'list_sheets',
    'extract_sheet',
    'convert_to_csv',
]
