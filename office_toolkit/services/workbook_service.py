"""
Workbook service.

Read-side operations on .xlsx packages (metadata, sheet listing, sheet
extraction and CSV export) working directly on the package with openpyxl.
"""

import csv
import logging
import os
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Optional

from ..converters.strategies import ConversionResult
from ..converters.xlsx_writer import write_xlsx
from ..exceptions import NotFoundError
from ..model import Sheet, WorkbookModel
from ..processors import ExcelDataProcessor, load_workbook
from .base import OfficeSession, require_file, run_operation

logger = logging.getLogger(__name__)


@dataclass
class WorkbookInfo:
    """Metadata of a workbook, read once from its core properties."""
    path: str
    file_name: str
    sheet_count: int = 0
    sheet_names: list[str] = field(default_factory=list)
    author: str = ''
    title: str = ''
    subject: str = ''
    last_saved_by: str = ''
    created: Optional[datetime] = None
    modified: Optional[datetime] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            'path': self.path,
            'file_name': self.file_name,
            'sheet_count': self.sheet_count,
            'sheet_names': list(self.sheet_names),
            'author': self.author,
            'title': self.title,
            'subject': self.subject,
            'last_saved_by': self.last_saved_by,
            'created': self.created.isoformat() if self.created else None,
            'modified': self.modified.isoformat() if self.modified else None,
        }


class WorkbookSession(OfficeSession):
    """
    Caller-owned handle on an open workbook.

    Usage:
        with WorkbookSession("report.xlsx") as session:
            names = session.sheet_names
    """

    def _open(self):
        require_file(self.file_path, "Workbook")
        # data_only=True extracts cached formula values instead of formulas
        return load_workbook(self.file_path, data_only=True)

    def _close(self, handle) -> None:
        handle.close()

    @property
    def workbook(self):
        return self.handle

    @property
    def sheet_names(self) -> list[str]:
        return list(self.workbook.sheetnames)

    def get_sheet(self, sheet_name: Optional[str] = None):
        """
        Get a worksheet by name, or the first worksheet when no name is given.

        Raises:
            NotFoundError: If the sheet does not exist
        """
        if sheet_name is None:
            return self.workbook.worksheets[0]
        if sheet_name not in self.workbook.sheetnames:
            raise NotFoundError(f"Sheet not found in workbook: {sheet_name}")
        return self.workbook[sheet_name]

    def info(self) -> WorkbookInfo:
        props = self.workbook.properties
        return WorkbookInfo(
            path=os.path.abspath(self.file_path),
            file_name=os.path.basename(self.file_path),
            sheet_count=len(self.workbook.sheetnames),
            sheet_names=self.sheet_names,
            author=props.creator or '',
            title=props.title or '',
            subject=props.subject or '',
            last_saved_by=props.lastModifiedBy or '',
            created=props.created,
            modified=props.modified,
        )


def get_workbook_info(file_path: str) -> WorkbookInfo:
    """
    Read workbook metadata.

    Raises:
        NotFoundError: If the workbook does not exist
        InvalidFormatError: If the file is not a readable workbook
    """
    with WorkbookSession(file_path) as session:
        return session.info()


def list_sheets(file_path: str) -> list[str]:
    """List worksheet names in workbook order."""
    with WorkbookSession(file_path) as session:
        return session.sheet_names


def extract_sheet(input_path: str, sheet_name: str, output_path: str) -> ConversionResult:
    """
    Copy one sheet into a new workbook under the same name.

    Only display texts are copied; formulas, number formats and styles are not.

    Returns:
        ConversionResult with ``items_processed`` = rows copied
    """
    def operation() -> ConversionResult:
        model = ExcelDataProcessor().process(input_path, sheet_names=[sheet_name])
        if not model.sheets:
            # empty sheets are skipped by the reader; keep the name anyway
            model = WorkbookModel(sheets=[Sheet(name=sheet_name)])
        write_xlsx(model, output_path)
        rows = len(model.sheets[0].rows)
        return ConversionResult.success_result(
            output_path,
            items_processed=rows,
            messages=[f"Extracted sheet '{sheet_name}' ({rows} rows)"],
        )

    return run_operation("extract-sheet", input_path, operation, logger)


def convert_to_csv(input_path: str, output_path: str, sheet_name: Optional[str] = None) -> ConversionResult:
    """
    Export a sheet as CSV (UTF-8, comma separated).

    Args:
        input_path: Path to the workbook
        output_path: Path to the CSV file
        sheet_name: Sheet to export; the first sheet when omitted

    Returns:
        ConversionResult with ``items_processed`` = rows written
    """
    def operation() -> ConversionResult:
        with WorkbookSession(input_path) as session:
            ws = session.get_sheet(sheet_name)
            sheet = ExcelDataProcessor().read_sheet(ws)

        Path(output_path).parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, 'w', encoding='utf-8', newline='') as f:
            writer = csv.writer(f)
            for row in sheet.rows:
                writer.writerow(row.texts)

        return ConversionResult.success_result(
            output_path,
            items_processed=len(sheet.rows),
            messages=[f"Exported sheet '{sheet.name}'"],
        )

    return run_operation("to-csv", input_path, operation, logger)
