"""
Excel workbook reader.

This module reads .xlsx workbooks with openpyxl and turns every sheet into a
table of display texts, ready to be rendered as HTML or written back out.
"""

import zipfile
from datetime import date, datetime, time
from typing import Iterable, Optional

import openpyxl
from openpyxl.utils.exceptions import InvalidFileException

from .. import config
from ..exceptions import InvalidFormatError, NotFoundError
from ..model import Cell, Row, Sheet, WorkbookModel
from .base import FileProcessorBase


def load_workbook(file_path: str, **kwargs):
    """
    Open a workbook, translating openpyxl and zip errors.

    Raises:
        InvalidFormatError: If the file has no readable workbook part
    """
    try:
        return openpyxl.load_workbook(file_path, **kwargs)
    except (InvalidFileException, zipfile.BadZipFile, KeyError, OSError) as e:
        error_msg = str(e).lower()
        if 'password' in error_msg or 'encrypted' in error_msg:
            raise InvalidFormatError(f"Cannot process password-protected Excel file: {file_path}") from e
        raise InvalidFormatError(f"Workbook part is missing or invalid: {file_path} ({e})") from e


class ExcelDataProcessor(FileProcessorBase):
    """
    Reader for Excel workbooks.

    This class handles:
    - Multiple worksheet support, in workbook order
    - Shared strings and cached formula values (data_only)
    - Display formatting of numbers, dates and booleans
    - Optional filtering by sheet name
    """

    SUPPORTED_FORMATS = config.SUPPORTED_SPREADSHEET_FORMATS

    def process(self, file_path: str, sheet_names: Optional[Iterable[str]] = None, **kwargs) -> WorkbookModel:
        """
        Read a workbook into a WorkbookModel.

        Args:
            file_path: Path to the Excel file
            sheet_names: Only read these sheets (workbook order is kept)

        Returns:
            WorkbookModel with one Sheet per worksheet that holds data
        """
        self._validate_file(file_path)
        # data_only=True extracts cached formula values instead of formulas
        wb = load_workbook(file_path, data_only=True)

        try:
            wanted = list(sheet_names) if sheet_names is not None else None
            if wanted is not None:
                missing = [name for name in wanted if name not in wb.sheetnames]
                if missing:
                    raise NotFoundError(f"Sheet not found in workbook: {', '.join(missing)}")

            model = WorkbookModel()
            for sheet_name in wb.sheetnames:
                if wanted is not None and sheet_name not in wanted:
                    continue
                sheet = self.read_sheet(wb[sheet_name])
                if sheet.rows:
                    model.sheets.append(sheet)
                else:
                    self.logger.debug(f"Skipping empty sheet '{sheet_name}'")
        finally:
            wb.close()

        self.logger.debug(f"Read {len(model.sheets)} sheets from {file_path}")
        return model

    def read_sheet(self, ws) -> Sheet:
        """
        Convert a worksheet into a Sheet of display texts.

        The first row read is marked as the header row.
        """
        values = list(ws.iter_rows(
            min_row=ws.min_row,
            min_col=ws.min_column,
            values_only=True,
        ))

        if not any(value is not None for row in values for value in row):
            return Sheet(name=ws.title)

        rows = []
        for index, row in enumerate(values):
            rows.append(Row(cells=[
                Cell(text=self._format_cell_value(value), is_header=index == 0)
                for value in row
            ]))
        return Sheet(name=ws.title, rows=rows)

    def _format_cell_value(self, cell_value) -> str:
        """
        Format a cell value as display text.

        Args:
            cell_value: Cell value from openpyxl

        Returns:
            Text representation of the stored value
        """
        if cell_value is None:
            return ''

        # bool is a subclass of int, check it first
        if isinstance(cell_value, bool):
            return 'TRUE' if cell_value else 'FALSE'

        if isinstance(cell_value, datetime):
            return cell_value.strftime('%Y-%m-%d %H:%M:%S')
        if isinstance(cell_value, date):
            return cell_value.strftime('%Y-%m-%d')
        if isinstance(cell_value, time):
            return cell_value.strftime('%H:%M:%S')

        if isinstance(cell_value, float) and cell_value.is_integer():
            return str(int(cell_value))

        return str(cell_value)
