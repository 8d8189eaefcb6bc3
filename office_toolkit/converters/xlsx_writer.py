"""
Excel workbook writer.

Serializes a WorkbookModel into an .xlsx package with openpyxl. Every value is
stored as a string cell; no number or date typing is attempted.
"""

import logging
from pathlib import Path

from openpyxl import Workbook

from ..model import WorkbookModel

logger = logging.getLogger(__name__)


def build_workbook(model: WorkbookModel) -> Workbook:
    """Build an openpyxl Workbook with one worksheet per model sheet."""
    wb = Workbook()
    wb.remove(wb.active)

    for sheet in model.sheets:
        ws = wb.create_sheet(title=sheet.name)
        for row_index, row in enumerate(sheet.rows, start=1):
            for column_index, source in enumerate(row.cells, start=1):
                cell = ws.cell(row=row_index, column=column_index)
                cell.value = source.text
                # openpyxl reads a leading '=' as a formula; keep it a string
                cell.data_type = 's'

    if not wb.worksheets:
        wb.create_sheet(title="Sheet1")
    return wb


def write_xlsx(model: WorkbookModel, output_path: str) -> str:
    """
    Write a model to an .xlsx file.

    Args:
        model: Workbook to write
        output_path: Destination path; parent directories are created

    Returns:
        The output path
    """
    Path(output_path).parent.mkdir(parents=True, exist_ok=True)
    wb = build_workbook(model)
    try:
        wb.save(output_path)
    finally:
        wb.close()
    logger.debug(f"Wrote {len(model)} sheets to {output_path}")
    return output_path
