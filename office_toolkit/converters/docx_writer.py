"""
Word document writer.

Serializes a DocumentModel into a .docx package with python-docx. Headings use
the built-in Heading 1..6 styles (style ids Heading1..Heading6), paragraphs the
default body style.
"""

import logging
from pathlib import Path

from docx import Document

from ..model import DocumentModel, TableBlock

logger = logging.getLogger(__name__)


def build_document(model: DocumentModel):
    """Build a python-docx Document from a model."""
    document = Document()

    for block in model.blocks:
        if isinstance(block, TableBlock):
            _add_table(document, block)
        elif block.level:
            document.add_heading(block.text, level=block.level)
        else:
            document.add_paragraph(block.text)

    return document


def _add_table(document, block: TableBlock) -> None:
    if not block.rows:
        return
    columns = max(len(row.cells) for row in block.rows) or 1
    table = document.add_table(rows=len(block.rows), cols=columns)
    table.style = 'Table Grid'
    for row, source in zip(table.rows, block.rows):
        for cell, source_cell in zip(row.cells, source.cells):
            cell.text = source_cell.text
            if source_cell.is_header:
                for run in cell.paragraphs[0].runs:
                    run.bold = True


def write_docx(model: DocumentModel, output_path: str) -> str:
    """
    Write a model to a .docx file.

    Args:
        model: Document to write
        output_path: Destination path; parent directories are created

    Returns:
        The output path
    """
    Path(output_path).parent.mkdir(parents=True, exist_ok=True)
    build_document(model).save(output_path)
    logger.debug(f"Wrote {len(model)} blocks to {output_path}")
    return output_path
