"""
Word document reader.

Reads a .docx package with python-docx and flattens its body into a
DocumentModel: non-empty paragraphs (with heading levels) and tables.
"""

import zipfile

from docx import Document
from docx.opc.exceptions import PackageNotFoundError
from docx.table import Table, _Cell
from docx.text.paragraph import Paragraph

from .. import config
from ..exceptions import InvalidFormatError
from ..model import PARAGRAPH, Cell, DocumentModel, Row, TableBlock, TextBlock
from .base import FileProcessorBase


class DocxProcessor(FileProcessorBase):
    """
    Reader for Word documents.

    This class handles:
    - Paragraphs in body order, skipping whitespace-only ones
    - Heading1..Heading6 paragraph styles mapped to heading levels
    - Tables, one block per table, first row marked as header
    """

    SUPPORTED_FORMATS = config.SUPPORTED_DOCUMENT_FORMATS

    def process(self, file_path: str, **kwargs) -> DocumentModel:
        """
        Read a .docx file into a DocumentModel.

        Args:
            file_path: Path to the .docx file

        Returns:
            DocumentModel with one block per non-empty paragraph and per table
        """
        self._validate_file(file_path)
        model = self.read_document(self.open_document(file_path))
        self.logger.debug(
            f"Read {len(model.text_blocks)} paragraphs and {len(model.tables)} tables from {file_path}"
        )
        return model

    def read_document(self, document) -> DocumentModel:
        """Flatten an open python-docx Document into a DocumentModel."""
        if document.element.body is None:
            raise InvalidFormatError("Document body is empty or invalid.")

        model = DocumentModel()
        for item in document.iter_inner_content():
            if isinstance(item, Paragraph):
                block = self._paragraph_to_block(item)
                if block is not None:
                    model.blocks.append(block)
            elif isinstance(item, Table):
                model.blocks.append(self._table_to_block(item))
        return model

    def open_document(self, file_path: str):
        """
        Open a .docx package, translating package errors.

        Raises:
            InvalidFormatError: If the file is not a readable Word package
        """
        try:
            return Document(file_path)
        except (PackageNotFoundError, zipfile.BadZipFile, KeyError, ValueError) as e:
            raise InvalidFormatError(f"Not a valid Word document: {file_path} ({e})") from e

    def _paragraph_to_block(self, paragraph: Paragraph) -> TextBlock | None:
        text = paragraph.text
        if not text or not text.strip():
            return None

        # raw w:pStyle value, resolved or not against styles.xml
        style_id = paragraph._p.style
        style = config.HEADING_STYLE_IDS.get(style_id, PARAGRAPH)
        return TextBlock(text=text, style=style)

    def _table_to_block(self, table: Table) -> TableBlock:
        rows = []
        for index, row in enumerate(table.rows):
            # one entry per w:tc, so a horizontally merged cell counts once
            cells = [
                Cell(text=_Cell(tc, table).text, is_header=index == 0)
                for tc in row._tr.tc_lst
            ]
            rows.append(Row(cells=cells))
        return TableBlock(rows=rows)
