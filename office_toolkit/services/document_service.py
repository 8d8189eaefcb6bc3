"""
Document service.

Operations on .docx packages beyond plain conversion: metadata and
statistics, text extraction, search and replace, image extraction and merging.
Everything works on the package through python-docx; no word processor runs.
"""

import logging
import os
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any, Iterable, Iterator, Optional

from docx.opc.constants import RELATIONSHIP_TYPE as RT

from ..converters.docx_writer import write_docx
from ..converters.strategies import ConversionResult
from ..exceptions import InvalidFormatError
from ..model import DocumentModel, TableBlock
from ..processors import DocxProcessor
from .base import OfficeSession, require_file, run_operation

logger = logging.getLogger(__name__)


@dataclass
class DocumentInfo:
    """Core properties and statistics of a Word document."""
    path: str
    file_name: str
    title: str = ''
    author: str = ''
    subject: str = ''
    keywords: str = ''
    comments: str = ''
    last_saved_by: str = ''
    created: Optional[datetime] = None
    modified: Optional[datetime] = None
    paragraph_count: int = 0
    table_count: int = 0
    word_count: int = 0
    character_count: int = 0

    def to_dict(self) -> dict[str, Any]:
        data = dict(self.__dict__)
        data['created'] = self.created.isoformat() if self.created else None
        data['modified'] = self.modified.isoformat() if self.modified else None
        return data


class DocumentSession(OfficeSession):
    """
    Caller-owned handle on an open Word document.

    Changes made through ``document`` are only written by ``save``.
    """

    def __init__(self, file_path: str):
        super().__init__(file_path)
        self.reader = DocxProcessor()

    def _open(self):
        require_file(self.file_path, "Document")
        return self.reader.open_document(self.file_path)

    @property
    def document(self):
        return self.handle

    def to_model(self) -> DocumentModel:
        return self.reader.read_document(self.document)

    def save(self, output_path: Optional[str] = None) -> str:
        """Save the document to ``output_path``, or over the source file."""
        target = output_path or self.file_path
        Path(target).parent.mkdir(parents=True, exist_ok=True)
        self.document.save(target)
        return target

    def info(self) -> DocumentInfo:
        props = self.document.core_properties
        model = self.to_model()
        text = model_to_text(model)
        return DocumentInfo(
            path=os.path.abspath(self.file_path),
            file_name=os.path.basename(self.file_path),
            title=props.title or '',
            author=props.author or '',
            subject=props.subject or '',
            keywords=props.keywords or '',
            comments=props.comments or '',
            last_saved_by=props.last_modified_by or '',
            created=props.created,
            modified=props.modified,
            paragraph_count=len(model.text_blocks),
            table_count=len(model.tables),
            word_count=len(text.split()),
            # whitespace is not counted
            character_count=sum(1 for ch in text if not ch.isspace()),
        )


def model_to_text(model: DocumentModel) -> str:
    """One line per paragraph, one line per table row with tab-separated cells."""
    lines = []
    for block in model.blocks:
        if isinstance(block, TableBlock):
            lines.extend('\t'.join(row.texts) for row in block.rows)
        else:
            lines.append(block.text)
    return '\n'.join(lines)


def get_document_info(file_path: str) -> DocumentInfo:
    """
    Read document metadata and statistics.

    Raises:
        NotFoundError: If the document does not exist
        InvalidFormatError: If the file is not a readable Word package
    """
    with DocumentSession(file_path) as session:
        return session.info()


def extract_text(file_path: str) -> str:
    """Extract the plain text of a document: paragraphs and table rows in body order."""
    with DocumentSession(file_path) as session:
        return model_to_text(session.to_model())


def _iter_paragraphs(document) -> Iterator:
    """Body paragraphs, then the paragraphs of every table cell (each merged cell once)."""
    yield from document.paragraphs
    for table in document.tables:
        seen = set()
        for row in table.rows:
            for cell in row.cells:
                if cell._tc in seen:
                    continue
                seen.add(cell._tc)
                yield from cell.paragraphs


def _replace_in_paragraph(paragraph, find_text: str, replace_text: str) -> int:
    runs = paragraph.runs
    text = ''.join(run.text for run in runs)
    count = text.count(find_text)
    if not count:
        return 0

    if sum(run.text.count(find_text) for run in runs) == count:
        # every match sits inside one run; run formatting is kept
        for run in runs:
            if find_text in run.text:
                run.text = run.text.replace(find_text, replace_text)
    else:
        # a match spans runs; the paragraph takes the first run's formatting
        runs[0].text = text.replace(find_text, replace_text)
        for run in runs[1:]:
            run.text = ''
    return count


def search_and_replace(input_path: str, find_text: str, replace_text: str,
                       output_path: Optional[str] = None) -> ConversionResult:
    """
    Replace every occurrence of ``find_text`` in body and table paragraphs.

    Args:
        input_path: Path to the document
        find_text: Text to search for; must not be empty
        replace_text: Replacement text
        output_path: Where to save; the input file is overwritten when omitted

    Returns:
        ConversionResult with ``items_processed`` = replacements made
    """
    def operation() -> ConversionResult:
        if not find_text:
            raise InvalidFormatError("Search text must not be empty.")

        with DocumentSession(input_path) as session:
            count = sum(
                _replace_in_paragraph(paragraph, find_text, replace_text)
                for paragraph in _iter_paragraphs(session.document)
            )
            target = session.save(output_path)

        return ConversionResult.success_result(
            target,
            items_processed=count,
            messages=[f"Replaced {count} occurrence(s)"],
        )

    return run_operation("replace", input_path, operation, logger)


def extract_images(input_path: str, output_dir: str) -> ConversionResult:
    """
    Write every image part referenced by the main document to ``output_dir``.

    Files are named image_001.<ext>, image_002.<ext>, ... in relationship order;
    an image referenced twice is written once.

    Returns:
        ConversionResult with the written files in ``messages``
    """
    def operation() -> ConversionResult:
        written = []
        with DocumentSession(input_path) as session:
            Path(output_dir).mkdir(parents=True, exist_ok=True)
            seen = set()
            for rel in session.document.part.rels.values():
                if rel.reltype != RT.IMAGE or rel.is_external:
                    continue
                part = rel.target_part
                if part.partname in seen:
                    continue
                seen.add(part.partname)

                image_path = os.path.join(output_dir, f"image_{len(written) + 1:03d}.{part.partname.ext}")
                with open(image_path, 'wb') as f:
                    f.write(part.blob)
                written.append(image_path)
                logger.debug(f"Wrote {image_path}")

        return ConversionResult.success_result(
            output_dir,
            items_processed=len(written),
            messages=written,
        )

    return run_operation("extract-images", input_path, operation, logger)


def merge_documents(input_paths: Iterable[str], output_path: str) -> ConversionResult:
    """
    Concatenate the paragraphs and tables of several documents into one.

    Headings keep their level and tables their cells; other formatting is not carried over.

    Returns:
        ConversionResult with ``items_processed`` = documents merged
    """
    paths = list(input_paths)

    def operation() -> ConversionResult:
        if not paths:
            raise InvalidFormatError("No input documents provided.")
        for path in paths:
            require_file(path, "Document")

        reader = DocxProcessor()
        merged = DocumentModel()
        for path in paths:
            merged.blocks.extend(reader.process(path).blocks)

        write_docx(merged, output_path)
        return ConversionResult.success_result(
            output_path,
            items_processed=len(paths),
            messages=[f"Merged {len(merged)} block(s)"],
        )

    return run_operation("merge", paths[0] if paths else '<none>', operation, logger)
