"""
Text file reader.

This module reads plain text files, handling common encodings, and splits the
content into paragraphs on blank lines.
"""

import re

from .. import config
from ..model import DocumentModel
from .base import FileProcessorBase

PARAGRAPH_BREAK = re.compile(r'\r\n\r\n|\n\n')


class TextFileProcessor(FileProcessorBase):
    """
    Reader for plain text files.

    This class handles:
    - Multiple text encodings (UTF-8, GBK)
    - Paragraph splitting on blank lines
    - Dropping whitespace-only paragraphs
    """

    SUPPORTED_FORMATS = config.SUPPORTED_TEXT_FORMATS

    def process(self, file_path: str, **kwargs) -> DocumentModel:
        """
        Read a text file into a DocumentModel of paragraphs.

        Single line breaks are kept inside the paragraph text.

        Args:
            file_path: Path to the text file

        Returns:
            DocumentModel with one paragraph block per non-empty paragraph
        """
        self._validate_file(file_path)
        content = self.read_text(file_path)

        model = DocumentModel()
        for part in PARAGRAPH_BREAK.split(content):
            text = part.strip()
            if text:
                model.add_text(text)
        return model

    def read_text(self, file_path: str) -> str:
        """
        Read file content trying each supported encoding in turn.

        Raises:
            UnicodeDecodeError: If no supported encoding matches
        """
        last_error = None
        for encoding in config.TEXT_ENCODINGS:
            try:
                content = self._read_file(file_path, encoding)
                self.logger.debug(f"Successfully read {file_path} with {encoding} encoding")
                return content
            except UnicodeDecodeError as e:
                last_error = e
        raise last_error

    def _read_file(self, file_path: str, encoding: str) -> str:
        # newline='' keeps \r\n so paragraph splitting sees the source line breaks
        with open(file_path, encoding=encoding, newline='') as f:
            return f.read()

    def get_supported_encodings(self) -> list[str]:
        """Get list of supported text encodings."""
        return list(config.TEXT_ENCODINGS)
