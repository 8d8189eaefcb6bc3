"""
Base class for document readers.

Every reader turns one source file into an in-memory model. Readers raise the
toolkit exceptions; turning them into a ConversionResult is the job of the
conversion strategies that call them.
"""

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

from ..exceptions import NotFoundError


class FileProcessorBase(ABC):
    """
    Abstract base class for all document readers.

    This class defines the common interface that all readers must implement,
    ensuring consistent validation and logging across different source formats.
    """

    SUPPORTED_FORMATS: set[str] = set()

    def __init__(self):
        """Initialize the processor."""
        self.logger = logging.getLogger(self.__class__.__name__)

    @abstractmethod
    def process(self, file_path: str, **kwargs) -> Any:
        """
        Read a document file into a model.

        Args:
            file_path: Path to the document file
            **kwargs: Additional reader parameters

        Returns:
            The model built from the file

        Raises:
            NotFoundError: If the file does not exist
            InvalidFormatError: If the file holds no usable content
        """
        pass

    @classmethod
    def supports_format(cls, file_extension: str) -> bool:
        """
        Check if the given file format is supported.

        Args:
            file_extension: File extension to check (with or without dot)

        Returns:
            True if format is supported, False otherwise
        """
        ext = file_extension.lower()
        if not ext.startswith('.'):
            ext = '.' + ext
        return ext in cls.SUPPORTED_FORMATS

    def get_supported_formats(self) -> list[str]:
        """Get sorted list of supported file extensions."""
        return sorted(self.SUPPORTED_FORMATS)

    def _validate_file(self, file_path: str) -> Path:
        """
        Validate that the file exists and is a regular file.

        Args:
            file_path: Path to the file to validate

        Returns:
            The path as a Path object

        Raises:
            NotFoundError: If the path is empty, missing or not a file
        """
        if not file_path:
            raise NotFoundError("Input file not found: <empty path>")

        path = Path(file_path)
        if not path.is_file():
            self.logger.error(f"File does not exist: {file_path}")
            raise NotFoundError(f"Input file not found: {file_path}")

        return path
