"""
Base strategy interface and result type for document conversion.
"""

import logging
import os
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from ...exceptions import OfficeToolkitError, UnclassifiedConversionError


@dataclass
class ConversionResult:
    """
    Standardized result object for every conversion operation.

    A successful result always carries ``output_path`` and no error message;
    a failed result always carries ``error_message``.
    """
    success: bool
    output_path: Optional[str] = None
    error_message: Optional[str] = None
    messages: list[str] = field(default_factory=list)
    items_processed: int = 0
    method: str = ''
    processing_time: float = 0.0

    def __post_init__(self):
        if self.success:
            if not self.output_path:
                raise ValueError("A successful ConversionResult needs an output_path")
            if self.error_message is not None:
                raise ValueError("A successful ConversionResult cannot carry an error_message")
        elif not self.error_message:
            raise ValueError("A failed ConversionResult needs an error_message")
        if self.items_processed < 0:
            raise ValueError("items_processed cannot be negative")

    @classmethod
    def success_result(cls, output_path: str, items_processed: int = 1,
                       messages: Optional[list[str]] = None, method: str = '') -> 'ConversionResult':
        return cls(
            success=True,
            output_path=str(output_path),
            items_processed=items_processed,
            messages=list(messages or []),
            method=method,
        )

    @classmethod
    def failure_result(cls, error_message: str, method: str = '') -> 'ConversionResult':
        return cls(success=False, error_message=error_message, method=method)

    def to_dict(self) -> dict[str, Any]:
        return {
            'success': self.success,
            'output_path': self.output_path,
            'error_message': self.error_message,
            'messages': list(self.messages),
            'items_processed': self.items_processed,
            'method': self.method,
            'processing_time': self.processing_time,
        }


class ConversionStrategy(ABC):
    """
    Abstract base class for conversion strategies.

    Subclasses implement ``_convert`` and may raise any exception; ``convert``
    is the public boundary that turns every outcome into a ConversionResult.
    """

    SUPPORTED_FORMATS: set[str] = set()

    def __init__(self):
        self.logger = logging.getLogger(self.__class__.__name__)

    def convert(self, input_path: str, output_path: str) -> ConversionResult:
        """
        Convert a document using this strategy.

        Args:
            input_path: Path to input file
            output_path: Path to output file

        Returns:
            ConversionResult; never raises for conversion errors
        """
        start_time = time.time()
        try:
            result = self._convert(input_path, output_path)
            self.logger.info(f"Converted {input_path} -> {output_path} using {self.get_method_name()}")
        except Exception as e:
            result = self._handle_exception(e, input_path)

        result.method = self.get_method_name()
        result.processing_time = time.time() - start_time
        return result

    @abstractmethod
    def _convert(self, input_path: str, output_path: str) -> ConversionResult:
        """Perform the conversion, raising on failure."""
        pass

    @abstractmethod
    def get_method_name(self) -> str:
        """
        Get the name of this conversion method.

        Returns:
            String identifier for this method, e.g. 'docx-to-html'
        """
        pass

    def supports_format(self, file_extension: str) -> bool:
        """
        Check if this strategy accepts the given input file format.

        Args:
            file_extension: File extension (e.g., '.docx')

        Returns:
            True if supported, False otherwise
        """
        return file_extension.lower() in self.SUPPORTED_FORMATS

    def _handle_exception(self, e: Exception, input_path: str) -> ConversionResult:
        """
        Translate an exception into a failed ConversionResult.

        Toolkit errors keep their message; anything else is wrapped as an
        UnclassifiedConversionError carrying the underlying message.
        """
        if not isinstance(e, OfficeToolkitError):
            self.logger.debug("Unexpected error traceback:", exc_info=True)
            e = UnclassifiedConversionError(f"Conversion failed: {e}")

        self.logger.error(f"{self.get_method_name()} failed for {input_path}: {e}")
        return ConversionResult.failure_result(str(e))

    @staticmethod
    def _write_text(output_path: str, content: str) -> None:
        directory = os.path.dirname(os.path.abspath(output_path))
        Path(directory).mkdir(parents=True, exist_ok=True)
        with open(output_path, 'w', encoding='utf-8') as f:
            f.write(content)
