"""
Session handles and the result boundary shared by the workbook and document services.

A session owns one open package for as long as the caller keeps it open. There
is no process-wide instance: every caller opens its own session and closes it,
directly or through ``with``.
"""

import logging
import os
import time
from abc import ABC, abstractmethod
from typing import Any, Callable

from ..converters.strategies import ConversionResult
from ..exceptions import NotFoundError, OfficeToolkitError, UnclassifiedConversionError


class OfficeSession(ABC):
    """
    Base class for a caller-owned handle on one Office package.

    Subclasses implement ``_open`` and ``_close``.
    """

    def __init__(self, file_path: str):
        self.file_path = str(file_path)
        self._handle = None
        self.logger = logging.getLogger(self.__class__.__name__)

    @property
    def is_open(self) -> bool:
        return self._handle is not None

    @property
    def handle(self) -> Any:
        """The open library object; raises if the session is not open."""
        if self._handle is None:
            raise OfficeToolkitError(f"Session is not open: {self.file_path}")
        return self._handle

    def open(self) -> 'OfficeSession':
        """
        Open the package.

        Raises:
            NotFoundError: If the file does not exist
            InvalidFormatError: If the file is not a readable package
        """
        if self._handle is None:
            self._handle = self._open()
            self.logger.debug(f"Opened {self.file_path}")
        return self

    def close(self) -> None:
        if self._handle is None:
            return
        try:
            self._close(self._handle)
        finally:
            self._handle = None
            self.logger.debug(f"Closed {self.file_path}")

    def __enter__(self):
        return self.open()

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    @abstractmethod
    def _open(self) -> Any:
        pass

    def _close(self, handle: Any) -> None:
        pass


def run_operation(method: str, input_path: str, operation: Callable[[], ConversionResult],
                  logger: logging.Logger) -> ConversionResult:
    """
    Run a service operation and turn every outcome into a ConversionResult.

    Mirrors ``ConversionStrategy.convert``: toolkit errors keep their message,
    anything else is wrapped as an UnclassifiedConversionError.
    """
    start_time = time.time()
    try:
        result = operation()
        logger.info(f"{method} completed for {input_path}")
    except Exception as e:
        if not isinstance(e, OfficeToolkitError):
            logger.debug("Unexpected error traceback:", exc_info=True)
            e = UnclassifiedConversionError(f"{method} failed: {e}")
        logger.error(f"{method} failed for {input_path}: {e}")
        result = ConversionResult.failure_result(str(e))

    result.method = method
    result.processing_time = time.time() - start_time
    return result


def require_file(file_path: str, kind: str) -> None:
    """Raise NotFoundError when ``file_path`` is not an existing file."""
    if not file_path or not os.path.isfile(file_path):
        raise NotFoundError(f"{kind} not found: {file_path}")
