"""Custom exceptions for office toolkit."""
from __future__ import annotations


class OfficeToolkitError(RuntimeError):
    """Base class for all office toolkit exceptions."""


class NotFoundError(OfficeToolkitError):
    """Raised when a source file (or a named part inside it) does not exist."""


class InvalidFormatError(OfficeToolkitError):
    """Raised when a file opens but holds nothing usable (no body, no workbook, no tables)."""


class RenderEngineNotFoundError(OfficeToolkitError):
    """Raised when no headless browser executable can be resolved."""


class UnclassifiedConversionError(OfficeToolkitError):
    """Raised for any other failure while parsing, serializing or rendering."""
