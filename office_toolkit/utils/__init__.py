"""
Utility modules for office toolkit.

This package provides the temporary file manager and the helpers shared by
the command-line interfaces.
"""

from .cli_common import (
    BaseArgumentParser,
    configure_logging_level,
    print_error,
    report_result,
    setup_logging,
    validate_common_arguments,
)
from .temp_file_manager import TempFileManager, get_temp_manager

__all__ = [
    'TempFileManager', 'get_temp_manager',
    'setup_logging', 'BaseArgumentParser', 'validate_common_arguments', 'configure_logging_level',
    'print_error', 'report_result',
]
