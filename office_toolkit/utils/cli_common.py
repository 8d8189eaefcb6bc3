"""
Common CLI utilities shared across all command-line interfaces.

This module provides shared utilities for CLI modules to reduce code duplication
and maintain consistent behavior across all CLI commands.
"""

import argparse
import logging
import sys
from typing import Optional

from .. import config
from ..converters.strategies import ConversionResult


def setup_logging() -> None:
    """
    Configure logging for CLI usage.

    Sets up a standard logging configuration with timestamp, level, and message
    formatting that is consistent across all CLI commands.
    """
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s"
    )


class BaseArgumentParser:
    """
    Base argument parser class that provides common CLI argument patterns.

    This class centralizes common argument parsing patterns used across
    different CLI commands to ensure consistency and reduce duplication.
    """

    @staticmethod
    def create_base_parser(prog: str, description: str, epilog: Optional[str] = None) -> argparse.ArgumentParser:
        """
        Create a base argument parser with standard configuration.

        Args:
            prog: Program name for the parser
            description: Description of the command
            epilog: Optional epilog text with examples

        Returns:
            Configured ArgumentParser instance
        """
        return argparse.ArgumentParser(
            prog=prog,
            description=description,
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog=epilog
        )

    @staticmethod
    def add_input_argument(parser: argparse.ArgumentParser, help: str = "Path to the input file") -> None:
        parser.add_argument("--input", "-i", required=True, dest="input_path", help=help)

    @staticmethod
    def add_output_argument(parser: argparse.ArgumentParser, required: bool = True,
                            help: str = "Path to the output file") -> None:
        parser.add_argument("--output", "-o", required=required, dest="output_path", help=help)

    @staticmethod
    def add_render_arguments(parser: argparse.ArgumentParser) -> None:
        """
        Add the headless browser arguments used by PDF conversions.

        Args:
            parser: ArgumentParser to add arguments to
        """
        parser.add_argument(
            "--chrome-path",
            help="Path to the Chrome/Edge/Chromium executable (auto-detected if omitted)"
        )
        parser.add_argument(
            "--timeout",
            type=float,
            default=config.DEFAULT_RENDER_TIMEOUT_SECONDS,
            help=f"Seconds to wait for the PDF render (default: {config.DEFAULT_RENDER_TIMEOUT_SECONDS})"
        )

    @staticmethod
    def add_verbose_quiet_arguments(parser: argparse.ArgumentParser) -> None:
        """
        Add verbose and quiet logging arguments.

        Args:
            parser: ArgumentParser to add arguments to
        """
        parser.add_argument(
            "--verbose", "-v",
            action="store_true",
            help="Enable verbose output"
        )
        parser.add_argument(
            "--quiet", "-q",
            action="store_true",
            help="Suppress non-essential output"
        )


def validate_common_arguments(args: argparse.Namespace) -> bool:
    """
    Validate common argument patterns.

    Args:
        args: Parsed arguments namespace

    Returns:
        True if arguments are valid, False otherwise
    """
    if getattr(args, 'verbose', False) and getattr(args, 'quiet', False):
        print("Error: --verbose and --quiet cannot be used together", file=sys.stderr)
        return False

    timeout = getattr(args, 'timeout', None)
    if timeout is not None and timeout <= 0:
        print("Error: --timeout must be greater than 0", file=sys.stderr)
        return False

    return True


def configure_logging_level(args: argparse.Namespace) -> None:
    """
    Configure logging level based on verbose/quiet arguments.

    Args:
        args: Parsed arguments with potential verbose/quiet flags
    """
    if getattr(args, 'quiet', False):
        logging.getLogger().setLevel(logging.WARNING)
    elif getattr(args, 'verbose', False):
        logging.getLogger().setLevel(logging.DEBUG)
    else:
        logging.getLogger().setLevel(logging.INFO)


def print_error(message: str) -> None:
    print(f"Error: {message}", file=sys.stderr)


def report_result(result: ConversionResult, success_message: str = "Conversion successful!") -> int:
    """
    Print a ConversionResult and return the matching exit code.

    Success lines go to stdout, the failure line to stderr.

    Returns:
        0 on success, 1 on failure
    """
    if not result.success:
        print_error(result.error_message)
        return 1

    print(success_message)
    print(f"  Processed {result.items_processed} item(s)")
    for message in result.messages:
        print(f"  {message}")
    logging.debug(f"{result.method} took {result.processing_time:.2f}s")
    return 0
