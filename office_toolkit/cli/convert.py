"""
CLI for document conversion.

Converts between Word, Excel, HTML, plain text and PDF. Every conversion is a
subcommand taking ``--input`` and ``--output``; PDF conversions additionally
accept the browser executable and a render timeout.
"""

import logging
import sys

from ..converters import DocumentConverter
from ..converters.document_converter import CONVERSIONS, PDF_CONVERSIONS
from ..utils import (
    BaseArgumentParser,
    configure_logging_level,
    report_result,
    setup_logging,
    validate_common_arguments,
)

CONVERSION_HELP = {
    'docx-to-html': "Convert a Word document to HTML",
    'html-to-docx': "Convert HTML to a Word document (tables become plain paragraphs)",
    'xlsx-to-html': "Convert an Excel workbook to HTML, one table per sheet",
    'html-to-xlsx': "Convert every HTML table to a worksheet",
    'docx-to-pdf': "Convert a Word document to PDF through a headless browser",
    'xlsx-to-pdf': "Convert an Excel workbook to PDF through a headless browser",
    'html-to-pdf': "Render HTML to PDF through a headless browser",
    'text-to-html': "Wrap the paragraphs of a text file in HTML",
    'html-to-text': "Extract the visible text of an HTML document",
    'clean-html': "Remove scripts and inline event handlers from HTML",
}


def create_parser():
    """Create argument parser for convert command."""
    epilog = """
Examples:
  # Word document to HTML
  office-convert docx-to-html --input report.docx --output report.html

  # Workbook to PDF with an explicit browser
  office-convert xlsx-to-pdf --input data.xlsx --output data.pdf --chrome-path /usr/bin/chromium

  # Strip scripts from a page
  office-convert clean-html --input page.html --output page.clean.html
        """

    parser = BaseArgumentParser.create_base_parser(
        prog="office-convert",
        description="Convert documents between Word, Excel, HTML, text and PDF",
        epilog=epilog
    )

    subparsers = parser.add_subparsers(dest="conversion", metavar="CONVERSION")
    subparsers.required = True
    for conversion in CONVERSIONS:
        subparser = subparsers.add_parser(conversion, help=CONVERSION_HELP[conversion],
                                          description=CONVERSION_HELP[conversion])
        BaseArgumentParser.add_input_argument(subparser)
        BaseArgumentParser.add_output_argument(subparser)
        if conversion in PDF_CONVERSIONS:
            BaseArgumentParser.add_render_arguments(subparser)
        BaseArgumentParser.add_verbose_quiet_arguments(subparser)

    return parser


def run(args) -> int:
    """Run the conversion described by parsed arguments and return the exit code."""
    print(f"Converting: {args.input_path}")
    print(f"Output: {args.output_path}")

    kwargs = {}
    if args.conversion in PDF_CONVERSIONS:
        kwargs = {'executable_path': args.chrome_path, 'timeout_seconds': args.timeout}

    result = DocumentConverter().convert(args.conversion, args.input_path, args.output_path, **kwargs)
    return report_result(result)


def main(argv=None):
    """Main entry point for office-convert command."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not validate_common_arguments(args):
        sys.exit(1)

    setup_logging()
    configure_logging_level(args)
    logging.debug(f"Running {args.conversion}")

    sys.exit(run(args))


if __name__ == "__main__":
    main()
