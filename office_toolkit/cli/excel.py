"""
CLI for Excel workbook operations.

Subcommands: info, list-sheets, extract-sheet, to-csv.
"""

import sys

from ..exceptions import OfficeToolkitError
from ..services import convert_to_csv, extract_sheet, get_workbook_info, list_sheets
from ..utils import (
    BaseArgumentParser,
    configure_logging_level,
    print_error,
    report_result,
    setup_logging,
    validate_common_arguments,
)

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def create_parser():
    """Create argument parser for excel command."""
    epilog = """
Examples:
  office-excel info --input data.xlsx
  office-excel list-sheets --input data.xlsx
  office-excel extract-sheet --input data.xlsx --sheet Q1 --output q1.xlsx
  office-excel to-csv --input data.xlsx --sheet Q2 --output q2.csv
        """

    parser = BaseArgumentParser.create_base_parser(
        prog="office-excel",
        description="Excel workbook operations",
        epilog=epilog
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    subparsers.required = True

    info = subparsers.add_parser("info", help="Display workbook metadata and sheet names")
    BaseArgumentParser.add_input_argument(info, help="Path to the Excel workbook")

    sheets = subparsers.add_parser("list-sheets", help="List worksheet names in order")
    BaseArgumentParser.add_input_argument(sheets, help="Path to the Excel workbook")

    extract = subparsers.add_parser("extract-sheet", help="Copy one sheet into a new workbook")
    BaseArgumentParser.add_input_argument(extract, help="Path to the Excel workbook")
    extract.add_argument("--sheet", required=True, help="Name of the sheet to extract")
    BaseArgumentParser.add_output_argument(extract, help="Path to the new workbook")

    csv = subparsers.add_parser("to-csv", help="Export a sheet as CSV")
    BaseArgumentParser.add_input_argument(csv, help="Path to the Excel workbook")
    csv.add_argument("--sheet", help="Name of the sheet to export (default: first sheet)")
    BaseArgumentParser.add_output_argument(csv, help="Path to the CSV file")

    for subparser in (info, sheets, extract, csv):
        BaseArgumentParser.add_verbose_quiet_arguments(subparser)

    return parser


def show_info(input_path: str) -> int:
    print(f"Reading workbook: {input_path}")
    info = get_workbook_info(input_path)

    print("\nWorkbook Information:")
    print(f"  File: {info.file_name}")
    print(f"  Path: {info.path}")
    print(f"  Sheets: {info.sheet_count}")
    print(f"  Author: {info.author}")
    print(f"  Title: {info.title}")
    print(f"  Subject: {info.subject}")
    print(f"  Last Saved By: {info.last_saved_by}")
    print(f"  Created: {info.created.strftime(DATE_FORMAT) if info.created else ''}")
    print(f"  Modified: {info.modified.strftime(DATE_FORMAT) if info.modified else ''}")

    print("\nWorksheets:")
    for index, name in enumerate(info.sheet_names, start=1):
        print(f"  {index}. {name}")
    return 0


def show_sheets(input_path: str) -> int:
    print(f"Reading sheets from: {input_path}")
    names = list_sheets(input_path)

    print(f"\nFound {len(names)} worksheet(s):")
    for index, name in enumerate(names, start=1):
        print(f"  {index}. {name}")
    return 0


def run(args) -> int:
    """Run the parsed subcommand and return the exit code."""
    try:
        if args.command == "info":
            return show_info(args.input_path)
        if args.command == "list-sheets":
            return show_sheets(args.input_path)

        if args.command == "extract-sheet":
            print(f"Extracting sheet '{args.sheet}' from: {args.input_path}")
            print(f"Output: {args.output_path}")
            return report_result(extract_sheet(args.input_path, args.sheet, args.output_path),
                                 "Sheet extracted successfully!")

        print(f"Converting to CSV: {args.input_path}")
        if args.sheet:
            print(f"Sheet: {args.sheet}")
        print(f"Output: {args.output_path}")
        return report_result(convert_to_csv(args.input_path, args.output_path, args.sheet))
    except OfficeToolkitError as e:
        print_error(str(e))
        return 1


def main(argv=None):
    """Main entry point for office-excel command."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not validate_common_arguments(args):
        sys.exit(1)

    setup_logging()
    configure_logging_level(args)

    sys.exit(run(args))


if __name__ == "__main__":
    main()
