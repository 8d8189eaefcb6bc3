"""
CLI for Word document operations.

Subcommands: info, extract-text, replace, extract-images, merge.
"""

import sys
from pathlib import Path

from ..exceptions import OfficeToolkitError
from ..services import (
    extract_images,
    extract_text,
    get_document_info,
    merge_documents,
    search_and_replace,
)
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
    """Create argument parser for word command."""
    epilog = """
Examples:
  office-word info --input report.docx
  office-word extract-text --input report.docx --output report.txt
  office-word replace --input report.docx --find 2023 --replace 2024 --output report-2024.docx
  office-word extract-images --input report.docx --output-dir images/
  office-word merge --inputs part1.docx part2.docx --output full.docx
        """

    parser = BaseArgumentParser.create_base_parser(
        prog="office-word",
        description="Word document operations",
        epilog=epilog
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    subparsers.required = True

    info = subparsers.add_parser("info", help="Display document metadata and statistics")
    BaseArgumentParser.add_input_argument(info, help="Path to the Word document")

    text = subparsers.add_parser("extract-text", help="Extract plain text content")
    BaseArgumentParser.add_input_argument(text, help="Path to the Word document")
    BaseArgumentParser.add_output_argument(text, help="Path to the output text file")

    replace = subparsers.add_parser("replace", help="Search and replace text")
    BaseArgumentParser.add_input_argument(replace, help="Path to the Word document")
    replace.add_argument("--find", required=True, help="Text to find")
    replace.add_argument("--replace", required=True, dest="replace_text", help="Replacement text")
    BaseArgumentParser.add_output_argument(
        replace, required=False,
        help="Path to save the modified document (default: overwrite the input)"
    )

    images = subparsers.add_parser("extract-images", help="Extract embedded images")
    BaseArgumentParser.add_input_argument(images, help="Path to the Word document")
    images.add_argument("--output-dir", required=True, help="Directory for the extracted images")

    merge = subparsers.add_parser("merge", help="Merge several documents into one")
    merge.add_argument("--inputs", nargs="+", required=True, help="Documents to merge, in order")
    BaseArgumentParser.add_output_argument(merge, help="Path to the merged document")

    for subparser in (info, text, replace, images, merge):
        BaseArgumentParser.add_verbose_quiet_arguments(subparser)

    return parser


def show_info(input_path: str) -> int:
    print(f"Reading document: {input_path}")
    info = get_document_info(input_path)

    print("\nDocument Information:")
    print(f"  File: {info.file_name}")
    print(f"  Path: {info.path}")
    print(f"  Title: {info.title}")
    print(f"  Author: {info.author}")
    print(f"  Subject: {info.subject}")
    print(f"  Keywords: {info.keywords}")
    print(f"  Comments: {info.comments}")
    print(f"  Last Saved By: {info.last_saved_by}")
    print(f"  Created: {info.created.strftime(DATE_FORMAT) if info.created else ''}")
    print(f"  Modified: {info.modified.strftime(DATE_FORMAT) if info.modified else ''}")

    print("\nStatistics:")
    print(f"  Words: {info.word_count}")
    print(f"  Characters: {info.character_count}")
    print(f"  Paragraphs: {info.paragraph_count}")
    print(f"  Tables: {info.table_count}")
    return 0


def write_text(input_path: str, output_path: str) -> int:
    print(f"Extracting text from: {input_path}")
    print(f"Output: {output_path}")
    text = extract_text(input_path)

    Path(output_path).parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, 'w', encoding='utf-8') as f:
        f.write(text)

    print(f"Extracted {len(text)} characters!")
    return 0


def run(args) -> int:
    """Run the parsed subcommand and return the exit code."""
    try:
        if args.command == "info":
            return show_info(args.input_path)
        if args.command == "extract-text":
            return write_text(args.input_path, args.output_path)

        if args.command == "replace":
            print(f"Searching and replacing in: {args.input_path}")
            print(f"Find: '{args.find}'")
            print(f"Replace with: '{args.replace_text}'")
            if args.output_path:
                print(f"Output: {args.output_path}")
            result = search_and_replace(args.input_path, args.find, args.replace_text, args.output_path)
            return report_result(result, "Replacement finished!")

        if args.command == "extract-images":
            print(f"Extracting images from: {args.input_path}")
            print(f"Output directory: {args.output_dir}")
            return report_result(extract_images(args.input_path, args.output_dir), "Images extracted!")

        print(f"Merging {len(args.inputs)} document(s):")
        for path in args.inputs:
            print(f"  - {path}")
        print(f"Output: {args.output_path}")
        return report_result(merge_documents(args.inputs, args.output_path), "Documents merged successfully!")
    except OfficeToolkitError as e:
        print_error(str(e))
        return 1


def main(argv=None):
    """Main entry point for office-word command."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not validate_common_arguments(args):
        sys.exit(1)

    setup_logging()
    configure_logging_level(args)

    sys.exit(run(args))


if __name__ == "__main__":
    main()
