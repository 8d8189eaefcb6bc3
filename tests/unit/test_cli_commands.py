"""
Unit tests for CLI commands.
"""

import os
import shutil
import sys
import tempfile
from argparse import Namespace
from unittest.mock import AsyncMock, patch

import pytest

# Add project root to path
sys.path.append(os.path.join(os.path.dirname(__file__), '..', '..'))

from office_toolkit.cli import convert, excel, word
from office_toolkit.converters import ConversionResult
from office_toolkit.utils import validate_common_arguments


def run_main(module, argv):
    with pytest.raises(SystemExit) as exc_info:
        module.main(argv)
    return exc_info.value.code


class TestConvertCommand:
    """Test cases for office-convert."""

    def setup_method(self):
        """Setup test fixtures before each test method."""
        self.test_dir = tempfile.mkdtemp()

    def teardown_method(self):
        """Cleanup after each test method."""
        shutil.rmtree(self.test_dir, ignore_errors=True)

    def test_create_parser(self):
        parser = convert.create_parser()
        assert parser.prog == 'office-convert'

    def test_pdf_options_only_on_pdf_subcommands(self):
        parser = convert.create_parser()

        args = parser.parse_args(['html-to-pdf', '--input', 'a.html', '--output', 'a.pdf',
                                  '--chrome-path', '/usr/bin/chromium', '--timeout', '30'])
        assert args.chrome_path == '/usr/bin/chromium'
        assert args.timeout == 30

        with pytest.raises(SystemExit):
            parser.parse_args(['docx-to-html', '--input', 'a.docx', '--output', 'a.html', '--timeout', '5'])

    def test_default_timeout(self):
        args = convert.create_parser().parse_args(['xlsx-to-pdf', '-i', 'a.xlsx', '-o', 'a.pdf'])
        assert args.timeout == 120
        assert args.chrome_path is None

    def test_success_exit_code_and_output(self, sample_html, capsys):
        output = os.path.join(self.test_dir, "out.docx")
        code = run_main(convert, ['html-to-docx', '--input', sample_html, '--output', output])

        captured = capsys.readouterr()
        assert code == 0
        assert f"Converting: {sample_html}" in captured.out
        assert f"Output: {output}" in captured.out
        assert "Conversion successful!" in captured.out
        assert "Processed 2 item(s)" in captured.out
        assert os.path.isfile(output)

    def test_failure_exit_code(self, capsys):
        missing = os.path.join(self.test_dir, "missing.docx")
        code = run_main(convert, ['docx-to-html', '--input', missing, '--output', os.path.join(self.test_dir, "o.html")])

        captured = capsys.readouterr()
        assert code == 1
        assert "Error: Input file not found" in captured.err
        assert "Conversion failed" not in captured.err

    def test_pdf_arguments_forwarded(self, sample_html):
        result = ConversionResult.success_result("out.pdf", messages=["Rendered 1 page(s)"])
        with patch('office_toolkit.converters.document_converter.PdfConverter') as pdf_cls:
            pdf_cls.return_value.html_to_pdf = AsyncMock(return_value=result)
            code = run_main(convert, ['html-to-pdf', '--input', sample_html, '--output', 'out.pdf',
                                      '--chrome-path', '/opt/chrome', '--timeout', '15'])

        assert code == 0
        pdf_cls.assert_called_once_with(timeout_seconds=15.0)
        pdf_cls.return_value.html_to_pdf.assert_awaited_once_with(sample_html, 'out.pdf', '/opt/chrome')

    def test_verbose_and_quiet_rejected(self, sample_html):
        code = run_main(convert, ['html-to-text', '-i', sample_html, '-o', 'x.txt', '-v', '-q'])
        assert code == 1

    def test_unknown_subcommand(self):
        with pytest.raises(SystemExit) as exc_info:
            convert.main(['pdf-to-docx', '-i', 'a', '-o', 'b'])
        assert exc_info.value.code == 2


class TestValidateCommonArguments:
    """Test cases for shared argument validation."""

    def test_valid(self):
        assert validate_common_arguments(Namespace(verbose=True, quiet=False, timeout=10)) is True

    def test_non_positive_timeout(self):
        assert validate_common_arguments(Namespace(verbose=False, quiet=False, timeout=0)) is False


class TestExcelCommand:
    """Test cases for office-excel."""

    def test_create_parser(self):
        assert excel.create_parser().prog == 'office-excel'

    def test_info(self, sample_xlsx, capsys):
        code = run_main(excel, ['info', '--input', sample_xlsx])

        out = capsys.readouterr().out
        assert code == 0
        assert "File: sample.xlsx" in out
        assert "Sheets: 3" in out
        assert "Author: Finance Team" in out
        assert "  1. Q1" in out

    def test_list_sheets(self, sample_xlsx, capsys):
        code = run_main(excel, ['list-sheets', '--input', sample_xlsx])

        out = capsys.readouterr().out
        assert code == 0
        assert "Found 3 worksheet(s):" in out
        assert out.index("1. Q1") < out.index("2. Q2")

    def test_to_csv(self, sample_xlsx, temp_dir, capsys):
        output = os.path.join(temp_dir, "q1.csv")
        code = run_main(excel, ['to-csv', '--input', sample_xlsx, '--output', output])

        assert code == 0
        assert "Processed 3 item(s)" in capsys.readouterr().out
        assert os.path.isfile(output)

    def test_extract_sheet_unknown(self, sample_xlsx, temp_dir, capsys):
        code = run_main(excel, ['extract-sheet', '--input', sample_xlsx, '--sheet', 'Q9',
                                '--output', os.path.join(temp_dir, 'x.xlsx')])

        assert code == 1
        assert "Sheet not found in workbook: Q9" in capsys.readouterr().err

    def test_info_missing_file(self, temp_dir, capsys):
        code = run_main(excel, ['info', '--input', os.path.join(temp_dir, 'none.xlsx')])

        assert code == 1
        assert "Error: Workbook not found" in capsys.readouterr().err


class TestWordCommand:
    """Test cases for office-word."""

    def test_create_parser(self):
        assert word.create_parser().prog == 'office-word'

    def test_info(self, sample_docx, capsys):
        code = run_main(word, ['info', '--input', sample_docx])

        out = capsys.readouterr().out
        assert code == 0
        assert "Title: Quarterly Report" in out
        assert "Paragraphs: 3" in out
        assert "Tables: 1" in out

    def test_extract_text(self, sample_docx, temp_dir, capsys):
        output = os.path.join(temp_dir, "out.txt")
        code = run_main(word, ['extract-text', '--input', sample_docx, '--output', output])

        assert code == 0
        with open(output, encoding='utf-8') as f:
            assert f.read().startswith("Overview\n")
        assert "Extracted" in capsys.readouterr().out

    def test_replace(self, sample_docx, temp_dir, capsys):
        output = os.path.join(temp_dir, "r.docx")
        code = run_main(word, ['replace', '--input', sample_docx, '--find', 'Rent',
                               '--replace', 'Lease', '--output', output])

        out = capsys.readouterr().out
        assert code == 0
        assert "Find: 'Rent'" in out
        assert "Processed 1 item(s)" in out

    def test_merge(self, sample_docx, docx_with_image, temp_dir, capsys):
        output = os.path.join(temp_dir, "m.docx")
        code = run_main(word, ['merge', '--inputs', sample_docx, docx_with_image, '--output', output])

        assert code == 0
        assert "Merging 2 document(s):" in capsys.readouterr().out

    def test_extract_images(self, docx_with_image, temp_dir, capsys):
        code = run_main(word, ['extract-images', '--input', docx_with_image,
                               '--output-dir', os.path.join(temp_dir, 'img')])

        assert code == 0
        assert "image_001.png" in capsys.readouterr().out
