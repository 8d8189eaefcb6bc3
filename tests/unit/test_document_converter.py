"""
Unit tests for the conversion registry.
"""

import asyncio
import os
import sys
from unittest.mock import AsyncMock, patch

# Add project root to path
sys.path.append(os.path.join(os.path.dirname(__file__), '..', '..'))

from office_toolkit.converters import CONVERSIONS, ConversionResult, DocumentConverter, convert_document
from office_toolkit.converters.pdf_converter import RUNNING_LOOP_MESSAGE


class TestDocumentConverter:
    """Test cases for DocumentConverter class."""

    def setup_method(self):
        """Setup test fixtures before each test method."""
        self.converter = DocumentConverter()

    def test_get_conversions(self):
        assert self.converter.get_conversions() == list(CONVERSIONS)
        assert len(CONVERSIONS) == 10

    def test_every_html_conversion_has_a_strategy(self):
        for name in CONVERSIONS:
            if name.endswith('-to-pdf'):
                continue
            assert self.converter.strategies[name].get_method_name() == name

    def test_convert_by_name(self, sample_html, temp_dir):
        output = os.path.join(temp_dir, "out.docx")
        result = self.converter.convert('html-to-docx', sample_html, output)

        assert result.success is True
        assert result.method == 'html-to-docx'
        assert result.items_processed == 2

    def test_unknown_conversion(self, sample_html, temp_dir):
        result = self.converter.convert('pdf-to-docx', sample_html, os.path.join(temp_dir, "o.docx"))

        assert result.success is False
        assert result.error_message == "Unsupported conversion: pdf-to-docx"
        assert result.method == 'unsupported'

    def test_pdf_conversion_uses_pdf_converter(self, sample_docx, temp_dir):
        expected = ConversionResult.success_result("out.pdf", items_processed=4, method='docx-to-pdf')
        with patch('office_toolkit.converters.document_converter.PdfConverter') as pdf_cls:
            pdf_cls.return_value.document_to_pdf = AsyncMock(return_value=expected)
            result = self.converter.convert('docx-to-pdf', sample_docx, "out.pdf",
                                            executable_path='/fake/chrome', timeout_seconds=30)

        assert result is expected
        pdf_cls.assert_called_once_with(timeout_seconds=30)
        pdf_cls.return_value.document_to_pdf.assert_awaited_once_with(sample_docx, "out.pdf", '/fake/chrome')

    def test_convert_document_function(self, sample_xlsx, temp_dir):
        result = convert_document('xlsx-to-html', sample_xlsx, os.path.join(temp_dir, "book.html"))
        assert result.success is True
        assert result.items_processed == 2

    def test_pdf_conversion_inside_running_loop(self, sample_docx, temp_dir):
        async def call_from_loop():
            return self.converter.convert('docx-to-pdf', sample_docx, os.path.join(temp_dir, "o.pdf"))

        with patch('office_toolkit.converters.document_converter.PdfConverter') as pdf_cls:
            pdf_cls.return_value.document_to_pdf = AsyncMock()
            result = asyncio.run(call_from_loop())

        assert result.success is False
        assert result.error_message == RUNNING_LOOP_MESSAGE
        assert result.method == 'docx-to-pdf'
        pdf_cls.return_value.document_to_pdf.assert_not_called()
