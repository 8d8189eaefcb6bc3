"""
Unit tests for the text file reader.
"""

import os
import sys

import pytest

# Add project root to path
sys.path.append(os.path.join(os.path.dirname(__file__), '..', '..'))

from office_toolkit.exceptions import NotFoundError
from office_toolkit.processors import TextFileProcessor
from tests.helpers import write_text_file


class TestTextFileProcessor:
    """Test cases for TextFileProcessor class."""

    def setup_method(self):
        """Setup test fixtures before each test method."""
        self.processor = TextFileProcessor()

    def test_supported_encodings(self):
        assert self.processor.get_supported_encodings() == ['utf-8', 'gbk']

    def test_split_on_blank_lines(self, temp_dir):
        path = write_text_file(os.path.join(temp_dir, "a.txt"), "First\nstill first\n\n  Second  \n\n\n\nThird")
        model = self.processor.process(path)

        assert [block.text for block in model.blocks] == ["First\nstill first", "Second", "Third"]
        assert all(block.style == "paragraph" for block in model.blocks)

    def test_windows_line_endings(self, temp_dir):
        path = write_text_file(os.path.join(temp_dir, "crlf.txt"), "One\r\n\r\nTwo\r\n")
        model = self.processor.process(path)
        assert [block.text for block in model.blocks] == ["One", "Two"]

    def test_whitespace_only_file(self, temp_dir):
        path = write_text_file(os.path.join(temp_dir, "blank.txt"), "  \n\n \n")
        assert len(self.processor.process(path)) == 0

    def test_gbk_fallback(self, temp_dir):
        path = write_text_file(os.path.join(temp_dir, "gbk.txt"), "中文段落", encoding='gbk')
        model = self.processor.process(path)
        assert model.blocks[0].text == "中文段落"

    def test_missing_file(self, temp_dir):
        with pytest.raises(NotFoundError):
            self.processor.process(os.path.join(temp_dir, "missing.txt"))
