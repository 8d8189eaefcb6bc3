"""
Unit tests for the HTML reader.
"""

import os
import sys

import pytest

# Add project root to path
sys.path.append(os.path.join(os.path.dirname(__file__), '..', '..'))

from office_toolkit.exceptions import InvalidFormatError, NotFoundError
from office_toolkit.processors import HtmlProcessor
from tests.helpers import write_text_file


class TestHtmlProcessor:
    """Test cases for HtmlProcessor class."""

    def setup_method(self):
        """Setup test fixtures before each test method."""
        self.processor = HtmlProcessor()

    def _write(self, temp_dir, content, name="page.html"):
        return write_text_file(os.path.join(temp_dir, name), content)

    def test_heading_and_paragraph(self, sample_html):
        model = self.processor.process(sample_html)

        assert len(model) == 2
        assert model.blocks[0].style == "heading1"
        assert model.blocks[0].text == "Title"
        assert model.blocks[1].style == "paragraph"
        assert model.blocks[1].text == "Hello & welcome"

    def test_entities_decoded_once(self, temp_dir):
        path = self._write(temp_dir, "<html><body><p><b>&amp;amp;</b></p></body></html>")
        model = self.processor.process(path)
        assert model.blocks[0].text == "&amp;"

    def test_empty_elements_dropped(self, temp_dir):
        path = self._write(temp_dir, "<html><body><p>   </p><div></div><p>kept</p></body></html>")
        model = self.processor.process(path)
        assert [block.text for block in model.blocks] == ["kept"]

    def test_tables_become_paragraphs(self, tables_html):
        model = self.processor.process(tables_html)
        assert all(block.style == "paragraph" for block in model.blocks)
        assert "Ann" in model.blocks[1].text

    def test_missing_body(self, temp_dir):
        path = self._write(temp_dir, "<h2>Loose</h2>")
        model = self.processor.process(path)
        assert model.blocks[0].style == "heading2"

    def test_read_tables(self, tables_html):
        model = self.processor.read_tables(tables_html)

        assert model.sheet_names == ["Sheet1", "Sheet2"]
        assert [len(row.cells) for row in model.sheets[0].rows] == [2, 2, 2]
        assert model.sheets[0].rows[0].cells[0].is_header is True
        assert model.sheets[0].rows[1].texts == ["Ann", "90"]
        assert model.sheets[1].rows[0].texts == ["only"]

    def test_read_tables_without_table(self, sample_html):
        with pytest.raises(InvalidFormatError, match="No tables found"):
            self.processor.read_tables(sample_html)

    def test_extract_text_skips_scripts(self, temp_dir):
        path = self._write(
            temp_dir,
            "<html><head><style>p {}</style></head><body><p>Visible &lt;b&gt;</p>"
            "<script>var hidden = 1;</script><noscript>nojs</noscript></body></html>",
        )
        text = self.processor.extract_text(path)

        assert "Visible <b>" in text
        assert "hidden" not in text
        assert "nojs" not in text
        assert "p {}" not in text

    def test_extract_links(self, temp_dir):
        path = self._write(
            temp_dir,
            '<html><body><a href="https://a.example">a</a><a>none</a>'
            '<a href="  ">blank</a><a href="/b">b</a></body></html>',
        )
        assert self.processor.extract_links(path) == ["https://a.example", "/b"]

    def test_clean(self, temp_dir):
        path = self._write(
            temp_dir,
            '<html><body onload="init()"><script>x()</script>'
            '<a href="#" onclick="go()" onMouseOver="hi()">link</a></body></html>',
        )
        soup, scripts, handlers = self.processor.clean(path)

        assert scripts == 1
        assert handlers == 3
        assert soup.find('script') is None
        assert 'onclick' not in str(soup)
        assert soup.find('a')['href'] == '#'

    def test_missing_file(self, temp_dir):
        with pytest.raises(NotFoundError):
            self.processor.process(os.path.join(temp_dir, "nope.html"))
