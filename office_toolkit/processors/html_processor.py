"""
HTML reader.

Parses HTML with BeautifulSoup (lxml parser) and recovers either a flat
DocumentModel from the body's direct children, or one sheet per <table>.
"""

import re

from bs4 import BeautifulSoup, Tag

from .. import config
from ..exceptions import InvalidFormatError
from ..model import PARAGRAPH, Cell, DocumentModel, Row, Sheet, WorkbookModel, heading_style
from .base import FileProcessorBase

HEADING_TAG = re.compile(r'^h([1-6])$')

NON_CONTENT_TAGS = ['script', 'style', 'noscript', 'template']


class HtmlProcessor(FileProcessorBase):
    """
    Reader for HTML documents.

    Text is decoded exactly once by the parser, so entities such as ``&amp;``
    come back as ``&`` and stay that way.
    """

    SUPPORTED_FORMATS = config.SUPPORTED_HTML_FORMATS

    def load(self, file_path: str) -> BeautifulSoup:
        """Parse an HTML file into a BeautifulSoup tree."""
        self._validate_file(file_path)
        with open(file_path, 'rb') as f:
            return BeautifulSoup(f, 'lxml')

    def process(self, file_path: str, **kwargs) -> DocumentModel:
        """
        Read the direct children of <body> into a DocumentModel.

        Every element with non-empty text becomes one text block; h1-h6 keep
        their heading level, anything else (tables included) is a paragraph.

        Args:
            file_path: Path to the HTML file

        Returns:
            DocumentModel made of TextBlocks only
        """
        soup = self.load(file_path)
        return self.soup_to_model(soup)

    def soup_to_model(self, soup: BeautifulSoup) -> DocumentModel:
        body = soup.body or soup
        model = DocumentModel()

        for node in body.children:
            if not isinstance(node, Tag):
                continue

            text = node.get_text().strip()
            if not text:
                continue

            match = HEADING_TAG.match(node.name or '')
            style = heading_style(int(match.group(1))) if match else PARAGRAPH
            model.add_text(text, style)

        self.logger.debug(f"Recovered {len(model)} blocks from HTML body")
        return model

    def read_tables(self, file_path: str) -> WorkbookModel:
        """
        Read every <table> in document order as a sheet named Sheet1..SheetN.

        Raises:
            InvalidFormatError: If the document contains no table
        """
        soup = self.load(file_path)
        tables = soup.find_all('table')
        if not tables:
            raise InvalidFormatError("No tables found in HTML document.")

        model = WorkbookModel()
        for number, table in enumerate(tables, start=1):
            rows = []
            for tr in table.find_all('tr'):
                cells = [
                    Cell(text=cell.get_text().strip(), is_header=cell.name == 'th')
                    for cell in tr.find_all(['td', 'th'])
                ]
                rows.append(Row(cells=cells))
            model.sheets.append(Sheet(name=f"Sheet{number}", rows=rows))

        self.logger.debug(f"Found {len(tables)} tables in {file_path}")
        return model

    def extract_text(self, file_path: str) -> str:
        """Return the decoded text of the whole document without script or style content."""
        soup = self.load(file_path)
        for node in soup.find_all(NON_CONTENT_TAGS):
            node.decompose()
        return soup.get_text()

    def extract_links(self, file_path: str) -> list[str]:
        """Return non-blank href values of all anchors, in document order."""
        soup = self.load(file_path)
        links = []
        for anchor in soup.find_all('a', href=True):
            href = anchor['href']
            if href and href.strip():
                links.append(href)
        return links

    def clean(self, file_path: str) -> tuple[BeautifulSoup, int, int]:
        """
        Remove <script> elements and on* event handler attributes.

        Returns:
            The cleaned tree, the number of scripts removed and the number of
            handler attributes removed
        """
        soup = self.load(file_path)

        scripts = soup.find_all('script')
        for node in scripts:
            node.decompose()

        handlers = 0
        for node in soup.find_all(True):
            for name in [attr for attr in node.attrs if attr.lower().startswith('on')]:
                del node[name]
                handlers += 1

        return soup, len(scripts), handlers
