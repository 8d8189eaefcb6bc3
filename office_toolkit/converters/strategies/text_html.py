"""
Plain text <-> HTML conversion strategies, plus HTML cleaning.
"""

from ... import config
from ...processors import HtmlProcessor, TextFileProcessor
from ..html_renderer import render_text
from .base import ConversionResult, ConversionStrategy


class TextToHtmlStrategy(ConversionStrategy):
    """Strategy for wrapping blank-line separated paragraphs of a text file in <p> elements."""

    SUPPORTED_FORMATS = config.SUPPORTED_TEXT_FORMATS

    def __init__(self):
        super().__init__()
        self.reader = TextFileProcessor()

    def _convert(self, input_path: str, output_path: str) -> ConversionResult:
        model = self.reader.process(input_path)
        self._write_text(output_path, render_text(model))
        return ConversionResult.success_result(output_path, items_processed=len(model))

    def get_method_name(self) -> str:
        return "text-to-html"


class HtmlToTextStrategy(ConversionStrategy):
    """Strategy for extracting the decoded text of an HTML document."""

    SUPPORTED_FORMATS = config.SUPPORTED_HTML_FORMATS

    def __init__(self):
        super().__init__()
        self.reader = HtmlProcessor()

    def _convert(self, input_path: str, output_path: str) -> ConversionResult:
        text = self.reader.extract_text(input_path)
        self._write_text(output_path, text)
        return ConversionResult.success_result(output_path, items_processed=1)

    def get_method_name(self) -> str:
        return "html-to-text"


class CleanHtmlStrategy(ConversionStrategy):
    """Strategy for stripping <script> elements and inline event handlers from HTML."""

    SUPPORTED_FORMATS = config.SUPPORTED_HTML_FORMATS

    def __init__(self):
        super().__init__()
        self.reader = HtmlProcessor()

    def _convert(self, input_path: str, output_path: str) -> ConversionResult:
        soup, scripts, handlers = self.reader.clean(input_path)
        self._write_text(output_path, str(soup))
        return ConversionResult.success_result(
            output_path,
            items_processed=scripts + handlers,
            messages=[
                f"Removed {scripts} script element(s)",
                f"Removed {handlers} event handler attribute(s)",
            ],
        )

    def get_method_name(self) -> str:
        return "clean-html"


def extract_links(html_path: str) -> list[str]:
    """
    List the href values of all anchors in an HTML file.

    Returns an empty list when the file is missing or cannot be parsed.
    """
    reader = HtmlProcessor()
    try:
        return reader.extract_links(html_path)
    except Exception as e:
        reader.logger.warning(f"Could not extract links from {html_path}: {e}")
        return []
