"""
HTML rendering of document and workbook models.

Output is a complete, self-contained UTF-8 HTML document with its style rules
embedded in the head. All text is HTML-escaped (``&``, ``<``, ``>`` and both
quote characters).
"""

import html
from typing import List

from .. import config
from ..model import DocumentModel, Row, TableBlock, TextBlock, WorkbookModel

INDENT = "    "


def escape(text: str) -> str:
    return html.escape(text, quote=True)


def _page(title: str, stylesheet: str, body: List[str]) -> str:
    lines = [
        "<!DOCTYPE html>",
        "<html>",
        "<head>",
        f'{INDENT}<meta charset="utf-8">',
        f"{INDENT}<title>{escape(title)}</title>",
        f"{INDENT}<style>",
    ]
    lines.extend(f"{INDENT * 2}{rule}" for rule in stylesheet.splitlines())
    lines.extend([f"{INDENT}</style>", "</head>", "<body>"])
    lines.extend(body)
    lines.extend(["</body>", "</html>"])
    return "\n".join(lines) + "\n"


def _table_lines(rows: List[Row]) -> List[str]:
    lines = [f"{INDENT}<table>"]
    for row in rows:
        lines.append(f"{INDENT * 2}<tr>")
        for cell in row.cells:
            tag = "th" if cell.is_header else "td"
            lines.append(f"{INDENT * 3}<{tag}>{escape(cell.text)}</{tag}>")
        lines.append(f"{INDENT * 2}</tr>")
    lines.append(f"{INDENT}</table>")
    return lines


def _text_line(block: TextBlock, line_breaks: bool) -> str:
    content = escape(block.text)
    if line_breaks:
        content = content.replace("\r\n", "<br>").replace("\n", "<br>")
    return f"{INDENT}<{block.html_tag}>{content}</{block.html_tag}>"


def render_document(model: DocumentModel,
                    title: str = config.DOCUMENT_TITLE,
                    stylesheet: str = config.DOCUMENT_STYLESHEET,
                    line_breaks: bool = False) -> str:
    """
    Render a DocumentModel as HTML.

    Args:
        model: Document to render
        title: Text of the <title> element
        stylesheet: CSS rules embedded in the head
        line_breaks: Turn line breaks inside text blocks into <br>

    Returns:
        The complete HTML document
    """
    body = []
    for block in model.blocks:
        if isinstance(block, TableBlock):
            body.extend(_table_lines(block.rows))
        else:
            body.append(_text_line(block, line_breaks))
    return _page(title, stylesheet, body)


def render_workbook(model: WorkbookModel,
                    title: str = config.SPREADSHEET_TITLE,
                    stylesheet: str = config.SPREADSHEET_STYLESHEET) -> str:
    """Render a WorkbookModel as HTML: an <h2> with the sheet name, then its table."""
    body = []
    for sheet in model.sheets:
        body.append(f"{INDENT}<h2>{escape(sheet.name)}</h2>")
        body.extend(_table_lines(sheet.rows))
    return _page(title, stylesheet, body)


def render_text(model: DocumentModel) -> str:
    """Render paragraphs read from a plain text file."""
    return render_document(model, stylesheet=config.TEXT_STYLESHEET, line_breaks=True)
