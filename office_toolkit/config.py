"""
Configuration module for office toolkit.

This module contains default configuration values used across the toolkit,
including supported file formats, HTML stylesheets, PDF rendering parameters
and the browser discovery list.
"""

from typing import Dict, List, Tuple

# Supported file formats (centralized)
SUPPORTED_DOCUMENT_FORMATS = {'.docx'}
"""Set[str]: Word-processing package formats."""

SUPPORTED_SPREADSHEET_FORMATS = {'.xlsx', '.xlsm'}
"""Set[str]: Spreadsheet package formats readable by openpyxl."""

SUPPORTED_HTML_FORMATS = {'.html', '.htm'}
"""Set[str]: HTML document formats."""

SUPPORTED_TEXT_FORMATS = {'.txt', '.text', '.md'}
"""Set[str]: Plain text formats accepted by text-to-html."""

TEXT_ENCODINGS = ['utf-8', 'gbk']
"""List[str]: Encodings tried in order when reading plain text files."""

# Document model mapping
HEADING_STYLE_IDS = {f"Heading{level}": f"heading{level}" for level in range(1, 7)}
"""Dict[str, str]: Word paragraph style identifier -> model style tag.

Any style identifier not listed here maps to the plain ``paragraph`` tag.
"""

# HTML output
DOCUMENT_TITLE = "Document"
SPREADSHEET_TITLE = "Spreadsheet"

DOCUMENT_STYLESHEET = """\
body { font-family: Calibri, Arial, sans-serif; margin: 40px; }
p { margin: 0 0 10px 0; }
h1, h2, h3, h4, h5, h6 { margin: 20px 0 10px 0; }
table { border-collapse: collapse; margin: 10px 0; }
td, th { border: 1px solid #ccc; padding: 5px; }"""
"""str: Embedded style rules for documents converted from .docx or HTML."""

SPREADSHEET_STYLESHEET = """\
body { font-family: Calibri, Arial, sans-serif; margin: 40px; }
table { border-collapse: collapse; margin: 20px 0; }
td, th { border: 1px solid #ccc; padding: 8px; text-align: left; }
th { background-color: #f0f0f0; font-weight: bold; }
h2 { margin: 30px 0 10px 0; }"""
"""str: Embedded style rules for workbooks, one table per sheet."""

TEXT_STYLESHEET = """\
body { font-family: Arial, sans-serif; margin: 40px; line-height: 1.6; }
p { margin: 0 0 15px 0; }"""
"""str: Embedded style rules for plain text converted to HTML."""

# PDF rendering
PDF_PAGE_FORMAT = "A4"
PDF_PRINT_BACKGROUND = True
PDF_MARGINS = {"top": "1cm", "right": "1cm", "bottom": "1cm", "left": "1cm"}

BROWSER_LAUNCH_ARGS = ["--no-sandbox", "--disable-setuid-sandbox"]
"""List[str]: Command line switches passed to the headless browser."""

DEFAULT_RENDER_TIMEOUT_SECONDS = 120
"""int: Upper bound for one HTML -> PDF render, browser launch included."""

TEMP_FILE_PREFIX = "office_toolkit_"

# Browser discovery.
# Windows entries are (environment variable, relative path) pairs so the
# install roots follow the machine's Program Files / LocalAppData settings.
# Entries are probed in order; the first existing file wins.
WINDOWS_BROWSER_CANDIDATES: List[Tuple[str, str]] = [
    ("ProgramFiles", r"Google\Chrome\Application\chrome.exe"),
    ("ProgramFiles(x86)", r"Google\Chrome\Application\chrome.exe"),
    ("LOCALAPPDATA", r"Google\Chrome\Application\chrome.exe"),
    ("ProgramFiles", r"Microsoft\Edge\Application\msedge.exe"),
    ("ProgramFiles(x86)", r"Microsoft\Edge\Application\msedge.exe"),
]

BROWSER_CANDIDATES: Dict[str, List[str]] = {
    "linux": [
        "/usr/bin/google-chrome",
        "/usr/bin/google-chrome-stable",
        "/usr/bin/chromium",
        "/usr/bin/chromium-browser",
        "/snap/bin/chromium",
        "/usr/bin/microsoft-edge",
        "/usr/bin/microsoft-edge-stable",
    ],
    "darwin": [
        "/Applications/Google Chrome.app/Contents/MacOS/Google Chrome",
        "/Applications/Chromium.app/Contents/MacOS/Chromium",
        "/Applications/Microsoft Edge.app/Contents/MacOS/Microsoft Edge",
    ],
}
"""Dict[str, List[str]]: Absolute browser paths for POSIX platforms."""
