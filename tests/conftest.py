"""
Pytest configuration and fixtures for office toolkit tests.
"""

import os
import shutil
import sys
import tempfile
from datetime import datetime
from pathlib import Path

import pytest

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from tests.helpers import write_text_file  # noqa: E402

SAMPLE_HTML = """<html><head><title>Sample</title></head>
<body>
<h1>Title</h1>
<p>Hello &amp; welcome</p>
</body></html>
"""

TABLES_HTML = """<html><body>
<p>Two tables follow</p>
<table>
  <tr><th>Name</th><th>Score</th></tr>
  <tr><td>Ann</td><td>90</td></tr>
  <tr><td>Bob</td><td>85</td></tr>
</table>
<table>
  <tr><td>only</td></tr>
</table>
</body></html>
"""


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    temp_dir = tempfile.mkdtemp()
    yield temp_dir
    shutil.rmtree(temp_dir, ignore_errors=True)


@pytest.fixture
def sample_html(temp_dir):
    """HTML file with one heading and one paragraph."""
    return write_text_file(os.path.join(temp_dir, "sample.html"), SAMPLE_HTML)


@pytest.fixture
def tables_html(temp_dir):
    """HTML file with a paragraph and two tables."""
    return write_text_file(os.path.join(temp_dir, "tables.html"), TABLES_HTML)


@pytest.fixture
def sample_docx(temp_dir):
    """
    Word document with a heading, two paragraphs (one blank), and a 2x2 table.
    """
    from docx import Document

    document = Document()
    document.core_properties.title = "Quarterly Report"
    document.core_properties.author = "Finance Team"
    document.core_properties.keywords = "report, q1"
    document.add_heading("Overview", level=1)
    document.add_paragraph("Revenue & costs grew")
    document.add_paragraph("   ")
    document.add_heading("Details", level=2)
    table = document.add_table(rows=2, cols=2)
    table.cell(0, 0).text = "Item"
    table.cell(0, 1).text = "Amount"
    table.cell(1, 0).text = "Rent"
    table.cell(1, 1).text = "1200"

    path = os.path.join(temp_dir, "sample.docx")
    document.save(path)
    return path


@pytest.fixture
def sample_xlsx(temp_dir):
    """Workbook with sheets Q1 and Q2 holding small tables, plus an empty sheet."""
    from openpyxl import Workbook

    wb = Workbook()
    ws = wb.active
    ws.title = "Q1"
    ws.append(["Region", "Sales", "Active"])
    ws.append(["North", 1500.0, True])
    ws.append(["South", 980.5, False])

    ws2 = wb.create_sheet("Q2")
    ws2.append(["Region", "Date"])
    ws2.append(["North", datetime(2024, 4, 1, 9, 30)])

    wb.create_sheet("Empty")
    wb.properties.creator = "Finance Team"
    wb.properties.title = "Sales"

    path = os.path.join(temp_dir, "sample.xlsx")
    wb.save(path)
    return path


@pytest.fixture
def docx_with_image(temp_dir):
    """Word document with one embedded PNG picture."""
    import base64

    from docx import Document

    # 1x1 transparent PNG
    png = base64.b64decode(
        "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNkYPhfDwAChwGA60e6kgAAAABJRU5ErkJggg=="
    )
    image_path = os.path.join(temp_dir, "pixel.png")
    with open(image_path, 'wb') as f:
        f.write(png)

    document = Document()
    document.add_paragraph("Picture below")
    document.add_picture(image_path)

    path = os.path.join(temp_dir, "with_image.docx")
    document.save(path)
    return path
