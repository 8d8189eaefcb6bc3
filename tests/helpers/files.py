"""
File helpers for office toolkit tests.

Builders for small source files and a TempFileManager stand-in that records
what it creates, so tests can check temporary files are gone afterwards.
"""

import os
from contextlib import contextmanager


def write_text_file(path, content, encoding='utf-8'):
    """Write ``content`` to ``path`` without newline translation and return the path."""
    with open(path, 'w', encoding=encoding, newline='') as f:
        f.write(content)
    return str(path)


def write_minimal_pdf(path, pages=1):
    """Write a blank PDF with the given number of pages, as a render would."""
    from pypdf import PdfWriter

    writer = PdfWriter()
    for _ in range(pages):
        writer.add_blank_page(width=595, height=842)
    with open(path, 'wb') as f:
        writer.write(f)
    return str(path)


class RecordingTempManager:
    """Wraps a real TempFileManager and remembers every path it handed out."""

    def __init__(self, manager):
        self.manager = manager
        self.created = []

    @contextmanager
    def temporary_file(self, *, suffix=""):
        with self.manager.temporary_file(suffix=suffix) as path:
            self.created.append(path)
            yield path

    def all_removed(self):
        return all(not os.path.exists(path) for path in self.created)
