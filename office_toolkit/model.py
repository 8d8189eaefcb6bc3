"""
In-memory document model shared by every conversion direction.

A document is an ordered list of blocks: styled text (paragraph or heading)
and tables. A workbook is an ordered list of named sheets, each holding the
rows of a single table.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Union

PARAGRAPH = "paragraph"


def heading_style(level: int) -> str:
    """Return the style tag for a heading level (1-6)."""
    if not 1 <= level <= 6:
        raise ValueError(f"Heading level must be between 1 and 6, got {level}")
    return f"heading{level}"


def heading_level(style: str) -> Optional[int]:
    """Return the heading level encoded in a style tag, or None for paragraphs."""
    if style.startswith("heading") and style[7:].isdigit():
        level = int(style[7:])
        if 1 <= level <= 6:
            return level
    return None


@dataclass
class Cell:
    text: str = ''
    is_header: bool = False


@dataclass
class Row:
    cells: List[Cell] = field(default_factory=list)

    @property
    def texts(self) -> List[str]:
        return [cell.text for cell in self.cells]


@dataclass
class TextBlock:
    """A paragraph or heading."""
    text: str
    style: str = PARAGRAPH

    def __post_init__(self):
        if self.style != PARAGRAPH and heading_level(self.style) is None:
            raise ValueError(f"Unknown style tag: {self.style}")

    @property
    def level(self) -> Optional[int]:
        return heading_level(self.style)

    @property
    def html_tag(self) -> str:
        level = self.level
        return f"h{level}" if level else "p"


@dataclass
class TableBlock:
    rows: List[Row] = field(default_factory=list)


Block = Union[TextBlock, TableBlock]


@dataclass
class DocumentModel:
    """Ordered sequence of blocks in document order. May be empty."""
    blocks: List[Block] = field(default_factory=list)

    def add_text(self, text: str, style: str = PARAGRAPH) -> TextBlock:
        block = TextBlock(text=text, style=style)
        self.blocks.append(block)
        return block

    def add_table(self, rows: List[List[str]], header_first_row: bool = True) -> TableBlock:
        """Append a table built from plain cell texts."""
        table = TableBlock(rows=[
            Row(cells=[Cell(text=text, is_header=header_first_row and index == 0) for text in row])
            for index, row in enumerate(rows)
        ])
        self.blocks.append(table)
        return table

    @property
    def text_blocks(self) -> List[TextBlock]:
        return [block for block in self.blocks if isinstance(block, TextBlock)]

    @property
    def tables(self) -> List[TableBlock]:
        return [block for block in self.blocks if isinstance(block, TableBlock)]

    def __len__(self) -> int:
        return len(self.blocks)


@dataclass
class Sheet:
    name: str
    rows: List[Row] = field(default_factory=list)


@dataclass
class WorkbookModel:
    sheets: List[Sheet] = field(default_factory=list)

    @property
    def sheet_names(self) -> List[str]:
        return [sheet.name for sheet in self.sheets]

    def __len__(self) -> int:
        return len(self.sheets)
