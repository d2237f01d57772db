"""Text Table Formatter - renders tables as fixed-width code blocks.

Discord cannot render markdown tables, so they are redrawn with box-drawing
(or plain ASCII) borders inside a code fence. Links inside cells are reduced
to their label and optionally listed below the block, where they stay
clickable.
"""

from dataclasses import dataclass
from typing import Optional

from ..links import LinkCollector, format_link_lines
from ..parser import Alignment, TableRegion
from ..width import display_width


@dataclass(frozen=True)
class GlyphSet:
    """Border and junction characters for one drawing style."""
    top_left: str
    top_right: str
    bottom_left: str
    bottom_right: str
    horizontal: str
    vertical: str
    tee_down: str
    tee_up: str
    tee_right: str
    tee_left: str
    cross: str


UNICODE_GLYPHS = GlyphSet(
    top_left='┌', top_right='┐', bottom_left='└', bottom_right='┘',
    horizontal='─', vertical='│',
    tee_down='┬', tee_up='┴', tee_right='├', tee_left='┤', cross='┼',
)

ASCII_GLYPHS = GlyphSet(
    top_left='+', top_right='+', bottom_left='+', bottom_right='+',
    horizontal='-', vertical='|',
    tee_down='+', tee_up='+', tee_right='+', tee_left='+', cross='+',
)

GLYPH_SETS = {
    'unicode': UNICODE_GLYPHS,
    'ascii': ASCII_GLYPHS,
}


def pad_cell(text: str, width: int, alignment: Alignment) -> str:
    """Pad text to `width` display columns according to alignment."""
    padding = width - display_width(text)
    if padding <= 0:
        return text

    if alignment == Alignment.CENTER:
        left = padding // 2
        return ' ' * left + text + ' ' * (padding - left)
    if alignment == Alignment.RIGHT:
        return ' ' * padding + text
    return text + ' ' * padding


def column_widths(headers: list[str], rows: list[list[str]]) -> list[int]:
    widths = []
    for i, header in enumerate(headers):
        width = display_width(header)
        for row in rows:
            width = max(width, display_width(row[i] if i < len(row) else ''))
        widths.append(width)
    return widths


def _border(widths: list[int], left: str, join: str, right: str, glyphs: GlyphSet) -> str:
    return left + join.join(glyphs.horizontal * (w + 2) for w in widths) + right


def _content_line(cells: list[str], widths: list[int], alignments, glyphs: GlyphSet) -> str:
    padded = [
        ' ' + pad_cell(cell, widths[i], alignments[i]) + ' '
        for i, cell in enumerate(cells)
    ]
    return glyphs.vertical + glyphs.vertical.join(padded) + glyphs.vertical


def table_to_code_block(
    table: TableRegion,
    glyphs: Optional[GlyphSet] = None,
    show_links: bool = True,
) -> str:
    """Render a table region as a fenced code block.

    Args:
        table: Parsed table
        glyphs: Border characters (defaults to unicode box-drawing)
        show_links: List extracted links below the block

    Returns:
        Fenced block, followed by link lines when enabled and present
    """
    glyphs = glyphs or UNICODE_GLYPHS
    collector = LinkCollector()

    headers = [collector.collect(h) for h in table.headers]
    rows = [[collector.collect(cell) for cell in row] for row in table.rows]
    alignments = list(table.alignments) + [Alignment.NONE] * (len(headers) - len(table.alignments))

    widths = column_widths(headers, rows)

    lines = [
        '```',
        _border(widths, glyphs.top_left, glyphs.tee_down, glyphs.top_right, glyphs),
        _content_line(headers, widths, alignments, glyphs),
        _border(widths, glyphs.tee_right, glyphs.cross, glyphs.tee_left, glyphs),
    ]
    for row in rows:
        lines.append(_content_line(row, widths, alignments, glyphs))
    lines.append(_border(widths, glyphs.bottom_left, glyphs.tee_up, glyphs.bottom_right, glyphs))
    lines.append('```')

    if show_links and len(collector):
        lines.append('')
        lines.extend(format_link_lines(collector.links))

    return '\n'.join(lines)
