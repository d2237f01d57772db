"""Card Formatter - renders a table as an embeddable SVG image.

Mobile clients wrap wide code blocks, so the card style draws the table as a
picture instead. Text width is estimated from fixed per-character constants
rather than font metrics, which keeps rendering free of font files.

Extracted links go ABOVE the image. Links placed after an inline image
preview get swallowed by it in the chat client.
"""

import base64
import html

from ..i18n import DEFAULT_LANGUAGE, links_heading, usage_hint
from ..inline import TextRun, plain_text, tokenize_inline
from ..links import LINK_MARKER, extract_links
from ..parser import Alignment, TableRegion


FONT_FAMILY = "Helvetica, Arial, sans-serif"
CODE_FONT_FAMILY = "Menlo, Consolas, monospace"
FONT_SIZE = 14
CELL_PADDING = 12
ROW_HEIGHT = FONT_SIZE + 2 * CELL_PADDING

# Column sizing: px per character, with a floor so tiny columns stay tappable
COLUMN_CHAR_PX = 9
MIN_COLUMN_PX = 80

# Text placement estimates
TEXT_CHAR_PX = 7.5
CODE_CHAR_PX = 8.5

HEADER_FILL = "#e8eef6"
ROW_FILL = "#ffffff"
ALT_ROW_FILL = "#f6f8fa"
BORDER_COLOR = "#d0d7de"
TEXT_COLOR = "#1f2328"
CODE_FILL = "#57606a"


def run_width(run: TextRun) -> float:
    return len(run.text) * (CODE_CHAR_PX if run.code else TEXT_CHAR_PX)


def column_pixel_widths(cells: list[list[list[TextRun]]]) -> list[int]:
    """Width of each column from the longest plain text in it."""
    widths = []
    for col in range(len(cells[0])):
        longest = max(len(plain_text(row[col])) for row in cells)
        widths.append(max(COLUMN_CHAR_PX * longest, MIN_COLUMN_PX) + 2 * CELL_PADDING)
    return widths


def _text_x(col_x: int, col_width: int, text_width: float, alignment: Alignment) -> float:
    if alignment == Alignment.CENTER:
        return col_x + (col_width - text_width) / 2
    if alignment == Alignment.RIGHT:
        return col_x + col_width - CELL_PADDING - text_width
    return col_x + CELL_PADDING


def _tspan(run: TextRun, force_bold: bool) -> str:
    attrs = []
    if run.bold or force_bold:
        attrs.append('font-weight="bold"')
    if run.italic:
        attrs.append('font-style="italic"')
    if run.code:
        attrs.append(f'font-family="{CODE_FONT_FAMILY}" fill="{CODE_FILL}"')
    attr_text = (' ' + ' '.join(attrs)) if attrs else ''
    return f'<tspan{attr_text}>{html.escape(run.text)}</tspan>'


def _cell_svg(
    runs: list[TextRun],
    x: int,
    y: int,
    width: int,
    fill: str,
    alignment: Alignment,
    header: bool,
) -> list[str]:
    parts = [
        f'<rect x="{x}" y="{y}" width="{width}" height="{ROW_HEIGHT}" '
        f'fill="{fill}" stroke="{BORDER_COLOR}" stroke-width="1"/>'
    ]
    runs = [run for run in runs if run.text]
    if not runs:
        return parts

    text_width = sum(run_width(run) for run in runs)
    text_x = _text_x(x, width, text_width, alignment)
    text_y = y + ROW_HEIGHT / 2
    spans = ''.join(_tspan(run, header) for run in runs)
    parts.append(
        f'<text x="{text_x:.1f}" y="{text_y:.1f}" dominant-baseline="middle" '
        f'fill="{TEXT_COLOR}">{spans}</text>'
    )
    return parts


def table_to_svg(table: TableRegion) -> str:
    """Draw the table as a standalone SVG document."""
    header_runs = [tokenize_inline(h) for h in table.headers]
    body_runs = [[tokenize_inline(cell) for cell in row] for row in table.rows]
    widths = column_pixel_widths([header_runs] + body_runs)
    alignments = list(table.alignments) + [Alignment.NONE] * (len(widths) - len(table.alignments))

    total_width = sum(widths)
    total_height = ROW_HEIGHT * (len(body_runs) + 1)

    parts = [
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{total_width}" height="{total_height}" '
        f'viewBox="0 0 {total_width} {total_height}" font-family="{FONT_FAMILY}" font-size="{FONT_SIZE}">'
    ]

    for row_index, row in enumerate([header_runs] + body_runs):
        y = row_index * ROW_HEIGHT
        if row_index == 0:
            fill = HEADER_FILL
        else:
            fill = ALT_ROW_FILL if row_index % 2 == 0 else ROW_FILL
        x = 0
        for col, runs in enumerate(row):
            parts.extend(_cell_svg(runs, x, y, widths[col], fill, alignments[col], row_index == 0))
            x += widths[col]

    parts.append('</svg>')
    return ''.join(parts)


def svg_data_url(svg: str) -> str:
    encoded = base64.b64encode(svg.encode('utf-8')).decode('ascii')
    return f"data:image/svg+xml;base64,{encoded}"


def table_to_card(
    table: TableRegion,
    show_links: bool = True,
    language: str = DEFAULT_LANGUAGE,
    include_image: bool = True,
) -> str:
    """Render a table region as a card image reference.

    Args:
        table: Parsed table
        show_links: List extracted links above the image
        language: 2-letter code for the heading and usage hint
        include_image: Append the data-URL image. Callers that deliver the
            SVG separately pass False and get only the link text.

    Returns:
        Optional link list and hint, then a markdown image with a data URL
    """
    links = extract_links(list(table.headers) + [cell for row in table.rows for cell in row])

    lines = []
    if links:
        if show_links:
            lines.append(f"**{LINK_MARKER} {links_heading(language)}**")
            lines.extend(f"- [{link.label}]({link.url})" for link in links)
            lines.append('')
        lines.append(f"_{usage_hint(language, show_links)}_")
        lines.append('')

    if include_image:
        lines.append(f"![table]({svg_data_url(table_to_svg(table))})")
    return '\n'.join(lines).rstrip('\n')
