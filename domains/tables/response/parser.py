"""Table Parser - finds GFM pipe tables inside free-form chat text.

Expects the usual layout:
| Header1 | Header2 |
|:--------|--------:|
| Cell1   | Cell2   |

Recognition is deliberately loose: a header line with a pipe, a valid
separator line directly below it, then every following line that contains a
pipe. Short rows are padded, long rows are truncated.
"""

import re
from dataclasses import dataclass
from enum import Enum


SEPARATOR_CELL = re.compile(r'^:?-+:?$')


class Alignment(Enum):
    """Column alignment declared by the separator row."""
    LEFT = 'left'
    CENTER = 'center'
    RIGHT = 'right'
    NONE = 'none'


@dataclass(frozen=True)
class TableRegion:
    """One table found in a message."""
    headers: tuple[str, ...]
    rows: tuple[tuple[str, ...], ...]
    alignments: tuple[Alignment, ...]
    source_span: str
    # Line range in the scanned text, end exclusive
    start_line: int = 0
    end_line: int = 0

    @property
    def col_count(self) -> int:
        return len(self.headers)

    @property
    def row_count(self) -> int:
        return len(self.rows)


def is_candidate_row(line: str) -> bool:
    """A line could be a table row if it contains a pipe at all."""
    return bool(line) and '|' in line.strip()


def _strip_bounding_pipes(line: str) -> str:
    cleaned = line.strip()
    if cleaned.startswith('|'):
        cleaned = cleaned[1:]
    if cleaned.endswith('|'):
        cleaned = cleaned[:-1]
    return cleaned


def is_separator_row(line: str) -> bool:
    """Check for an alignment row such as |---|:--:|---:|"""
    if not line or not line.strip():
        return False
    segments = _strip_bounding_pipes(line).split('|')
    return len(segments) > 0 and all(
        SEPARATOR_CELL.match(segment.strip()) for segment in segments
    )


def parse_row(line: str) -> list[str]:
    """Split a row into trimmed cells."""
    return [cell.strip() for cell in _strip_bounding_pipes(line).split('|')]


def parse_alignments(line: str) -> list[Alignment]:
    """Read column alignment from colon placement in the separator row."""
    alignments = []
    for cell in parse_row(line):
        left = cell.startswith(':')
        right = cell.endswith(':')
        if left and right:
            alignments.append(Alignment.CENTER)
        elif right:
            alignments.append(Alignment.RIGHT)
        elif left:
            alignments.append(Alignment.LEFT)
        else:
            alignments.append(Alignment.NONE)
    return alignments


def _fit(cells: list, width: int, filler) -> tuple:
    """Pad with filler or truncate so the row has exactly `width` cells."""
    if len(cells) < width:
        cells = cells + [filler] * (width - len(cells))
    return tuple(cells[:width])


def scan_tables(text: str) -> list[TableRegion]:
    """Find every table in text, in document order.

    Lookahead is a single line (the separator check), so a false positive
    such as a lone pipe in prose only costs one step forward.
    """
    if not text:
        return []

    lines = text.split('\n')
    regions = []
    i = 0

    while i < len(lines):
        if not is_candidate_row(lines[i]):
            i += 1
            continue

        if i + 1 >= len(lines) or not is_separator_row(lines[i + 1]):
            i += 1
            continue

        headers = parse_row(lines[i])
        alignments = _fit(parse_alignments(lines[i + 1]), len(headers), Alignment.NONE)

        rows = []
        j = i + 2
        while j < len(lines) and is_candidate_row(lines[j]):
            rows.append(_fit(parse_row(lines[j]), len(headers), ''))
            j += 1

        # Header + separator alone is not a table
        if rows:
            regions.append(TableRegion(
                headers=tuple(headers),
                rows=tuple(rows),
                alignments=alignments,
                source_span='\n'.join(lines[i:j]),
                start_line=i,
                end_line=j,
            ))

        i = j

    return regions
