"""Inline span tokenizer for card cells.

Splits one cell into runs of plain, bold, italic and code text. Links are
resolved to their label first. Nesting is not supported: the earliest span
wins and scanning resumes after it.
"""

import re
from dataclasses import dataclass

from .links import resolve_markdown_links


# Alternation order matters at equal positions: ** before *, __ before _
INLINE_SPAN = re.compile(
    r'\*\*(?P<bold_star>.+?)\*\*'
    r'|__(?P<bold_under>.+?)__'
    r'|(?<!\*)\*(?!\*)(?P<italic_star>.+?)(?<!\*)\*(?!\*)'
    r'|(?<!_)_(?!_)(?P<italic_under>.+?)(?<!_)_(?!_)'
    r'|`(?P<code>[^`]+)`'
)


@dataclass(frozen=True)
class TextRun:
    text: str
    bold: bool = False
    italic: bool = False
    code: bool = False


def tokenize_inline(text: str) -> list[TextRun]:
    """Break cell text into formatted runs."""
    text = resolve_markdown_links(text or '')
    runs = []
    pos = 0

    for match in INLINE_SPAN.finditer(text):
        if match.start() > pos:
            runs.append(TextRun(text[pos:match.start()]))

        kind = match.lastgroup
        content = match.group(kind)
        if kind.startswith('bold'):
            runs.append(TextRun(content, bold=True))
        elif kind.startswith('italic'):
            runs.append(TextRun(content, italic=True))
        else:
            runs.append(TextRun(content, code=True))
        pos = match.end()

    if pos < len(text) or not runs:
        runs.append(TextRun(text[pos:]))

    return runs


def plain_text(runs: list[TextRun]) -> str:
    return ''.join(run.text for run in runs)
