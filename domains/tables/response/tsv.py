"""TSV Normaliser - turns pasted spreadsheet data into pipe tables.

Copying a range out of Excel or Google Sheets gives tab-separated lines.
Each run of two or more tab lines becomes a markdown table so the regular
table pipeline can pick it up. Everything else passes through untouched.
"""


def looks_like_tsv(text: str) -> bool:
    """Check whether the whole text is a single tab-separated block.

    Needs a header plus at least one data line, the same number of tabs on
    every line, and must not already be a pipe table.
    """
    if not text:
        return False

    lines = [line for line in text.split('\n') if line.strip()]
    if len(lines) < 2:
        return False

    tab_counts = [line.count('\t') for line in lines]
    if any(count == 0 for count in tab_counts):
        return False
    if any(count != tab_counts[0] for count in tab_counts):
        return False

    has_pipe_structure = all(
        line.strip().startswith('|') or line.strip().endswith('|')
        for line in lines
    )
    return not has_pipe_structure


def block_to_markdown(lines: list[str]) -> str:
    """Convert a block of tab-separated lines to a pipe table.

    First line is the header row.
    """
    rows = [
        [cell.strip() for cell in line.split('\t')]
        for line in lines
        if line.strip()
    ]
    if not rows:
        return '\n'.join(lines)

    headers = rows[0]
    md_lines = [
        '| ' + ' | '.join(headers) + ' |',
        '| ' + ' | '.join('---' for _ in headers) + ' |',
    ]

    for row in rows[1:]:
        row = (row + [''] * len(headers))[:len(headers)]
        md_lines.append('| ' + ' | '.join(row) + ' |')

    return '\n'.join(md_lines)


def normalize_tsv(text: str) -> str:
    """Rewrite every multi-line tab block in text as a markdown table."""
    if not text or '\t' not in text:
        return text

    result = []
    block: list[str] = []

    def flush():
        if len(block) >= 2:
            result.append(block_to_markdown(block))
        elif block:
            # One line is too little to infer a table
            result.append(block[0])
        block.clear()

    for line in text.split('\n'):
        if '\t' in line:
            block.append(line)
            continue
        flush()
        result.append(line)

    flush()
    return '\n'.join(result)
