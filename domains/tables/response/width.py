"""Display width of cell text in a monospace code block.

Most emoji take two columns in Discord's code font. Everything else is
counted as one column.
"""

import re


# Emoticons, transport/map, misc symbols, dingbats, flags, technical symbols
# and a few standalone symbols that render as emoji
WIDE_CHARS = re.compile(
    '['
    '\U0001F300-\U0001F9FF'
    '\U0001F600-\U0001F64F'
    '\U0001F680-\U0001F6FF'
    '\U0001F1E0-\U0001F1FF'
    '\u2600-\u26FF'
    '\u2700-\u27BF'
    '\u2300-\u23FF'
    '\u2B50'
    '\u2705'
    '\u274C'
    '\u274E'
    '\u2714'
    '\u2716'
    ']'
)


def display_width(text: str) -> int:
    """Number of monospace columns text occupies."""
    if not text:
        return 0
    return len(text) + len(WIDE_CHARS.findall(text))
