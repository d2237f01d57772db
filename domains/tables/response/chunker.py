"""Chunker - splits rendered messages into Discord-safe segments.

Rendered tables are code fences, so a split must never leave a fence open:
the fence is closed at the end of one segment and re-opened at the start of
the next.
"""

from dataclasses import dataclass
from typing import Optional


DISCORD_MESSAGE_LIMIT = 2000


@dataclass
class ChunkerConfig:
    """Configuration for chunking behaviour."""
    max_chars: int = 1900          # Leave buffer below 2000
    add_chunk_numbers: bool = True  # Add (1/3) markers for 3+ chunks


def chunk(
    text: str,
    config: Optional[ChunkerConfig] = None
) -> list[str]:
    """Split text into Discord-safe chunks.

    Args:
        text: Rendered message text
        config: Optional chunker configuration

    Returns:
        List of text chunks, each under Discord's limit
    """
    if not text:
        return []

    config = config or ChunkerConfig()

    if len(text) <= config.max_chars:
        return [text]

    chunks = split_preserving_code_fences(text, config.max_chars)

    if config.add_chunk_numbers and len(chunks) >= 3:
        chunks = add_chunk_numbers(chunks)

    return chunks


def split_preserving_code_fences(text: str, max_chars: int) -> list[str]:
    """Split on line boundaries, closing and re-opening any open fence."""
    lines = text.split('\n')
    if len(lines) == 1:
        return split_at_boundaries(text, max_chars)

    # Room for the closing fence appended at a split
    budget = max_chars - len('\n```')

    chunks = []
    current = ''
    in_code_block = False
    code_lang = ''

    for line in lines:
        is_fence = line.strip().startswith('```')

        potential = current + ('\n' if current else '') + line
        if len(potential) > budget and current:
            if in_code_block:
                chunks.append(current + '\n```')
                # A closing fence at the split is already covered by the one just added
                current = '' if is_fence else f'```{code_lang}\n{line}'
            else:
                chunks.append(current.strip())
                current = line
        else:
            current = potential

        if is_fence:
            if in_code_block:
                in_code_block = False
                code_lang = ''
            else:
                in_code_block = True
                code_lang = line.strip()[3:].strip()

    if current.strip():
        chunks.append(current.strip())

    # Overlong single lines still need a hard split
    final_chunks = []
    for c in chunks:
        if len(c) > max_chars:
            final_chunks.extend(split_at_boundaries(c, max_chars))
        elif c:
            final_chunks.append(c)

    return final_chunks


def split_at_boundaries(text: str, max_chars: int) -> list[str]:
    """Split text at whitespace when there are no usable line breaks."""
    if len(text) <= max_chars:
        return [text]

    chunks = []
    remaining = text

    while remaining:
        if len(remaining) <= max_chars:
            chunks.append(remaining)
            break

        split_point = find_best_split_point(remaining, max_chars)
        chunks.append(remaining[:split_point].rstrip())
        remaining = remaining[split_point:].lstrip()

    return chunks


def find_best_split_point(text: str, max_chars: int) -> int:
    """Find the best place to split text under max_chars.

    Newline first, then whitespace, then a hard break at max_chars.
    """
    if len(text) <= max_chars:
        return len(text)

    search_start = max(0, max_chars - 200)
    search_area = text[search_start:max_chars]

    newline_match = search_area.rfind('\n')
    if newline_match > 0:
        return search_start + newline_match + 1

    space_match = search_area.rfind(' ')
    if space_match > 0:
        return search_start + space_match + 1

    return max_chars


def add_chunk_numbers(chunks: list[str]) -> list[str]:
    """Add Discord subtext markers, e.g. -# (1/3)."""
    total = len(chunks)
    return [
        f"{chunk}\n-# ({i + 1}/{total})"
        for i, chunk in enumerate(chunks)
    ]
