"""Table renderers.

Each renderer turns a parsed TableRegion into Discord-ready text.
"""

from .text_table import (
    GlyphSet,
    UNICODE_GLYPHS,
    ASCII_GLYPHS,
    GLYPH_SETS,
    table_to_code_block,
)
from .card import table_to_card, table_to_svg

__all__ = [
    'GlyphSet',
    'UNICODE_GLYPHS',
    'ASCII_GLYPHS',
    'GLYPH_SETS',
    'table_to_code_block',
    'table_to_card',
    'table_to_svg',
]
