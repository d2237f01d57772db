"""Tests for the fixed-width text table formatter."""

import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from domains.tables.response.formatters.text_table import (
    ASCII_GLYPHS,
    UNICODE_GLYPHS,
    column_widths,
    pad_cell,
    table_to_code_block,
)
from domains.tables.response.parser import Alignment, scan_tables
from domains.tables.response.width import display_width


def _table(text):
    return scan_tables(text)[0]


def test_ascii_scenario():
    table = _table("| A | B |\n|---|---|\n| 1 | 2 |")
    result = table_to_code_block(table, ASCII_GLYPHS, show_links=False)

    assert result == (
        "```\n"
        "+---+---+\n"
        "| A | B |\n"
        "+---+---+\n"
        "| 1 | 2 |\n"
        "+---+---+\n"
        "```"
    )


def test_unicode_borders():
    table = _table("| A | B |\n|---|---|\n| 1 | 2 |")
    lines = table_to_code_block(table, UNICODE_GLYPHS).split('\n')

    assert lines[1] == "┌───┬───┐"
    assert lines[2] == "│ A │ B │"
    assert lines[3] == "├───┼───┤"
    assert lines[4] == "│ 1 │ 2 │"
    assert lines[5] == "└───┴───┘"


def test_default_glyphs_are_unicode():
    table = _table("| A |\n|---|\n| 1 |")
    assert "┌───┐" in table_to_code_block(table)


def test_shape_for_n_columns_m_rows():
    table = _table("| a | b | c |\n|---|---|---|\n| 1 | 2 | 3 |\n| 4 | 5 | 6 |")
    lines = table_to_code_block(table, ASCII_GLYPHS, show_links=False).split('\n')

    border_lines = [line for line in lines if line.startswith('+')]
    content_lines = [line for line in lines if line.startswith('|')]

    assert len(border_lines) == 3
    assert all(line.count('+') == table.col_count + 1 for line in border_lines)
    assert len(content_lines) == table.row_count + 1
    assert all(line.count('|') == table.col_count + 1 for line in content_lines)


def test_alignment_padding():
    table = _table("| Name | Qty | Note |\n|:----:|----:|:-----|\n| a | 5 | x |")
    lines = table_to_code_block(table, ASCII_GLYPHS, show_links=False).split('\n')

    assert lines[2] == "| Name | Qty | Note |"
    assert lines[4] == "|  a   |   5 | x    |"


def test_pad_cell_rules():
    assert pad_cell("ab", 5, Alignment.LEFT) == "ab   "
    assert pad_cell("ab", 5, Alignment.NONE) == "ab   "
    assert pad_cell("ab", 5, Alignment.RIGHT) == "   ab"
    assert pad_cell("ab", 5, Alignment.CENTER) == " ab  "
    assert pad_cell("abcdef", 3, Alignment.CENTER) == "abcdef"


def test_padded_cell_has_exact_display_width():
    for alignment in Alignment:
        for text in ["x", "😀", "✅ ok", ""]:
            assert display_width(pad_cell(text, 8, alignment)) == 8


def test_emoji_header_widens_column():
    assert column_widths(["😀 Name"], [["abcd"]]) == [7]

    table = _table("| 😀 Name |\n|---|\n| abcd |")
    lines = table_to_code_block(table, ASCII_GLYPHS).split('\n')
    assert lines[1] == "+" + "-" * 9 + "+"
    assert lines[4] == "| abcd    |"


def test_links_listed_below_block():
    table = _table(
        "| Site | Url |\n|---|---|\n"
        "| [Docs](https://docs.example.com) | https://www.example.com/page |\n"
        "| [Again](https://docs.example.com/) | plain |"
    )
    result = table_to_code_block(table, ASCII_GLYPHS, show_links=True)
    block, links = result.split("```\n\n")

    assert "| Docs " in block
    assert "[Docs]" not in block
    assert "https://www.example.com/page" in block
    assert links.split('\n') == [
        "🔗 [Docs](https://docs.example.com)",
        "🔗 [example.com](https://www.example.com/page)",
    ]


def test_links_hidden_when_disabled():
    table = _table("| Site |\n|---|\n| [Docs](https://docs.example.com) |")
    result = table_to_code_block(table, ASCII_GLYPHS, show_links=False)

    assert result.endswith("```")
    assert "🔗" not in result
    assert "| Docs |" in result


def test_no_link_section_without_links():
    table = _table("| A |\n|---|\n| 1 |")
    assert table_to_code_block(table, show_links=True).endswith("```")
