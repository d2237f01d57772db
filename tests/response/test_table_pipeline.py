"""Tests for the table rendering pipeline (orchestrator)."""

import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from domains.tables.response.pipeline import (
    PipelineContext,
    ProcessedMessage,
    might_contain_table,
    process,
)


SIMPLE_TABLE = "| A | B |\n|---|---|\n| 1 | 2 |"


def test_message_without_tables_is_untouched():
    text = "Hello there\n\n\n\nNo tables | just a pipe\n"
    result = process(text)

    assert isinstance(result, ProcessedMessage)
    assert result.content == text
    assert result.changed is False
    assert result.table_count == 0


def test_empty_input():
    assert process("").content == ""
    assert process(None).content == ""


def test_ascii_scenario_full_message():
    result = process(SIMPLE_TABLE, {'style': 'ascii', 'show_links': False})

    assert result.changed
    assert result.table_count == 1
    assert result.content == (
        "```\n+---+---+\n| A | B |\n+---+---+\n| 1 | 2 |\n+---+---+\n```"
    )


def test_table_is_replaced_in_place():
    text = "Here you go:\n" + SIMPLE_TABLE + "\nDone."
    content = process(text).content

    assert content.startswith("Here you go:\n```\n┌───┬───┐")
    assert content.endswith("└───┴───┘\n```\nDone.")
    assert "|---|" not in content


def test_identical_tables_are_each_replaced_once():
    text = SIMPLE_TABLE + "\n\ntext\n\n" + SIMPLE_TABLE
    result = process(text, {'style': 'ascii'})

    assert result.table_count == 2
    assert result.content.count("```") == 4
    assert "|---|" not in result.content


def test_pasted_tsv_is_rendered():
    result = process("Name\tAge\nAlice\t30\nBob\t25", {'style': 'unicode'})
    lines = result.content.split('\n')

    assert result.table_count == 1
    assert lines[2] == "│ Name  │ Age │"
    assert lines[4] == "│ Alice │ 30  │"
    assert lines[5] == "│ Bob   │ 25  │"


def test_excess_newlines_collapse_and_trim():
    text = "  \nIntro\n\n\n\n" + SIMPLE_TABLE + "\n\n\n\nOutro\n\n"
    content = process(text).content

    assert content.startswith("Intro\n\n```")
    assert content.endswith("```\n\nOutro")
    assert "\n\n\n" not in content


def test_cards_style_produces_image():
    result = process(SIMPLE_TABLE, {'style': 'cards'})

    assert result.style == 'cards'
    assert "![table](data:image/svg+xml;base64," in result.content


def test_unknown_style_falls_back_to_unicode():
    result = process(SIMPLE_TABLE, {'style': 'fancy'})

    assert result.style == 'unicode'
    assert "┌" in result.content


def test_links_follow_show_links_option():
    text = "| Site |\n|---|\n| [Docs](https://docs.example.com) |"

    assert "🔗 [Docs]" in process(text, {'show_links': True}).content
    assert "🔗" not in process(text, {'show_links': False}).content


def test_suppress_embeds_follows_link_preview_setting():
    assert process(SIMPLE_TABLE, {'disable_link_previews': True}).suppress_embeds is True
    assert process(SIMPLE_TABLE, {'disable_link_previews': False}).suppress_embeds is False
    assert process("no table here").suppress_embeds is False


def test_context_from_dict():
    ctx = PipelineContext.from_dict({'show_links': False, 'disable_link_previews': False, 'style': 'ascii'})

    assert ctx.show_links is False
    assert ctx.disable_link_previews is False
    assert ctx.style == 'ascii'
    assert ctx.language == 'en'
    assert ctx.detach_images is False


def test_cards_inline_image_by_default():
    result = process("Intro\n" + SIMPLE_TABLE, {'style': 'cards'})

    assert "![table](data:image/svg+xml;base64," in result.content
    assert result.images == []


def test_cards_detached_images():
    text = "Intro\n" + SIMPLE_TABLE + "\n\nMiddle\n\n" + SIMPLE_TABLE
    result = process(text, {'style': 'cards', 'detach_images': True})

    assert result.content == "Intro\n\nMiddle"
    assert len(result.images) == 2
    assert all(svg.startswith("<svg") for svg in result.images)


def test_detach_images_ignored_for_text_styles():
    result = process(SIMPLE_TABLE, {'style': 'ascii', 'detach_images': True})

    assert result.content.startswith("```\n+---+")
    assert result.images == []


def test_might_contain_table():
    assert might_contain_table("| A |\n|---|")
    assert might_contain_table("a\tb\n1\t2")
    assert not might_contain_table("single | line")
    assert not might_contain_table("two\nlines")
    assert not might_contain_table("")
    assert not might_contain_table(None)


def test_never_raises_on_odd_input():
    samples = [
        "|", "\t", "|\n|", "||\n||\n||", ":|:\n|-|", "|\n|-|\n|",
        "| a |\n|---|\n| [x]( |", "a\t\n\t\n", "😀|😀\n-|-\n🎉|🎉",
    ]
    for style in ('unicode', 'ascii', 'cards'):
        for text in samples:
            process(text, {'style': style})
