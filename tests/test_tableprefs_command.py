"""Tests for the /tableprefs command handler."""

import os
import sys

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domains.tables.commands import handle_tableprefs


def test_no_args_shows_current_prefs(temp_db):
    response = handle_tableprefs(1, [])

    assert "**Your Table Preferences:**" in response
    assert "Style: **default (admin setting)**" in response
    assert "Show links below tables: **on**" in response
    assert "/tableprefs style cards" in response
    assert temp_db.delete_prefs(1) is False


def test_empty_slash_options_show_current_prefs(temp_db):
    response = handle_tableprefs(1, [None, None])
    assert "**Your Table Preferences:**" in response


def test_set_style(temp_db):
    assert handle_tableprefs(1, ["style", "ascii"]) == "Table style: **ascii**"
    assert temp_db.get_prefs(1).style == "ascii"

    assert "Style: **ascii**" in handle_tableprefs(1, None)


def test_style_default_clears_style(temp_db):
    handle_tableprefs(1, ["style", "cards"])
    response = handle_tableprefs(1, ["style", "default"])

    assert response == "Table style: **default (admin setting)**"
    assert temp_db.get_prefs(1).style is None


def test_invalid_style_shows_usage_without_change(temp_db):
    response = handle_tableprefs(1, ["style", "sparkly"])

    assert response.startswith("**Usage:**")
    assert "/tableprefs style unicode" in response
    assert temp_db.delete_prefs(1) is False

    assert handle_tableprefs(1, ["style"]).startswith("**Usage:**")


def test_links_on_off(temp_db):
    assert handle_tableprefs(2, ["links", "off"]) == "Links below tables: **off**"
    assert temp_db.get_prefs(2).show_links_below is False

    handle_tableprefs(2, ["links", "on"])
    assert temp_db.get_prefs(2).show_links_below is True


def test_links_keep_style(temp_db):
    handle_tableprefs(3, ["style", "ascii"])
    handle_tableprefs(3, ["links", "off"])

    prefs = temp_db.get_prefs(3)
    assert prefs.style == "ascii"
    assert prefs.show_links_below is False


def test_invalid_links_value(temp_db):
    response = handle_tableprefs(1, ["links", "maybe"])

    assert response == "**Usage:** `/tableprefs links on` or `/tableprefs links off`"
    assert temp_db.delete_prefs(1) is False


def test_unknown_setting(temp_db):
    response = handle_tableprefs(1, ["color", "red"])

    assert response.startswith("**Unknown setting:** color")
    assert "**Available settings:**" in response
    assert temp_db.delete_prefs(1) is False


def test_case_insensitive(temp_db):
    assert handle_tableprefs(1, ["STYLE", "Cards"]) == "Table style: **cards**"
    assert temp_db.get_prefs(1).style == "cards"
