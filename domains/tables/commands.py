"""Discord command handler for table preferences.

Provides:
- /tableprefs - Show current preferences
- /tableprefs style <unicode|ascii|cards|default> - Rendering style
- /tableprefs links <on|off> - List links extracted from tables
"""

from typing import Optional, Sequence

from logger import logger
from . import prefs_store


STYLE_VALUES = ("unicode", "ascii", "cards", "default")
LINK_VALUES = ("on", "off")

DEFAULT_STYLE_LABEL = "default (admin setting)"

STYLE_USAGE = (
    "`/tableprefs style unicode` - Box-drawing characters (┌─┬─┐)\n"
    "`/tableprefs style ascii` - Classic style (+, -, |)\n"
    "`/tableprefs style cards` - SVG image (mobile-friendly)\n"
    "`/tableprefs style default` - Use admin default setting"
)

LINKS_USAGE = (
    "`/tableprefs links on` - Show links below tables\n"
    "`/tableprefs links off` - Hide links below tables"
)

AVAILABLE_SETTINGS = (
    "**Available settings:**\n"
    "- `style unicode/ascii/cards/default` - Table rendering style\n"
    "- `links on/off` - Show/hide links below tables"
)


def _normalise_args(args: Optional[Sequence[Optional[str]]]) -> list[str]:
    return [a.strip().lower() for a in (args or []) if a and a.strip()]


def format_current_prefs(prefs: prefs_store.UserTablePrefs) -> str:
    style_display = prefs.style or DEFAULT_STYLE_LABEL
    return (
        "**Your Table Preferences:**\n"
        f"- Style: **{style_display}**\n"
        f"- Show links below tables: **{'on' if prefs.show_links_below else 'off'}**\n\n"
        "**Usage:**\n"
        f"{STYLE_USAGE}\n"
        f"{LINKS_USAGE}"
    )


def handle_tableprefs(user_id, args: Optional[Sequence[Optional[str]]] = None) -> str:
    """Handle /tableprefs command.

    Args:
        user_id: Discord user ID of the sender
        args: Command arguments, e.g. ["style", "ascii"]

    Returns:
        Discord response message
    """
    args = _normalise_args(args)

    if not args:
        return format_current_prefs(prefs_store.get_prefs(user_id))

    setting = args[0]
    value = args[1] if len(args) > 1 else None

    if setting == "style":
        if value not in STYLE_VALUES:
            return f"**Usage:**\n{STYLE_USAGE}"

        prefs = prefs_store.get_prefs(user_id)
        prefs.style = None if value == "default" else value
        prefs_store.put_prefs(user_id, prefs)
        logger.info(f"User {user_id} set table style to {value}")

        display = DEFAULT_STYLE_LABEL if value == "default" else value
        return f"Table style: **{display}**"

    if setting == "links":
        if value not in LINK_VALUES:
            return "**Usage:** `/tableprefs links on` or `/tableprefs links off`"

        prefs = prefs_store.get_prefs(user_id)
        prefs.show_links_below = value == "on"
        prefs_store.put_prefs(user_id, prefs)
        logger.info(f"User {user_id} set table links to {value}")

        return f"Links below tables: **{value}**"

    return f"**Unknown setting:** {setting}\n\n{AVAILABLE_SETTINGS}"
