"""Tables domain configuration - admin settings for table rendering.

Values come from the environment (loaded from .env by the root config module).
Invalid values fall back to their defaults.
"""

import os
from typing import Optional

from config import DATA_DIR
from logger import logger


TABLE_STYLES = ("unicode", "ascii", "cards")
HELP_LANGUAGES = ("en", "de", "fr", "es", "it", "pt", "nl", "pl", "ru", "ja", "zh")
DEFAULT_LANGUAGE = "en"


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    value = raw.strip().lower()
    if value in ("1", "true", "yes", "on"):
        return True
    if value in ("0", "false", "no", "off"):
        return False
    logger.warning(f"Invalid boolean for {name}: {raw!r}, using {default}")
    return default


def _env_choice(name: str, choices: tuple, default: str) -> str:
    value = os.environ.get(name, default).strip().lower()
    if value not in choices:
        logger.warning(f"Invalid value for {name}: {value!r}, using {default!r}")
        return default
    return value


# Rendering style: unicode box-drawing, plain ASCII, or SVG card image
TABLE_STYLE = _env_choice("TABLES_STYLE", TABLE_STYLES, "unicode")

# Global switch - when off, extracted links are never listed
SHOW_LINKS_BELOW = _env_bool("TABLES_SHOW_LINKS_BELOW", True)

# Suppress Discord link embeds on messages that contain rendered tables
DISABLE_LINK_PREVIEWS = _env_bool("TABLES_DISABLE_LINK_PREVIEWS", True)

# Seed value for users without a stored preference record
DEFAULT_SHOW_LINKS_BELOW = _env_bool("TABLES_DEFAULT_SHOW_LINKS_BELOW", True)

# Hint language: "auto" follows the user, then the server, then
# TABLES_SERVER_LANGUAGE, then English
HELP_TEXT_LANGUAGE = _env_choice("TABLES_HELP_TEXT_LANGUAGE", ("auto",) + HELP_LANGUAGES, "auto")
SERVER_LANGUAGE = os.environ.get("TABLES_SERVER_LANGUAGE", "")

# Channels the bot watches (empty = all channels it can read)
_channels = os.environ.get("TABLES_CHANNEL_IDS", "")
TABLES_CHANNEL_IDS = {int(cid.strip()) for cid in _channels.split(",") if cid.strip().isdigit()}

# Per-user preference database
PREFS_STORE_DB = os.environ.get("TABLES_PREFS_DB", str(DATA_DIR / "table_prefs.db"))


def normalize_language(code: Optional[str]) -> Optional[str]:
    """Reduce a locale string (en-US, pt_BR) to a supported 2-letter code."""
    if not code:
        return None
    short = code.strip().lower().replace("_", "-").split("-")[0]
    return short if short in HELP_LANGUAGES else None


def resolve_language(
    setting: str,
    user_language: Optional[str] = None,
    server_language: Optional[str] = None,
    fallback_language: Optional[str] = None,
) -> str:
    """Resolve the hint language.

    An explicit setting wins. "auto" tries the user's language, then the
    server's language, then the admin fallback, then the default. Each step
    is skipped when its code is missing or unsupported.
    """
    if setting and setting != "auto":
        return normalize_language(setting) or DEFAULT_LANGUAGE
    return (
        normalize_language(user_language)
        or normalize_language(server_language)
        or normalize_language(fallback_language)
        or DEFAULT_LANGUAGE
    )
