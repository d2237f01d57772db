"""Persistent per-user table preferences.

One record per Discord user in local SQLite. Writes replace the whole record,
there are no partial updates.
"""

import sqlite3
import time
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from logger import logger
from . import config


@dataclass
class UserTablePrefs:
    """A user's table display preferences."""
    show_links_below: bool = True
    style: Optional[str] = None  # None = use admin default


# Module-level connection (reused for performance)
_connection: Optional[sqlite3.Connection] = None


def _get_connection() -> sqlite3.Connection:
    """Get or create database connection with WAL mode."""
    global _connection

    if _connection is not None:
        return _connection

    db_path = Path(config.PREFS_STORE_DB)
    db_path.parent.mkdir(parents=True, exist_ok=True)

    _connection = sqlite3.connect(
        config.PREFS_STORE_DB,
        check_same_thread=False,
        timeout=10.0
    )
    _connection.row_factory = sqlite3.Row
    _connection.execute("PRAGMA journal_mode=WAL")
    _connection.execute("PRAGMA busy_timeout=5000")

    _init_schema(_connection)

    logger.info(f"Table prefs store initialized: {config.PREFS_STORE_DB}")
    return _connection


def _init_schema(conn: sqlite3.Connection) -> None:
    """Create tables if they don't exist."""
    conn.executescript("""
        CREATE TABLE IF NOT EXISTS table_prefs (
            user_id TEXT PRIMARY KEY,
            show_links_below INTEGER NOT NULL,
            style TEXT,
            updated_at INTEGER NOT NULL
        );
    """)
    conn.commit()


@contextmanager
def _transaction():
    """Context manager for database transactions."""
    conn = _get_connection()
    try:
        yield conn
        conn.commit()
    except Exception:
        conn.rollback()
        raise


def default_prefs() -> UserTablePrefs:
    return UserTablePrefs(show_links_below=config.DEFAULT_SHOW_LINKS_BELOW, style=None)


def get_prefs(user_id) -> UserTablePrefs:
    """Get a user's preferences, or defaults if none are stored."""
    conn = _get_connection()
    row = conn.execute(
        "SELECT show_links_below, style FROM table_prefs WHERE user_id = ?",
        (str(user_id),)
    ).fetchone()

    if not row:
        return default_prefs()

    style = row["style"] if row["style"] in config.TABLE_STYLES else None
    return UserTablePrefs(show_links_below=bool(row["show_links_below"]), style=style)


def put_prefs(user_id, prefs: UserTablePrefs) -> None:
    """Store a user's preferences, replacing any existing record."""
    with _transaction() as conn:
        conn.execute(
            """
            INSERT OR REPLACE INTO table_prefs
            (user_id, show_links_below, style, updated_at)
            VALUES (?, ?, ?, ?)
            """,
            (str(user_id), int(prefs.show_links_below), prefs.style, int(time.time()))
        )
    logger.debug(f"Saved table prefs for {user_id}: {prefs}")


def delete_prefs(user_id) -> bool:
    """Remove a user's record. Returns True if one existed."""
    with _transaction() as conn:
        cursor = conn.execute(
            "DELETE FROM table_prefs WHERE user_id = ?",
            (str(user_id),)
        )
        return cursor.rowcount > 0


def close() -> None:
    """Close the database connection."""
    global _connection
    if _connection is not None:
        _connection.close()
        _connection = None
