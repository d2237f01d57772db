"""Pytest configuration and fixtures."""

import os
import sys
import tempfile

import pytest
from unittest.mock import Mock, AsyncMock

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


@pytest.fixture
def temp_db(monkeypatch):
    """Point the preference store at a fresh temp database for each test."""
    import domains.tables.config as config
    from domains.tables import prefs_store

    fd, temp_path = tempfile.mkstemp(suffix="_table_prefs_test.db")
    os.close(fd)

    monkeypatch.setattr(config, 'PREFS_STORE_DB', temp_path)
    monkeypatch.setattr(config, 'DEFAULT_SHOW_LINKS_BELOW', True)

    # Reset connection
    prefs_store.close()

    yield prefs_store

    # Cleanup
    prefs_store.close()
    for suffix in ["", "-wal", "-shm"]:
        try:
            os.unlink(temp_path + suffix)
        except FileNotFoundError:
            pass


@pytest.fixture
def admin_settings(monkeypatch):
    """Known admin settings, independent of the environment."""
    import domains.tables.config as config

    monkeypatch.setattr(config, 'TABLE_STYLE', 'unicode')
    monkeypatch.setattr(config, 'SHOW_LINKS_BELOW', True)
    monkeypatch.setattr(config, 'DISABLE_LINK_PREVIEWS', True)
    monkeypatch.setattr(config, 'HELP_TEXT_LANGUAGE', 'auto')
    monkeypatch.setattr(config, 'SERVER_LANGUAGE', '')
    return config


@pytest.fixture
def mock_discord_message():
    """Create a mock Discord message."""
    message = Mock()
    message.id = 1001
    message.author = Mock(id=42, bot=False)
    message.channel = Mock(id=555, send=AsyncMock())
    message.reply = AsyncMock()
    message.guild = None
    return message
