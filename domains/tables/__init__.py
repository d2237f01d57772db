"""Tables domain - redraws markdown tables so Discord can display them."""

from .config import TABLES_CHANNEL_IDS
from .handler import handle_message, TableReply
from .commands import handle_tableprefs

__all__ = [
    'TABLES_CHANNEL_IDS',
    'handle_message',
    'TableReply',
    'handle_tableprefs',
]
