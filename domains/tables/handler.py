"""Message handler - applies table rendering to an incoming Discord message.

Resolves the sender's effective options from admin settings and their stored
preferences, runs the rendering pipeline, and prepares the reply: text chunks
plus SVG attachments for card tables, since Discord does not display data
URLs. Only images rendered from tables are attached; other message text is
left as written.
"""

from dataclasses import dataclass, field
from typing import Optional

from . import config
from . import prefs_store
from .response.chunker import chunk
from .response.pipeline import might_contain_table, process


@dataclass
class TableReply:
    """Everything the bot needs to send for one processed message."""
    chunks: list[str]
    files: list[tuple[str, bytes]] = field(default_factory=list)
    suppress_embeds: bool = False
    table_count: int = 0


@dataclass
class RenderOptions:
    style: str
    show_links: bool
    language: str
    disable_link_previews: bool

    def to_context(self) -> dict:
        return {
            'style': self.style,
            'show_links': self.show_links,
            'language': self.language,
            'disable_link_previews': self.disable_link_previews,
            'detach_images': True,
        }


def resolve_options(
    user_id,
    user_language: Optional[str] = None,
    server_language: Optional[str] = None,
) -> RenderOptions:
    """Combine admin settings with the user's stored preferences."""
    prefs = prefs_store.get_prefs(user_id)
    return RenderOptions(
        style=prefs.style or config.TABLE_STYLE,
        show_links=config.SHOW_LINKS_BELOW and prefs.show_links_below,
        language=config.resolve_language(
            config.HELP_TEXT_LANGUAGE,
            user_language,
            server_language,
            config.SERVER_LANGUAGE,
        ),
        disable_link_previews=config.DISABLE_LINK_PREVIEWS,
    )


def handle_message(
    text: str,
    user_id,
    user_language: Optional[str] = None,
    server_language: Optional[str] = None,
) -> Optional[TableReply]:
    """Render tables in a message.

    Returns:
        TableReply, or None when the message has no tables
    """
    if not might_contain_table(text):
        return None

    options = resolve_options(user_id, user_language, server_language)
    result = process(text, options.to_context())
    if not result.changed:
        return None

    files = [
        (f"table-{n}.svg", svg.encode('utf-8'))
        for n, svg in enumerate(result.images, start=1)
    ]
    return TableReply(
        chunks=chunk(result.content),
        files=files,
        suppress_embeds=result.suppress_embeds,
        table_count=result.table_count,
    )
