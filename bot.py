"""Discord Tables - Main Bot.

Watches channels for messages containing markdown tables (or data pasted from
a spreadsheet) and replies with a version Discord can display.
"""

import asyncio
import io
from typing import Optional

import discord
from discord import app_commands
from discord.ext import commands

from logger import logger
from config import DISCORD_TOKEN
from domains.tables import TABLES_CHANNEL_IDS, handle_message, handle_tableprefs, TableReply


# Initialize bot
intents = discord.Intents.default()
intents.message_content = True
bot = commands.Bot(command_prefix="/", intents=intents)


@bot.event
async def on_ready():
    """Called when bot is connected and ready."""
    logger.info(f"Logged in as {bot.user}")

    # Sync slash commands with Discord
    try:
        synced = await bot.tree.sync()
        logger.info(f"Synced {len(synced)} slash commands")
    except Exception as e:
        logger.error(f"Failed to sync slash commands: {e}")

    if TABLES_CHANNEL_IDS:
        logger.info(f"Watching {len(TABLES_CHANNEL_IDS)} channel(s) for tables")
    else:
        logger.info("Watching all readable channels for tables")


def build_files(reply: TableReply) -> list[discord.File]:
    """Turn rendered card images into Discord attachments."""
    return [
        discord.File(io.BytesIO(data), filename=filename)
        for filename, data in reply.files
    ]


async def send_reply(message: discord.Message, reply: TableReply) -> None:
    """Send the rendered tables as a reply to the original message.

    Attachments go with the last chunk so they appear under the text.
    """
    chunks = reply.chunks or ['']
    for i, text in enumerate(chunks):
        is_last = i == len(chunks) - 1
        kwargs = {'suppress_embeds': reply.suppress_embeds}
        if is_last and reply.files:
            kwargs['files'] = build_files(reply)
        if i == 0:
            await message.reply(text or None, mention_author=False, **kwargs)
        else:
            await message.channel.send(text or None, **kwargs)


def _server_language(message: discord.Message) -> Optional[str]:
    guild = getattr(message, 'guild', None)
    locale = getattr(guild, 'preferred_locale', None) if guild else None
    return str(locale) if locale else None


@bot.event
async def on_message(message):
    """Handle incoming messages."""
    # Ignore bot messages (including our own replies)
    if message.author.bot:
        return

    if TABLES_CHANNEL_IDS and message.channel.id not in TABLES_CHANNEL_IDS:
        return

    try:
        reply = await asyncio.to_thread(
            handle_message,
            message.content,
            message.author.id,
            server_language=_server_language(message),
        )
    except Exception as e:
        logger.error(f"Table rendering failed for message {message.id}: {e}")
        return

    if reply is None:
        return

    logger.info(f"Rendering {reply.table_count} table(s) for {message.author} in #{message.channel}")
    try:
        await send_reply(message, reply)
    except discord.HTTPException as e:
        logger.error(f"Failed to send rendered table: {e}")


@bot.tree.command(name="tableprefs", description="Set your personal table display preferences")
@app_commands.describe(
    setting="style or links (leave empty to show current preferences)",
    value="style: unicode/ascii/cards/default, links: on/off",
)
async def cmd_tableprefs(
    interaction: discord.Interaction,
    setting: Optional[str] = None,
    value: Optional[str] = None,
):
    """Show or change the caller's table preferences."""
    try:
        response = handle_tableprefs(interaction.user.id, [setting, value])
    except Exception as e:
        logger.error(f"tableprefs failed for {interaction.user}: {e}")
        response = "❌ Could not update your table preferences. Please try again."
    await interaction.response.send_message(response, ephemeral=True)


@bot.event
async def on_error(event, *args, **kwargs):
    """Handle errors."""
    logger.error(f"Bot error in {event}: {args}")


def main():
    """Entry point."""
    if not DISCORD_TOKEN:
        logger.error("DISCORD_TOKEN not set")
        return

    logger.info("Starting Discord Tables...")
    bot.run(DISCORD_TOKEN)


if __name__ == "__main__":
    main()
