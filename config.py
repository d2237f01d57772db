"""Global configuration for Discord Tables."""

import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

# Discord
DISCORD_TOKEN = os.getenv("DISCORD_TOKEN")

# Logging
LOG_DIR = Path(os.getenv("LOCALAPPDATA", ".")) / "discord-tables" / "logs"
LOG_DIR.mkdir(parents=True, exist_ok=True)

# Local data (preference database)
DATA_DIR = Path(os.getenv("LOCALAPPDATA", ".")) / "discord-tables" / "data"
