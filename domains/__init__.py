"""Domain modules for Discord Tables."""
