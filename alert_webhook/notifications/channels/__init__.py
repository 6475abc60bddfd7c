from .base import NotificationChannel, logger
from .discord import DiscordChannel

__all__ = [
    "NotificationChannel",
    "DiscordChannel",
    "logger"
]
