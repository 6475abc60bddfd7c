from .schemas_alerts import AlertRecord, AlertGroup
from .schemas_channels import NotificationChannelConfig, DiscordConfig
from .schemas_discord import DiscordFooter, DiscordEmbed, DiscordPayload

__all__ = [
    "AlertRecord",
    "AlertGroup",
    "NotificationChannelConfig",
    "DiscordConfig",
    "DiscordFooter",
    "DiscordEmbed",
    "DiscordPayload"
]
