""" Criação de canais a partir da configuração armazenada """

from __future__ import annotations

from typing import Callable

from alert_webhook.enums.enums_alerts import ChannelType
from alert_webhook.exceptions import ConfigError
from alert_webhook.schemas.schemas_channels import NotificationChannelConfig
from .channels import NotificationChannel, DiscordChannel
from .transport import WebhookTransport

CHANNEL_FACTORIES: dict[ChannelType, Callable[..., NotificationChannel]] = {
    ChannelType.DISCORD: DiscordChannel.from_channel_config,
}


def create_channel(model: NotificationChannelConfig, transport: WebhookTransport | None = None) -> NotificationChannel:
    """ Cria o canal correspondente ao tipo configurado """
    try:
        channel_type = ChannelType(model.type)
    except ValueError:
        raise ConfigError(f"Unsupported notification channel type: {model.type}") from None
    return CHANNEL_FACTORIES[channel_type](model, transport=transport)
