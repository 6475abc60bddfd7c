""" Esquemas de configuração dos canais de notificação """

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict

from alert_webhook.enums.enums_alerts import ChannelType
from alert_webhook.exceptions import ConfigError
from alert_webhook.utils.constants import DEFAULT_MESSAGE_TEMPLATE


class NotificationChannelConfig(BaseModel):
    """ Configuração bruta de um canal, como vem do armazenamento externo """
    uid: str = ""
    name: str = ""
    type: str = ChannelType.DISCORD.value
    disable_resolve_message: bool = False
    settings: dict[str, Any] | None = None


def _setting_str(settings: dict[str, Any], key: str) -> str:
    """ Valor textual da configuração; ausente ou não textual vira vazio """
    value = settings.get(key)
    return value if isinstance(value, str) else ""


class DiscordConfig(BaseModel):
    """ Configuração validada do webhook do Discord; imutável após criada """
    model_config = ConfigDict(frozen=True)

    webhook_url: str
    avatar_url: str = ""
    message_template: str = DEFAULT_MESSAGE_TEMPLATE
    disable_resolve_message: bool = False

    @classmethod
    def from_channel_config(cls, model: NotificationChannelConfig) -> "DiscordConfig":
        """ Valida apenas presença e formato; nada de rede ou templates """
        if model.settings is None:
            raise ConfigError("No Settings Supplied")

        webhook_url = _setting_str(model.settings, "url").strip()
        if not webhook_url:
            raise ConfigError("Could not find webhook url property in settings")

        return cls(
            webhook_url=webhook_url,
            avatar_url=_setting_str(model.settings, "avatar_url"),
            message_template=_setting_str(model.settings, "message") or DEFAULT_MESSAGE_TEMPLATE,
            disable_resolve_message=model.disable_resolve_message,
        )
