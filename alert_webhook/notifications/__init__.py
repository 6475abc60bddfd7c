""" Camada de notificações de alertas.

Este pacote concentra a interface de canais, o canal do
Discord, a renderização de templates e o transporte HTTP.
"""

from .channels import NotificationChannel, DiscordChannel
from .colors import color_for
from .factory import create_channel
from .templates import RenderContext, TemplateRenderer
from .transport import HttpxWebhookTransport, WebhookRequest, WebhookTransport

__all__ = [
    "NotificationChannel",
    "DiscordChannel",
    "color_for",
    "create_channel",
    "RenderContext",
    "TemplateRenderer",
    "HttpxWebhookTransport",
    "WebhookRequest",
    "WebhookTransport"
]
