from __future__ import annotations

import asyncio
import time

from alert_webhook.core.config import settings
from alert_webhook.enums.enums_alerts import ChannelType
from alert_webhook.exceptions import DeliveryError, NotifierError, SerializationError
from alert_webhook import metrics
from alert_webhook.notifications.colors import color_for
from alert_webhook.notifications.templates import TemplateRenderer
from alert_webhook.notifications.transport import HttpxWebhookTransport, WebhookRequest, WebhookTransport
from alert_webhook.schemas.schemas_alerts import AlertGroup
from alert_webhook.schemas.schemas_channels import DiscordConfig, NotificationChannelConfig
from alert_webhook.schemas.schemas_discord import DiscordEmbed, DiscordFooter, DiscordPayload
from alert_webhook.utils.constants import DEFAULT_TITLE_TEMPLATE, EMBED_TYPE
from alert_webhook.utils.url import join_url_path
from .base import NotificationChannel, logger


class DiscordChannel(NotificationChannel):
    """ Envio de notificações via Webhook do Discord """
    channel_type = ChannelType.DISCORD

    def __init__(self, config: DiscordConfig, transport: WebhookTransport | None = None, renderer: TemplateRenderer | None = None) -> None:
        self.config = config
        self.transport = transport or HttpxWebhookTransport()
        self.renderer = renderer or TemplateRenderer()

    @classmethod
    def from_channel_config(cls, model: NotificationChannelConfig, transport: WebhookTransport | None = None) -> "DiscordChannel":
        """ Valida a configuração bruta e cria o canal """
        return cls(DiscordConfig.from_channel_config(model), transport=transport)

    def build_payload(self, group: AlertGroup) -> DiscordPayload:
        """ Monta o corpo do webhook para o grupo de alertas

        Levanta ``PathError`` se a URL externa for inválida e
        ``RenderError`` se algum template falhar.
        """
        #Contexto novo a cada montagem, nunca compartilhado entre chamadas
        ctx = self.renderer.new_context(group)

        content = ""
        if self.config.message_template:
            content = self.renderer.render(self.config.message_template, ctx)

        avatar_url = ""
        if self.config.avatar_url:
            #A URL do avatar também pode conter expressões de template
            avatar_url = self.renderer.render(self.config.avatar_url, ctx)

        title = self.renderer.render(DEFAULT_TITLE_TEMPLATE, ctx)

        embed = DiscordEmbed(
            title=title,
            color=color_for(group.status),
            footer=DiscordFooter(text=settings.footer_text, icon_url=settings.FOOTER_ICON_URL),
            url=join_url_path(group.external_url, settings.ALERTING_LIST_PATH),
            type=EMBED_TYPE
        )

        ctx.raise_for_error("failed to template discord message")

        return DiscordPayload(
            username=settings.PRODUCT_NAME,
            content=content or None,
            avatar_url=avatar_url or None,
            embeds=[embed]
        )

    def build_body(self, group: AlertGroup) -> bytes:
        """ Corpo JSON serializado, pronto para o transporte """
        return self.build_payload(group).to_json_bytes()

    async def notify_async(self, group: AlertGroup) -> tuple[bool, NotifierError | None]:
        channel = self.channel_type.value
        try:
            body = self.build_body(group)
        except NotifierError as exc:
            if isinstance(exc, SerializationError):
                logger.error("payload_serialization_failed", channel=channel, error=str(exc))
            metrics.NOTIFICATION_BUILD_ERRORS_TOTAL.labels(channel=channel, reason=type(exc).__name__).inc()
            return False, exc

        request = WebhookRequest(url=self.config.webhook_url, body=body)

        error: DeliveryError | None = None
        start = time.time()
        try:
            await self.transport.send(request)
        except DeliveryError as exc:
            error = exc
        except asyncio.CancelledError:
            #Cancelamento externo é tratado como falha de entrega
            error = DeliveryError("delivery cancelled")
        except Exception as exc:
            error = DeliveryError(str(exc) or type(exc).__name__)
            error.__cause__ = exc
        finally:
            duration = time.time() - start
            metrics.NOTIFICATION_SEND_DURATION_SECONDS.labels(channel=channel).observe(duration)

        metrics.NOTIFICATIONS_SENT_TOTAL.labels(channel=channel, success=str(error is None)).inc()
        if error is not None:
            logger.error("notification_delivery_failed", channel=channel, error=str(error))
            return False, error
        return True, None

    def should_notify_on_resolve(self) -> bool:
        return not self.config.disable_resolve_message
