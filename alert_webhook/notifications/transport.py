""" Transporte HTTP dos webhooks

O canal recebe o transporte por injeção; a implementação padrão
usa ``httpx.AsyncClient``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

import httpx

from alert_webhook.core.config import settings
from alert_webhook.exceptions import DeliveryError
from alert_webhook.utils.constants import JSON_CONTENT_TYPE


@dataclass(frozen=True)
class WebhookRequest:
    """ Chamada HTTP a ser executada pelo transporte """
    url: str
    body: bytes
    http_method: str = "POST"
    content_type: str = JSON_CONTENT_TYPE


class WebhookTransport(ABC):
    """ Interface de entrega dos webhooks """
    @abstractmethod
    async def send(self, request: WebhookRequest) -> None:
        """ Executa a chamada; levanta ``DeliveryError`` em caso de falha """
        raise NotImplementedError


class HttpxWebhookTransport(WebhookTransport):
    """ Entrega via ``httpx`` com tempo limite configurável """
    def __init__(self, timeout: float | None = None) -> None:
        self.timeout = timeout if timeout is not None else settings.WEBHOOK_TIMEOUT

    async def send(self, request: WebhookRequest) -> None:
        async with httpx.AsyncClient() as client:
            try:
                resp = await client.request(
                    request.http_method,
                    request.url,
                    content=request.body,
                    headers={"Content-Type": request.content_type},
                    timeout=self.timeout
                )
                resp.raise_for_status()
            except httpx.HTTPStatusError as exc:
                raise DeliveryError(str(exc), exc.response.status_code) from exc
            except httpx.HTTPError as exc:
                raise DeliveryError(str(exc) or exc.__class__.__name__) from exc
