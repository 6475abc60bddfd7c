from __future__ import annotations

from abc import ABC, abstractmethod
import asyncio
import structlog

from alert_webhook.exceptions import NotifierError
from alert_webhook.schemas.schemas_alerts import AlertGroup

logger = structlog.get_logger("notifications")


class NotificationChannel(ABC):
    """ Interface dos canais consultada pela camada de roteamento """
    def notify(self, group: AlertGroup) -> tuple[bool, NotifierError | None]:
        """ Executa ``notify_async`` de forma síncrona """
        return asyncio.run(self.notify_async(group))

    @abstractmethod
    async def notify_async(self, group: AlertGroup) -> tuple[bool, NotifierError | None]:
        """ Envia a notificação de um grupo de alertas

        Retorna ``(True, None)`` quando entregue ou ``(False, erro)``
        caso a montagem ou a entrega falhe.
        """
        raise NotImplementedError

    @abstractmethod
    def should_notify_on_resolve(self) -> bool:
        """ Indica se grupos apenas resolvidos devem ser notificados """
        raise NotImplementedError
