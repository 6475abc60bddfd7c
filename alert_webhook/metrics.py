"""Definições de métricas do notificador

Centraliza as métricas Prometheus de envio de notificações.
"""

from prometheus_client import Counter, Histogram

# ---------- NOTIFICATION METRICS ----------
NOTIFICATIONS_SENT_TOTAL = Counter(
    "webhook_notifications_sent_total",
    "Total de notificações entregues ou que falharam na entrega",
    ["channel", "success"]
)

NOTIFICATION_SEND_DURATION_SECONDS = Histogram(
    "webhook_notification_send_duration_seconds",
    "Tempo gasto na chamada HTTP do webhook",
    ["channel"]
)

#Falhas de montagem (template, URL, serialização) antes da entrega
NOTIFICATION_BUILD_ERRORS_TOTAL = Counter(
    "webhook_notification_build_errors_total",
    "Total de mensagens descartadas por erro de montagem",
    ["channel", "reason"]
)
