""" Dados expostos aos templates de mensagem

Converte um ``AlertGroup`` no contexto consumido pelo Jinja,
no mesmo formato usado pelos templates do Alertmanager.
"""

from __future__ import annotations

from typing import Any, Iterable

from alert_webhook.enums.enums_alerts import AlertStatus
from alert_webhook.schemas.schemas_alerts import AlertGroup, AlertRecord


class LabelSet(dict):
    """ Mapa de rótulos com acesso ordenado por nome

    Nos templates, ``labels.nome`` resolve primeiro os métodos do mapa
    (``values``, ``items``, ``keys``, ``names``, ``remove`` ...); use
    ``labels["nome"]`` para ler qualquer rótulo com segurança.
    """
    def names(self) -> list[str]:
        return sorted(self)

    def sorted_pairs(self) -> list[tuple[str, str]]:
        return sorted(self.items())

    def sorted_values(self) -> list[str]:
        return [value for _, value in self.sorted_pairs()]

    def remove(self, names: Iterable[str]) -> "LabelSet":
        """ Cópia sem os rótulos informados """
        drop = set(names)
        return LabelSet({k: v for k, v in self.items() if k not in drop})


class Alerts(list):
    """ Lista de alertas com filtros por estado """
    @property
    def firing(self) -> "Alerts":
        return Alerts(a for a in self if a["status"] == AlertStatus.FIRING.value)

    @property
    def resolved(self) -> "Alerts":
        return Alerts(a for a in self if a["status"] == AlertStatus.RESOLVED.value)


def _alert_data(alert: AlertRecord) -> dict[str, Any]:
    return {
        "status": alert.status.value,
        "labels": LabelSet(alert.labels),
        "annotations": LabelSet(alert.annotations),
        "starts_at": alert.starts_at,
        "ends_at": alert.ends_at,
        "generator_url": alert.generator_url,
        "fingerprint": alert.fingerprint,
    }


def build_template_data(group: AlertGroup) -> dict[str, Any]:
    """ Monta o contexto de renderização para um grupo de alertas """
    alerts = Alerts(_alert_data(a) for a in group.alerts)
    status = AlertStatus.FIRING if alerts.firing else AlertStatus.RESOLVED
    return {
        "receiver": group.receiver,
        "status": status.value,
        "alerts": alerts,
        "group_labels": LabelSet(group.group_labels),
        "common_labels": LabelSet(group.common_labels),
        "common_annotations": LabelSet(group.common_annotations),
        "external_url": group.external_url,
        "group_key": group.group_key,
    }
