""" Esquemas Pydantic dos alertas recebidos da camada de roteamento """

from __future__ import annotations

from datetime import datetime
from typing import Iterable, Mapping

from pydantic import BaseModel, ConfigDict, Field

from alert_webhook.enums.enums_alerts import AlertStatus, GroupStatus


def _common_pairs(maps: Iterable[Mapping[str, str]]) -> dict[str, str]:
    """ Pares chave/valor presentes com o mesmo valor em todos os mapas """
    maps = list(maps)
    if not maps:
        return {}
    first, *rest = maps
    return {
        key: value for key, value in first.items()
        if all(key in other and other[key] == value for other in rest)
    }


class AlertRecord(BaseModel):
    """ Instância de alerta com seus rótulos e anotações """
    model_config = ConfigDict(frozen=True)

    labels: dict[str, str] = Field(default_factory=dict)
    annotations: dict[str, str] = Field(default_factory=dict)
    status: AlertStatus = AlertStatus.FIRING
    starts_at: datetime | None = None
    ends_at: datetime | None = None
    generator_url: str = ""
    fingerprint: str = ""


class AlertGroup(BaseModel):
    """ Lote de alertas entregue em um único ciclo de notificação

    Somente leitura: o estado agregado e os rótulos comuns são
    derivados dos alertas a cada acesso.
    """
    model_config = ConfigDict(frozen=True)

    alerts: list[AlertRecord] = Field(default_factory=list)
    group_key: str = ""
    group_labels: dict[str, str] = Field(default_factory=dict)
    external_url: str = ""
    receiver: str = ""

    @property
    def firing(self) -> list[AlertRecord]:
        return [a for a in self.alerts if a.status == AlertStatus.FIRING]

    @property
    def resolved(self) -> list[AlertRecord]:
        return [a for a in self.alerts if a.status == AlertStatus.RESOLVED]

    @property
    def status(self) -> GroupStatus:
        """ Estado agregado; grupo vazio conta como resolvido """
        firing = len(self.firing)
        if firing and firing == len(self.alerts):
            return GroupStatus.FIRING
        if firing:
            return GroupStatus.MIXED
        return GroupStatus.RESOLVED

    @property
    def common_labels(self) -> dict[str, str]:
        return _common_pairs(a.labels for a in self.alerts)

    @property
    def common_annotations(self) -> dict[str, str]:
        return _common_pairs(a.annotations for a in self.alerts)
