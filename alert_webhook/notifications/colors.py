""" Cores dos blocos de mensagem conforme o estado dos alertas """

from alert_webhook.enums.enums_alerts import GroupStatus

ALERT_FIRING_COLOR = "#D63232"
ALERT_RESOLVED_COLOR = "#36A64F"
NEUTRAL_COLOR = "#808080"


def hex_to_int(value: str) -> int:
    """ Converte ``#RRGGBB`` no inteiro decimal usado pelo Discord """
    return int(value.lstrip("#"), 16)


STATUS_COLORS = {
    GroupStatus.FIRING: hex_to_int(ALERT_FIRING_COLOR),
    GroupStatus.MIXED: hex_to_int(ALERT_FIRING_COLOR),
    GroupStatus.RESOLVED: hex_to_int(ALERT_RESOLVED_COLOR),
}


def color_for(status) -> int:
    """ Cor do estado agregado; estados desconhecidos recebem cor neutra """
    return STATUS_COLORS.get(status, hex_to_int(NEUTRAL_COLOR))
