""" Estados de alertas e tipos de canais """

from enum import Enum


class AlertStatus(str, Enum):
    """ Estado de um alerta individual """
    FIRING = "firing" #Condição atualmente verdadeira
    RESOLVED = "resolved" #Condição normalizada


class GroupStatus(str, Enum):
    """ Estado agregado de um grupo de alertas """
    FIRING = "firing" #Todos os alertas disparando
    RESOLVED = "resolved" #Todos os alertas resolvidos
    MIXED = "mixed" #Disparando e resolvidos no mesmo grupo


class ChannelType(str, Enum):
    """ Enumeração dos canais de notificação """
    DISCORD = "discord" #Webhook do Discord
