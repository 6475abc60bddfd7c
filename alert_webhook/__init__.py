""" Pacote raiz do notificador de alertas via webhook

Converte grupos de alertas em mensagens de webhook do Discord
e as entrega através de um transporte HTTP injetável.
"""

__version__ = "0.1.0"
