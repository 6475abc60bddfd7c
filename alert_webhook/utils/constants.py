""" Constantes compartilhadas pelo notificador """

#Referências aos templates nomeados padrão
DEFAULT_TITLE_TEMPLATE = '{% include "default_title.txt.j2" %}'
DEFAULT_MESSAGE_TEMPLATE = '{% include "default_message.txt.j2" %}'

#Valores fixos do corpo do webhook
EMBED_TYPE = "rich"
JSON_CONTENT_TYPE = "application/json"
