""" Utilitários para composição de URLs """

from __future__ import annotations

import posixpath
from urllib.parse import urlsplit, urlunsplit

from alert_webhook.exceptions import PathError


def join_url_path(base: str, path: str) -> str:
    """ Anexa ``path`` ao caminho da URL ``base``

    Diferente de ``posixpath.join``, um ``path`` absoluto não descarta
    o caminho existente: ``http://host/grafana`` + ``/alerting/list``
    resulta em ``http://host/grafana/alerting/list``.
    """
    try:
        parts = urlsplit(base)
        #Acessar a porta valida o valor informado na URL
        parts.port
    except ValueError as exc:
        raise PathError(base, str(exc)) from exc

    joined = "/".join(p.strip("/") for p in (parts.path, path) if p.strip("/"))
    new_path = posixpath.normpath("/" + joined) if joined else ""
    return urlunsplit((parts.scheme, parts.netloc, new_path, parts.query, parts.fragment))
