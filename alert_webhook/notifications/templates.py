""" Renderização dos templates de mensagem utilizando Jinja2

Cada montagem de mensagem usa um ``RenderContext`` próprio, que
guarda apenas o primeiro erro de renderização. Depois de uma falha,
as chamadas seguintes retornam string vazia e o erro é verificado
uma única vez ao final da montagem.

Os templates vêm das configurações dos canais, por isso o ambiente
é o ``SandboxedEnvironment``: acesso a atributos internos do Python
levanta ``SecurityError`` e falha a renderização.

O corpo padrão (``default_message.txt.j2``) não reproduz a quebra de
linha inicial nem as linhas em branco finais da saída do Alertmanager;
cada alerta termina na linha ``Source: <url>``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, select_autoescape
from jinja2.sandbox import SandboxedEnvironment

from alert_webhook.exceptions import RenderError
from alert_webhook.schemas.schemas_alerts import AlertGroup
from .template_data import build_template_data

#Diretório de templates embutidos no pacote
TEMPLATE_DIR = Path(__file__).resolve().parents[1] / "templates" / "notifications"

env = SandboxedEnvironment(
    loader=FileSystemLoader(str(TEMPLATE_DIR)),
    autoescape=select_autoescape(["html", "xml"], default_for_string=False),
    trim_blocks=True,
    lstrip_blocks=True
)


class RenderContext:
    """ Estado de uma única passagem de renderização """
    def __init__(self, data: dict[str, Any]) -> None:
        self.data = data
        self.error: Exception | None = None
        self.failed_template: str | None = None

    @property
    def failed(self) -> bool:
        return self.error is not None

    def record(self, template: str, exc: Exception) -> None:
        """ Registra a falha, mantendo somente a primeira """
        if self.error is None:
            self.error = exc
            self.failed_template = template

    def raise_for_error(self, prefix: str) -> None:
        """ Levanta ``RenderError`` caso alguma renderização tenha falhado """
        if self.error is not None:
            raise RenderError(f"{prefix}: {self.error}", self.failed_template) from self.error


class TemplateRenderer:
    """ Expande templates literais ou nomeados contra um grupo de alertas """
    def __init__(self, environment: Environment | None = None) -> None:
        self.env = environment or env

    def new_context(self, group: AlertGroup) -> RenderContext:
        return RenderContext(build_template_data(group))

    def render(self, source: str, ctx: RenderContext) -> str:
        """ Renderiza ``source``; nunca levanta exceções

        Erros de sintaxe ou de avaliação ficam registrados em ``ctx``.
        """
        if ctx.failed:
            return ""
        try:
            return self.env.from_string(source).render(**ctx.data)
        except Exception as exc:
            ctx.record(source, exc)
            return ""
