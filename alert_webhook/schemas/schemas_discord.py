""" Esquemas Pydantic do corpo enviado ao webhook do Discord """

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic_core import PydanticSerializationError

from alert_webhook.exceptions import SerializationError


class DiscordFooter(BaseModel):
    text: str
    icon_url: str


class DiscordEmbed(BaseModel):
    """ Bloco estilizado da mensagem (título, cor, rodapé e link) """
    title: str
    color: int
    footer: DiscordFooter
    url: str
    type: str = "rich"


class DiscordPayload(BaseModel):
    """ Corpo JSON do webhook; campos vazios são omitidos """
    username: str
    content: str | None = None
    avatar_url: str | None = None
    embeds: list[DiscordEmbed] = Field(default_factory=list)

    def to_json_bytes(self) -> bytes:
        """ Serializa o corpo em JSON UTF-8 sem os campos ausentes """
        try:
            return self.model_dump_json(exclude_none=True).encode("utf-8")
        except PydanticSerializationError as exc:
            raise SerializationError(str(exc)) from exc
