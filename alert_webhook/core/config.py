""" Carrega variáveis de ambiente do notificador de alertas

Centraliza os parâmetros usados na montagem das mensagens
(nome do produto, versão, ícone do rodapé) e na entrega
dos webhooks.
"""

import os
from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict


#Carrega as variáveis do arquivo .env
load_dotenv()

__all__ = ["Settings", "settings"]


class Settings(BaseSettings):
    """ Configurações do notificador """
    #Identidade exibida nas mensagens
    PRODUCT_NAME: str = os.getenv("PRODUCT_NAME", "Grafana")
    BUILD_VERSION: str = os.getenv("BUILD_VERSION", "")
    FOOTER_ICON_URL: str = os.getenv(
        "FOOTER_ICON_URL", "https://grafana.com/assets/img/fav32.png"
    )

    #Caminho da lista de regras anexado à URL externa
    ALERTING_LIST_PATH: str = os.getenv("ALERTING_LIST_PATH", "/alerting/list")

    #Tempo limite (segundos) da chamada HTTP ao webhook
    WEBHOOK_TIMEOUT: float = float(os.getenv("WEBHOOK_TIMEOUT", "5"))

    #Nível de log do processo
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    #Configurações extras do Pydantic
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def footer_text(self) -> str:
        """ Texto do rodapé no formato ``<produto> v<versão>`` """
        return f"{self.PRODUCT_NAME} v{self.BUILD_VERSION}"

#Instância única de settings para a aplicação
settings = Settings()
