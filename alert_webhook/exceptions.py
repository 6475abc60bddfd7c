""" Exceções do notificador de alertas """


class NotifierError(Exception):
    """ Base para todos os erros levantados pelo notificador """


class ConfigError(NotifierError):
    """ Configuração do canal ausente ou inválida """
    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(reason)

    def __reduce__(self):
        return (self.__class__, (self.reason,))


class RenderError(NotifierError):
    """ Falha ao expandir um template durante a montagem da mensagem

    A mensagem original do Jinja é preservada sem alterações e o
    template que falhou fica disponível em ``template``.
    """
    def __init__(self, message: str, template: str | None = None):
        self.template = template
        super().__init__(message)

    def __reduce__(self):
        return (self.__class__, (str(self), self.template))


class PathError(NotifierError):
    """ URL base externa malformada ao compor o link da mensagem """
    def __init__(self, url: str, detail: str):
        self.url = url
        self.detail = detail
        super().__init__(f"invalid url {url!r}: {detail}")

    def __reduce__(self):
        return (self.__class__, (self.url, self.detail))


class SerializationError(NotifierError):
    """ Falha inesperada ao serializar a mensagem em JSON """


class DeliveryError(NotifierError):
    """ Erro de transporte ao entregar o webhook """
    def __init__(self, detail: str, status_code: int | None = None):
        self.detail = detail
        self.status_code = status_code
        message = f"{status_code}: {detail}" if status_code is not None else detail
        super().__init__(message)

    def __reduce__(self):
        return (self.__class__, (self.detail, self.status_code))
