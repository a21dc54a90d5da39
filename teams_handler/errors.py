"""Exceções do handler, uma por categoria de falha."""


class HandlerError(RuntimeError):
    """Base para todas as falhas terminais de uma invocação."""


class InputError(HandlerError):
    """Evento recebido está malformado ou incompleto."""


class ConfigurationError(HandlerError):
    """Configuração inválida; nenhuma chamada de rede é feita."""


class RenderError(HandlerError):
    """Um elemento do card não pôde ser anexado."""


class SerializationError(HandlerError):
    """O card não pôde ser convertido para JSON."""


class DeliveryError(HandlerError):
    """O webhook do Teams recusou ou não respondeu ao envio."""

    def __init__(self, message, cause=None, payload=None):
        super().__init__(message)
        self.cause = cause
        self.payload = payload
