"""Erros do conector Braintree (leitura, parsing e classificação).

Hierarquia:
- GatewayResponseError: base de tudo que a camada de resposta levanta
  - ResponseReadError: falha de IO ao drenar o stream do transporte
  - DecompressionError: corpo gzip malformado
  - ParseError: XML malformado ou incompatível com o modelo pedido
    - UnrecognizedEntityError: root tag fora da família esperada
  - GatewayApiError: erro reportado pelo gateway (possui status_code)
    - StructuredApiError: corpo api-error-response com mensagem
    - HttpStatusError: status HTTP de falha sem corpo estruturado
  - InvalidResponseError: corpo não corresponde a nenhum formato conhecido
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx

if TYPE_CHECKING:
    from api.connectors.braintree.envelope import ResponseEnvelope
    from app.domain.api_error import ApiErrorResponse


class GatewayResponseError(Exception):
    """Base para falhas ao interpretar respostas do gateway."""


class ResponseReadError(GatewayResponseError):
    """Falha de IO ao ler o corpo da resposta."""


class DecompressionError(GatewayResponseError):
    """Corpo declarado como gzip não pôde ser descomprimido."""


class ParseError(GatewayResponseError):
    """XML malformado ou incompatível com o modelo de destino.

    Attributes:
        accessor: Nome do accessor do envelope que disparou o decode
            (None quando chamado fora do envelope).
    """

    def __init__(self, message: str, accessor: str | None = None) -> None:
        super().__init__(message)
        self.accessor = accessor

    def __str__(self) -> str:
        message = super().__str__()
        if self.accessor:
            return f"{self.accessor}: {message}"
        return message


class UnrecognizedEntityError(ParseError):
    """Root tag não corresponde a nenhuma variante conhecida."""

    def __init__(self, entity_name: str, accessor: str | None = None) -> None:
        super().__init__(f"Unrecognized payment method {entity_name!r}", accessor)
        self.entity_name = entity_name


class GatewayApiError(GatewayResponseError):
    """Erro de API com status HTTP associado."""

    def __init__(self, message: str, status_code: int) -> None:
        super().__init__(message)
        self.status_code = status_code


class StructuredApiError(GatewayApiError):
    """Erro de negócio reportado no corpo (api-error-response).

    Tem precedência sobre HttpStatusError, inclusive com status 2xx.
    """

    def __init__(
        self,
        status_code: int,
        message: str,
        response: ApiErrorResponse | None = None,
    ) -> None:
        super().__init__(message, status_code)
        self.message = message
        self.response = response


class HttpStatusError(GatewayApiError):
    """Status HTTP de falha sem corpo de erro estruturado."""

    def __init__(self, status_code: int) -> None:
        self.reason = httpx.codes.get_reason_phrase(status_code)
        super().__init__(f"{self.reason} ({status_code})", status_code)


class InvalidResponseError(GatewayResponseError):
    """Resposta não interpretável como nenhum formato conhecido.

    Carrega o envelope inteiro para inspeção pelo chamador.
    """

    def __init__(self, response: ResponseEnvelope) -> None:
        super().__init__(
            f"braintree returned invalid response ({response.status_code})"
        )
        self.response = response
