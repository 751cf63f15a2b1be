"""Conector Braintree — camada de decodificação de respostas do gateway.

Responsabilidades:
- Descompressão gzip e remoção de elementos nil do XML
- Identificação da entidade pela root tag e dispatch polimórfico
- Decode tipado das entidades de domínio
- Classificação de erros (estruturado vs. HTTP)

Conexão, autenticação e retry ficam com o transporte.
"""

from .classifier import classify_error
from .dispatcher import PAYMENT_METHOD_TYPES, decode_payment_method
from .envelope import ResponseEnvelope
from .errors import (
    DecompressionError,
    GatewayApiError,
    GatewayResponseError,
    HttpStatusError,
    InvalidResponseError,
    ParseError,
    ResponseReadError,
    StructuredApiError,
    UnrecognizedEntityError,
)
from .normalizer import normalize_body
from .sniffer import EntityKind, sniff_entity_name
from .transport import HttpxTransportResponse

__all__ = [
    "PAYMENT_METHOD_TYPES",
    "DecompressionError",
    "EntityKind",
    "GatewayApiError",
    "GatewayResponseError",
    "HttpStatusError",
    "HttpxTransportResponse",
    "InvalidResponseError",
    "ParseError",
    "ResponseEnvelope",
    "ResponseReadError",
    "StructuredApiError",
    "UnrecognizedEntityError",
    "classify_error",
    "decode_payment_method",
    "normalize_body",
    "sniff_entity_name",
]
