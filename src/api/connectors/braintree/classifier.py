"""Classificação de erros da resposta do gateway.

Ordem de precedência:
1. Corpo api-error-response com mensagem não vazia → StructuredApiError
   (mesmo com status 2xx)
2. Status > 299 → HttpStatusError
3. Caso contrário, sucesso (None)
"""

from __future__ import annotations

import logging

from api.connectors.braintree.errors import (
    GatewayApiError,
    HttpStatusError,
    ParseError,
    StructuredApiError,
)
from api.connectors.braintree.xml_decode import decode_entity, local_name, parse_document
from app.domain.api_error import ApiErrorResponse

logger = logging.getLogger(__name__)

MAX_SUCCESS_STATUS = 299


def extract_error_message(buffer: bytes) -> str | None:
    """Mensagem do corpo de erro estruturado, ou None se não houver.

    Falhas de parsing aqui não são erro: apenas indicam ausência do formato.
    """
    try:
        root = parse_document(buffer)
    except ParseError:
        return None
    if local_name(root) != ApiErrorResponse.xml_root:
        return None
    for child in root:
        if isinstance(child.tag, str) and local_name(child) == "message":
            return child.text or None
    return None


def classify_error(buffer: bytes, status_code: int) -> GatewayApiError | None:
    """Classifica a resposta como erro estruturado, erro HTTP ou sucesso."""
    message = extract_error_message(buffer)
    if message:
        try:
            response = decode_entity(buffer, ApiErrorResponse)
        except ParseError:
            # Campos não relacionados inválidos não anulam o erro estruturado
            response = ApiErrorResponse(message=message)
        logger.debug(
            "gateway_structured_error",
            extra={
                "status_code": status_code,
                "validation_error_count": len(response.validation_errors()),
            },
        )
        return StructuredApiError(status_code, message, response)

    if status_code > MAX_SUCCESS_STATUS:
        logger.debug("gateway_http_error", extra={"status_code": status_code})
        return HttpStatusError(status_code)

    return None
