"""Normalização do corpo de resposta do gateway.

Etapas:
1. Leitura integral do stream do transporte (fechado sempre, uma única vez)
2. Descompressão gzip quando Content-Encoding indicar (corpo vazio é inválido)
3. Remoção best-effort de elementos nil (falha → buffer original)

O resultado é o buffer canônico consumido por decode e classificação.
"""

from __future__ import annotations

import gzip
import logging
import zlib
from typing import TYPE_CHECKING

from lxml import etree

from api.connectors.braintree.errors import DecompressionError, ResponseReadError
from api.connectors.braintree.xml_nil import strip_nil_elements
from config.logging import log_fallback

if TYPE_CHECKING:
    from app.protocols.transport import BodyStreamProtocol

logger = logging.getLogger(__name__)

GZIP_ENCODING = "gzip"


def is_gzip_encoded(content_encoding: str | None) -> bool:
    """Compara o header Content-Encoding com gzip (case-insensitive)."""
    return (content_encoding or "").strip().lower() == GZIP_ENCODING


def read_body(stream: BodyStreamProtocol, content_encoding: str | None) -> bytes:
    """Drena o stream (descomprimindo se necessário) e o fecha.

    Raises:
        DecompressionError: Se o corpo gzip for inválido.
        ResponseReadError: Se a leitura do stream falhar.
    """
    try:
        if is_gzip_encoded(content_encoding):
            compressed = stream.read()
            if not compressed:
                raise DecompressionError("gzip_body_empty")
            return gzip.decompress(compressed)
        return stream.read()
    except (gzip.BadGzipFile, EOFError, zlib.error) as exc:
        raise DecompressionError("gzip_body_invalid") from exc
    except OSError as exc:
        raise ResponseReadError("response_body_read_failed") from exc
    finally:
        stream.close()


def normalize_body(
    stream: BodyStreamProtocol,
    content_encoding: str | None,
    *,
    strip_nil: bool = True,
) -> bytes:
    """Produz o buffer canônico a partir do stream bruto do transporte.

    Args:
        stream: Stream de leitura única do corpo
        content_encoding: Valor do header Content-Encoding (ou None)
        strip_nil: Se False, pula a remoção de elementos nil

    Returns:
        Buffer descomprimido e sem elementos nil.

    Raises:
        DecompressionError: Se o corpo gzip for inválido.
        ResponseReadError: Se a leitura do stream falhar.
    """
    buffer = read_body(stream, content_encoding)
    logger.debug(
        "response_body_read",
        extra={
            "content_encoding": content_encoding or "identity",
            "body_bytes": len(buffer),
        },
    )
    if not strip_nil:
        return buffer

    try:
        return strip_nil_elements(buffer)
    except (etree.LxmlError, ValueError) as exc:
        log_fallback(logger, "nil_stripping", reason=type(exc).__name__)
        return buffer
