"""Formatter JSON dos logs do conector.

Campos presentes em todo record: asctime, level, logger, message,
correlation_id e service.
"""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

REQUIRED_LOG_FIELDS = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria o JsonFormatter com os campos padronizados.

    Exemplo de output:
        {"asctime": "...", "level": "DEBUG", "logger": "api.connectors.braintree.normalizer",
         "message": "response_body_read", "correlation_id": "req-1",
         "service": "braintree_gateway", "body_bytes": 512}
    """
    return JsonFormatter(
        " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS),
        rename_fields=FIELD_RENAME_MAP,
    )
