"""Configuração centralizada de logging JSON.

Uso:
    from config.logging import configure_logging, get_logger

    configure_logging(level="INFO", service_name="braintree_gateway")
    logger = get_logger(__name__)
    logger.info("response_body_read", extra={"body_bytes": 512})

Nunca logar corpos de resposta, tokens ou dados de cartão.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from config.logging.filters import CorrelationIdFilter, PaymentDataRedactionFilter
from config.logging.formatters import create_json_formatter

if TYPE_CHECKING:
    from collections.abc import Callable

    from config.settings import BraintreeSettings

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

DEFAULT_SERVICE_NAME = "braintree_gateway"


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
) -> None:
    """Configura o root logger com handler JSON único.

    Args:
        level: Nível de log (case-insensitive).
        service_name: Nome do serviço injetado em cada record.
        correlation_id_getter: Função que retorna o correlation_id atual.

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler()
    handler.setLevel(level_upper)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(CorrelationIdFilter(service_name, correlation_id_getter))
    handler.addFilter(PaymentDataRedactionFilter())

    root = logging.getLogger()
    root.setLevel(level_upper)
    # Substitui handlers existentes para evitar duplicação
    root.handlers = [handler]


def configure_logging_from_settings(
    settings: BraintreeSettings,
    correlation_id_getter: Callable[[], str] | None = None,
) -> None:
    """Configura logging a partir das settings (nível inválido → INFO)."""
    level = settings.log_level if settings.log_level.upper() in VALID_LOG_LEVELS else "INFO"
    configure_logging(
        level=level,
        service_name=settings.service_name,
        correlation_id_getter=correlation_id_getter,
    )


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def log_fallback(
    logger: logging.Logger,
    component: str,
    reason: str | None = None,
    elapsed_ms: float | None = None,
) -> None:
    """Registra que um fallback determinístico foi aplicado (sem PII).

    Exemplo:
        log_fallback(logger, "nil_stripping", reason="XMLSyntaxError")
    """
    extra: dict[str, object] = {
        "fallback_used": True,
        "component": component,
    }
    if reason:
        extra["reason"] = reason
    if elapsed_ms is not None:
        extra["elapsed_ms"] = elapsed_ms

    logger.info("Fallback applied for %s", component, extra=extra)
