"""Filters de logging: contexto do serviço e mascaramento de dados de pagamento."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

# Campos de `extra` que nunca podem sair em claro
SENSITIVE_FIELDS = frozenset(
    {
        "number",
        "cvv",
        "token",
        "nonce",
        "payment_method_token",
        "payment_method_nonce",
        "email",
        "body",
    }
)

REDACTED = "[redacted]"


class CorrelationIdFilter(logging.Filter):
    """Injeta correlation_id e service em cada record.

    Um correlation_id passado explicitamente via `extra` é preservado.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._get_correlation_id = correlation_id_getter or (lambda: "")

    def filter(self, record: logging.LogRecord) -> bool:
        existing = getattr(record, "correlation_id", None)
        record.correlation_id = existing if existing else self._get_correlation_id()
        record.service = self._service_name
        return True


class PaymentDataRedactionFilter(logging.Filter):
    """Mascara campos sensíveis passados via `extra` (PAN, CVV, tokens...)."""

    def __init__(self, fields: Iterable[str] = SENSITIVE_FIELDS) -> None:
        super().__init__()
        self._fields = frozenset(fields)

    def filter(self, record: logging.LogRecord) -> bool:
        for field in self._fields:
            if getattr(record, field, None) is not None:
                setattr(record, field, REDACTED)
        return True
