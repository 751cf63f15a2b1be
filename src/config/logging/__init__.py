"""Logging estruturado (JSON) do conector.

Uso:
    from config.logging import configure_logging_from_settings
    from config.settings import get_braintree_settings

    configure_logging_from_settings(get_braintree_settings())
"""

from config.logging.config import (
    configure_logging,
    configure_logging_from_settings,
    get_logger,
    log_fallback,
)
from config.logging.filters import CorrelationIdFilter, PaymentDataRedactionFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "CorrelationIdFilter",
    "PaymentDataRedactionFilter",
    "configure_logging",
    "configure_logging_from_settings",
    "create_json_formatter",
    "get_logger",
    "log_fallback",
]
