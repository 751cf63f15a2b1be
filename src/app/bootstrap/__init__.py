"""Bootstrap do conector — logging e validação de settings.

Uso:
    from app.bootstrap import initialize_connector

    initialize_connector()
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from config.logging import configure_logging_from_settings
from config.settings import BraintreeSettings, get_braintree_settings

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)


def initialize_connector(
    settings: BraintreeSettings | None = None,
    correlation_id_getter: Callable[[], str] | None = None,
) -> BraintreeSettings:
    """Configura logging e valida settings no startup.

    Em produção falha rápido com settings inválidas; nos demais ambientes
    apenas registra o alerta.

    Raises:
        ValueError: Se houver erros de configuração em produção.
    """
    settings = settings or get_braintree_settings()
    errors = settings.validate()
    if errors and settings.is_production:
        raise ValueError("Configuração inválida: " + "; ".join(errors))

    configure_logging_from_settings(settings, correlation_id_getter)
    if errors:
        logger.warning("settings_validation_failed", extra={"errors": errors})
    return settings
