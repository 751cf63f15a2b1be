"""Settings do conector Braintree (camada de resposta).

Carregadas de variáveis de ambiente e cacheadas como singleton.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

Environment = Literal["development", "sandbox", "production"]

VALID_ENVIRONMENTS = frozenset({"development", "sandbox", "production"})
VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


@dataclass(frozen=True)
class BraintreeSettings:
    """Configurações do conector Braintree.

    Attributes:
        environment: Ambiente do gateway (development|sandbox|production)
        strip_nil_elements: Remove elementos nil="true" antes do decode
        log_level: Nível de log do serviço
        service_name: Nome do serviço para logs
    """

    environment: Environment = "sandbox"
    strip_nil_elements: bool = True
    log_level: str = "INFO"
    service_name: str = "braintree_gateway"

    @property
    def is_production(self) -> bool:
        """Retorna True se ambiente é produção."""
        return self.environment == "production"

    def validate(self) -> list[str]:
        """Valida configurações do conector.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if self.environment not in VALID_ENVIRONMENTS:
            errors.append(f"BRAINTREE_ENVIRONMENT inválido: {self.environment}")

        if self.log_level.upper() not in VALID_LOG_LEVELS:
            errors.append(f"LOG_LEVEL inválido: {self.log_level}")

        if not self.service_name:
            errors.append("SERVICE_NAME não pode ser vazio")

        return errors


def _parse_environment(env_str: str) -> Environment:
    """Converte string de ambiente para tipo Environment."""
    env_lower = env_str.strip().lower()
    if env_lower in ("production", "prod"):
        return "production"
    if env_lower in ("development", "dev", "local"):
        return "development"
    return "sandbox"


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in ("true", "1", "yes")


def _load_from_env() -> BraintreeSettings:
    """Carrega BraintreeSettings a partir de variáveis de ambiente."""
    return BraintreeSettings(
        environment=_parse_environment(os.getenv("BRAINTREE_ENVIRONMENT", "sandbox")),
        strip_nil_elements=_parse_bool(os.getenv("BRAINTREE_STRIP_NIL_ELEMENTS", "true")),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        service_name=os.getenv("SERVICE_NAME", "braintree_gateway"),
    )


@lru_cache(maxsize=1)
def get_braintree_settings() -> BraintreeSettings:
    """Retorna instância cacheada de BraintreeSettings.

    A cache garante singleton para múltiplas injeções.
    """
    return _load_from_env()
