"""Agregador de settings do conector.

Re-exporta as settings e funções de cada módulo.
"""

from __future__ import annotations

from config.settings.braintree import (
    BraintreeSettings,
    Environment,
    get_braintree_settings,
)

__all__ = [
    "BraintreeSettings",
    "Environment",
    "get_braintree_settings",
]
