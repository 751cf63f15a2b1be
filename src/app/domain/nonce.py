"""Nonce de método de pagamento (referência de uso único)."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from app.domain.entity import GatewayEntity


class PaymentMethodNonce(GatewayEntity):
    xml_root = "payment-method-nonce"

    nonce: str | None = None
    type: str | None = None
    default: bool | None = None
    is_locked: bool | None = None
    consumed: bool | None = None
    details: dict[str, Any] = Field(default_factory=dict)


__all__ = ["PaymentMethodNonce"]
