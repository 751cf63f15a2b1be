"""Variantes de método de pagamento retornadas pelo gateway.

A família é fechada: a root tag do documento seleciona exatamente uma
variante (ver api/connectors/braintree/dispatcher.py).
"""

from __future__ import annotations

from datetime import datetime  # noqa: TC003 - usado em runtime pelo schema do Pydantic

from app.domain.address import Address  # noqa: TC001 - usado em runtime pelo schema do Pydantic
from app.domain.entity import GatewayEntity


class CreditCard(GatewayEntity):
    """Cartão de crédito vaultado."""

    xml_root = "credit-card"

    token: str | None = None
    customer_id: str | None = None
    cardholder_name: str | None = None
    card_type: str | None = None
    bin: str | None = None
    last_4: str | None = None
    expiration_month: str | None = None
    expiration_year: str | None = None
    expired: bool | None = None
    default: bool | None = None
    image_url: str | None = None
    unique_number_identifier: str | None = None
    billing_address: Address | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def masked_number(self) -> str:
        return f"{self.bin or ''}******{self.last_4 or ''}"


class PayPalAccount(GatewayEntity):
    """Conta PayPal vaultada."""

    xml_root = "paypal-account"

    token: str | None = None
    customer_id: str | None = None
    email: str | None = None
    billing_agreement_id: str | None = None
    default: bool | None = None
    image_url: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class VenmoAccount(GatewayEntity):
    """Conta Venmo vaultada."""

    xml_root = "venmo-account"

    token: str | None = None
    customer_id: str | None = None
    username: str | None = None
    venmo_user_id: str | None = None
    source_description: str | None = None
    default: bool | None = None
    image_url: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class AndroidPayCard(GatewayEntity):
    """Cartão tokenizado via Android Pay (Google Pay)."""

    xml_root = "android-pay-card"

    token: str | None = None
    customer_id: str | None = None
    card_type: str | None = None
    bin: str | None = None
    last_4: str | None = None
    source_card_type: str | None = None
    source_card_last_4: str | None = None
    virtual_card_type: str | None = None
    virtual_card_last_4: str | None = None
    source_description: str | None = None
    expiration_month: str | None = None
    expiration_year: str | None = None
    google_transaction_id: str | None = None
    default: bool | None = None
    image_url: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ApplePayCard(GatewayEntity):
    """Cartão tokenizado via Apple Pay."""

    xml_root = "apple-pay-card"

    token: str | None = None
    customer_id: str | None = None
    card_type: str | None = None
    cardholder_name: str | None = None
    bin: str | None = None
    last_4: str | None = None
    payment_instrument_name: str | None = None
    source_description: str | None = None
    expiration_month: str | None = None
    expiration_year: str | None = None
    expired: bool | None = None
    default: bool | None = None
    image_url: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


PaymentMethod = CreditCard | PayPalAccount | VenmoAccount | AndroidPayCard | ApplePayCard


__all__ = [
    "AndroidPayCard",
    "ApplePayCard",
    "CreditCard",
    "PayPalAccount",
    "PaymentMethod",
    "VenmoAccount",
]
