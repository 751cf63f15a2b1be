"""Customer e os métodos de pagamento vaultados para ele."""

from __future__ import annotations

from datetime import datetime  # noqa: TC003 - usado em runtime pelo schema do Pydantic

from pydantic import Field

from app.domain.address import Address  # noqa: TC001 - usado em runtime pelo schema do Pydantic
from app.domain.entity import GatewayEntity
from app.domain.payment_methods import (  # noqa: TC001
    AndroidPayCard,
    ApplePayCard,
    CreditCard,
    PaymentMethod,
    PayPalAccount,
    VenmoAccount,
)


class Customer(GatewayEntity):
    xml_root = "customer"

    id: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    company: str | None = None
    email: str | None = None
    phone: str | None = None
    fax: str | None = None
    website: str | None = None
    credit_cards: list[CreditCard] = Field(default_factory=list)
    paypal_accounts: list[PayPalAccount] = Field(default_factory=list)
    venmo_accounts: list[VenmoAccount] = Field(default_factory=list)
    android_pay_cards: list[AndroidPayCard] = Field(default_factory=list)
    apple_pay_cards: list[ApplePayCard] = Field(default_factory=list)
    addresses: list[Address] = Field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def payment_methods(self) -> list[PaymentMethod]:
        """Todos os métodos de pagamento do customer, agrupados por variante."""
        return [
            *self.credit_cards,
            *self.paypal_accounts,
            *self.venmo_accounts,
            *self.android_pay_cards,
            *self.apple_pay_cards,
        ]

    def default_payment_method(self) -> PaymentMethod | None:
        return next((pm for pm in self.payment_methods() if pm.default), None)


__all__ = ["Customer"]
