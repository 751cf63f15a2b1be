"""Transação e seus itens de linha."""

from __future__ import annotations

from datetime import datetime  # noqa: TC003 - usado em runtime pelo schema do Pydantic
from decimal import Decimal  # noqa: TC003 - usado em runtime pelo schema do Pydantic

from pydantic import Field

from app.domain.address import Address  # noqa: TC001 - usado em runtime pelo schema do Pydantic
from app.domain.entity import GatewayEntity, GatewayEntityList
from app.domain.modification import AddOn, Discount  # noqa: TC001
from app.domain.payment_methods import (  # noqa: TC001
    AndroidPayCard,
    ApplePayCard,
    CreditCard,
    PayPalAccount,
    VenmoAccount,
)


class Transaction(GatewayEntity):
    """Transação (sale/credit) processada pelo gateway.

    Os detalhes do instrumento usado vêm em subelementos próprios
    (credit-card, paypal, ...); apenas o correspondente a
    ``payment_instrument_type`` costuma estar preenchido.
    """

    xml_root = "transaction"

    id: str | None = None
    type: str | None = None
    status: str | None = None
    amount: Decimal | None = None
    tax_amount: Decimal | None = None
    currency_iso_code: str | None = None
    order_id: str | None = None
    merchant_account_id: str | None = None
    subscription_id: str | None = None
    customer_id: str | None = None
    payment_instrument_type: str | None = None
    processor_response_code: str | None = None
    processor_response_text: str | None = None
    processor_authorization_code: str | None = None
    gateway_rejection_reason: str | None = None
    refunded_transaction_id: str | None = None
    refund_ids: list[str] = Field(default_factory=list)
    credit_card: CreditCard | None = None
    paypal: PayPalAccount | None = None
    venmo_account: VenmoAccount | None = None
    android_pay_card: AndroidPayCard | None = None
    apple_pay: ApplePayCard | None = None
    billing: Address | None = None
    shipping: Address | None = None
    add_ons: list[AddOn] = Field(default_factory=list)
    discounts: list[Discount] = Field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None


class TransactionLineItem(GatewayEntity):
    xml_root = "transaction-line-item"

    name: str | None = None
    description: str | None = None
    kind: str | None = None
    quantity: Decimal | None = None
    unit_amount: Decimal | None = None
    unit_of_measure: str | None = None
    unit_tax_amount: Decimal | None = None
    discount_amount: Decimal | None = None
    tax_amount: Decimal | None = None
    total_amount: Decimal | None = None
    product_code: str | None = None
    commodity_code: str | None = None
    url: str | None = None


class TransactionLineItemList(GatewayEntityList):
    xml_root = "line-items"
    items_field = "line_items"

    line_items: list[TransactionLineItem] = Field(default_factory=list)


__all__ = ["Transaction", "TransactionLineItem", "TransactionLineItemList"]
