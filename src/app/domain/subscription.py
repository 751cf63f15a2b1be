"""Assinatura recorrente de um plano."""

from __future__ import annotations

from datetime import date, datetime  # noqa: TC003 - usado em runtime pelo schema do Pydantic
from decimal import Decimal  # noqa: TC003 - usado em runtime pelo schema do Pydantic

from pydantic import Field

from app.domain.entity import GatewayEntity
from app.domain.modification import AddOn, Discount  # noqa: TC001
from app.domain.transaction import Transaction  # noqa: TC001


class Subscription(GatewayEntity):
    xml_root = "subscription"

    id: str | None = None
    plan_id: str | None = None
    status: str | None = None
    price: Decimal | None = None
    balance: Decimal | None = None
    next_bill_amount: Decimal | None = None
    merchant_account_id: str | None = None
    payment_method_token: str | None = None
    billing_day_of_month: int | None = None
    current_billing_cycle: int | None = None
    number_of_billing_cycles: int | None = None
    never_expires: bool | None = None
    failure_count: int | None = None
    trial_period: bool | None = None
    trial_duration: int | None = None
    trial_duration_unit: str | None = None
    first_billing_date: date | None = None
    next_billing_date: date | None = None
    billing_period_start_date: date | None = None
    billing_period_end_date: date | None = None
    paid_through_date: date | None = None
    add_ons: list[AddOn] = Field(default_factory=list)
    discounts: list[Discount] = Field(default_factory=list)
    transactions: list[Transaction] = Field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None


__all__ = ["Subscription"]
