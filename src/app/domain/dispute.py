"""Disputas (chargebacks) e as evidências anexadas a elas."""

from __future__ import annotations

from datetime import date, datetime  # noqa: TC003 - usado em runtime pelo schema do Pydantic
from decimal import Decimal  # noqa: TC003 - usado em runtime pelo schema do Pydantic

from pydantic import Field

from app.domain.entity import GatewayEntity


class DisputeEvidence(GatewayEntity):
    xml_root = "evidence"

    id: str | None = None
    comment: str | None = None
    url: str | None = None
    category: str | None = None
    sequence_number: int | None = None
    created_at: datetime | None = None
    sent_to_processor_at: date | None = None


class DisputeTransaction(GatewayEntity):
    """Resumo da transação disputada, como embutido na disputa."""

    xml_root = "transaction"

    id: str | None = None
    amount: Decimal | None = None
    order_id: str | None = None
    payment_instrument_subtype: str | None = None
    purchase_order_number: str | None = None
    created_at: datetime | None = None


class Dispute(GatewayEntity):
    xml_root = "dispute"

    id: str | None = None
    kind: str | None = None
    status: str | None = None
    reason: str | None = None
    reason_code: str | None = None
    reason_description: str | None = None
    case_number: str | None = None
    reference_number: str | None = None
    currency_iso_code: str | None = None
    merchant_account_id: str | None = None
    amount_disputed: Decimal | None = None
    amount_won: Decimal | None = None
    received_date: date | None = None
    reply_by_date: date | None = None
    evidence: list[DisputeEvidence] = Field(default_factory=list)
    transaction: DisputeTransaction | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


__all__ = ["Dispute", "DisputeEvidence", "DisputeTransaction"]
