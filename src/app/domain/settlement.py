"""Resumo de lote de liquidação (settlement batch summary)."""

from __future__ import annotations

from decimal import Decimal

from pydantic import Field

from app.domain.entity import GatewayEntity


class SettlementRecord(GatewayEntity):
    xml_root = "record"

    card_type: str | None = None
    kind: str | None = None
    merchant_account_id: str | None = None
    count: int | None = None
    amount_settled: Decimal | None = None


class SettlementBatchSummary(GatewayEntity):
    xml_root = "settlement-batch-summary"

    records: list[SettlementRecord] = Field(default_factory=list)

    def total_settled(self) -> Decimal:
        return sum(
            (record.amount_settled or Decimal(0) for record in self.records),
            Decimal(0),
        )


__all__ = ["SettlementBatchSummary", "SettlementRecord"]
