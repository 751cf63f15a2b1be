"""Merchant account (conta de recebimento do lojista)."""

from __future__ import annotations

from app.domain.entity import GatewayEntity


class MerchantAccount(GatewayEntity):
    xml_root = "merchant-account"

    id: str | None = None
    status: str | None = None
    currency_iso_code: str | None = None
    default: bool | None = None
    master_merchant_account_id: str | None = None

    @property
    def is_active(self) -> bool:
        return self.status == "active"


__all__ = ["MerchantAccount"]
