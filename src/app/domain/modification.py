"""Add-ons e descontos (modificações aplicadas a planos/assinaturas)."""

from __future__ import annotations

from datetime import datetime  # noqa: TC003 - usado em runtime pelo schema do Pydantic
from decimal import Decimal  # noqa: TC003 - usado em runtime pelo schema do Pydantic

from pydantic import Field

from app.domain.entity import GatewayEntity, GatewayEntityList


class Modification(GatewayEntity):
    """Campos comuns a add-ons e descontos."""

    id: str | None = None
    name: str | None = None
    description: str | None = None
    kind: str | None = None
    amount: Decimal | None = None
    quantity: int | None = None
    number_of_billing_cycles: int | None = None
    never_expires: bool | None = None
    current_billing_cycle: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class AddOn(Modification):
    xml_root = "add-on"


class Discount(Modification):
    xml_root = "discount"


class AddOnList(GatewayEntityList):
    xml_root = "add-ons"
    items_field = "add_ons"

    add_ons: list[AddOn] = Field(default_factory=list)


class DiscountList(GatewayEntityList):
    xml_root = "discounts"
    items_field = "discounts"

    discounts: list[Discount] = Field(default_factory=list)


__all__ = ["AddOn", "AddOnList", "Discount", "DiscountList", "Modification"]
