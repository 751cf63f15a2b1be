"""Endereço de cobrança/entrega vinculado a um customer."""

from __future__ import annotations

from datetime import datetime  # noqa: TC003 - usado em runtime pelo schema do Pydantic

from app.domain.entity import GatewayEntity


class Address(GatewayEntity):
    xml_root = "address"

    id: str | None = None
    customer_id: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    company: str | None = None
    street_address: str | None = None
    extended_address: str | None = None
    locality: str | None = None
    region: str | None = None
    postal_code: str | None = None
    country_code_alpha2: str | None = None
    country_name: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


__all__ = ["Address"]
