"""Dispatch polimórfico de métodos de pagamento pela root tag.

Tabela fechada: tag desconhecida é erro, nunca uma variante default.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import TYPE_CHECKING

from api.connectors.braintree.errors import UnrecognizedEntityError
from api.connectors.braintree.sniffer import EntityKind, sniff_entity_name
from api.connectors.braintree.xml_decode import decode_entity
from app.domain.payment_methods import (
    AndroidPayCard,
    ApplePayCard,
    CreditCard,
    PaymentMethod,
    PayPalAccount,
    VenmoAccount,
)

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger(__name__)

PAYMENT_METHOD_TYPES: Mapping[EntityKind, type[PaymentMethod]] = MappingProxyType(
    {
        EntityKind.CREDIT_CARD: CreditCard,
        EntityKind.PAYPAL_ACCOUNT: PayPalAccount,
        EntityKind.VENMO_ACCOUNT: VenmoAccount,
        EntityKind.ANDROID_PAY_CARD: AndroidPayCard,
        EntityKind.APPLE_PAY_CARD: ApplePayCard,
    }
)


def decode_payment_method(buffer: bytes, accessor: str | None = None) -> PaymentMethod:
    """Decodifica o buffer na variante indicada pela root tag.

    Raises:
        ParseError: XML malformado ou campo incompatível com a variante.
        UnrecognizedEntityError: Root tag fora da família de métodos de pagamento.
    """
    entity_name = sniff_entity_name(buffer)
    model = PAYMENT_METHOD_TYPES.get(EntityKind.from_tag(entity_name))
    if model is None:
        logger.warning(
            "payment_method_unrecognized",
            extra={"entity_name": entity_name, "accessor": accessor},
        )
        raise UnrecognizedEntityError(entity_name, accessor)
    return decode_entity(buffer, model, accessor)
