"""Identificação da entidade pela root tag (sem decodificar o documento)."""

from __future__ import annotations

import io
from enum import StrEnum

from lxml import etree

from api.connectors.braintree.errors import ParseError


class EntityKind(StrEnum):
    """Entidades polimórficas reconhecidas pela root tag."""

    CREDIT_CARD = "credit-card"
    PAYPAL_ACCOUNT = "paypal-account"
    VENMO_ACCOUNT = "venmo-account"
    ANDROID_PAY_CARD = "android-pay-card"
    APPLE_PAY_CARD = "apple-pay-card"
    UNRECOGNIZED = "unrecognized"

    @classmethod
    def from_tag(cls, tag: str) -> EntityKind:
        try:
            return cls(tag)
        except ValueError:
            return cls.UNRECOGNIZED


def sniff_entity_name(buffer: bytes) -> str:
    """Retorna o nome local da root tag do documento.

    Para no primeiro evento de abertura; filhos não são lidos nem validados.

    Raises:
        ParseError: Se o documento estiver vazio ou malformado antes da root.
    """
    events = etree.iterparse(
        io.BytesIO(buffer),
        events=("start",),
        resolve_entities=False,
        no_network=True,
    )
    try:
        _, root = next(events)
    except (etree.XMLSyntaxError, StopIteration) as exc:
        raise ParseError("cannot determine entity name: malformed XML") from exc
    return etree.QName(root).localname
