"""Protocolos e contratos do core da aplicação."""

from .transport import BodyStreamProtocol, HeaderLookupProtocol, TransportResponseProtocol

__all__ = [
    "BodyStreamProtocol",
    "HeaderLookupProtocol",
    "TransportResponseProtocol",
]
