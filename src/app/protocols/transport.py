"""Contratos do transporte HTTP consumidos pela camada de resposta.

A camada de resposta não abre conexões nem monta requests; recebe do
transporte apenas status, headers e um stream de leitura única.
"""

from __future__ import annotations

from typing import Protocol


class HeaderLookupProtocol(Protocol):
    """Lookup de headers case-insensitive (ex: httpx.Headers)."""

    def get(self, key: str, default: str | None = None) -> str | None: ...


class BodyStreamProtocol(Protocol):
    """Stream binário de leitura única."""

    def read(self, size: int = -1) -> bytes: ...

    def close(self) -> None: ...


class TransportResponseProtocol(Protocol):
    """Resposta bruta entregue pelo transporte."""

    @property
    def status_code(self) -> int: ...

    @property
    def headers(self) -> HeaderLookupProtocol: ...

    @property
    def body(self) -> BodyStreamProtocol: ...
