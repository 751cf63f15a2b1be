"""Adapter de httpx.Response para o contrato de transporte da camada.

Resposta em streaming (ainda não lida): o corpo é exposto cru via
``iter_raw``, e a descompressão fica a cargo do normalizador.
Resposta já lida pelo httpx: o conteúdo já foi decodificado, então o
Content-Encoding é omitido para não descomprimir duas vezes.
"""

from __future__ import annotations

import io
from typing import TYPE_CHECKING

import httpx

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator


class ChunkStream(io.RawIOBase):
    """Stream de leitura única sobre um iterador de chunks de bytes."""

    def __init__(self, chunks: Iterator[bytes], on_close: Callable[[], None] | None = None) -> None:
        super().__init__()
        self._chunks = chunks
        self._pending = b""
        self._on_close = on_close

    def readable(self) -> bool:
        return True

    def readinto(self, buffer: bytearray | memoryview) -> int:  # type: ignore[override]
        while not self._pending:
            try:
                self._pending = next(self._chunks)
            except StopIteration:
                return 0
            except (httpx.HTTPError, httpx.StreamError) as exc:
                raise OSError(f"transport_stream_error: {type(exc).__name__}") from exc
        size = min(len(buffer), len(self._pending))
        buffer[:size] = self._pending[:size]
        self._pending = self._pending[size:]
        return size

    def close(self) -> None:
        if not self.closed and self._on_close is not None:
            self._on_close()
        super().close()


class HttpxTransportResponse:
    """Expõe um httpx.Response como TransportResponseProtocol."""

    def __init__(self, response: httpx.Response) -> None:
        self._response = response
        if response.is_stream_consumed:
            headers = response.headers.copy()
            headers.pop("content-encoding", None)
            self._headers = headers
            self._body: io.RawIOBase | io.BytesIO = io.BytesIO(response.content)
        else:
            self._headers = response.headers
            self._body = ChunkStream(response.iter_raw(), on_close=response.close)

    @property
    def status_code(self) -> int:
        return self._response.status_code

    @property
    def headers(self) -> httpx.Headers:
        return self._headers

    @property
    def body(self) -> io.RawIOBase | io.BytesIO:
        return self._body
