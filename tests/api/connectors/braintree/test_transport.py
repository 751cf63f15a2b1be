"""Testes do adapter httpx → contrato de transporte."""

from __future__ import annotations

import gzip

import httpx
import pytest

from api.connectors.braintree.envelope import ResponseEnvelope
from api.connectors.braintree.transport import ChunkStream, HttpxTransportResponse
from config.settings import BraintreeSettings
from tests.fakes.gateway_documents import CREDIT_CARD_XML


class TestChunkStream:
    """Testes para ChunkStream."""

    def test_reads_all_chunks(self) -> None:
        stream = ChunkStream(iter([b"<a>", b"", b"b", b"</a>"]))

        assert stream.read() == b"<a>b</a>"

    def test_partial_reads(self) -> None:
        stream = ChunkStream(iter([b"abcdef"]))

        assert stream.read(4) == b"abcd"
        assert stream.read(4) == b"ef"
        assert stream.read(4) == b""

    def test_close_runs_callback_once(self) -> None:
        closes: list[int] = []
        stream = ChunkStream(iter([]), on_close=lambda: closes.append(1))

        stream.close()
        stream.close()

        assert closes == [1]

    def test_transport_errors_become_os_errors(self) -> None:
        def chunks():
            yield b"<a>"
            raise httpx.ReadError("connection lost")

        stream = ChunkStream(chunks())

        with pytest.raises(OSError, match="transport_stream_error"):
            stream.read()


class TestHttpxTransportResponse:
    """Testes para HttpxTransportResponse."""

    def test_streaming_response_keeps_raw_gzip(self) -> None:
        compressed = gzip.compress(CREDIT_CARD_XML)
        response = httpx.Response(
            200,
            headers={"Content-Encoding": "gzip"},
            stream=httpx.ByteStream(compressed),
        )

        transport = HttpxTransportResponse(response)

        assert transport.headers.get("content-encoding") == "gzip"
        assert transport.body.read() == compressed

    def test_read_response_drops_content_encoding(self) -> None:
        response = httpx.Response(
            201,
            headers={"Content-Encoding": "gzip"},
            content=gzip.compress(CREDIT_CARD_XML),
        )

        transport = HttpxTransportResponse(response)

        assert transport.status_code == 201
        assert transport.headers.get("content-encoding") is None
        assert transport.body.read() == CREDIT_CARD_XML

    @pytest.mark.parametrize("streaming", [True, False])
    def test_envelope_from_httpx(self, settings: BraintreeSettings, streaming: bool) -> None:
        compressed = gzip.compress(CREDIT_CARD_XML)
        if streaming:
            response = httpx.Response(
                200,
                headers={"Content-Encoding": "gzip"},
                stream=httpx.ByteStream(compressed),
            )
        else:
            response = httpx.Response(200, headers={"Content-Encoding": "gzip"}, content=compressed)

        envelope = ResponseEnvelope.from_httpx(response, settings)

        assert envelope.credit_card().token == "cc-token-1"
        assert envelope.error() is None
        assert response.is_closed
