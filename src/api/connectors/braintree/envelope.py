"""Envelope de resposta do gateway Braintree.

Orquestra normalização (uma única vez, sob lock), decode tipado e
classificação de erro sobre o mesmo buffer canônico.

Uso:
    envelope = ResponseEnvelope.from_httpx(response)
    if error := envelope.error():
        raise error
    payment_method = envelope.payment_method()
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

from api.connectors.braintree.classifier import classify_error
from api.connectors.braintree.dispatcher import decode_payment_method
from api.connectors.braintree.errors import InvalidResponseError
from api.connectors.braintree.normalizer import normalize_body
from api.connectors.braintree.sniffer import EntityKind, sniff_entity_name
from api.connectors.braintree.transport import HttpxTransportResponse
from api.connectors.braintree.xml_decode import decode_entity, decode_list
from app.domain.address import Address
from app.domain.customer import Customer
from app.domain.dispute import Dispute, DisputeEvidence
from app.domain.merchant_account import MerchantAccount
from app.domain.modification import AddOn, AddOnList, Discount, DiscountList
from app.domain.nonce import PaymentMethodNonce
from app.domain.payment_methods import (
    AndroidPayCard,
    ApplePayCard,
    CreditCard,
    PaymentMethod,
    PayPalAccount,
    VenmoAccount,
)
from app.domain.settlement import SettlementBatchSummary
from app.domain.subscription import Subscription
from app.domain.transaction import Transaction, TransactionLineItem, TransactionLineItemList
from config.settings import BraintreeSettings, get_braintree_settings

if TYPE_CHECKING:
    from types import TracebackType

    import httpx

    from api.connectors.braintree.errors import GatewayApiError
    from app.protocols.transport import HeaderLookupProtocol, TransportResponseProtocol

logger = logging.getLogger(__name__)

CONTENT_ENCODING_HEADER = "Content-Encoding"


class ResponseEnvelope:
    """Resposta do gateway com buffer canônico memoizado.

    O stream do transporte é de leitura única: ``ensure_normalized`` garante
    no máximo uma leitura mesmo com chamadas concorrentes. Depois disso o
    buffer é imutável e os accessors são leituras puras sobre ele.
    """

    def __init__(
        self,
        transport: TransportResponseProtocol,
        settings: BraintreeSettings | None = None,
    ) -> None:
        self._transport = transport
        self._settings = settings or get_braintree_settings()
        self._lock = threading.Lock()
        self._normalized = False
        self._body = b""
        self._failure: Exception | None = None
        self._failure_traceback: TracebackType | None = None

    @classmethod
    def from_httpx(
        cls,
        response: httpx.Response,
        settings: BraintreeSettings | None = None,
    ) -> ResponseEnvelope:
        return cls(HttpxTransportResponse(response), settings)

    @property
    def status_code(self) -> int:
        return self._transport.status_code

    @property
    def headers(self) -> HeaderLookupProtocol:
        return self._transport.headers

    @property
    def body(self) -> bytes:
        """Buffer canônico (normaliza na primeira leitura)."""
        return self.ensure_normalized()

    def ensure_normalized(self) -> bytes:
        """Normaliza o corpo uma única vez e retorna o buffer canônico.

        Falhas de leitura/descompressão são memorizadas e relançadas nas
        chamadas seguintes; o stream nunca é relido.

        Raises:
            ResponseReadError: Se a leitura do stream falhar.
            DecompressionError: Se o corpo gzip for inválido.
        """
        if not self._normalized:
            with self._lock:
                if not self._normalized:
                    self._normalize_once()
        if self._failure is not None:
            # Restaura o traceback original para não acumular frames a cada chamada
            raise self._failure.with_traceback(self._failure_traceback)
        return self._body

    def _normalize_once(self) -> None:
        try:
            body = normalize_body(
                self._transport.body,
                self._transport.headers.get(CONTENT_ENCODING_HEADER),
                strip_nil=self._settings.strip_nil_elements,
            )
        except Exception as exc:
            logger.warning(
                "response_normalization_failed",
                extra={"status_code": self.status_code, "error_type": type(exc).__name__},
            )
            self._failure = exc
            self._failure_traceback = exc.__traceback__
        else:
            self._body = body
        self._normalized = True

    # Classificação

    def error(self) -> GatewayApiError | None:
        """Erro estruturado, erro HTTP ou None (sucesso)."""
        return classify_error(self.ensure_normalized(), self.status_code)

    def raise_for_error(self) -> None:
        """Levanta o erro classificado, se houver."""
        error = self.error()
        if error is not None:
            raise error

    def invalid_response(self) -> InvalidResponseError:
        """Erro para respostas que não correspondem a nenhum formato conhecido."""
        return InvalidResponseError(self)

    # Identificação da entidade

    def entity_name(self) -> str:
        return sniff_entity_name(self.ensure_normalized())

    def entity_kind(self) -> EntityKind:
        return EntityKind.from_tag(self.entity_name())

    # Accessors polimórficos

    def payment_method(self) -> PaymentMethod:
        return decode_payment_method(self.ensure_normalized(), "payment_method")

    # Accessors monomórficos

    def credit_card(self) -> CreditCard:
        return decode_entity(self.ensure_normalized(), CreditCard, "credit_card")

    def paypal_account(self) -> PayPalAccount:
        return decode_entity(self.ensure_normalized(), PayPalAccount, "paypal_account")

    def venmo_account(self) -> VenmoAccount:
        return decode_entity(self.ensure_normalized(), VenmoAccount, "venmo_account")

    def android_pay_card(self) -> AndroidPayCard:
        return decode_entity(self.ensure_normalized(), AndroidPayCard, "android_pay_card")

    def apple_pay_card(self) -> ApplePayCard:
        return decode_entity(self.ensure_normalized(), ApplePayCard, "apple_pay_card")

    def payment_method_nonce(self) -> PaymentMethodNonce:
        return decode_entity(self.ensure_normalized(), PaymentMethodNonce, "payment_method_nonce")

    def transaction(self) -> Transaction:
        return decode_entity(self.ensure_normalized(), Transaction, "transaction")

    def transaction_line_items(self) -> list[TransactionLineItem]:
        return decode_list(
            self.ensure_normalized(), TransactionLineItemList, "transaction_line_items"
        )

    def merchant_account(self) -> MerchantAccount:
        return decode_entity(self.ensure_normalized(), MerchantAccount, "merchant_account")

    def customer(self) -> Customer:
        return decode_entity(self.ensure_normalized(), Customer, "customer")

    def subscription(self) -> Subscription:
        return decode_entity(self.ensure_normalized(), Subscription, "subscription")

    def settlement_batch_summary(self) -> SettlementBatchSummary:
        return decode_entity(
            self.ensure_normalized(), SettlementBatchSummary, "settlement_batch_summary"
        )

    def address(self) -> Address:
        return decode_entity(self.ensure_normalized(), Address, "address")

    def add_ons(self) -> list[AddOn]:
        return decode_list(self.ensure_normalized(), AddOnList, "add_ons")

    def discounts(self) -> list[Discount]:
        return decode_list(self.ensure_normalized(), DiscountList, "discounts")

    def dispute(self) -> Dispute:
        return decode_entity(self.ensure_normalized(), Dispute, "dispute")

    def dispute_evidence(self) -> DisputeEvidence:
        return decode_entity(self.ensure_normalized(), DisputeEvidence, "dispute_evidence")
