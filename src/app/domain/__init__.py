"""Modelos de domínio do gateway de pagamentos.

Entidades são valores puros decodificados do XML de resposta; não possuem
identidade além dos campos decodificados.
"""

from app.domain.address import Address
from app.domain.api_error import ApiErrorResponse, ValidationErrorDetail
from app.domain.customer import Customer
from app.domain.dispute import Dispute, DisputeEvidence, DisputeTransaction
from app.domain.entity import GatewayEntity, GatewayEntityList
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
from app.domain.settlement import SettlementBatchSummary, SettlementRecord
from app.domain.subscription import Subscription
from app.domain.transaction import Transaction, TransactionLineItem, TransactionLineItemList

__all__ = [
    "AddOn",
    "AddOnList",
    "Address",
    "AndroidPayCard",
    "ApiErrorResponse",
    "ApplePayCard",
    "CreditCard",
    "Customer",
    "Discount",
    "DiscountList",
    "Dispute",
    "DisputeEvidence",
    "DisputeTransaction",
    "GatewayEntity",
    "GatewayEntityList",
    "MerchantAccount",
    "PayPalAccount",
    "PaymentMethod",
    "PaymentMethodNonce",
    "SettlementBatchSummary",
    "SettlementRecord",
    "Subscription",
    "Transaction",
    "TransactionLineItem",
    "TransactionLineItemList",
    "VenmoAccount",
]
