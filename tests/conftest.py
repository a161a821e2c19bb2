"""Pytest configuration and shared fixtures for all tests.

This module provides shared test fixtures including:
- Raw provider payloads (payment, billing, error)
- Client configuration
- A mocked transport
"""

import sys
from pathlib import Path
from unittest.mock import AsyncMock

import pytest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from toss_payments.config import TossPaymentsConfig
from toss_payments.transport import Transport


@pytest.fixture
def card_payment_payload() -> dict:
    """Approved card payment as returned by /v1/payments/confirm."""
    return {
        "paymentKey": "abc",
        "orderId": "o1",
        "orderName": "n",
        "mId": "m1",
        "currency": "KRW",
        "method": "카드",
        "totalAmount": 1000,
        "balanceAmount": 1000,
        "status": "DONE",
        "requestedAt": "2023-01-01T00:00:00+09:00",
        "approvedAt": "2023-01-01T00:00:05+09:00",
        "card": {"issuerCode": "51", "amount": 1000},
    }


@pytest.fixture
def full_payment_payload() -> dict:
    """Payment with every optional nested object present."""
    return {
        "version": "2022-11-16",
        "paymentKey": "5zJ4xY7m0kODnyRpQWGrN2xqGlNvLrKwv1M9ENjbeoPaZdL6",
        "type": "NORMAL",
        "orderId": "order-20230101-0001",
        "orderName": "토스 티셔츠 외 2건",
        "mId": "tosspayments",
        "currency": "KRW",
        "country": "KR",
        "method": "카드",
        "totalAmount": 15000,
        "balanceAmount": 10000,
        "status": "PARTIAL_CANCELED",
        "requestedAt": "2023-01-01T10:00:00+09:00",
        "approvedAt": "2023-01-01T10:00:30+09:00",
        "useEscrow": False,
        "lastTransactionKey": "9C62B18EEF0DE3EB7F4422EB6D14BC6E",
        "suppliedAmount": 9091,
        "vat": 909,
        "cultureExpense": False,
        "taxFreeAmount": 0,
        "taxExemptionAmount": 0,
        "isPartialCancelable": True,
        "secret": "ps_secret",
        "cancels": [
            {
                "cancelAmount": 5000,
                "cancelReason": "고객 변심",
                "taxFreeAmount": 0,
                "taxExemptionAmount": 0,
                "refundableAmount": 10000,
                "easyPayDiscountAmount": 0,
                "canceledAt": "2023-01-02T09:00:00+09:00",
                "transactionKey": "tx-cancel-1",
                "receiptKey": "rk-cancel-1",
                "cancelStatus": "DONE",
            }
        ],
        "card": {
            "amount": 15000,
            "issuerCode": "11",
            "acquirerCode": "11",
            "number": "43301234****123*",
            "installmentPlanMonths": 0,
            "approveNo": "00000000",
            "useCardPoint": False,
            "cardType": "신용",
            "ownerType": "개인",
            "acquireStatus": "READY",
            "isInterestFree": False,
            "interestPayer": "BUYER",
        },
        "virtualAccount": {
            "accountType": "일반",
            "accountNumber": "X6505636518308",
            "bankCode": "20",
            "customerName": "김토스",
            "dueDate": "2023-01-08T23:59:59+09:00",
            "refundStatus": "NONE",
            "expired": False,
            "settlementStatus": "INCOMPLETED",
            "refundReceiveAccount": {
                "bankCode": "88",
                "accountNumber": "110123456789",
                "holderName": "김토스",
            },
        },
        "mobilePhone": {
            "customerMobilePhone": "01012345678",
            "settlementStatus": "COMPLETED",
            "receiptUrl": "https://dashboard.tosspayments.com/receipt/phone",
        },
        "giftCertificate": {"approveNo": "GC0001", "settlementStatus": "COMPLETED"},
        "transfer": {"bankCode": "92", "settlementStatus": "COMPLETED"},
        "easyPay": {"provider": "토스페이", "amount": 0, "discountAmount": 0},
        "cashReceipt": {
            "type": "소득공제",
            "receiptKey": "rk-cash-1",
            "issueNumber": "213456789",
            "receiptUrl": "https://dashboard.tosspayments.com/receipt/cash",
            "amount": 15000,
            "taxFreeAmount": 0,
        },
        "discount": {"amount": 1000},
        "failure": {"code": "REJECT_CARD_COMPANY", "message": "카드사 거절"},
        "receipt": {"url": "https://dashboard.tosspayments.com/receipt/card"},
        "checkout": {"url": "https://api.tosspayments.com/v1/payments/checkout"},
    }


@pytest.fixture
def billing_payload() -> dict:
    """Billing key issued by /v1/billing/authorizations/issue."""
    return {
        "mId": "m1",
        "customerKey": "c1",
        "authenticatedAt": "2023-01-01T00:00:00+09:00",
        "method": "카드",
        "billingKey": "bk1",
        "card": {"issuerCode": "11"},
    }


@pytest.fixture
def error_payload() -> dict:
    return {"code": "NOT_FOUND_PAYMENT", "message": "존재하지 않는 결제"}


@pytest.fixture
def config() -> TossPaymentsConfig:
    """Client configuration with distinct standard and billing keys."""
    return TossPaymentsConfig(
        secret_key="test_sk_standard",
        billing_secret_key="test_sk_billing",
        base_url="https://api.tosspayments.test",
        timeout_seconds=5.0,
    )


@pytest.fixture
def mock_transport() -> AsyncMock:
    """Transport whose send() is an AsyncMock; set return_value per test."""
    transport = AsyncMock(spec=Transport)
    transport.send.return_value = (200, {})
    return transport
