"""Domain models for the Toss Payments client."""

from toss_payments.models.enums import (
    AcquireStatus,
    CancelStatus,
    CodeEnum,
    InterestPayer,
    PaymentMethod,
    PaymentStatus,
    PaymentType,
    RefundStatus,
    SettlementStatus,
    UnknownCode,
)
from toss_payments.models.exceptions import (
    ConfigurationError,
    MalformedResponse,
    TossPaymentsError,
    TransportError,
)
from toss_payments.models.results import (
    BillingCard,
    BillingResult,
    Cancel,
    Card,
    CashReceipt,
    Checkout,
    Discount,
    EasyPay,
    ErrorResult,
    Failure,
    GiftCertificate,
    MobilePhone,
    PaymentResult,
    Receipt,
    RefundReceiveAccount,
    ResultKind,
    Transfer,
    VirtualAccount,
)

__all__ = [
    "AcquireStatus",
    "BillingCard",
    "BillingResult",
    "Cancel",
    "CancelStatus",
    "Card",
    "CashReceipt",
    "Checkout",
    "CodeEnum",
    "ConfigurationError",
    "Discount",
    "EasyPay",
    "ErrorResult",
    "Failure",
    "GiftCertificate",
    "InterestPayer",
    "MalformedResponse",
    "MobilePhone",
    "PaymentMethod",
    "PaymentResult",
    "PaymentStatus",
    "PaymentType",
    "Receipt",
    "RefundReceiveAccount",
    "RefundStatus",
    "ResultKind",
    "SettlementStatus",
    "TossPaymentsError",
    "Transfer",
    "TransportError",
    "UnknownCode",
    "VirtualAccount",
]
