"""
Toss Payments API client.

Builds authenticated requests for the payment lifecycle and normalizes the
provider's JSON responses into typed results:

- client.TossPaymentsClient: one async method per operation
- endpoints: verb, path and response shape of each operation
- discriminator: error/success classification of a response body
- normalizer: raw JSON to PaymentResult / BillingResult / ErrorResult
- codes: bank and card issuer code tables
"""

from toss_payments.client import TossPaymentsClient, basic_auth_header
from toss_payments.codes import resolve_bank_name, resolve_card_issuer_name
from toss_payments.config import Settings, TossPaymentsConfig, get_settings
from toss_payments.discriminator import ResponseKind, ResultShape, classify, normalize
from toss_payments.endpoints import ENDPOINTS, Credential, Endpoint, Operation
from toss_payments.models import (
    BillingResult,
    ConfigurationError,
    ErrorResult,
    MalformedResponse,
    PaymentResult,
    ResultKind,
    TossPaymentsError,
    TransportError,
    UnknownCode,
)
from toss_payments.normalizer import to_billing_result, to_error_result, to_payment_result
from toss_payments.transport import HttpxTransport, Transport

__all__ = [
    "ENDPOINTS",
    "BillingResult",
    "ConfigurationError",
    "Credential",
    "Endpoint",
    "ErrorResult",
    "HttpxTransport",
    "MalformedResponse",
    "Operation",
    "PaymentResult",
    "ResponseKind",
    "ResultKind",
    "ResultShape",
    "Settings",
    "TossPaymentsClient",
    "TossPaymentsConfig",
    "TossPaymentsError",
    "Transport",
    "TransportError",
    "UnknownCode",
    "basic_auth_header",
    "classify",
    "get_settings",
    "normalize",
    "resolve_bank_name",
    "resolve_card_issuer_name",
    "to_billing_result",
    "to_error_result",
    "to_payment_result",
]
