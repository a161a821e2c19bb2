"""Error/success discrimination for Toss Payments responses."""

from collections.abc import Mapping
from enum import Enum
from typing import Any

from toss_payments.models.results import BillingResult, ErrorResult, PaymentResult
from toss_payments.normalizer import to_billing_result, to_error_result, to_payment_result


class ResponseKind(str, Enum):
    ERROR = "ERROR"
    SUCCESS = "SUCCESS"


class ResultShape(str, Enum):
    """Which success object an endpoint returns."""

    PAYMENT = "PAYMENT"
    BILLING = "BILLING"


def classify(raw: Any) -> ResponseKind:
    """
    Decide whether a decoded response body is a provider error.

    A JSON object with a top-level ``code`` key is an error, whatever the HTTP
    status was. Only the top-level keys are inspected: a success payload may
    contain nested ``code`` fields (e.g. ``failure.code``).
    """
    if isinstance(raw, Mapping) and "code" in raw:
        return ResponseKind.ERROR
    return ResponseKind.SUCCESS


def normalize(raw: Any, shape: ResultShape) -> PaymentResult | BillingResult | ErrorResult:
    """
    Classify a response body and normalize it into the matching result.

    Args:
        raw: Decoded JSON body
        shape: Success object the endpoint is documented to return

    Returns:
        ErrorResult for error bodies, otherwise PaymentResult or BillingResult

    Raises:
        MalformedResponse: A success body violates the provider contract
    """
    if classify(raw) is ResponseKind.ERROR:
        return to_error_result(raw)
    if shape is ResultShape.BILLING:
        return to_billing_result(raw)
    return to_payment_result(raw)
