"""Unit tests for error/success discrimination."""

import pytest

from toss_payments.discriminator import ResponseKind, ResultShape, classify, normalize
from toss_payments.models import (
    BillingResult,
    ErrorResult,
    MalformedResponse,
    PaymentResult,
)


class TestClassify:
    def test_top_level_code_is_error(self, error_payload):
        assert classify(error_payload) is ResponseKind.ERROR

    def test_code_without_message_is_error(self):
        assert classify({"code": "FORBIDDEN_REQUEST"}) is ResponseKind.ERROR

    def test_payment_is_success(self, card_payment_payload):
        assert classify(card_payment_payload) is ResponseKind.SUCCESS

    def test_nested_code_is_not_error(self, card_payment_payload):
        """A failure.code or bank code inside a sub-object is not an error marker."""
        card_payment_payload["failure"] = {"code": "REJECT_CARD_COMPANY", "message": "거절"}
        card_payment_payload["transfer"] = {"code": "88"}

        assert classify(card_payment_payload) is ResponseKind.SUCCESS

    def test_error_wins_over_success_shape(self, card_payment_payload):
        card_payment_payload["code"] = "ALREADY_PROCESSED_PAYMENT"

        assert classify(card_payment_payload) is ResponseKind.ERROR

    def test_non_object_is_success_shaped(self):
        assert classify([{"code": "X"}]) is ResponseKind.SUCCESS


class TestNormalize:
    @pytest.mark.parametrize("shape", list(ResultShape))
    def test_error_body_for_any_shape(self, error_payload, shape):
        result = normalize(error_payload, shape)

        assert isinstance(result, ErrorResult)
        assert result.code == "NOT_FOUND_PAYMENT"

    def test_payment_shape(self, card_payment_payload):
        assert isinstance(normalize(card_payment_payload, ResultShape.PAYMENT), PaymentResult)

    def test_billing_shape(self, billing_payload):
        assert isinstance(normalize(billing_payload, ResultShape.BILLING), BillingResult)

    def test_malformed_success_raises(self, card_payment_payload):
        del card_payment_payload["requestedAt"]

        with pytest.raises(MalformedResponse, match="requestedAt"):
            normalize(card_payment_payload, ResultShape.PAYMENT)
