"""Unit tests for the endpoint descriptor table."""

import pytest

from toss_payments.discriminator import ResultShape
from toss_payments.endpoints import ENDPOINTS, Credential, Operation, get_endpoint


class TestEndpointTable:
    def test_every_operation_is_described(self):
        assert set(ENDPOINTS) == set(Operation)

    @pytest.mark.parametrize(
        "operation,method,path_template",
        [
            (Operation.CREATE_PAYMENT, "POST", "/v1/payments"),
            (Operation.CONFIRM_PAYMENT, "POST", "/v1/payments/confirm"),
            (Operation.FIND_PAYMENT, "GET", "/v1/payments/{payment_key}"),
            (Operation.FIND_PAYMENT_BY_ORDER_ID, "GET", "/v1/payments/orders/{order_id}"),
            (Operation.CANCEL_PAYMENT, "POST", "/v1/payments/{payment_key}/cancel"),
            (Operation.KEY_IN_PAYMENT, "POST", "/v1/payments/key-in"),
            (Operation.CREATE_VIRTUAL_ACCOUNT, "POST", "/v1/virtual-accounts"),
            (Operation.AUTHORIZE_BILLING_CARD, "POST", "/v1/billing/authorizations/card"),
            (Operation.ISSUE_BILLING_KEY, "POST", "/v1/billing/authorizations/issue"),
            (Operation.EXECUTE_BILLING, "POST", "/v1/billing/{billing_key}"),
        ],
    )
    def test_verb_and_path(self, operation, method, path_template):
        endpoint = get_endpoint(operation)

        assert endpoint.method == method
        assert endpoint.path_template == path_template

    def test_billing_key_operations_return_billing_shape(self):
        assert get_endpoint(Operation.AUTHORIZE_BILLING_CARD).shape is ResultShape.BILLING
        assert get_endpoint(Operation.ISSUE_BILLING_KEY).shape is ResultShape.BILLING

    def test_billing_charge_returns_payment_shape(self):
        assert get_endpoint(Operation.EXECUTE_BILLING).shape is ResultShape.PAYMENT

    def test_billing_operations_use_billing_credential(self):
        billing_ops = {
            Operation.AUTHORIZE_BILLING_CARD,
            Operation.ISSUE_BILLING_KEY,
            Operation.EXECUTE_BILLING,
        }

        for operation, endpoint in ENDPOINTS.items():
            expected = Credential.BILLING if operation in billing_ops else Credential.STANDARD
            assert endpoint.credential is expected, operation


class TestBuildPath:
    def test_no_params(self):
        assert get_endpoint(Operation.CONFIRM_PAYMENT).build_path() == "/v1/payments/confirm"

    def test_path_params(self):
        endpoint = get_endpoint(Operation.CANCEL_PAYMENT)

        assert endpoint.path_params == ("payment_key",)
        assert endpoint.build_path(payment_key="pk_123") == "/v1/payments/pk_123/cancel"

    def test_params_are_escaped(self):
        endpoint = get_endpoint(Operation.FIND_PAYMENT_BY_ORDER_ID)

        assert endpoint.build_path(order_id="a/b c") == "/v1/payments/orders/a%2Fb%20c"

    def test_missing_param_raises(self):
        with pytest.raises(ValueError, match="billing_key"):
            get_endpoint(Operation.EXECUTE_BILLING).build_path()

    def test_empty_param_raises(self):
        with pytest.raises(ValueError, match="payment_key"):
            get_endpoint(Operation.FIND_PAYMENT).build_path(payment_key="")
