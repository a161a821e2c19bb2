"""
Endpoint descriptor table for the Toss Payments REST API.

Each logical operation is described by its HTTP verb, path template, the
success object it returns and which secret key authenticates it. Billing-key
operations use the separate billing credentials the provider issues.

Reference: https://docs.tosspayments.com/reference
"""

import string
from dataclasses import dataclass
from enum import Enum
from urllib.parse import quote

from toss_payments.discriminator import ResultShape


class Operation(str, Enum):
    CREATE_PAYMENT = "create_payment"
    CONFIRM_PAYMENT = "confirm_payment"
    FIND_PAYMENT = "find_payment"
    FIND_PAYMENT_BY_ORDER_ID = "find_payment_by_order_id"
    CANCEL_PAYMENT = "cancel_payment"
    KEY_IN_PAYMENT = "key_in_payment"
    CREATE_VIRTUAL_ACCOUNT = "create_virtual_account"
    AUTHORIZE_BILLING_CARD = "authorize_billing_card"
    ISSUE_BILLING_KEY = "issue_billing_key"
    EXECUTE_BILLING = "execute_billing"


class Credential(str, Enum):
    """Which configured secret key signs the request."""

    STANDARD = "STANDARD"
    BILLING = "BILLING"


@dataclass(frozen=True)
class Endpoint:
    operation: Operation
    method: str
    path_template: str
    shape: ResultShape
    credential: Credential = Credential.STANDARD

    @property
    def path_params(self) -> tuple[str, ...]:
        """Placeholder names in the path template, in order."""
        return tuple(
            name
            for _, name, _, _ in string.Formatter().parse(self.path_template)
            if name
        )

    def build_path(self, **params: str) -> str:
        """
        Substitute path parameters into the template.

        Values are percent-encoded so order IDs and keys containing reserved
        characters stay within one path segment.

        Raises:
            ValueError: If a placeholder has no value
        """
        missing = [name for name in self.path_params if not params.get(name)]
        if missing:
            raise ValueError(
                f"Missing path parameters for {self.operation.value}: {', '.join(missing)}"
            )
        encoded = {name: quote(str(params[name]), safe="") for name in self.path_params}
        return self.path_template.format(**encoded)


ENDPOINTS: dict[Operation, Endpoint] = {
    endpoint.operation: endpoint
    for endpoint in (
        Endpoint(Operation.CREATE_PAYMENT, "POST", "/v1/payments", ResultShape.PAYMENT),
        Endpoint(Operation.CONFIRM_PAYMENT, "POST", "/v1/payments/confirm", ResultShape.PAYMENT),
        Endpoint(Operation.FIND_PAYMENT, "GET", "/v1/payments/{payment_key}", ResultShape.PAYMENT),
        Endpoint(
            Operation.FIND_PAYMENT_BY_ORDER_ID,
            "GET",
            "/v1/payments/orders/{order_id}",
            ResultShape.PAYMENT,
        ),
        Endpoint(
            Operation.CANCEL_PAYMENT,
            "POST",
            "/v1/payments/{payment_key}/cancel",
            ResultShape.PAYMENT,
        ),
        Endpoint(Operation.KEY_IN_PAYMENT, "POST", "/v1/payments/key-in", ResultShape.PAYMENT),
        Endpoint(
            Operation.CREATE_VIRTUAL_ACCOUNT, "POST", "/v1/virtual-accounts", ResultShape.PAYMENT
        ),
        Endpoint(
            Operation.AUTHORIZE_BILLING_CARD,
            "POST",
            "/v1/billing/authorizations/card",
            ResultShape.BILLING,
            Credential.BILLING,
        ),
        Endpoint(
            Operation.ISSUE_BILLING_KEY,
            "POST",
            "/v1/billing/authorizations/issue",
            ResultShape.BILLING,
            Credential.BILLING,
        ),
        # A billing charge returns a Payment object, not a Billing object
        Endpoint(
            Operation.EXECUTE_BILLING,
            "POST",
            "/v1/billing/{billing_key}",
            ResultShape.PAYMENT,
            Credential.BILLING,
        ),
    )
}


def get_endpoint(operation: Operation) -> Endpoint:
    return ENDPOINTS[operation]
