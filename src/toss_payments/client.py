"""Toss Payments API client."""

import base64
import dataclasses
from collections.abc import Mapping
from typing import Any

from toss_payments.config import TossPaymentsConfig, get_settings
from toss_payments.discriminator import normalize
from toss_payments.endpoints import Credential, Endpoint, Operation, get_endpoint
from toss_payments.logging_config import get_logger
from toss_payments.models.exceptions import ConfigurationError
from toss_payments.models.results import BillingResult, ErrorResult, PaymentResult
from toss_payments.transport import HttpxTransport, Transport

logger = get_logger(__name__)


def basic_auth_header(secret_key: str) -> str:
    """Build the Authorization header value for a secret key."""
    token = base64.b64encode(f"{secret_key}:".encode()).decode("ascii")
    return f"Basic {token}"


class TossPaymentsClient:
    """
    Client for the Toss Payments REST API.

    Every operation returns a tagged result: PaymentResult or BillingResult on
    success, ErrorResult when the provider answers with an error body. Provider
    errors are NOT exceptions; branch on ``result.is_error`` or ``result.kind``.

    Raises (from every operation):
        MalformedResponse: The provider sent a success body that breaks the
            documented contract. Treat as a fatal integration error.
        TransportError: Timeout, network failure, or non-JSON body.
    """

    def __init__(
        self,
        config: TossPaymentsConfig,
        transport: Transport | None = None,
    ):
        """
        Initialize the client.

        Args:
            config: Credentials and connection settings
            transport: Transport to send requests with (default: HttpxTransport)

        Raises:
            ConfigurationError: If config has no secret key
        """
        if not config.secret_key:
            raise ConfigurationError("Toss Payments secret_key is not configured")

        self.config = config
        self.transport = transport or HttpxTransport(
            base_url=config.base_url,
            timeout_seconds=config.timeout_seconds,
        )

        logger.info(
            "toss_payments_client_initialized",
            base_url=config.base_url,
            timeout_seconds=config.timeout_seconds,
            billing_key_configured=config.billing_secret_key is not None,
        )

    @classmethod
    def from_settings(cls, transport: Transport | None = None) -> "TossPaymentsClient":
        """Build a client from environment settings."""
        return cls(get_settings().toss, transport=transport)

    async def close(self) -> None:
        """Release the transport's connections."""
        await self.transport.close()

    def _headers(self, endpoint: Endpoint, has_body: bool) -> dict[str, str]:
        if endpoint.credential is Credential.BILLING:
            secret_key = self.config.billing_key_or_default()
        else:
            secret_key = self.config.secret_key

        headers = {"Authorization": basic_auth_header(secret_key)}
        if has_body:
            headers["Content-Type"] = "application/json"
        return headers

    async def execute(
        self,
        operation: Operation,
        payload: Mapping[str, Any] | None = None,
        **path_params: str,
    ) -> PaymentResult | BillingResult | ErrorResult:
        """
        Perform one operation from the endpoint table.

        Args:
            operation: Logical operation to perform
            payload: JSON request body (ignored for GET endpoints)
            **path_params: Values for the endpoint's path placeholders

        Returns:
            Normalized result for the endpoint's response shape
        """
        endpoint = get_endpoint(operation)
        path = endpoint.build_path(**path_params)
        body = dict(payload) if payload is not None and endpoint.method != "GET" else None

        logger.info(
            "toss_request",
            operation=operation.value,
            method=endpoint.method,
            path=path,
        )

        status_code, raw = await self.transport.send(
            endpoint.method,
            path,
            self._headers(endpoint, body is not None),
            body,
        )

        result = normalize(raw, endpoint.shape)

        if isinstance(result, ErrorResult):
            result = dataclasses.replace(result, http_status=status_code)
            logger.warning(
                "toss_provider_error",
                operation=operation.value,
                status_code=status_code,
                code=result.code,
                message=result.message,
            )
            return result

        logger.info(
            "toss_response",
            operation=operation.value,
            status_code=status_code,
            kind=result.kind.value,
        )
        return result

    async def create_payment(self, payload: Mapping[str, Any]) -> PaymentResult | ErrorResult:
        """Create a payment (e.g. a card or virtual-account checkout)."""
        return await self.execute(Operation.CREATE_PAYMENT, payload)  # type: ignore[return-value]

    async def confirm_payment(
        self,
        payment_key: str,
        order_id: str,
        amount: int,
        **extra: Any,
    ) -> PaymentResult | ErrorResult:
        """
        Confirm a payment after the customer completes checkout.

        Args:
            payment_key: Key returned to the success URL
            order_id: Merchant order ID
            amount: Amount to approve; must match the requested amount
        """
        payload = {"paymentKey": payment_key, "orderId": order_id, "amount": amount, **extra}
        return await self.execute(Operation.CONFIRM_PAYMENT, payload)  # type: ignore[return-value]

    async def find_payment(self, payment_key: str) -> PaymentResult | ErrorResult:
        return await self.execute(  # type: ignore[return-value]
            Operation.FIND_PAYMENT, payment_key=payment_key
        )

    async def find_payment_by_order_id(self, order_id: str) -> PaymentResult | ErrorResult:
        return await self.execute(  # type: ignore[return-value]
            Operation.FIND_PAYMENT_BY_ORDER_ID, order_id=order_id
        )

    async def cancel_payment(
        self,
        payment_key: str,
        cancel_reason: str,
        cancel_amount: int | None = None,
        **extra: Any,
    ) -> PaymentResult | ErrorResult:
        """
        Cancel a payment fully, or partially when ``cancel_amount`` is given.

        Virtual account refunds also need ``refundReceiveAccount`` in ``extra``.
        """
        payload: dict[str, Any] = {"cancelReason": cancel_reason, **extra}
        if cancel_amount is not None:
            payload["cancelAmount"] = cancel_amount
        return await self.execute(  # type: ignore[return-value]
            Operation.CANCEL_PAYMENT, payload, payment_key=payment_key
        )

    async def key_in_payment(self, payload: Mapping[str, Any]) -> PaymentResult | ErrorResult:
        """Approve a card payment from raw card details (key-in)."""
        return await self.execute(Operation.KEY_IN_PAYMENT, payload)  # type: ignore[return-value]

    async def create_virtual_account(
        self, payload: Mapping[str, Any]
    ) -> PaymentResult | ErrorResult:
        """Issue a virtual account for bank-deposit payment."""
        return await self.execute(  # type: ignore[return-value]
            Operation.CREATE_VIRTUAL_ACCOUNT, payload
        )

    async def authorize_billing_card(
        self, payload: Mapping[str, Any]
    ) -> BillingResult | ErrorResult:
        """Issue a billing key directly from card details."""
        return await self.execute(  # type: ignore[return-value]
            Operation.AUTHORIZE_BILLING_CARD, payload
        )

    async def issue_billing_key(
        self,
        auth_key: str,
        customer_key: str,
    ) -> BillingResult | ErrorResult:
        """Exchange the authKey from the billing auth window for a billing key."""
        payload = {"authKey": auth_key, "customerKey": customer_key}
        return await self.execute(  # type: ignore[return-value]
            Operation.ISSUE_BILLING_KEY, payload
        )

    async def execute_billing(
        self,
        billing_key: str,
        payload: Mapping[str, Any],
    ) -> PaymentResult | ErrorResult:
        """Charge a registered billing key. The provider answers with a Payment."""
        return await self.execute(  # type: ignore[return-value]
            Operation.EXECUTE_BILLING, payload, billing_key=billing_key
        )

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()
