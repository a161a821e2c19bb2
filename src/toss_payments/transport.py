"""HTTP transport for the Toss Payments API."""

from collections.abc import Mapping
from typing import Any, Protocol

import httpx

from toss_payments.logging_config import get_logger
from toss_payments.models.exceptions import TransportError

logger = get_logger(__name__)


class Transport(Protocol):
    """Sends one request and returns the HTTP status with the decoded JSON body."""

    async def send(
        self,
        method: str,
        path: str,
        headers: Mapping[str, str],
        body: Any = None,
    ) -> tuple[int, Any]: ...

    async def close(self) -> None: ...


class HttpxTransport:
    """
    Transport backed by an ``httpx.AsyncClient`` connection pool.

    The transport does not interpret status codes: the provider returns error
    bodies with 4xx and 5xx statuses alike, and the caller decides what they
    mean. It does not retry.
    """

    def __init__(
        self,
        base_url: str,
        timeout_seconds: float = 10.0,
        http_client: httpx.AsyncClient | None = None,
    ):
        """
        Initialize the transport.

        Args:
            base_url: API base URL (e.g., "https://api.tosspayments.com")
            timeout_seconds: Request timeout in seconds (default: 10.0)
            http_client: Pre-built client to use instead of creating one
        """
        self.base_url = base_url.rstrip("/")
        self.timeout_seconds = timeout_seconds
        self.http_client = http_client or httpx.AsyncClient(timeout=timeout_seconds)

    async def close(self) -> None:
        """Close the HTTP client connection pool."""
        await self.http_client.aclose()

    async def send(
        self,
        method: str,
        path: str,
        headers: Mapping[str, str],
        body: Any = None,
    ) -> tuple[int, Any]:
        """
        Send a request and decode the JSON response.

        Args:
            method: HTTP verb
            path: Absolute path starting with "/v1/"
            headers: Request headers, including Authorization
            body: JSON-serializable request body, or None for no body

        Returns:
            Tuple of (HTTP status code, decoded JSON body)

        Raises:
            TransportError: Timeout, connection failure, or non-JSON body
        """
        url = f"{self.base_url}{path}"
        try:
            response = await self.http_client.request(
                method,
                url,
                headers=dict(headers),
                json=body,
            )
        except httpx.TimeoutException as e:
            logger.error("toss_transport_timeout", method=method, path=path, error=str(e))
            raise TransportError(f"Toss Payments timeout: {method} {path}") from e
        except httpx.RequestError as e:
            # Network errors, connection errors, etc.
            logger.error("toss_transport_request_error", method=method, path=path, error=str(e))
            raise TransportError(f"Toss Payments request error: {e}") from e

        try:
            payload = response.json()
        except ValueError as e:
            logger.error(
                "toss_transport_invalid_json",
                method=method,
                path=path,
                status_code=response.status_code,
            )
            raise TransportError(
                f"Toss Payments returned a non-JSON body (status: {response.status_code})",
                status_code=response.status_code,
            ) from e

        return response.status_code, payload

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()
