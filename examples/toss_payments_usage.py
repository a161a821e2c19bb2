"""Example usage of TossPaymentsClient.

This example shows how to confirm a payment, branch on provider errors and
read normalized results. Set TOSS_PAYMENTS_SECRET_KEY to a test secret key
(test_sk_...) before running.
"""

import asyncio
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from toss_payments import (
    MalformedResponse,
    ResultKind,
    ResultShape,
    TossPaymentsClient,
    TransportError,
    UnknownCode,
    get_settings,
    normalize,
)
from toss_payments.logging_config import configure_logging


async def example_confirm_payment():
    """Example: Confirm a payment after the customer returns to the success URL."""
    print("\n=== Example 1: Confirm Payment ===\n")

    async with TossPaymentsClient.from_settings() as client:
        try:
            result = await client.confirm_payment(
                payment_key="5zJ4xY7m0kODnyRpQWGrN2xqGlNvLrKwv1M9ENjbeoPaZdL6",
                order_id="order-20230101-0001",
                amount=15000,
            )
        except TransportError as e:
            print(f"⚠️  Transport failure: {e}")
            return
        except MalformedResponse as e:
            print(f"❌ Provider contract mismatch at {e.field}: {e.raw_value!r}")
            raise

        if result.is_error:
            print(f"❌ Provider error {result.code} (HTTP {result.http_status}): {result.message}")
            return

        print(f"✅ Payment {result.payment_key} is {result.status.value}")
        if result.card is not None:
            print(f"Card: {result.card.card_name}")


def example_offline_normalization():
    """Example: Normalize stored provider responses without a network call."""
    print("\n=== Example 2: Offline Normalization ===\n")

    raw = {
        "paymentKey": "abc",
        "orderId": "o1",
        "method": "가상계좌",
        "status": "WAITING_FOR_DEPOSIT",
        "requestedAt": "2023-01-01T00:00:00+09:00",
        "virtualAccount": {"bankCode": "ZZ", "accountNumber": "X123", "refundStatus": "NONE"},
    }

    result = normalize(raw, ResultShape.PAYMENT)

    if result.kind is ResultKind.PAYMENT:
        account = result.method_detail()
        bank = account.bank_name
        if isinstance(bank, UnknownCode):
            print(f"Unrecognized bank code {bank.raw!r}")
        print(f"Deposit to {account.account_number}, approved: {result.is_approved}")

    error = normalize({"code": "NOT_FOUND_PAYMENT", "message": "존재하지 않는 결제"}, ResultShape.PAYMENT)
    print(f"Error result: {error.code} / {error.message}")


async def main():
    """Run all examples."""
    settings = get_settings()
    configure_logging(settings.log_level, format_as_json=settings.log_json)

    print("=" * 60)
    print("Toss Payments Client Usage Examples")
    print("=" * 60)

    example_offline_normalization()

    # Requires a real test secret key and a payment awaiting confirmation:
    # await example_confirm_payment()


if __name__ == "__main__":
    asyncio.run(main())
