"""Normalized result models for Toss Payments responses.

Every operation returns exactly one of PaymentResult, BillingResult or
ErrorResult. The ``kind`` class attribute tags the variant so callers can
branch without isinstance checks. Nested value objects are either ``None``
(absent in the raw payload) or fully constructed.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, ClassVar

from toss_payments.models.enums import (
    AcquireStatus,
    CancelStatus,
    InterestPayer,
    PaymentMethod,
    PaymentStatus,
    PaymentType,
    RefundStatus,
    SettlementStatus,
    UnknownCode,
)


class ResultKind(str, Enum):
    """Tag identifying a result variant."""

    PAYMENT = "PAYMENT"
    BILLING = "BILLING"
    ERROR = "ERROR"


@dataclass(frozen=True)
class Card:
    """Card payment details."""

    amount: int | None
    issuer_code: str | None
    card_name: str | UnknownCode | None
    acquirer_code: str | None
    acquirer_name: str | UnknownCode | None
    number: str | None
    installment_plan_months: int | None
    approve_no: str | None
    use_card_point: bool | None
    card_type: str | None
    owner_type: str | None
    acquire_status: AcquireStatus | UnknownCode | None
    is_interest_free: bool | None
    interest_payer: InterestPayer | UnknownCode | None


@dataclass(frozen=True)
class RefundReceiveAccount:
    """Account that receives refunds for a virtual account payment."""

    bank_code: str | None
    bank_name: str | UnknownCode | None
    account_number: str | None
    holder_name: str | None


@dataclass(frozen=True)
class VirtualAccount:
    """Virtual account (bank deposit) payment details."""

    account_type: str | None
    account_number: str | None
    bank_code: str | None
    bank_name: str | UnknownCode | None
    customer_name: str | None
    due_date: datetime | None
    refund_status: RefundStatus | UnknownCode | None
    expired: bool | None
    settlement_status: SettlementStatus | UnknownCode | None
    refund_receive_account: RefundReceiveAccount | None


@dataclass(frozen=True)
class MobilePhone:
    """Mobile phone billing details."""

    customer_mobile_phone: str | None
    settlement_status: SettlementStatus | UnknownCode | None
    receipt_url: str | None


@dataclass(frozen=True)
class GiftCertificate:
    """Gift certificate payment details."""

    approve_no: str | None
    settlement_status: SettlementStatus | UnknownCode | None


@dataclass(frozen=True)
class Transfer:
    """Bank transfer payment details."""

    bank_code: str | None
    bank_name: str | UnknownCode | None
    settlement_status: SettlementStatus | UnknownCode | None


@dataclass(frozen=True)
class EasyPay:
    """Easy-pay wallet details (e.g. 토스페이, 카카오페이)."""

    provider: str | None
    amount: int | None
    discount_amount: int | None


@dataclass(frozen=True)
class CashReceipt:
    """Cash receipt issued for the payment."""

    type: str | None
    receipt_key: str | None
    issue_number: str | None
    receipt_url: str | None
    amount: int | None
    tax_free_amount: int | None


@dataclass(frozen=True)
class Discount:
    amount: int | None


@dataclass(frozen=True)
class Failure:
    """Why the payment failed (populated for ABORTED/EXPIRED payments)."""

    code: str | None
    message: str | None


@dataclass(frozen=True)
class Receipt:
    url: str | None


@dataclass(frozen=True)
class Checkout:
    url: str | None


@dataclass(frozen=True)
class Cancel:
    """One cancellation or refund applied to a payment."""

    cancel_amount: int | None
    cancel_reason: str | None
    tax_free_amount: int | None
    tax_exemption_amount: int | None
    refundable_amount: int | None
    easy_pay_discount_amount: int | None
    canceled_at: datetime
    transaction_key: str | None
    receipt_key: str | None
    cancel_status: CancelStatus | UnknownCode | None


@dataclass(frozen=True)
class PaymentResult:
    """
    Full normalized state of one payment transaction.

    ``cancels`` is ``None`` when the provider omitted the field and an empty
    tuple when it sent an empty list.
    """

    kind: ClassVar[ResultKind] = ResultKind.PAYMENT

    payment_key: str
    order_id: str
    order_name: str | None
    m_id: str | None
    version: str | None
    last_transaction_key: str | None
    type: PaymentType | UnknownCode | None
    method: PaymentMethod | UnknownCode | None
    currency: str | None
    country: str | None
    status: PaymentStatus | UnknownCode
    total_amount: int | None
    balance_amount: int | None
    supplied_amount: int | None
    vat: int | None
    tax_free_amount: int | None
    tax_exemption_amount: int | None
    requested_at: datetime
    approved_at: datetime | None
    use_escrow: bool | None
    culture_expense: bool | None
    is_partial_cancelable: bool | None
    secret: str | None
    cancels: tuple[Cancel, ...] | None
    card: Card | None
    virtual_account: VirtualAccount | None
    mobile_phone: MobilePhone | None
    gift_certificate: GiftCertificate | None
    transfer: Transfer | None
    easy_pay: EasyPay | None
    cash_receipt: CashReceipt | None
    discount: Discount | None
    failure: Failure | None
    receipt: Receipt | None
    checkout: Checkout | None

    @property
    def is_error(self) -> bool:
        return False

    @property
    def is_approved(self) -> bool:
        return self.approved_at is not None

    def method_detail(self) -> Card | VirtualAccount | MobilePhone | GiftCertificate | Transfer:
        """
        Return the single populated payment-method detail object.

        The provider populates one of card, virtual_account, mobile_phone,
        gift_certificate or transfer according to ``method``. The normalizer
        does not enforce this, so call sites that depend on it use this helper.

        Raises:
            ValueError: If zero or more than one detail object is populated
        """
        populated = [
            detail
            for detail in (
                self.card,
                self.virtual_account,
                self.mobile_phone,
                self.gift_certificate,
                self.transfer,
            )
            if detail is not None
        ]
        if len(populated) != 1:
            names = [type(detail).__name__ for detail in populated]
            raise ValueError(
                f"Expected exactly one payment method detail for payment "
                f"{self.payment_key}, found {len(populated)}: {names}"
            )
        return populated[0]


@dataclass(frozen=True)
class BillingCard:
    """Card registered for recurring billing."""

    issuer_code: str | None
    card_name: str | UnknownCode | None
    acquirer_code: str | None
    acquirer_name: str | UnknownCode | None
    number: str | None
    card_type: str | None
    owner_type: str | None


@dataclass(frozen=True)
class BillingResult:
    """Outcome of a billing-key authorization."""

    kind: ClassVar[ResultKind] = ResultKind.BILLING

    m_id: str | None
    customer_key: str | None
    authenticated_at: datetime
    method: PaymentMethod | UnknownCode | None
    billing_key: str
    card: BillingCard
    card_company: str | None
    card_number: str | None

    @property
    def is_error(self) -> bool:
        return False


@dataclass(frozen=True)
class ErrorResult:
    """
    Provider-signalled failure.

    This is a normal business outcome, NOT an exception. ``data`` is passed
    through as the provider sent it. ``http_status`` is stamped by the client
    when the result came over the wire.
    """

    kind: ClassVar[ResultKind] = ResultKind.ERROR

    code: str | None
    message: str | None = None
    data: Any = None
    http_status: int | None = None

    @property
    def is_error(self) -> bool:
        return True
