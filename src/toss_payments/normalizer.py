"""
Normalization of raw Toss Payments JSON into result models.

The provider's payloads use camelCase keys, nest many optional sub-objects,
encode statuses as upper-case codes and send timestamps as ISO-8601 strings.
The functions here map one decoded JSON object onto one result model:

- to_error_result: error body ({"code": ..., "message": ...}), never fails
- to_payment_result: Payment object returned by the payment endpoints
- to_billing_result: Billing object returned by billing-key issuance

Contract violations (missing required field, unparseable timestamp, wrong
JSON type) raise MalformedResponse naming the offending field path. Unknown
enum and institution codes are NOT violations; they normalize to UnknownCode.

All functions are pure and hold no state.
"""

from collections.abc import Callable, Mapping
from datetime import datetime
from typing import Any, TypeVar

from toss_payments.codes import resolve_bank_name, resolve_card_issuer_name
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
from toss_payments.models.exceptions import MalformedResponse
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
    Transfer,
    VirtualAccount,
)

T = TypeVar("T")


class _Fields:
    """
    Typed accessors over one raw JSON object.

    Each accessor treats a missing key and an explicit ``null`` alike and
    reports violations with the dotted path from the response root.
    """

    def __init__(self, raw: Mapping[str, Any], path: str = "") -> None:
        self.raw = raw
        self.path = path

    def path_of(self, key: str) -> str:
        return f"{self.path}.{key}" if self.path else key

    def _require(self, key: str) -> Any:
        value = self.raw.get(key)
        if value is None:
            raise MalformedResponse(self.path_of(key), value, "required field is missing")
        return value

    def string(self, key: str) -> str | None:
        value = self.raw.get(key)
        if value is None or isinstance(value, str):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        raise MalformedResponse(self.path_of(key), value, "expected a string")

    def required_string(self, key: str) -> str:
        self._require(key)
        return self.string(key)  # type: ignore[return-value]

    def integer(self, key: str) -> int | None:
        value = self.raw.get(key)
        if value is None:
            return None
        if isinstance(value, bool):
            raise MalformedResponse(self.path_of(key), value, "expected an integer amount")
        if isinstance(value, int):
            return value
        if isinstance(value, float) and value.is_integer():
            return int(value)
        raise MalformedResponse(self.path_of(key), value, "expected an integer amount")

    def boolean(self, key: str) -> bool | None:
        value = self.raw.get(key)
        if value is None or isinstance(value, bool):
            return value
        raise MalformedResponse(self.path_of(key), value, "expected a boolean")

    def timestamp(self, key: str) -> datetime | None:
        value = self.raw.get(key)
        if value is None:
            return None
        if not isinstance(value, str):
            raise MalformedResponse(self.path_of(key), value, "expected an ISO-8601 string")
        try:
            return datetime.fromisoformat(value)
        except ValueError as e:
            raise MalformedResponse(self.path_of(key), value, "unparseable timestamp") from e

    def required_timestamp(self, key: str) -> datetime:
        self._require(key)
        return self.timestamp(key)  # type: ignore[return-value]

    def code(self, key: str, vocabulary: type[CodeEnum]) -> CodeEnum | UnknownCode | None:
        value = self.raw.get(key)
        if value is None:
            return None
        return vocabulary.parse(value)

    def required_code(self, key: str, vocabulary: type[CodeEnum]) -> CodeEnum | UnknownCode:
        return vocabulary.parse(self._require(key))

    def nested(self, key: str, build: Callable[["_Fields"], T]) -> T | None:
        value = self.raw.get(key)
        if value is None:
            return None
        if not isinstance(value, Mapping):
            raise MalformedResponse(self.path_of(key), value, "expected an object")
        return build(_Fields(value, self.path_of(key)))

    def required_nested(self, key: str, build: Callable[["_Fields"], T]) -> T:
        self._require(key)
        return self.nested(key, build)  # type: ignore[return-value]

    def sequence(self, key: str, build: Callable[["_Fields"], T]) -> tuple[T, ...] | None:
        value = self.raw.get(key)
        if value is None:
            return None
        if not isinstance(value, list):
            raise MalformedResponse(self.path_of(key), value, "expected a list")

        items = []
        for index, item in enumerate(value):
            item_path = f"{self.path_of(key)}[{index}]"
            if not isinstance(item, Mapping):
                raise MalformedResponse(item_path, item, "expected an object")
            items.append(build(_Fields(item, item_path)))
        return tuple(items)


def _root(raw: Any) -> _Fields:
    if not isinstance(raw, Mapping):
        raise MalformedResponse("<root>", raw, "expected a JSON object")
    return _Fields(raw)


def _bank_name(code: str | None) -> str | UnknownCode | None:
    # "" is a real code, so only None means absent
    return None if code is None else resolve_bank_name(code)


def _card_name(code: str | None) -> str | UnknownCode | None:
    return None if code is None else resolve_card_issuer_name(code)


# Nested value objects


def _card(f: _Fields) -> Card:
    issuer_code = f.string("issuerCode")
    acquirer_code = f.string("acquirerCode")
    return Card(
        amount=f.integer("amount"),
        issuer_code=issuer_code,
        card_name=_card_name(issuer_code),
        acquirer_code=acquirer_code,
        acquirer_name=_card_name(acquirer_code),
        number=f.string("number"),
        installment_plan_months=f.integer("installmentPlanMonths"),
        approve_no=f.string("approveNo"),
        use_card_point=f.boolean("useCardPoint"),
        card_type=f.string("cardType"),
        owner_type=f.string("ownerType"),
        acquire_status=f.code("acquireStatus", AcquireStatus),
        is_interest_free=f.boolean("isInterestFree"),
        interest_payer=f.code("interestPayer", InterestPayer),
    )


def _refund_receive_account(f: _Fields) -> RefundReceiveAccount:
    bank_code = f.string("bankCode")
    return RefundReceiveAccount(
        bank_code=bank_code,
        bank_name=_bank_name(bank_code),
        account_number=f.string("accountNumber"),
        holder_name=f.string("holderName"),
    )


def _virtual_account(f: _Fields) -> VirtualAccount:
    bank_code = f.string("bankCode")
    return VirtualAccount(
        account_type=f.string("accountType"),
        account_number=f.string("accountNumber"),
        bank_code=bank_code,
        bank_name=_bank_name(bank_code),
        customer_name=f.string("customerName"),
        due_date=f.timestamp("dueDate"),
        refund_status=f.code("refundStatus", RefundStatus),
        expired=f.boolean("expired"),
        settlement_status=f.code("settlementStatus", SettlementStatus),
        refund_receive_account=f.nested("refundReceiveAccount", _refund_receive_account),
    )


def _mobile_phone(f: _Fields) -> MobilePhone:
    return MobilePhone(
        customer_mobile_phone=f.string("customerMobilePhone"),
        settlement_status=f.code("settlementStatus", SettlementStatus),
        receipt_url=f.string("receiptUrl"),
    )


def _gift_certificate(f: _Fields) -> GiftCertificate:
    return GiftCertificate(
        approve_no=f.string("approveNo"),
        settlement_status=f.code("settlementStatus", SettlementStatus),
    )


def _transfer(f: _Fields) -> Transfer:
    bank_code = f.string("bankCode")
    return Transfer(
        bank_code=bank_code,
        bank_name=_bank_name(bank_code),
        settlement_status=f.code("settlementStatus", SettlementStatus),
    )


def _easy_pay(f: _Fields) -> EasyPay:
    return EasyPay(
        provider=f.string("provider"),
        amount=f.integer("amount"),
        discount_amount=f.integer("discountAmount"),
    )


def _cash_receipt(f: _Fields) -> CashReceipt:
    return CashReceipt(
        type=f.string("type"),
        receipt_key=f.string("receiptKey"),
        issue_number=f.string("issueNumber"),
        receipt_url=f.string("receiptUrl"),
        amount=f.integer("amount"),
        tax_free_amount=f.integer("taxFreeAmount"),
    )


def _discount(f: _Fields) -> Discount:
    return Discount(amount=f.integer("amount"))


def _failure(f: _Fields) -> Failure:
    return Failure(code=f.string("code"), message=f.string("message"))


def _receipt(f: _Fields) -> Receipt:
    return Receipt(url=f.string("url"))


def _checkout(f: _Fields) -> Checkout:
    return Checkout(url=f.string("url"))


def _cancel(f: _Fields) -> Cancel:
    return Cancel(
        cancel_amount=f.integer("cancelAmount"),
        cancel_reason=f.string("cancelReason"),
        tax_free_amount=f.integer("taxFreeAmount"),
        tax_exemption_amount=f.integer("taxExemptionAmount"),
        refundable_amount=f.integer("refundableAmount"),
        easy_pay_discount_amount=f.integer("easyPayDiscountAmount"),
        canceled_at=f.required_timestamp("canceledAt"),
        transaction_key=f.string("transactionKey"),
        receipt_key=f.string("receiptKey"),
        cancel_status=f.code("cancelStatus", CancelStatus),
    )


def _billing_card(f: _Fields) -> BillingCard:
    issuer_code = f.string("issuerCode")
    acquirer_code = f.string("acquirerCode")
    return BillingCard(
        issuer_code=issuer_code,
        card_name=_card_name(issuer_code),
        acquirer_code=acquirer_code,
        acquirer_name=_card_name(acquirer_code),
        number=f.string("number"),
        card_type=f.string("cardType"),
        owner_type=f.string("ownerType"),
    )


# Top-level results


def to_error_result(raw: Mapping[str, Any]) -> ErrorResult:
    """
    Build an ErrorResult from a provider error body.

    Never raises: a missing code or message becomes None and ``data`` is passed
    through untouched.
    """
    code = raw.get("code")
    message = raw.get("message")
    return ErrorResult(
        code=code if code is None or isinstance(code, str) else str(code),
        message=message if message is None or isinstance(message, str) else str(message),
        data=raw.get("data"),
    )


def to_payment_result(raw: Any) -> PaymentResult:
    """
    Build a PaymentResult from a Payment object.

    Args:
        raw: Decoded JSON object of a successful payment response

    Returns:
        PaymentResult with every nested object present in ``raw`` populated
        and every other nested object set to None

    Raises:
        MalformedResponse: paymentKey, orderId, status or requestedAt is
            missing, or any field has a value of the wrong type
    """
    f = _root(raw)
    return PaymentResult(
        payment_key=f.required_string("paymentKey"),
        order_id=f.required_string("orderId"),
        order_name=f.string("orderName"),
        m_id=f.string("mId"),
        version=f.string("version"),
        last_transaction_key=f.string("lastTransactionKey"),
        type=f.code("type", PaymentType),
        method=f.code("method", PaymentMethod),
        currency=f.string("currency"),
        country=f.string("country"),
        status=f.required_code("status", PaymentStatus),
        total_amount=f.integer("totalAmount"),
        balance_amount=f.integer("balanceAmount"),
        supplied_amount=f.integer("suppliedAmount"),
        vat=f.integer("vat"),
        tax_free_amount=f.integer("taxFreeAmount"),
        tax_exemption_amount=f.integer("taxExemptionAmount"),
        requested_at=f.required_timestamp("requestedAt"),
        approved_at=f.timestamp("approvedAt"),
        use_escrow=f.boolean("useEscrow"),
        culture_expense=f.boolean("cultureExpense"),
        is_partial_cancelable=f.boolean("isPartialCancelable"),
        secret=f.string("secret"),
        cancels=f.sequence("cancels", _cancel),
        card=f.nested("card", _card),
        virtual_account=f.nested("virtualAccount", _virtual_account),
        mobile_phone=f.nested("mobilePhone", _mobile_phone),
        gift_certificate=f.nested("giftCertificate", _gift_certificate),
        transfer=f.nested("transfer", _transfer),
        easy_pay=f.nested("easyPay", _easy_pay),
        cash_receipt=f.nested("cashReceipt", _cash_receipt),
        discount=f.nested("discount", _discount),
        failure=f.nested("failure", _failure),
        receipt=f.nested("receipt", _receipt),
        checkout=f.nested("checkout", _checkout),
    )


def to_billing_result(raw: Any) -> BillingResult:
    """
    Build a BillingResult from a Billing object.

    Raises:
        MalformedResponse: authenticatedAt, billingKey or card is missing,
            or any field has a value of the wrong type
    """
    f = _root(raw)
    return BillingResult(
        m_id=f.string("mId"),
        customer_key=f.string("customerKey"),
        authenticated_at=f.required_timestamp("authenticatedAt"),
        method=f.code("method", PaymentMethod),
        billing_key=f.required_string("billingKey"),
        card=f.required_nested("card", _billing_card),
        card_company=f.string("cardCompany"),
        card_number=f.string("cardNumber"),
    )
