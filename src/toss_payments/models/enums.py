"""Closed code vocabularies used in Toss Payments responses.

The provider encodes statuses as upper-case strings ("DONE", "IN_PROGRESS")
and some classifications as Korean labels ("카드"). Each vocabulary here is a
``str`` enum whose ``parse`` classmethod is total: any casing of a known code
maps to the same member, anything else comes back as ``UnknownCode``.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from toss_payments.logging_config import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class UnknownCode:
    """
    A provider code with no entry in a closed vocabulary or code table.

    ``raw`` keeps the text as the provider sent it. Equality and hashing use
    the stripped, case-folded ``key``, so "ON_HOLD" and "on_hold" are the same
    unknown code. Instances are falsy.
    """

    raw: str = field(compare=False)
    key: str = field(init=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "key", self.raw.strip().casefold())

    def __bool__(self) -> bool:
        return False


class CodeEnum(str, Enum):
    """Base for provider code vocabularies."""

    @classmethod
    def parse(cls, raw: Any) -> "CodeEnum | UnknownCode":
        """
        Map a raw provider value onto a member of this vocabulary.

        Matching is case-insensitive against member values, so both "DONE"
        and "done" resolve to ``DONE``. Member names are tried second as a
        convenience for callers (``PaymentMethod.parse("CARD")``); the
        provider itself only sends values.

        Args:
            raw: Raw JSON value from the response

        Returns:
            The matching member, or UnknownCode carrying the raw string
        """
        if isinstance(raw, cls):
            return raw

        text = raw if isinstance(raw, str) else str(raw)
        folded = text.strip().casefold()
        for member in cls:
            if member.value.casefold() == folded:
                return member

        member = cls.__members__.get(text.strip().upper())
        if member is not None:
            return member

        logger.debug("unknown_code", vocabulary=cls.__name__, raw=text)
        return UnknownCode(text)


class PaymentStatus(CodeEnum):
    """Lifecycle status of a payment."""

    READY = "ready"
    IN_PROGRESS = "in_progress"
    WAITING_FOR_DEPOSIT = "waiting_for_deposit"
    DONE = "done"
    CANCELED = "canceled"
    PARTIAL_CANCELED = "partial_canceled"
    ABORTED = "aborted"
    EXPIRED = "expired"


class PaymentType(CodeEnum):
    """How the payment was initiated."""

    NORMAL = "normal"
    BILLING = "billing"
    BRANDPAY = "brandpay"


class PaymentMethod(CodeEnum):
    """Payment method. The provider sends the Korean label."""

    CARD = "카드"
    VIRTUAL_ACCOUNT = "가상계좌"
    EASY_PAY = "간편결제"
    MOBILE_PHONE = "휴대폰"
    TRANSFER = "계좌이체"
    CULTURE_GIFT_CERTIFICATE = "문화상품권"
    BOOK_GIFT_CERTIFICATE = "도서문화상품권"
    GAME_GIFT_CERTIFICATE = "게임문화상품권"


class AcquireStatus(CodeEnum):
    """Card acquisition (purchase) status."""

    READY = "ready"
    REQUESTED = "requested"
    COMPLETED = "completed"
    CANCEL_REQUESTED = "cancel_requested"
    CANCELED = "canceled"


class InterestPayer(CodeEnum):
    """Who bears the installment interest."""

    BUYER = "buyer"
    CARD_COMPANY = "card_company"
    MERCHANT = "merchant"


class RefundStatus(CodeEnum):
    """Refund processing status of a virtual account."""

    NONE = "none"
    PENDING = "pending"
    FAILED = "failed"
    PARTIAL_FAILED = "partial_failed"
    COMPLETED = "completed"


class SettlementStatus(CodeEnum):
    """Settlement status for phone, gift certificate and transfer payments."""

    INCOMPLETED = "incompleted"
    COMPLETED = "completed"


class CancelStatus(CodeEnum):
    """Status of a single cancellation record."""

    DONE = "done"
