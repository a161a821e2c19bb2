"""Unit tests for bank and card issuer code tables."""

from toss_payments.codes import (
    BANK_NAMES,
    CARD_ISSUER_NAMES,
    resolve_bank_name,
    resolve_card_issuer_name,
)
from toss_payments.models import UnknownCode


class TestBankCodes:
    def test_known_bank_code(self):
        assert resolve_bank_name("88") == "신한은행"
        assert resolve_bank_name("92") == "토스뱅크"

    def test_securities_code(self):
        assert resolve_bank_name("S3") == "삼성증권"

    def test_empty_code_is_a_distinct_key(self):
        """The empty code names the wallet pseudo-bank, not 'no data'."""
        assert "" in BANK_NAMES
        name = resolve_bank_name("")
        assert name == "토스머니"
        assert not isinstance(name, UnknownCode)

    def test_unknown_code_returns_marker(self):
        result = resolve_bank_name("ZZ")

        assert isinstance(result, UnknownCode)
        assert result.raw == "ZZ"
        assert not result

    def test_unknown_code_is_idempotent(self):
        assert resolve_bank_name("ZZ") == resolve_bank_name("ZZ")
        assert resolve_bank_name("ZZ") != resolve_bank_name("YY")

    def test_table_size(self):
        assert len(BANK_NAMES) >= 50


class TestCardIssuerCodes:
    def test_samsung_card(self):
        assert resolve_card_issuer_name("51") == "삼성카드"

    def test_kb_card(self):
        assert resolve_card_issuer_name("11") == "KB국민카드"

    def test_international_brand(self):
        assert resolve_card_issuer_name("4V") == "VISA"

    def test_unknown_issuer(self):
        result = resolve_card_issuer_name("99")

        assert result == UnknownCode("99")

    def test_empty_issuer_code_is_unknown(self):
        assert resolve_card_issuer_name("") == UnknownCode("")

    def test_table_size(self):
        assert len(CARD_ISSUER_NAMES) >= 30
