"""
Code tables for Toss Payments institution codes.

The provider identifies banks, securities firms and card issuers by short
codes ("88", "S3", "4V"). These tables map them to display names.

SYNC POINT: Keep aligned with the provider's code reference:
https://docs.tosspayments.com/reference/codes
"""

from toss_payments.models.enums import UnknownCode

# Bank and securities codes used by virtual accounts, transfers and
# refund-receive accounts. The empty code is the Toss Money wallet.
BANK_NAMES: dict[str, str] = {
    "": "토스머니",
    "02": "KDB산업은행",
    "03": "IBK기업은행",
    "06": "KB국민은행",
    "07": "Sh수협은행",
    "11": "NH농협은행",
    "12": "단위농협",
    "20": "우리은행",
    "23": "SC제일은행",
    "27": "씨티은행",
    "31": "DGB대구은행",
    "32": "부산은행",
    "34": "광주은행",
    "35": "제주은행",
    "37": "전북은행",
    "39": "경남은행",
    "45": "새마을금고",
    "48": "신협",
    "50": "저축은행중앙회",
    "54": "홍콩상하이은행",
    "64": "산림조합",
    "71": "우체국예금보험",
    "81": "하나은행",
    "88": "신한은행",
    "89": "케이뱅크",
    "90": "카카오뱅크",
    "92": "토스뱅크",
    # Securities
    "S0": "유안타증권",
    "S2": "신한금융투자",
    "S3": "삼성증권",
    "S4": "KB증권",
    "S5": "미래에셋증권",
    "S6": "한국투자증권",
    "S8": "교보증권",
    "S9": "하이투자증권",
    "SA": "현대차증권",
    "SB": "키움증권",
    "SD": "SK증권",
    "SE": "대신증권",
    "SG": "한화투자증권",
    "SH": "하나금융투자",
    "SI": "DB금융투자",
    "SJ": "유진투자증권",
    "SK": "메리츠증권",
    "SL": "NH투자증권",
    "SM": "부국증권",
    "SN": "신영증권",
    "SO": "LIG투자증권",
    "SP": "다올투자증권",
    "SQ": "카카오페이증권",
    "SR": "펀드온라인코리아",
    "ST": "토스증권",
}

# Card issuer and acquirer codes.
CARD_ISSUER_NAMES: dict[str, str] = {
    "11": "KB국민카드",
    "15": "카카오뱅크",
    "21": "하나카드",
    "24": "토스뱅크",
    "30": "KDB산업은행",
    "31": "BC카드",
    "33": "우리BC카드",
    "34": "Sh수협은행",
    "35": "전북은행",
    "36": "씨티카드",
    "37": "우체국예금보험",
    "38": "새마을금고",
    "39": "저축은행중앙회",
    "3A": "케이뱅크",
    "3K": "기업비씨",
    "41": "신한카드",
    "42": "제주은행",
    "46": "광주은행",
    "51": "삼성카드",
    "61": "현대카드",
    "62": "신협",
    "71": "롯데카드",
    "91": "NH농협카드",
    "W1": "우리카드",
    # International brands
    "3C": "유니온페이",
    "4J": "JCB",
    "4M": "마스터카드",
    "4V": "VISA",
    "6D": "다이너스클럽",
    "6I": "디스커버",
    "7A": "아메리칸익스프레스",
}


def resolve_bank_name(code: str) -> str | UnknownCode:
    """
    Resolve a bank or securities code to its display name.

    Args:
        code: Provider bank code (the empty string is a valid code)

    Returns:
        Display name, or UnknownCode when the table has no entry
    """
    name = BANK_NAMES.get(code)
    if name is None:
        return UnknownCode(code)
    return name


def resolve_card_issuer_name(code: str) -> str | UnknownCode:
    """
    Resolve a card issuer or acquirer code to its display name.

    Args:
        code: Provider card company code

    Returns:
        Display name, or UnknownCode when the table has no entry
    """
    name = CARD_ISSUER_NAMES.get(code)
    if name is None:
        return UnknownCode(code)
    return name
