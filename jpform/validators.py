# jpform/validators.py
# 郵便番号・電話番号の検証 v2.0
# - すべて「数字だけを取り出した文字列」に対して判定する（生の入力は見ない）
# - 不正な入力でも例外は出さず False
#
# 電話番号の分類（数字のみ）
#   全体      : 0 + 9〜10 桁
#   携帯      : 070/080/090 + 8 桁
#   IP        : 050 + 8 桁
#   フリーダイヤル : 0120 + 6 桁 / 0800 + 7 桁
#   固定      : 0[1-9] + 8 桁（050/070/080/090/0120 を除く）

from __future__ import annotations

import re

from jpform.converters.phone import extract_phone_digits
from jpform.converters.postal import normalize_postal_code

__version__ = "v2.0"

_PHONE_SHAPE_RE = re.compile(r"0[0-9]{9,10}")
_MOBILE_RE = re.compile(r"0[789]0[0-9]{8}")
_IP_RE = re.compile(r"050[0-9]{8}")
_FREE_DIAL_0120_RE = re.compile(r"0120[0-9]{6}")
_FREE_DIAL_0800_RE = re.compile(r"0800[0-9]{7}")
_LANDLINE_RE = re.compile(r"0[1-9][0-9]{8}")

# 固定電話から除外するプレフィックス
_NON_LANDLINE_PREFIX_RE = re.compile(r"0[5789]0")
_FREE_DIAL_PREFIX = "0120"

_POSTAL_RE = re.compile(r"[0-9]{7}")


# ---------------------------------------------------------------------
# 郵便番号
# ---------------------------------------------------------------------
def is_valid_postal_code(value: str) -> bool:
    """'123-4567' / '１２３４５６７' / '〒1234567' → True、'12345' → False"""
    return _POSTAL_RE.fullmatch(normalize_postal_code(value)) is not None

# ---------------------------------------------------------------------
# 電話番号
# ---------------------------------------------------------------------
def is_valid_phone(value: str) -> bool:
    """
    日本の電話番号として妥当か。
      '03-1234-5678'  → True
      '090-1234-5678' → True
      '0120-123-456'  → True
      '1234567890'    → False（0 始まりでない）
    """
    digits = extract_phone_digits(value)
    if not _PHONE_SHAPE_RE.fullmatch(digits):
        return False
    if _MOBILE_RE.fullmatch(digits) or _IP_RE.fullmatch(digits):
        return True
    if _FREE_DIAL_0120_RE.fullmatch(digits) or _FREE_DIAL_0800_RE.fullmatch(digits):
        return True
    return _LANDLINE_RE.fullmatch(digits) is not None


def is_mobile_phone(value: str) -> bool:
    return _MOBILE_RE.fullmatch(extract_phone_digits(value)) is not None


def is_ip_phone(value: str) -> bool:
    return _IP_RE.fullmatch(extract_phone_digits(value)) is not None


def is_free_dial_phone(value: str) -> bool:
    digits = extract_phone_digits(value)
    return bool(_FREE_DIAL_0120_RE.fullmatch(digits) or _FREE_DIAL_0800_RE.fullmatch(digits))


def is_landline_phone(value: str) -> bool:
    digits = extract_phone_digits(value)
    if not _LANDLINE_RE.fullmatch(digits):
        return False
    if _NON_LANDLINE_PREFIX_RE.match(digits):
        return False
    return not digits.startswith(_FREE_DIAL_PREFIX)


__all__ = [
    "__version__",
    "is_valid_postal_code",
    "is_valid_phone",
    "is_mobile_phone",
    "is_ip_phone",
    "is_free_dial_phone",
    "is_landline_phone",
]
