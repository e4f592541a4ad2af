# jpform/converters/phone.py
# 電話番号の正規化 v2.0
# - 半角化のうえ「数字とハイフン」だけ残す（郵便番号と違いハイフンは保持）
# - 地域判定や整形は行わない：分類は jpform.validators 側

from __future__ import annotations

import re

from jpform.utils.textnorm import to_half_width

__version__ = "v2.0"

_PHONE_KEEP_RE = re.compile(r"[^0-9\-]")


def normalize_phone(value: str) -> str:
    """'０９０－１２３４－５６７８' → '090-1234-5678'"""
    if not value:
        return ""
    return _PHONE_KEEP_RE.sub("", to_half_width(value))


def extract_phone_digits(value: str) -> str:
    """数字だけを取り出す。'03-1234-5678' → '0312345678'"""
    return normalize_phone(value).replace("-", "")


__all__ = [
    "__version__",
    "normalize_phone",
    "extract_phone_digits",
]
