# jpform/converters/postal.py
# 郵便番号の正規化・整形 v2.0
# - 正規化は「半角化 → 〒/ハイフン/空白除去 → 数字以外除去」の順
# - 桁数チェックはしない（呼び出し側で 7 桁か確認する）
# - 整形は 7 桁のときだけ NNN-NNNN、それ以外は入力をそのまま返す

from __future__ import annotations

import re

from jpform.utils.textnorm import to_half_width

__version__ = "v2.0"

# 半角化のあとなので '－' は '-' になっているが、念のため残す
_POST_NOISE_RE = re.compile(r"[〒\-－ー\s　]")
_NON_DIGIT_RE = re.compile(r"[^0-9]")


def normalize_postal_code(value: str) -> str:
    """
    郵便番号をハイフンなしの半角数字へ。
      '〒123-4567'        → '1234567'
      '１２３－４５６７'   → '1234567'
    7 桁にならない入力でも、残った数字をそのまま返す。
    """
    if not value:
        return ""
    txt = to_half_width(value)
    txt = _POST_NOISE_RE.sub("", txt)
    return _NON_DIGIT_RE.sub("", txt)


def format_postal_code(value: str) -> str:
    """
    郵便番号を NNN-NNNN に整える。
    正規化して 7 桁にならない場合は、正規化前の入力をそのまま返す（入力途中の表示を壊さない）。
    """
    normalized = normalize_postal_code(value)
    if len(normalized) == 7:
        return f"{normalized[:3]}-{normalized[3:]}"
    return value


__all__ = [
    "__version__",
    "normalize_postal_code",
    "format_postal_code",
]
