# jpform/utils/textnorm.py
# v2.0
# - 全角/半角の相互変換（数字・英字は 0xFEE0 オフセット、記号は明示テーブル）
# - NFKC は使わない（対象文字を限定した日本語フォーム向けの変換）
# - 変換できない文字はそのまま返す（例外は出さない）

from __future__ import annotations

from typing import Dict

__version__ = "v2.0"

# ---------------------------------------------------------------------
# 変換テーブル
# ---------------------------------------------------------------------
_OFFSET = 0xFEE0

_DIGITS = "0123456789"
_ALPHA = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"

# 記号は 1:1 対応にならない箇所があるので明示する
# （’ ‘ は全角のアポストロフィ/バッククォート扱い、− は全角ハイフンと同じく '-' へ）
_SYMBOLS_ZEN_TO_HAN: Dict[str, str] = {
    "　": " ",
    "！": "!",
    '"': '"',
    "＃": "#",
    "＄": "$",
    "％": "%",
    "＆": "&",
    "’": "'",
    "（": "(",
    "）": ")",
    "＊": "*",
    "＋": "+",
    "，": ",",
    "－": "-",
    "−": "-",
    "．": ".",
    "／": "/",
    "：": ":",
    "；": ";",
    "＜": "<",
    "＝": "=",
    "＞": ">",
    "？": "?",
    "＠": "@",
    "［": "[",
    "＼": "\\",
    "］": "]",
    "＾": "^",
    "＿": "_",
    "‘": "`",
    "｛": "{",
    "｜": "|",
    "｝": "}",
    "～": "~",
}

_SYMBOLS_HAN_TO_ZEN: Dict[str, str] = {
    " ": "　",
    "!": "！",
    '"': '"',
    "#": "＃",
    "$": "＄",
    "%": "％",
    "&": "＆",
    "'": "’",
    "(": "（",
    ")": "）",
    "*": "＊",
    "+": "＋",
    ",": "，",
    "-": "－",
    ".": "．",
    "/": "／",
    ":": "：",
    ";": "；",
    "<": "＜",
    "=": "＝",
    ">": "＞",
    "?": "？",
    "@": "＠",
    "[": "［",
    "\\": "＼",
    "]": "］",
    "^": "＾",
    "_": "＿",
    "`": "‘",
    "{": "｛",
    "|": "｜",
    "}": "｝",
    "~": "～",
}


# 全角→半角（キーは全角のコードポイント）
_HALF_DIGITS = {ord(ch) + _OFFSET: ch for ch in _DIGITS}
_HALF_ALPHA = {ord(ch) + _OFFSET: ch for ch in _ALPHA}
_HALF_ALL = {**_HALF_DIGITS, **_HALF_ALPHA, **str.maketrans(_SYMBOLS_ZEN_TO_HAN)}

# 半角→全角
_FULL_DIGITS = {ord(ch): chr(ord(ch) + _OFFSET) for ch in _DIGITS}
_FULL_ALPHA = {ord(ch): chr(ord(ch) + _OFFSET) for ch in _ALPHA}
_FULL_ALL = {**_FULL_DIGITS, **_FULL_ALPHA, **str.maketrans(_SYMBOLS_HAN_TO_ZEN)}

# ---------------------------------------------------------------------
# 全角 → 半角
# ---------------------------------------------------------------------
def to_half_width(value: str) -> str:
    """全角の数字・英字・記号を半角へ。例: '１２３ＡＢＣ' → '123ABC'"""
    if not value:
        return ""
    return value.translate(_HALF_ALL)


def to_half_width_digits(value: str) -> str:
    """全角数字だけを半角へ（英字・記号は触らない）。"""
    if not value:
        return ""
    return value.translate(_HALF_DIGITS)


def to_half_width_alpha(value: str) -> str:
    """全角英字だけを半角へ（数字・記号は触らない）。"""
    if not value:
        return ""
    return value.translate(_HALF_ALPHA)

# ---------------------------------------------------------------------
# 半角 → 全角
# ---------------------------------------------------------------------
def to_full_width(value: str) -> str:
    """半角の数字・英字・記号を全角へ。例: '123ABC' → '１２３ＡＢＣ'"""
    if not value:
        return ""
    return value.translate(_FULL_ALL)


def to_full_width_digits(value: str) -> str:
    if not value:
        return ""
    return value.translate(_FULL_DIGITS)


def to_full_width_alpha(value: str) -> str:
    if not value:
        return ""
    return value.translate(_FULL_ALPHA)


__all__ = [
    "__version__",
    "to_half_width",
    "to_half_width_digits",
    "to_half_width_alpha",
    "to_full_width",
    "to_full_width_digits",
    "to_full_width_alpha",
]
