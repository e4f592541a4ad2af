# jpform/utils/kana.py
# かな変換モジュール v2.0
# - ひらがな⇔カタカナ（0x60 シフト）
# - 半角カナ→全角カナ（濁点・半濁点は直後の 1 文字を見て結合）
# - 読み推測（pykakasi）は持たない：ふりがなは辞書引きのみ（jpform.furigana）

from __future__ import annotations

from typing import Dict

__version__ = "v2.0"

_HIRA2KATA_TABLE = {i: chr(i + 0x60) for i in range(0x3041, 0x3097)}  # ぁ-ゖ
_KATA2HIRA_TABLE = {i: chr(i - 0x60) for i in range(0x30A1, 0x30F7)}  # ァ-ヶ

_HANKAKU_DAKUTEN = "\uff9e"      # ﾞ
_HANKAKU_HANDAKUTEN = "\uff9f"   # ﾟ

_HANKAKU_KANA_MAP: Dict[str, str] = {
    "ｦ": "ヲ", "ｧ": "ァ", "ｨ": "ィ", "ｩ": "ゥ", "ｪ": "ェ", "ｫ": "ォ",
    "ｬ": "ャ", "ｭ": "ュ", "ｮ": "ョ", "ｯ": "ッ", "ｰ": "ー",
    "ｱ": "ア", "ｲ": "イ", "ｳ": "ウ", "ｴ": "エ", "ｵ": "オ",
    "ｶ": "カ", "ｷ": "キ", "ｸ": "ク", "ｹ": "ケ", "ｺ": "コ",
    "ｻ": "サ", "ｼ": "シ", "ｽ": "ス", "ｾ": "セ", "ｿ": "ソ",
    "ﾀ": "タ", "ﾁ": "チ", "ﾂ": "ツ", "ﾃ": "テ", "ﾄ": "ト",
    "ﾅ": "ナ", "ﾆ": "ニ", "ﾇ": "ヌ", "ﾈ": "ネ", "ﾉ": "ノ",
    "ﾊ": "ハ", "ﾋ": "ヒ", "ﾌ": "フ", "ﾍ": "ヘ", "ﾎ": "ホ",
    "ﾏ": "マ", "ﾐ": "ミ", "ﾑ": "ム", "ﾒ": "メ", "ﾓ": "モ",
    "ﾔ": "ヤ", "ﾕ": "ユ", "ﾖ": "ヨ",
    "ﾗ": "ラ", "ﾘ": "リ", "ﾙ": "ル", "ﾚ": "レ", "ﾛ": "ロ",
    "ﾜ": "ワ", "ﾝ": "ン",
    _HANKAKU_DAKUTEN: "゛", _HANKAKU_HANDAKUTEN: "゜",
}

_DAKUTEN_MAP: Dict[str, str] = {
    "カ": "ガ", "キ": "ギ", "ク": "グ", "ケ": "ゲ", "コ": "ゴ",
    "サ": "ザ", "シ": "ジ", "ス": "ズ", "セ": "ゼ", "ソ": "ゾ",
    "タ": "ダ", "チ": "ヂ", "ツ": "ヅ", "テ": "デ", "ト": "ド",
    "ハ": "バ", "ヒ": "ビ", "フ": "ブ", "ヘ": "ベ", "ホ": "ボ",
    "ウ": "ヴ",
}

_HANDAKUTEN_MAP: Dict[str, str] = {
    "ハ": "パ", "ヒ": "ピ", "フ": "プ", "ヘ": "ペ", "ホ": "ポ",
}


def to_katakana(s: str) -> str:
    """ひらがな→カタカナ。それ以外はそのまま。"""
    if not s:
        return ""
    return s.translate(_HIRA2KATA_TABLE)


def to_hiragana(s: str) -> str:
    """カタカナ→ひらがな。ヷ-ヺ・長音符などブロック外はそのまま。"""
    if not s:
        return ""
    return s.translate(_KATA2HIRA_TABLE)


def to_full_width_kana(s: str) -> str:
    """
    半角カナ→全角カナ。
    左から 1 パスで走査し、直後が ﾞ / ﾟ で合成形がある場合だけ 1 文字に結合する。
      'ｶﾞｰﾙ' → 'ガール'
      'ｱﾞ'   → 'ア゛'（合成形なし）
    """
    if not s:
        return ""
    out = []
    i = 0
    n = len(s)
    while i < n:
        ch = s[i]
        zen = _HANKAKU_KANA_MAP.get(ch)
        if zen is None:
            out.append(ch)
            i += 1
            continue

        nxt = s[i + 1] if i + 1 < n else ""
        if nxt == _HANKAKU_DAKUTEN and zen in _DAKUTEN_MAP:
            out.append(_DAKUTEN_MAP[zen])
            i += 2
        elif nxt == _HANKAKU_HANDAKUTEN and zen in _HANDAKUTEN_MAP:
            out.append(_HANDAKUTEN_MAP[zen])
            i += 2
        else:
            out.append(zen)
            i += 1
    return "".join(out)


__all__ = [
    "__version__",
    "to_katakana",
    "to_hiragana",
    "to_full_width_kana",
]
