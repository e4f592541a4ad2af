# jpform/prefecture.py
# 都道府県レジストリ v2.0
# - JIS コード順（01: 北海道 〜 47: 沖縄県）の固定タプル
# - コード = 並び順 + 1 を 2 桁ゼロ埋め

from __future__ import annotations

from typing import Dict, Optional, Tuple

__version__ = "v2.0"

PREFECTURES: Tuple[str, ...] = (
    "北海道",   "青森県",   "岩手県",   "宮城県",   "秋田県",
    "山形県",   "福島県",   "茨城県",   "栃木県",   "群馬県",
    "埼玉県",   "千葉県",   "東京都",   "神奈川県", "新潟県",
    "富山県",   "石川県",   "福井県",   "山梨県",   "長野県",
    "岐阜県",   "静岡県",   "愛知県",   "三重県",   "滋賀県",
    "京都府",   "大阪府",   "兵庫県",   "奈良県",   "和歌山県",
    "鳥取県",   "島根県",   "岡山県",   "広島県",   "山口県",
    "徳島県",   "香川県",   "愛媛県",   "高知県",   "福岡県",
    "佐賀県",   "長崎県",   "熊本県",   "大分県",   "宮崎県",
    "鹿児島県", "沖縄県",
)

PREFECTURES_KANA: Tuple[str, ...] = (
    "ホッカイドウ", "アオモリケン", "イワテケン",   "ミヤギケン",   "アキタケン",
    "ヤマガタケン", "フクシマケン", "イバラキケン", "トチギケン",   "グンマケン",
    "サイタマケン", "チバケン",     "トウキョウト", "カナガワケン", "ニイガタケン",
    "トヤマケン",   "イシカワケン", "フクイケン",   "ヤマナシケン", "ナガノケン",
    "ギフケン",     "シズオカケン", "アイチケン",   "ミエケン",     "シガケン",
    "キョウトフ",   "オオサカフ",   "ヒョウゴケン", "ナラケン",     "ワカヤマケン",
    "トットリケン", "シマネケン",   "オカヤマケン", "ヒロシマケン", "ヤマグチケン",
    "トクシマケン", "カガワケン",   "エヒメケン",   "コウチケン",   "フクオカケン",
    "サガケン",     "ナガサキケン", "クマモトケン", "オオイタケン", "ミヤザキケン",
    "カゴシマケン", "オキナワケン",
)

_NAME_TO_CODE: Dict[str, str] = {name: f"{i + 1:02d}" for i, name in enumerate(PREFECTURES)}


def prefecture_code_from_index(index: int) -> str:
    """0 始まりの並び順から 2 桁コードへ。0 → '01'"""
    return f"{index + 1:02d}"


def get_prefecture_code(name: str) -> Optional[str]:
    """都道府県名 → '01'〜'47'。正式名でなければ None（'東京' は None）。"""
    return _NAME_TO_CODE.get(name)


def get_prefecture_name(code: str) -> str:
    """'13' → '東京都'。範囲外・数字でないコードは ValueError。"""
    try:
        index = int(code) - 1
    except (TypeError, ValueError):
        raise ValueError(f"Invalid prefecture code: {code}") from None
    if not 0 <= index < len(PREFECTURES):
        raise ValueError(f"Invalid prefecture code: {code}")
    return PREFECTURES[index]


def is_prefecture(value: str) -> bool:
    return value in _NAME_TO_CODE


__all__ = [
    "__version__",
    "PREFECTURES",
    "PREFECTURES_KANA",
    "prefecture_code_from_index",
    "get_prefecture_code",
    "get_prefecture_name",
    "is_prefecture",
]
