# jpform/postal/types.py
# 住所レコード

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class Address:
    """郵便番号 1 件ぶんの住所。town が '' のときは町域の区分なし。"""

    postal_code: str           # ハイフンなし 7 桁
    prefecture: str
    prefecture_code: str       # '01'〜'47'
    city: str
    town: str
    prefecture_kana: Optional[str] = None
    city_kana: Optional[str] = None
    town_kana: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
