# jpform/postal/dataset.py
# 郵便番号データ（圧縮形式）の読み込みと住所の復元 v2.0
#
# ファイル形式（キー名はそのまま維持する）
#   {
#     "version":    "2024-06-28",                         # 任意
#     "prefs":      ["北海道", ..., "沖縄県"],              # 47 件、index = コード - 1
#     "prefsKana":  ["ホッカイドウ", ...],
#     "cities":     {"01": ["札幌市中央区", ...], ...},     # キーは 2 桁ゼロ埋め
#     "citiesKana": {"01": ["サッポロシチュウオウク", ...], ...},
#     "data":       {"0600000": [[0, 0, "", ...], ...], ...}
#   }
#   data の各要素は [prefIndex, cityIndex, town, townKana?]
#
# - 読み込みは 1 回（パスごとにキャッシュ）、以後は変更しない

from __future__ import annotations

import json
import logging
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from jpform import config
from jpform.postal.types import Address
from jpform.prefecture import prefecture_code_from_index

__version__ = "v2.0"

logger = logging.getLogger(__name__)

PostalEntry = Sequence[Any]   # [prefIndex, cityIndex, town, townKana?]


class PostalDataset:
    """読み取り専用の郵便番号データ。"""

    def __init__(self,
                 prefs: Sequence[str],
                 prefs_kana: Sequence[str],
                 cities: Mapping[str, Sequence[str]],
                 cities_kana: Mapping[str, Sequence[str]],
                 data: Mapping[str, Sequence[PostalEntry]],
                 version: str = "unknown") -> None:
        self.prefs = tuple(prefs)
        self.prefs_kana = tuple(prefs_kana)
        self.cities = MappingProxyType({k: tuple(v) for k, v in cities.items()})
        self.cities_kana = MappingProxyType({k: tuple(v) for k, v in cities_kana.items()})
        self.data = MappingProxyType({k: tuple(tuple(e) for e in v) for k, v in data.items()})
        self.version = version

    # ---- 読み込み ----

    @classmethod
    def from_dict(cls, obj: Dict[str, Any]) -> "PostalDataset":
        missing = [k for k in ("prefs", "prefsKana", "cities", "citiesKana", "data") if k not in obj]
        if missing:
            raise ValueError(f"postal data: missing keys {missing}")
        return cls(
            prefs=obj["prefs"],
            prefs_kana=obj["prefsKana"],
            cities=obj["cities"],
            cities_kana=obj["citiesKana"],
            data=obj["data"],
            version=str(obj.get("version", "unknown")),
        )

    @classmethod
    def from_path(cls, path: Union[str, Path]) -> "PostalDataset":
        path = Path(path)
        with path.open("r", encoding="utf-8") as f:
            obj = json.load(f)
        ds = cls.from_dict(obj)
        logger.info("postal data loaded: %s (%d codes, version=%s)", path, len(ds), ds.version)
        return ds

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {}
        if self.version != "unknown":
            out["version"] = self.version
        out.update(
            prefs=list(self.prefs),
            prefsKana=list(self.prefs_kana),
            cities={k: list(v) for k, v in self.cities.items()},
            citiesKana={k: list(v) for k, v in self.cities_kana.items()},
            data={k: [list(e) for e in v] for k, v in self.data.items()},
        )
        return out

    # ---- 参照 ----

    def __len__(self) -> int:
        return len(self.data)

    def __contains__(self, postal_code: object) -> bool:
        return postal_code in self.data

    def _to_address(self, postal_code: str, entry: PostalEntry) -> Address:
        pref_index, city_index = int(entry[0]), int(entry[1])
        town = entry[2] if len(entry) > 2 and entry[2] else ""
        town_kana = entry[3] if len(entry) > 3 else None

        pref_code = prefecture_code_from_index(pref_index)
        cities = self.cities.get(pref_code, ())
        cities_kana = self.cities_kana.get(pref_code, ())

        return Address(
            postal_code=postal_code,
            prefecture=self.prefs[pref_index],
            prefecture_code=pref_code,
            city=cities[city_index] if city_index < len(cities) else "",
            town=town,
            prefecture_kana=self.prefs_kana[pref_index] if pref_index < len(self.prefs_kana) else None,
            city_kana=cities_kana[city_index] if city_index < len(cities_kana) else None,
            town_kana=town_kana,
        )

    def lookup(self, postal_code: str) -> List[Address]:
        """7 桁の郵便番号（正規化済み）から住所を復元。無ければ []。"""
        entries = self.data.get(postal_code)
        if not entries:
            return []
        return [self._to_address(postal_code, e) for e in entries]


@lru_cache(maxsize=4)
def _load_cached(path: str) -> PostalDataset:
    return PostalDataset.from_path(path)


def load_bundled_dataset(path: Optional[Union[str, Path]] = None) -> PostalDataset:
    """
    郵便番号データを読む（同じパスは 2 回目以降キャッシュ）。
    path 省略時は JPFORM_POSTAL_DATA、未設定なら同梱サンプル。
    """
    target = Path(path) if path is not None else config.postal_data_path()
    return _load_cached(str(target.resolve()))


__all__ = [
    "__version__",
    "PostalDataset",
    "load_bundled_dataset",
]
