# jpform/services/ken_all_to_postal.py
# 日本郵便 KEN_ALL.CSV → 郵便番号データ（圧縮 JSON）変換 v2.0
#
# 方針
# - ダウンロード・zip 展開はしない（展開済みの CSV を渡す）
# - KEN_ALL は Shift_JIS（cp932）、カナは半角 → to_full_width_kana で全角へ
# - 市区町村は都道府県ごとに出現順で index を振る
# - カナの半角括弧も全角にする（例: ｲﾁﾊﾞﾝﾁｮｳ(1-4ﾁｮｳﾒ) → イチバンチョウ（1-4チョウメ））
# - 「以下に掲載がない場合」の町域は '' にする（カナは残す）
# - 同じ郵便番号内で (prefIndex, cityIndex, town) が重複したら 1 件にまとめる
# - townKana が空なら 3 要素で出力する
#
# 使い方
#   python -m jpform.services.ken_all_to_postal KEN_ALL.CSV -o jpform/data/postal.json

from __future__ import annotations

import argparse
import csv
import io
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Set, Tuple

from jpform import config
from jpform.prefecture import PREFECTURES, PREFECTURES_KANA, prefecture_code_from_index
from jpform.utils.kana import to_full_width_kana

__version__ = "v2.0"

logger = logging.getLogger(__name__)

# ===== KEN_ALL 列 =====
COL_POSTAL = 2
COL_CITY_KANA = 4
COL_TOWN_KANA = 5
COL_PREF = 6
COL_CITY = 7
COL_TOWN = 8
MIN_COLUMNS = 9

_NO_TOWN_MARK = "以下に掲載がない場合"

_PREF_INDEX: Dict[str, int] = {name: i for i, name in enumerate(PREFECTURES)}

_KANA_PARENS = str.maketrans("()", "（）")


def _clean(s: str) -> str:
    return (s or "").lstrip("\ufeff").strip()


def _kana(s: str) -> str:
    return to_full_width_kana(_clean(s)).translate(_KANA_PARENS)


def _normalize_town(town: str) -> str:
    if _NO_TOWN_MARK in town:
        return ""
    return town


def convert_ken_all_rows_to_postal_data(rows: Sequence[Sequence[str]],
                                        version: Optional[str] = None) -> Dict[str, Any]:
    """CSV 行（リストのリスト）から圧縮データ dict を作る。"""
    cities: Dict[str, List[str]] = {}
    cities_kana: Dict[str, List[str]] = {}
    city_index_map: Dict[str, Dict[str, int]] = {}
    data: Dict[str, List[List[Any]]] = {}
    seen: Dict[str, Set[Tuple[int, int, str]]] = {}

    skipped = 0
    for row in rows:
        if len(row) < MIN_COLUMNS:
            skipped += 1
            continue

        postal_code = _clean(row[COL_POSTAL])
        pref = _clean(row[COL_PREF])
        city = _clean(row[COL_CITY])
        town = _clean(row[COL_TOWN])
        city_kana = _kana(row[COL_CITY_KANA])
        town_kana = _kana(row[COL_TOWN_KANA])

        if len(postal_code) != 7:
            skipped += 1
            continue
        pref_index = _PREF_INDEX.get(pref)
        if pref_index is None:
            skipped += 1
            continue

        pref_code = prefecture_code_from_index(pref_index)
        index_map = city_index_map.setdefault(pref_code, {})
        if pref_code not in cities:
            cities[pref_code] = []
            cities_kana[pref_code] = []

        city_index = index_map.get(city)
        if city_index is None:
            city_index = len(cities[pref_code])
            index_map[city] = city_index
            cities[pref_code].append(city)
            cities_kana[pref_code].append(city_kana)

        norm_town = _normalize_town(town)
        norm_town_kana = _normalize_town(town_kana)

        key = (pref_index, city_index, norm_town)
        seen_keys = seen.setdefault(postal_code, set())
        if key in seen_keys:
            continue
        seen_keys.add(key)

        entry: List[Any] = [pref_index, city_index, norm_town]
        if norm_town_kana:
            entry.append(norm_town_kana)
        data.setdefault(postal_code, []).append(entry)

    logger.info("ken_all: %d postal codes, %d rows skipped", len(data), skipped)

    out: Dict[str, Any] = {}
    if version:
        out["version"] = version
    out.update(
        prefs=list(PREFECTURES),
        prefsKana=list(PREFECTURES_KANA),
        cities=cities,
        citiesKana=cities_kana,
        data=data,
    )
    return out


def convert_ken_all_csv_text_to_postal_data(csv_text: str,
                                            version: Optional[str] = None) -> Dict[str, Any]:
    """デコード済みの KEN_ALL テキストから圧縮データ dict を作る。"""
    reader = csv.reader(io.StringIO(csv_text))
    return convert_ken_all_rows_to_postal_data(list(reader), version=version)


def write_postal_data(data: Dict[str, Any], path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        json.dump(data, f, ensure_ascii=False, separators=(",", ":"))
        f.write("\n")

# ==== CLI ====

def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="python -m jpform.services.ken_all_to_postal",
        description="KEN_ALL.CSV を郵便番号データ（圧縮 JSON）に変換する",
    )
    parser.add_argument("csv", type=Path, help="展開済みの KEN_ALL.CSV")
    parser.add_argument("-o", "--output", type=Path, default=config.BUNDLED_POSTAL_DATA,
                        help="出力先（既定: 同梱データを上書き）")
    parser.add_argument("--encoding", default="cp932", help="CSV の文字コード（既定: cp932）")
    parser.add_argument("--version", dest="data_version", default=None,
                        help="データに埋め込む版（例: 2024-06-28）")
    args = parser.parse_args(argv)

    logging.basicConfig(level=config.log_level(),
                        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    try:
        text = args.csv.read_text(encoding=args.encoding)
    except (OSError, UnicodeDecodeError) as e:
        logger.error("cannot read %s: %s", args.csv, e)
        return 1

    data = convert_ken_all_csv_text_to_postal_data(text, version=args.data_version)
    write_postal_data(data, args.output)
    logger.info("written: %s", args.output)
    return 0


__all__ = [
    "__version__",
    "convert_ken_all_rows_to_postal_data",
    "convert_ken_all_csv_text_to_postal_data",
    "write_postal_data",
    "main",
]


if __name__ == "__main__":
    sys.exit(main())
