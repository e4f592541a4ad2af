# jpform/furigana.py
# 人名ふりがな（辞書引き）v2.0
# - 姓・名の 2 辞書を持つ FuriganaRegistry を明示的に持ち回す
# - 完全一致のみ（部分一致・形態素解析・推測はしない）
# - 辞書の値は常にカタカナ：登録時に to_katakana を通す
# - 見つからない場合は None（例外にしない）
# - ロックは持たない：起動時に 1 か所から登録し、あとは読むだけの想定

from __future__ import annotations

import json
import re
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Literal, Optional

from jpform.utils.kana import to_hiragana, to_katakana

__version__ = "v2.0"

FuriganaFormat = Literal["katakana", "hiragana"]

_DATA_DIR = Path(__file__).resolve().parent / "data"
_SURNAME_TERMS_PATH = _DATA_DIR / "surname_kana_terms.json"   # {"version":"v1.0.0", "terms":{...}}
_GIVEN_TERMS_PATH = _DATA_DIR / "given_kana_terms.json"

# 半角・全角スペースの連続で区切る
_NAME_SEP_RE = re.compile(r"[\s　]+")


def _load_terms(path: Path) -> tuple[Dict[str, str], str]:
    with path.open("r", encoding="utf-8") as f:
        obj: Any = json.load(f)
    terms = obj.get("terms") if isinstance(obj, dict) else None
    if not isinstance(terms, dict):
        raise ValueError(f"{path.name}: 'terms' がありません")
    version = str(obj.get("version", "unknown"))
    return {str(k): to_katakana(str(v)) for k, v in terms.items()}, version


def _apply_format(reading: str, format: FuriganaFormat) -> str:
    return to_hiragana(reading) if format == "hiragana" else reading


class FuriganaRegistry:
    """姓・名の読み辞書。"""

    def __init__(self,
                 surnames: Optional[Dict[str, str]] = None,
                 given_names: Optional[Dict[str, str]] = None,
                 versions: Optional[Dict[str, str]] = None) -> None:
        self._surnames: Dict[str, str] = {k: to_katakana(v) for k, v in (surnames or {}).items()}
        self._given: Dict[str, str] = {k: to_katakana(v) for k, v in (given_names or {}).items()}
        self.versions: Dict[str, str] = dict(versions or {})

    @classmethod
    def from_bundled(cls) -> "FuriganaRegistry":
        """同梱の JSON 辞書から作る。"""
        surnames, surname_ver = _load_terms(_SURNAME_TERMS_PATH)
        given, given_ver = _load_terms(_GIVEN_TERMS_PATH)
        return cls(surnames, given, versions={"surname": surname_ver, "given": given_ver})

    def __len__(self) -> int:
        return len(self._surnames) + len(self._given)

    # ---- lookup ----

    def last_name(self, name: str, format: FuriganaFormat = "katakana") -> Optional[str]:
        reading = self._surnames.get(name)
        if not reading:
            return None
        return _apply_format(reading, format)

    def first_name(self, name: str, format: FuriganaFormat = "katakana") -> Optional[str]:
        reading = self._given.get(name)
        if not reading:
            return None
        return _apply_format(reading, format)

    def full_name(self, name: str, format: FuriganaFormat = "katakana") -> Optional[str]:
        """
        '山田 太郎' → 'ヤマダ タロウ'
        区切りが無い・3 つ以上に分かれる・どちらかが辞書に無い → None
        """
        parts = _NAME_SEP_RE.split(name or "")
        if len(parts) != 2:
            return None
        last, first = parts
        last_k = self.last_name(last, format)
        first_k = self.first_name(first, format)
        if not last_k or not first_k:
            return None
        return f"{last_k} {first_k}"

    # ---- registration ----

    def add_last_name_reading(self, name: str, reading: str) -> None:
        self._surnames[name] = to_katakana(reading)

    def add_first_name_reading(self, name: str, reading: str) -> None:
        self._given[name] = to_katakana(reading)


@lru_cache(maxsize=1)
def default_registry() -> FuriganaRegistry:
    """プロセス共有の辞書（初回呼び出し時に同梱辞書を読む）。"""
    return FuriganaRegistry.from_bundled()


def _registry(registry: Optional[FuriganaRegistry]) -> FuriganaRegistry:
    return registry if registry is not None else default_registry()

# ---------------------------------------------------------------------
# 関数 API（registry 省略時はプロセス共有の辞書）
# ---------------------------------------------------------------------
def get_last_name_furigana(name: str, format: FuriganaFormat = "katakana",
                           registry: Optional[FuriganaRegistry] = None) -> Optional[str]:
    return _registry(registry).last_name(name, format)


def get_first_name_furigana(name: str, format: FuriganaFormat = "katakana",
                            registry: Optional[FuriganaRegistry] = None) -> Optional[str]:
    return _registry(registry).first_name(name, format)


def get_full_name_furigana(name: str, format: FuriganaFormat = "katakana",
                           registry: Optional[FuriganaRegistry] = None) -> Optional[str]:
    return _registry(registry).full_name(name, format)


def add_last_name_reading(name: str, reading: str,
                          registry: Optional[FuriganaRegistry] = None) -> None:
    _registry(registry).add_last_name_reading(name, reading)


def add_first_name_reading(name: str, reading: str,
                           registry: Optional[FuriganaRegistry] = None) -> None:
    _registry(registry).add_first_name_reading(name, reading)


def furigana_dict_versions() -> Dict[str, str]:
    """/healthz 表示用。"""
    return dict(default_registry().versions)


__all__ = [
    "__version__",
    "FuriganaFormat",
    "FuriganaRegistry",
    "default_registry",
    "get_last_name_furigana",
    "get_first_name_furigana",
    "get_full_name_furigana",
    "add_last_name_reading",
    "add_first_name_reading",
    "furigana_dict_versions",
]
