# jpform/config.py
# 環境変数による設定 v2.0
# - 値は呼び出しのたびに os.environ から読む（テストで monkeypatch しやすいように）
# - 数値が壊れていたら既定値

from __future__ import annotations

import os
from pathlib import Path
from typing import Literal, Optional

__version__ = "v2.0"

DEFAULT_API_ENDPOINT = "https://zipcloud.ibsnet.co.jp/api/search"
DEFAULT_API_TIMEOUT = 10.0
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_PORT = 8000

BUNDLED_POSTAL_DATA = Path(__file__).resolve().parent / "data" / "postal.json"


def postal_data_path() -> Path:
    """JPFORM_POSTAL_DATA（未設定なら同梱のサンプル）"""
    raw = os.environ.get("JPFORM_POSTAL_DATA", "").strip()
    return Path(raw) if raw else BUNDLED_POSTAL_DATA


def api_endpoint() -> str:
    return os.environ.get("JPFORM_POSTAL_API_ENDPOINT", "").strip() or DEFAULT_API_ENDPOINT


def api_timeout() -> float:
    """JPFORM_POSTAL_API_TIMEOUT（秒）"""
    raw = os.environ.get("JPFORM_POSTAL_API_TIMEOUT", "")
    try:
        value = float(raw)
    except ValueError:
        return DEFAULT_API_TIMEOUT
    return value if value > 0 else DEFAULT_API_TIMEOUT


def resolver_mode() -> Literal["bundled", "api"]:
    mode = os.environ.get("JPFORM_RESOLVER", "bundled").strip().lower()
    return "api" if mode == "api" else "bundled"


def log_level() -> str:
    return (os.environ.get("JPFORM_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper()


def port(default: Optional[int] = None) -> int:
    try:
        return int(os.environ.get("PORT", ""))
    except ValueError:
        return default if default is not None else DEFAULT_PORT


__all__ = [
    "__version__",
    "DEFAULT_API_ENDPOINT",
    "DEFAULT_API_TIMEOUT",
    "DEFAULT_LOG_LEVEL",
    "DEFAULT_PORT",
    "BUNDLED_POSTAL_DATA",
    "postal_data_path",
    "api_endpoint",
    "api_timeout",
    "resolver_mode",
    "log_level",
    "port",
]
