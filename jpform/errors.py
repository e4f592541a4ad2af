# jpform/errors.py
# 住所解決のエラー
# - 「見つからない」はエラーにしない（空リスト）
# - 例外になるのは ApiResolver の通信失敗だけ
#     ResolverTimeoutError   : 期限切れで中断した
#     ResolverHTTPError      : 2xx 以外のステータス
#     ResolverTransportError : 接続失敗など（HTTPError の親）

from __future__ import annotations

from typing import Optional


class ResolverError(Exception):
    """住所解決に失敗した（見つからない、ではない）。"""


class ResolverTimeoutError(ResolverError):
    def __init__(self, timeout: float, url: str = "") -> None:
        super().__init__(f"Request timeout ({timeout}s): {url}" if url else f"Request timeout ({timeout}s)")
        self.timeout = timeout
        self.url = url


class ResolverTransportError(ResolverError):
    def __init__(self, message: str, status: Optional[int] = None) -> None:
        super().__init__(message)
        self.status = status


class ResolverHTTPError(ResolverTransportError):
    def __init__(self, status: int, url: str = "") -> None:
        super().__init__(f"HTTP error: {status}", status=status)
        self.url = url


__all__ = [
    "ResolverError",
    "ResolverTimeoutError",
    "ResolverTransportError",
    "ResolverHTTPError",
]
