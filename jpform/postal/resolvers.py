# jpform/postal/resolvers.py
# 郵便番号 → 住所 の Resolver v2.0
#
# 共通の約束
# - async resolve(postal_code) -> List[Address]
# - 見つからない・7 桁にならない入力は []（例外にしない）
# - 例外になるのは ApiResolver の通信失敗と、CustomResolver に渡した関数の例外だけ
#
# 実装は 3 つ（継承はしない、同じ形の resolve を持つだけ）
#   BundledResolver : 同梱（または JPFORM_POSTAL_DATA）の圧縮データを引く
#   ApiResolver     : 外部 API（既定は zipcloud）に 1 回だけ GET
#   CustomResolver  : 呼び出し側の async 関数をそのまま包む

from __future__ import annotations

import asyncio
import logging
from typing import Any, Awaitable, Callable, Dict, List, Optional, Protocol

import httpx

from jpform import config
from jpform.converters.postal import normalize_postal_code
from jpform.errors import ResolverHTTPError, ResolverTimeoutError, ResolverTransportError
from jpform.postal.dataset import PostalDataset, load_bundled_dataset
from jpform.postal.types import Address
from jpform.prefecture import get_prefecture_code
from jpform.utils.kana import to_full_width_kana

__version__ = "v2.0"

logger = logging.getLogger(__name__)

CustomResolveFunction = Callable[[str], Awaitable[List[Address]]]


class PostalResolver(Protocol):
    async def resolve(self, postal_code: str) -> List[Address]:
        ...

# ---------------------------------------------------------------------
# Bundled
# ---------------------------------------------------------------------
class BundledResolver:
    """圧縮データを引く Resolver。I/O なし（初回のデータ読み込みを除く）。"""

    def __init__(self, dataset: Optional[PostalDataset] = None) -> None:
        self._dataset = dataset

    @property
    def dataset(self) -> PostalDataset:
        if self._dataset is None:
            self._dataset = load_bundled_dataset()
        return self._dataset

    async def resolve(self, postal_code: str) -> List[Address]:
        normalized = normalize_postal_code(postal_code)
        if len(normalized) != 7:
            return []
        addresses = self.dataset.lookup(normalized)
        logger.debug("bundled lookup %s -> %d", normalized, len(addresses))
        return addresses

# ---------------------------------------------------------------------
# API（zipcloud 互換）
# ---------------------------------------------------------------------
# レスポンス例
#   {"status": 200, "message": null,
#    "results": [{"zipcode": "1000001", "prefcode": "13",
#                 "address1": "東京都", "address2": "千代田区", "address3": "千代田",
#                 "kana1": "トウキョウト", "kana2": "チヨダク", "kana3": "チヨダ"}]}
#   該当なしは results が null、入力エラーは status が 400
#   カナは全角で返るが、半角で返す互換 API もあるので全角に寄せる

def _kana(value: Optional[str]) -> Optional[str]:
    return to_full_width_kana(value) if value else value


class ApiResolver:
    """外部 API を使う Resolver。resolve 1 回ごとに独立したクライアントと期限を持つ。"""

    def __init__(self,
                 endpoint: Optional[str] = None,
                 timeout: Optional[float] = None,
                 transport: Optional[httpx.AsyncBaseTransport] = None,
                 headers: Optional[Dict[str, str]] = None) -> None:
        self.endpoint = endpoint or config.api_endpoint()
        self.timeout = timeout if timeout is not None else config.api_timeout()
        self._transport = transport
        self._headers = {"Accept": "application/json", **(headers or {})}

    async def _fetch(self, normalized: str) -> httpx.Response:
        async with httpx.AsyncClient(transport=self._transport,
                                     headers=self._headers,
                                     timeout=self.timeout,
                                     follow_redirects=True) as client:
            return await client.get(self.endpoint, params={"zipcode": normalized})

    async def resolve(self, postal_code: str) -> List[Address]:
        normalized = normalize_postal_code(postal_code)
        if len(normalized) != 7:
            return []

        try:
            # 期限を過ぎたら wait_for が通信中のタスクをキャンセルする
            response = await asyncio.wait_for(self._fetch(normalized), timeout=self.timeout)
        except (asyncio.TimeoutError, httpx.TimeoutException):
            logger.warning("postal api timeout: %s zipcode=%s", self.endpoint, normalized)
            raise ResolverTimeoutError(self.timeout, self.endpoint) from None
        except httpx.HTTPError as e:
            logger.warning("postal api transport error: %s: %s", e.__class__.__name__, e)
            raise ResolverTransportError(f"{e.__class__.__name__}: {e}") from e

        if not response.is_success:
            logger.warning("postal api HTTP %d zipcode=%s", response.status_code, normalized)
            raise ResolverHTTPError(response.status_code, self.endpoint)

        try:
            payload = response.json()
        except ValueError as e:
            raise ResolverTransportError(f"invalid JSON response: {e}", status=response.status_code) from e

        return self._to_addresses(normalized, payload)

    @staticmethod
    def _to_addresses(normalized: str, payload: Any) -> List[Address]:
        if not isinstance(payload, dict):
            return []
        results = payload.get("results")
        if payload.get("status") != 200 or not results:
            return []

        out: List[Address] = []
        for r in results:
            prefecture = r.get("address1") or ""
            # 正式名ならレジストリのコード、そうでなければ API の prefcode
            prefecture_code = get_prefecture_code(prefecture) or str(r.get("prefcode") or "").zfill(2)
            out.append(Address(
                postal_code=normalized,
                prefecture=prefecture,
                prefecture_code=prefecture_code,
                city=r.get("address2") or "",
                town=r.get("address3") or "",
                prefecture_kana=_kana(r.get("kana1")),
                city_kana=_kana(r.get("kana2")),
                town_kana=_kana(r.get("kana3")),
            ))
        logger.debug("postal api %s -> %d", normalized, len(out))
        return out

# ---------------------------------------------------------------------
# Custom
# ---------------------------------------------------------------------
class CustomResolver:
    """
    呼び出し側の async 関数を包む Resolver。
    normalize=True（既定）: 正規化して 7 桁でなければ []、7 桁なら正規化後の値で呼ぶ
    normalize=False       : 入力をそのまま渡す
    関数の例外は加工せずにそのまま伝える。
    """

    def __init__(self, resolve: CustomResolveFunction, normalize: bool = True) -> None:
        self._resolve_fn = resolve
        self.normalize = normalize

    async def resolve(self, postal_code: str) -> List[Address]:
        if not self.normalize:
            return await self._resolve_fn(postal_code)
        normalized = normalize_postal_code(postal_code)
        if len(normalized) != 7:
            return []
        return await self._resolve_fn(normalized)

# ---------------------------------------------------------------------
# ファクトリ / 既定 Resolver
# ---------------------------------------------------------------------
def create_api_resolver(endpoint: Optional[str] = None,
                        timeout: Optional[float] = None,
                        transport: Optional[httpx.AsyncBaseTransport] = None,
                        headers: Optional[Dict[str, str]] = None) -> ApiResolver:
    return ApiResolver(endpoint=endpoint, timeout=timeout, transport=transport, headers=headers)


def create_custom_resolver(resolve: CustomResolveFunction, normalize: bool = True) -> CustomResolver:
    return CustomResolver(resolve, normalize=normalize)


# データの読み込みは最初の resolve まで遅らせる
bundled_resolver = BundledResolver()


async def resolve_postal_code(postal_code: str,
                              resolver: Optional[PostalResolver] = None) -> List[Address]:
    """郵便番号から住所を解決。resolver 省略時は同梱データ。"""
    if resolver is None:
        resolver = bundled_resolver
    return await resolver.resolve(postal_code)


__all__ = [
    "__version__",
    "PostalResolver",
    "CustomResolveFunction",
    "BundledResolver",
    "ApiResolver",
    "CustomResolver",
    "create_api_resolver",
    "create_custom_resolver",
    "bundled_resolver",
    "resolve_postal_code",
]
