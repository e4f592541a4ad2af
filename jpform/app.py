# jpform/app.py
# jpform HTTP API v2.0
# - トップページと /healthz に各モジュール・辞書・郵便番号データのバージョンを表示
# - /api/postal/<code> : 郵便番号 → 住所（JPFORM_RESOLVER=bundled|api）
# - /api/phone         : 電話番号の正規化と種別判定
# - /api/convert       : 全角/半角・かな変換
# - /api/furigana      : 人名ふりがな（辞書引き）
# - HEAD / に対応（ヘルスチェック用）

from __future__ import annotations

import asyncio
import logging
import os
import sys
from typing import Callable, Dict, Optional

from flask import Flask, abort, jsonify, render_template_string, request

from jpform import config
from jpform.converters.phone import extract_phone_digits, normalize_phone
from jpform.converters.postal import format_postal_code, normalize_postal_code
from jpform.errors import ResolverError, ResolverTimeoutError
from jpform.furigana import FuriganaRegistry, default_registry
from jpform.postal.resolvers import ApiResolver, BundledResolver, PostalResolver
from jpform.utils.kana import to_full_width_kana, to_hiragana, to_katakana
from jpform.utils.textnorm import (
    to_full_width,
    to_full_width_alpha,
    to_full_width_digits,
    to_half_width,
    to_half_width_alpha,
    to_half_width_digits,
)
from jpform.validators import (
    is_free_dial_phone,
    is_ip_phone,
    is_landline_phone,
    is_mobile_phone,
    is_valid_phone,
    is_valid_postal_code,
)

VERSION = "v2.0.0"

logger = logging.getLogger(__name__)

INDEX_HTML = """
<!doctype html>
<html lang="ja">
<head>
  <meta charset="utf-8"/>
  <title>jpform ({{version}})</title>
  <style>
    body { font-family: system-ui, -apple-system, "Helvetica Neue", Arial, "Noto Sans JP", sans-serif; padding: 24px; }
    .card { max-width: 880px; margin: 0 auto; padding: 24px; border: 1px solid #ddd; border-radius: 12px; }
    h1 { font-size: 20px; margin-top: 0; }
    .muted { color: #666; font-size: 12px; }
    .verbox { background: #f7f7f7; border: 1px solid #eee; border-radius: 8px; padding: 10px 12px; margin: 12px 0 0; }
    .verbox code { font-family: ui-monospace, SFMono-Regular, Menlo, Consolas, "Liberation Mono", monospace; }
    .grid { display: grid; grid-template-columns: 240px 1fr; gap: 6px 12px; align-items: baseline; }
    .label { color: #444; }
  </style>
</head>
<body>
  <div class="card">
    <h1>jpform</h1>
    <div class="muted">
      <code>/api/postal/1000001</code> /
      <code>/api/phone?value=090-1234-5678</code> /
      <code>/api/convert?to=half&amp;value=１２３</code> /
      <code>/api/furigana?name=山田 太郎</code>
    </div>

    <div class="verbox">
      <div class="grid">
        <div class="label"><strong>App</strong></div><div><code>{{version}}</code></div>
        {% for name, ver in versions.items() %}
        <div class="label">{{name}}</div><div><code>{{ver or "N/A"}}</code></div>
        {% endfor %}
        <div class="label">Resolver</div><div><code>{{resolver}}</code></div>
      </div>
      <div class="muted" style="margin-top:8px;">※ 上記は現在稼働中のモジュール/辞書のバージョンです。</div>
    </div>
  </div>
</body>
</html>
"""

# 変換名 → 関数
CONVERTERS: Dict[str, Callable[[str], str]] = {
    "half": to_half_width,
    "half_digits": to_half_width_digits,
    "half_alpha": to_half_width_alpha,
    "full": to_full_width,
    "full_digits": to_full_width_digits,
    "full_alpha": to_full_width_alpha,
    "kana": to_full_width_kana,
    "katakana": to_katakana,
    "hiragana": to_hiragana,
}


def _module_versions() -> Dict[str, Optional[str]]:
    """各モジュールと辞書のバージョン（データが読めない場合は None）"""
    from jpform.converters import phone as phone_mod, postal as postal_mod
    from jpform.postal import dataset as dataset_mod, resolvers as resolvers_mod
    from jpform.utils import kana as kana_mod, textnorm as textnorm_mod
    from jpform import furigana as furigana_mod, prefecture as prefecture_mod, validators as validators_mod

    versions: Dict[str, Optional[str]] = {
        "textnorm": textnorm_mod.__version__,
        "kana": kana_mod.__version__,
        "postal": postal_mod.__version__,
        "phone": phone_mod.__version__,
        "validators": validators_mod.__version__,
        "prefecture": prefecture_mod.__version__,
        "furigana": furigana_mod.__version__,
        "dataset": dataset_mod.__version__,
        "resolvers": resolvers_mod.__version__,
    }

    try:
        furi = furigana_mod.furigana_dict_versions()
    except (OSError, ValueError) as e:
        logger.warning("furigana dict unavailable: %s", e)
        furi = {}
    versions["surname_terms"] = furi.get("surname")
    versions["given_terms"] = furi.get("given")

    try:
        versions["postal_data"] = dataset_mod.load_bundled_dataset().version
    except (OSError, ValueError) as e:
        logger.warning("postal data unavailable: %s", e)
        versions["postal_data"] = None

    return versions


def create_app(resolver: Optional[PostalResolver] = None,
               registry: Optional[FuriganaRegistry] = None) -> Flask:
    """
    resolver 省略時は JPFORM_RESOLVER に従う（bundled / api）。
    registry 省略時はプロセス共有のふりがな辞書。
    """
    app = Flask(__name__)
    app.json.ensure_ascii = False

    if resolver is None:
        resolver = ApiResolver() if config.resolver_mode() == "api" else BundledResolver()
    resolver_name = resolver.__class__.__name__

    def _registry() -> FuriganaRegistry:
        return registry if registry is not None else default_registry()

    @app.route("/", methods=["GET", "HEAD"])
    def index():
        # ヘルスチェック対策：HEAD は中身なしで 200
        if request.method == "HEAD":
            return ("", 200)
        return render_template_string(
            INDEX_HTML,
            version=VERSION,
            versions=_module_versions(),
            resolver=resolver_name,
        )

    @app.route("/healthz")
    def healthz():
        info = dict(
            ok=True,
            app=VERSION,
            resolver=resolver_name,
            python=f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}",
            env_JPFORM_RESOLVER=os.environ.get("JPFORM_RESOLVER"),
            env_JPFORM_POSTAL_DATA=os.environ.get("JPFORM_POSTAL_DATA"),
            **_module_versions(),
        )
        return jsonify(info), 200

    @app.route("/api/postal/<code>")
    def postal(code: str):
        try:
            addresses = asyncio.run(resolver.resolve(code))
        except ResolverTimeoutError as e:
            logger.warning("postal lookup timeout: %s", e)
            return jsonify({"ok": False, "error": str(e), "input": code}), 504
        except ResolverError as e:
            logger.warning("postal lookup failed: %s", e)
            return jsonify({"ok": False, "error": str(e), "input": code}), 502

        return jsonify({
            "ok": True,
            "input": code,
            "postal_code": normalize_postal_code(code),
            "formatted": format_postal_code(code),
            "valid": is_valid_postal_code(code),
            "addresses": [a.to_dict() for a in addresses],
        }), 200

    @app.route("/api/phone")
    def phone():
        value = request.args.get("value", "")
        return jsonify({
            "input": value,
            "normalized": normalize_phone(value),
            "digits": extract_phone_digits(value),
            "valid": is_valid_phone(value),
            "mobile": is_mobile_phone(value),
            "ip": is_ip_phone(value),
            "free_dial": is_free_dial_phone(value),
            "landline": is_landline_phone(value),
        }), 200

    @app.route("/api/convert")
    def convert():
        value = request.args.get("value", "")
        to = request.args.get("to", "")
        fn = CONVERTERS.get(to)
        if fn is None:
            abort(400, f"to は {', '.join(sorted(CONVERTERS))} のいずれかにしてください。")
        return jsonify({"input": value, "to": to, "result": fn(value)}), 200

    @app.route("/api/furigana")
    def furigana():
        name = request.args.get("name", "")
        kind = request.args.get("kind", "full")
        fmt = request.args.get("format", "katakana")
        if fmt not in ("katakana", "hiragana"):
            abort(400, "format は katakana / hiragana のいずれかにしてください。")

        reg = _registry()
        lookups = {"full": reg.full_name, "last": reg.last_name, "first": reg.first_name}
        lookup = lookups.get(kind)
        if lookup is None:
            abort(400, "kind は full / last / first のいずれかにしてください。")
        return jsonify({"input": name, "kind": kind, "format": fmt, "reading": lookup(name, fmt)}), 200

    return app


if __name__ == "__main__":
    logging.basicConfig(level=config.log_level(),
                        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    # ローカル用にデフォルト 8000
    create_app().run(host="0.0.0.0", port=config.port(), debug=False)
