import pytest

from jpform.app import VERSION, create_app
from jpform.errors import ResolverHTTPError, ResolverTimeoutError
from jpform.furigana import FuriganaRegistry
from jpform.postal.resolvers import BundledResolver, CustomResolver


@pytest.fixture
def client():
    app = create_app(resolver=BundledResolver(),
                     registry=FuriganaRegistry({"山田": "やまだ"}, {"太郎": "たろう"}))
    return app.test_client()


def test_index(client):
    r = client.get("/")
    assert r.status_code == 200
    body = r.get_data(as_text=True)
    assert VERSION in body
    assert "BundledResolver" in body

def test_index_head(client):
    r = client.head("/")
    assert r.status_code == 200
    assert r.get_data() == b""

def test_healthz(client):
    j = client.get("/healthz").get_json()
    assert j["ok"] is True
    assert j["app"] == VERSION
    assert j["textnorm"] == "v2.0"
    assert j["postal_data"] == "sample-2024.06"
    assert j["surname_terms"] == "v1.0.0"

def test_postal(client):
    r = client.get("/api/postal/100-0001")
    assert r.status_code == 200
    j = r.get_json()
    assert j["ok"] is True
    assert j["postal_code"] == "1000001"
    assert j["formatted"] == "100-0001"
    assert j["valid"] is True
    assert j["addresses"][0]["city"] == "千代田区"
    assert j["addresses"][0]["town"] == "千代田"

def test_postal_not_found(client):
    j = client.get("/api/postal/9999999").get_json()
    assert j["ok"] is True
    assert j["addresses"] == []

def test_postal_invalid(client):
    j = client.get("/api/postal/123").get_json()
    assert j["valid"] is False
    assert j["addresses"] == []

def test_postal_timeout():
    async def timed_out(code):
        raise ResolverTimeoutError(10.0, "https://postal.example.test")

    client = create_app(resolver=CustomResolver(timed_out)).test_client()
    r = client.get("/api/postal/1000001")
    assert r.status_code == 504
    assert r.get_json()["ok"] is False

def test_postal_upstream_error():
    async def broken(code):
        raise ResolverHTTPError(500, "https://postal.example.test")

    client = create_app(resolver=CustomResolver(broken)).test_client()
    r = client.get("/api/postal/1000001")
    assert r.status_code == 502
    assert "500" in r.get_json()["error"]

def test_phone(client):
    j = client.get("/api/phone", query_string={"value": "０９０－１２３４－５６７８"}).get_json()
    assert j["normalized"] == "090-1234-5678"
    assert j["digits"] == "09012345678"
    assert j["valid"] is True
    assert j["mobile"] is True
    assert j["landline"] is False

def test_convert(client):
    j = client.get("/api/convert", query_string={"to": "half", "value": "ＡＢＣ１２３"}).get_json()
    assert j["result"] == "ABC123"
    j = client.get("/api/convert", query_string={"to": "kana", "value": "ｶﾞｰﾙ"}).get_json()
    assert j["result"] == "ガール"
    j = client.get("/api/convert", query_string={"to": "hiragana", "value": "ヤマダ"}).get_json()
    assert j["result"] == "やまだ"

def test_convert_unknown(client):
    assert client.get("/api/convert", query_string={"to": "rot13", "value": "x"}).status_code == 400

def test_furigana(client):
    j = client.get("/api/furigana", query_string={"name": "山田 太郎"}).get_json()
    assert j["reading"] == "ヤマダ タロウ"
    j = client.get("/api/furigana", query_string={"name": "山田", "kind": "last", "format": "hiragana"}).get_json()
    assert j["reading"] == "やまだ"
    j = client.get("/api/furigana", query_string={"name": "花子", "kind": "first"}).get_json()
    assert j["reading"] is None

def test_furigana_bad_params(client):
    assert client.get("/api/furigana", query_string={"name": "山田", "kind": "middle"}).status_code == 400
    assert client.get("/api/furigana", query_string={"name": "山田", "format": "romaji"}).status_code == 400

def test_resolver_from_env(monkeypatch):
    monkeypatch.setenv("JPFORM_RESOLVER", "api")
    j = create_app().test_client().get("/healthz").get_json()
    assert j["resolver"] == "ApiResolver"
