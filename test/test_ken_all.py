import json

from jpform.postal.dataset import PostalDataset
from jpform.services.ken_all_to_postal import (
    convert_ken_all_csv_text_to_postal_data,
    convert_ken_all_rows_to_postal_data,
    main,
)


def _row(code, pref, city, town, city_kana="", town_kana=""):
    # 全国地方公共団体コード, 旧郵便番号, 郵便番号, 都道府県カナ, 市区町村カナ, 町域カナ, 都道府県, 市区町村, 町域, ...
    return ["13101", code[:3], code, "ﾄｳｷｮｳﾄ", city_kana, town_kana, pref, city, town, "0", "0", "0", "0", "0", "0"]


ROWS = [
    _row("1000000", "東京都", "千代田区", "以下に掲載がない場合", "ﾁﾖﾀﾞｸ", "ｲｶﾆｹｲｻｲｶﾞﾅｲﾊﾞｱｲ"),
    _row("1000001", "東京都", "千代田区", "千代田", "ﾁﾖﾀﾞｸ", "ﾁﾖﾀﾞ"),
    _row("1500001", "東京都", "渋谷区", "神宮前", "ｼﾌﾞﾔｸ", "ｼﾞﾝｸﾞｳﾏｴ"),
    _row("1000001", "東京都", "千代田区", "千代田", "ﾁﾖﾀﾞｸ", "ﾁﾖﾀﾞ"),
    _row("0640941", "北海道", "札幌市中央区", "旭ケ丘", "ｻｯﾎﾟﾛｼﾁｭｳｵｳｸ", "ｱｻﾋｶﾞｵｶ"),
]


def test_city_index_per_prefecture():
    out = convert_ken_all_rows_to_postal_data(ROWS)
    assert out["cities"]["13"] == ["千代田区", "渋谷区"]
    assert out["citiesKana"]["13"] == ["チヨダク", "シブヤク"]
    assert out["cities"]["01"] == ["札幌市中央区"]
    assert out["data"]["1500001"] == [[12, 1, "神宮前", "ジングウマエ"]]
    assert out["data"]["0640941"] == [[0, 0, "旭ケ丘", "アサヒガオカ"]]

def test_no_town_and_dedup():
    out = convert_ken_all_rows_to_postal_data(ROWS)
    assert out["data"]["1000000"] == [[12, 0, "", "イカニケイサイガナイバアイ"]]
    assert out["data"]["1000001"] == [[12, 0, "千代田", "チヨダ"]]

def test_multiple_towns_keep_order():
    rows = [
        _row("0640941", "北海道", "札幌市中央区", "旭ケ丘", "ｻｯﾎﾟﾛｼﾁｭｳｵｳｸ", "ｱｻﾋｶﾞｵｶ"),
        _row("0640941", "北海道", "札幌市中央区", "円山西町", "ｻｯﾎﾟﾛｼﾁｭｳｵｳｸ", ""),
    ]
    out = convert_ken_all_rows_to_postal_data(rows)
    assert out["data"]["0640941"] == [[0, 0, "旭ケ丘", "アサヒガオカ"], [0, 0, "円山西町"]]

def test_kana_parentheses_are_widened():
    rows = [_row("9800811", "宮城県", "仙台市青葉区", "一番町（１～４丁目）", "ｾﾝﾀﾞｲｼｱｵﾊﾞｸ", "ｲﾁﾊﾞﾝﾁｮｳ(1-4ﾁｮｳﾒ)")]
    out = convert_ken_all_rows_to_postal_data(rows)
    assert out["data"]["9800811"] == [[3, 0, "一番町（１～４丁目）", "イチバンチョウ（1-4チョウメ）"]]

def test_bad_rows_are_skipped():
    rows = [
        ["too", "short"],
        _row("12345", "東京都", "千代田区", "千代田"),
        _row("1000001", "東京", "千代田区", "千代田"),
        _row("1000001", "東京都", "千代田区", "千代田", "ﾁﾖﾀﾞｸ", "ﾁﾖﾀﾞ"),
    ]
    out = convert_ken_all_rows_to_postal_data(rows)
    assert list(out["data"]) == ["1000001"]

def test_output_shape():
    out = convert_ken_all_rows_to_postal_data(ROWS, version="2024-06-28")
    assert list(out) == ["version", "prefs", "prefsKana", "cities", "citiesKana", "data"]
    assert len(out["prefs"]) == 47
    assert "version" not in convert_ken_all_rows_to_postal_data(ROWS)

def test_output_loads_as_dataset():
    ds = PostalDataset.from_dict(convert_ken_all_rows_to_postal_data(ROWS, version="t"))
    [a] = ds.lookup("1500001")
    assert (a.prefecture, a.city, a.town, a.town_kana) == ("東京都", "渋谷区", "神宮前", "ジングウマエ")

def test_csv_text():
    text = "\ufeff" + "\n".join(",".join(f'"{c}"' for c in r) for r in ROWS) + "\n"
    out = convert_ken_all_csv_text_to_postal_data(text)
    assert out["data"]["1000001"] == [[12, 0, "千代田", "チヨダ"]]

def test_cli(tmp_path):
    src = tmp_path / "KEN_ALL.CSV"
    src.write_text("\r\n".join(",".join(f'"{c}"' for c in r) for r in ROWS) + "\r\n", encoding="cp932")
    dst = tmp_path / "out" / "postal.json"

    assert main([str(src), "-o", str(dst), "--version", "2024-06-28"]) == 0

    data = json.loads(dst.read_text(encoding="utf-8"))
    assert data["version"] == "2024-06-28"
    assert data["data"]["1000001"] == [[12, 0, "千代田", "チヨダ"]]

def test_cli_missing_file(tmp_path):
    assert main([str(tmp_path / "nope.csv"), "-o", str(tmp_path / "x.json")]) == 1
