import pytest

from jpform.furigana import (
    FuriganaRegistry,
    add_first_name_reading,
    add_last_name_reading,
    furigana_dict_versions,
    get_first_name_furigana,
    get_full_name_furigana,
    get_last_name_furigana,
)


@pytest.fixture
def reg():
    return FuriganaRegistry(
        surnames={"山田": "ヤマダ", "佐藤": "さとう", "空": ""},
        given_names={"太郎": "タロウ", "花子": "ハナコ"},
    )


def test_bundled_dictionary():
    assert get_last_name_furigana("山田") == "ヤマダ"
    assert get_first_name_furigana("太郎") == "タロウ"
    assert get_full_name_furigana("山田 太郎") == "ヤマダ タロウ"
    assert get_full_name_furigana("山田 太郎", "hiragana") == "やまだ たろう"

def test_bundled_versions():
    v = furigana_dict_versions()
    assert v["surname"] == "v1.0.0"
    assert v["given"] == "v1.0.0"

def test_lookup(reg):
    assert get_last_name_furigana("山田", registry=reg) == "ヤマダ"
    assert get_last_name_furigana("山田", "hiragana", registry=reg) == "やまだ"
    # 登録時にカタカナへ寄せる
    assert get_last_name_furigana("佐藤", registry=reg) == "サトウ"
    assert get_first_name_furigana("花子", "hiragana", registry=reg) == "はなこ"

def test_unknown_is_none(reg):
    assert get_last_name_furigana("存在しない", registry=reg) is None
    assert get_first_name_furigana("存在しない", registry=reg) is None
    assert get_last_name_furigana("", registry=reg) is None

def test_empty_reading_is_none(reg):
    assert get_last_name_furigana("空", registry=reg) is None

def test_full_name_separators(reg):
    assert get_full_name_furigana("山田　太郎", registry=reg) == "ヤマダ タロウ"
    assert get_full_name_furigana("山田  　 花子", registry=reg) == "ヤマダ ハナコ"

def test_full_name_not_resolvable(reg):
    assert get_full_name_furigana("山田太郎", registry=reg) is None
    assert get_full_name_furigana("山田 太郎 次郎", registry=reg) is None
    assert get_full_name_furigana(" 山田 太郎", registry=reg) is None
    assert get_full_name_furigana("山田 存在しない", registry=reg) is None
    assert get_full_name_furigana("", registry=reg) is None

def test_add_reading(reg):
    add_last_name_reading("鈴木", "すずき", registry=reg)
    add_first_name_reading("一郎", "イチロウ", registry=reg)
    assert get_last_name_furigana("鈴木", registry=reg) == "スズキ"
    assert get_full_name_furigana("鈴木 一郎", "hiragana", registry=reg) == "すずき いちろう"

def test_add_reading_overwrites(reg):
    reg.add_last_name_reading("山田", "やまた")
    assert reg.last_name("山田") == "ヤマタ"

def test_registries_are_independent(reg):
    other = FuriganaRegistry()
    other.add_last_name_reading("山田", "ヤマダ")
    assert len(other) == 1
    assert other.first_name("太郎") is None
    assert reg.last_name("山田") == "ヤマダ"
