from jpform.utils.textnorm import (
    to_full_width,
    to_full_width_alpha,
    to_full_width_digits,
    to_half_width,
    to_half_width_alpha,
    to_half_width_digits,
)

def test_half_width_digits_and_alpha():
    assert to_half_width("０１２３４５６７８９") == "0123456789"
    assert to_half_width("ＡＢＣＤＥＦＧ") == "ABCDEFG"
    assert to_half_width("ａｂｃｄｅｆｇ") == "abcdefg"

def test_half_width_symbols():
    assert to_half_width("！＠＃＄％") == "!@#$%"
    assert to_half_width("（）［］｛｝") == "()[]{}"
    assert to_half_width("　") == " "
    assert to_half_width("’‘") == "'`"
    assert to_half_width("－−") == "--"

def test_half_width_passthrough():
    assert to_half_width("東京都渋谷区") == "東京都渋谷区"
    assert to_half_width("あいうえお") == "あいうえお"
    assert to_half_width("アイウエオ") == "アイウエオ"
    assert to_half_width("") == ""

def test_half_width_mixed():
    assert to_half_width("東京都１２３") == "東京都123"
    assert to_half_width("ＡＢＣ株式会社") == "ABC株式会社"

def test_half_width_restricted():
    assert to_half_width_digits("０１２３４５") == "012345"
    assert to_half_width_digits("ＡＢＣＤ") == "ＡＢＣＤ"
    assert to_half_width_alpha("ＡＢＣＤａｂｃｄ") == "ABCDabcd"
    assert to_half_width_alpha("０１２３") == "０１２３"

def test_full_width():
    assert to_full_width("123ABCabc") == "１２３ＡＢＣａｂｃ"
    assert to_full_width("A-1 (x)") == "Ａ－１　（ｘ）"
    assert to_full_width("'`") == "’‘"
    assert to_full_width("東京都") == "東京都"

def test_full_width_restricted():
    assert to_full_width_digits("123ABC") == "１２３ABC"
    assert to_full_width_alpha("123ABC") == "123ＡＢＣ"

def test_width_folding_is_stable():
    samples = ["〒１２３−４５６７", "ＡＢＣ ｄｅｆ！", "tel: 03-1234-5678", "ｶﾞｰﾙ", "’quote‘"]
    for s in samples:
        half = to_half_width(s)
        assert to_half_width(to_full_width(half)) == half
