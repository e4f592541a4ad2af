from jpform.utils.kana import to_full_width_kana, to_hiragana, to_katakana
from jpform.utils.textnorm import (
    to_full_width,
    to_full_width_alpha,
    to_full_width_digits,
    to_half_width,
    to_half_width_alpha,
    to_half_width_digits,
)
