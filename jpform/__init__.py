# jpform
# 日本語フォーム向けの文字変換・検証・郵便番号→住所解決

from jpform.converters import (
    extract_phone_digits,
    format_postal_code,
    normalize_phone,
    normalize_postal_code,
)
from jpform.errors import (
    ResolverError,
    ResolverHTTPError,
    ResolverTimeoutError,
    ResolverTransportError,
)
from jpform.furigana import (
    FuriganaRegistry,
    add_first_name_reading,
    add_last_name_reading,
    get_first_name_furigana,
    get_full_name_furigana,
    get_last_name_furigana,
)
from jpform.postal import (
    Address,
    ApiResolver,
    BundledResolver,
    CustomResolver,
    PostalDataset,
    PostalResolver,
    bundled_resolver,
    create_api_resolver,
    create_custom_resolver,
    resolve_postal_code,
)
from jpform.prefecture import (
    PREFECTURES,
    PREFECTURES_KANA,
    get_prefecture_code,
    get_prefecture_name,
    is_prefecture,
)
from jpform.utils import (
    to_full_width,
    to_full_width_alpha,
    to_full_width_digits,
    to_full_width_kana,
    to_half_width,
    to_half_width_alpha,
    to_half_width_digits,
    to_hiragana,
    to_katakana,
)
from jpform.validators import (
    is_free_dial_phone,
    is_ip_phone,
    is_landline_phone,
    is_mobile_phone,
    is_valid_phone,
    is_valid_postal_code,
)

__version__ = "2.0.0"

__all__ = [
    "__version__",
    # converters
    "normalize_postal_code",
    "format_postal_code",
    "normalize_phone",
    "extract_phone_digits",
    # errors
    "ResolverError",
    "ResolverTimeoutError",
    "ResolverTransportError",
    "ResolverHTTPError",
    # furigana
    "FuriganaRegistry",
    "get_last_name_furigana",
    "get_first_name_furigana",
    "get_full_name_furigana",
    "add_last_name_reading",
    "add_first_name_reading",
    # postal
    "Address",
    "PostalDataset",
    "PostalResolver",
    "BundledResolver",
    "ApiResolver",
    "CustomResolver",
    "bundled_resolver",
    "create_api_resolver",
    "create_custom_resolver",
    "resolve_postal_code",
    # prefecture
    "PREFECTURES",
    "PREFECTURES_KANA",
    "get_prefecture_code",
    "get_prefecture_name",
    "is_prefecture",
    # utils
    "to_half_width",
    "to_half_width_digits",
    "to_half_width_alpha",
    "to_full_width",
    "to_full_width_digits",
    "to_full_width_alpha",
    "to_full_width_kana",
    "to_katakana",
    "to_hiragana",
    # validators
    "is_valid_postal_code",
    "is_valid_phone",
    "is_mobile_phone",
    "is_ip_phone",
    "is_free_dial_phone",
    "is_landline_phone",
]
