from jpform.converters.phone import extract_phone_digits, normalize_phone
from jpform.converters.postal import format_postal_code, normalize_postal_code
