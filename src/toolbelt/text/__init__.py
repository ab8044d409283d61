"""String helpers: phone formatting, hashing and Russian plurals."""

from toolbelt.text.crypto import hmac_sha1, sha1
from toolbelt.text.plural import WordForms, plural, plural_form
from toolbelt.text.strings import as_phone_number, digits_only, phone_number, rub

__all__ = [
    "WordForms",
    "as_phone_number",
    "digits_only",
    "hmac_sha1",
    "phone_number",
    "plural",
    "plural_form",
    "rub",
    "sha1",
]
