"""SHA-1 digests and HMAC-SHA1 over UTF-8 text.

Both helpers return None when the text cannot be encoded as UTF-8 (for
example when it contains lone surrogates).
"""

from __future__ import annotations

import hashlib
import hmac

SHA1_DIGEST_LENGTH = 20


def _utf8(text: str) -> bytes | None:
    try:
        return text.encode("utf-8")
    except UnicodeEncodeError:
        return None


def sha1(text: str) -> bytes | None:
    """Return the 20-byte SHA-1 digest of `text`."""
    data = _utf8(text)
    if data is None:
        return None
    return hashlib.sha1(data).digest()


def hmac_sha1(text: str, key: str) -> bytes | None:
    """Return the 20-byte HMAC-SHA1 of `text` keyed with `key`."""
    data = _utf8(text)
    key_data = _utf8(key)
    if data is None or key_data is None:
        return None
    return hmac.new(key_data, data, hashlib.sha1).digest()
