"""Phone number and currency formatting."""

from __future__ import annotations

import re

from toolbelt.config import settings

PHONE_NUMBER_LENGTH = 10

_NON_DIGITS = re.compile(r"[^0-9]")


def digits_only(text: str) -> str:
    """Remove every character that is not an ASCII digit.

    Example:
        >>> digits_only("+7 (916) 123-45-67")
        '79161234567'
    """
    return _NON_DIGITS.sub("", text)


def as_phone_number(text: str, prefix: str | None = None) -> str:
    """Format the last ten characters of `text` as ``+7 XXX XXX XX XX``.

    Strings shorter than ten characters are returned unchanged, without
    digit filtering; pass the result of `digits_only` or `phone_number`
    if the input may contain punctuation.

    Args:
        text: Phone number, ideally digits only.
        prefix: Country prefix. Defaults to ``settings.PHONE_COUNTRY_PREFIX``.

    Example:
        >>> as_phone_number("9161234567")
        '+7 916 123 45 67'
    """
    if len(text) < PHONE_NUMBER_LENGTH:
        return text
    prefix = settings.PHONE_COUNTRY_PREFIX if prefix is None else prefix
    digits = text[-PHONE_NUMBER_LENGTH:]
    return f"{prefix} {digits[:3]} {digits[3:6]} {digits[6:8]} {digits[8:]}"


def phone_number(text: str) -> str:
    """Return the last ten digits of `text` (fewer if it has fewer).

    Example:
        >>> phone_number("+7 (916) 123-45-67")
        '9161234567'
    """
    return digits_only(text)[-PHONE_NUMBER_LENGTH:]


def rub(text: str) -> str:
    """Append the rouble sign.

    Example:
        >>> rub("100")
        '100₽'
    """
    return text + settings.CURRENCY_SYMBOL
