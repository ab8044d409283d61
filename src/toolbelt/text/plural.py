"""Russian plural forms for nouns following a numeral.

Russian picks one of three noun forms depending on the number:

- "one" (стол): last digit 1 (1, 21, 101)
- "few" (стола): last digit 2-4 (2, 23, 104)
- "many" (столов): everything else, and any number whose last two
  digits fall in 11-19

The sign of the number is ignored.
"""

from __future__ import annotations

from typing import NamedTuple


class WordForms(NamedTuple):
    """The three forms of a noun, e.g. ``WordForms("стол", "стола", "столов")``."""

    one: str
    few: str
    many: str


def plural_form(number: int, forms: tuple[str, str, str]) -> str:
    """Pick the form of a noun that agrees with `number`.

    Args:
        number: The numeral.
        forms: (one, few, many) forms of the noun.

    Returns:
        The matching form.

    Example:
        >>> plural_form(21, ("стол", "стола", "столов"))
        'стол'
    """
    one, few, many = forms
    n = abs(number)
    if 10 < n % 100 < 20:
        return many
    last = n % 10
    if last == 1:
        return one
    if 2 <= last <= 4:
        return few
    return many


def plural(word: str, number: int) -> str:
    """Inflect `word` for `number` using the regular endings "", "а", "ов".

    Example:
        >>> plural("стол", 5)
        'столов'
    """
    return plural_form(number, WordForms(word, word + "а", word + "ов"))
