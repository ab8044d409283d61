"""Dictionary helpers.

Small, statically typed helpers for building, transforming and merging
dictionaries. None of them mutate their inputs unless the name says so
(`update_from`).
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping, MutableMapping
from typing import TypeVar, overload

K = TypeVar("K")
V = TypeVar("V")
U = TypeVar("U")
T = TypeVar("T")
NK = TypeVar("NK")


def from_pairs(pairs: Iterable[tuple[K, V]]) -> dict[K, V]:
    """Build a dictionary from key/value pairs.

    Later pairs overwrite earlier pairs with the same key.

    Example:
        >>> from_pairs([("a", 1), ("b", 2), ("a", 3)])
        {'a': 3, 'b': 2}
    """
    result: dict[K, V] = {}
    for key, value in pairs:
        result[key] = value
    return result


def map_values(mapping: Mapping[K, V], transform: Callable[[V], U]) -> dict[K, U]:
    """Transform every value, keeping the keys.

    The result is built separately from `mapping`, so an exception raised
    by `transform` propagates without leaving a partially transformed
    dictionary behind.

    Args:
        mapping: Source dictionary.
        transform: Function applied to each value.

    Returns:
        New dictionary with the same keys and transformed values.
    """
    return from_pairs((key, transform(value)) for key, value in mapping.items())


def map_items(
    mapping: Mapping[K, V],
    transform: Callable[[K, V], tuple[NK, U]],
) -> dict[NK, U]:
    """Transform every (key, value) pair into a new pair.

    If two pairs map to the same new key, the one produced last wins.
    """
    return from_pairs(transform(key, value) for key, value in mapping.items())


def update_from(target: MutableMapping[K, V], source: Mapping[K, V]) -> None:
    """Copy every entry of `source` into `target`, overwriting collisions."""
    for key, value in source.items():
        target[key] = value


def merge(left: Mapping[K, V], right: Mapping[K, V]) -> dict[K, V]:
    """Merge two dictionaries into a new one.

    Entries of `right` win when both contain the same key.

    Example:
        >>> merge({"a": 1, "b": 2}, {"b": 3})
        {'a': 1, 'b': 3}
    """
    merged = dict(left)
    update_from(merged, right)
    return merged


def get_or_default(mapping: Mapping[K, V], key: K, default: V) -> V:
    """Return the value stored for `key`, or `default` if absent."""
    if key in mapping:
        return mapping[key]
    return default


@overload
def value_of_type(mapping: Mapping[K, object], key: K, expected: type[T], default: T) -> T: ...


@overload
def value_of_type(
    mapping: Mapping[K, object], key: K, expected: type[T], default: None = None
) -> T | None: ...


def value_of_type(
    mapping: Mapping[K, object],
    key: K,
    expected: type[T],
    default: T | None = None,
) -> T | None:
    """Return the value for `key` only if it is an instance of `expected`.

    Missing keys and values of another type both yield `default`.

    Example:
        >>> value_of_type({"retries": "3"}, "retries", int, 0)
        0
    """
    value = mapping.get(key)
    if isinstance(value, expected):
        return value
    return default


def sanitized(mapping: Mapping[K, V | None]) -> dict[K, V]:
    """Drop every entry whose value is None.

    Falsy values other than None (0, "", False) are kept. Callers must not
    rely on the order of the result.
    """
    return {key: value for key, value in mapping.items() if value is not None}
