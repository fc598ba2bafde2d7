"""Helpers to compare key values and combine lists of names.

Frames can hold columns that mix numbers, strings, booleans and ``None``,
so when rows have to be aligned between frames it's necessary to decide
when two values are "the same". The join transformers use two different
kinds of equality, and they are intentionally kept separate:

**Coerced equality** compares the text form of the values,
so ``1`` and ``"1"`` are considered the same. This is how
dimensions (distinct combinations of key values) are identified
across frames:

>>> coerced_equal(1, "1")
True
>>> coerced_equal(2.0, "2")
True

**Strict equality** requires the values to be of the same kind
and to be equal, so ``1`` and ``"1"`` differ. This is how rows
are matched against a recorded key value:

>>> strict_equal(1, "1")
False
>>> strict_equal(1, 1.0)
True
>>> strict_equal(True, 1)
False
"""

import math
from typing import Any, Iterable


def to_key_string(value: Any) -> str:
    """Get the text form of a value used when coercing it for comparison.

    >>> [to_key_string(v) for v in (None, True, 3.0, 2.5, float("inf"), "a")]
    ['', 'true', '3', '2.5', 'Infinity', 'a']
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer():
            return str(int(value))
    return str(value)


def join_key(values: Iterable[Any]) -> str:
    """Coerce multiple values to a single comma separated key.

    >>> join_key([1, "a", None])
    '1,a,'
    """
    return ",".join(to_key_string(v) for v in values)


def is_falsy(value: Any) -> bool:
    """Check if a value counts as empty when recording a key.

    ``None``, ``False``, zero, the empty string and NaN are all empty.
    """
    if value is None:
        return True
    if isinstance(value, float) and math.isnan(value):
        return True
    if isinstance(value, (bool, int, float, str)):
        return not value
    return False


def _value_kind(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    return type(value).__name__


def strict_equal(left: Any, right: Any) -> bool:
    """Values are equal only if they are of the same kind and equal."""
    key = strict_key(left)
    return key is not None and key == strict_key(right)


def strict_key(value: Any) -> tuple[str, Any] | None:
    """Hashable form of a value, equal for values that are strictly equal.

    Used to index rows by their key values. ``None`` is returned
    for NaN, which is never strictly equal to anything.

    >>> strict_key(1) == strict_key(1.0)
    True
    >>> strict_key(True) == strict_key(1)
    False
    >>> strict_key(float("nan")) is None
    True
    """
    if isinstance(value, float) and math.isnan(value):
        return None
    return (_value_kind(value), value)


def coerced_equal(left: Any, right: Any) -> bool:
    """Values are equal if their text forms are equal."""
    return to_key_string(left) == to_key_string(right)


def intersection(first: Iterable[str], *others: Iterable[str]) -> list[str]:
    """Names present in all the given sequences.

    The order is the one of the first sequence and duplicates are removed.

    >>> intersection(["Time", "host", "Time"], ["a", "host", "Time"])
    ['Time', 'host']
    """
    sets = [set(other) for other in others]
    result: list[str] = []
    for name in first:
        if name in result:
            continue
        if all(name in s for s in sets):
            result.append(name)
    return result


def union(*sequences: Iterable[str]) -> list[str]:
    """Names present in any of the given sequences, in first seen order.

    >>> union(["Time", "a"], ["Time", "b", "a"])
    ['Time', 'a', 'b']
    """
    result: list[str] = []
    for sequence in sequences:
        for name in sequence:
            if name not in result:
                result.append(name)
    return result


def gcd(num1: int, num2: int) -> int:
    """Greatest common divisor of two row counts.

    Differently from :func:`math.gcd`, when either count is ``0``
    the result is ``0``, meaning the two counts can't be reconciled.

    >>> gcd(4, 6)
    2
    >>> gcd(0, 3)
    0
    """
    if num1 == 0 or num2 == 0:
        return 0
    return math.gcd(num1, num2)
