"""Enumerate the distinct combinations of key values in a frame.

When joining frames by a set of key fields, each distinct
combination of values that the key fields take in a frame
is called a *dimension*. For example given the key fields
``Time`` and ``host`` and the rows::

    Time | host | cpu
    ---- | ---- | ---
    1    | a    | 0.5
    1    | b    | 0.7
    2    | a    | 0.2
    1    | a    | 0.9

the dimensions are ``(1, a)``, ``(1, b)`` and ``(2, a)``.

Dimensions are identified by the text form of their values,
so ``(1, "a")`` and ``("1", "a")`` are the same dimension,
but the values recorded for a dimension are kept as they were
found in the frame, as they are later used to find the matching rows.

>>> from framejoin.frame import Field
>>> dims = enumerate_dimensions([Field("Time", [1, 1, 2, 1]), Field("host", ["a", "b", "a", "a"])])
>>> [d.key for d in dims]
['1,a', '1,b', '2,a']
"""

from typing import Any

from ..frame import Field
from .keys import is_falsy, join_key


class Dimension:
    """One distinct combination of values for the key fields."""

    def __init__(self, keys: list[str], vals: list[Any]) -> None:
        """
        :param keys: The names of the key fields.
        :param vals: The value recorded for each key field.
        """
        self.keys = keys
        self.vals = vals
        self.key = join_key(vals)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Dimension):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)

    def __str__(self) -> str:
        return f"Dimension({', '.join(f'{k}={v!r}' for k, v in zip(self.keys, self.vals))})"

    __repr__ = __str__


def enumerate_dimensions(key_fields: list[Field]) -> list[Dimension]:
    """Get the distinct dimensions observed in the given key fields.

    Rows are scanned up to the length of the longest field,
    shorter fields contribute an empty string for the rows they lack.
    Empty values (``None``, ``0``, ``False``, ``""``) are recorded as
    an empty string too.

    The dimensions are returned in the order they are first seen.

    :param key_fields: The key fields of a single frame, in key order.
    """
    keys = [field.name for field in key_fields]
    max_len = max((len(field.values) for field in key_fields), default=0)

    dims: list[Dimension] = []
    seen: set[str] = set()
    for idx in range(max_len):
        vals = []
        for field in key_fields:
            value = field.values[idx] if idx < len(field.values) else ""
            vals.append("" if is_falsy(value) else value)

        dimension = Dimension(keys, vals)
        if dimension.key in seen:
            continue
        seen.add(dimension.key)
        dims.append(dimension)
    return dims
