"""Intermediate tables used while merging frames.

When two frames are merged by dimension, for each dimension
the rows of both frames matching it are extracted in a :class:`Table`,
the two tables are merged side by side and then all the merged
tables are concatenated to build the rows of the resulting frame.

Merging two tables that have a different number of rows
requires reconciling their cardinality. This is done by *tiling*:
each table is repeated as a whole as many times as necessary
for both to reach the least common multiple of their row counts.
Given a left table with 2 rows and a right table with 3 rows::

    left:        right:
    +----+       +-----+
    | a  |       | b   |
    +----+       +-----+
    | a1 |       | b1  |
    | a2 |       | b2  |
    +----+       | b3  |
                 +-----+

The left table is repeated 3 times and the right table 2 times,
so that both have 6 rows::

    merged:
    +----+-----+
    | a  | b   |
    +----+-----+
    | a1 | b1  |
    | a2 | b2  |
    | a1 | b3  |
    | a2 | b1  |
    | a1 | b2  |
    | a2 | b3  |
    +----+-----+

Note that the rows are aligned by position, not by value.

>>> merged = merge_tables(Table({"a": ["a1", "a2"]}), Table({"b": ["b1", "b2", "b3"]}))
>>> merged.num_rows
6
>>> merged["a"]
['a1', 'a2', 'a1', 'a2', 'a1', 'a2']
"""

import logging
from typing import Any, Iterable, Self

from ..frame import Frame
from .dimensions import Dimension
from .keys import gcd, strict_key, union

logger = logging.getLogger(__name__)


class RowLimitExceededError(Exception):
    """An exception raised when merging would produce too many rows."""

    pass


class Table:
    """An ordered mapping of column names to their values.

    All the columns of a table must have the same number of values.
    """

    def __init__(self, columns: dict[str, list[Any]] | None = None) -> None:
        """
        :param columns: The ``{name: values}`` of the table columns.
        :raises ValueError: if the columns have different lengths.
        """
        self.columns = dict(columns) if columns is not None else {}
        lengths = {len(values) for values in self.columns.values()}
        if len(lengths) > 1:
            raise ValueError(
                f"All table columns must have the same length, got {sorted(lengths)}"
            )

    @classmethod
    def empty(cls, names: Iterable[str]) -> Self:
        """Create a table with the given columns and no rows."""
        return cls({name: [] for name in names})

    @property
    def num_rows(self) -> int:
        for values in self.columns.values():
            return len(values)
        return 0

    @property
    def column_names(self) -> list[str]:
        return list(self.columns)

    def __getitem__(self, name: str) -> list[Any]:
        return self.columns[name]

    def __contains__(self, name: object) -> bool:
        return name in self.columns

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Table):
            return NotImplemented
        return list(self.columns.items()) == list(other.columns.items())

    def __repr__(self) -> str:
        return f"Table(columns={self.column_names}, rows={self.num_rows})"


def _check_row_limit(num_rows: int, max_rows: int | None) -> None:
    if max_rows is not None and num_rows > max_rows:
        raise RowLimitExceededError(
            f"Merging would produce {num_rows} rows, the limit is {max_rows}"
        )


class RowGroups:
    """Rows of a frame grouped by the values of some key fields.

    Grouping is done once, so that the rows matching any combination
    of key values can then be looked up without scanning the frame again.
    Values are grouped by their strict form (see :func:`strict_key`),
    so a row only matches values that are strictly equal to its own.
    Rows where a key is NaN, or where a key field is too short, never match.

    Keys that are not fields of the frame are ignored.

    >>> from framejoin.frame import Frame
    >>> groups = RowGroups(Frame.from_pydict({"Time": [1, "1", 1.0]}), ["Time"])
    >>> groups.rows([1])
    [0, 2]
    """

    def __init__(self, frame: Frame, keys: list[str]) -> None:
        """
        :param frame: The frame whose rows have to be grouped.
        :param keys: The names of the key fields.
        """
        self.positions = [pos for pos, key in enumerate(keys) if key in frame]
        keyfields = [frame[keys[pos]] for pos in self.positions]

        self.groups: dict[tuple, list[int]] = {}
        for idx in range(frame.length):
            if any(idx >= len(field.values) for field in keyfields):
                continue
            groupkey = tuple(strict_key(field.values[idx]) for field in keyfields)
            if None in groupkey:
                continue
            self.groups.setdefault(groupkey, []).append(idx)

    def rows(self, vals: list[Any]) -> list[int]:
        """Indices of the rows whose keys are strictly equal to ``vals``.

        :param vals: One value for each of the keys the rows were grouped by.
        """
        groupkey = tuple(strict_key(vals[pos]) for pos in self.positions)
        if None in groupkey:
            return []
        return self.groups.get(groupkey, [])


def take_rows(frame: Frame, indices: list[int]) -> Table:
    """Extract the given rows of a frame, one column for each field."""
    return Table(
        {
            field.name: [
                field.values[idx] if idx < len(field.values) else None
                for idx in indices
            ]
            for field in frame.fields
        }
    )


def match_rows(frame: Frame, dimension: Dimension, groups: RowGroups | None = None) -> Table:
    """Extract the rows of a frame that match a dimension.

    A row matches when, for every key of the dimension, the
    value of the frame field with that name is strictly equal
    to the value recorded in the dimension.

    The resulting table has one column for each field of the frame.

    :param groups: The rows of ``frame`` already grouped by the keys of the dimension,
                   avoids grouping them again when matching many dimensions.
    """
    if groups is None:
        groups = RowGroups(frame, dimension.keys)
    return take_rows(frame, groups.rows(dimension.vals))


def tile(table: Table, factor: int) -> Table:
    """Repeat all the rows of a table ``factor`` times.

    >>> tile(Table({"a": [1, 2]}), 3)["a"]
    [1, 2, 1, 2, 1, 2]
    """
    if factor <= 1:
        return table
    return Table({name: values * factor for name, values in table.columns.items()})


def merge_tables(left: Table, right: Table, max_rows: int | None = None) -> Table:
    """Merge two tables side by side, tiling them to the same number of rows.

    Columns of the ``right`` table replace the columns of the ``left``
    table with the same name.

    When either table has no rows the two can't be reconciled
    and an empty table with the columns of both is returned.

    :param left: The table whose columns come first.
    :param right: The table whose columns are added, or replace existing ones.
    :param max_rows: The maximum number of rows the merged table can have.
    :raises RowLimitExceededError: if the merged table would exceed ``max_rows``.
    """
    left_size = left.num_rows
    right_size = right.num_rows
    factor = gcd(left_size, right_size)
    if factor == 0:
        return Table.empty(union(left.column_names, right.column_names))

    left_factor = left_size // factor
    right_factor = right_size // factor
    _check_row_limit(left_size * right_factor, max_rows)

    columns = dict(tile(left, right_factor).columns)
    columns.update(tile(right, left_factor).columns)
    return Table(columns)


def concat_tables(tables: list[Table], max_rows: int | None = None) -> Table:
    """Concatenate the rows of multiple tables.

    The resulting table has all columns of all tables in first seen order,
    columns missing from one of the tables are filled with ``None``
    for the rows that table contributes.

    :raises RowLimitExceededError: if the result would exceed ``max_rows``.
    """
    _check_row_limit(sum(table.num_rows for table in tables), max_rows)

    names = union(*(table.column_names for table in tables))
    columns: dict[str, list[Any]] = {name: [] for name in names}
    for table in tables:
        for name in names:
            if name in table:
                columns[name].extend(table[name])
            else:
                if table.num_rows:
                    logger.debug("Padding column %s for %d rows", name, table.num_rows)
                columns[name].extend([None] * table.num_rows)
    return Table(columns)
