"""Transformers that join multiple frames into one.

The frames are joined on a set of key fields, by default ``Time``,
so that multiple series can be shown as columns of a single table.
The frames are folded left to right: the first frame is copied
and each following frame is merged into the result of the previous step.

Two strategies are available to merge frames, and they produce different
results when frames have duplicated keys, keys missing in some of the frames
or columns with the same name.

Dimensions Strategy
===================

Provided by :class:`DimensionJoinStrategy`, it is the default strategy.
Before merging, the distinct combinations of key values (dimensions)
of every frame are collected, and only the dimensions that appear in all
the frames are kept. Dimensions are compared by the text form of their values.

Then for each kept dimension, the rows of the two frames matching it are
extracted and merged side by side. When the frames have a different number
of rows for a dimension, the rows are repeated to the least common multiple
of the two counts (see :mod:`framejoin.transform.tables`).
Columns existing in both frames take the values of the frame being merged.

>>> from framejoin.frame import Frame
>>> from framejoin.transform import FullJoinTransformer, JoinOptions
>>> a = Frame.from_pydict({"Time": [1, 2, 3], "a": [10, 20, 30]})
>>> b = Frame.from_pydict({"Time": [2, 3, 4], "b": [100, 200, 300]})
>>> [joined] = FullJoinTransformer().transform([a, b])
>>> joined.to_pydict()
{'Time': [2, 3], 'a': [20, 30], 'b': [100, 200]}

Rows Strategy
=============

Provided by :class:`RowMatchJoinStrategy`, for each row of the accumulated
result it looks for the rows of the frame being merged that have strictly
equal key values. A row with no matches is dropped, a row with multiple
matches is repeated once for each match.
Columns existing in both frames keep the values of the accumulated result.

>>> a = Frame.from_pydict({"Time": [1, 2], "a": [1, 2]})
>>> b = Frame.from_pydict({"Time": [2, 3], "b": [9, 8]})
>>> [joined] = FullJoinTransformer(JoinOptions(strategy="rows")).transform([a, b])
>>> joined.to_pydict()
{'Time': [2], 'a': [2], 'b': [9]}

In both cases, if any of the frames lacks one of the key fields
the frames are returned unmodified.
"""

import abc
import logging
from typing import Any

from ..frame import Field, Frame
from .base import FrameTransformer
from .dimensions import Dimension, enumerate_dimensions
from .keys import intersection, union
from .options import DIMENSIONS_STRATEGY, JoinOptions
from .tables import (
    RowGroups,
    RowLimitExceededError,
    Table,
    concat_tables,
    match_rows,
    merge_tables,
)

logger = logging.getLogger(__name__)


def find_key_fields(frame: Frame, names: tuple[str, ...]) -> list[Field] | None:
    """Get the fields of a frame with the given names, in the same order.

    Returns ``None`` if any of the names is not a field of the frame.
    """
    fields = []
    for name in names:
        field = frame.field(name)
        if field is None:
            return None
        fields.append(field)
    return fields


def _value_at(field: Field, idx: int) -> Any:
    return field.values[idx] if idx < len(field.values) else None


class JoinStrategy(abc.ABC):
    """How multiple frames are merged into a single one."""

    def __init__(self, by_fields: tuple[str, ...], max_rows: int | None = None) -> None:
        """
        :param by_fields: The key fields to join on.
        :param max_rows: The maximum number of rows a merge step can produce.
        """
        self.by_fields = by_fields
        self.max_rows = max_rows

    @abc.abstractmethod
    def join(self, frames: list[Frame]) -> Frame:
        """Fold all the frames into a single one.

        All the frames are expected to have the key fields,
        the input frames are never modified.
        """
        ...


class DimensionJoinStrategy(JoinStrategy):
    """Join frames on the dimensions they all share."""

    def join_domain(self, frames: list[Frame]) -> list[Dimension]:
        """Collect the dimensions that appear in every frame.

        Each frame votes once for each of its distinct dimensions,
        only the dimensions that got a vote from all frames are kept.
        The kept dimensions are in the order they were first seen
        and record the values of the first frame that had them.
        """
        votes: dict[str, int] = {}
        recorded: dict[str, Dimension] = {}
        for frame in frames:
            for dimension in enumerate_dimensions(find_key_fields(frame, self.by_fields)):
                if dimension.key in recorded:
                    votes[dimension.key] += 1
                    continue
                recorded[dimension.key] = dimension
                votes[dimension.key] = 1

        return [dim for key, dim in recorded.items() if votes[key] == len(frames)]

    def join(self, frames: list[Frame]) -> Frame:
        dimensions = self.join_domain(frames)
        logger.debug("Joining %d frames on %d dimensions", len(frames), len(dimensions))

        result = frames[0].clone()
        for frame in frames[1:]:
            result = self.merge(result, frame, dimensions)
        return result

    def merge(self, prev: Frame, now: Frame, dimensions: list[Dimension]) -> Frame:
        """Merge the rows of two frames matching each dimension.

        The merged values replace the values of the fields of ``prev``,
        fields that only exist in ``now`` are appended.
        """
        keys = list(self.by_fields)
        prev_groups = RowGroups(prev, keys)
        now_groups = RowGroups(now, keys)
        tables = [
            merge_tables(
                match_rows(prev, dim, prev_groups),
                match_rows(now, dim, now_groups),
                self.max_rows,
            )
            for dim in dimensions
        ]
        if not tables:
            tables = [Table.empty(union(prev.field_names, now.field_names))]
        merged = concat_tables(tables, self.max_rows)

        fields = [field.with_values(merged[field.name]) for field in prev.fields]
        for field in now.fields:
            if field.name in prev or field.name not in merged:
                continue
            fields.append(field.with_values(merged[field.name]))
        return Frame(fields, name=prev.name)


class RowMatchJoinStrategy(JoinStrategy):
    """Join frames by matching each row with the rows having equal keys."""

    def join(self, frames: list[Frame]) -> Frame:
        result = frames[0].clone()
        for frame in frames[1:]:
            result = self.merge(result, frame)
        return result

    def index_rows(self, frame: Frame, keys: list[str]) -> dict[str, RowGroups]:
        """Index the rows of ``frame`` by the value of each key field, separately."""
        return {key: RowGroups(frame, [key]) for key in keys}

    def matching_rows(self, index: dict[str, RowGroups], keyvalues: dict[str, Any]) -> list[int]:
        """Indices of the indexed rows that have all the given key values.

        The candidate rows of each key are looked up in the index
        and then intersected. No keys means no row can match.

        :param index: The rows of a frame indexed by :meth:`index_rows`.
        :param keyvalues: The ``{key: value}`` the rows have to match.
        """
        if not keyvalues:
            return []

        candidates: set[int] | None = None
        for key, value in keyvalues.items():
            matching = set(index[key].rows([value]))
            candidates = matching if candidates is None else candidates & matching
            if not candidates:
                return []
        return sorted(candidates)

    def merge(self, prev: Frame, now: Frame) -> Frame:
        """Merge ``now`` into ``prev``, dropping rows of ``prev`` that have no match.

        Fields that exist in both frames keep the values of ``prev``.
        """
        keys = intersection(self.by_fields, prev.field_names, now.field_names)
        new_fields = [field for field in now.fields if field.name not in prev]
        columns: dict[str, list[Any]] = {
            name: [] for name in union(prev.field_names, now.field_names)
        }

        index = self.index_rows(now, keys)
        num_rows = 0
        dropped = 0
        for idx in range(prev.length):
            keyvalues = {key: _value_at(prev[key], idx) for key in keys}
            matches = self.matching_rows(index, keyvalues)
            if not matches:
                dropped += 1
                continue

            num_rows += len(matches)
            if self.max_rows is not None and num_rows > self.max_rows:
                raise RowLimitExceededError(
                    f"Merging would produce more than {self.max_rows} rows"
                )
            for match in matches:
                for field in prev.fields:
                    columns[field.name].append(_value_at(field, idx))
                for field in new_fields:
                    columns[field.name].append(_value_at(field, match))

        if dropped:
            logger.debug("Dropped %d rows with no match on %s", dropped, keys)

        fields = [field.with_values(columns[field.name]) for field in prev.fields]
        fields.extend(field.with_values(columns[field.name]) for field in new_fields)
        return Frame(fields, name=prev.name)


class FullJoinTransformer(FrameTransformer):
    """Join all the frames on the key fields and emit a single frame.

    The strategy used to join is chosen by :class:`JoinOptions`,
    see the module documentation for how the strategies differ.
    """

    id = "fullJoin"
    name = "Series as columns"
    description = "Groups series by field and returns values as columns"

    def __init__(self, options: JoinOptions | None = None) -> None:
        """
        :param options: The key fields and strategy of the join.
        """
        self.options = options or JoinOptions()
        if self.options.strategy == DIMENSIONS_STRATEGY:
            self.strategy: JoinStrategy = DimensionJoinStrategy(
                self.options.by_fields, self.options.max_rows
            )
        else:
            self.strategy = RowMatchJoinStrategy(
                self.options.by_fields, self.options.max_rows
            )

    def __str__(self) -> str:
        return f"FullJoinTransformer(by_fields={list(self.options.by_fields)}, strategy={self.options.strategy!r})"

    def transform(self, frames: list[Frame]) -> list[Frame]:
        """Join the frames, returning a list with only the joined frame.

        If any frame lacks one of the key fields, the very same
        list of frames is returned without changes.
        """
        if not frames:
            return [Frame()]

        for frame in frames:
            if find_key_fields(frame, self.options.by_fields) is None:
                logger.debug(
                    "Frame %s lacks some of the key fields %s, join skipped",
                    frame.name,
                    list(self.options.by_fields),
                )
                return frames

        return [self.strategy.join(frames)]
