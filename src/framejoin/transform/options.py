"""Options of the transformers.

Options can be provided as keyword arguments or built from the
plain mapping that editors produce, where names are camelCase:

>>> JoinOptions.from_dict({"byFields": ["Time", "host"], "strategy": "rows"})
JoinOptions(by_fields=('Time', 'host'), strategy='rows', max_rows=1000000)
>>> JoinOptions()
JoinOptions(by_fields=('Time',), strategy='dimensions', max_rows=1000000)

Options are validated when created and never modified afterwards.
"""

from typing import Any, Iterable, Self

from .base import DEFAULT_KEY_FIELDS

DIMENSIONS_STRATEGY = "dimensions"
ROWS_STRATEGY = "rows"
STRATEGIES = (DIMENSIONS_STRATEGY, ROWS_STRATEGY)

DEFAULT_MAX_ROWS = 1_000_000


class InvalidOptionsError(ValueError):
    """An exception raised when transformer options are not valid."""

    pass


def _field_names(by_fields: Iterable[str] | None) -> tuple[str, ...]:
    if by_fields is None:
        return DEFAULT_KEY_FIELDS
    if isinstance(by_fields, str):
        raise InvalidOptionsError(
            f"byFields must be a list of field names, got {by_fields!r}"
        )
    names = tuple(by_fields)
    for name in names:
        if not isinstance(name, str):
            raise InvalidOptionsError(f"Field names must be strings, got {name!r}")
    return names


class JoinOptions:
    """Options of the :class:`framejoin.transform.join.FullJoinTransformer`."""

    def __init__(
        self,
        by_fields: Iterable[str] | None = None,
        strategy: str = DIMENSIONS_STRATEGY,
        max_rows: int | None = DEFAULT_MAX_ROWS,
    ) -> None:
        """
        :param by_fields: The names of the key fields to join on, order matters.
                          ``None`` means the default ``("Time",)``.
        :param strategy: ``"dimensions"`` to join by dimension and tile
                         mismatching rows, ``"rows"`` to join by matching rows.
        :param max_rows: The maximum number of rows a join step can produce,
                         ``None`` to disable the limit. The limit is absolute,
                         it applies to the rows of the result and not to how
                         many times the input rows were repeated, so joining
                         frames with more than ``max_rows`` rows one to one
                         exceeds it too.
        """
        if strategy not in STRATEGIES:
            raise InvalidOptionsError(
                f"Unknown join strategy {strategy!r}, expected one of {STRATEGIES}"
            )
        if max_rows is not None and (
            not isinstance(max_rows, int) or isinstance(max_rows, bool) or max_rows <= 0
        ):
            raise InvalidOptionsError(f"max_rows must be a positive integer, got {max_rows!r}")

        self.by_fields = _field_names(by_fields)
        self.strategy = strategy
        self.max_rows = max_rows

    @classmethod
    def from_dict(cls, options: dict[str, Any] | None) -> Self:
        """Build the options from a ``{"byFields": [...], ...}`` mapping."""
        options = options or {}
        return cls(
            by_fields=options.get("byFields"),
            strategy=options.get("strategy", DIMENSIONS_STRATEGY),
            max_rows=options.get("maxRows", DEFAULT_MAX_ROWS),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "byFields": list(self.by_fields),
            "strategy": self.strategy,
            "maxRows": self.max_rows,
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JoinOptions):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        return f"JoinOptions(by_fields={self.by_fields}, strategy={self.strategy!r}, max_rows={self.max_rows})"


class SanitizeOptions:
    """Options of the :class:`framejoin.transform.sanitize.SanitizeTransformer`.

    Differently from the join, the order of the fields doesn't matter,
    they are only used to check which fields have to be sanitized.
    """

    def __init__(self, by_fields: Iterable[str] | None = None) -> None:
        """
        :param by_fields: The names of the fields to sanitize.
                          ``None`` means the default ``("Time",)``.
        """
        self.by_fields = frozenset(_field_names(by_fields))

    @classmethod
    def from_dict(cls, options: dict[str, Any] | None) -> Self:
        """Build the options from a ``{"byFields": [...]}`` mapping."""
        options = options or {}
        return cls(by_fields=options.get("byFields"))

    def to_dict(self) -> dict[str, Any]:
        return {"byFields": sorted(self.by_fields)}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SanitizeOptions):
            return NotImplemented
        return self.by_fields == other.by_fields

    def __repr__(self) -> str:
        return f"SanitizeOptions(by_fields={sorted(self.by_fields)})"
