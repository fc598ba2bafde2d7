"""The Frame and Field objects themselves."""

import datetime
from typing import Any, Iterator, Self

import pyarrow as pa
import pyarrow.csv


class FieldType:
    """Names of the kinds of values a field can hold.

    The type of a field is informative only, it is carried
    through every transformation unchanged and it is never
    used to decide how values are compared.
    """

    TIME = "time"
    NUMBER = "number"
    STRING = "string"
    BOOLEAN = "boolean"
    OTHER = "other"


def guess_field_type(values: list[Any]) -> str:
    """Guess the :class:`FieldType` from the first non null value.

    >>> guess_field_type([None, 3.5, "x"])
    'number'
    >>> guess_field_type([])
    'other'
    """
    for value in values:
        if value is None:
            continue
        if isinstance(value, bool):
            return FieldType.BOOLEAN
        if isinstance(value, (int, float)):
            return FieldType.NUMBER
        if isinstance(value, str):
            return FieldType.STRING
        if isinstance(value, (datetime.datetime, datetime.date)):
            return FieldType.TIME
        return FieldType.OTHER
    return FieldType.OTHER


def field_type_from_arrow(datatype: pa.DataType) -> str:
    """Map an Arrow data type to a :class:`FieldType`."""
    if pa.types.is_timestamp(datatype) or pa.types.is_date(datatype):
        return FieldType.TIME
    if (
        pa.types.is_integer(datatype)
        or pa.types.is_floating(datatype)
        or pa.types.is_decimal(datatype)
    ):
        return FieldType.NUMBER
    if pa.types.is_string(datatype) or pa.types.is_large_string(datatype):
        return FieldType.STRING
    if pa.types.is_boolean(datatype):
        return FieldType.BOOLEAN
    return FieldType.OTHER


class FrameError(Exception):
    """An exception raised when a frame has an invalid shape."""

    pass


class Field:
    """A named column of values.

    The ``config`` of a field is opaque to the transformers,
    it is whatever display or unit configuration the producer of the
    data attached to the column and it's passed through as is.
    """

    def __init__(
        self,
        name: str,
        values: list[Any] | None = None,
        type: str | None = None,
        config: dict[str, Any] | None = None,
    ) -> None:
        """
        :param name: The name of the column, unique within a frame.
        :param values: The values of the column, one per row.
        :param type: The :class:`FieldType` of the values,
                     guessed from the values when not provided.
        :param config: Arbitrary configuration carried by the field.
        """
        self.name = name
        self.values = list(values) if values is not None else []
        self.type = type or guess_field_type(self.values)
        self.config = config if config is not None else {}

    def __len__(self) -> int:
        return len(self.values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Field):
            return NotImplemented
        return (
            self.name == other.name
            and self.type == other.type
            and self.config == other.config
            and self.values == other.values
        )

    def __repr__(self) -> str:
        config = f", config={self.config!r}" if self.config else ""
        return f"Field(name={self.name!r}, type={self.type!r}{config}, values={self.values!r})"

    def with_values(self, values: list[Any]) -> Self:
        """Create a new field like this one, but holding different values.

        The name, type and config are preserved, the config
        is shared with the original field as it's never modified.
        """
        return self.__class__(self.name, values, type=self.type, config=self.config)


class Frame:
    """An ordered list of fields with parallel rows.

    Each row of the frame is addressed by the same index in the
    values of every field. The frame itself doesn't enforce that
    all fields have the same length, as frames are usually built
    field by field, but :meth:`validate` can be used to check it.
    """

    def __init__(self, fields: list[Field] | None = None, name: str | None = None) -> None:
        """
        :param fields: The fields (columns) of the frame.
        :param name: An optional name for the frame, usually the series name.
        """
        self.fields = list(fields) if fields is not None else []
        self.name = name

    @classmethod
    def from_pydict(cls, data: dict[str, list[Any]], name: str | None = None) -> Self:
        """Build a frame from a ``{name: values}`` dictionary.

        >>> Frame.from_pydict({"Time": [1, 2], "a": [10, 20]}).to_pydict()
        {'Time': [1, 2], 'a': [10, 20]}
        """
        frame = cls([Field(k, v) for k, v in data.items()], name=name)
        frame.validate()
        return frame

    @classmethod
    def from_arrow(cls, data: pa.Table | pa.RecordBatch, name: str | None = None) -> Self:
        """Build a frame from a :class:`pyarrow.Table` or :class:`pyarrow.RecordBatch`.

        The type of each field is derived from the Arrow type of the column.
        """
        return cls(
            [
                Field(
                    colname,
                    data.column(idx).to_pylist(),
                    type=field_type_from_arrow(data.schema.field(idx).type),
                )
                for idx, colname in enumerate(data.column_names)
            ],
            name=name,
        )

    @classmethod
    def open_csv(cls, filename: str) -> Self:
        """Load a local CSV file in a frame.

        :param filename: The path to a local CSV file.
        """
        return cls.from_arrow(pa.csv.read_csv(filename))

    @property
    def length(self) -> int:
        """The number of rows, as given by the first field."""
        for field in self.fields:
            return len(field.values)
        return 0

    @property
    def field_names(self) -> list[str]:
        return [field.name for field in self.fields]

    def field(self, name: str) -> Field | None:
        """Get the first field with the given name, if any."""
        for field in self.fields:
            if field.name == name:
                return field
        return None

    def __getitem__(self, name: str) -> Field:
        field = self.field(name)
        if field is None:
            raise KeyError(name)
        return field

    def __contains__(self, name: object) -> bool:
        return any(field.name == name for field in self.fields)

    def __iter__(self) -> Iterator[Field]:
        return iter(self.fields)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Frame):
            return NotImplemented
        return self.name == other.name and self.fields == other.fields

    def __repr__(self) -> str:
        return f"Frame(name={self.name!r}, fields={self.field_names}, rows={self.length})"

    def clone(self) -> Self:
        """Deep copy the frame.

        The values of every field are copied, so the clone
        can be modified without affecting the original frame.
        """
        return self.__class__(
            [field.with_values(list(field.values)) for field in self.fields],
            name=self.name,
        )

    def validate(self) -> None:
        """Check that field names are unique and all fields have the same length.

        :raises FrameError: if the frame has an invalid shape.
        """
        seen = set()
        for field in self.fields:
            if field.name in seen:
                raise FrameError(f"Duplicate field name: {field.name}")
            seen.add(field.name)
            if len(field.values) != self.length:
                raise FrameError(
                    f"Field {field.name} has {len(field.values)} values, expected {self.length}"
                )

    def to_pydict(self) -> dict[str, list[Any]]:
        """Get the values of the frame as a ``{name: values}`` dictionary."""
        return {field.name: list(field.values) for field in self.fields}

    def to_arrow(self) -> pa.Table:
        """Convert the frame to a :class:`pyarrow.Table`.

        Arrow requires each column to have a single type,
        so columns mixing values of different kinds can't be converted
        and will raise the error emitted by :func:`pyarrow.array`.
        """
        return pa.Table.from_arrays(
            [pa.array(field.values) for field in self.fields],
            names=self.field_names,
        )
