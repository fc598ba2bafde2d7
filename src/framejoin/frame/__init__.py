"""Frames of named columns.

A frame is the unit of data the transformers consume and emit:
an ordered list of :class:`Field` objects, each holding one named
column of values. All the fields of a frame are expected to have
the same number of values, the frame's row count.

Differently from Arrow record batches, the values of a field
are plain Python objects and a single column can mix numbers,
strings, booleans and ``None``. This is what frames coming from
heterogeneous datasources usually look like, and the join
transformers have precise rules on how those mixed values compare.

Frames can be converted to and from Arrow, which is the
most convenient way to load them from files:

>>> import pyarrow as pa
>>> from framejoin.frame import Frame
>>> frame = Frame.from_arrow(pa.table({"Time": [1, 2, 3], "cpu": [0.5, 0.7, 0.2]}))
>>> frame.field_names
['Time', 'cpu']
>>> frame.length
3
>>> frame["cpu"]
Field(name='cpu', type='number', values=[0.5, 0.7, 0.2])
"""

from .frame import Field, FieldType, Frame, FrameError, guess_field_type

__all__ = ("Field", "FieldType", "Frame", "FrameError", "guess_field_type")
