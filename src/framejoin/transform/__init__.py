"""The framejoin transformers.

Transformers receive a list of :class:`framejoin.frame.Frame`
and emit a new list of frames, so that they can be chained::

    [Frame, ...]-->Transformer1--[Frame, ...]-->Transformer2--[Frame, ...]

Two transformers are provided:

* :class:`FullJoinTransformer` joins all the frames on a set
  of key fields and emits a single frame.
* :class:`SanitizeTransformer` replaces non finite or negative
  values of some fields with zero.

>>> from framejoin.frame import Frame
>>> from framejoin.transform import FullJoinTransformer, JoinOptions
>>> cpu = Frame.from_pydict({"Time": [1, 2], "cpu": [0.5, 0.7]})
>>> mem = Frame.from_pydict({"Time": [1, 2], "mem": [512, 640]})
>>> [joined] = FullJoinTransformer(JoinOptions(["Time"])).transform([cpu, mem])
>>> joined.to_pydict()
{'Time': [1, 2], 'cpu': [0.5, 0.7], 'mem': [512, 640]}
"""

from .base import DEFAULT_KEY_FIELDS, FrameTransformer
from .join import DimensionJoinStrategy, FullJoinTransformer, RowMatchJoinStrategy
from .options import InvalidOptionsError, JoinOptions, SanitizeOptions
from .registry import get_transformer
from .sanitize import SanitizeTransformer
from .tables import RowLimitExceededError

__all__ = (
    "DEFAULT_KEY_FIELDS",
    "FrameTransformer",
    "FullJoinTransformer",
    "DimensionJoinStrategy",
    "RowMatchJoinStrategy",
    "JoinOptions",
    "SanitizeOptions",
    "InvalidOptionsError",
    "RowLimitExceededError",
    "SanitizeTransformer",
    "get_transformer",
)
