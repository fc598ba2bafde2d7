"""Transformer that clamps invalid numeric values to zero.

Counters and gauges coming from some datasources report missing
samples as ``NaN``, infinities or negative values. The sanitizer
replaces them with ``0`` on the selected fields, leaving every
other field untouched:

>>> from framejoin.frame import Frame
>>> frame = Frame.from_pydict({"Time": [1, 2, 3], "bytes": [5, -3, float("nan")]})
>>> [sanitized] = SanitizeTransformer(SanitizeOptions(["bytes"])).transform([frame])
>>> sanitized["bytes"].values
[5, 0, 0]

Any value that is not a finite number is replaced,
including strings, booleans and ``None``.
"""

import logging
import math
from typing import Any

from ..frame import Frame
from .base import FrameTransformer
from .options import SanitizeOptions

logger = logging.getLogger(__name__)


def sanitize_value(value: Any) -> Any:
    """Get ``0`` for values that are not finite non negative numbers.

    >>> [sanitize_value(v) for v in (5, -3, float("inf"), "x", True, 2.5)]
    [5, 0, 0, 0, 0, 2.5]
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0
    if not math.isfinite(value) or value < 0:
        return 0
    return value


class SanitizeTransformer(FrameTransformer):
    """Replace non finite or negative values of the selected fields with zero.

    The frames are modified in place and the same list is returned.
    Applying the transformer multiple times gives the same result
    as applying it once.
    """

    id = "mapping"
    name = "Map some field into another value"
    description = "mapping"

    def __init__(self, options: SanitizeOptions | None = None) -> None:
        """
        :param options: The fields to sanitize.
        """
        self.options = options or SanitizeOptions()

    def __str__(self) -> str:
        return f"SanitizeTransformer(by_fields={sorted(self.options.by_fields)})"

    def transform(self, frames: list[Frame]) -> list[Frame]:
        for frame in frames:
            for field in frame.fields:
                if field.name not in self.options.by_fields:
                    continue
                field.values = [sanitize_value(v) for v in field.values]
                logger.debug("Sanitized field %s of frame %s", field.name, frame.name)
        return frames
