"""Base interface for frame transformers.

A transformer receives a list of frames and emits a new list
of frames, which allows to chain multiple transformers::

    [Frame, ...]-->Transformer1--[Frame, ...]-->Transformer2--[Frame, ...]-->...

Sequencing the transformers is left to the caller,
each transformer only knows about its own options.
"""

import abc

from ..frame import Frame

DEFAULT_KEY_FIELDS = ("Time",)
"""The key fields used when none are configured, frames are usually time series."""


class FrameTransformer(abc.ABC):
    """A transformation applied to a list of frames.

    Subclasses declare their identity through the ``id``, ``name``
    and ``description`` class attributes and implement :meth:`transform`.

    For example a transformer that forwards the frames
    as they are, after printing them, can be implemented as::

        class DebugTransformer(FrameTransformer):
            id = "debug"
            name = "Debug"
            description = "Print frames"

            def transform(self, frames):
                for frame in frames:
                    print(frame)
                return frames

            def __str__(self):
                return "DebugTransformer()"
    """

    id: str = ""
    name: str = ""
    description: str = ""

    @abc.abstractmethod
    def transform(self, frames: list[Frame]) -> list[Frame]:
        """Apply the transformation and return the resulting frames."""
        ...

    @abc.abstractmethod
    def __str__(self) -> str:
        """Human readable representation of the transformer."""
        ...

    def __call__(self, frames: list[Frame]) -> list[Frame]:
        return self.transform(frames)
