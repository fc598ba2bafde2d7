"""framejoin

Join and sanitize frames of named columns.

Data coming from multiple queries usually arrives as multiple frames,
one per series, each with its own ``Time`` column. To show them
in a single table they have to be aligned on their key columns,
which requires deciding what to do when frames have different
row counts, keys that only some frames have, or columns with the same name.

The package is constituted by multiple components, each isolated within its own
package and each self documented in literate programming style.

The primary components are:

* The Frames, the in-memory format of the data, see :mod:`framejoin.frame`.
* The Transformers, that join and sanitize frames, see :mod:`framejoin.transform`.
* The Utilities, like printing frames as text tables, see :mod:`framejoin.utils`.
"""

from . import frame, transform

__all__ = ("frame", "transform")
