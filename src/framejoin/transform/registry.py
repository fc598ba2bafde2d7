"""Lookup of the available transformers by their identifier.

Transformers are usually configured by editors that only know
the identifier of the transformer and produce a plain mapping of options:

>>> transformer = get_transformer("fullJoin", {"byFields": ["Time"]})
>>> str(transformer)
"FullJoinTransformer(by_fields=['Time'], strategy='dimensions')"
"""

from typing import Any

from .base import FrameTransformer
from .join import FullJoinTransformer
from .options import JoinOptions, SanitizeOptions
from .sanitize import SanitizeTransformer

STANDARD_TRANSFORMERS: dict[str, tuple[type[FrameTransformer], Any]] = {
    FullJoinTransformer.id: (FullJoinTransformer, JoinOptions),
    SanitizeTransformer.id: (SanitizeTransformer, SanitizeOptions),
}


def get_transformer(id: str, options: dict[str, Any] | None = None) -> FrameTransformer:
    """Build the transformer registered with the given id.

    :param id: The identifier of the transformer, like ``"fullJoin"``.
    :param options: The options of the transformer as a camelCase mapping,
                    ``None`` to use the default options.
    :raises KeyError: if no transformer is registered with that id.
    """
    try:
        transformer_class, options_class = STANDARD_TRANSFORMERS[id]
    except KeyError:
        raise KeyError(f"Unknown transformer: {id}") from None
    return transformer_class(options_class.from_dict(options))


def default_options(id: str) -> dict[str, Any]:
    """The options a transformer uses when none are provided.

    >>> default_options("mapping")
    {'byFields': ['Time']}
    """
    return get_transformer(id).options.to_dict()
