"""
Closed classification of indexing keys.

Python indexing syntax produces keys of many runtime types. The planner only
recognizes a fixed set of kinds, so every key is first mapped to an
`IndexKeyKind` and the planner matches on that enum exhaustively:

=============  ==========================================  ====================
Kind           Python key                                  Effect
=============  ==========================================  ====================
INTEGER        ``t[2]`` (any Integral except bool)         collapses the axis
RANGE          ``t[1:3]``, ``t[:3]``, ``t[:]``             keeps the axis
COMPOSITE      ``t[2, 1:3]`` (tuple) or ``t[[2, 1:3]]``    per leading axis
UNBOUNDED      ``t[...]`` or ``t[None]``                   whole array
UNSUPPORTED    anything else                               rejected
=============  ==========================================  ====================
"""

from enum import Enum
from numbers import Integral
from typing import Any


class IndexKeyKind(Enum):
    """Kinds of index keys recognized by the planner."""

    INTEGER = "integer"
    RANGE = "range"
    COMPOSITE = "composite"
    UNBOUNDED = "unbounded"
    UNSUPPORTED = "unsupported"


def is_integer_key(key: Any) -> bool:
    """
    Return True if `key` is an integer index.

    ``bool`` is excluded even though it subclasses ``int``: ``t[True]`` is
    almost always a mistake rather than a request for row 1.
    """
    return isinstance(key, Integral) and not isinstance(key, bool)


def classify_key(key: Any) -> IndexKeyKind:
    """
    Map a runtime key to its `IndexKeyKind`.

    Parameters
    ----------
    key : Any
        Key as received by ``__getitem__`` / ``__setitem__``.

    Returns
    -------
    IndexKeyKind
        The key's kind. Composite keys are classified by container type only;
        their elements are validated when the plan is built.
    """
    if is_integer_key(key):
        return IndexKeyKind.INTEGER
    if isinstance(key, slice):
        return IndexKeyKind.RANGE
    if isinstance(key, (tuple, list)):
        return IndexKeyKind.COMPOSITE
    if key is None or key is Ellipsis:
        return IndexKeyKind.UNBOUNDED
    return IndexKeyKind.UNSUPPORTED
