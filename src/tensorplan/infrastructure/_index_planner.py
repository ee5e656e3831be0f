"""
Index planning: translate indexing keys into engine selections.

This module is pure: it looks at a shape and a key and returns a `Selection`
describing which engine primitive to call and with which integers. Applying
the selection to an actual tensor is the job of the indexing mixin.

Bounds policy
-------------
- Integer keys are validated against both bounds of their axis; negative
  integers wrap once (``-1`` is the last element).
- Range endpoints default to ``0`` / the axis extent, negative endpoints wrap
  once, and the resolved range must satisfy ``0 <= begin <= end <= size``.
- Ranges with a step other than ``None``/``1`` are rejected; engine slices
  are contiguous.
"""

from __future__ import annotations

import logging
from enum import Enum
from numbers import Real
from typing import Any, Sequence

from ..domain._errors import (
    IndexOutOfRangeError,
    SliceDimensionError,
    UnsupportedKeyTypeError,
    UnsupportedValueTypeError,
)
from ..domain._index_key import IndexKeyKind, classify_key, is_integer_key
from ..domain._selection import (
    FULL_VIEW,
    AxisRange,
    DirectElement,
    MultiAxisSlice,
    Selection,
    SlicePlan,
)
from ..domain._tensor import ITensor

logger = logging.getLogger(__name__)


class ValueKind(Enum):
    """Kinds of values accepted by whole-array assignment."""

    TENSOR = "tensor"
    SCALAR = "scalar"
    LITERAL = "literal"


def classify_value(value: Any) -> ValueKind:
    """
    Map an assignment value to its `ValueKind`.

    Raises
    ------
    UnsupportedValueTypeError
        If the value is not a tensor, a real scalar or a list/tuple literal.
    """
    if isinstance(value, ITensor):
        return ValueKind.TENSOR
    if isinstance(value, Real):
        return ValueKind.SCALAR
    if isinstance(value, (list, tuple)):
        return ValueKind.LITERAL
    raise UnsupportedValueTypeError(value)


def _normalize_index(index: int, axis: int, shape: Sequence[int]) -> int:
    if axis >= len(shape):
        raise IndexOutOfRangeError.for_index(index, axis, None)
    size = shape[axis]
    resolved = int(index)
    if resolved < 0:
        resolved += size
    if not 0 <= resolved < size:
        raise IndexOutOfRangeError.for_index(index, axis, size)
    return resolved


def _resolve_range(key: slice, axis: int, shape: Sequence[int]) -> tuple[int, int]:
    if key.step not in (None, 1):
        raise UnsupportedKeyTypeError(key, "stepped ranges are not supported")
    for endpoint in (key.start, key.stop):
        if endpoint is not None and not is_integer_key(endpoint):
            raise UnsupportedKeyTypeError(key, "range endpoints must be integers")
    if axis >= len(shape):
        raise IndexOutOfRangeError.for_index(key, axis, None)

    size = shape[axis]
    begin = 0 if key.start is None else int(key.start)
    end = size if key.stop is None else int(key.stop)
    if begin < 0:
        begin += size
    if end < 0:
        end += size

    if not 0 <= begin <= end <= size:
        raise IndexOutOfRangeError.for_range(begin, end, axis, size)
    return begin, end


def plan_slice(shape: Sequence[int], keys: Sequence[Any]) -> SlicePlan:
    """
    Build the begin/end/reshape plan for a composite key.

    Parameters
    ----------
    shape : Sequence[int]
        Shape of the indexed tensor.
    keys : Sequence[Any]
        Per-axis keys, applied positionally to the leading axes. Each must be
        an integer or a range.

    Returns
    -------
    SlicePlan
        The plan. Integer keys collapse their axis; range keys keep it with
        extent ``end - begin``; uncovered trailing axes are appended as-is.

    Raises
    ------
    SliceDimensionError
        If there are more keys than axes.
    IndexOutOfRangeError
        If an integer or range falls outside its axis.
    UnsupportedKeyTypeError
        If a per-axis key is neither an integer nor a range.
    """
    if len(keys) > len(shape):
        raise SliceDimensionError(len(keys), len(shape))

    begins: list[int] = []
    ends: list[int] = []
    out_shape: list[int] = []

    for axis, key in enumerate(keys):
        match classify_key(key):
            case IndexKeyKind.INTEGER:
                index = _normalize_index(key, axis, shape)
                begins.append(index)
                ends.append(index + 1)
            case IndexKeyKind.RANGE:
                begin, end = _resolve_range(key, axis, shape)
                begins.append(begin)
                ends.append(end)
                out_shape.append(end - begin)
            case _:
                raise UnsupportedKeyTypeError(key)

    out_shape.extend(shape[len(keys) :])
    if not out_shape:
        out_shape.append(1)

    return SlicePlan(begins=tuple(begins), ends=tuple(ends), out_shape=tuple(out_shape))


def plan_index(shape: Sequence[int], key: Any) -> Selection:
    """
    Plan the engine selection for reading ``tensor[key]``.

    Parameters
    ----------
    shape : Sequence[int]
        Shape of the indexed tensor.
    key : Any
        The indexing key.

    Returns
    -------
    Selection
        - `DirectElement` for an integer key,
        - `FullView` for ``[:]``, ``[...]`` or ``[None]``,
        - `AxisRange` for any other range,
        - `MultiAxisSlice` for a composite key.

    Raises
    ------
    IndexOutOfRangeError
        If the key addresses positions outside the tensor.
    UnsupportedKeyTypeError
        If the key kind is not recognized.
    """
    selection: Selection
    match classify_key(key):
        case IndexKeyKind.INTEGER:
            selection = DirectElement(_normalize_index(key, 0, shape))
        case IndexKeyKind.RANGE:
            if key.start is None and key.stop is None and key.step in (None, 1):
                selection = FULL_VIEW
            else:
                selection = AxisRange(*_resolve_range(key, 0, shape))
        case IndexKeyKind.COMPOSITE:
            selection = MultiAxisSlice(plan_slice(shape, key))
        case IndexKeyKind.UNBOUNDED:
            selection = FULL_VIEW
        case IndexKeyKind.UNSUPPORTED:
            raise UnsupportedKeyTypeError(key)

    logger.debug("planned key %r over shape %s as %s", key, tuple(shape), selection)
    return selection
