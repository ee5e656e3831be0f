"""
Shape inference for nested sequence literals.

`infer_shape` walks a nested ``list``/``tuple`` literal and returns the
rectangular shape it describes, together with the number of nesting levels
that were accepted as axes.

The first element fixes the nesting depth. Structure nested deeper than that
(in any element) is opaque leaf content, as is anything past the ``max_ndim``
budget. Elements that disagree with the first one in depth or extent at a
level it implies raise `ShapeInconsistencyError`.
"""

from __future__ import annotations

from typing import Any

from ..domain._config import MAXDIMS
from ..domain._errors import ShapeInconsistencyError


def _is_sequence(value: Any) -> bool:
    # Strings and bytes are leaves, never axes.
    return isinstance(value, (list, tuple))


def infer_shape(literal: Any, max_ndim: int = MAXDIMS) -> tuple[tuple[int, ...], int]:
    """
    Infer the shape of a nested literal.

    Parameters
    ----------
    literal : Any
        A scalar, or a ``list``/``tuple`` of nested literals.
    max_ndim : int, optional
        Recursion budget. Levels beyond it are treated as leaves.

    Returns
    -------
    tuple[tuple[int, ...], int]
        ``(shape, ndim)`` with ``len(shape) == ndim``.

    Raises
    ------
    ShapeInconsistencyError
        If some element disagrees with the first one in nesting depth or in
        extent at a level the first element implies.

    Examples
    --------
    >>> infer_shape([[1, 2], [3, 4], [5, 6]])
    ((3, 2), 2)
    >>> infer_shape([])
    ((0,), 1)
    >>> infer_shape(7)
    ((), 0)
    """
    if max_ndim == 0 or not _is_sequence(literal):
        return (), 0

    if len(literal) == 0 or max_ndim == 1:
        return (len(literal),), 1

    sub_shape, sub_ndim = infer_shape(literal[0], max_ndim - 1)
    shape = (len(literal),) + sub_shape

    accepted = sub_ndim
    for i in range(1, len(literal)):
        elem_shape, elem_ndim = infer_shape(literal[i], max_ndim - 1)

        elem_accepted = elem_ndim
        for j in range(min(elem_ndim, sub_ndim)):
            if elem_shape[j] != sub_shape[j]:
                elem_accepted = j
                break

        accepted = min(accepted, elem_accepted)

    if accepted < sub_ndim:
        raise ShapeInconsistencyError(
            f"Array has inconsistent dimensions: expected {sub_ndim} consistent "
            f"nested level(s) below axis 0 (shape {shape}), "
            f"but elements only agree on {accepted}"
        )

    return shape, sub_ndim + 1
