"""
Indexing mixin: ``__getitem__`` / ``__setitem__`` for tensors.

Reading plans the key with :func:`plan_index` and applies the resulting
`Selection` through the tensor's engine. Writing selects a view with the same
planner and then performs a whole-array assignment into that view; because
engine views alias their parent's storage, the write reaches the parent.
"""

from __future__ import annotations

import logging
from typing import Any

from .....domain._errors import UnsupportedKeyTypeError
from .....domain._index_key import IndexKeyKind, classify_key
from .....domain._selection import (
    AxisRange,
    DirectElement,
    FullView,
    MultiAxisSlice,
    Selection,
)
from .....domain._tensor import ITensor
from ...._index_planner import ValueKind, classify_value, plan_index, plan_slice
from ...._shape_inference import infer_shape

logger = logging.getLogger(__name__)


class TensorMixinIndexing:
    """
    Indexing and assignment for the concrete Tensor implementation.

    Notes
    -----
    Methods assume the host class provides ``.shape``, ``.handle`` and
    ``.engine`` as described by `ITensor`.
    """

    def __getitem__(self: ITensor, key: Any) -> ITensor:
        """
        Return a view of this tensor selected by `key`.

        Parameters
        ----------
        key : int, slice, tuple, list, None or Ellipsis
            - ``t[i]``: sub-tensor at axis-0 position `i` (axis 0 dropped)
            - ``t[a:b]``: contiguous range along axis 0
            - ``t[:]``, ``t[...]``: this tensor itself
            - ``t[i, a:b]``: per-axis keys, then reshaped

        Raises
        ------
        IndexOutOfRangeError
            If the key addresses positions outside the tensor.
        UnsupportedKeyTypeError
            If the key kind is not recognized.
        """
        return self._apply_selection(plan_index(self.shape, key))

    def _apply_selection(self: ITensor, selection: Selection) -> ITensor:
        engine = self.engine
        match selection:
            case FullView():
                return self
            case DirectElement(index=index):
                return engine.element_view(self, index)
            case AxisRange(begin=begin, end=end):
                return engine.range_slice(self, begin, end)
            case MultiAxisSlice(plan=plan):
                window = engine.slice(self, plan.begins, plan.ends)
                return engine.reshape(window, plan.out_shape)
        raise TypeError(f"unknown selection {selection!r}")

    def __setitem__(self: ITensor, key: Any, value: Any) -> None:
        """
        Assign `value` into the region of this tensor selected by `key`.

        Parameters
        ----------
        key : int, slice, tuple, list, None or Ellipsis
            Region to assign. Integer and range keys select a single-axis
            view; composite keys select a multi-axis window; ``None`` /
            ``...`` / ``[:]`` select the whole tensor.
        value : ITensor, real scalar, or nested list/tuple
            - tensor: elementwise copy (skipped when it aliases this storage)
            - scalar: broadcast fill
            - literal: bulk structured copy

        Raises
        ------
        UnsupportedValueTypeError
            If `value` is none of the accepted kinds. Raised before any
            engine mutation.
        UnsupportedKeyTypeError
            If the key kind is not recognized.
        """
        kind = classify_value(value)

        match classify_key(key):
            case IndexKeyKind.INTEGER | IndexKeyKind.RANGE:
                self[key][None] = value
            case IndexKeyKind.COMPOSITE:
                plan = plan_slice(self.shape, key)
                window = self.engine.slice(self, plan.begins, plan.ends)
                if window.shape != plan.out_shape:
                    value, kind = window._fit_to_window(value, kind, plan.out_shape)
                window._assign_whole(value, kind)
            case IndexKeyKind.UNBOUNDED:
                self._assign_whole(value, kind)
            case IndexKeyKind.UNSUPPORTED:
                raise UnsupportedKeyTypeError(key)

    def _fit_to_window(
        self: ITensor, value: Any, kind: ValueKind, out_shape: tuple[int, ...]
    ) -> tuple[Any, ValueKind]:
        """
        Adapt a value laid out as a composite key's `out_shape` to this window.

        The window keeps collapsed axes with extent 1, so a value shaped like
        the planned output has to be reshaped before it can be assigned.
        Literals are staged in a temporary tensor of `out_shape` first. Values
        of any other shape are returned unchanged and fail the engine's shape
        check.
        """
        engine = self.engine
        match kind:
            case ValueKind.TENSOR if value.shape == out_shape:
                return engine.reshape(value, self.shape), kind
            case ValueKind.LITERAL:
                shape, _ = infer_shape(value, engine.config.max_ndim)
                if shape == out_shape:
                    staged = engine.allocate(out_shape, self.context, self.dtype)
                    engine.copy_from(staged, value)
                    return engine.reshape(staged, self.shape), ValueKind.TENSOR
        return value, kind

    def _assign_whole(self: ITensor, value: Any, kind: ValueKind) -> None:
        engine = self.engine
        match kind:
            case ValueKind.TENSOR:
                if value.handle is self.handle:
                    logger.debug("skipping self-assignment of %r", self)
                    return
                engine.copy_into(value, self)
            case ValueKind.SCALAR:
                engine.fill_scalar(value, self)
            case ValueKind.LITERAL:
                engine.copy_from(self, value)
