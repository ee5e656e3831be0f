"""
NumPy-backed tensor-operation engine (CPU only).

`NumpyEngine` satisfies the domain-level `IEngine` protocol by storing every
tensor as a NumPy ``ndarray`` handle.

Design notes
------------
- Views (`element_view`, `range_slice`, `slice`) use NumPy basic indexing, so
  they share memory with their parent and writes through them reach it.
- `reshape` returns a view when NumPy can express one and a copy otherwise;
  only reads are guaranteed to go through a reshaped multi-axis slice.
- Broadcasting arithmetic is NumPy broadcasting. Results whose NumPy dtype has
  no registered id are cast back to the left operand's dtype.
- Only CPU contexts are implemented; other contexts raise
  `ContextNotSupportedError`.
- NumPy exceptions are re-raised as the tensorplan error taxonomy.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional, Sequence, Union

import numpy as np

from ...domain._config import EngineConfig
from ...domain._context import Context
from ...domain._errors import (
    ContextMismatchError,
    ContextNotSupportedError,
    ShapeInconsistencyError,
)
from ...domain._tensor import ITensor
from ..tensor._tensor import Tensor
from . import _dtype_registry as dtypes

logger = logging.getLogger(__name__)

Number = Union[int, float]


class NumpyEngine:
    """
    CPU tensor engine backed by NumPy arrays.

    Parameters
    ----------
    config : Optional[EngineConfig]
        Engine configuration. A fresh default `EngineConfig()` is used when
        omitted.
    """

    def __init__(self, config: Optional[EngineConfig] = None) -> None:
        self._config = config if config is not None else EngineConfig()

    def __repr__(self) -> str:
        return f"NumpyEngine(config={self._config!r})"

    # ----------------------------
    # Registry / configuration
    # ----------------------------
    @property
    def config(self) -> EngineConfig:
        return self._config

    def default_context(self) -> Context:
        return self._config.default_context

    def resolve_dtype_name(self, name: str) -> int:
        return dtypes.name_to_id(name)

    def is_registered_dtype(self, dtype_id: int) -> bool:
        return dtypes.is_registered(dtype_id)

    def dtype_name(self, dtype_id: int) -> str:
        return dtypes.id_to_name(dtype_id)

    # ----------------------------
    # Internal helpers
    # ----------------------------
    def _require_cpu(self, op: str, context: Context) -> None:
        if not context.is_cpu():
            raise ContextNotSupportedError(op=op, context=str(context))

    def _wrap(self, arr: np.ndarray, context: Context) -> Tensor:
        return Tensor(
            arr,
            shape=arr.shape,
            dtype=dtypes.from_numpy(arr.dtype),
            context=context,
            engine=self,
        )

    @staticmethod
    def _check_same_context(a: ITensor, b: ITensor) -> None:
        if a.context != b.context:
            raise ContextMismatchError(str(a.context), str(b.context))

    # ----------------------------
    # Allocation
    # ----------------------------
    def _allocate_with(
        self,
        op: str,
        factory: Callable[..., np.ndarray],
        shape: Sequence[int],
        context: Context,
        dtype: int,
    ) -> Tensor:
        self._require_cpu(op, context)
        shape = tuple(int(d) for d in shape)
        logger.debug(
            "%s shape=%s context=%s dtype=%s", op, shape, context, dtypes.id_to_name(dtype)
        )
        return self._wrap(factory(shape, dtype=dtypes.to_numpy(dtype)), context)

    def allocate(self, shape: Sequence[int], context: Context, dtype: int) -> Tensor:
        return self._allocate_with("allocate", np.empty, shape, context, dtype)

    def ones(self, shape: Sequence[int], context: Context, dtype: int) -> Tensor:
        return self._allocate_with("ones", np.ones, shape, context, dtype)

    def zeros(self, shape: Sequence[int], context: Context, dtype: int) -> Tensor:
        return self._allocate_with("zeros", np.zeros, shape, context, dtype)

    # ----------------------------
    # Views and slices
    # ----------------------------
    def element_view(self, tensor: ITensor, index: int) -> Tensor:
        # The trailing Ellipsis keeps a 0-d result as an ndarray view
        # instead of a detached NumPy scalar.
        return self._wrap(tensor.handle[index, ...], tensor.context)

    def range_slice(self, tensor: ITensor, begin: int, end: int) -> Tensor:
        return self._wrap(tensor.handle[begin:end], tensor.context)

    def slice(
        self, tensor: ITensor, begins: Sequence[int], ends: Sequence[int]
    ) -> Tensor:
        window = tuple(slice(b, e) for b, e in zip(begins, ends))
        # Same trailing Ellipsis as element_view: an empty window over a 0-d
        # handle must stay a view.
        return self._wrap(tensor.handle[window + (Ellipsis,)], tensor.context)

    def reshape(self, tensor: ITensor, shape: Sequence[int]) -> Tensor:
        try:
            out = tensor.handle.reshape(tuple(shape))
        except ValueError as e:
            raise ShapeInconsistencyError(
                f"Invalid reshape from {tensor.shape} to {tuple(shape)}"
            ) from e
        return self._wrap(out, tensor.context)

    def transpose(
        self, tensor: ITensor, axes: Optional[Sequence[int]] = None
    ) -> Tensor:
        try:
            out = np.transpose(tensor.handle, None if axes is None else tuple(axes))
        except ValueError as e:
            raise ShapeInconsistencyError(
                f"Invalid transpose axes {axes!r} for shape {tensor.shape}"
            ) from e
        return self._wrap(out, tensor.context)

    # ----------------------------
    # Mutation and host read-back
    # ----------------------------
    def fill_scalar(self, value: Number, tensor: ITensor) -> None:
        tensor.handle[...] = value

    def copy_from(self, tensor: ITensor, literal: Any) -> None:
        try:
            arr = np.asarray(literal, dtype=tensor.handle.dtype)
        except (ValueError, TypeError) as e:
            raise ShapeInconsistencyError(
                f"Cannot convert literal into a rectangular array for shape {tensor.shape}"
            ) from e

        if arr.shape != tensor.handle.shape:
            raise ShapeInconsistencyError(
                f"Literal of shape {arr.shape} cannot fill a tensor of shape "
                f"{tensor.shape}"
            )
        logger.debug("copy_from literal into shape=%s", tensor.shape)
        tensor.handle[...] = arr

    def copy_into(self, source: ITensor, destination: ITensor) -> None:
        self._check_same_context(source, destination)
        if source.shape != destination.shape:
            raise ShapeInconsistencyError(
                f"Shape mismatch: {source.shape} vs {destination.shape}"
            )
        logger.debug("copy_into shape=%s", destination.shape)
        np.copyto(destination.handle, source.handle, casting="unsafe")

    def to_list(self, tensor: ITensor) -> Any:
        return tensor.handle.tolist()

    # ----------------------------
    # Broadcasting arithmetic
    # ----------------------------
    def _broadcast(self, op: str, ufunc: np.ufunc, a: ITensor, b: ITensor) -> Tensor:
        self._check_same_context(a, b)
        self._require_cpu(op, a.context)
        try:
            with np.errstate(divide="ignore", invalid="ignore"):
                out = np.asarray(ufunc(a.handle, b.handle))
        except ValueError as e:
            raise ShapeInconsistencyError(
                f"operands could not be broadcast together with shapes "
                f"{a.shape} {b.shape}"
            ) from e

        if not dtypes.is_registered_name(out.dtype.name):
            out = out.astype(a.handle.dtype)
        return self._wrap(out, a.context)

    def broadcast_add(self, a: ITensor, b: ITensor) -> Tensor:
        return self._broadcast("broadcast_add", np.add, a, b)

    def broadcast_sub(self, a: ITensor, b: ITensor) -> Tensor:
        return self._broadcast("broadcast_sub", np.subtract, a, b)

    def broadcast_mul(self, a: ITensor, b: ITensor) -> Tensor:
        return self._broadcast("broadcast_mul", np.multiply, a, b)

    def broadcast_div(self, a: ITensor, b: ITensor) -> Tensor:
        return self._broadcast("broadcast_div", np.true_divide, a, b)
