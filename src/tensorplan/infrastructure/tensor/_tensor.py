"""
Concrete Tensor handle.

This module provides `Tensor`, the concrete handle that satisfies the
domain-level `ITensor` protocol. A `Tensor` stores no numbers of its own: it
references engine-owned storage (``handle``) together with the metadata the
planning layer needs (shape, dtype id, context) and the engine that owns the
storage.

Design notes
------------
- Tensors are created by engines. Constructing one directly is only useful
  for engine implementations and tests.
- Indexing and arithmetic come from mixins (see ``tensor.mixins``); this
  class adds metadata accessors and host read-back helpers.
- Two tensors may share a handle (or, for views, storage); the engine owns
  the lifetime of that storage.
"""

from __future__ import annotations

from typing import Any, Optional, Sequence

from ...domain._context import Context
from ...domain._engine import IEngine
from ...domain._errors import TypeMismatchError
from ...domain._tensor import ITensor
from .mixins import _TensorAllMixin


class Tensor(_TensorAllMixin, ITensor):
    """
    Engine-backed tensor handle.

    Parameters
    ----------
    handle : Any
        Engine-owned storage object.
    shape : Sequence[int]
        Per-axis extents.
    dtype : int
        Engine-registered dtype id.
    context : Context
        Placement of the storage.
    engine : IEngine
        Engine that owns `handle` and performs every operation on it.
    """

    def __init__(
        self,
        handle: Any,
        *,
        shape: Sequence[int],
        dtype: int,
        context: Context,
        engine: IEngine,
    ) -> None:
        self._handle = handle
        self._shape = tuple(int(d) for d in shape)
        self._dtype = int(dtype)
        self._context = context
        self._engine = engine

    def __repr__(self) -> str:
        return (
            f"Tensor(shape={self._shape}, context={self._context}, "
            f"dtype={self.dtype_name})"
        )

    # ----------------------------
    # Identity / placement
    # ----------------------------
    @property
    def handle(self) -> Any:
        """Engine-owned storage referenced by this tensor."""
        return self._handle

    @property
    def engine(self) -> IEngine:
        """Engine that owns this tensor's storage."""
        return self._engine

    @property
    def shape(self) -> tuple[int, ...]:
        """
        Return the tensor shape.

        Returns
        -------
        tuple[int, ...]
            The tensor's shape; ``()`` for a 0-d tensor.
        """
        return self._shape

    @property
    def dtype(self) -> int:
        """Engine-registered dtype id."""
        return self._dtype

    @property
    def dtype_name(self) -> str:
        """Registered name of this tensor's dtype (e.g. "float32")."""
        return self._engine.dtype_name(self._dtype)

    @property
    def context(self) -> Context:
        """Placement of this tensor's storage."""
        return self._context

    # ----------------------------
    # Shape helpers
    # ----------------------------
    @property
    def ndim(self) -> int:
        """Number of axes."""
        return len(self._shape)

    rank = ndim

    @property
    def size(self) -> int:
        """
        Return the total number of elements in the tensor.

        Returns
        -------
        int
            Product of all dimensions; 1 for a 0-d tensor.
        """
        n = 1
        for d in self._shape:
            n *= d
        return n

    def transpose(self, axes: Optional[Sequence[int]] = None) -> "Tensor":
        """
        Permute axes via the engine.

        Parameters
        ----------
        axes : Optional[Sequence[int]]
            New axis order. Reverses the axes when omitted.
        """
        return self._engine.transpose(self, axes)

    @property
    def T(self) -> "Tensor":
        """Convenience property for ``transpose()``."""
        return self.transpose()

    # ----------------------------
    # Host read-back
    # ----------------------------
    def to_list(self) -> Any:
        """
        Copy this tensor to host memory as a nested list.

        Returns
        -------
        Any
            Nested lists of Python numbers, or a bare number for a 0-d tensor.
        """
        return self._engine.to_list(self)

    def as_scalar(self) -> Any:
        """
        Return the single element of a scalar tensor.

        Raises
        ------
        TypeMismatchError
            If the tensor's shape is neither ``()`` nor ``(1,)``.
        """
        if self._shape not in ((), (1,)):
            raise TypeMismatchError(
                "tensor", self, f"a scalar of shape () or (1,), got {self._shape}"
            )
        value = self._engine.to_list(self)
        return value[0] if self._shape == (1,) else value
