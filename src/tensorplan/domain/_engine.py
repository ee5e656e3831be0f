"""
Tensor-operation engine contract.

The engine is the black box underneath the planning layer: it allocates
storage, produces views and slices, mutates storage, and runs broadcasting
arithmetic. The planning layer decides *which* engine call to make and with
*what* parameters; it never touches storage itself.

Design notes
------------
- Uses `typing.Protocol` so concrete engines (NumPy today) satisfy the
  contract structurally, without inheriting from a base class.
- Views returned by `element_view`, `range_slice` and `slice` must alias the
  parent's storage, so that assignment through a view reaches the parent.
- All methods are synchronous; thread safety is the engine's concern.
"""

from __future__ import annotations

from typing import Any, Optional, Protocol, Sequence, Union, runtime_checkable

from ._config import EngineConfig
from ._context import Context
from ._tensor import ITensor

Number = Union[int, float]


@runtime_checkable
class IEngine(Protocol):
    """
    Structural contract required from a tensor-operation engine.
    """

    # ---------------------------------------------------------------------
    # Type / context registry
    # ---------------------------------------------------------------------
    @property
    def config(self) -> EngineConfig:
        """Configuration this engine was constructed with."""
        ...

    def default_context(self) -> Context:
        """Return the placement used when a caller does not name one."""
        ...

    def resolve_dtype_name(self, name: str) -> int:
        """Map a dtype name (e.g. "float32") to its registered id."""
        ...

    def is_registered_dtype(self, dtype_id: int) -> bool:
        """Return True if `dtype_id` names a dtype this engine supports."""
        ...

    def dtype_name(self, dtype_id: int) -> str:
        """Map a registered dtype id back to its name."""
        ...

    # ---------------------------------------------------------------------
    # Allocation
    # ---------------------------------------------------------------------
    def allocate(
        self, shape: Sequence[int], context: Context, dtype: int
    ) -> ITensor:
        """Allocate an uninitialized tensor."""
        ...

    def ones(self, shape: Sequence[int], context: Context, dtype: int) -> ITensor:
        """Allocate a tensor filled with ones."""
        ...

    def zeros(self, shape: Sequence[int], context: Context, dtype: int) -> ITensor:
        """Allocate a tensor filled with zeros."""
        ...

    # ---------------------------------------------------------------------
    # Views and slices
    # ---------------------------------------------------------------------
    def element_view(self, tensor: ITensor, index: int) -> ITensor:
        """View of the sub-tensor at axis-0 position `index` (drops axis 0)."""
        ...

    def range_slice(self, tensor: ITensor, begin: int, end: int) -> ITensor:
        """Contiguous view of ``[begin, end)`` along axis 0."""
        ...

    def slice(
        self, tensor: ITensor, begins: Sequence[int], ends: Sequence[int]
    ) -> ITensor:
        """Multi-axis window ``[begins[k], ends[k])`` over the leading axes."""
        ...

    def reshape(self, tensor: ITensor, shape: Sequence[int]) -> ITensor:
        """Reinterpret `tensor` with a new shape of the same size."""
        ...

    def transpose(
        self, tensor: ITensor, axes: Optional[Sequence[int]] = None
    ) -> ITensor:
        """Permute axes (reverse them when `axes` is None)."""
        ...

    # ---------------------------------------------------------------------
    # Mutation and host read-back
    # ---------------------------------------------------------------------
    def fill_scalar(self, value: Number, tensor: ITensor) -> None:
        """Write `value` into every element of `tensor`."""
        ...

    def copy_from(self, tensor: ITensor, literal: Any) -> None:
        """Bulk-copy a host nested literal of exactly `tensor`'s shape into it."""
        ...

    def copy_into(self, source: ITensor, destination: ITensor) -> None:
        """Elementwise copy from `source` into `destination`."""
        ...

    def to_list(self, tensor: ITensor) -> Any:
        """Read `tensor` back as a host nested list (or scalar if 0-d)."""
        ...

    # ---------------------------------------------------------------------
    # Broadcasting arithmetic
    # ---------------------------------------------------------------------
    def broadcast_add(self, a: ITensor, b: ITensor) -> ITensor: ...
    def broadcast_sub(self, a: ITensor, b: ITensor) -> ITensor: ...
    def broadcast_mul(self, a: ITensor, b: ITensor) -> ITensor: ...
    def broadcast_div(self, a: ITensor, b: ITensor) -> ITensor: ...
