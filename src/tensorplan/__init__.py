"""
tensorplan: indexing, shape inference and elementwise dispatch for
engine-backed tensors.

Typical usage::

    import tensorplan as tp

    t = tp.array([[1, 2, 3], [4, 5, 6]])
    row = t[1]              # view of the second row
    block = t[0, 1:3]       # begin/end/reshape plan -> shape (2,)
    t[0] = 0                # broadcast fill through a view
    s = t + tp.ones((3,))   # engine broadcasting
"""

from .domain import (
    TensorPlanError,
    TypeMismatchError,
    IndexOutOfRangeError,
    SliceDimensionError,
    UnsupportedKeyTypeError,
    UnsupportedValueTypeError,
    ShapeInconsistencyError,
    ContextNotSupportedError,
    ContextMismatchError,
    Context,
    EngineConfig,
    MAXDIMS,
    ITensor,
    IEngine,
)
from .infrastructure import (
    Tensor,
    NumpyEngine,
    ArrayFactory,
    infer_shape,
    plan_index,
    array,
    empty,
    ones,
    zeros,
)

__all__ = [
    "TensorPlanError",
    "TypeMismatchError",
    "IndexOutOfRangeError",
    "SliceDimensionError",
    "UnsupportedKeyTypeError",
    "UnsupportedValueTypeError",
    "ShapeInconsistencyError",
    "ContextNotSupportedError",
    "ContextMismatchError",
    "Context",
    "EngineConfig",
    "MAXDIMS",
    "ITensor",
    "IEngine",
    "Tensor",
    "NumpyEngine",
    "ArrayFactory",
    "infer_shape",
    "plan_index",
    "array",
    "empty",
    "ones",
    "zeros",
]
