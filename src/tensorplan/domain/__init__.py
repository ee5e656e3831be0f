from ._errors import (
    TensorPlanError,
    TypeMismatchError,
    IndexOutOfRangeError,
    SliceDimensionError,
    UnsupportedKeyTypeError,
    UnsupportedValueTypeError,
    ShapeInconsistencyError,
    ContextNotSupportedError,
    ContextMismatchError,
)
from ._context import Context, ContextType
from ._config import EngineConfig, MAXDIMS
from ._dtype import DTYPE_IDS
from ._tensor import ITensor
from ._engine import IEngine
from ._index_key import IndexKeyKind, classify_key, is_integer_key
from ._selection import (
    SlicePlan,
    DirectElement,
    AxisRange,
    FullView,
    MultiAxisSlice,
    Selection,
    FULL_VIEW,
)

__all__ = [
    TensorPlanError.__name__,
    TypeMismatchError.__name__,
    IndexOutOfRangeError.__name__,
    SliceDimensionError.__name__,
    UnsupportedKeyTypeError.__name__,
    UnsupportedValueTypeError.__name__,
    ShapeInconsistencyError.__name__,
    ContextNotSupportedError.__name__,
    ContextMismatchError.__name__,
    Context.__name__,
    ContextType.__name__,
    EngineConfig.__name__,
    "MAXDIMS",
    "DTYPE_IDS",
    ITensor.__name__,
    IEngine.__name__,
    IndexKeyKind.__name__,
    classify_key.__name__,
    is_integer_key.__name__,
    SlicePlan.__name__,
    DirectElement.__name__,
    AxisRange.__name__,
    FullView.__name__,
    MultiAxisSlice.__name__,
    "Selection",
    "FULL_VIEW",
]
