from ._shape_inference import infer_shape
from ._index_planner import (
    ValueKind,
    classify_value,
    plan_index,
    plan_slice,
)
from .tensor import Tensor
from .engine import NumpyEngine
from ._array_factory import ArrayFactory, array, empty, ones, zeros

__all__ = [
    infer_shape.__name__,
    ValueKind.__name__,
    classify_value.__name__,
    plan_index.__name__,
    plan_slice.__name__,
    Tensor.__name__,
    NumpyEngine.__name__,
    ArrayFactory.__name__,
    array.__name__,
    empty.__name__,
    ones.__name__,
    zeros.__name__,
]
