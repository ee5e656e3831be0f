"""
Arithmetic mixin and operator routing for Tensor.

This package aggregates:

- addition        (``__add__``)
- subtraction     (``__sub__``)
- multiplication  (``__mul__``)
- true division   (``__truediv__``)

All four route through :func:`dispatch_binary`, which calls the engine's
broadcasting primitive for tensor operands and returns ``NotImplemented``
for anything else.

Public API
----------
- ``TensorMixinArithmetic``
- ``BinaryOp`` / ``dispatch_binary``
"""

from ._dispatch import BinaryOp, dispatch_binary
from ._base import TensorMixinArithmetic

__all__ = [
    TensorMixinArithmetic.__name__,
    BinaryOp.__name__,
    dispatch_binary.__name__,
]
