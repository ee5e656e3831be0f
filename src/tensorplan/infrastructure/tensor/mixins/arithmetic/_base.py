"""
Arithmetic mixin defining elementwise Tensor operators.

This module declares :class:`TensorMixinArithmetic`, which binds Python's
binary operators to :func:`dispatch_binary`. The mixin performs no numeric
work: tensor operands are routed to the engine's broadcasting primitives,
everything else is handed back to Python.
"""

from typing import Any, Union

from .....domain._tensor import ITensor
from ._dispatch import BinaryOp, dispatch_binary


class TensorMixinArithmetic:
    """
    Mixin providing ``+``, ``-``, ``*`` and ``/`` for tensors.

    Notes
    -----
    - Broadcasting follows the engine's rules (trailing-axis alignment,
      size-1 axes stretch); this mixin only routes.
    - No reflected operators are defined, so ``5 + t`` and ``t + 5`` both
      end in ``TypeError`` once Python's operator protocol is exhausted.
    """

    def __add__(self: ITensor, other: Union[ITensor, Any]) -> ITensor:
        """
        Elementwise broadcasting addition.

        Returns
        -------
        ITensor
            Result of the engine's ``broadcast_add`` when `other` is a tensor;
            ``NotImplemented`` otherwise.
        """
        return dispatch_binary(BinaryOp.ADD, self, other)

    def __sub__(self: ITensor, other: Union[ITensor, Any]) -> ITensor:
        """Elementwise broadcasting subtraction (``broadcast_sub``)."""
        return dispatch_binary(BinaryOp.SUB, self, other)

    def __mul__(self: ITensor, other: Union[ITensor, Any]) -> ITensor:
        """Elementwise broadcasting multiplication (``broadcast_mul``)."""
        return dispatch_binary(BinaryOp.MUL, self, other)

    def __truediv__(self: ITensor, other: Union[ITensor, Any]) -> ITensor:
        """Elementwise broadcasting true division (``broadcast_div``)."""
        return dispatch_binary(BinaryOp.DIV, self, other)
