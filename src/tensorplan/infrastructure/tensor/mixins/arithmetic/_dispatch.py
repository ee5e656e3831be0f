"""
Type-based routing of binary arithmetic operators.

`dispatch_binary` is the single decision point behind ``+``, ``-``, ``*`` and
``/`` on tensors. It has exactly two branches:

- the right operand is a tensor: call the engine's broadcasting primitive;
- anything else: return ``NotImplemented`` and let Python's operator
  protocol continue (reflected operand, then ``TypeError``).

Scalar arithmetic is deliberately not implemented at this layer.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from .....domain._tensor import ITensor


class BinaryOp(Enum):
    """Binary operators, valued by the engine method that implements them."""

    ADD = "broadcast_add"
    SUB = "broadcast_sub"
    MUL = "broadcast_mul"
    DIV = "broadcast_div"


def dispatch_binary(op: BinaryOp, lhs: ITensor, rhs: Any) -> Any:
    """
    Route ``lhs <op> rhs``.

    Parameters
    ----------
    op : BinaryOp
        Operator to apply.
    lhs : ITensor
        Left operand; its engine performs the computation.
    rhs : Any
        Right operand.

    Returns
    -------
    ITensor or NotImplemented
        The engine's result when `rhs` is a tensor, ``NotImplemented``
        otherwise.
    """
    if isinstance(rhs, ITensor):
        return getattr(lhs.engine, op.value)(lhs, rhs)
    return NotImplemented
