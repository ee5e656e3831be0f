"""
Tensor interface definitions.

This module defines the domain-level interface for tensor handles using
structural typing. A tensor here is an opaque reference to storage owned by
an engine: the planning layer only observes its shape, dtype and placement,
and hands the tensor back to its engine for every actual operation.

Notes
-----
Two tensors may reference the same engine storage. Identity of the
``handle`` object is what decides whether a whole-array assignment between
two tensors is a no-op.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from ._context import Context

if TYPE_CHECKING:
    from ._engine import IEngine


@runtime_checkable
class ITensor(Protocol):
    """
    Tensor handle interface.

    Any object exposing these members can be indexed, assigned into and
    combined arithmetically by the planning layer, regardless of which engine
    backs it.
    """

    @property
    def shape(self) -> tuple[int, ...]:
        """
        Return the shape of the tensor.

        Returns
        -------
        tuple[int, ...]
            Per-axis extents. ``()`` denotes a 0-d scalar.
        """
        ...

    @property
    def dtype(self) -> int:
        """
        Return the engine-registered dtype id of the tensor's elements.
        """
        ...

    @property
    def context(self) -> Context:
        """
        Return the compute context on which the tensor's storage lives.
        """
        ...

    @property
    def handle(self) -> Any:
        """
        Return the engine-owned storage object referenced by this tensor.
        """
        ...

    @property
    def engine(self) -> "IEngine":
        """
        Return the engine that owns this tensor's storage.
        """
        ...
