"""
Compute-context abstraction.

Every tensor carries a `Context` naming where its storage lives: the host
(``"cpu"``) or an accelerator addressed by index (``"gpu:<n>"``). A context
only names a placement; whether an engine can actually allocate there is the
engine's decision (see `ContextNotSupportedError`).

Contexts are immutable values. Factories accept either a `Context` or its
string form, and `Context.from_any` is the single place that coercion happens.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Any, Optional

from ._errors import TypeMismatchError


class ContextType(Enum):
    """Category of compute device."""

    CPU = "cpu"
    GPU = "gpu"


class Context:
    """
    Immutable placement descriptor.

    Parameters
    ----------
    spec : str
        ``"cpu"`` or ``"gpu:<index>"`` with a non-negative integer index.

    Raises
    ------
    ValueError
        If `spec` is not one of the accepted forms.

    Examples
    --------
    >>> Context("gpu:1").index
    1
    >>> Context.gpu(1) == Context("gpu:1")
    True
    """

    __slots__ = ("type", "index")

    _SPEC = re.compile(r"(cpu)|gpu:([0-9]+)")

    type: ContextType
    index: Optional[int]

    def __init__(self, spec: str):
        ctx_type, index = self._parse(spec)
        object.__setattr__(self, "type", ctx_type)
        object.__setattr__(self, "index", index)

    @classmethod
    def _parse(cls, spec: str) -> tuple[ContextType, Optional[int]]:
        m = cls._SPEC.fullmatch(spec) if isinstance(spec, str) else None
        if m is None:
            raise ValueError(
                f"Invalid context {spec!r}. Expected 'cpu' or 'gpu:<index>'"
            )
        if m.group(1):
            return ContextType.CPU, None
        return ContextType.GPU, int(m.group(2))

    # ----------------------------
    # Alternate constructors
    # ----------------------------
    @classmethod
    def cpu(cls) -> "Context":
        """Return the host context."""
        return cls("cpu")

    @classmethod
    def gpu(cls, index: int = 0) -> "Context":
        """Return the accelerator context with the given device index."""
        return cls(f"gpu:{int(index)}")

    @classmethod
    def from_any(cls, value: Any) -> "Context":
        """
        Coerce a `Context` or a context string to a `Context`.

        Parameters
        ----------
        value : Context or str
            An existing context (returned unchanged) or its string form.

        Raises
        ------
        TypeMismatchError
            If `value` is neither a `Context` nor a string.
        ValueError
            If `value` is a string that does not name a context.
        """
        if isinstance(value, Context):
            return value
        if isinstance(value, str):
            return cls(value)
        raise TypeMismatchError("context", value, "Context or str")

    # ----------------------------
    # Value semantics
    # ----------------------------
    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"Context is immutable; cannot set {name!r}")

    def __str__(self) -> str:
        return "cpu" if self.type is ContextType.CPU else f"gpu:{self.index}"

    def __repr__(self) -> str:
        return f"Context('{self}')"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Context):
            return NotImplemented
        return (self.type, self.index) == (other.type, other.index)

    def __hash__(self) -> int:
        return hash((self.type, self.index))

    def is_cpu(self) -> bool:
        """Return True if this context is the host."""
        return self.type is ContextType.CPU

    def is_gpu(self) -> bool:
        """Return True if this context is an accelerator."""
        return self.type is ContextType.GPU
