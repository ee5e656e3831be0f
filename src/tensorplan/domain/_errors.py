"""
Indexing-, shape- and placement-related exceptions for tensorplan.

This module defines the error taxonomy raised by the planning layer. Every
error is a programming or input error: it is raised synchronously at the point
of detection, is never retried, and is raised before any engine mutation takes
place.

Each class also derives from the closest builtin exception so callers may
catch by builtin type (e.g. ``except IndexError``). In particular,
`IndexOutOfRangeError` being an `IndexError` lets Python's legacy iteration
protocol over ``__getitem__`` terminate cleanly.
"""

from typing import Any, Optional


class TensorPlanError(Exception):
    """Base class for all tensorplan-specific exceptions."""


class TypeMismatchError(TensorPlanError, TypeError):
    """
    Raised when an argument has a type the layer does not recognize.

    Typical triggers are a dtype that is neither a name nor a registered id,
    a context that is neither a `Context` nor a context string, or a source
    object that cannot be coerced into a nested sequence.

    Attributes
    ----------
    argument : str
        Name of the offending argument (e.g. "dtype").
    value : Any
        The rejected value.
    """

    def __init__(self, argument: str, value: Any, expected: str) -> None:
        """
        Initialize the TypeMismatchError.

        Parameters
        ----------
        argument : str
            Name of the offending argument.
        value : Any
            The rejected value.
        expected : str
            Human-readable description of the accepted types.
        """
        super().__init__(
            f"wrong type of {argument} {type(value).__name__} (expected {expected})"
        )
        self.argument = argument
        self.value = value


class IndexOutOfRangeError(TensorPlanError, IndexError):
    """
    Raised when an index or range falls outside the extent of an axis.

    Attributes
    ----------
    axis : Optional[int]
        Axis on which the violation was detected.
    size : Optional[int]
        Extent of that axis, or None if the tensor has no such axis.
    """

    def __init__(
        self,
        message: str,
        *,
        axis: Optional[int] = None,
        size: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.axis = axis
        self.size = size

    @classmethod
    def for_index(
        cls, index: int, axis: int, size: Optional[int]
    ) -> "IndexOutOfRangeError":
        """
        Build the error for a scalar index.

        Parameters
        ----------
        index : int
            The index as given by the caller (before wrapping).
        axis : int
            Axis the index was applied to.
        size : Optional[int]
            Extent of the axis, or None when indexing a 0-d tensor.
        """
        if size is None:
            return cls(
                f"too many indices: index {index} applied to a 0-d tensor",
                axis=axis,
            )
        return cls(
            f"index {index} is out of bounds for axis {axis} with size {size}",
            axis=axis,
            size=size,
        )

    @classmethod
    def for_range(
        cls, begin: int, end: int, axis: int, size: int
    ) -> "IndexOutOfRangeError":
        """Build the error for a resolved ``begin:end`` range."""
        return cls(
            f"range {begin}:{end} is out of bounds for axis {axis} with size {size}",
            axis=axis,
            size=size,
        )


class SliceDimensionError(IndexOutOfRangeError):
    """
    Raised when a composite key addresses more axes than the tensor has.

    Attributes
    ----------
    num_keys : int
        Number of per-axis keys supplied.
    ndim : int
        Dimensionality of the indexed tensor.
    """

    def __init__(self, num_keys: int, ndim: int) -> None:
        super().__init__(
            f"Slicing dimensions exceeds array dimensions, {num_keys} vs {ndim}"
        )
        self.num_keys = num_keys
        self.ndim = ndim


class UnsupportedKeyTypeError(TensorPlanError, IndexError):
    """
    Raised when an indexing key is not one of the recognized key kinds.

    Attributes
    ----------
    key : Any
        The rejected key.
    """

    def __init__(self, key: Any, reason: Optional[str] = None) -> None:
        message = (
            f"tensor does not support slicing with key {key!r} "
            f"of type {type(key).__name__}"
        )
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.key = key


class UnsupportedValueTypeError(TensorPlanError, TypeError):
    """
    Raised when an assignment value is not a tensor, a real scalar or a
    nested sequence literal.

    Attributes
    ----------
    value : Any
        The rejected value.
    """

    def __init__(self, value: Any) -> None:
        super().__init__(
            f"tensor does not support assignment with {value!r} "
            f"of type {type(value).__name__}"
        )
        self.value = value


class ShapeInconsistencyError(TensorPlanError, ValueError):
    """
    Raised when shapes do not agree.

    This covers ragged nested literals whose elements disagree at an accepted
    nesting depth, literals whose element count does not match the target
    tensor, and engine-level failures to broadcast or reshape.
    """


class ContextNotSupportedError(TensorPlanError, RuntimeError):
    """
    Raised when an engine is asked to place data on a context it does not
    implement.

    Attributes
    ----------
    op : str
        The name of the operation that was attempted (e.g. "allocate").
    context : str
        String representation of the requested context.
    """

    def __init__(self, op: str, context: str) -> None:
        super().__init__(f"{op} is not implemented for context '{context}'.")
        self.op = op
        self.context = context


class ContextMismatchError(TensorPlanError, RuntimeError):
    """
    Raised when a binary operation combines tensors placed on different
    contexts.
    """

    def __init__(self, context_a: str, context_b: str) -> None:
        """
        Initialize the ContextMismatchError.

        Parameters
        ----------
        context_a : str
            Context of the first operand.
        context_b : str
            Context of the second operand.
        """
        super().__init__(f"Context mismatch: '{context_a}' vs '{context_b}'.")
        self.context_a = context_a
        self.context_b = context_b
