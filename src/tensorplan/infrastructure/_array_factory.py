"""
Tensor construction from literals, shapes and constant fills.

`ArrayFactory` orchestrates shape inference, engine allocation and bulk copy
to materialize tensors. Defaults (context, dtype, inference depth) come from
the configuration of the engine the factory is bound to; nothing is read from
process-wide mutable state.

The module-level helpers `array`, `empty`, `ones` and `zeros` bind a factory
to a fresh `NumpyEngine` built from the given (or a default) `EngineConfig`.
"""

from __future__ import annotations

import logging
from numbers import Integral
from typing import Any, Optional, Sequence, Union

from ..domain._config import EngineConfig
from ..domain._context import Context
from ..domain._engine import IEngine
from ..domain._errors import TypeMismatchError
from ..domain._index_key import is_integer_key
from ..domain._tensor import ITensor
from ._shape_inference import infer_shape
from .engine import NumpyEngine

logger = logging.getLogger(__name__)

ShapeLike = Union[int, Sequence[int]]
DTypeLike = Union[str, int]
ContextLike = Union[Context, str]


class ArrayFactory:
    """
    Factory for engine-backed tensors.

    Parameters
    ----------
    engine : IEngine
        Engine that allocates and owns every tensor this factory creates.
    """

    def __init__(self, engine: IEngine) -> None:
        self._engine = engine

    @property
    def engine(self) -> IEngine:
        return self._engine

    # ----------------------------
    # Argument resolution
    # ----------------------------
    def resolve_dtype(self, dtype: Optional[DTypeLike]) -> int:
        """
        Resolve a dtype argument to a registered dtype id.

        Parameters
        ----------
        dtype : Optional[str | int]
            A dtype name (e.g. "float32"), an already-resolved dtype id, or
            None for the engine config's default dtype.

        Returns
        -------
        int
            Registered dtype id.

        Raises
        ------
        TypeMismatchError
            If `dtype` is of another type, names an unknown dtype, or is an
            unregistered id.
        """
        if dtype is None:
            dtype = self._engine.config.default_dtype

        if isinstance(dtype, str):
            return self._engine.resolve_dtype_name(dtype)
        if is_integer_key(dtype):
            if not self._engine.is_registered_dtype(int(dtype)):
                raise TypeMismatchError(
                    "dtype", dtype, f"a registered dtype id, got {dtype!r}"
                )
            return int(dtype)
        raise TypeMismatchError("dtype", dtype, "str or int")

    def resolve_context(self, context: Optional[ContextLike]) -> Context:
        """
        Resolve a context argument, falling back to the engine's default.

        Raises
        ------
        TypeMismatchError
            If `context` is neither a `Context`, a context string, nor None.
        """
        if context is None:
            return self._engine.default_context()
        return Context.from_any(context)

    @staticmethod
    def _normalize_shape(shape: ShapeLike) -> tuple[int, ...]:
        if isinstance(shape, Integral) and not isinstance(shape, bool):
            dims: tuple[Any, ...] = (shape,)
        else:
            try:
                dims = tuple(shape)
            except TypeError:
                raise TypeMismatchError(
                    "shape", shape, "int or sequence of int"
                ) from None
        if not all(is_integer_key(d) and d >= 0 for d in dims):
            raise TypeMismatchError(
                "shape", shape, f"non-negative integer dimensions, got {dims!r}"
            )
        return tuple(int(d) for d in dims)

    @staticmethod
    def _to_sequence(source: Any) -> Any:
        if isinstance(source, (list, tuple)):
            return source
        tolist = getattr(source, "tolist", None)
        if callable(tolist):
            converted = tolist()
            if isinstance(converted, (list, tuple)):
                return converted
        raise TypeMismatchError("source", source, "a tensor or a nested sequence")

    # ----------------------------
    # Constructors
    # ----------------------------
    def empty(
        self,
        shape: ShapeLike,
        context: Optional[ContextLike] = None,
        dtype: Optional[DTypeLike] = None,
    ) -> ITensor:
        """Allocate an uninitialized tensor of the given shape."""
        return self._engine.allocate(
            self._normalize_shape(shape),
            self.resolve_context(context),
            self.resolve_dtype(dtype),
        )

    def ones(
        self,
        shape: ShapeLike,
        context: Optional[ContextLike] = None,
        dtype: Optional[DTypeLike] = "float32",
    ) -> ITensor:
        """
        Create a tensor filled with ones.

        Parameters
        ----------
        shape : int or Sequence[int]
            Shape of the output tensor.
        context : Optional[Context | str]
            Placement. Defaults to the engine config's default context.
        dtype : str or int
            Dtype name or registered dtype id. Defaults to "float32".

        Raises
        ------
        TypeMismatchError
            If `dtype` is neither a name nor a registered id.
        """
        dtype_id = self.resolve_dtype(dtype)
        ctx = self.resolve_context(context)
        return self._engine.ones(self._normalize_shape(shape), ctx, dtype_id)

    def zeros(
        self,
        shape: ShapeLike,
        context: Optional[ContextLike] = None,
        dtype: Optional[DTypeLike] = "float32",
    ) -> ITensor:
        """
        Create a tensor filled with zeros.

        See :meth:`ones` for parameters and errors.
        """
        dtype_id = self.resolve_dtype(dtype)
        ctx = self.resolve_context(context)
        return self._engine.zeros(self._normalize_shape(shape), ctx, dtype_id)

    def array(
        self,
        source: Any,
        context: Optional[ContextLike] = None,
        dtype: Optional[DTypeLike] = None,
    ) -> ITensor:
        """
        Materialize a tensor from a nested literal or another tensor.

        Parameters
        ----------
        source : ITensor, nested list/tuple, or object with ``tolist()``
            Data to copy. A tensor source keeps its shape and, unless
            overridden, its context and dtype.
        context : Optional[Context | str]
            Placement of the result.
        dtype : Optional[str | int]
            Dtype of the result. Defaults to the engine config's default
            dtype for literal sources.

        Returns
        -------
        ITensor
            A new tensor holding a copy of `source`.

        Raises
        ------
        TypeMismatchError
            If `source` cannot be coerced into a nested sequence.
        ShapeInconsistencyError
            If `source` is ragged at an accepted nesting level, or nests
            deeper than the engine config's `max_ndim`.
        """
        if isinstance(source, ITensor):
            shape = source.shape
            if context is None:
                context = source.context
            if dtype is None:
                dtype = source.dtype
        else:
            source = self._to_sequence(source)
            shape, _ = infer_shape(source, self._engine.config.max_ndim)

        logger.debug("array: materializing shape=%s", shape)
        result = self.empty(shape, context, dtype)
        result[:] = source
        return result


def _factory(config: Optional[EngineConfig]) -> ArrayFactory:
    return ArrayFactory(NumpyEngine(config))


def array(
    source: Any,
    context: Optional[ContextLike] = None,
    dtype: Optional[DTypeLike] = None,
    *,
    config: Optional[EngineConfig] = None,
) -> ITensor:
    """Build a NumPy-engine tensor from `source` (see `ArrayFactory.array`)."""
    return _factory(config).array(source, context, dtype)


def empty(
    shape: ShapeLike,
    context: Optional[ContextLike] = None,
    dtype: Optional[DTypeLike] = None,
    *,
    config: Optional[EngineConfig] = None,
) -> ITensor:
    """Allocate an uninitialized NumPy-engine tensor."""
    return _factory(config).empty(shape, context, dtype)


def ones(
    shape: ShapeLike,
    context: Optional[ContextLike] = None,
    dtype: Optional[DTypeLike] = "float32",
    *,
    config: Optional[EngineConfig] = None,
) -> ITensor:
    """Create a NumPy-engine tensor filled with ones."""
    return _factory(config).ones(shape, context, dtype)


def zeros(
    shape: ShapeLike,
    context: Optional[ContextLike] = None,
    dtype: Optional[DTypeLike] = "float32",
    *,
    config: Optional[EngineConfig] = None,
) -> ITensor:
    """Create a NumPy-engine tensor filled with zeros."""
    return _factory(config).zeros(shape, context, dtype)
