"""
Explicit engine configuration.

`EngineConfig` replaces a process-wide mutable default context. A config value
is created once and passed to the engine constructor; factories read defaults
from the engine they are given, and callers override a default by passing a
different config (or an explicit argument) rather than by mutating shared
state.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from typing import Any, Mapping, Optional

from ._context import Context
from ._dtype import DTYPE_IDS

MAXDIMS = 32
"""Maximum nesting depth explored by shape inference (mirrors NPY_MAXDIMS)."""

ENV_CONTEXT = "TENSORPLAN_CONTEXT"
ENV_DTYPE = "TENSORPLAN_DTYPE"
ENV_MAX_NDIM = "TENSORPLAN_MAX_NDIM"


@dataclass(frozen=True)
class EngineConfig:
    """
    Immutable configuration shared by an engine and the factories built on it.

    Attributes
    ----------
    default_context : Context
        Placement used when a factory call does not name a context.
    default_dtype : str
        Registered dtype name used when a factory call does not name a dtype.
    max_ndim : int
        Recursion budget for nested-literal shape inference.
    """

    default_context: Context = field(default_factory=lambda: Context("cpu"))
    default_dtype: str = "float32"
    max_ndim: int = MAXDIMS

    def __post_init__(self) -> None:
        if not isinstance(self.default_context, Context):
            raise ValueError(
                f"default_context must be a Context, got {self.default_context!r}"
            )
        if self.default_dtype not in DTYPE_IDS:
            raise ValueError(
                f"default_dtype must be one of {sorted(DTYPE_IDS)}, "
                f"got {self.default_dtype!r}"
            )
        if self.max_ndim < 0:
            raise ValueError(f"max_ndim must be non-negative, got {self.max_ndim}")

    def with_overrides(self, **changes: Any) -> "EngineConfig":
        """Return a copy of this config with the given fields replaced."""
        return replace(self, **changes)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "EngineConfig":
        """
        Build a config from environment variables.

        Unset variables fall back to the dataclass defaults.

        Parameters
        ----------
        environ : Optional[Mapping[str, str]]
            Mapping to read from. Defaults to ``os.environ``.

        Raises
        ------
        ValueError
            If a variable is set to an invalid value.
        """
        env = os.environ if environ is None else environ
        kwargs: dict[str, Any] = {}

        if env.get(ENV_CONTEXT):
            kwargs["default_context"] = Context(env[ENV_CONTEXT])
        if env.get(ENV_DTYPE):
            kwargs["default_dtype"] = env[ENV_DTYPE]
        if env.get(ENV_MAX_NDIM):
            try:
                kwargs["max_ndim"] = int(env[ENV_MAX_NDIM])
            except ValueError as e:
                raise ValueError(
                    f"{ENV_MAX_NDIM} must be an integer, got {env[ENV_MAX_NDIM]!r}"
                ) from e

        return cls(**kwargs)
