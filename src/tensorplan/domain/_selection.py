"""
Selection value types produced by index planning.

A `Selection` is the planner's answer to "what engine call does this key
need?". It carries plain integers only, so planning can be tested without an
engine and applied later by whoever owns the tensor.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class SlicePlan:
    """
    Begin/end/reshape plan for a composite key.

    Attributes
    ----------
    begins : tuple[int, ...]
        Per-axis start offsets for the leading ``len(begins)`` axes.
    ends : tuple[int, ...]
        Per-axis exclusive end offsets, aligned with `begins`.
    out_shape : tuple[int, ...]
        Shape of the result: collapsed axes omitted, uncovered trailing axes
        appended unchanged, and ``(1,)`` when every axis collapsed.
    """

    begins: tuple[int, ...]
    ends: tuple[int, ...]
    out_shape: tuple[int, ...]


@dataclass(frozen=True)
class DirectElement:
    """Single-element view at axis-0 position `index` (drops axis 0)."""

    index: int


@dataclass(frozen=True)
class AxisRange:
    """Contiguous slice ``[begin, end)`` along axis 0 (keeps axis 0)."""

    begin: int
    end: int


@dataclass(frozen=True)
class FullView:
    """The whole tensor, unchanged. Applying it makes no engine call."""


@dataclass(frozen=True)
class MultiAxisSlice:
    """Engine ``slice(begins, ends)`` followed by ``reshape(out_shape)``."""

    plan: SlicePlan


FULL_VIEW = FullView()

Selection = Union[DirectElement, AxisRange, FullView, MultiAxisSlice]
