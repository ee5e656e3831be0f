"""
Dtype registry for the NumPy engine.

Maps the shared dtype ids (see `tensorplan.domain._dtype`) to NumPy dtypes.
"""

from __future__ import annotations

import numpy as np

from ...domain._dtype import DTYPE_IDS
from ...domain._errors import TypeMismatchError

_NAME_TO_ID = DTYPE_IDS

_ID_TO_NAME: dict[int, str] = {v: k for k, v in _NAME_TO_ID.items()}


def name_to_id(name: str) -> int:
    """
    Resolve a dtype name to its id.

    Raises
    ------
    TypeMismatchError
        If `name` is not a registered dtype name.
    """
    try:
        return _NAME_TO_ID[name]
    except KeyError:
        raise TypeMismatchError(
            "dtype", name, f"one of {sorted(_NAME_TO_ID)}, got unknown name {name!r}"
        ) from None


def id_to_name(dtype_id: int) -> str:
    """
    Resolve a dtype id to its name.

    Raises
    ------
    TypeMismatchError
        If `dtype_id` is not registered.
    """
    try:
        return _ID_TO_NAME[dtype_id]
    except KeyError:
        raise TypeMismatchError(
            "dtype", dtype_id, f"a registered dtype id, got {dtype_id!r}"
        ) from None


def is_registered(dtype_id: int) -> bool:
    """Return True if `dtype_id` is a registered dtype id."""
    return dtype_id in _ID_TO_NAME


def is_registered_name(name: str) -> bool:
    """Return True if `name` is a registered dtype name."""
    return name in _NAME_TO_ID


def to_numpy(dtype_id: int) -> np.dtype:
    """Return the NumPy dtype for a registered dtype id."""
    return np.dtype(id_to_name(dtype_id))


def from_numpy(dtype: np.dtype) -> int:
    """
    Return the registered id for a NumPy dtype.

    Raises
    ------
    TypeMismatchError
        If the NumPy dtype has no registered counterpart (e.g. ``bool``).
    """
    return name_to_id(np.dtype(dtype).name)
