"""
Dtype identifiers shared by every engine.

Dtypes are identified by small integer ids so that a dtype can travel through
the planning layer as a plain tag. The numbering follows the MXNet convention,
which keeps ids stable across engines that adopt it.
"""

from types import MappingProxyType
from typing import Mapping

DTYPE_IDS: Mapping[str, int] = MappingProxyType(
    {
        "float32": 0,
        "float64": 1,
        "float16": 2,
        "uint8": 3,
        "int32": 4,
        "int8": 5,
        "int64": 6,
    }
)
