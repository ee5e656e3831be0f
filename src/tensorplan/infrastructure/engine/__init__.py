"""
Concrete tensor-operation engines.

Public API
----------
- ``NumpyEngine``: CPU engine storing tensors as NumPy arrays.
"""

from ._numpy_engine import NumpyEngine

__all__ = [
    NumpyEngine.__name__,
]
