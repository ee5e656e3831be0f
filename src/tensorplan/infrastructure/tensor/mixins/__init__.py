from .arithmetic import TensorMixinArithmetic
from .indexing import TensorMixinIndexing


class _TensorAllMixin(
    TensorMixinIndexing,
    TensorMixinArithmetic,
):
    pass


__all__ = [_TensorAllMixin.__name__]
