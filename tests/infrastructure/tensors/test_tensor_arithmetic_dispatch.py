"""
Unit tests for tensor operator dispatch.

The routing is checked against a mocked engine (which primitive is called and
with which operands) and then end-to-end on the NumPy engine.
"""

import unittest
from unittest.mock import MagicMock

import numpy as np

from tensorplan import Context, ContextMismatchError, Tensor, array, ones
from tensorplan.infrastructure.tensor.mixins.arithmetic._dispatch import (
    BinaryOp,
    dispatch_binary,
)


def _mock_tensor(engine, shape=(2,)) -> Tensor:
    return Tensor(
        np.zeros(shape, dtype=np.float32),
        shape=shape,
        dtype=0,
        context=Context("cpu"),
        engine=engine,
    )


class TestDispatchRouting(unittest.TestCase):
    def setUp(self):
        self.engine = MagicMock()
        self.a = _mock_tensor(self.engine)
        self.b = _mock_tensor(self.engine)

    def test_operators_call_matching_engine_primitive(self):
        cases = [
            (lambda x, y: x + y, "broadcast_add"),
            (lambda x, y: x - y, "broadcast_sub"),
            (lambda x, y: x * y, "broadcast_mul"),
            (lambda x, y: x / y, "broadcast_div"),
        ]
        for op, method in cases:
            with self.subTest(method=method):
                result = op(self.a, self.b)
                primitive = getattr(self.engine, method)
                primitive.assert_called_once_with(self.a, self.b)
                self.assertIs(result, primitive.return_value)

    def test_non_tensor_operand_raises_type_error_without_engine_call(self):
        for other in (5, 2.5, [1, 2], "x", None):
            with self.subTest(other=other):
                with self.assertRaises(TypeError):
                    self.a + other
                with self.assertRaises(TypeError):
                    self.a * other
        self.assertEqual(self.engine.method_calls, [])

    def test_reflected_scalar_raises_type_error(self):
        with self.assertRaises(TypeError):
            5 + self.a
        with self.assertRaises(TypeError):
            1.0 / self.a
        self.assertEqual(self.engine.method_calls, [])

    def test_dispatch_returns_not_implemented_for_scalars(self):
        self.assertIs(dispatch_binary(BinaryOp.SUB, self.a, 3), NotImplemented)

    def test_left_operand_engine_is_used(self):
        other_engine = MagicMock()
        c = _mock_tensor(other_engine)
        self.a + c
        self.engine.broadcast_add.assert_called_once_with(self.a, c)
        other_engine.broadcast_add.assert_not_called()


class TestArithmeticOnNumpyEngine(unittest.TestCase):
    def test_add_with_broadcasting(self):
        a = array([[1, 2, 3], [4, 5, 6]])
        out = a + ones((3,))
        self.assertEqual(out.shape, (2, 3))
        self.assertEqual(out.to_list(), [[2, 3, 4], [5, 6, 7]])

    def test_sub_mul_div(self):
        a = array([2, 4, 6])
        b = array([1, 2, 3])
        self.assertEqual((a - b).to_list(), [1, 2, 3])
        self.assertEqual((a * b).to_list(), [2, 8, 18])
        self.assertEqual((a / b).to_list(), [2, 2, 2])

    def test_result_is_new_tensor(self):
        a = array([1, 2])
        out = a + a
        self.assertIsNot(out.handle, a.handle)
        self.assertEqual(a.to_list(), [1, 2])

    def test_context_mismatch(self):
        a = array([1, 2])
        b = Tensor(
            np.ones(2, dtype=np.float32),
            shape=(2,),
            dtype=0,
            context=Context("gpu:0"),
            engine=a.engine,
        )
        with self.assertRaises(ContextMismatchError):
            a + b


if __name__ == "__main__":
    unittest.main()
