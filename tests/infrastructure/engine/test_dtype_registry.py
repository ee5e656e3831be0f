import unittest

import numpy as np

from tensorplan.domain._errors import TypeMismatchError
from tensorplan.infrastructure.engine import _dtype_registry as dtypes


class TestDtypeRegistry(unittest.TestCase):
    def test_ids_follow_mxnet_numbering(self):
        expected = {
            "float32": 0,
            "float64": 1,
            "float16": 2,
            "uint8": 3,
            "int32": 4,
            "int8": 5,
            "int64": 6,
        }
        for name, dtype_id in expected.items():
            with self.subTest(name=name):
                self.assertEqual(dtypes.name_to_id(name), dtype_id)
                self.assertEqual(dtypes.id_to_name(dtype_id), name)

    def test_unknown_name_raises(self):
        with self.assertRaises(TypeMismatchError) as ctx:
            dtypes.name_to_id("complex64")
        self.assertEqual(ctx.exception.argument, "dtype")

    def test_unknown_id_raises(self):
        with self.assertRaises(TypeMismatchError):
            dtypes.id_to_name(42)

    def test_membership(self):
        self.assertTrue(dtypes.is_registered(4))
        self.assertFalse(dtypes.is_registered(7))
        self.assertTrue(dtypes.is_registered_name("int8"))
        self.assertFalse(dtypes.is_registered_name("bool"))

    def test_numpy_conversion(self):
        self.assertEqual(dtypes.to_numpy(1), np.dtype(np.float64))
        self.assertEqual(dtypes.from_numpy(np.dtype(np.int32)), 4)
        self.assertEqual(dtypes.from_numpy(np.float16), 2)

    def test_unregistered_numpy_dtype_raises(self):
        with self.assertRaises(TypeMismatchError):
            dtypes.from_numpy(np.dtype(bool))


if __name__ == "__main__":
    unittest.main()
