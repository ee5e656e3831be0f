import unittest

import numpy as np

from tensorplan.domain._errors import (
    IndexOutOfRangeError,
    SliceDimensionError,
    UnsupportedKeyTypeError,
    UnsupportedValueTypeError,
)
from tensorplan.domain._selection import (
    FULL_VIEW,
    AxisRange,
    DirectElement,
    FullView,
    MultiAxisSlice,
    SlicePlan,
)
from tensorplan.infrastructure._index_planner import (
    ValueKind,
    classify_value,
    plan_index,
    plan_slice,
)
from tensorplan.infrastructure._array_factory import zeros


class TestPlanIntegerKey(unittest.TestCase):
    def test_in_range_indices_select_direct_element(self):
        for i in range(4):
            with self.subTest(i=i):
                self.assertEqual(plan_index((4, 2), i), DirectElement(i))

    def test_index_equal_to_extent_raises(self):
        with self.assertRaises(IndexOutOfRangeError):
            plan_index((4, 2), 4)

    def test_negative_index_wraps(self):
        self.assertEqual(plan_index((4,), -1), DirectElement(3))
        self.assertEqual(plan_index((4,), -4), DirectElement(0))

    def test_negative_index_below_range_raises(self):
        with self.assertRaises(IndexOutOfRangeError):
            plan_index((4,), -5)

    def test_numpy_integer(self):
        self.assertEqual(plan_index((4,), np.int64(2)), DirectElement(2))

    def test_zero_d_shape_raises(self):
        with self.assertRaises(IndexOutOfRangeError):
            plan_index((), 0)


class TestPlanRangeKey(unittest.TestCase):
    def test_fully_open_range_is_full_view(self):
        self.assertIs(plan_index((5, 5), slice(None)), FULL_VIEW)
        self.assertIsInstance(plan_index((5,), slice(None, None, 1)), FullView)

    def test_bounded_range(self):
        self.assertEqual(plan_index((5, 3), slice(1, 4)), AxisRange(1, 4))

    def test_half_open_ranges(self):
        self.assertEqual(plan_index((5,), slice(2, None)), AxisRange(2, 5))
        self.assertEqual(plan_index((5,), slice(None, 3)), AxisRange(0, 3))

    def test_negative_endpoints_wrap(self):
        self.assertEqual(plan_index((5,), slice(-2, None)), AxisRange(3, 5))
        self.assertEqual(plan_index((5,), slice(0, -1)), AxisRange(0, 4))

    def test_empty_range_is_allowed(self):
        self.assertEqual(plan_index((5,), slice(2, 2)), AxisRange(2, 2))

    def test_out_of_bounds_range_raises(self):
        with self.assertRaises(IndexOutOfRangeError):
            plan_index((5,), slice(0, 6))
        with self.assertRaises(IndexOutOfRangeError):
            plan_index((5,), slice(4, 2))

    def test_stepped_range_raises(self):
        with self.assertRaises(UnsupportedKeyTypeError):
            plan_index((5,), slice(0, 4, 2))

    def test_non_integer_endpoints_raise(self):
        for key in (slice("a", 2), slice(1.7, 3), slice(0, 2.0), slice(None, "3")):
            with self.subTest(key=key):
                with self.assertRaises(UnsupportedKeyTypeError):
                    plan_index((5,), key)

    def test_non_integer_endpoint_in_composite_raises(self):
        with self.assertRaises(UnsupportedKeyTypeError):
            plan_slice((5, 5), (0, slice(1.5, 3)))

    def test_numpy_integer_endpoints(self):
        self.assertEqual(plan_index((5,), slice(np.int64(1), np.int32(4))), AxisRange(1, 4))


class TestPlanCompositeKey(unittest.TestCase):
    def test_integer_then_range_appends_trailing_axes(self):
        sel = plan_index((5, 5, 5), (2, slice(1, 3)))
        self.assertEqual(
            sel, MultiAxisSlice(SlicePlan(begins=(2, 1), ends=(3, 3), out_shape=(2, 5)))
        )

    def test_list_key_behaves_like_tuple(self):
        self.assertEqual(
            plan_index((5, 5, 5), [2, slice(1, 3)]),
            plan_index((5, 5, 5), (2, slice(1, 3))),
        )

    def test_all_axes_collapsed_gives_single_element_shape(self):
        plan = plan_slice((5, 5), (2, 1))
        self.assertEqual(plan.begins, (2, 1))
        self.assertEqual(plan.ends, (3, 2))
        self.assertEqual(plan.out_shape, (1,))

    def test_open_range_uses_axis_extent(self):
        plan = plan_slice((4, 6), (slice(None), slice(2, None)))
        self.assertEqual(plan, SlicePlan(begins=(0, 2), ends=(4, 6), out_shape=(4, 4)))

    def test_empty_composite_keeps_shape(self):
        self.assertEqual(plan_slice((3, 2), ()), SlicePlan((), (), (3, 2)))

    def test_too_many_keys_raises_dimension_error(self):
        with self.assertRaises(SliceDimensionError):
            plan_index((5, 5), (1, 1, 1))
        with self.assertRaises(IndexOutOfRangeError):
            plan_index((5,), (0, 0))

    def test_unsupported_sub_key_raises(self):
        for bad in ("a", None, (1,), 1.5):
            with self.subTest(bad=bad):
                with self.assertRaises(UnsupportedKeyTypeError):
                    plan_index((5, 5), (1, bad))

    def test_integer_sub_key_is_bounds_checked(self):
        with self.assertRaises(IndexOutOfRangeError):
            plan_index((5, 3), (1, 3))

    def test_negative_integer_sub_key_wraps(self):
        plan = plan_slice((5, 3), (-1, -1))
        self.assertEqual(plan.begins, (4, 2))
        self.assertEqual(plan.ends, (5, 3))


class TestPlanOtherKeys(unittest.TestCase):
    def test_unbounded_keys_are_full_view(self):
        self.assertIs(plan_index((3,), None), FULL_VIEW)
        self.assertIs(plan_index((3,), ...), FULL_VIEW)

    def test_unsupported_key_raises(self):
        for bad in ("0", 1.0, {0: 1}, True):
            with self.subTest(bad=bad):
                with self.assertRaises(UnsupportedKeyTypeError):
                    plan_index((3,), bad)


class TestClassifyValue(unittest.TestCase):
    def test_kinds(self):
        self.assertIs(classify_value(zeros((2,))), ValueKind.TENSOR)
        self.assertIs(classify_value(3), ValueKind.SCALAR)
        self.assertIs(classify_value(2.5), ValueKind.SCALAR)
        self.assertIs(classify_value(np.float32(1.0)), ValueKind.SCALAR)
        self.assertIs(classify_value([1, 2]), ValueKind.LITERAL)
        self.assertIs(classify_value(((1,), (2,))), ValueKind.LITERAL)

    def test_unsupported_values(self):
        for bad in ("x", None, {1: 2}, np.zeros(2)):
            with self.subTest(bad=bad):
                with self.assertRaises(UnsupportedValueTypeError):
                    classify_value(bad)


if __name__ == "__main__":
    unittest.main()
