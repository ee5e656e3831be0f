"""
Unit tests for Tensor.__getitem__.

Covers integer, range, composite and unbounded keys on NumPy-engine tensors,
including view aliasing and the error raised for each rejected key.
"""

import unittest

from tensorplan import (
    IndexOutOfRangeError,
    SliceDimensionError,
    UnsupportedKeyTypeError,
    array,
    zeros,
)


class TestTensorGetItemInteger(unittest.TestCase):
    def setUp(self):
        self.t = array([[1, 2], [3, 4]], dtype="int32")

    def test_row_view(self):
        row = self.t[0]
        self.assertEqual(row.shape, (2,))
        self.assertEqual(row.to_list(), [1, 2])

    def test_chained_integer_keys_reach_elements(self):
        lit = [[1, 2], [3, 4]]
        for i in range(2):
            for j in range(2):
                with self.subTest(i=i, j=j):
                    self.assertEqual(self.t[i][j].as_scalar(), lit[i][j])

    def test_negative_index(self):
        self.assertEqual(self.t[-1].to_list(), [3, 4])

    def test_out_of_range(self):
        with self.assertRaises(IndexOutOfRangeError):
            self.t[2]
        with self.assertRaises(IndexOutOfRangeError):
            self.t[-3]

    def test_index_into_zero_d_raises(self):
        with self.assertRaises(IndexOutOfRangeError):
            self.t[0][0][0]

    def test_iteration_stops_at_extent(self):
        rows = [r.to_list() for r in self.t]
        self.assertEqual(rows, [[1, 2], [3, 4]])

    def test_view_aliases_parent(self):
        row = self.t[1]
        row.handle[0] = 30
        self.assertEqual(self.t.to_list(), [[1, 2], [30, 4]])


class TestTensorGetItemRange(unittest.TestCase):
    def setUp(self):
        self.t = array([[0, 1, 2], [3, 4, 5], [6, 7, 8], [9, 10, 11]])

    def test_bounded_range(self):
        sub = self.t[1:3]
        self.assertEqual(sub.shape, (2, 3))
        self.assertEqual(sub.to_list(), [[3, 4, 5], [6, 7, 8]])

    def test_open_ended_ranges(self):
        self.assertEqual(self.t[2:].shape, (2, 3))
        self.assertEqual(self.t[:1].shape, (1, 3))

    def test_empty_range(self):
        self.assertEqual(self.t[2:2].shape, (0, 3))

    def test_full_range_is_identity(self):
        self.assertIs(self.t[:], self.t)

    def test_range_out_of_bounds(self):
        with self.assertRaises(IndexOutOfRangeError):
            self.t[1:5]

    def test_stepped_range_rejected(self):
        with self.assertRaises(UnsupportedKeyTypeError):
            self.t[::2]


class TestTensorGetItemComposite(unittest.TestCase):
    def test_integer_and_range_on_rank_three(self):
        t = zeros((5, 5, 5))
        self.assertEqual(t[2, 1:3].shape, (2, 5))

    def test_all_integers_gives_single_element(self):
        t = array([[1, 2], [3, 4]])
        sub = t[1, 0]
        self.assertEqual(sub.shape, (1,))
        self.assertEqual(sub.as_scalar(), 3)

    def test_column_selection(self):
        t = array([[1, 2], [3, 4], [5, 6]])
        col = t[:, 1]
        self.assertEqual(col.shape, (3,))
        self.assertEqual(col.to_list(), [2, 4, 6])

    def test_list_key(self):
        t = array([[1, 2], [3, 4]])
        self.assertEqual(t[[0, slice(0, 2)]].to_list(), [1, 2])

    def test_too_many_keys(self):
        t = zeros((2, 2))
        with self.assertRaises(SliceDimensionError):
            t[0, 0, 0]

    def test_bad_sub_key(self):
        t = zeros((2, 2))
        with self.assertRaises(UnsupportedKeyTypeError):
            t[0, "x"]


class TestTensorGetItemOther(unittest.TestCase):
    def test_unbounded_keys_return_self(self):
        t = zeros((2,))
        self.assertIs(t[...], t)
        self.assertIs(t[None], t)

    def test_unsupported_keys(self):
        t = zeros((2,))
        for key in ("0", 1.0, True, {0: 0}):
            with self.subTest(key=key):
                with self.assertRaises(UnsupportedKeyTypeError):
                    t[key]


if __name__ == "__main__":
    unittest.main()
