import unittest
from unittest import TestCase

from stemtensor.domain._extent import Extent
from stemtensor.domain._storage import strides_for_order
from stemtensor.domain._storage_view import StorageView


class TestStorageView(TestCase):
    def test_full_view_has_zero_offsets(self):
        v = StorageView.full(Extent(3, 4, 5))
        self.assertEqual(v.shape, Extent(3, 4, 5))
        self.assertEqual(v.offset, [0, 0, 0])

    def test_missing_offset_defaults_to_zeros(self):
        v = StorageView(shape=Extent(2, 2))
        self.assertEqual(v.offset, [0, 0])

    def test_shape_is_copied(self):
        shape = Extent(2, 2)
        v = StorageView(shape=shape, offset=[1, 1])
        shape[0] = 9
        self.assertEqual(v.shape.dims, (2, 2))

    def test_reversed(self):
        v = StorageView(shape=Extent(2, 3, 4), offset=[1, 2, 3]).reversed()
        self.assertEqual(v.shape.dims, (4, 3, 2))
        self.assertEqual(v.offset, [3, 2, 1])

    def test_shifted_adds_offsets(self):
        v = StorageView(shape=Extent(6, 6), offset=[2, 3])
        w = v.shifted(Extent(2, 2), [1, 1])
        self.assertEqual(w.shape.dims, (2, 2))
        self.assertEqual(w.offset, [3, 4])

    def test_rank_zero_view(self):
        v = StorageView.full(Extent())
        self.assertEqual(v.offset, [])
        self.assertEqual(v.shape.elements, 1)


class TestStridesForOrder(TestCase):
    def test_row_major_order(self):
        # last axis fastest; physical axis 0 is the last allocation axis
        self.assertEqual(strides_for_order(Extent(2, 3, 4), [2, 1, 0]), [1, 4, 12])

    def test_column_major_order(self):
        self.assertEqual(strides_for_order(Extent(2, 3, 4), [0, 1, 2]), [6, 2, 1])

    def test_empty_shape(self):
        self.assertEqual(strides_for_order(Extent(), []), [])


if __name__ == "__main__":
    unittest.main()
