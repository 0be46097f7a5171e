import unittest
from unittest import TestCase

import numpy as np

from stemtensor.domain._errors import DimensionMismatchError
from stemtensor.domain._extent import Extent
from stemtensor.domain._storage_view import StorageView
from stemtensor.domain._tensor import ITensor
from stemtensor.infrastructure.storage import ColumnMajorStorage, NativeStorage
from stemtensor.infrastructure.tensor import Tensor


def _frange(n: int) -> list[float]:
    return [float(i) for i in range(n)]


class TestTensorFromArray(TestCase):
    def test_row_major_element_access(self):
        array = _frange(10)
        t = Tensor(array, Extent(2, 5))

        self.assertEqual(t.shape, Extent(2, 5))
        k = 0
        for i in range(t.shape[0]):
            for j in range(t.shape[1]):
                self.assertEqual(t[i, j], array[k])
                k += 1

    def test_layout_metadata(self):
        t = Tensor(_frange(6), (2, 3))
        self.assertEqual(t.internal_shape, Extent(2, 3))
        self.assertEqual(t.stride, [1, 3])
        self.assertEqual(t.dim_index, [1, 0])
        self.assertEqual(t.offset, 0)
        self.assertEqual(t.view.offset, [0, 0])
        self.assertEqual(t.rank, 2)
        self.assertEqual(t.elements, 6)

    def test_shape_defaults_to_vector(self):
        t = Tensor([1.0, 2.0, 3.0])
        self.assertEqual(t.shape.dims, (3,))
        self.assertEqual(t.values(), [1.0, 2.0, 3.0])

    def test_base_offset_selects_later_elements(self):
        array = _frange(100)
        first = Tensor(array, Extent(5, 10), offset=0)
        second = Tensor(array, Extent(5, 10), offset=50)

        self.assertEqual(first.values(), array[:50])
        self.assertEqual(second.values(), array[50:])
        self.assertEqual(second[0, 0], 50.0)

    def test_too_few_elements_rejected(self):
        with self.assertRaises(DimensionMismatchError):
            Tensor([1.0, 2.0, 3.0], Extent(2, 2))

    def test_offset_past_end_rejected(self):
        with self.assertRaises(DimensionMismatchError):
            Tensor(_frange(10), Extent(2, 5), offset=1)

    def test_dtype_follows_data_or_argument(self):
        self.assertEqual(Tensor([1, 2], (2,)).dtype.kind, "i")
        self.assertEqual(Tensor([1, 2], (2,), dtype=np.float32).dtype, np.float32)

    def test_array_and_storage_together_rejected(self):
        with self.assertRaises(ValueError):
            Tensor([1.0], (1,), storage=NativeStorage(1))

    def test_nothing_given_rejected(self):
        with self.assertRaises(ValueError):
            Tensor()


class TestTensorFromStorage(TestCase):
    def test_wraps_without_copy(self):
        s = NativeStorage.from_array(_frange(6))
        t = Tensor(storage=s, shape=Extent(2, 3))
        self.assertIs(t.storage, s)
        t[1, 2] = -1.0
        self.assertEqual(s[5], -1.0)

    def test_explicit_view(self):
        s = NativeStorage.from_array(_frange(16))
        view = StorageView(shape=Extent(2, 2), offset=[1, 1])
        t = Tensor(storage=s, shape=Extent(4, 4), view=view)
        self.assertEqual(t.shape, Extent(2, 2))
        self.assertEqual(t.values(), [5.0, 6.0, 9.0, 10.0])

    def test_storage_too_small_rejected(self):
        with self.assertRaises(DimensionMismatchError):
            Tensor(storage=NativeStorage(3), shape=Extent(2, 2))

    def test_shape_defaults_to_storage_size(self):
        t = Tensor(storage=NativeStorage.from_array(_frange(4)))
        self.assertEqual(t.shape.dims, (4,))


class TestTensorShapeOnly(TestCase):
    def test_zero_initialised(self):
        t = Tensor(shape=Extent(3, 4))
        self.assertEqual(t.storage.size, 12)
        self.assertTrue(all(v == 0.0 for v in t.values()))

    def test_accepts_tuple_and_int_shapes(self):
        self.assertEqual(Tensor(shape=(2, 3)).shape, Extent(2, 3))
        self.assertEqual(Tensor(shape=4).shape, Extent(4))

    def test_rank_zero(self):
        t = Tensor(shape=())
        self.assertEqual(t.rank, 0)
        self.assertEqual(t.values(), [0.0])
        t[()] = 3.0
        self.assertEqual(t[[]], 3.0)

    def test_storage_backend_selection(self):
        t = Tensor(shape=(2, 2), storage_cls=ColumnMajorStorage)
        self.assertIsInstance(t.storage, ColumnMajorStorage)

    def test_satisfies_protocol(self):
        self.assertIsInstance(Tensor(shape=(2,)), ITensor)


class TestTensorNumpyInterop(TestCase):
    def test_round_trip(self):
        x = np.arange(24, dtype=np.float64).reshape(2, 3, 4)
        t = Tensor.from_numpy(x)
        self.assertEqual(t.shape.dims, (2, 3, 4))
        np.testing.assert_array_equal(t.to_numpy(), x)

    def test_to_numpy_matches_flat_construction(self):
        x = np.arange(24, dtype=np.float64).reshape(2, 3, 4)
        t = Tensor(x.ravel().tolist(), (2, 3, 4))
        np.testing.assert_array_equal(t.to_numpy(), x)

    def test_column_major_backend_is_transparent(self):
        x = np.arange(10, dtype=np.float64).reshape(2, 5)
        t = Tensor.from_numpy(x, storage_cls=ColumnMajorStorage)

        for i in range(2):
            for j in range(5):
                self.assertEqual(t[i, j], x[i, j])

        # raw buffer is laid out first-axis-fastest
        np.testing.assert_array_equal(
            t.storage.to_numpy(), [0, 5, 1, 6, 2, 7, 3, 8, 4, 9]
        )
        np.testing.assert_array_equal(t.to_numpy(), x)
        np.testing.assert_array_equal(t.transpose().to_numpy(), x.T)

    def test_rank_zero_round_trip(self):
        t = Tensor.from_numpy(np.array(2.5))
        self.assertEqual(t.to_numpy().shape, ())
        self.assertEqual(float(t.to_numpy()), 2.5)


if __name__ == "__main__":
    unittest.main()
