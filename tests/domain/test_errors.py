import unittest
from unittest import TestCase

from stemtensor.domain._errors import (
    DimensionMismatchError,
    IllegalAxisError,
    IllegalOperationError,
    IllegalReshapeError,
    TensorError,
)
from stemtensor.domain._extent import Extent


class TestTensorErrors(TestCase):
    def test_hierarchy(self):
        for cls in (
            DimensionMismatchError,
            IllegalAxisError,
            IllegalReshapeError,
            IllegalOperationError,
        ):
            self.assertTrue(issubclass(cls, TensorError))
            self.assertTrue(issubclass(cls, ValueError))

    def test_dimension_mismatch_attributes(self):
        e = DimensionMismatchError(Extent(2, 3), Extent(3, 2), op="copy")
        self.assertEqual(e.lhs, Extent(2, 3))
        self.assertEqual(e.rhs, Extent(3, 2))
        self.assertEqual(e.op, "copy")
        self.assertIn("copy", str(e))
        self.assertIn("Extent(2, 3)", str(e))

    def test_illegal_axis_attributes(self):
        e = IllegalAxisError(3, 2)
        self.assertEqual((e.axis, e.ndim), (3, 2))
        self.assertIn("axis 3", str(e))

    def test_illegal_reshape_attributes(self):
        e = IllegalReshapeError(Extent(3, 3), Extent(2, 4))
        self.assertEqual(e.new_shape, Extent(3, 3))
        self.assertEqual(e.old_shape, Extent(2, 4))

    def test_illegal_operation_message(self):
        e = IllegalOperationError("concat", "at least two tensors are required.")
        self.assertEqual(str(e), "concat: at least two tensors are required.")


if __name__ == "__main__":
    unittest.main()
