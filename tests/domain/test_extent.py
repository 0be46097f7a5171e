import unittest
from unittest import TestCase

import numpy as np

from stemtensor.domain._errors import IllegalOperationError, TensorError
from stemtensor.domain._extent import Extent, extent_max


class TestExtentConstruction(TestCase):
    def test_variadic_and_list_forms_agree(self):
        self.assertEqual(Extent(2, 3, 4), Extent([2, 3, 4]))
        self.assertEqual(Extent(2, 3, 4).dims, (2, 3, 4))

    def test_copy_constructor_is_independent(self):
        a = Extent(2, 3)
        b = Extent(a)
        b[0] = 7
        self.assertEqual(a.dims, (2, 3))
        self.assertEqual(b.dims, (7, 3))

    def test_single_int_is_one_dimension(self):
        e = Extent(5)
        self.assertEqual(e.count, 1)
        self.assertEqual(e.elements, 5)

    def test_accepts_numpy_integers(self):
        e = Extent(np.int64(4), np.int64(2))
        self.assertEqual(e.dims, (4, 2))
        self.assertEqual(Extent(np.int64(3)).dims, (3,))
        self.assertEqual(Extent(np.zeros((2, 6)).shape).dims, (2, 6))

    def test_elements_is_product(self):
        for dims in [(1,), (3,), (2, 3), (4, 1, 5), (2, 2, 2, 2)]:
            self.assertEqual(Extent(dims).elements, int(np.prod(dims)))

    def test_empty_extent_has_one_element(self):
        e = Extent()
        self.assertEqual(e.count, 0)
        self.assertEqual(e.elements, 1)
        self.assertEqual(e.span, 0)

    def test_span_counts_non_unit_dims(self):
        self.assertEqual(Extent(1, 5).span, 1)
        self.assertEqual(Extent(5, 1).span, 1)
        self.assertEqual(Extent(3, 1, 4).span, 2)
        self.assertEqual(Extent(1, 1).span, 0)


class TestExtentIndexing(TestCase):
    def test_index_beyond_rank_is_one(self):
        e = Extent(2, 3)
        self.assertEqual(e[0], 2)
        self.assertEqual(e[1], 3)
        for i in range(2, 6):
            self.assertEqual(e[i], 1)

    def test_setitem_recomputes_elements_and_span(self):
        e = Extent(2, 3)
        e[1] = 1
        self.assertEqual(e.elements, 2)
        self.assertEqual(e.span, 1)
        e[0] = 10
        self.assertEqual(e.elements, 10)

    def test_iteration_and_len(self):
        e = Extent(4, 5, 6)
        self.assertEqual(len(e), 3)
        self.assertEqual(list(e), [4, 5, 6])

    def test_max_axis_returns_first_largest(self):
        self.assertEqual(Extent(3, 7, 2).max_axis(), 1)
        self.assertEqual(Extent(5, 5, 1).max_axis(), 0)

    def test_max_axis_of_empty_raises(self):
        with self.assertRaises(IllegalOperationError):
            Extent().max_axis()

    def test_repr(self):
        self.assertEqual(repr(Extent(2, 3)), "Extent(2, 3)")


class TestExtentExtend(TestCase):
    def test_extend_pads_with_ones(self):
        self.assertEqual(Extent(2, 3).extend(4), Extent(2, 3, 1, 1))
        self.assertEqual(Extent(2, 3).extend(4).dims, (2, 3, 1, 1))

    def test_extend_to_same_rank_is_copy(self):
        e = Extent(2, 3)
        f = e.extend(2)
        self.assertEqual(f.dims, (2, 3))
        self.assertIsNot(e, f)

    def test_extended_classmethod(self):
        self.assertEqual(Extent.extended(Extent(4), 3).dims, (4, 1, 1))

    def test_extend_to_smaller_rank_raises(self):
        with self.assertRaises(IllegalOperationError):
            Extent(2, 3, 4).extend(2)
        with self.assertRaises(TensorError):
            Extent(2, 3, 4).extend(0)


class TestExtentComparison(TestCase):
    def test_equality_ignores_trailing_unit_dims(self):
        self.assertEqual(Extent(2, 3), Extent(2, 3, 1))
        self.assertEqual(Extent(2, 3, 1), Extent(2, 3))

    def test_inequality(self):
        self.assertNotEqual(Extent(2, 3), Extent(3, 2))
        self.assertNotEqual(Extent(2, 3), Extent(2, 4))
        self.assertFalse(Extent(2, 3) != Extent(2, 3))

    def test_equality_only_checks_left_operand_dims(self):
        self.assertTrue(Extent(0) == Extent(0, 5))
        self.assertFalse(Extent(0, 5) == Extent(0))

    def test_ordering_compares_elements_only(self):
        self.assertTrue(Extent(2, 3) < Extent(7))
        self.assertTrue(Extent(10) > Extent(3, 3))
        self.assertTrue(Extent(2, 3) <= Extent(3, 2))
        self.assertTrue(Extent(2, 3) >= Extent(6))
        self.assertFalse(Extent(2, 3) < Extent(3, 2))

    def test_ordering_against_other_types_raises(self):
        with self.assertRaises(TypeError):
            _ = Extent(2, 3) < 6
        with self.assertRaises(TypeError):
            _ = Extent(2, 3) >= (2, 3)
        self.assertFalse(Extent(2, 3) == (2, 3))

    def test_extent_max_picks_more_elements(self):
        a = Extent(2, 3)
        b = Extent(4, 4)
        self.assertIs(extent_max(a, b), b)
        self.assertIs(extent_max(b, a), b)

    def test_extent_max_tie_returns_right(self):
        a = Extent(2, 3)
        b = Extent(3, 2)
        self.assertIs(extent_max(a, b), b)

    def test_not_hashable(self):
        with self.assertRaises(TypeError):
            hash(Extent(2, 3))


if __name__ == "__main__":
    unittest.main()
