"""
Shape descriptor for N-dimensional tensors.

`Extent` is an ordered list of dimension sizes with two cached derived
quantities:

- `elements`: the product of all dimensions (1 for an empty extent), i.e. the
  number of scalar slots an allocation of this shape needs.
- `span`: the number of dimensions whose size is greater than one. A row or
  column vector has span 1 regardless of how many unit axes surround it.

Indexing past the declared number of dimensions yields 1. This implicit unit
padding lets axis-agnostic code (e.g. concatenation across tensors of
different rank) read any axis without first normalising ranks.

Comparison semantics
--------------------
- Equality first compares `elements`, then compares dimension sizes only for
  the indices of the *left* operand. `Extent(2, 3) == Extent(2, 3, 1)` is
  therefore True, and so is the reverse. The check is asymmetric when the
  right operand carries extra trailing dimensions, since only the element
  count guards them: `Extent(0) == Extent(0, 5)` holds but the reverse does
  not.
- Ordering (`<`, `>`, `<=`, `>=`) compares `elements` only and says nothing
  about per-axis sizes.
"""

from __future__ import annotations

import numbers
from typing import Iterable, Iterator, Union

from ._errors import IllegalOperationError


def _product(values: Iterable[int]) -> int:
    result = 1
    for v in values:
        result *= v
    return result


class Extent:
    """
    Ordered, mutable-per-index shape descriptor.

    Parameters
    ----------
    *dims : int or Iterable[int] or Extent
        Either the dimension sizes as separate arguments (`Extent(2, 3)`), a
        single iterable of sizes (`Extent([2, 3])`), or another extent to
        copy (`Extent(other)`).

    Notes
    -----
    Extents are compared by value but are not hashable, since assigning to an
    index changes their value.
    """

    __slots__ = ("_values", "elements", "span")

    def __init__(self, *dims: Union[int, Iterable[int], "Extent"]) -> None:
        if len(dims) == 1 and not isinstance(dims[0], numbers.Integral):
            values = [int(d) for d in dims[0]]
        else:
            values = [int(d) for d in dims]

        self._values: list[int] = values
        self.elements: int = 0
        self.span: int = 0
        self._recompute()

    def _recompute(self) -> None:
        self.elements = _product(self._values)
        self.span = sum(1 for v in self._values if v > 1)

    @classmethod
    def extended(cls, extent: "Extent", over: int) -> "Extent":
        """
        Return a copy of `extent` padded with trailing unit dimensions.

        Parameters
        ----------
        extent : Extent
            The extent to pad.
        over : int
            The number of dimensions of the result.

        Raises
        ------
        IllegalOperationError
            If `over` is smaller than `extent.count`.
        """
        if over < extent.count:
            raise IllegalOperationError(
                "Extent.extend",
                f"cannot extend {extent!r} to fewer dimensions ({over}).",
            )
        return cls(extent._values + [1] * (over - extent.count))

    def extend(self, to: int) -> "Extent":
        """Return this extent padded with trailing 1s to `to` dimensions."""
        return Extent.extended(self, to)

    @property
    def count(self) -> int:
        """Number of declared dimensions."""
        return len(self._values)

    @property
    def dims(self) -> tuple[int, ...]:
        """Declared dimension sizes as a tuple."""
        return tuple(self._values)

    def max_axis(self) -> int:
        """
        Return the index of the largest dimension.

        The first such index wins on ties.

        Raises
        ------
        IllegalOperationError
            If the extent has no dimensions.
        """
        if not self._values:
            raise IllegalOperationError("Extent.max_axis", "extent is empty.")

        best_index = 0
        for i in range(1, len(self._values)):
            if self._values[i] > self._values[best_index]:
                best_index = i
        return best_index

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[int]:
        return iter(list(self._values))

    def __getitem__(self, index: int) -> int:
        # beyond the declared dimensions every axis has size 1
        if index >= len(self._values):
            return 1
        return self._values[index]

    def __setitem__(self, index: int, value: int) -> None:
        self._values[index] = int(value)
        self._recompute()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Extent):
            return NotImplemented
        if self.elements != other.elements:
            return False
        for i in range(self.count):
            if self[i] != other[i]:
                return False
        return True

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None  # type: ignore[assignment]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Extent):
            return NotImplemented
        return self.elements < other.elements

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Extent):
            return NotImplemented
        return self.elements > other.elements

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Extent):
            return NotImplemented
        return self.elements <= other.elements

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Extent):
            return NotImplemented
        return self.elements >= other.elements

    def __repr__(self) -> str:
        return f"Extent({', '.join(str(v) for v in self._values)})"


def extent_max(left: Extent, right: Extent) -> Extent:
    """
    Return whichever extent has more elements.

    When both have the same number of elements, `right` is returned.
    """
    return left if left > right else right
