"""
Odometer traversal over a tensor's visible elements.

`StorageIndexIterator` keeps one counter per logical axis, all starting at
zero, with the last axis as the fastest-moving digit. Each step converts the
current counters to a storage offset through the tensor's own offset
algorithm, then advances the fastest counter. When a counter reaches its
axis length it is reset to zero and the next-slower counter is incremented;
the sequence ends when the slowest counter overflows.

The result is every element of the view exactly once, in lexicographic
(row-major) logical order, whatever the tensor's stride, axis permutation or
window. Copy, fill, concat and map rely on that order to pair elements of
tensors with different layouts.
"""

from __future__ import annotations

from typing import Iterator, TYPE_CHECKING

if TYPE_CHECKING:
    from ...domain._tensor import ITensor


class StorageIndexIterator(Iterator[int]):
    """
    Iterator yielding storage offsets of a tensor's view.

    Parameters
    ----------
    tensor : ITensor
        The tensor to traverse. Its view shape is captured at construction.

    Notes
    -----
    A view with a zero-length axis yields nothing. A rank-0 tensor yields its
    single offset once.
    """

    def __init__(self, tensor: "ITensor") -> None:
        self._tensor = tensor
        self._dims = list(tensor.shape.dims)
        self._indices = [0] * len(self._dims)
        self._last = len(self._dims) - 1
        self._done = any(d == 0 for d in self._dims)

    def __iter__(self) -> "StorageIndexIterator":
        return self

    def __next__(self) -> int:
        if self._done:
            raise StopIteration

        if self._last < 0:
            self._done = True
            return self._tensor.calculate_offset([])

        indices = self._indices
        dims = self._dims
        if indices[self._last] >= dims[self._last]:
            d = self._last
            # carry until no counter overflows
            while d >= 0 and indices[d] >= dims[d]:
                if d == 0:
                    self._done = True
                    raise StopIteration
                indices[d] = 0
                indices[d - 1] += 1
                d -= 1

        value = self._tensor.calculate_offset(indices)
        indices[self._last] += 1
        return value
