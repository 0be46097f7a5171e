"""
Linear storage contract.

This module defines the domain-level interface for flat numeric buffers that
back tensors. A storage is deliberately one-dimensional: it knows how many
elements it holds and how to read or write an element at an integer offset,
but it does not own any dimensional structure. Shape, stride and view
bookkeeping live in the tensor.

What a storage *does* declare is the order in which it lays out allocation
axes (`order` / `calculate_order`) and, from that order, the stride vector
for a given shape (`calculate_stride`). This is the only point where a
backend influences addressing, which keeps tensors layout-agnostic.

Physical axis convention
------------------------
`calculate_stride(shape)` returns one entry per *physical* axis, where
physical axis `p` corresponds to allocation axis `shape.count - 1 - p`. A
tensor's default `dim_index` is therefore the reverse identity, and for
row-major storage `stride[0] == 1`.

Backends
--------
Any object satisfying `IStorage` can be plugged into a tensor. The reference
implementation is `NativeStorage` (row-major, NumPy-backed); accelerated
backends only need to honour the same get/set, allocation, copy and stride
semantics.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Optional, Protocol, Sequence, runtime_checkable

from ._extent import Extent


class DimensionOrder(Enum):
    """
    Allocation axis ordering declared by a storage backend.

    Attributes
    ----------
    ROW_MAJOR : DimensionOrder
        Last axis varies fastest (C order).
    COLUMN_MAJOR : DimensionOrder
        First axis varies fastest (Fortran / BLAS order).
    """

    ROW_MAJOR = "row_major"
    COLUMN_MAJOR = "column_major"


def strides_for_order(shape: Extent, order: Sequence[int]) -> list[int]:
    """
    Compute physical-axis strides for `shape` given an axis order.

    Parameters
    ----------
    shape : Extent
        Allocation shape.
    order : Sequence[int]
        Allocation axes listed fastest-first.

    Returns
    -------
    list[int]
        Stride per physical axis (physical axis `p` is allocation axis
        `shape.count - 1 - p`).
    """
    n = shape.count
    axis_stride = [0] * n
    step = 1
    for axis in order:
        axis_stride[axis] = step
        step *= shape[axis]
    return [axis_stride[n - 1 - p] for p in range(n)]


@runtime_checkable
class IStorage(Protocol):
    """
    Storage interface.

    Constructors
    ------------
    Implementations must provide:

    - `cls(size, dtype=None)`: zero-filled allocation of `size` elements.
    - `cls.from_array(values, dtype=None)`: storage holding a flat sequence.
    - `cls.from_storage(other, copy=False)`: alias `other`'s buffer, or
      duplicate it elementwise when `copy=True`.

    Protocols cannot express constructors, so only the instance surface is
    checked structurally.
    """

    @property
    def size(self) -> int:
        """Number of elements in the buffer."""
        ...

    @property
    def dtype(self) -> Any:
        """Element type of the buffer."""
        ...

    @property
    def order(self) -> DimensionOrder:
        """Declared allocation axis order."""
        ...

    def __getitem__(self, index: int) -> Any: ...

    def __setitem__(self, index: int, value: Any) -> None: ...

    def calculate_order(self, dims: int) -> list[int]:
        """
        Return the allocation axes of a `dims`-dimensional shape, fastest first.
        """
        ...

    def calculate_stride(self, shape: Extent) -> list[int]:
        """
        Return the stride vector (one entry per physical axis) for `shape`.
        """
        ...

    def transform(
        self,
        fn: Callable[[Any], Any],
        storage_cls: Optional[type] = None,
        dtype: Any = None,
    ) -> "IStorage":
        """
        Map every element through `fn` into a new storage.

        Parameters
        ----------
        fn : Callable[[Any], Any]
            Elementwise mapping.
        storage_cls : type, optional
            Backend of the result; defaults to this storage's class.
        dtype : Any, optional
            Element type of the result; defaults to this storage's dtype.
        """
        ...

    def shares_memory(self, other: "IStorage") -> bool:
        """Return True if both storages alias the same buffer."""
        ...

    def to_numpy(self) -> Any:
        """Return a flat copy of the raw buffer in storage order."""
        ...
