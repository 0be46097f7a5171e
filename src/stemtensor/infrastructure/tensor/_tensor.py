"""
Concrete strided Tensor.

A `Tensor` is an address-translation unit over a shared linear storage. It
keeps three pieces of layout state apart:

- `stride`: per-physical-axis step sizes, derived once from the allocation
  shape (`internal_shape`) through the storage's declared axis order;
- `dim_index`: a permutation mapping each logical axis position to the
  physical stride entry it uses;
- `view`: the logical shape and per-axis offset of the visible window.

A storage offset is computed as::

    offset + sum((indices[dim_index[d]] + view.offset[dim_index[d]]) * stride[d])

Because transposition only permutes `dim_index` and the view, and windowing
only changes the view, both are O(1) and never copy data. Every tensor
derived from another through a view, transpose or reshape aliases the same
storage; writes through any of them are visible through all of them.

Construction
------------
- `Tensor(array, shape)`: allocate storage from a flat sequence. The sequence
  is laid out in *storage order* (row-major for `NativeStorage`).
- `Tensor(storage=s, shape=shape, view=None, offset=0)`: wrap without copying.
- `Tensor(shape=shape)`: zero-initialised storage of `shape.elements`.
- `Tensor.window(parent, selectors)` / `Tensor.derive(parent, ...)`: views
  (see `TensorShapeAndIndexingMixin`).
- `Tensor.from_numpy(arr)`: copy a NumPy array in logical order, independent
  of the storage backend.
"""

from __future__ import annotations

from typing import Any, Iterable, Optional, Sequence, Union

import numpy as np

from ...domain._constants import FLOAT_FORMAT, INT_FORMAT
from ...domain._errors import DimensionMismatchError
from ...domain._extent import Extent
from ...domain._storage import IStorage
from ...domain._storage_view import StorageView
from ..storage._native_storage import NativeStorage
from ._shape_and_indexing import TensorShapeAndIndexingMixin
from ._storage_index import StorageIndexIterator

ShapeLike = Union[Extent, Sequence[int], int]


def _default_order(dims: int) -> list[int]:
    return [dims - i - 1 for i in range(dims)]


class Tensor(TensorShapeAndIndexingMixin):
    """
    N-dimensional strided tensor over a pluggable linear storage.

    Parameters
    ----------
    array : Iterable, optional
        Flat element sequence used to build a new storage.
    shape : Extent or Sequence[int] or int, optional
        Allocation shape. Defaults to a 1-D shape of `len(array)` when only
        `array` is given.
    storage : IStorage, optional
        Existing storage to wrap. Mutually exclusive with `array`.
    view : StorageView, optional
        Visible window when wrapping `storage`. Defaults to the full shape.
    offset : int, optional
        Base offset into storage. Defaults to 0.
    storage_cls : type, optional
        Backend used when allocating. Defaults to `NativeStorage`.
    dtype : Any, optional
        Element type used when allocating.

    Raises
    ------
    ValueError
        If neither `array`, `storage` nor `shape` is given, or both `array`
        and `storage` are given.
    DimensionMismatchError
        If `offset + shape.elements` exceeds the storage size.
    """

    def __init__(
        self,
        array: Optional[Iterable[Any]] = None,
        shape: Optional[ShapeLike] = None,
        *,
        storage: Optional[IStorage] = None,
        view: Optional[StorageView] = None,
        offset: int = 0,
        storage_cls: type = NativeStorage,
        dtype: Any = None,
    ) -> None:
        if array is not None and storage is not None:
            raise ValueError("Tensor() accepts either array or storage, not both")

        if array is not None:
            if shape is None:
                array = list(array) if not isinstance(array, np.ndarray) else array
                shape = Extent(len(array))
            storage = storage_cls.from_array(array, dtype=dtype)
        elif storage is None:
            if shape is None:
                raise ValueError("Tensor() requires array, storage or shape")
            storage = storage_cls(Extent(shape).elements, dtype=dtype)
        elif shape is None:
            shape = Extent(storage.size)

        internal_shape = Extent(shape)
        if int(offset) + internal_shape.elements > storage.size:
            raise DimensionMismatchError(storage.size, internal_shape, op="Tensor")

        self._storage: IStorage = storage
        self._internal_shape: Extent = internal_shape
        self._stride: list[int] = storage.calculate_stride(internal_shape)
        self._dim_index: list[int] = _default_order(internal_shape.count)
        self._offset: int = int(offset)
        self._view: StorageView = (
            StorageView.full(internal_shape) if view is None else view
        )

    @classmethod
    def _from_parts(
        cls,
        *,
        storage: IStorage,
        internal_shape: Extent,
        stride: list[int],
        dim_index: list[int],
        offset: int,
        view: StorageView,
    ) -> "Tensor":
        t = cls.__new__(cls)
        t._storage = storage
        t._internal_shape = internal_shape
        t._stride = list(stride)
        t._dim_index = list(dim_index)
        t._offset = int(offset)
        t._view = view
        return t

    @classmethod
    def from_numpy(
        cls,
        arr: Any,
        storage_cls: type = NativeStorage,
        dtype: Any = None,
    ) -> "Tensor":
        """
        Create a tensor holding a copy of an array-like, in logical order.

        Unlike `Tensor(array, shape)`, which lays the flat sequence out in
        storage order, this walks the new tensor with `storage_indices()` so
        `t[i, j] == arr[i, j]` for every backend.
        """
        src = np.asarray(arr)
        t = cls(
            shape=Extent(src.shape),
            storage_cls=storage_cls,
            dtype=src.dtype if dtype is None else dtype,
        )
        for pos, value in zip(t.storage_indices(), src.ravel(order="C").tolist()):
            t.storage[pos] = value
        return t

    # ------------------------------------------------------------------
    # Layout metadata
    # ------------------------------------------------------------------
    @property
    def storage(self) -> IStorage:
        return self._storage

    @property
    def shape(self) -> Extent:
        return self._view.shape

    @property
    def internal_shape(self) -> Extent:
        return self._internal_shape

    @property
    def stride(self) -> list[int]:
        return self._stride

    @property
    def dim_index(self) -> list[int]:
        return self._dim_index

    @property
    def view(self) -> StorageView:
        return self._view

    @property
    def offset(self) -> int:
        return self._offset

    @property
    def rank(self) -> int:
        return self._view.shape.count

    @property
    def elements(self) -> int:
        return self._view.shape.elements

    @property
    def dtype(self) -> Any:
        return self._storage.dtype

    # ------------------------------------------------------------------
    # Addressing
    # ------------------------------------------------------------------
    def calculate_offset(self, indices: Optional[Sequence[int]] = None) -> int:
        """
        Translate logical indices to a storage offset.

        Parameters
        ----------
        indices : Sequence[int], optional
            One index per logical axis, relative to the view. Missing
            trailing indices are taken as 0. When omitted, the offset of the
            view origin is returned.
        """
        view_offset = self._view.offset
        pos = self._offset
        if indices is None:
            for d, axis in enumerate(self._dim_index):
                pos += view_offset[axis] * self._stride[d]
            return pos

        n = len(indices)
        for d, axis in enumerate(self._dim_index):
            idx = indices[axis] if axis < n else 0
            pos += (idx + view_offset[axis]) * self._stride[d]
        return pos

    def storage_indices(self) -> StorageIndexIterator:
        """
        Return a fresh iterator over the storage offsets of the view.

        Offsets are produced in row-major logical order (last axis fastest),
        each visible element exactly once. Call again to restart.
        """
        return StorageIndexIterator(self)

    def values(self) -> list[Any]:
        """Return the visible elements as a flat list in row-major order."""
        storage = self._storage
        return [storage[i] for i in self.storage_indices()]

    # ------------------------------------------------------------------
    # Host interop
    # ------------------------------------------------------------------
    def to_numpy(self) -> np.ndarray:
        """Return the visible elements as a new C-contiguous NumPy array."""
        return np.asarray(self.values(), dtype=self.dtype).reshape(self.shape.dims)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------
    def _element_to_string(self, value: Any) -> str:
        kind = np.dtype(self.dtype).kind
        if kind == "f":
            return FLOAT_FORMAT % value
        if kind in "iu":
            return INT_FORMAT % value
        return str(value)

    def _convert_to_string(self, indices: list[int], dim: int) -> str:
        idx = list(indices)
        last = self.rank - 1

        parts: list[str] = []
        for i in range(self.shape[dim]):
            idx[dim] = i
            if dim == last:
                parts.append(self._element_to_string(self[idx]))
            else:
                indent = " " * (dim + 1) if i > 0 else ""
                parts.append(indent + self._convert_to_string(idx, dim + 1))

        sep = ",\t" if dim == last else "\n"
        return f"[{sep.join(parts)}]"

    def __str__(self) -> str:
        if self.rank == 0:
            return self._element_to_string(self._storage[self.calculate_offset([])])
        return self._convert_to_string([0] * self.rank, 0)

    def __repr__(self) -> str:
        return (
            f"Tensor(shape={self.shape!r}, dtype={self.dtype}, "
            f"storage={type(self._storage).__name__})"
        )
