"""
NumPy-backed linear storage backends.

This module provides the reference implementations of the `IStorage`
contract:

- `NativeStorage`: plain host buffer, row-major axis order (the last
  allocation axis varies fastest, strides grow leftward).
- `ColumnMajorStorage`: same buffer semantics, but declares the opposite
  axis order (first allocation axis fastest), as a BLAS-style backend would.

From a tensor's perspective the two are interchangeable: element access
through a tensor yields identical values, only the raw buffer layout differs.

Design notes
------------
- The array is held through a `_SharedBuffer` so that aliasing copies
  (`from_storage(..., copy=False)`) share a single allocation and the buffer
  can track how many storages refer to it.
- Elements are addressed with plain integer offsets; no bounds checking is
  done beyond what NumPy performs.
"""

from __future__ import annotations

import logging
import weakref
from typing import Any, Callable, Iterable, Optional

import numpy as np

from ...domain._constants import DEFAULT_DTYPE
from ...domain._extent import Extent
from ...domain._storage import DimensionOrder, strides_for_order
from ._shared_buffer import _SharedBuffer

logger = logging.getLogger(__name__)


class NativeStorage:
    """
    Row-major storage over a shared flat NumPy array.

    Parameters
    ----------
    size : int
        Number of zero-initialised elements to allocate.
    dtype : Any, optional
        NumPy-compatible element type. Defaults to `float64`.
    """

    def __init__(self, size: int = 0, dtype: Any = None) -> None:
        dt = np.dtype(DEFAULT_DTYPE if dtype is None else dtype)
        logger.debug("allocating %s with %d x %s", type(self).__name__, size, dt)
        self._attach(_SharedBuffer(np.zeros(int(size), dtype=dt)))

    def _attach(self, buffer: _SharedBuffer) -> None:
        buffer.incref()
        self._buffer = buffer
        self._finalizer = weakref.finalize(self, buffer.decref)

    # ------------------------------------------------------------------
    # Alternate constructors
    # ------------------------------------------------------------------
    @classmethod
    def from_array(cls, values: Iterable[Any], dtype: Any = None) -> "NativeStorage":
        """
        Create a storage holding a copy of a flat sequence.

        Parameters
        ----------
        values : Iterable
            Flat sequence of numbers (list, tuple, range, 1-D array, ...).
            Multi-dimensional arrays are flattened in C order.
        dtype : Any, optional
            Element type; inferred from `values` (or the default) when None.
        """
        if dtype is None:
            arr = np.asarray(list(values) if not isinstance(values, np.ndarray) else values)
            if arr.dtype.kind not in "biufc":
                arr = arr.astype(DEFAULT_DTYPE)
        else:
            arr = np.asarray(
                list(values) if not isinstance(values, np.ndarray) else values,
                dtype=dtype,
            )
        storage = cls.__new__(cls)
        storage._attach(_SharedBuffer(np.array(arr, copy=True).reshape(-1)))
        return storage

    @classmethod
    def from_storage(cls, other: "NativeStorage", copy: bool = False) -> "NativeStorage":
        """
        Create a storage from another one.

        Parameters
        ----------
        other : NativeStorage
            Source storage.
        copy : bool, optional
            If False (default), the new storage aliases `other`'s buffer. If
            True, a fresh buffer is allocated and filled elementwise.
        """
        storage = cls.__new__(cls)
        if copy:
            logger.debug("duplicating %d elements into new %s", other.size, cls.__name__)
            fresh = np.zeros(other.size, dtype=other.dtype)
            fresh[:] = other._buffer.memory
            storage._attach(_SharedBuffer(fresh))
        else:
            storage._attach(other._buffer)
        return storage

    # ------------------------------------------------------------------
    # Buffer metadata
    # ------------------------------------------------------------------
    @property
    def size(self) -> int:
        return int(self._buffer.memory.shape[0])

    @property
    def dtype(self) -> np.dtype:
        return self._buffer.memory.dtype

    @property
    def order(self) -> DimensionOrder:
        return DimensionOrder.ROW_MAJOR

    @property
    def refcount(self) -> int:
        """Number of live storages sharing this buffer."""
        return self._buffer.refcount

    def shares_memory(self, other: Any) -> bool:
        return isinstance(other, NativeStorage) and other._buffer is self._buffer

    # ------------------------------------------------------------------
    # Element access
    # ------------------------------------------------------------------
    def __getitem__(self, index: int) -> Any:
        return self._buffer.memory[index].item()

    def __setitem__(self, index: int, value: Any) -> None:
        self._buffer.memory[index] = value

    def __len__(self) -> int:
        return self.size

    # ------------------------------------------------------------------
    # Layout
    # ------------------------------------------------------------------
    def calculate_order(self, dims: int) -> list[int]:
        return [dims - i - 1 for i in range(dims)]

    def calculate_stride(self, shape: Extent) -> list[int]:
        return strides_for_order(shape, self.calculate_order(shape.count))

    # ------------------------------------------------------------------
    # Conversion
    # ------------------------------------------------------------------
    def transform(
        self,
        fn: Callable[[Any], Any],
        storage_cls: Optional[type] = None,
        dtype: Any = None,
    ) -> "NativeStorage":
        target = type(self) if storage_cls is None else storage_cls
        values = [fn(v) for v in self._buffer.memory.tolist()]
        return target.from_array(values, dtype=self.dtype if dtype is None else dtype)

    def to_numpy(self) -> np.ndarray:
        return self._buffer.memory.copy()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={self.size}, dtype={self.dtype})"


class ColumnMajorStorage(NativeStorage):
    """
    Storage declaring first-axis-fastest (column-major) layout.

    Strides derived from this storage place consecutive elements of the first
    allocation axis next to each other, matching the layout BLAS routines
    expect. Everything else is inherited from `NativeStorage`.
    """

    @property
    def order(self) -> DimensionOrder:
        return DimensionOrder.COLUMN_MAJOR

    def calculate_order(self, dims: int) -> list[int]:
        return list(range(dims))
