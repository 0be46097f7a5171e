"""
Traversal-based copy utilities.

Every routine here pairs the `storage_indices()` sequences of a source and a
destination tensor and moves elements one by one. Because both sequences are
in row-major logical order, the copies are correct for any combination of
storage backend, stride, axis permutation and window on either side.

Implemented operations
----------------------
- `copy_into`: copy a tensor into an existing same-shape tensor. Source and
  destination may alias the same storage; the source is then read in full
  before anything is written.
- `copy`: deep copy into freshly allocated storage of the same backend.
- `copy_from_nested`: copy nested Python rows (e.g. `[[1, 2], [3, 4]]`) into
  a tensor.

Design notes
------------
- This module never imports the concrete `Tensor`; new tensors are built
  through `src.__class__`, which keeps it importable from the tensor mixins.
"""

from __future__ import annotations

from typing import Any, Sequence

import numpy as np

from ...domain._errors import DimensionMismatchError
from ...domain._extent import Extent
from ...domain._tensor import ITensor


def copy_into(src: ITensor, dst: ITensor) -> None:
    """
    Copy every element of `src` into `dst`.

    Parameters
    ----------
    src : ITensor
        Source tensor.
    dst : ITensor
        Destination tensor; may be a view aliasing other tensors, including
        `src` itself (e.g. `t[1:4, :] = t[0:3, :]`).

    Raises
    ------
    DimensionMismatchError
        If the shapes differ.
    """
    if src.shape != dst.shape:
        raise DimensionMismatchError(src.shape, dst.shape, op="copy")

    src_storage = src.storage
    dst_storage = dst.storage
    if src_storage.shares_memory(dst_storage):
        # overlapping views must not read back elements already written
        values = [src_storage[i] for i in src.storage_indices()]
        for j, value in zip(dst.storage_indices(), values):
            dst_storage[j] = value
        return

    for i, j in zip(src.storage_indices(), dst.storage_indices()):
        dst_storage[j] = src_storage[i]


def copy(tensor: ITensor) -> ITensor:
    """
    Return a deep copy of `tensor`.

    The result has the same logical shape, element type and storage backend,
    a fresh contiguous storage, and no aliasing with `tensor`.
    """
    result = tensor.__class__(
        shape=Extent(tensor.shape),
        storage_cls=type(tensor.storage),
        dtype=tensor.storage.dtype,
    )
    copy_into(tensor, result)
    return result


def copy_from_nested(rows: Sequence[Any], dst: ITensor) -> None:
    """
    Copy a nested sequence of numbers into `dst` in row-major order.

    Parameters
    ----------
    rows : Sequence
        Rectangular nested sequence whose nesting depth and lengths match
        `dst.shape`.
    dst : ITensor
        Destination tensor.

    Raises
    ------
    DimensionMismatchError
        If the nested sequence is ragged or its shape differs from
        `dst.shape`.
    """
    try:
        arr = np.asarray(rows)
    except ValueError as e:
        raise DimensionMismatchError("ragged", dst.shape, op="copy_from_nested") from e
    if arr.dtype == object:
        raise DimensionMismatchError("ragged", dst.shape, op="copy_from_nested")

    src_shape = Extent(arr.shape)
    if src_shape != dst.shape:
        raise DimensionMismatchError(src_shape, dst.shape, op="copy_from_nested")

    storage = dst.storage
    for pos, value in zip(dst.storage_indices(), arr.ravel(order="C").tolist()):
        storage[pos] = value
