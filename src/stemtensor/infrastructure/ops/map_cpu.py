from __future__ import annotations

from typing import Any, Callable

from ...domain._extent import Extent
from ...domain._tensor import ITensor


def map_tensor(tensor: ITensor, fn: Callable[[Any], Any]) -> ITensor:
    """
    Apply `fn` elementwise and return the results in a new tensor.

    The input is not modified. The result has the input's logical shape,
    element type and storage backend; elements are paired by traversal, so
    windowed and transposed inputs map correctly.
    """
    result = tensor.__class__(
        shape=Extent(tensor.shape),
        storage_cls=type(tensor.storage),
        dtype=tensor.storage.dtype,
    )

    src = tensor.storage
    dst = result.storage
    for i, j in zip(tensor.storage_indices(), result.storage_indices()):
        dst[j] = fn(src[i])
    return result
