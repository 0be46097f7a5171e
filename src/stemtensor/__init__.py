"""
stemtensor: a strided N-dimensional tensor engine.

Tensors compose a shared linear storage with an allocation shape, a stride
vector, a logical-to-physical axis permutation and a view window. Slicing and
transposition are zero-copy; copy, fill, concat and map are driven by a
single row-major traversal iterator and work on any layout.
"""

from .domain import (
    TensorError,
    DimensionMismatchError,
    IllegalAxisError,
    IllegalReshapeError,
    IllegalOperationError,
    Extent,
    extent_max,
    DimensionOrder,
    IStorage,
    StorageView,
    ITensor,
)
from .infrastructure.storage import NativeStorage, ColumnMajorStorage
from .infrastructure.tensor import ALL, StorageIndexIterator, Tensor
from .infrastructure.ops import (
    copy,
    copy_into,
    copy_from_nested,
    fill,
    map_tensor,
    concat,
    vstack,
    hstack,
)

__version__ = "0.1.0"

__all__ = [
    "TensorError",
    "DimensionMismatchError",
    "IllegalAxisError",
    "IllegalReshapeError",
    "IllegalOperationError",
    "Extent",
    "extent_max",
    "DimensionOrder",
    "IStorage",
    "StorageView",
    "ITensor",
    "NativeStorage",
    "ColumnMajorStorage",
    "ALL",
    "StorageIndexIterator",
    "Tensor",
    "copy",
    "copy_into",
    "copy_from_nested",
    "fill",
    "map_tensor",
    "concat",
    "vstack",
    "hstack",
]
