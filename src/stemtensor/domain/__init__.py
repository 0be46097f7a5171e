"""
Backend-agnostic contracts: shapes, views, storage and tensor protocols, and
the error types shared by every layer.
"""

from ._errors import (
    TensorError,
    DimensionMismatchError,
    IllegalAxisError,
    IllegalReshapeError,
    IllegalOperationError,
)
from ._extent import Extent, extent_max
from ._storage import DimensionOrder, IStorage, strides_for_order
from ._storage_view import StorageView
from ._tensor import ITensor

__all__ = [
    TensorError.__name__,
    DimensionMismatchError.__name__,
    IllegalAxisError.__name__,
    IllegalReshapeError.__name__,
    IllegalOperationError.__name__,
    Extent.__name__,
    extent_max.__name__,
    DimensionOrder.__name__,
    IStorage.__name__,
    strides_for_order.__name__,
    StorageView.__name__,
    ITensor.__name__,
]
