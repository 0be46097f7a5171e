from ._shape_and_indexing import TensorShapeAndIndexingMixin
from ._storage_index import StorageIndexIterator
from ._indexing import ALL
from ._tensor import Tensor

__all__ = [
    TensorShapeAndIndexingMixin.__name__,
    StorageIndexIterator.__name__,
    "ALL",
    Tensor.__name__,
]
