"""
Bulk tensor operations built on `storage_indices()` traversal.
"""

from .memcpy_cpu import copy, copy_into, copy_from_nested
from .fill_cpu import fill
from .map_cpu import map_tensor
from .concat_cpu import concat, vstack, hstack

__all__ = [
    copy.__name__,
    copy_into.__name__,
    copy_from_nested.__name__,
    fill.__name__,
    map_tensor.__name__,
    concat.__name__,
    vstack.__name__,
    hstack.__name__,
]
