"""
Traversal-based fill.
"""

from __future__ import annotations

from typing import Any

from ...domain._tensor import ITensor


def fill(tensor: ITensor, value: Any) -> None:
    """
    Assign `value` to every visible element of `tensor`.

    Only the tensor's view is written; when `tensor` is a window, the rest of
    the shared storage is left untouched.
    """
    storage = tensor.storage
    for i in tensor.storage_indices():
        storage[i] = value
