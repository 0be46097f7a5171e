"""
Reference-counted host buffer shared between storages.

This module defines `_SharedBuffer`, a small wrapper around a flat NumPy
array that may be aliased by several storage objects (and therefore by every
tensor view, transpose or reshape derived from them).

Core Concepts
-------------
- **Aliasing**: storages constructed with `copy=False` hold the *same*
  `_SharedBuffer`. Writes through one are visible through all of them.
- **Reference counting**: each storage that attaches to a buffer calls
  `incref()`, and registers a `weakref.finalize` callback that calls
  `decref()` when the storage is garbage-collected. The count is therefore
  the number of live storages referring to the buffer.
- **Release**: when the count drops to zero the array reference is dropped,
  letting NumPy reclaim the memory even if a stray reference to the handle
  survives.

Thread Safety
-------------
Only the reference count is protected by a lock. Reads and writes to the
array itself are not synchronised; concurrent writers to aliased storage must
be serialised by the caller.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import threading
from typing import Optional

import numpy as np


@dataclass
class _SharedBuffer:
    """
    Reference-counted wrapper around a flat host array.

    Attributes
    ----------
    memory : np.ndarray
        One-dimensional array holding the elements.
    """

    memory: Optional[np.ndarray]

    _refcnt: int = 0
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    @property
    def refcount(self) -> int:
        """Number of live storages attached to this buffer."""
        return self._refcnt

    @property
    def released(self) -> bool:
        """True once the last attached storage has been collected."""
        return self.memory is None

    def incref(self) -> None:
        """Register one more attached storage."""
        with self._lock:
            self._refcnt += 1

    def decref(self) -> None:
        """
        Drop one attached storage and release the array at zero.

        Subsequent calls after release have no effect.
        """
        with self._lock:
            if self._refcnt == 0:
                return
            self._refcnt -= 1
            if self._refcnt == 0:
                self.memory = None
