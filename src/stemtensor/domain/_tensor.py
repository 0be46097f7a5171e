"""
Tensor interface definitions.

This module defines the domain-level interface for strided tensors using
structural typing. Consumers (for example a computation-graph layer) can type
against `ITensor` without importing the concrete infrastructure class.

Notes
-----
The protocol mirrors the public surface of the concrete `Tensor`: shape
queries, typed elementwise access, zero-copy windows and transposition, and
the full-traversal iterator that bulk operations are expected to use instead
of re-deriving storage offsets.
"""

from __future__ import annotations

from typing import Any, Iterator, Protocol, runtime_checkable

from ._extent import Extent
from ._storage import IStorage
from ._storage_view import StorageView

@runtime_checkable
class ITensor(Protocol):
    """
    Strided tensor interface.

    An `ITensor` is a logical N-dimensional window over a shared linear
    storage. Several tensors may alias the same storage; writes through any
    of them are visible through all others.
    """

    # ---------------------------------------------------------------------
    # Layout metadata
    # ---------------------------------------------------------------------
    @property
    def storage(self) -> IStorage:
        """The (possibly shared) backing storage."""
        ...

    @property
    def shape(self) -> Extent:
        """Externally visible (logical) shape."""
        ...

    @property
    def internal_shape(self) -> Extent:
        """Allocation shape of the backing storage."""
        ...

    @property
    def stride(self) -> list[int]:
        """Per-physical-axis step sizes."""
        ...

    @property
    def dim_index(self) -> list[int]:
        """Logical-to-physical axis permutation."""
        ...

    @property
    def view(self) -> StorageView:
        """Logical shape and per-axis offset of the visible window."""
        ...

    @property
    def offset(self) -> int:
        """Base offset into storage."""
        ...

    # ---------------------------------------------------------------------
    # Addressing
    # ---------------------------------------------------------------------
    def calculate_offset(self, indices: Any = None) -> int:
        """
        Translate logical indices (or the view origin) to a storage offset.
        """
        ...

    def storage_indices(self) -> Iterator[int]:
        """
        Enumerate the storage offsets of every visible element in row-major
        logical order.
        """
        ...

    # ---------------------------------------------------------------------
    # Structural views
    # ---------------------------------------------------------------------
    def transpose(self) -> "ITensor":
        """Return a zero-copy view with the axis order reversed."""
        ...

    def reshape(self, new_shape: Extent) -> "ITensor":
        """Return a tensor over the same storage with a new shape."""
        ...

    def __getitem__(self, key: Any) -> Any: ...

    def __setitem__(self, key: Any, value: Any) -> None: ...

    # ---------------------------------------------------------------------
    # Host interop
    # ---------------------------------------------------------------------
    def to_numpy(self) -> Any:
        """Return the visible elements as a contiguous backend-native array."""
        ...
