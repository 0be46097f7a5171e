"""
Rectangular window descriptor.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence

from ._extent import Extent


@dataclass
class StorageView:
    """
    Logical shape and per-axis offset of a tensor's visible region.

    A view never holds data. Both `shape` and `offset` are expressed in
    *logical* axis order, i.e. the order a caller indexes the tensor in.

    Attributes
    ----------
    shape : Extent
        Externally visible shape.
    offset : list[int]
        Start index of the window along each logical axis.
    """

    shape: Extent
    offset: list[int] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.shape = Extent(self.shape)
        if not self.offset:
            self.offset = [0] * self.shape.count
        else:
            self.offset = [int(o) for o in self.offset]

    @classmethod
    def full(cls, shape: Extent) -> "StorageView":
        """Return a view covering all of `shape` from the origin."""
        return cls(shape=Extent(shape), offset=[0] * shape.count)

    def reversed(self) -> "StorageView":
        """Return the view with shape and offset in reverse axis order."""
        return StorageView(
            shape=Extent(list(reversed(self.shape.dims))),
            offset=list(reversed(self.offset)),
        )

    def shifted(self, shape: Extent, offset: Optional[Sequence[int]]) -> "StorageView":
        """
        Return a sub-window of this view.

        Parameters
        ----------
        shape : Extent
            Shape of the sub-window.
        offset : Sequence[int], optional
            Start of the sub-window relative to this view's origin.
        """
        rel = list(offset) if offset is not None else [0] * shape.count
        return StorageView(
            shape=Extent(shape),
            offset=[self.offset[d] + rel[d] for d in range(shape.count)],
        )
