"""
Tensor shape, indexing, and structural view mixin.

This module defines `TensorShapeAndIndexingMixin`, which implements the
zero-copy structural operations of the concrete `Tensor`:

- element get/set (`t[i, j]`, `t[[i, j]]`),
- windowed subscripts (`t[1:3, 2]`) returning views that alias storage,
- window assignment (`t[1:3, :] = other`) copying through paired traversal,
- `transpose()` / `.T`, and
- `reshape()`.

Design notes
------------
- The mixin is inherited by the concrete `Tensor`. To avoid circular imports
  it never imports `Tensor`; new tensors are built through `self.__class__`.
- None of these operations allocate storage. Views share the parent's
  storage, allocation shape and stride; only `dim_index`, the view, and (for
  reshape) the stride change.
- Windows compose with the parent: the parent's axis permutation is kept and
  the window offset is added to the parent's view offset, so windows of
  windows and windows of transposed tensors address the expected elements.
"""

from __future__ import annotations

import logging
from typing import Any

from ...domain._errors import IllegalReshapeError
from ...domain._extent import Extent
from ...domain._tensor import ITensor
from ..ops.fill_cpu import fill
from ..ops.memcpy_cpu import copy_into
from ._indexing import as_index_list, is_element_key, normalize_window

logger = logging.getLogger(__name__)


class TensorShapeAndIndexingMixin(ITensor):
    """
    Shape and indexing operations for the concrete Tensor implementation.

    Notes
    -----
    Methods assume the host class provides `storage`, `shape`,
    `internal_shape`, `stride`, `dim_index`, `offset`, `view`,
    `calculate_offset(...)` and the `_from_parts(...)` constructor.
    """

    # ------------------------------------------------------------------
    # Subscripts
    # ------------------------------------------------------------------
    def __getitem__(self, key: Any) -> Any:
        """
        Read an element or take a window.

        Parameters
        ----------
        key : int, tuple, list, slice or range
            An element key (ints only) returns the element value. Any key
            containing a slice or range returns a view sharing storage.

        Notes
        -----
        Element access performs no bounds checking beyond the offset
        arithmetic; callers must supply in-range indices.
        """
        if is_element_key(key):
            return self.storage[self.calculate_offset(as_index_list(key))]
        return self.__class__.window(self, key)

    def __setitem__(self, key: Any, value: Any) -> None:
        """
        Write an element, or copy into a window.

        When `key` is a window key, `value` may be a tensor of the window's
        shape (copied element by element) or a scalar (broadcast by fill).
        """
        if is_element_key(key):
            self.storage[self.calculate_offset(as_index_list(key))] = value
            return

        target = self.__class__.window(self, key)
        if isinstance(value, ITensor):
            copy_into(value, target)
        else:
            fill(target, value)

    # ------------------------------------------------------------------
    # Zero-copy views
    # ------------------------------------------------------------------
    @classmethod
    def window(cls, tensor: "ITensor", selectors: Any) -> "ITensor":
        """
        Return a rectangular view of `tensor`.

        Parameters
        ----------
        tensor : ITensor
            The parent tensor.
        selectors : int, slice, range, or a sequence of them
            One selector per leading logical axis. `slice(None)` (or `ALL`)
            selects the whole axis; an int selects a length-1 range; axes
            without a selector are taken whole.

        Returns
        -------
        ITensor
            A tensor sharing the parent's storage, allocation shape, stride,
            base offset and axis permutation, whose view is the selected
            sub-region.
        """
        shape, start = normalize_window(selectors, tensor.shape)
        return cls._from_parts(
            storage=tensor.storage,
            internal_shape=tensor.internal_shape,
            stride=tensor.stride,
            dim_index=tensor.dim_index,
            offset=tensor.offset,
            view=tensor.view.shifted(shape, start),
        )

    @classmethod
    def derive(
        cls,
        tensor: "ITensor",
        dim_index: Any = None,
        view: Any = None,
    ) -> "ITensor":
        """
        Return a view of `tensor` with an optionally overridden axis
        permutation and/or view. Everything else is shared.
        """
        return cls._from_parts(
            storage=tensor.storage,
            internal_shape=tensor.internal_shape,
            stride=tensor.stride,
            dim_index=tensor.dim_index if dim_index is None else dim_index,
            offset=tensor.offset,
            view=tensor.view if view is None else view,
        )

    def transpose(self) -> "ITensor":
        """
        Return a view with the logical axis order reversed.

        The permutation and the view (shape and offset) are reversed; storage
        and stride are untouched. Transposing twice restores the original
        logical shape and values.
        """
        return self.__class__.derive(
            self,
            dim_index=list(reversed(self.dim_index)),
            view=self.view.reversed(),
        )

    @property
    def T(self) -> "ITensor":
        return self.transpose()

    def reshape(self, new_shape: Any) -> "ITensor":
        """
        Return a tensor over the same storage with a different shape.

        Parameters
        ----------
        new_shape : Extent or Iterable[int]
            Target shape. Must hold as many elements as the allocation shape.

        Returns
        -------
        ITensor
            A tensor sharing storage and base offset, with stride and axis
            permutation freshly derived for `new_shape` and a full view.

        Raises
        ------
        IllegalReshapeError
            If the element counts differ.

        Notes
        -----
        The result reinterprets storage in allocation order. It is only
        meaningful when this tensor is a contiguous, full-storage view
        (not windowed, not transposed); reshaping other views is the
        caller's responsibility.
        """
        shape = Extent(new_shape)
        if shape.elements != self.internal_shape.elements:
            raise IllegalReshapeError(shape, self.internal_shape)

        logger.debug("reshape %r -> %r", self.internal_shape, shape)
        return self.__class__(storage=self.storage, shape=shape, offset=self.offset)
