"""
Subscript key normalisation.

Tensors accept two kinds of subscript keys:

- *Element keys*: an `int`, or a tuple/list made only of ints. These address
  a single element.
- *Window keys*: a `slice`, a `range`, or a tuple mixing slices/ranges with
  ints. These select a rectangular sub-region and produce a view. Inside a
  window key an int `i` selects the unit range `i:i+1` (the axis is kept with
  length 1). Axes not mentioned select the whole axis.

`ALL` is an alias for `slice(None)` that reads well at call sites:
`t[ALL, 2:4]`.
"""

from __future__ import annotations

import numbers
from typing import Any, Sequence, Union

from ...domain._errors import IllegalOperationError
from ...domain._extent import Extent

TensorIndex = Union[int, slice, range]

ALL = slice(None)


def _is_int(value: Any) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def is_element_key(key: Any) -> bool:
    """Return True if `key` addresses a single element."""
    if isinstance(key, (tuple, list)):
        return all(_is_int(k) for k in key)
    return _is_int(key)


def as_index_list(key: Any) -> list[int]:
    """Convert an element key to a list of ints."""
    if isinstance(key, (tuple, list)):
        return [int(k) for k in key]
    return [int(key)]


def _axis_window(selector: TensorIndex, length: int, axis: int) -> tuple[int, int]:
    """Return `(start, size)` of one selector along an axis of `length`."""
    if isinstance(selector, range):
        selector = slice(selector.start, selector.stop, selector.step)

    if isinstance(selector, slice):
        start, stop, step = selector.indices(length)
        if step != 1:
            raise IllegalOperationError(
                "window", f"axis {axis}: only unit-step selectors are supported."
            )
        return start, max(0, stop - start)

    index = int(selector)
    if index < 0:
        index += length
    if not 0 <= index < length:
        raise IllegalOperationError(
            "window", f"axis {axis}: index {selector} out of range for size {length}."
        )
    return index, 1


def normalize_window(
    key: Union[TensorIndex, Sequence[TensorIndex]], shape: Extent
) -> tuple[Extent, list[int]]:
    """
    Resolve a window key against a logical shape.

    Parameters
    ----------
    key : TensorIndex or Sequence[TensorIndex]
        One selector per leading axis.
    shape : Extent
        Logical shape of the tensor being windowed.

    Returns
    -------
    tuple[Extent, list[int]]
        The window's shape and its start offset along each axis, both
        relative to `shape`.

    Raises
    ------
    IllegalOperationError
        If there are more selectors than axes, a selector has a non-unit
        step, or an integer selector is out of range.
    """
    selectors = list(key) if isinstance(key, (tuple, list)) else [key]
    rank = shape.count
    if len(selectors) > rank:
        raise IllegalOperationError(
            "window", f"{len(selectors)} selectors given for {rank} dimension(s)."
        )
    selectors += [ALL] * (rank - len(selectors))

    dims: list[int] = []
    offsets: list[int] = []
    for axis, selector in enumerate(selectors):
        start, size = _axis_window(selector, shape[axis], axis)
        offsets.append(start)
        dims.append(size)

    return Extent(dims), offsets
