"""
Concatenation along an existing axis.

`concat(a, b, axis=k)` allocates a tensor whose shape equals the operands'
shapes except along `k`, where the lengths add up. `a` is copied into the
leading window `[0, a.shape[k])` along `k` and `b` into the trailing window,
each through paired traversal, so the operands' own windows, transposes and
storage backends do not matter.

Operands of different rank are compared with implicit unit padding (an
`Extent` reads 1 beyond its declared dimensions); the result has the larger
rank.

The result dtype is the NumPy promotion of the operand dtypes, so mixing
integer and floating operands yields a floating result.

Variadic and list forms fold pairwise from left to right.
"""

from __future__ import annotations

import logging
from typing import Sequence, Union

import numpy as np

from ...domain._errors import DimensionMismatchError, IllegalAxisError, IllegalOperationError
from ...domain._extent import Extent
from ...domain._tensor import ITensor
from .memcpy_cpu import copy_into

logger = logging.getLogger(__name__)


def _concat_pair(a: ITensor, b: ITensor, axis: int) -> ITensor:
    max_dims = max(a.shape.count, b.shape.count)
    if axis < 0:
        axis += max_dims
    if axis < 0 or axis >= max_dims:
        raise IllegalAxisError(axis, max_dims)

    for i in range(max_dims):
        if i != axis and a.shape[i] != b.shape[i]:
            raise DimensionMismatchError(a.shape, b.shape, op="concat")

    shape = Extent.extended(a.shape, max_dims)
    shape[axis] = a.shape[axis] + b.shape[axis]
    logger.debug("concat %r + %r along axis %d -> %r", a.shape, b.shape, axis, shape)

    dtype = np.result_type(a.storage.dtype, b.storage.dtype)
    result = a.__class__(shape=shape, storage_cls=type(a.storage), dtype=dtype)

    lead = [slice(None)] * max_dims
    lead[axis] = slice(0, a.shape[axis])
    copy_into(a, result[tuple(lead)])

    trail = [slice(None)] * max_dims
    trail[axis] = slice(a.shape[axis], shape[axis])
    copy_into(b, result[tuple(trail)])

    return result


def concat(
    *tensors: Union[ITensor, Sequence[ITensor]],
    axis: int = 0,
) -> ITensor:
    """
    Concatenate tensors along `axis`.

    Parameters
    ----------
    *tensors : ITensor or a single Sequence[ITensor]
        Two or more tensors, either as separate arguments or as one list.
    axis : int, optional
        Concatenation axis. Negative values count from the end of the larger
        rank. Defaults to 0.

    Returns
    -------
    ITensor
        A new tensor with fresh storage of the first operand's backend.

    Raises
    ------
    IllegalOperationError
        If fewer than two tensors are given.
    IllegalAxisError
        If `axis` is not smaller than the larger operand rank.
    DimensionMismatchError
        If any non-`axis` dimension differs.
    """
    if len(tensors) == 1 and isinstance(tensors[0], (list, tuple)):
        operands = list(tensors[0])
    else:
        operands = list(tensors)

    if len(operands) < 2:
        raise IllegalOperationError("concat", "at least two tensors are required.")

    result = _concat_pair(operands[0], operands[1], axis)
    for t in operands[2:]:
        result = _concat_pair(result, t, axis)
    return result


def vstack(a: ITensor, b: ITensor) -> ITensor:
    """Concatenate along axis 0 (stack rows)."""
    return concat(a, b, axis=0)


def hstack(a: ITensor, b: ITensor) -> ITensor:
    """Concatenate along axis 1 (stack columns)."""
    return concat(a, b, axis=1)
