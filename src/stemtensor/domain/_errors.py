"""
Shape- and layout-related exceptions for stemtensor.

This module defines the typed errors raised by tensor construction, structural
operations, and bulk copy routines. Every violated structural precondition
(mismatched shapes, out-of-range axes, element-count changes on reshape, or
combinations that have no defined meaning) surfaces as one of these classes so
that callers can decide how to recover.

All errors derive from `TensorError`, which itself derives from `ValueError`,
so generic `except ValueError` handlers keep working.
"""

from __future__ import annotations

from typing import Any


class TensorError(ValueError):
    """
    Base class for all tensor engine errors.
    """


class DimensionMismatchError(TensorError):
    """
    Raised when two shapes are incompatible for the requested operation.

    Typical sources are `copy_into` (source and destination shapes differ)
    and `concat` (a non-concatenation axis differs between operands).

    Attributes
    ----------
    lhs : Any
        Shape of the left-hand (or source) operand.
    rhs : Any
        Shape of the right-hand (or destination) operand.
    """

    def __init__(self, lhs: Any, rhs: Any, op: str = "operation") -> None:
        """
        Initialize the DimensionMismatchError.

        Parameters
        ----------
        lhs : Any
            Shape of the left-hand operand.
        rhs : Any
            Shape of the right-hand operand.
        op : str, optional
            Name of the operation that detected the mismatch.
        """
        super().__init__(f"{op}: dimensions do not match ({lhs!r} vs {rhs!r}).")
        self.lhs = lhs
        self.rhs = rhs
        self.op = op


class IllegalAxisError(TensorError):
    """
    Raised when an axis argument falls outside the operands' rank.

    Attributes
    ----------
    axis : int
        The requested axis.
    ndim : int
        The number of dimensions the axis was checked against.
    """

    def __init__(self, axis: int, ndim: int) -> None:
        super().__init__(f"axis {axis} is out of bounds for {ndim} dimension(s).")
        self.axis = axis
        self.ndim = ndim


class IllegalReshapeError(TensorError):
    """
    Raised when a reshape would change the number of elements.

    Attributes
    ----------
    new_shape : Any
        The requested shape.
    old_shape : Any
        The allocation shape of the tensor being reshaped.
    """

    def __init__(self, new_shape: Any, old_shape: Any) -> None:
        super().__init__(
            f"cannot reshape {old_shape!r} into {new_shape!r}: "
            f"number of elements must be equal."
        )
        self.new_shape = new_shape
        self.old_shape = old_shape


class IllegalOperationError(TensorError):
    """
    Raised for argument combinations that have no defined meaning.

    Examples include padding an extent to fewer dimensions than it already
    has, stepped slices in a window selector, or concatenating fewer than two
    tensors.
    """

    def __init__(self, op: str, reason: str) -> None:
        super().__init__(f"{op}: {reason}")
        self.op = op
        self.reason = reason
