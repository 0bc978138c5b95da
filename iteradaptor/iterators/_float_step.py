# Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES. ALL RIGHTS RESERVED.
#
# SPDX-License-Identifier: Apache-2.0 WITH LLVM-exception

"""
FloatStepIterator implementation.

An iterator wrapper that iterates with a non-integer ratio. It walks
contiguous data, or simply increments an integer count, by a floating point
step, keeping track of the fractional error and correcting for it as it goes.
The most common use is reading sampled data at a different rate than the one
it was recorded at.

Loop with ``first < last`` rather than ``first != last`` unless `last` was
created from `first` with ``+`` or ``-``. An end iterator created that way is
reachable by incrementing, as long as the step of the moving iterator is not
changed in between.
"""

from __future__ import annotations

from typing import Any

import numpy as np

from .._errors import IteratorCategoryError
from .._types import (
    DEFAULT_STEP,
    DIFFERENCE_TOLERANCE,
    STEP_DTYPE,
    IteratorCategory,
    as_step,
)
from ._base import RandomAccessIterator

_ZERO = STEP_DTYPE.type(0.0)
_ONE = STEP_DTYPE.type(1.0)

# An advance by n rounds twice (the product, then the sum with the error)
_RELATIVE_TOLERANCE = 4 * float(np.finfo(STEP_DTYPE).eps)


class FloatStepPrimitive:
    """
    Primitive advancing a wrapped random-access position by a fractional step.

    Invariant: ``position + error`` is the real-valued logical position, with
    `error` in ``[0, 1)``.
    """

    __slots__ = ["position", "_step", "_error"]

    iterator_category = IteratorCategory.RANDOM_ACCESS

    def __init__(self, position: RandomAccessIterator, step=DEFAULT_STEP):
        """
        Args:
            position: The random-access iterator to wrap. The primitive takes
                ownership; pass a copy if the caller keeps using it.
            step: The size of one step, in elements of `position`

        Raises:
            IteratorCategoryError: if `position` is not random-access
            InvalidStepError: if `step` is zero, NaN or infinite
        """
        if not isinstance(position, RandomAccessIterator):
            raise IteratorCategoryError(
                "FloatStepIterator requires a random-access position, "
                f"got {type(position).__name__}"
            )
        self.position = position
        self._step = as_step(step)
        self._error = _ZERO

    @property
    def step(self) -> np.float32:
        return self._step

    @step.setter
    def step(self, value) -> None:
        self._step = as_step(value)

    @property
    def error(self) -> np.float32:
        return self._error

    def advance(self, n: int) -> None:
        """
        Advance by `n` steps.

        Equal to calling ``advance(1)`` `n` times, up to float rounding.
        """
        frac, whole = np.modf(self._error + self._step * STEP_DTYPE.type(n))
        if frac < 0:
            whole -= 1
            frac += _ONE
        # frac + 1 rounds up to exactly 1 for tiny negative fractions
        if frac >= _ONE:
            whole += 1
            frac = _ZERO
        # Adding zero turns -0.0 into 0.0
        self._error = STEP_DTYPE.type(frac + _ZERO)
        self.position += int(whole)

    def dereference(self) -> Any:
        return self.position.value

    def store(self, value: Any) -> None:
        self.position.value = value

    def equal(self, other: "FloatStepPrimitive") -> bool:
        # step is ignored, it has no effect on the dereferenced value
        return self.position == other.position and self._error == other._error

    def difference(self, other: "FloatStepPrimitive") -> int:
        """
        Return the number of steps from `other` to this, counting errors.

        Quotients close to an integer snap to it, others are truncated toward
        zero. Close means within DIFFERENCE_TOLERANCE, or within a few single
        precision ulps of the quotient for long distances, since the advance
        that produced the distance rounded ``step * n`` to single precision.
        """
        real_distance = float(self.position - other.position) + (
            float(self._error) - float(other._error)
        )
        steps = real_distance / float(self._step)
        nearest = round(steps)
        tolerance = max(DIFFERENCE_TOLERANCE, abs(steps) * _RELATIVE_TOLERANCE)
        if abs(steps - nearest) <= tolerance:
            return int(nearest)
        return int(steps)

    def __copy__(self) -> "FloatStepPrimitive":
        result = FloatStepPrimitive(self.position.copy(), self._step)
        result._error = self._error
        return result

    def __repr__(self) -> str:
        return (
            f"FloatStepPrimitive({self.position!r}, step={float(self._step)}, "
            f"error={float(self._error)})"
        )


class FloatStepIterator(RandomAccessIterator):
    """
    Iterator advancing a wrapped position by a non-integer step.

    Changing `step` does not invalidate the iterator, but an end iterator
    previously created with ``it + n`` may no longer be reachable by
    incrementing. If the step changes while looping, use ``it < last`` as the
    loop condition.
    """

    __slots__ = []

    @property
    def step(self) -> np.float32:
        """The size of one step."""
        return self._primitive.step

    @step.setter
    def step(self, value) -> None:
        self._primitive.step = value

    @property
    def error(self) -> np.float32:
        """
        The fractional part of the real position, in ``[0, 1)``.

        Constant while `step` is an integer.
        """
        return self._primitive.error

    def data(self) -> RandomAccessIterator:
        """Return a copy of the wrapped position."""
        return self._primitive.position.copy()

    @property
    def logical_position(self) -> float:
        """
        The real-valued index of this iterator, ``index + error``.

        Only available when the wrapped position reports an index (counting
        and pointer positions do).
        """
        index = getattr(self._primitive.position.primitive, "index", None)
        if index is None:
            raise IteratorCategoryError(
                f"{type(self._primitive.position).__name__} does not report an index"
            )
        return index() + float(self._primitive.error)
