# Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES. ALL RIGHTS RESERVED.
#
# SPDX-License-Identifier: Apache-2.0 WITH LLVM-exception

"""
Algorithms driving adapted iterators from Python code.

None of these mutate the iterators passed in; they work on copies.
"""

from __future__ import annotations

import logging
import math
import warnings
from typing import Any, Iterator

import numpy as np

from ._errors import InvalidStepError
from ._types import STEP_DTYPE, as_step
from .iterators import InputIterator, RandomAccessIterator, float_step, pointer

logger = logging.getLogger(__name__)

# Smaller steps can leave the error unchanged by rounding and never move
_MIN_WALK_STEP = float(np.finfo(STEP_DTYPE).eps)


def _before(it: InputIterator, last: InputIterator | None) -> bool:
    if last is None:
        return True
    if isinstance(it, RandomAccessIterator):
        return it < last
    return it != last


def distance(first: InputIterator, last: InputIterator) -> int:
    """
    Return the number of increments from `first` to `last`.

    Random-access iterators use their difference. Other iterators are
    incremented, on a copy, until they compare equal to `last`; `last` must
    be reachable from `first`.
    """
    if isinstance(first, RandomAccessIterator):
        return last - first
    it = first.copy()
    n = 0
    while it != last:
        it.increment()
        n += 1
    return n


def iterate(
    first: InputIterator,
    last: InputIterator | None = None,
    limit: int | None = None,
) -> Iterator[Any]:
    """
    Yield the values from `first` up to, not including, `last`.

    Random-access ranges stop once ``it < last`` is false, so a `last` that is
    not exactly reachable (e.g. after a step change) still ends the loop.
    Other iterators stop when ``it == last``.

    A generating iterator yields its initial value first; increment it
    once before iterating to start at the first produced value.

    Args:
        first: The starting iterator (copied, not modified)
        last: Optional end iterator. Without it the range is unbounded.
        limit: Optional maximum number of values to yield

    Yields:
        The dereferenced values
    """
    if limit is not None and limit <= 0:
        return
    it = first.copy()
    produced = 0
    while _before(it, last):
        yield it.value
        produced += 1
        # Stop before incrementing, a generating iterator would call its
        # producer once more
        if limit is not None and produced >= limit:
            return
        it.increment()


def take(first: InputIterator, num_items: int) -> list[Any]:
    """Return the next `num_items` values starting at `first`."""
    return list(iterate(first, limit=num_items))


def resample(
    data,
    step,
    num_items: int | None = None,
    *,
    start: int | None = None,
    jit: bool = False,
) -> np.ndarray:
    """
    Read a 1-D array at a fractional step.

    With ``step=2.5`` every 2.5th element is read (indices 0, 2, 5, 7, ...);
    with ``step=0.5`` every element is read twice.

    Args:
        data: A 1-D sequence or numpy array
        step: The step between reads. Negative steps read backwards.
        num_items: Number of elements to read. Defaults to as many as stay
            inside `data`.
        start: The first index. Defaults to 0 for positive steps and the
            last index for negative steps.
        jit: Use the numba-compiled kernel (requires the ``jit`` extra)

    Returns:
        A numpy array with the elements read

    Raises:
        InvalidStepError: if `step` is zero, NaN or infinite, or too small
            to leave `data` when `num_items` is not given
        IndexError: if `num_items` reads would leave `data`
    """
    step = as_step(step)
    array = np.asarray(data)
    if array.ndim != 1:
        raise ValueError(f"resample requires 1-D data, got {array.ndim} dimensions")
    size = array.shape[0]
    if start is None:
        start = 0 if step > 0 else size - 1
    if num_items is None and abs(float(step)) < _MIN_WALK_STEP:
        raise InvalidStepError(
            f"step {float(step)} is too small to walk through the data, "
            "pass num_items to read a fixed number of elements"
        )
    if size > 1 and num_items is None:
        if (step > 0 and start == size - 1) or (step < 0 and start == 0):
            warnings.warn(
                f"step {float(step)} points away from the data at index {start}, "
                "only one element will be read"
            )

    logger.debug(
        "resampling %d elements at step %s from index %d (jit=%s)",
        size,
        float(step),
        start,
        jit,
    )

    if jit:
        return _resample_jit(array, step, num_items, start)

    first = float_step(pointer(array, start), step)
    if num_items is not None:
        values = take(first, num_items)
    else:
        values = []
        it = first
        while 0 <= it.data().offset < size:
            values.append(it.value)
            it.increment()
    return np.asarray(values, dtype=array.dtype)


def _resample_jit(
    array: np.ndarray, step, num_items: int | None, start: int
) -> np.ndarray:
    from ._jit import count_in_range, resample_into

    array = np.ascontiguousarray(array)
    size = array.shape[0]
    if num_items is None:
        limit = math.ceil(size / abs(float(step))) + 2
        num_items = count_in_range(size, step, start, limit * 2)
    out = np.empty(num_items, dtype=array.dtype)
    written = resample_into(array, out, step, start)
    if written < num_items:
        raise IndexError(
            f"resampling left the data after {written} of {num_items} elements"
        )
    return out
