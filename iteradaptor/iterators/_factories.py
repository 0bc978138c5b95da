# Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES. ALL RIGHTS RESERVED.
#
# SPDX-License-Identifier: Apache-2.0 WITH LLVM-exception

"""
Factory functions for iterators.

These provide the user-facing API, accepting integers, sequences or existing
iterators and wrapping them appropriately.
"""

from __future__ import annotations

import logging
import numbers
from collections.abc import Sequence
from typing import Any, Callable, Union

import numpy as np

from .._errors import IteratorCategoryError
from .._types import DEFAULT_STEP
from ._base import InputIterator, RandomAccessIterator
from ._counting import CountingIterator, CountingPrimitive
from ._float_step import FloatStepIterator, FloatStepPrimitive
from ._generating import GeneratingIterator, GeneratingPrimitive
from ._pointer import PointerIterator, PointerPrimitive

logger = logging.getLogger(__name__)


def counting(start: int = 0) -> CountingIterator:
    """
    Create a counting iterator starting at `start`.

    Args:
        start: The initial count

    Returns:
        CountingIterator dereferencing to its own count
    """
    return CountingIterator(CountingPrimitive(start))


def pointer(sequence, index: int = 0) -> PointerIterator:
    """
    Create an iterator pointing at ``sequence[index]``.

    Args:
        sequence: A Python sequence or numpy array. It is referenced, not
            copied, so writes through the iterator are visible in it.
        index: The initial position

    Returns:
        PointerIterator supporting reads and writes
    """
    return PointerIterator(PointerPrimitive(sequence, index))


def _is_sequence(obj) -> bool:
    return isinstance(obj, (Sequence, np.ndarray)) and not isinstance(
        obj, (str, bytes)
    )


def _ensure_random_access(position) -> RandomAccessIterator:
    """Ensure `position` is a random-access iterator, wrapping if needed."""
    if isinstance(position, RandomAccessIterator):
        # The float step primitive owns its position
        return position.copy()
    if isinstance(position, InputIterator):
        raise IteratorCategoryError(
            f"float_step requires a random-access position, got a "
            f"{position.category} {type(position).__name__}"
        )
    if isinstance(position, numbers.Integral):
        logger.debug("wrapping integer %d in a counting iterator", position)
        return counting(position)
    if _is_sequence(position):
        logger.debug(
            "wrapping %s of length %d in a pointer iterator",
            type(position).__name__,
            len(position),
        )
        return pointer(position)
    raise TypeError(
        "float_step requires an iterator, an integer or a sequence, "
        f"got {type(position).__name__}"
    )


def float_step(
    position: Union[RandomAccessIterator, int, Sequence[Any], np.ndarray],
    step=DEFAULT_STEP,
) -> FloatStepIterator:
    """
    Create an iterator stepping through `position` by a fractional `step`.

    Args:
        position: A random-access iterator (copied), an integer (wrapped in
            a counting iterator) or a sequence/array (wrapped in a pointer
            iterator at index 0)
        step: The size of one step. Negative steps walk backwards.

    Returns:
        FloatStepIterator with zero error

    Raises:
        InvalidStepError: if `step` is zero, NaN or infinite
        IteratorCategoryError: if `position` is an iterator weaker than
            random-access
    """
    return FloatStepIterator(FloatStepPrimitive(_ensure_random_access(position), step))


def generator(producer: Callable[[], Any], initial: Any = None) -> GeneratingIterator:
    """
    Create an iterator generating values from `producer`.

    Args:
        producer: Zero-argument callable, called once per increment
        initial: The value reported before the first increment

    Returns:
        GeneratingIterator
    """
    return GeneratingIterator(GeneratingPrimitive(producer, initial))
