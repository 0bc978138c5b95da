# Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES. ALL RIGHTS RESERVED.
#
# SPDX-License-Identifier: Apache-2.0 WITH LLVM-exception

"""
Internal type definitions for iteradaptor.

This module holds the iterator category enumeration, the numeric type used
for fractional steps, and the package-wide defaults.
"""

from __future__ import annotations

import enum
import math

import numpy as np

from ._errors import InvalidStepError

# Fractional steps and errors are single precision
STEP_DTYPE = np.dtype("float32")

DEFAULT_STEP = 1.0

# A difference quotient this close to an integer is treated as that integer
DIFFERENCE_TOLERANCE = 1e-4


class IteratorCategory(enum.IntEnum):
    """
    The operator surface an adapted iterator exposes.

    Categories are ordered, so ``category >= IteratorCategory.BIDIRECTIONAL``
    reads as "supports at least decrement".
    """

    INPUT = 0
    FORWARD = 1
    BIDIRECTIONAL = 2
    RANDOM_ACCESS = 3

    def __str__(self) -> str:
        return self.name.lower().replace("_", "-")

    # IntEnum formats as the integer otherwise
    def __format__(self, format_spec: str) -> str:
        return format(str(self), format_spec)


def as_step(step) -> np.float32:
    """
    Convert `step` to the fractional step type.

    Args:
        step: Any real number

    Returns:
        The step as a STEP_DTYPE scalar

    Raises:
        InvalidStepError: if the step is zero, NaN or infinite (after the
            conversion to single precision)
    """
    try:
        value = STEP_DTYPE.type(step)
    except (TypeError, ValueError) as e:
        raise InvalidStepError(f"step must be a real number, got {step!r}") from e
    if not math.isfinite(float(value)):
        raise InvalidStepError(f"step must be finite, got {step!r}")
    if value == 0:
        raise InvalidStepError(f"step must be non-zero, got {step!r}")
    return value
