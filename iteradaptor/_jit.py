# Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES. ALL RIGHTS RESERVED.
#
# SPDX-License-Identifier: Apache-2.0 WITH LLVM-exception

"""
Numba-compiled resampling kernels.

These walk an array with the same single-precision error correction as
FloatStepIterator, one step at a time, without the per-step Python overhead.
Requires the ``jit`` extra (numba).
"""

from __future__ import annotations

import math

import numba

from ._types import STEP_DTYPE

_ZERO = STEP_DTYPE.type(0.0)
_ONE = STEP_DTYPE.type(1.0)
_STEP = STEP_DTYPE.type


@numba.njit(cache=False)
def _next_position(position, error, step):
    # floor(raw) and raw - floor(raw) are the modf split with the
    # negative-fraction correction applied
    raw = error + step
    whole = math.floor(raw)
    frac = _STEP(raw - _STEP(whole))
    if frac >= _ONE:
        whole += 1
        frac = _ZERO
    return position + whole, frac


@numba.njit(cache=False)
def count_in_range(size, step, start, limit):
    """Count the steps from `start` that stay inside ``[0, size)``."""
    error = _ZERO
    position = start
    count = 0
    while count < limit and 0 <= position < size:
        count += 1
        position, error = _next_position(position, error, step)
    return count


@numba.njit(cache=False)
def resample_into(data, out, step, start):
    """
    Fill `out` with elements of `data` read at a fractional `step`.

    Returns:
        The number of elements written. Less than ``out.shape[0]`` when the
        walk leaves `data` first.
    """
    size = data.shape[0]
    error = _ZERO
    position = start
    count = 0
    while count < out.shape[0] and 0 <= position < size:
        out[count] = data[position]
        count += 1
        position, error = _next_position(position, error, step)
    return count
