# Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES. ALL RIGHTS RESERVED.
#
# SPDX-License-Identifier: Apache-2.0 WITH LLVM-exception

"""
Exception hierarchy for iteradaptor.

- IteratorError: base for everything raised by this package
- InvalidStepError: a fractional step that is zero, NaN or infinite
- InvalidAdvanceError: an advance count outside a primitive's contract
- IteratorCategoryError: a primitive or position that cannot provide the
  operations a category requires
"""

__all__ = [
    "IteratorError",
    "InvalidStepError",
    "InvalidAdvanceError",
    "IteratorCategoryError",
]


class IteratorError(Exception):
    """Base exception for all iteradaptor errors."""


class InvalidStepError(IteratorError, ValueError):
    """Raised when a fractional step is zero, NaN or infinite."""


class InvalidAdvanceError(IteratorError, ValueError):
    """Raised when ``advance`` is called with a count the primitive rejects."""


class IteratorCategoryError(IteratorError, TypeError):
    """
    Raised when an iterator category cannot be resolved for a primitive,
    or when an operation is used that the resolved category does not offer.
    """
