# Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES. ALL RIGHTS RESERVED.
#
# SPDX-License-Identifier: Apache-2.0 WITH LLVM-exception

from ._errors import (
    InvalidAdvanceError,
    InvalidStepError,
    IteratorCategoryError,
    IteratorError,
)
from ._types import DEFAULT_STEP, DIFFERENCE_TOLERANCE, STEP_DTYPE, IteratorCategory
from .algorithms import distance, iterate, resample, take
from .iterators import (
    BidirectionalIterator,
    CountingIterator,
    FloatStepIterator,
    ForwardIterator,
    GeneratingIterator,
    InputIterator,
    PointerIterator,
    Primitive,
    RandomAccessIterator,
    RandomAccessPrimitive,
    WritablePrimitive,
    adaptor_class,
    counting,
    float_step,
    generator,
    iterator_adaptor,
    pointer,
    resolve_category,
)

__version__ = "0.1.0"

__all__ = [
    "BidirectionalIterator",
    "CountingIterator",
    "DEFAULT_STEP",
    "DIFFERENCE_TOLERANCE",
    "STEP_DTYPE",
    "FloatStepIterator",
    "ForwardIterator",
    "GeneratingIterator",
    "InputIterator",
    "InvalidAdvanceError",
    "InvalidStepError",
    "IteratorCategory",
    "IteratorCategoryError",
    "IteratorError",
    "PointerIterator",
    "Primitive",
    "RandomAccessIterator",
    "RandomAccessPrimitive",
    "WritablePrimitive",
    "adaptor_class",
    "counting",
    "distance",
    "float_step",
    "generator",
    "iterate",
    "iterator_adaptor",
    "pointer",
    "resample",
    "resolve_category",
    "take",
]
