# Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES. ALL RIGHTS RESERVED.
#
# SPDX-License-Identifier: Apache-2.0 WITH LLVM-exception

"""
Iterator adaptors and the primitives they host.

A primitive implements ``advance``, ``dereference``, ``equal`` and optionally
``difference``; `iterator_adaptor` wraps it in the adaptor class matching its
category.
"""

from ._base import (
    BidirectionalIterator,
    ForwardIterator,
    InputIterator,
    RandomAccessIterator,
    adaptor_class,
    iterator_adaptor,
)
from ._category import resolve_category
from ._counting import CountingIterator, CountingPrimitive
from ._factories import counting, float_step, generator, pointer
from ._float_step import FloatStepIterator, FloatStepPrimitive
from ._generating import GeneratingIterator, GeneratingPrimitive
from ._pointer import PointerIterator, PointerPrimitive
from ._protocol import (
    Primitive,
    RandomAccessPrimitive,
    WritablePrimitive,
)

__all__ = [
    "BidirectionalIterator",
    "CountingIterator",
    "CountingPrimitive",
    "FloatStepIterator",
    "FloatStepPrimitive",
    "ForwardIterator",
    "GeneratingIterator",
    "GeneratingPrimitive",
    "InputIterator",
    "PointerIterator",
    "PointerPrimitive",
    "Primitive",
    "RandomAccessIterator",
    "RandomAccessPrimitive",
    "WritablePrimitive",
    "adaptor_class",
    "counting",
    "float_step",
    "generator",
    "iterator_adaptor",
    "pointer",
    "resolve_category",
]
