# Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES. ALL RIGHTS RESERVED.
#
# SPDX-License-Identifier: Apache-2.0 WITH LLVM-exception

"""CountingIterator implementation."""

from __future__ import annotations

import operator

from .._types import IteratorCategory
from ._base import RandomAccessIterator


class CountingPrimitive:
    """
    Primitive for a sequence of incrementing integers.

    The position is the count itself, so dereferencing yields the position.
    """

    __slots__ = ["count"]

    iterator_category = IteratorCategory.RANDOM_ACCESS

    def __init__(self, start: int = 0):
        self.count = operator.index(start)

    def advance(self, n: int) -> None:
        self.count += n

    def dereference(self) -> int:
        return self.count

    def equal(self, other: "CountingPrimitive") -> bool:
        return self.count == other.count

    def difference(self, other: "CountingPrimitive") -> int:
        return self.count - other.count

    def index(self) -> int:
        return self.count

    def __repr__(self) -> str:
        return f"CountingPrimitive({self.count})"


class CountingIterator(RandomAccessIterator):
    """
    Iterator representing a sequence of incrementing values.

    The iterator starts at `start` and increments by 1 for each advance.
    """

    __slots__ = []

    @property
    def count(self) -> int:
        """The current count."""
        return self._primitive.count
