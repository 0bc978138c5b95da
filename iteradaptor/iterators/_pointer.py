# Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES. ALL RIGHTS RESERVED.
#
# SPDX-License-Identifier: Apache-2.0 WITH LLVM-exception

"""PointerIterator implementation - random-access position into a sequence."""

from __future__ import annotations

import operator
from typing import Any

from .._types import IteratorCategory
from ._base import RandomAccessIterator


class PointerPrimitive:
    """
    Primitive holding a sequence and an index into it.

    Supports both reading and writing. Copies share the sequence and own the
    index, like two pointers into one array. The index is not bounds-checked;
    dereferencing outside the sequence raises whatever the sequence raises.
    """

    __slots__ = ["sequence", "offset"]

    iterator_category = IteratorCategory.RANDOM_ACCESS

    def __init__(self, sequence, offset: int = 0):
        self.sequence = sequence  # Keep reference, never copied
        self.offset = operator.index(offset)

    def advance(self, n: int) -> None:
        self.offset += n

    def _checked_offset(self) -> int:
        # Python sequences would wrap a negative index around to the end
        if self.offset < 0:
            raise IndexError(
                f"position {self.offset} is before the start of the sequence"
            )
        return self.offset

    def dereference(self) -> Any:
        return self.sequence[self._checked_offset()]

    def store(self, value: Any) -> None:
        self.sequence[self._checked_offset()] = value

    def equal(self, other: "PointerPrimitive") -> bool:
        return self.sequence is other.sequence and self.offset == other.offset

    def difference(self, other: "PointerPrimitive") -> int:
        if self.sequence is not other.sequence:
            raise ValueError("cannot measure distance between different sequences")
        return self.offset - other.offset

    def index(self) -> int:
        return self.offset

    def __repr__(self) -> str:
        return f"PointerPrimitive(<{type(self.sequence).__name__}>, {self.offset})"


class PointerIterator(RandomAccessIterator):
    """
    Iterator wrapping a sequence or numpy array.

    Supports both input (reading) and output (writing) operations.
    """

    __slots__ = []

    @property
    def sequence(self):
        """The sequence this iterator points into."""
        return self._primitive.sequence

    @property
    def offset(self) -> int:
        """The index of the current element."""
        return self._primitive.offset
