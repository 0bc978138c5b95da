# Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES. ALL RIGHTS RESERVED.
#
# SPDX-License-Identifier: Apache-2.0 WITH LLVM-exception

"""GeneratingIterator implementation."""

from __future__ import annotations

from typing import Any, Callable

from .._errors import InvalidAdvanceError
from .._types import IteratorCategory
from ._base import InputIterator


class GeneratingPrimitive:
    """
    Primitive producing a value from a zero-argument callable on each advance.

    Single pass: earlier values cannot be recovered without calling the
    producer again, so the category is input. Copies share the producer.
    """

    __slots__ = ["producer", "last_value", "invocations"]

    iterator_category = IteratorCategory.INPUT

    def __init__(self, producer: Callable[[], Any], initial: Any = None):
        if not callable(producer):
            raise TypeError(f"producer must be callable, got {type(producer).__name__}")
        self.producer = producer
        self.last_value = initial
        self.invocations = 0

    def advance(self, n: int) -> None:
        """
        Call the producer `n` times, keeping the last result.

        Raises:
            InvalidAdvanceError: if `n` is less than 1. A generating
                iterator can only move forward.
        """
        if n < 1:
            raise InvalidAdvanceError(
                f"GeneratingIterator can only advance forward, got n={n}"
            )
        for _ in range(n):
            self.last_value = self.producer()
        self.invocations += n

    def dereference(self) -> Any:
        return self.last_value

    def equal(self, other: "GeneratingPrimitive") -> bool:
        # Identity of the position only: same producer, same number of calls
        return self.producer is other.producer and self.invocations == other.invocations

    def __repr__(self) -> str:
        return f"GeneratingPrimitive({self.producer!r}, last_value={self.last_value!r})"


class GeneratingIterator(InputIterator):
    """
    Iterator generating a value each time it is incremented.

    The value before the first increment is the `initial` value given at
    construction (None by default); the producer is not called until then.
    """

    __slots__ = []

    @property
    def producer(self) -> Callable[[], Any]:
        """The callable producing values."""
        return self._primitive.producer
