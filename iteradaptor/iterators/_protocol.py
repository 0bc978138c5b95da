# Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES. ALL RIGHTS RESERVED.
#
# SPDX-License-Identifier: Apache-2.0 WITH LLVM-exception

"""
Primitive protocols for iteradaptor.

Defines the minimal interface a type must implement to be wrapped by
`iterator_adaptor`. The adaptor never implements iteration logic itself; every
operator it exposes forwards to one of these methods.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Primitive(Protocol):
    """
    Protocol for the operations every adaptable primitive implements.

    A primitive may also declare a class attribute ``iterator_category``
    (an `IteratorCategory`). Without it, the category is inferred from the
    methods the primitive defines.
    """

    def advance(self, n: int) -> None:
        """
        Move the logical position by `n` steps.

        Must behave identically to calling ``advance(1)`` `n` times.
        """
        ...

    def dereference(self) -> Any:
        """Return the value at the current logical position."""
        ...

    def equal(self, other: Any) -> bool:
        """Return True if `other` denotes the same logical position."""
        ...


@runtime_checkable
class RandomAccessPrimitive(Primitive, Protocol):
    """Protocol for primitives that can also measure distances."""

    def difference(self, other: Any) -> int:
        """Return the signed number of steps from `other` to `self`."""
        ...


@runtime_checkable
class WritablePrimitive(Primitive, Protocol):
    """Protocol for primitives whose current element can be assigned."""

    def store(self, value: Any) -> None:
        """Write `value` at the current logical position."""
        ...
