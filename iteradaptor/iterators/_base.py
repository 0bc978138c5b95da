# Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES. ALL RIGHTS RESERVED.
#
# SPDX-License-Identifier: Apache-2.0 WITH LLVM-exception

"""
Base classes for adapted iterators.

Each class exposes the operator surface of one iterator category and forwards
every operator to the wrapped primitive:

- InputIterator: increment, dereference, equality
- ForwardIterator: same surface, multi-pass
- BidirectionalIterator: adds decrement
- RandomAccessIterator: adds offset arithmetic, distance, ordering,
  compound assignment and offset dereference
"""

from __future__ import annotations

import copy
import operator
from typing import Any

from .._errors import IteratorCategoryError
from .._types import IteratorCategory
from ._category import resolve_category


def _same_kind(a: "InputIterator", b: Any) -> bool:
    """Check that `b` is an adaptor wrapping the same primitive type as `a`."""
    return isinstance(b, InputIterator) and type(a._primitive) is type(b._primitive)


class InputIterator:
    """
    Adaptor exposing the input iterator surface of a primitive.

    The adaptor owns its primitive exclusively. Copying the adaptor copies
    the primitive; no state is shared between copies.
    """

    __slots__ = ["_primitive"]

    category = IteratorCategory.INPUT

    def __init__(self, primitive):
        """
        Wrap `primitive`.

        Args:
            primitive: An object implementing the Primitive protocol

        Raises:
            IteratorCategoryError: if the primitive's category is weaker than
                the category of this adaptor class
        """
        resolved = resolve_category(type(primitive))
        if resolved < self.category:
            raise IteratorCategoryError(
                f"{type(self).__name__} requires a {self.category} primitive, "
                f"{type(primitive).__name__} is {resolved}"
            )
        self._primitive = primitive

    @property
    def primitive(self):
        """Return the wrapped primitive."""
        return self._primitive

    # Copying

    def copy(self):
        """Return an independent copy of this iterator."""
        return type(self)(copy.copy(self._primitive))

    def __copy__(self):
        return self.copy()

    def __deepcopy__(self, memo):
        return type(self)(copy.deepcopy(self._primitive, memo))

    # Increment (any category)

    def increment(self):
        """Advance by one step and return self."""
        self._primitive.advance(1)
        return self

    def post_increment(self):
        """Advance by one step and return a copy taken before advancing."""
        old = self.copy()
        self._primitive.advance(1)
        return old

    # Dereference (any category)

    @property
    def value(self):
        """The value at the current position."""
        return self._primitive.dereference()

    @value.setter
    def value(self, new_value) -> None:
        store = getattr(self._primitive, "store", None)
        if store is None:
            raise IteratorCategoryError(
                f"{type(self._primitive).__name__} does not support writing"
            )
        store(new_value)

    # Comparison (any category)

    def __eq__(self, other) -> bool:
        if not _same_kind(self, other):
            return NotImplemented
        return bool(self._primitive.equal(other._primitive))

    def __ne__(self, other) -> bool:
        if not _same_kind(self, other):
            return NotImplemented
        return not self._primitive.equal(other._primitive)

    __hash__ = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._primitive!r})"


class ForwardIterator(InputIterator):
    """Adaptor for multi-pass primitives. Same surface as InputIterator."""

    __slots__ = []

    category = IteratorCategory.FORWARD


class BidirectionalIterator(ForwardIterator):
    """Adaptor adding decrement to the forward surface."""

    __slots__ = []

    category = IteratorCategory.BIDIRECTIONAL

    def decrement(self):
        """Step back by one and return self."""
        self._primitive.advance(-1)
        return self

    def post_decrement(self):
        """Step back by one and return a copy taken before moving."""
        old = self.copy()
        self._primitive.advance(-1)
        return old


class RandomAccessIterator(BidirectionalIterator):
    """Adaptor adding arithmetic, distance and ordering."""

    __slots__ = []

    category = IteratorCategory.RANDOM_ACCESS

    def _advanced_copy(self, n: int):
        result = self.copy()
        result._primitive.advance(n)
        return result

    # Arithmetic

    def __add__(self, n):
        try:
            n = operator.index(n)
        except TypeError:
            return NotImplemented
        return self._advanced_copy(n)

    __radd__ = __add__

    def __sub__(self, other):
        if isinstance(other, InputIterator):
            if not _same_kind(self, other):
                return NotImplemented
            return int(self._primitive.difference(other._primitive))
        try:
            n = operator.index(other)
        except TypeError:
            return NotImplemented
        return self._advanced_copy(-n)

    # Ordering

    def _compare(self, other, op):
        if not _same_kind(self, other):
            return NotImplemented
        return op(self._primitive.difference(other._primitive), 0)

    def __lt__(self, other):
        return self._compare(other, operator.lt)

    def __gt__(self, other):
        return self._compare(other, operator.gt)

    def __le__(self, other):
        return self._compare(other, operator.le)

    def __ge__(self, other):
        return self._compare(other, operator.ge)

    # Compound assignment

    def __iadd__(self, n):
        try:
            n = operator.index(n)
        except TypeError:
            return NotImplemented
        self._primitive.advance(n)
        return self

    def __isub__(self, n):
        try:
            n = operator.index(n)
        except TypeError:
            return NotImplemented
        self._primitive.advance(-n)
        return self

    # Offset dereference

    def __getitem__(self, n):
        return (self + operator.index(n)).value

    def __setitem__(self, n, new_value) -> None:
        target = self + operator.index(n)
        target.value = new_value


_ADAPTOR_BY_CATEGORY = {
    IteratorCategory.INPUT: InputIterator,
    IteratorCategory.FORWARD: ForwardIterator,
    IteratorCategory.BIDIRECTIONAL: BidirectionalIterator,
    IteratorCategory.RANDOM_ACCESS: RandomAccessIterator,
}


def adaptor_class(category: IteratorCategory) -> type[InputIterator]:
    """Return the adaptor class exposing the surface of `category`."""
    return _ADAPTOR_BY_CATEGORY[IteratorCategory(category)]


def iterator_adaptor(primitive) -> InputIterator:
    """
    Wrap `primitive` in the adaptor selected by its category.

    Args:
        primitive: An object implementing the Primitive protocol

    Returns:
        An InputIterator, ForwardIterator, BidirectionalIterator or
        RandomAccessIterator forwarding to `primitive`

    Raises:
        IteratorCategoryError: if no category can be resolved for the
            primitive's type
    """
    return adaptor_class(resolve_category(type(primitive)))(primitive)
