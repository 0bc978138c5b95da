# Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES. ALL RIGHTS RESERVED.
#
# SPDX-License-Identifier: Apache-2.0 WITH LLVM-exception

import copy
import logging

import pytest

from iteradaptor import (
    BidirectionalIterator,
    CountingIterator,
    ForwardIterator,
    InputIterator,
    IteratorCategory,
    IteratorCategoryError,
    PointerIterator,
    RandomAccessIterator,
    RandomAccessPrimitive,
    WritablePrimitive,
    adaptor_class,
    counting,
    iterator_adaptor,
    pointer,
    resolve_category,
)
from iteradaptor.iterators import (
    CountingPrimitive,
    GeneratingPrimitive,
    PointerPrimitive,
)


class RecordingPrimitive:
    """Input primitive recording every call made to it."""

    def __init__(self, position=0):
        self.position = position
        self.calls = []

    def advance(self, n):
        self.calls.append(("advance", n))
        self.position += n

    def dereference(self):
        self.calls.append(("dereference",))
        return self.position * 10

    def equal(self, other):
        self.calls.append(("equal",))
        return self.position == other.position

    def __copy__(self):
        result = type(self)(self.position)
        result.calls = self.calls
        return result


class ForwardRecordingPrimitive(RecordingPrimitive):
    iterator_category = IteratorCategory.FORWARD


class BidirectionalRecordingPrimitive(RecordingPrimitive):
    iterator_category = IteratorCategory.BIDIRECTIONAL


class RandomAccessRecordingPrimitive(RecordingPrimitive):
    def difference(self, other):
        self.calls.append(("difference",))
        return self.position - other.position


class MissingEqualPrimitive:
    def advance(self, n):
        pass

    def dereference(self):
        return None


class BadCategoryPrimitive(RecordingPrimitive):
    iterator_category = "sideways"


class DeclaredRandomAccessWithoutDifference(RecordingPrimitive):
    iterator_category = IteratorCategory.RANDOM_ACCESS


class TestCategoryResolution:
    @pytest.mark.parametrize(
        "primitive_type, expected",
        [
            (RecordingPrimitive, IteratorCategory.INPUT),
            (ForwardRecordingPrimitive, IteratorCategory.FORWARD),
            (BidirectionalRecordingPrimitive, IteratorCategory.BIDIRECTIONAL),
            (RandomAccessRecordingPrimitive, IteratorCategory.RANDOM_ACCESS),
            (CountingPrimitive, IteratorCategory.RANDOM_ACCESS),
            (PointerPrimitive, IteratorCategory.RANDOM_ACCESS),
            (GeneratingPrimitive, IteratorCategory.INPUT),
        ],
    )
    def test_resolve_category(self, primitive_type, expected):
        assert resolve_category(primitive_type) is expected

    @pytest.mark.parametrize(
        "primitive, adaptor_type",
        [
            (RecordingPrimitive(), InputIterator),
            (ForwardRecordingPrimitive(), ForwardIterator),
            (BidirectionalRecordingPrimitive(), BidirectionalIterator),
            (RandomAccessRecordingPrimitive(), RandomAccessIterator),
        ],
    )
    def test_adaptor_class_follows_category(self, primitive, adaptor_type):
        it = iterator_adaptor(primitive)
        assert type(it) is adaptor_type
        assert it.primitive is primitive

    def test_resolution_is_cached_per_type(self):
        resolve_category(ForwardRecordingPrimitive)
        assert ForwardRecordingPrimitive in resolve_category.cache

    def test_resolution_is_logged_once(self, caplog):
        resolve_category.cache_clear()
        with caplog.at_level(logging.DEBUG, logger="iteradaptor.iterators._category"):
            resolve_category(CountingPrimitive)
            resolve_category(CountingPrimitive)
        assert caplog.text.count("category for CountingPrimitive") == 1
        assert "declared category for CountingPrimitive: random-access" in caplog.text

    def test_missing_method_is_rejected(self):
        with pytest.raises(IteratorCategoryError, match="missing equal"):
            iterator_adaptor(MissingEqualPrimitive())

    def test_invalid_declared_category_is_rejected(self):
        with pytest.raises(IteratorCategoryError, match="not an iterator category"):
            resolve_category(BadCategoryPrimitive)

    def test_random_access_without_difference_is_rejected(self):
        with pytest.raises(IteratorCategoryError, match="difference"):
            resolve_category(DeclaredRandomAccessWithoutDifference)

    def test_category_error_is_a_type_error(self):
        with pytest.raises(TypeError):
            iterator_adaptor(MissingEqualPrimitive())

    def test_adaptor_stronger_than_primitive_is_rejected(self):
        with pytest.raises(IteratorCategoryError, match="requires a random-access"):
            RandomAccessIterator(RecordingPrimitive())

    def test_adaptor_weaker_than_primitive_is_allowed(self):
        it = InputIterator(CountingPrimitive(4))
        assert it.value == 4
        assert not hasattr(it, "decrement")

    def test_adaptor_class_lookup(self):
        assert adaptor_class(IteratorCategory.BIDIRECTIONAL) is BidirectionalIterator
        assert adaptor_class(3) is RandomAccessIterator

    def test_category_names(self):
        assert str(IteratorCategory.RANDOM_ACCESS) == "random-access"
        assert IteratorCategory.INPUT < IteratorCategory.FORWARD


class TestForwarding:
    def test_increment_forwards_advance_one(self):
        primitive = RecordingPrimitive()
        it = iterator_adaptor(primitive)
        assert it.increment() is it
        assert primitive.calls == [("advance", 1)]

    def test_dereference_forwards(self):
        primitive = RecordingPrimitive(3)
        it = iterator_adaptor(primitive)
        assert it.value == 30
        assert primitive.calls == [("dereference",)]

    def test_equality_forwards(self):
        a = iterator_adaptor(RecordingPrimitive(2))
        b = iterator_adaptor(RecordingPrimitive(2))
        assert a == b
        assert not (a != b)
        assert a.primitive.calls == [("equal",), ("equal",)]

    def test_post_increment_copies_before_advancing(self):
        primitive = RecordingPrimitive(5)
        it = iterator_adaptor(primitive)
        old = it.post_increment()
        assert old.primitive is not primitive
        assert old.primitive.position == 5
        assert primitive.position == 6

    def test_decrement_forwards_advance_minus_one(self):
        primitive = BidirectionalRecordingPrimitive(5)
        it = iterator_adaptor(primitive)
        assert it.decrement() is it
        old = it.post_decrement()
        assert old.primitive.position == 4
        assert primitive.position == 3
        assert primitive.calls == [("advance", -1), ("advance", -1)]

    def test_forward_has_no_decrement(self):
        it = iterator_adaptor(ForwardRecordingPrimitive())
        assert not hasattr(it, "decrement")
        with pytest.raises(TypeError):
            it + 1

    def test_bidirectional_has_no_arithmetic(self):
        it = iterator_adaptor(BidirectionalRecordingPrimitive())
        with pytest.raises(TypeError):
            it + 1
        with pytest.raises(TypeError):
            it < it.copy()

    def test_difference_forwards(self):
        a = iterator_adaptor(RandomAccessRecordingPrimitive(7))
        b = iterator_adaptor(RandomAccessRecordingPrimitive(2))
        assert a - b == 5
        assert a.primitive.calls == [("difference",)]


class TestRandomAccess:
    def test_addition_returns_advanced_copy(self):
        it = counting(3)
        moved = it + 4
        assert isinstance(moved, CountingIterator)
        assert moved.count == 7
        assert it.count == 3
        assert (4 + it).count == 7

    def test_subtraction(self):
        it = counting(10)
        assert (it - 3).count == 7
        assert it - counting(4) == 6
        assert counting(4) - it == -6

    def test_compound_assignment_returns_self(self):
        it = counting(0)
        same = it
        it += 5
        assert it is same
        it -= 2
        assert it is same
        assert it.count == 3

    @pytest.mark.parametrize(
        "a, b, lt, gt, le, ge",
        [
            (1, 2, True, False, True, False),
            (2, 1, False, True, False, True),
            (2, 2, False, False, True, True),
        ],
    )
    def test_ordering(self, a, b, lt, gt, le, ge):
        x, y = counting(a), counting(b)
        assert (x < y) is lt
        assert (x > y) is gt
        assert (x <= y) is le
        assert (x >= y) is ge

    def test_offset_dereference(self):
        it = pointer(["a", "b", "c", "d"], 1)
        assert it[0] == "b"
        assert it[2] == "d"
        assert it[-1] == "a"
        assert it.offset == 1

    def test_offset_assignment(self):
        data = [0, 0, 0]
        it = pointer(data)
        it[2] = 5
        it.value = 1
        assert data == [1, 0, 5]

    def test_non_integer_offsets_are_rejected(self):
        it = counting(0)
        with pytest.raises(TypeError):
            it + 1.5
        with pytest.raises(TypeError):
            it += 0.5
        with pytest.raises(TypeError):
            it["x"]

    def test_numpy_integer_offsets(self):
        np = pytest.importorskip("numpy")
        it = counting(0) + np.int64(3)
        assert it.count == 3


class TestMixedTypes:
    def test_equality_with_other_primitive_type_is_false(self):
        assert counting(0) != pointer([0])
        assert not (counting(0) == pointer([0]))

    def test_difference_with_other_primitive_type_raises(self):
        with pytest.raises(TypeError):
            counting(0) - pointer([0])

    def test_ordering_with_other_primitive_type_raises(self):
        with pytest.raises(TypeError):
            counting(0) < pointer([0])

    def test_pointers_into_different_sequences(self):
        with pytest.raises(ValueError, match="different sequences"):
            pointer([1, 2]) - pointer([1, 2])
        assert pointer([1, 2]) != pointer([1, 2])


class TestValueSemantics:
    def test_copy_module_support(self):
        it = counting(2)
        shallow = copy.copy(it)
        deep = copy.deepcopy(it)
        shallow += 1
        deep += 2
        assert (it.count, shallow.count, deep.count) == (2, 3, 4)

    def test_pointer_copies_share_sequence(self):
        data = [1, 2, 3]
        it = pointer(data)
        other = it.copy()
        other.increment()
        assert other.sequence is it.sequence
        assert (it.offset, other.offset) == (0, 1)

    def test_iterators_are_unhashable(self):
        with pytest.raises(TypeError):
            hash(counting(0))

    def test_repr(self):
        assert repr(counting(3)) == "CountingIterator(CountingPrimitive(3))"


class TestPointer:
    def test_reads_numpy_array(self):
        np = pytest.importorskip("numpy")
        it = pointer(np.arange(5) * 2, 2)
        assert isinstance(it, PointerIterator)
        assert it.value == 4

    def test_before_start_raises_index_error(self):
        it = pointer([1, 2, 3])
        it.decrement()
        with pytest.raises(IndexError, match="before the start"):
            it.value
        with pytest.raises(IndexError):
            it.value = 0

    def test_past_end_propagates_sequence_error(self):
        it = pointer([1, 2, 3], 3)
        with pytest.raises(IndexError):
            it.value

    def test_read_only_sequence(self):
        it = pointer((1, 2, 3))
        with pytest.raises(TypeError):
            it.value = 5


def test_protocols():
    assert isinstance(CountingPrimitive(0), RandomAccessPrimitive)
    assert isinstance(PointerPrimitive([]), WritablePrimitive)
    assert not isinstance(GeneratingPrimitive(int), RandomAccessPrimitive)
    assert not isinstance(CountingPrimitive(0), WritablePrimitive)
