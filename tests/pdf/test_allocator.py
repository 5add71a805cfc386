"""Tests for the indirect object table."""

import pytest

from kneeboard.pdf.allocator import ObjectAllocator
from kneeboard.pdf.errors import AllocationError, IncompleteObjectError
from kneeboard.pdf.objects import IndirectRef


class TestObjectAllocator:
    def test_alloc_in_order(self):
        allocator = ObjectAllocator()
        assert allocator.alloc("a") == IndirectRef(0)
        assert allocator.alloc("b") == IndirectRef(1)
        assert allocator.objects() == ["a", "b"]
        assert len(allocator) == 2

    def test_reserve_then_complete(self):
        allocator = ObjectAllocator()
        pending = allocator.peek_alloc()
        allocator.alloc("child")

        ref = allocator.complete(pending, "parent")

        assert ref == IndirectRef(0)
        assert pending.completed
        assert allocator.get(ref) == "parent"
        assert allocator.objects() == ["parent", "child"]

    def test_completed_value_may_be_none(self):
        allocator = ObjectAllocator()
        pending = allocator.peek_alloc()
        allocator.complete(pending, None)
        assert allocator.objects() == [None]

    def test_double_completion_rejected(self):
        allocator = ObjectAllocator()
        pending = allocator.peek_alloc()
        allocator.complete(pending, 1)

        with pytest.raises(AllocationError) as excinfo:
            allocator.complete(pending, 2)
        assert excinfo.value.object_id == 0
        assert allocator.objects() == [1]

    def test_open_reservation_rejected(self):
        allocator = ObjectAllocator()
        allocator.alloc("a")
        allocator.peek_alloc()
        allocator.peek_alloc()

        with pytest.raises(IncompleteObjectError) as excinfo:
            allocator.objects()
        assert excinfo.value.object_ids == [1, 2]
        assert "2, 3" in str(excinfo.value)
