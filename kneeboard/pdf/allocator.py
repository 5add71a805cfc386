"""Indirect object table with two-phase (reserve, then complete) allocation.

Position in the table is object identity. A slot can be reserved before its
value exists so that objects can refer to each other (pages point at their
parent, the parent lists its pages); every reservation must be completed
exactly once before the table is serialized.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from kneeboard.pdf.errors import AllocationError, IncompleteObjectError
from kneeboard.pdf.objects import IndirectRef


class _Reserved:
    """Placeholder held by a reserved, not yet completed slot."""

    def __repr__(self) -> str:
        return "<reserved>"


RESERVED = _Reserved()


@dataclass
class PendingRef:
    """Completion handle for a reserved slot."""

    ref: IndirectRef
    completed: bool = False


class ObjectAllocator:
    def __init__(self) -> None:
        self._objects: list[Any] = []

    def __len__(self) -> int:
        return len(self._objects)

    def alloc(self, value: Any) -> IndirectRef:
        """Append a finished value and return its reference."""
        ref = IndirectRef(len(self._objects))
        self._objects.append(value)
        return ref

    def peek_alloc(self) -> PendingRef:
        """Reserve a slot whose value will be supplied later."""
        ref = IndirectRef(len(self._objects))
        self._objects.append(RESERVED)
        return PendingRef(ref)

    def complete(self, pending: PendingRef, value: Any) -> IndirectRef:
        """Fill a reserved slot. Each reservation is completed exactly once."""
        object_id = pending.ref.id
        if pending.completed or self._objects[object_id] is not RESERVED:
            raise AllocationError(object_id)
        self._objects[object_id] = value
        pending.completed = True
        return pending.ref

    def get(self, ref: IndirectRef) -> Any:
        return self._objects[ref.id]

    def objects(self) -> list[Any]:
        """All values in allocation order.

        Raises ``IncompleteObjectError`` if any reservation is still open.
        """
        pending = [idx for idx, value in enumerate(self._objects) if value is RESERVED]
        if pending:
            raise IncompleteObjectError(pending)
        return list(self._objects)
