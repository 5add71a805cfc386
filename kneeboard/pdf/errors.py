"""PDF writer exceptions.

All of these signal a bug in a page generator, not a user or runtime
condition. I/O failures while writing are never wrapped: the sink's own
exception reaches the caller unchanged.
"""


class PDFError(Exception):
    """Base exception for the PDF writer."""


class AllocationError(PDFError):
    """Raised when a reserved object slot is completed more than once."""

    def __init__(self, object_id: int):
        self.object_id = object_id
        super().__init__(f"Object {object_id + 1} has already been completed")


class IncompleteObjectError(PDFError):
    """Raised when reserved object slots are still empty at serialization."""

    def __init__(self, object_ids: list[int]):
        self.object_ids = object_ids
        numbers = ", ".join(str(object_id + 1) for object_id in object_ids)
        super().__init__(f"Reserved objects never completed: {numbers}")


class DocumentFinalizedError(PDFError):
    """Raised when a document builder is used after ``to_document()``."""
