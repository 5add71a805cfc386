"""Minimal PDF writer: object table, content streams and serialization.

Only what the kneeboard pages need: four built-in Helvetica fonts, a flat
page tree, uncompressed content streams.
"""

from kneeboard.pdf.allocator import ObjectAllocator, PendingRef
from kneeboard.pdf.content import A5, ContentBuilder, FontStyle, init_page
from kneeboard.pdf.document import DocumentBuilder, PageBuilder, PDFDocument
from kneeboard.pdf.errors import (
    AllocationError,
    DocumentFinalizedError,
    IncompleteObjectError,
    PDFError,
)
from kneeboard.pdf.objects import (
    Array,
    ContentStream,
    Dictionary,
    IndirectRef,
    Name,
    Op,
    OpCode,
    encode,
)

__all__ = [
    "A5",
    "AllocationError",
    "Array",
    "ContentBuilder",
    "ContentStream",
    "Dictionary",
    "DocumentBuilder",
    "DocumentFinalizedError",
    "FontStyle",
    "IncompleteObjectError",
    "IndirectRef",
    "Name",
    "ObjectAllocator",
    "Op",
    "OpCode",
    "PDFDocument",
    "PDFError",
    "PageBuilder",
    "PendingRef",
    "encode",
    "init_page",
]
