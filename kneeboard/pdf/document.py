"""Document assembly and final serialization.

``DocumentBuilder`` owns the object table. Four font objects and one shared
resources dictionary are allocated when the builder is created, and every
page refers to that single resources dictionary. ``to_document()`` reserves
the page tree root and the catalog, allocates each page's content stream and
page dictionary (pointing back at the reserved root), then completes both
reservations.

``PDFDocument.write()`` produces::

    %PDF-1.5
    1 0 obj ... endobj          (every object, in allocation order)
    xref                        (free-list head + one 20-byte entry per object)
    trailer << /Root .. /Size .. >>
    startxref <offset of xref>
    %%EOF
"""

from __future__ import annotations

import io
import logging
from typing import Any, BinaryIO

from kneeboard.pdf.allocator import ObjectAllocator
from kneeboard.pdf.content import A5, ContentBuilder, Coord, FontStyle, trim_fraction
from kneeboard.pdf.errors import DocumentFinalizedError
from kneeboard.pdf.objects import (
    Array,
    ContentStream,
    Dictionary,
    IndirectRef,
    Name,
    encode,
)

logger = logging.getLogger(__name__)

PDF_HEADER = "%PDF-1.5"


class CountingWriter:
    """Writes to a binary sink and tracks how many bytes went out."""

    def __init__(self, sink: BinaryIO):
        self._sink = sink
        self.size = 0

    def write(self, data: bytes) -> int:
        self._sink.write(data)
        self.size += len(data)
        return len(data)

    def write_line(self, text: str = "") -> int:
        return self.write(text.encode("ascii") + b"\n")


class PageBuilder:
    """Page dictionary plus the content stream its generator fills."""

    def __init__(self, page_size: Coord, resources: IndirectRef):
        self.page_size = page_size
        width, height = page_size
        self.page_dict = Dictionary.typed("Page")
        self.page_dict["MediaBox"] = Array([0, 0, trim_fraction(width), trim_fraction(height)])
        self.page_dict["Resources"] = resources
        self.contents = ContentStream()

    def content_builder(self) -> ContentBuilder:
        return ContentBuilder(self.page_size, self.contents)


class DocumentBuilder:
    def __init__(self) -> None:
        self._allocator = ObjectAllocator()
        self._pages: list[PageBuilder] = []
        self._finalized = False

        fonts = Dictionary()
        for style in FontStyle:
            fonts[style.font_name] = self._create_font(style.font_name)
        font_ref = self._allocator.alloc(fonts)

        self.page_resources = self._allocator.alloc(Dictionary({"Font": font_ref}))

    def _create_font(self, base_font: str) -> IndirectRef:
        font = Dictionary.typed("Font")
        font["Subtype"] = Name("Type1")
        font["BaseFont"] = Name(base_font)
        font["Encoding"] = Name("WinAnsiEncoding")
        return self._allocator.alloc(font)

    @property
    def page_count(self) -> int:
        return len(self._pages)

    def _check_open(self) -> None:
        if self._finalized:
            raise DocumentFinalizedError("Document has already been finalized")

    def create_page(self, page_size: Coord = A5) -> PageBuilder:
        """Append a page and return the builder its generator draws into."""
        self._check_open()
        page = PageBuilder(page_size, self.page_resources)
        self._pages.append(page)
        return page

    def to_document(self) -> PDFDocument:
        """Finalize the page tree and catalog. The builder cannot be reused."""
        self._check_open()
        self._finalized = True

        pages_pending = self._allocator.peek_alloc()
        catalog_pending = self._allocator.peek_alloc()

        kids = Array()
        for page in self._pages:
            content_ref = self._allocator.alloc(page.contents)
            page.page_dict["Parent"] = pages_pending.ref
            page.page_dict["Contents"] = content_ref
            kids.append(self._allocator.alloc(page.page_dict))

        pages = Dictionary.typed("Pages")
        pages["Count"] = len(kids)
        pages["Kids"] = kids

        catalog = Dictionary.typed("Catalog")
        catalog["Pages"] = pages_pending.ref
        catalog["PageLayout"] = Name("OneColumn")

        self._allocator.complete(pages_pending, pages)
        root = self._allocator.complete(catalog_pending, catalog)

        return PDFDocument(self._allocator.objects(), root)


class PDFDocument:
    """A finished document: write it to a binary sink once it is built."""

    def __init__(
        self,
        objects: list[Any],
        root: IndirectRef,
        content: list[Any] | None = None,
    ):
        self._objects = objects
        self._content = content or []
        self.root = root

    @property
    def object_count(self) -> int:
        return len(self._objects)

    def write(self, sink: BinaryIO) -> int:
        """Serialize to ``sink``; returns the number of bytes written.

        Errors raised by the sink propagate unchanged.
        """
        out = CountingWriter(sink)

        out.write_line(PDF_HEADER)
        for value in self._content:
            out.write(encode(value) + b"\n")

        offsets: list[int] = []
        for idx, value in enumerate(self._objects):
            offsets.append(out.size)
            out.write(f"{idx + 1} 0 obj\n".encode("ascii"))
            out.write(encode(value))
            out.write(b"\nendobj\n")

        startxref = out.size
        size = len(offsets) + 1

        out.write_line("xref")
        out.write_line(f"0 {size}")
        out.write_line("0000000000 65535 f ")
        for offset in offsets:
            out.write_line(f"{offset:010d} 00000 n ")

        trailer = Dictionary({"Size": size, "Root": self.root})
        out.write_line("trailer")
        out.write(encode(trailer))
        out.write_line()

        out.write_line("startxref")
        out.write_line(str(startxref))
        out.write_line("%%EOF")

        logger.debug("Wrote %d objects (%d bytes)", len(offsets), out.size)
        return out.size

    def to_bytes(self) -> bytes:
        buffer = io.BytesIO()
        self.write(buffer)
        return buffer.getvalue()
