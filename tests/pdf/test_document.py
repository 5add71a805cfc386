"""Tests for document assembly and serialization."""

import re

import pytest

from kneeboard.pdf.content import A5
from kneeboard.pdf.document import DocumentBuilder, PDFDocument
from kneeboard.pdf.errors import DocumentFinalizedError
from kneeboard.pdf.objects import IndirectRef


def _document(pages=1):
    builder = DocumentBuilder()
    for _ in range(pages):
        layer = builder.create_page(A5).content_builder()
        layer.start_text_block()
        layer.print_at("Hello", (10.0, 10.0))
        layer.end_text_block()
    return builder.to_document()


def _xref_offsets(data: bytes) -> list[int]:
    return [int(match) for match in re.findall(rb"(\d{10}) 00000 n \n", data)]


class TestDocumentBuilder:
    def test_object_layout(self):
        document = _document(pages=2)
        # 4 fonts, font dict, resources, pages, catalog, then content + page per page
        assert document.object_count == 12
        assert document.root == IndirectRef(7)

    def test_empty_document(self):
        document = DocumentBuilder().to_document()
        assert document.object_count == 8
        assert b"/Count 0" in document.to_bytes()

    def test_finalized_once(self):
        builder = DocumentBuilder()
        builder.to_document()
        with pytest.raises(DocumentFinalizedError):
            builder.to_document()
        with pytest.raises(DocumentFinalizedError):
            builder.create_page()

    def test_page_count(self):
        builder = DocumentBuilder()
        builder.create_page()
        builder.create_page()
        assert builder.page_count == 2


class TestPDFDocumentWrite:
    def test_header_and_trailer(self):
        data = _document().to_bytes()
        assert data.startswith(b"%PDF-1.5\n")
        assert data.endswith(b"startxref\n" + str(data.index(b"xref\n")).encode() + b"\n%%EOF\n")
        assert b"trailer\n<</Root 8 0 R\n/Size 11\n>>\n" in data

    def test_xref_offsets_point_at_objects(self):
        data = _document(pages=2).to_bytes()
        offsets = _xref_offsets(data)

        assert len(offsets) == 12
        for number, offset in enumerate(offsets, start=1):
            assert data[offset:].startswith(f"{number} 0 obj\n".encode())

    def test_xref_entries_are_20_bytes(self):
        data = _document().to_bytes()
        start = data.index(b"0000000000 65535 f \n")
        assert data[start + 20:start + 40] == b"%010d 00000 n \n" % len(b"%PDF-1.5\n")

    def test_catalog_and_pages(self):
        data = _document().to_bytes()
        assert b"/PageLayout /OneColumn" in data
        assert b"/Type /Catalog" in data
        assert b"/Count 1" in data
        assert b"/Kids [10 0 R]" in data
        assert b"/Parent 7 0 R" in data
        assert b"/Resources 6 0 R" in data

    def test_fonts(self):
        data = _document().to_bytes()
        assert (
            b"1 0 obj\n<</BaseFont /Helvetica\n/Encoding /WinAnsiEncoding\n"
            b"/Subtype /Type1\n/Type /Font\n>>\nendobj\n"
        ) in data

    def test_content_stream(self):
        data = _document().to_bytes()
        assert b"(Hello) Tj\n" in data
        assert b"stream\nBT\n" in data

    def test_write_returns_size(self):
        document = _document()
        data = document.to_bytes()

        class Sink:
            def __init__(self):
                self.chunks = []

            def write(self, chunk):
                self.chunks.append(chunk)

        sink = Sink()
        assert document.write(sink) == len(data)
        assert b"".join(sink.chunks) == data

    def test_sink_errors_propagate(self):
        class FailingSink:
            def write(self, chunk):
                raise OSError("disk full")

        with pytest.raises(OSError, match="disk full"):
            _document().write(FailingSink())

    def test_direct_content_written_after_header(self):
        document = PDFDocument([None], IndirectRef(0), content=["comment"])
        data = document.to_bytes()
        assert data.startswith(b"%PDF-1.5\n(comment)\n1 0 obj\nnull\nendobj\n")
