"""Tests for PDF value encodings."""

import math

import pytest

from kneeboard.pdf.objects import (
    Array,
    ContentStream,
    Dictionary,
    IndirectRef,
    Name,
    Op,
    OpCode,
    encode,
    encode_name,
    encode_op,
    encode_string,
    format_number,
)


class TestFormatNumber:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (10, "10"),
            (-3, "-3"),
            (10.0, "10"),
            (0.25, "0.25"),
            (-0.0, "0"),
            (1e-12, "0"),
            (1e20, "100000000000000000000"),
            (595.2756, "595.2756"),
        ],
    )
    def test_plain_decimal(self, value, expected):
        assert format_number(value) == expected

    @pytest.mark.parametrize("value", [math.nan, math.inf])
    def test_non_finite_rejected(self, value):
        with pytest.raises(ValueError):
            format_number(value)


class TestEncodeString:
    def test_plain(self):
        assert encode_string("LOST") == b"(LOST)"

    def test_escapes(self):
        assert encode_string("a(b)\\c\n") == b"(a\\(b\\)\\\\c\\n)"

    def test_winansi_octal(self):
        assert encode_string("310°") == b"(310\\260)"
        assert encode_string("é") == b"(\\351)"
        assert encode_string("€") == b"(\\200)"

    def test_unencodable_character(self):
        assert encode_string("a中b") == b"(a?b)"


class TestEncodeName:
    def test_regular(self):
        assert encode_name(Name("Helvetica-Bold")) == b"/Helvetica-Bold"

    def test_escaped(self):
        assert encode_name(Name("A B#")) == b"/A#20B#23"
        assert encode_name(Name("x/y")) == b"/x#2Fy"


class TestEncode:
    def test_scalars(self):
        assert encode(None) == b"null"
        assert encode(True) == b"true"
        assert encode(False) == b"false"
        assert encode(7) == b"7"
        assert encode(0.5) == b"0.5"

    def test_indirect_ref_is_one_based(self):
        assert encode(IndirectRef(0)) == b"1 0 R"
        assert encode(IndirectRef(7)) == b"8 0 R"

    def test_array(self):
        assert encode(Array([1, Name("X"), IndirectRef(2)])) == b"[1 /X 3 0 R]"

    def test_empty_array(self):
        assert encode(Array()) == b"[]"

    def test_dictionary_sorted_keys(self):
        value = Dictionary({"Type": Name("Page"), "Count": 2, "A": None})
        assert encode(value) == b"<</A null\n/Count 2\n/Type /Page\n>>"

    def test_typed_dictionary(self):
        value = Dictionary.typed("Catalog")
        assert value["Type"] == Name("Catalog")
        assert "Type" in value
        assert len(value) == 1

    def test_content_stream(self):
        stream = ContentStream()
        stream.append(Op(OpCode.SAVE_STATE))
        stream.append(Op(OpCode.LINE_WIDTH, (0.5,)))

        assert encode(stream) == b"<</Length 8\n>>\nstream\nq\n0.5 w\nendstream"

    def test_op(self):
        op = Op(OpCode.SET_FONT, (Name("Helvetica"), 10.0))
        assert encode_op(op) == b"/Helvetica 10 Tf"
        assert encode(Op(OpCode.SHOW_TEXT, ("Hi",))) == b"(Hi) Tj"

    def test_unknown_type(self):
        with pytest.raises(TypeError):
            encode(object())
