"""PDF value types and their byte encodings.

A PDF value is one of: ``None`` (null), ``bool``, ``int``, ``float``,
``str`` (literal string), ``Name``, ``IndirectRef``, ``Dictionary``,
``Array`` or ``ContentStream``. ``encode()`` turns any of them into the
bytes written to the file.

Encodings are deterministic: dictionary keys are written in sorted order and
numbers never use exponent notation, so identical input always produces
identical bytes.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable, Iterator

# Literal string escapes
_STRING_ESCAPES = {
    "\n": "\\n",
    "\r": "\\r",
    "\f": "\\f",
    "\b": "\\b",
    "(": "\\(",
    ")": "\\)",
    "\\": "\\\\",
}

_NAME_DELIMITERS = frozenset("()<>[]{}/%#")


@dataclass(frozen=True, order=True)
class Name:
    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, order=True)
class IndirectRef:
    """Reference to the object at position ``id`` of the object table."""

    id: int


class Dictionary:
    """PDF dictionary keyed by name; serialized in sorted key order."""

    def __init__(self, entries: dict[str, Any] | None = None):
        self._entries: dict[str, Any] = dict(entries or {})

    @classmethod
    def typed(cls, type_name: str) -> Dictionary:
        """Dictionary pre-populated with ``/Type /<type_name>``."""
        return cls({"Type": Name(type_name)})

    def __setitem__(self, key: str, value: Any) -> None:
        self._entries[key] = value

    def __getitem__(self, key: str) -> Any:
        return self._entries[key]

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def items(self) -> list[tuple[str, Any]]:
        return sorted(self._entries.items())


class Array:
    def __init__(self, values: Iterable[Any] = ()):
        self._values: list[Any] = list(values)

    def append(self, value: Any) -> None:
        self._values.append(value)

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._values)


class OpCode(str, Enum):
    """Content stream operators, valued by their PDF mnemonic."""
    BEGIN_TEXT = "BT"
    END_TEXT = "ET"
    MOVE_TEXT = "Td"
    MOVE_TEXT_SET_LEADING = "TD"
    SET_FONT = "Tf"
    SET_LEADING = "TL"
    SHOW_TEXT = "Tj"
    NEXT_LINE = "T*"
    STROKE_COLOUR = "RG"
    FILL_COLOUR = "rg"
    SAVE_STATE = "q"
    RESTORE_STATE = "Q"
    STROKE = "S"
    CLOSE_PATH = "h"
    FILL = "f"
    RECTANGLE = "re"
    LINE_TO = "l"
    MOVE_TO = "m"
    LINE_WIDTH = "w"
    CURVE_TO = "c"


@dataclass(frozen=True)
class Op:
    """One content stream operation: operands followed by the operator."""

    code: OpCode
    operands: tuple[Any, ...] = ()


@dataclass
class ContentStream:
    """Ordered drawing operations of one page. Paint order is append order."""

    ops: list[Op] = field(default_factory=list)

    def append(self, op: Op) -> None:
        self.ops.append(op)

    def __len__(self) -> int:
        return len(self.ops)


def format_number(value: int | float) -> str:
    """Shortest plain decimal form: ``10.0`` -> ``"10"``, ``0.25`` -> ``"0.25"``."""
    if isinstance(value, int):
        return str(value)
    if not math.isfinite(value):
        raise ValueError(f"PDF numbers must be finite, got {value!r}")

    text = f"{value:.10f}".rstrip("0").rstrip(".")
    if text in ("", "-0"):
        return "0"
    return text


def encode_string(text: str) -> bytes:
    """Literal string ``(...)``; non-ASCII characters become octal escapes.

    Characters are escaped by their WinAnsi (cp1252) code, matching the
    encoding declared for the built-in fonts. Characters with no WinAnsi code
    are written as ``?``.
    """
    out: list[str] = []
    for ch in text:
        escaped = _STRING_ESCAPES.get(ch)
        if escaped is not None:
            out.append(escaped)
        elif ord(ch) > 0x7F:
            try:
                code = ch.encode("cp1252")[0]
            except UnicodeEncodeError:
                out.append("?")
                continue
            out.append(f"\\{code:03o}")
        else:
            out.append(ch)
    return ("(" + "".join(out) + ")").encode("ascii")


def encode_name(name: Name | str) -> bytes:
    out = ["/"]
    for byte in str(name).encode("utf-8"):
        ch = chr(byte)
        if byte < 0x21 or byte > 0x7E or ch in _NAME_DELIMITERS:
            out.append(f"#{byte:02X}")
        else:
            out.append(ch)
    return "".join(out).encode("ascii")


def encode_op(op: Op) -> bytes:
    parts = [encode(operand) for operand in op.operands]
    parts.append(op.code.value.encode("ascii"))
    return b" ".join(parts)


def encode_content_stream(stream: ContentStream) -> bytes:
    body = b"".join(encode_op(op) + b"\n" for op in stream.ops)
    header = encode(Dictionary({"Length": len(body)}))
    return header + b"\nstream\n" + body + b"endstream"


def encode(value: Any) -> bytes:
    """Encode any PDF value (see module docstring for the accepted types)."""
    if value is None:
        return b"null"
    if isinstance(value, bool):
        return b"true" if value else b"false"
    if isinstance(value, (int, float)):
        return format_number(value).encode("ascii")
    if isinstance(value, str):
        return encode_string(value)
    if isinstance(value, Name):
        return encode_name(value)
    if isinstance(value, IndirectRef):
        return f"{value.id + 1} 0 R".encode("ascii")
    if isinstance(value, Dictionary):
        entries = b"".join(
            encode_name(key) + b" " + encode(item) + b"\n" for key, item in value.items()
        )
        return b"<<" + entries + b">>"
    if isinstance(value, Array):
        return b"[" + b" ".join(encode(item) for item in value) + b"]"
    if isinstance(value, ContentStream):
        return encode_content_stream(value)
    if isinstance(value, Op):
        return encode_op(value)
    raise TypeError(f"Cannot encode {type(value).__name__} as a PDF value")
