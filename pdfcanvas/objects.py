"""A small PDF object model: names, strings, references, content operations."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass, field
from typing import Any, Iterable

from .scale import Pt

_DELIMITERS = frozenset(b"()<>[]{}/%#")


class StringFormat(enum.Enum):
    """How a PDF string is written."""

    LITERAL = "literal"
    HEXADECIMAL = "hexadecimal"


@dataclass(frozen=True)
class Name:
    """A PDF name object such as /Type."""

    value: str


@dataclass(frozen=True)
class PdfString:
    """A PDF string object holding raw bytes."""

    value: bytes
    format: StringFormat = StringFormat.LITERAL

    def __post_init__(self) -> None:
        if isinstance(self.value, str):
            object.__setattr__(self, "value", self.value.encode("utf-8"))


@dataclass(frozen=True)
class Reference:
    """An indirect reference to an object by number and generation."""

    id: int
    generation: int = 0


@dataclass
class Stream:
    """A PDF stream: a dictionary plus raw content."""

    dict: dict = field(default_factory=dict)
    content: bytes = b""
    allows_compression: bool = True


def _format_real(value: float) -> bytes:
    if not math.isfinite(value):
        raise ValueError(f"PDF numbers must be finite, got {value!r}")
    if value == 0.0:
        return b"0"
    text = repr(value)
    if "e" in text or "E" in text:
        text = f"{value:.10f}".rstrip("0").rstrip(".")
    elif text.endswith(".0"):
        text = text[:-2]
    return text.encode("ascii")


def _encode_name(name: str) -> bytes:
    out = bytearray(b"/")
    for byte in name.encode("utf-8"):
        if byte in _DELIMITERS or not 0x21 <= byte <= 0x7E:
            out += b"#%02X" % byte
        else:
            out.append(byte)
    return bytes(out)


def _encode_string(string: PdfString) -> bytes:
    if string.format is StringFormat.HEXADECIMAL:
        return b"<" + string.value.hex().upper().encode("ascii") + b">"
    escaped = (
        string.value.replace(b"\\", b"\\\\")
        .replace(b"(", b"\\(")
        .replace(b")", b"\\)")
        .replace(b"\r", b"\\r")
        .replace(b"\n", b"\\n")
    )
    return b"(" + escaped + b")"


def _serialize(obj: Any) -> bytes:
    """Write one object in PDF syntax. A plain str is written as a name."""
    if obj is None:
        return b"null"
    if isinstance(obj, bool):
        return b"true" if obj else b"false"
    if isinstance(obj, int):
        return str(obj).encode("ascii")
    if isinstance(obj, float):
        return _format_real(obj)
    if isinstance(obj, Pt):
        return _format_real(obj.value)
    if isinstance(obj, Name):
        return _encode_name(obj.value)
    if isinstance(obj, str):
        return _encode_name(obj)
    if isinstance(obj, PdfString):
        return _encode_string(obj)
    if isinstance(obj, (bytes, bytearray)):
        return _encode_string(PdfString(bytes(obj)))
    if isinstance(obj, Reference):
        return f"{obj.id} {obj.generation} R".encode("ascii")
    if isinstance(obj, (list, tuple)):
        return b"[" + b" ".join(_serialize(item) for item in obj) + b"]"
    if isinstance(obj, dict):
        entries = (_encode_name(key) + b" " + _serialize(value) for key, value in obj.items())
        return b"<<" + b" ".join(entries) + b">>"
    if isinstance(obj, Stream):
        header = dict(obj.dict)
        header["Length"] = len(obj.content)
        return _serialize(header) + b"\nstream\n" + obj.content + b"\nendstream"
    raise TypeError(f"cannot write {type(obj).__name__} as a PDF object")


@dataclass
class Operation:
    """A content stream operator with its operands."""

    operator: str
    operands: list = field(default_factory=list)

    def encode(self) -> bytes:
        parts = [_serialize(operand) for operand in self.operands]
        parts.append(self.operator.encode("ascii"))
        return b" ".join(parts) + b"\n"


def encode_operations(operations: Iterable[Operation]) -> bytes:
    """Encode a sequence of operations as a content stream."""
    return b"".join(op.encode() for op in operations)


class ObjectStore:
    """Numbered indirect objects of a document."""

    def __init__(self) -> None:
        self.max_id = 0
        self.objects: dict[Reference, Any] = {}

    def new_object_id(self) -> Reference:
        """Reserve the next object number without storing anything."""
        self.max_id += 1
        return Reference(self.max_id, 0)

    def add_object(self, obj: Any) -> Reference:
        reference = self.new_object_id()
        self.objects[reference] = obj
        return reference

    def get(self, reference: Reference) -> Any:
        try:
            return self.objects[reference]
        except KeyError:
            raise KeyError(f"no object {reference.id} {reference.generation}") from None

    def __contains__(self, reference: object) -> bool:
        return reference in self.objects

    def __len__(self) -> int:
        return len(self.objects)