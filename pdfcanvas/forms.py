"""Form, PostScript and reference XObjects, and the enums that describe them."""

from __future__ import annotations

import builtins
import datetime
import enum
from dataclasses import dataclass, field
from typing import Any, Optional

from .objects import Name, Stream


class FormType(enum.Enum):
    """Form type of a form XObject; only type 1 was ever declared."""

    TYPE1 = 1


class ImageFilter(enum.Enum):
    """Compression format of image bytes."""

    ASCII85 = "ASCII85Decode"
    LZW = "LZWDecode"
    DCT = "DCTDecode"
    JPX = "JPXDecode"


class GroupXObjectType(enum.Enum):
    """Kind of group XObject; transparency groups are the only kind."""

    TRANSPARENCY_GROUP = "Transparency"


class OCGIntent(enum.Enum):
    """Intended use of an optional content group."""

    VIEW = "View"
    DESIGN = "Design"


@dataclass
class FormXObject:
    """Reusable content stream that can be drawn several times on a page.

    This is not an interactive form; it holds any valid content stream.
    """

    form_type: FormType = FormType.TYPE1
    bytes: builtins.bytes = b""
    matrix: Optional[Any] = None
    resources: Optional[dict] = None
    group: Optional[Any] = None
    ref_dict: Optional[dict] = None
    metadata: Optional[Stream] = None
    piece_info: Optional[dict] = None
    last_modified: Optional[datetime.datetime] = None
    struct_parent: Optional[int] = None
    struct_parents: Optional[int] = None
    opi: Optional[dict] = None
    oc: Optional[dict] = None
    name: Optional[str] = None

    def __post_init__(self) -> None:
        self.bytes = builtins.bytes(self.bytes)
        if self.struct_parent is not None and self.struct_parents is not None:
            raise ValueError("only one of struct_parent and struct_parents may be set")

    def to_stream(self) -> Stream:
        """The stream object written to the document."""
        header = {
            "Type": Name("XObject"),
            "Subtype": Name("Form"),
            "FormType": self.form_type.value,
        }
        return Stream(header, self.bytes)


@dataclass
class PostScriptXObject:
    """Embedded PostScript; its content is not written out."""

    level1: Optional[bytes] = None

    def to_stream(self) -> Stream:
        """An empty stream, since PostScript content is not supported."""
        return Stream({}, b"")


@dataclass
class ReferenceXObject:
    """A page of another PDF file to be embedded."""

    file: bytes
    page: int
    id: tuple[int, int] = (0, 0)

    def __post_init__(self) -> None:
        self.file = bytes(self.file)
        ident = tuple(int(v) for v in self.id)
        if len(ident) != 2:
            raise ValueError(f"a reference id has exactly 2 numbers, got {len(ident)}")
        self.id = ident  # type: ignore[assignment]


@dataclass
class OptionalContentGroup:
    """A layer that viewers can show or hide."""

    name: str
    intent: list[OCGIntent] = field(default_factory=list)
    usage: Optional[dict] = None

    def __post_init__(self) -> None:
        self.intent = list(self.intent)