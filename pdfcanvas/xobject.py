"""External objects (XObjects) placed in a page's resources and drawn with /Do."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Protocol, Union, runtime_checkable

from .forms import FormXObject, PostScriptXObject
from .objects import ObjectStore, Reference, Stream


@runtime_checkable
class _StreamSource(Protocol):
    def to_stream(self) -> Stream: ...


@dataclass
class ExternalXObject:
    """An XObject given as a ready-made stream.

    Used for content the library has no dedicated type for, such as gradients
    or patterns; the stream is written to the resources unchanged.
    """

    stream: Stream = field(default_factory=Stream)

    def to_stream(self) -> Stream:
        return self.stream


XObject = Union[FormXObject, PostScriptXObject, ExternalXObject, _StreamSource]


@dataclass(frozen=True, order=True)
class XObjectRef:
    """Name under which an XObject is invoked on a page."""

    name: str

    @classmethod
    def from_index(cls, index: int) -> "XObjectRef":
        return cls(f"X{index}")


def _as_stream(xobj: object) -> Stream:
    if isinstance(xobj, Stream):
        return xobj
    return xobj.to_stream()  # type: ignore[union-attr]


class XObjectList:
    """XObjects of one page, keyed by their reference names."""

    def __init__(self) -> None:
        self._objects: dict[str, object] = {}

    def add_xobject(self, xobj: XObject) -> XObjectRef:
        """Store an XObject and return the name it can be invoked by."""
        if not isinstance(xobj, (Stream, _StreamSource)):
            raise TypeError(f"cannot use {type(xobj).__name__} as an XObject")
        ref = XObjectRef.from_index(len(self._objects))
        self._objects[ref.name] = xobj
        return ref

    def __len__(self) -> int:
        return len(self._objects)

    def __iter__(self) -> Iterator[tuple[str, object]]:
        return iter(list(self._objects.items()))

    def __getitem__(self, name: str) -> object:
        return self._objects[name]

    def to_dict(self, store: ObjectStore) -> dict[str, Reference]:
        """Add every stream to the store and map each name to its reference."""
        return {
            name: store.add_object(_as_stream(xobj))
            for name, xobj in self._objects.items()
        }