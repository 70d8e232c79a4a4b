"""Link annotations: clickable page regions that jump to a page or open a URI."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Iterator, Mapping, Optional, Union

from .objects import Name, PdfString, Reference, StringFormat
from .rectangle import Rect


def _rect_array(rect: Rect) -> list[float]:
    return [rect.ll.x.value, rect.ll.y.value, rect.ur.x.value, rect.ur.y.value]


@dataclass(frozen=True)
class DashPhase:
    """A dash pattern and the phase at which it starts."""

    dash_array: tuple[float, ...] = ()
    phase: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "dash_array", tuple(float(v) for v in self.dash_array))
        object.__setattr__(self, "phase", float(self.phase))

    def to_object(self) -> list:
        return [list(self.dash_array), self.phase]


@dataclass(frozen=True)
class BorderArray:
    """Border of an annotation: corner radii and width, optionally dashed."""

    values: tuple[float, float, float] = (0.0, 0.0, 1.0)
    dash: Optional[DashPhase] = None

    def __post_init__(self) -> None:
        values = tuple(float(v) for v in self.values)
        if len(values) != 3:
            raise ValueError(f"a border needs exactly 3 values, got {len(values)}")
        object.__setattr__(self, "values", values)

    def to_object(self) -> list[float]:
        array = list(self.values)
        if self.dash is not None:
            array.append(self.dash.phase)
        return array


_COLOR_LENGTHS = frozenset({0, 1, 3, 4})


@dataclass(frozen=True)
class ColorArray:
    """Annotation colour: none (transparent), gray, RGB or CMYK components."""

    components: tuple[float, ...] = (0.0, 1.0, 1.0)

    def __post_init__(self) -> None:
        components = tuple(float(v) for v in self.components)
        if len(components) not in _COLOR_LENGTHS:
            raise ValueError(
                f"a colour has 0, 1, 3 or 4 components, got {len(components)}"
            )
        object.__setattr__(self, "components", components)

    @classmethod
    def transparent(cls) -> "ColorArray":
        return cls(())

    @classmethod
    def gray(cls, value: float) -> "ColorArray":
        return cls((value,))

    @classmethod
    def rgb(cls, r: float, g: float, b: float) -> "ColorArray":
        return cls((r, g, b))

    @classmethod
    def cmyk(cls, c: float, m: float, y: float, k: float) -> "ColorArray":
        return cls((c, m, y, k))

    def to_object(self) -> list[float]:
        return list(self.components)


@dataclass(frozen=True)
class Destination:
    """Show `page` with (left, top) at the window's upper left, magnified by `zoom`.

    None leaves a value unchanged; a zoom of 0 means the same as None.
    """

    page: int
    left: Optional[float] = None
    top: Optional[float] = None
    zoom: Optional[float] = None


def _optional_real(value: Optional[float]) -> Optional[float]:
    return None if value is None else float(value)


@dataclass(frozen=True)
class GoToAction:
    """Jump to a destination inside the document."""

    destination: Destination

    def to_object(self, page_id_to_obj: Mapping[int, Reference]) -> dict:
        dest = self.destination
        try:
            page_ref = page_id_to_obj[dest.page]
        except KeyError:
            raise KeyError(f"page index {dest.page} has no object") from None
        return {
            "S": Name("GoTo"),
            "D": [
                page_ref,
                Name("XYZ"),
                _optional_real(dest.left),
                _optional_real(dest.top),
                _optional_real(dest.zoom),
            ],
        }


@dataclass(frozen=True)
class UriAction:
    """Open a URI."""

    uri: str

    def to_object(self, page_id_to_obj: Optional[Mapping[int, Reference]] = None) -> dict:
        return {
            "S": Name("URI"),
            "URI": PdfString(self.uri.encode("utf-8"), StringFormat.LITERAL),
        }


Action = Union[GoToAction, UriAction]


class HighlightingMode(enum.Enum):
    """Visual effect when the annotation is activated."""

    NONE = "N"
    INVERT = "I"
    OUTLINE = "O"
    PUSH = "P"

    def to_object(self) -> Name:
        return Name(self.value)


@dataclass(frozen=True)
class LinkAnnotation:
    """A clickable rectangle on a page that performs an action."""

    rect: Rect
    action: Action
    border: BorderArray = field(default_factory=BorderArray)
    color: ColorArray = field(default_factory=ColorArray)
    highlighting: HighlightingMode = HighlightingMode.INVERT

    def to_object(self, page_id_to_obj: Mapping[int, Reference]) -> dict:
        return {
            "Type": Name("Annot"),
            "Subtype": Name("Link"),
            "Rect": _rect_array(self.rect),
            "A": self.action.to_object(page_id_to_obj),
            "Border": self.border.to_object(),
            "C": self.color.to_object(),
            "H": self.highlighting.to_object(),
        }


@dataclass(frozen=True)
class LinkAnnotationRef:
    """Name under which a link annotation is stored."""

    name: str

    @classmethod
    def from_index(cls, index: int) -> "LinkAnnotationRef":
        return cls(f"PT{index}")


class LinkAnnotationList:
    """Link annotations of one page, keyed by their reference names."""

    def __init__(self) -> None:
        self._annotations: dict[str, LinkAnnotation] = {}

    def add_link_annotation(self, link_annotation: LinkAnnotation) -> LinkAnnotationRef:
        ref = LinkAnnotationRef.from_index(len(self._annotations))
        self._annotations[ref.name] = link_annotation
        return ref

    def __len__(self) -> int:
        return len(self._annotations)

    def __iter__(self) -> Iterator[tuple[str, LinkAnnotation]]:
        """Yield (name, annotation) pairs."""
        return iter(list(self._annotations.items()))

    def __getitem__(self, name: str) -> LinkAnnotation:
        return self._annotations[name]

    def to_dict(self) -> dict:
        """Resource entry for the list; empty when there are no annotations."""
        if not self._annotations:
            return {}
        first = self._annotations["PT0"]
        return {
            "Type": Name("Annot"),
            "Subtype": Name("Link"),
            "Rect": _rect_array(first.rect),
        }