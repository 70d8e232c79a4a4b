"""Per-page resource lists for optional content groups and patterns."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator


@dataclass(frozen=True)
class OCGRef:
    """Name under which a layer's optional content group is referenced."""

    name: str

    @classmethod
    def from_index(cls, index: int) -> "OCGRef":
        return cls(f"MC{index}")


class OCGList:
    """Optional content groups (layers) of a page, in the order they were added."""

    def __init__(self) -> None:
        self._layers: list[tuple[OCGRef, Any]] = []

    def add_ocg(self, obj: Any) -> OCGRef:
        """Store a reference to an OCG dictionary and return its name."""
        ref = OCGRef.from_index(len(self._layers))
        self._layers.append((ref, obj))
        return ref

    def __len__(self) -> int:
        return len(self._layers)

    def __iter__(self) -> Iterator[tuple[OCGRef, Any]]:
        return iter(list(self._layers))

    def to_dict(self) -> dict:
        return {ref.name: obj for ref, obj in self._layers}


@dataclass(frozen=True)
class Pattern:
    """A pattern resource; carries no data yet."""


@dataclass(frozen=True)
class PatternRef:
    """Name under which a pattern is referenced."""

    name: str

    @classmethod
    def from_index(cls, index: int) -> "PatternRef":
        return cls(f"PT{index}")


class PatternList:
    """Patterns of a page, keyed by their reference names."""

    def __init__(self) -> None:
        self._patterns: dict[str, Pattern] = {}

    def add_pattern(self, pattern: Pattern) -> PatternRef:
        ref = PatternRef.from_index(len(self._patterns))
        self._patterns[ref.name] = pattern
        return ref

    def __len__(self) -> int:
        return len(self._patterns)

    def __contains__(self, name: object) -> bool:
        return name in self._patterns

    def to_dict(self) -> dict:
        """Resource dictionary; patterns are not written out, so it is always empty."""
        return {}