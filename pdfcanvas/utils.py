"""Shape helpers, identifier strings and pixel data helpers."""

from __future__ import annotations

import itertools
import threading

from .point import Point
from .scale import Mm, Pt

# Control point distance for a cubic Bezier approximation of a quarter circle.
_C = 0.551915024494

_UNIT_CIRCLE = (
    (0.0, 1.0, True), (_C, 1.0, True), (1.0, _C, True), (1.0, 0.0, False),
    (1.0, 0.0, True), (1.0, -_C, True), (_C, -1.0, True), (0.0, -1.0, False),
    (0.0, -1.0, True), (-_C, -1.0, True), (-1.0, -_C, True), (-1.0, 0.0, False),
    (-1.0, 0.0, True), (-1.0, _C, True), (-_C, 1.0, True), (0.0, 1.0, False),
)

_MASK64 = (1 << 64) - 1
_seed = itertools.count(2100, 21)
_seed_lock = threading.Lock()


def _to_pt(value: Pt | Mm) -> Pt:
    if isinstance(value, Pt):
        return value
    if isinstance(value, Mm):
        return value.into_pt()
    raise TypeError(f"expected Pt or Mm, got {type(value).__name__}")


def circle_points(radius: Pt | Mm, offset_x: Pt | Mm, offset_y: Pt | Mm) -> list[tuple[Point, bool]]:
    """Bezier points approximating a circle around (offset_x, offset_y)."""
    r = _to_pt(radius).value
    ox = _to_pt(offset_x).value
    oy = _to_pt(offset_y).value
    return [
        (Point(Pt(ux * r + ox), Pt(uy * r + oy)), handle)
        for ux, uy, handle in _UNIT_CIRCLE
    ]


def rect_points(
    scale_x: Pt | Mm, scale_y: Pt | Mm, offset_x: Pt | Mm, offset_y: Pt | Mm
) -> list[tuple[Point, bool]]:
    """Corners of a rectangle centred on (offset_x, offset_y), clockwise from top left."""
    sx, sy = _to_pt(scale_x).value, _to_pt(scale_y).value
    ox, oy = _to_pt(offset_x).value, _to_pt(offset_y).value
    top, bottom = Pt(oy + sy / 2.0), Pt(oy - sy / 2.0)
    left, right = Pt(ox - sx / 2.0), Pt(ox + sx / 2.0)
    return [
        (Point(left, top), False),
        (Point(right, top), False),
        (Point(right, bottom), False),
        (Point(left, bottom), False),
    ]


def _rand() -> int:
    with _seed_lock:
        x = next(_seed) & _MASK64
    x ^= (x << 21) & _MASK64
    x ^= x >> 35
    x ^= (x << 4) & _MASK64
    return x


def random_character_string_32() -> str:
    """A pseudo-random string of 32 letters from A to J; not for security use."""
    chars: list[str] = []
    while len(chars) < 32:
        chars.extend(chr(ord("A") + int(digit)) for digit in str(_rand()))
    return "".join(chars[:32])


def rgba_to_rgb(data: bytes) -> tuple[bytes, bytes]:
    """Split interleaved RGBA bytes into RGB bytes and alpha bytes."""
    if len(data) % 4:
        raise ValueError(f"RGBA data length must be a multiple of 4, got {len(data)}")
    pixels = len(data) // 4
    rgb = bytearray(pixels * 3)
    rgb[0::3] = data[0::4]
    rgb[1::3] = data[1::4]
    rgb[2::3] = data[2::4]
    return bytes(rgb), bytes(data[3::4])