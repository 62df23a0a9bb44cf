"""Rectangle arithmetic for placing, resizing and merging images on screen."""

from __future__ import annotations

import struct
from dataclasses import dataclass, replace
from typing import Optional, Tuple

Point = Tuple[int, int]

WIDGET_SPACING = 10
"""Gap left after a placed widget before the next one."""


def _f32(value: float) -> float:
    """Round a value to single precision, as the screen code computes scales."""
    return struct.unpack("f", struct.pack("f", value))[0]


def _half(value: int) -> int:
    """Integer half, truncated toward zero."""
    return int(value / 2) if value < 0 else value // 2


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle: top-left corner and size."""

    x: int = 0
    y: int = 0
    w: int = 0
    h: int = 0

    @property
    def size(self) -> Point:
        return self.w, self.h

    def contains(self, point: Point) -> bool:
        """True when ``point`` lies inside the rectangle."""
        px, py = point
        return self.x <= px < self.x + self.w and self.y <= py < self.y + self.h


def _merge_axis(p1: int, s1: int, p2: int, s2: int) -> Tuple[int, int, int, int]:
    """Merge one axis; return (origin, extent, offset of first, offset of second)."""
    low = min(p1, p2)
    offset = max(p1, p2) - low
    extent = offset + s2
    if extent < s1:
        extent = s1
    return low, extent, p1 - low, p2 - low


def merge_rects(first: Rect, second: Rect) -> Tuple[Rect, Rect, Rect]:
    """Compute the area covering two placed images.

    Returns the merged rectangle and, relative to it, where the first and the
    second image sit. The extent on each axis is the offset between the two
    origins plus the second image's size, and never less than the first's.
    """
    x, w, fx, sx = _merge_axis(first.x, first.w, second.x, second.w)
    y, h, fy, sy = _merge_axis(first.y, first.h, second.y, second.h)
    merged = Rect(x, y, w, h)
    return merged, Rect(fx, fy, first.w, first.h), Rect(sx, sy, second.w, second.h)


def grow_to(rect: Rect, min_size: Optional[Point]) -> Rect:
    """Enlarge ``rect`` so that its size is at least ``min_size``."""
    if min_size is None:
        return rect
    min_w, min_h = min_size
    return replace(rect, w=max(rect.w, min_w), h=max(rect.h, min_h))


def fit_within(rect: Rect, limit: Optional[Point]) -> Rect:
    """Shrink ``rect`` proportionally so that it fits within ``limit``."""
    if limit is None:
        return rect
    lim_w, lim_h = limit
    w, h = rect.w, rect.h
    if w > lim_w:
        coeff = _f32(lim_w / _f32(w))
        w = int(_f32(w * coeff))
        h = int(_f32(h * coeff))
    if h > lim_h:
        coeff = _f32(lim_h / _f32(h))
        h = int(_f32(h * coeff))
        w = int(_f32(w * coeff))
    return replace(rect, w=w, h=h)


def place(size: Point, pos: Point, limit: Optional[Point] = None) -> Tuple[Rect, Point]:
    """Centre an image of ``size`` on ``pos``, shrunk to ``limit`` if given.

    Returns the destination rectangle and the point just past its bottom-right
    corner, spaced by :data:`WIDGET_SPACING`, where the next widget may go.
    """
    width, height = size
    rect = fit_within(Rect(0, 0, width, height), limit)
    px, py = pos
    rect = replace(rect, x=px - _half(rect.w), y=py - _half(rect.h))
    following = (px + rect.w + WIDGET_SPACING, py + rect.h + WIDGET_SPACING)
    return rect, following