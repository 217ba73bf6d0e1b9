from __future__ import annotations

from typing import Iterable

from .models import Rect


def overlaps(a: Rect, b: Rect) -> bool:
    """Interiors intersect. Shared edges do not count as overlap."""
    return not (
        a.x >= b.x + b.w
        or a.x + a.w <= b.x
        or a.y >= b.y + b.h
        or a.y + a.h <= b.y
    )


def contains(outer: Rect, inner: Rect) -> bool:
    return (
        inner.x >= outer.x
        and inner.y >= outer.y
        and inner.x + inner.w <= outer.x + outer.w
        and inner.y + inner.h <= outer.y + outer.h
    )


def inside_container(rect: Rect, width: float, height: float) -> bool:
    return (
        rect.x >= 0
        and rect.y >= 0
        and rect.x + rect.w <= width
        and rect.y + rect.h <= height
    )


def total_area(rects: Iterable[Rect]) -> float:
    return sum(r.w * r.h for r in rects)
