from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence

import numpy as np

from .models import Item, Rect


@dataclass(frozen=True)
class ValidationPolicy:
    eps: float = 1e-9
    check_coverage: bool = True


DEFAULT_VALIDATION_POLICY = ValidationPolicy()


def _overlap(a: Rect, b: Rect, eps: float) -> bool:
    return not (
        a.x >= b.right - eps
        or a.right <= b.x + eps
        or a.y >= b.bottom - eps
        or a.bottom <= b.y + eps
    )


def _contained(inner: Rect, outer: Rect, eps: float) -> bool:
    return (
        inner.x >= outer.x - eps
        and inner.y >= outer.y - eps
        and inner.right <= outer.right + eps
        and inner.bottom <= outer.bottom + eps
    )


def _clip(rect: Rect, width: float, height: float) -> Optional[Rect]:
    x0 = max(rect.x, 0.0)
    y0 = max(rect.y, 0.0)
    x1 = min(rect.right, width)
    y1 = min(rect.bottom, height)
    if x1 <= x0 or y1 <= y0:
        return None
    return Rect(x0, y0, x1 - x0, y1 - y0)


def coverage_grid(
    width: float, height: float, used: Sequence[Rect], free: Sequence[Rect]
):
    """Rasterise ``used`` and ``free`` on the grid induced by their edges.

    Returns ``(used_count, free_mask)``; both arrays have one cell per
    elementary region between consecutive distinct x and y edges.
    """

    used = [r for r in (_clip(r, width, height) for r in used) if r is not None]
    free = [r for r in (_clip(r, width, height) for r in free) if r is not None]
    rects = used + free
    xs = np.unique(np.array([0.0, width] + [v for r in rects for v in (r.x, r.right)]))
    ys = np.unique(np.array([0.0, height] + [v for r in rects for v in (r.y, r.bottom)]))

    used_count = np.zeros((len(ys) - 1, len(xs) - 1), dtype=int)
    free_mask = np.zeros((len(ys) - 1, len(xs) - 1), dtype=bool)

    def _span(r: Rect):
        x0, x1 = np.searchsorted(xs, [r.x, r.right])
        y0, y1 = np.searchsorted(ys, [r.y, r.bottom])
        return slice(y0, y1), slice(x0, x1)

    for r in used:
        used_count[_span(r)] += 1
    for r in free:
        free_mask[_span(r)] = True
    return used_count, free_mask


def validation_flags(
    container_width: float,
    container_height: float,
    placed: Sequence[Item],
    free_rectangles: Optional[Iterable[Rect]] = None,
    policy: ValidationPolicy | None = None,
) -> set[str]:
    """Check a packing and return the names of the violated invariants.

    Free-list checks run only when ``free_rectangles`` is given.
    """

    if policy is None:
        policy = DEFAULT_VALIDATION_POLICY
    eps = policy.eps
    flags: set[str] = set()
    container = Rect(0.0, 0.0, container_width, container_height)
    used: List[Rect] = [item.footprint() for item in placed]

    for item, rect in zip(placed, used):
        if not _contained(rect, container, eps):
            flags.add("out_of_bounds")
        natural = (rect.w, rect.h) == (item.width, item.height)
        turned = (rect.w, rect.h) == (item.height, item.width)
        if not (natural or turned):
            flags.add("orientation_mismatch")

    for i, a in enumerate(used):
        for b in used[i + 1 :]:
            if _overlap(a, b, eps):
                flags.add("overlap")

    if free_rectangles is None:
        return flags

    free = list(free_rectangles)
    if any(f.w <= 0 or f.h <= 0 for f in free):
        flags.add("degenerate_free_rect")
    for i, a in enumerate(free):
        for j, b in enumerate(free):
            if i != j and _contained(a, b, eps):
                flags.add("redundant_free_rect")
    for f in free:
        if any(_overlap(f, u, eps) for u in used):
            flags.add("free_overlaps_used")

    if policy.check_coverage and container_width > 0 and container_height > 0:
        used_count, free_mask = coverage_grid(
            container_width, container_height, used, free
        )
        if np.any((used_count == 0) & ~free_mask):
            flags.add("coverage_gap")
    return flags


def is_valid(
    container_width: float,
    container_height: float,
    placed: Sequence[Item],
    free_rectangles: Optional[Iterable[Rect]] = None,
    policy: ValidationPolicy | None = None,
) -> bool:
    return not validation_flags(
        container_width, container_height, placed, free_rectangles, policy
    )
