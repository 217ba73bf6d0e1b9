"""MaxRects packing of rectangles into a single fixed-size container.

The packer tracks the container as two lists: the items already placed and
the free rectangles still available. Free rectangles are allowed to overlap
each other; every placement splits the free rectangles it touches into up to
four residual strips and then drops any free rectangle that is contained in
another one.
"""

from __future__ import annotations

import logging
import math
from typing import Iterable, List, Optional, Tuple

from ..geometry import contains, overlaps
from ..models import Item, Rect
from ..settings import load_settings

logger = logging.getLogger(__name__)


def split_free_rectangle(free: Rect, used: Rect) -> List[Rect]:
    """Return the parts of ``free`` not covered by ``used``.

    Above/below strips span the full width of ``free`` and left/right strips
    its full height, so the pieces overlap one another.
    """

    pieces = []
    if free.y < used.y < free.y + free.h:
        pieces.append(Rect(free.x, free.y, free.w, used.y - free.y))
    if used.y + used.h < free.y + free.h:
        pieces.append(
            Rect(
                free.x,
                used.y + used.h,
                free.w,
                free.y + free.h - (used.y + used.h),
            )
        )
    if free.x < used.x < free.x + free.w:
        pieces.append(Rect(free.x, free.y, used.x - free.x, free.h))
    if used.x + used.w < free.x + free.w:
        pieces.append(
            Rect(
                used.x + used.w,
                free.y,
                free.x + free.w - (used.x + used.w),
                free.h,
            )
        )
    return [p for p in pieces if p.w > 0 and p.h > 0]


def prune_free_list(rects: Iterable[Rect]) -> List[Rect]:
    """Drop every rectangle contained in another one of ``rects``.

    Of two identical rectangles only the later one is kept. Surviving
    rectangles keep their relative order.
    """

    pruned = list(rects)
    i = 0
    while i < len(pruned):
        removed = False
        j = i + 1
        while j < len(pruned):
            if contains(pruned[j], pruned[i]):
                del pruned[i]
                removed = True
                break
            if contains(pruned[i], pruned[j]):
                del pruned[j]
            else:
                j += 1
        if not removed:
            i += 1
    return pruned


def short_side_fit(free: Rect, width: float, height: float) -> Tuple[float, float]:
    leftover_h = abs(free.w - width)
    leftover_v = abs(free.h - height)
    return min(leftover_h, leftover_v), max(leftover_h, leftover_v)


class MaxRectsPacker:
    """Pack items into one ``width`` x ``height`` container.

    Every call to :meth:`pack` starts from an empty container. Placement uses
    the Best-Short-Side-Fit rule: among all free rectangles and both item
    orientations, the candidate leaving the smallest short-side margin wins,
    the long-side margin breaks ties, and remaining ties go to the first
    candidate found (free-list order, natural orientation first).
    """

    def __init__(
        self, width: float, height: float, allow_rotation: Optional[bool] = None
    ):
        self.bin_width = width
        self.bin_height = height
        if allow_rotation is None:
            allow_rotation = load_settings()["allow_rotation"]
        self.allow_rotation = allow_rotation
        self.used_rectangles: List[Item] = []
        self.unplaced_items: List[Item] = []
        self.free_rectangles: List[Rect] = []
        self.reset()

    def reset(self) -> None:
        self.used_rectangles = []
        self.unplaced_items = []
        if self.bin_width > 0 and self.bin_height > 0:
            self.free_rectangles = [Rect(0, 0, self.bin_width, self.bin_height)]
        else:
            self.free_rectangles = []

    def pack(self, items: Iterable[Item]) -> List[Item]:
        """Place as many ``items`` as fit and return the placed ones.

        Items are tried largest area first; equal areas keep input order.
        The returned list is in placement order. Items that did not fit are
        left unplaced and collected in :attr:`unplaced_items`.
        """

        self.reset()
        if not self.free_rectangles:
            logger.warning(
                "Container %sx%s has no usable area", self.bin_width, self.bin_height
            )

        ordered = sorted(items, key=lambda item: -(item.width * item.height))
        for item in ordered:
            item.reset_placement()

        for item in ordered:
            if item.width <= 0 or item.height <= 0:
                logger.warning(
                    "Skipping item %s with invalid size %sx%s",
                    item.id,
                    item.width,
                    item.height,
                )
                self.unplaced_items.append(item)
                continue
            if self.place_one(item) is None:
                logger.debug(
                    "No room for item %s (%sx%s)", item.id, item.width, item.height
                )
                self.unplaced_items.append(item)

        logger.debug(
            "Packed %d of %d items into %sx%s, %d free rectangles left",
            len(self.used_rectangles),
            len(ordered),
            self.bin_width,
            self.bin_height,
            len(self.free_rectangles),
        )
        return list(self.used_rectangles)

    def _orientations(self, width: float, height: float) -> List[Tuple[float, float]]:
        if self.allow_rotation:
            return [(width, height), (height, width)]
        return [(width, height)]

    def find_position(self, width: float, height: float) -> Optional[Rect]:
        """Best-Short-Side-Fit search without side effects."""

        best_node = None
        best_short = math.inf
        best_long = math.inf
        if width <= 0 or height <= 0:
            return None
        for free in self.free_rectangles:
            for w, h in self._orientations(width, height):
                if free.w < w or free.h < h:
                    continue
                short, long_ = short_side_fit(free, w, h)
                if short < best_short or (short == best_short and long_ < best_long):
                    best_node = Rect(free.x, free.y, w, h)
                    best_short = short
                    best_long = long_
        return best_node

    def place_one(self, item: Item) -> Optional[Rect]:
        node = self.find_position(item.width, item.height)
        if node is None:
            return None
        self.split_free_rectangles(node)
        item.place(node)
        self.used_rectangles.append(item)
        logger.debug(
            "Placed item %s at (%s, %s) as %sx%s",
            item.id,
            node.x,
            node.y,
            node.w,
            node.h,
        )
        return node

    def split_free_rectangles(self, used: Rect) -> None:
        candidates: List[Rect] = []
        for free in self.free_rectangles:
            if overlaps(free, used):
                candidates.extend(split_free_rectangle(free, used))
            else:
                candidates.append(free)
        self.free_rectangles = prune_free_list(candidates)


def pack_items(
    container_width: float,
    container_height: float,
    items: Iterable[Item],
    allow_rotation: Optional[bool] = None,
) -> List[Item]:
    """Pack ``items`` into a fresh container and return the placed subset.

    ``allow_rotation`` falls back to the ``allow_rotation`` setting.
    """
    packer = MaxRectsPacker(container_width, container_height, allow_rotation)
    return packer.pack(items)
