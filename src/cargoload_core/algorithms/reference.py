from __future__ import annotations

from typing import Dict, Sequence

from rectpack import SORT_AREA, MaxRectsBssf, newPacker

from ..models import Item, Rect


def pack_with_rectpack(
    container_width: float,
    container_height: float,
    items: Sequence[Item],
    allow_rotation: bool = True,
) -> Dict[str, Rect]:
    """Pack ``items`` with ``rectpack``'s MaxRects Best-Short-Side-Fit.

    Used as an independent baseline for :class:`MaxRectsPacker`. Items are not
    modified; the result maps item id to the placed footprint. ``rectpack``
    reports positions with the origin in a corner of the bin, which is all
    that matters for area and overlap comparisons.
    """

    if container_width <= 0 or container_height <= 0:
        return {}

    packer = newPacker(
        pack_algo=MaxRectsBssf, sort_algo=SORT_AREA, rotation=allow_rotation
    )
    for index, item in enumerate(items):
        if item.width > 0 and item.height > 0:
            packer.add_rect(item.width, item.height, rid=index)
    packer.add_bin(container_width, container_height)
    packer.pack()

    placements = {}
    for _, x, y, w, h, rid in packer.rect_list():
        placements[items[rid].id] = Rect(x, y, w, h)
    return placements
