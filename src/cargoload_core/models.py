from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import List, Optional

from .units import CM


def new_item_id() -> str:
    """Return an opaque token unique within the process."""
    return uuid.uuid4().hex


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle with its top-left corner at ``(x, y)``."""

    x: CM
    y: CM
    w: CM
    h: CM

    @property
    def right(self) -> CM:
        return self.x + self.w

    @property
    def bottom(self) -> CM:
        return self.y + self.h

    @property
    def area(self) -> float:
        return self.w * self.h


@dataclass
class Item:
    """One piece to be packed.

    ``x``, ``y``, ``placed_width`` and ``placed_height`` stay ``None`` until
    a packer places the item. ``placed_width``/``placed_height`` are swapped
    relative to ``width``/``height`` when the item was rotated.
    """

    width: CM
    height: CM
    label: str = ""
    id: str = field(default_factory=new_item_id)
    color: Optional[str] = None
    x: Optional[CM] = None
    y: Optional[CM] = None
    placed_width: Optional[CM] = None
    placed_height: Optional[CM] = None

    @property
    def area(self) -> float:
        return self.width * self.height

    @property
    def placed(self) -> bool:
        return self.x is not None

    @property
    def rotated(self) -> bool:
        return self.placed and (
            self.placed_width != self.width or self.placed_height != self.height
        )

    def footprint(self) -> Rect:
        if not self.placed:
            raise ValueError(f"item {self.id} has not been placed")
        return Rect(self.x, self.y, self.placed_width, self.placed_height)

    def place(self, rect: Rect) -> None:
        self.x = rect.x
        self.y = rect.y
        self.placed_width = rect.w
        self.placed_height = rect.h

    def reset_placement(self) -> None:
        self.x = None
        self.y = None
        self.placed_width = None
        self.placed_height = None


def make_items(width: CM, height: CM, count: int = 1, label: str = "") -> List[Item]:
    """Create ``count`` independent items of the same size."""
    return [Item(width=width, height=height, label=label) for _ in range(count)]
