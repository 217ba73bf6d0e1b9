from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from .geometry import total_area
from .models import Item


@dataclass(frozen=True)
class PackingStats:
    """Summary numbers shown next to a packed container."""

    container_area: float
    used_area: float
    waste_percent: float
    placed_count: int
    total_count: int

    @property
    def unplaced_count(self) -> int:
        return self.total_count - self.placed_count


def used_area(placed: Sequence[Item]) -> float:
    return total_area(item.footprint() for item in placed)


def compute_stats(
    container_width: float,
    container_height: float,
    placed: Sequence[Item],
    total_count: Optional[int] = None,
) -> PackingStats:
    container_area = max(0.0, container_width) * max(0.0, container_height)
    used = used_area(placed)
    if container_area <= 0:
        waste = 0.0
    else:
        waste = (container_area - used) / container_area * 100.0
    if total_count is None:
        total_count = len(placed)
    return PackingStats(
        container_area=container_area,
        used_area=used,
        waste_percent=waste,
        placed_count=len(placed),
        total_count=total_count,
    )


def format_summary(stats: PackingStats) -> str:
    return (
        f"{stats.placed_count} of {stats.total_count} items placed, "
        f"waste {stats.waste_percent:.1f}%"
    )


def compute_orientation_mix(placed: Sequence[Item]) -> float:
    if not placed:
        return 0.0
    rotated = sum(1 for item in placed if item.rotated)
    return rotated / len(placed)
