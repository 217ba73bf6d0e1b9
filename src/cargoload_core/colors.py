from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from matplotlib import colormaps
from matplotlib.colors import to_hex

from .models import Item
from .settings import load_settings


class LabelPalette:
    """Hand out colours so that items sharing a label share a colour.

    Labels get colours in first-seen order; unlabeled items each take the
    next colour of the cycle.
    """

    def __init__(self, cmap_name: Optional[str] = None):
        if cmap_name is None:
            cmap_name = load_settings()["colormap"]
        cmap = colormaps[cmap_name]
        self.colors: List[str] = [to_hex(cmap(i)) for i in range(cmap.N)]
        self._by_label: Dict[str, str] = {}
        self._next = 0

    def _take(self) -> str:
        color = self.colors[self._next % len(self.colors)]
        self._next += 1
        return color

    def color_for(self, label: str = "") -> str:
        if not label:
            return self._take()
        if label not in self._by_label:
            self._by_label[label] = self._take()
        return self._by_label[label]


def assign_colors(items: Iterable[Item], palette: LabelPalette | None = None) -> None:
    if palette is None:
        palette = LabelPalette()
    for item in items:
        if item.color is None:
            item.color = palette.color_for(item.label)
