from __future__ import annotations

from typing import Optional, Sequence

import matplotlib.pyplot as plt
import numpy as np

from .colors import LabelPalette, assign_colors
from .metrics import compute_stats, format_summary
from .models import Item
from .settings import load_settings
from .units import format_dim


def item_caption(item: Item, unit: str = "cm") -> str:
    size = f"{format_dim(item.placed_width)}x{format_dim(item.placed_height)}{unit}"
    if item.label:
        return f"{item.label}\n{size}"
    return size


def draw_packing(
    ax,
    container_width: float,
    container_height: float,
    placed: Sequence[Item],
    *,
    grid_step: Optional[float] = None,
    tick_step: Optional[float] = None,
    unit: Optional[str] = None,
    min_label_fraction: float = 0.05,
    palette: Optional[LabelPalette] = None,
) -> None:
    """Draw the container and its placed items on ``ax``.

    The origin is the top-left corner, so the y axis is inverted. Rulers sit
    on the top and left edges: major ticks with numbers every ``grid_step``,
    minor ticks every ``tick_step``. Unset steps and unit come from the
    settings file.
    """

    settings = load_settings()
    if grid_step is None:
        grid_step = settings["grid_step"]
    if tick_step is None:
        tick_step = settings["tick_step"]
    if unit is None:
        unit = settings["unit"]

    assign_colors(placed, palette)
    ax.clear()
    ax.set_aspect("equal")
    ax.add_patch(
        plt.Rectangle(
            (0, 0), container_width, container_height, fill=False, edgecolor="black"
        )
    )

    ax.set_xticks(np.arange(0, container_width + 1e-9, grid_step))
    ax.set_yticks(np.arange(0, container_height + 1e-9, grid_step))
    ax.set_xticks(np.arange(0, container_width + 1e-9, tick_step), minor=True)
    ax.set_yticks(np.arange(0, container_height + 1e-9, tick_step), minor=True)
    ax.grid(which="major", color="gray", alpha=0.2)
    ax.xaxis.tick_top()
    ax.xaxis.set_label_position("top")
    ax.set_xlabel(unit)
    ax.set_ylabel(unit)
    ax.set_xlim(0, container_width)
    ax.set_ylim(container_height, 0)

    for item in placed:
        ax.add_patch(
            plt.Rectangle(
                (item.x, item.y),
                item.placed_width,
                item.placed_height,
                fill=True,
                facecolor=item.color,
                edgecolor="white",
                alpha=0.8,
            )
        )
        if (
            item.placed_width >= container_width * min_label_fraction
            and item.placed_height >= container_height * min_label_fraction
        ):
            ax.text(
                item.x + item.placed_width / 2,
                item.y + item.placed_height / 2,
                item_caption(item, unit),
                ha="center",
                va="center",
                fontsize=8,
                color="white",
            )


def render_packing(
    container_width: float,
    container_height: float,
    placed: Sequence[Item],
    total_count: Optional[int] = None,
    path: Optional[str] = None,
    **draw_kwargs,
):
    """Build a figure showing the packing; save it to ``path`` when given."""

    fig = plt.Figure(figsize=(8, 8 * container_height / max(container_width, 1e-9)))
    ax = fig.subplots()
    draw_packing(ax, container_width, container_height, placed, **draw_kwargs)
    stats = compute_stats(container_width, container_height, placed, total_count)
    ax.set_title(format_summary(stats), fontsize=10)
    fig.tight_layout()
    if path is not None:
        fig.savefig(path)
    return fig
