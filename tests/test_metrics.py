import pytest

from cargoload_core import Item, pack_items
from cargoload_core.metrics import (
    compute_orientation_mix,
    compute_stats,
    format_summary,
)
from cargoload_core.models import Rect


def _placed(x, y, w, h):
    item = Item(w, h)
    item.place(Rect(x, y, w, h))
    return item


def test_stats_for_two_items():
    items = [Item(60, 40), Item(60, 40)]
    placed = pack_items(100, 100, items)

    stats = compute_stats(100, 100, placed, total_count=len(items))

    assert stats.used_area == 4800
    assert stats.waste_percent == pytest.approx(52.0)
    assert stats.placed_count == 2
    assert stats.unplaced_count == 0
    assert format_summary(stats) == "2 of 2 items placed, waste 52.0%"
    assert compute_orientation_mix(placed) == pytest.approx(0.5)


def test_stats_for_full_container():
    placed = pack_items(10, 10, [Item(10, 10)])

    stats = compute_stats(10, 10, placed)

    assert stats.waste_percent == 0.0


def test_stats_count_unplaced_items():
    items = [Item(11, 5), Item(5, 5)]
    placed = pack_items(10, 10, items)

    stats = compute_stats(10, 10, placed, total_count=len(items))

    assert stats.unplaced_count == 1
    assert format_summary(stats) == "1 of 2 items placed, waste 75.0%"


def test_stats_for_empty_container():
    stats = compute_stats(0, 10, [])

    assert stats.container_area == 0
    assert stats.waste_percent == 0.0


def test_orientation_mix_counts_rotated_items():
    placed = [_placed(0, 0, 100, 50), _placed(100, 0, 100, 50)]
    turned = Item(50, 100)
    turned.place(Rect(0, 50, 100, 50))

    assert compute_orientation_mix(placed) == 0.0
    assert compute_orientation_mix(placed + [turned]) == pytest.approx(1 / 3)
    assert compute_orientation_mix([]) == 0.0
