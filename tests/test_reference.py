import random

from cargoload_core import Item, pack_items
from cargoload_core.algorithms import pack_with_rectpack
from cargoload_core.geometry import inside_container, overlaps


def _items(seed):
    rng = random.Random(seed)
    return [Item(rng.randint(5, 40), rng.randint(5, 40)) for _ in range(40)]


def test_rectpack_baseline_is_valid():
    items = _items(5)

    placements = pack_with_rectpack(120, 90, items)

    rects = list(placements.values())
    assert rects
    assert all(inside_container(r, 120, 90) for r in rects)
    for i, a in enumerate(rects):
        for b in rects[i + 1 :]:
            assert not overlaps(a, b)
    assert not any(item.placed for item in items)


def test_rectpack_baseline_and_packer_agree_on_exact_fit():
    items = [Item(10, 10)]

    assert len(pack_with_rectpack(10, 10, items)) == 1
    assert pack_items(10, 10, items) == items


def test_rectpack_baseline_empty_container():
    assert pack_with_rectpack(0, 10, [Item(1, 1)]) == {}
