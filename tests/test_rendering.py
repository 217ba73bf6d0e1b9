import matplotlib

matplotlib.use("Agg")

from matplotlib.figure import Figure  # noqa: E402

from cargoload_core import Item, pack_items  # noqa: E402
from cargoload_core.rendering import draw_packing, item_caption, render_packing  # noqa: E402


def test_render_packing_writes_file(tmp_path):
    items = [Item(60, 40, label="crate"), Item(60, 40)]
    placed = pack_items(100, 100, items)
    path = tmp_path / "packing.png"

    fig = render_packing(100, 100, placed, total_count=2, path=str(path))

    assert path.exists()
    ax = fig.axes[0]
    assert len(ax.patches) == 3
    assert len(ax.texts) == 2
    assert ax.get_title() == "2 of 2 items placed, waste 52.0%"


def test_draw_packing_skips_labels_for_small_items():
    fig = Figure()
    ax = fig.subplots()
    placed = pack_items(100, 100, [Item(2, 2)])

    draw_packing(ax, 100, 100, placed)

    assert len(ax.patches) == 2
    assert len(ax.texts) == 0
    assert ax.get_ylim() == (100, 0)


def test_item_caption():
    (item,) = pack_items(100, 100, [Item(60, 40, label="crate")])

    assert item_caption(item) == "crate\n60x40cm"
