from cargoload_core import Item
from cargoload_core.colors import LabelPalette, assign_colors


def test_same_label_same_color():
    palette = LabelPalette()

    a = palette.color_for("crate")
    b = palette.color_for("box")

    assert palette.color_for("crate") == a
    assert a != b
    assert a.startswith("#")


def test_unlabeled_items_cycle_colors():
    palette = LabelPalette()

    assert palette.color_for() != palette.color_for()


def test_assign_colors_keeps_existing():
    items = [Item(1, 1, label="x"), Item(1, 1, label="x"), Item(1, 1, color="#000000")]

    assign_colors(items)

    assert items[0].color == items[1].color
    assert items[2].color == "#000000"
