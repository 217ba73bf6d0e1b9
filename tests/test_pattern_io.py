import sys

from cargoload_core import Item, MaxRectsPacker, pattern_io


def test_save_and_load_packing(tmp_path, monkeypatch):
    monkeypatch.setenv("CARGOLOAD_PATTERN_DIR", str(tmp_path))
    packer = MaxRectsPacker(10, 10)
    placed = packer.pack([Item(6, 4, label="a"), Item(11, 5)])
    data = pattern_io.packing_to_dict(
        10, 10, placed, packer.unplaced_items, name="demo"
    )

    pattern_io.save_packing("demo", data)

    assert pattern_io.list_packings() == ["demo"]
    loaded = pattern_io.load_packing("demo")
    assert loaded == data
    width, height, items, unplaced = pattern_io.packing_from_dict(loaded)
    assert (width, height) == (10, 10)
    assert items == placed
    assert unplaced == packer.unplaced_items
    assert not unplaced[0].placed


def test_default_packing_dir_uses_cwd(tmp_path, monkeypatch):
    monkeypatch.delenv("CARGOLOAD_PATTERN_DIR", raising=False)
    monkeypatch.setattr(sys, "argv", ["not_a_real_file"])
    monkeypatch.chdir(tmp_path)

    packing_dir = pattern_io.ensure_packing_dir()

    assert packing_dir == str(tmp_path / "data" / "packings")
