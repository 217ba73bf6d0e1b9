from cargoload_core.geometry import (
    contains,
    inside_container,
    overlaps,
    total_area,
)
from cargoload_core.models import Rect


def test_touching_edges_do_not_overlap():
    assert not overlaps(Rect(0, 0, 10, 10), Rect(10, 0, 10, 10))
    assert not overlaps(Rect(0, 0, 10, 10), Rect(0, 10, 10, 10))


def test_partial_overlap_detected():
    assert overlaps(Rect(0, 0, 10, 10), Rect(9, 9, 10, 10))


def test_contains_includes_identical():
    outer = Rect(0, 0, 10, 10)

    assert contains(outer, Rect(0, 0, 10, 10))
    assert contains(outer, Rect(2, 2, 3, 3))
    assert not contains(outer, Rect(8, 8, 3, 3))


def test_inside_container():
    assert inside_container(Rect(0, 0, 10, 10), 10, 10)
    assert not inside_container(Rect(-1, 0, 5, 5), 10, 10)
    assert not inside_container(Rect(6, 0, 5, 5), 10, 10)


def test_total_area():
    assert total_area([Rect(0, 0, 5, 5), Rect(10, 10, 5, 4)]) == 45
    assert total_area([]) == 0
