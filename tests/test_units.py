import pytest

from cargoload_core.units import format_dim, parse_count, parse_float


def test_parse_float_accepts_comma():
    assert parse_float("12,5") == 12.5


def test_parse_float_strips_whitespace():
    assert parse_float("  10.0 ") == 10.0


def test_parse_float_rejects_empty():
    with pytest.raises(ValueError):
        parse_float("")


def test_parse_count_rejects_zero():
    with pytest.raises(ValueError):
        parse_count("0")


def test_format_dim_drops_trailing_zero():
    assert format_dim(60.0) == "60"
    assert format_dim(12.5) == "12.5"
