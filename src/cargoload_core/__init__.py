"""MaxRects rectangle packing with statistics, validation and drawing helpers."""

from .algorithms import MaxRectsPacker, pack_items, pack_with_rectpack
from .inputs import parse_item_spec, parse_item_specs
from .metrics import PackingStats, compute_stats, format_summary
from .models import Item, Rect, make_items
from .settings import load_settings
from .validation import is_valid, validation_flags

__all__ = [
    "Item",
    "Rect",
    "make_items",
    "MaxRectsPacker",
    "pack_items",
    "pack_with_rectpack",
    "PackingStats",
    "compute_stats",
    "format_summary",
    "parse_item_spec",
    "parse_item_specs",
    "load_settings",
    "is_valid",
    "validation_flags",
]
