from .maxrects import (
    MaxRectsPacker,
    pack_items,
    prune_free_list,
    short_side_fit,
    split_free_rectangle,
)
from .reference import pack_with_rectpack

__all__ = [
    "MaxRectsPacker",
    "pack_items",
    "prune_free_list",
    "short_side_fit",
    "split_free_rectangle",
    "pack_with_rectpack",
]
