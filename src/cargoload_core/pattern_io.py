from __future__ import annotations

import json
import os
import sys
from pathlib import Path
from typing import Any, Dict, List, Sequence, Tuple

from .models import Item


def get_packing_dir() -> str:
    env_dir = os.getenv("CARGOLOAD_PATTERN_DIR")
    if env_dir:
        return str(Path(env_dir).expanduser().resolve())
    argv_path = Path(sys.argv[0]) if sys.argv[0] else None
    if argv_path and argv_path.is_file():
        base_dir = argv_path.parent
    else:
        base_dir = Path.cwd()
    default_dir = base_dir / "data" / "packings"
    return str(default_dir.resolve())


def ensure_packing_dir() -> str:
    path = Path(get_packing_dir())
    path.mkdir(parents=True, exist_ok=True)
    return str(path)


def _packing_path(name: str) -> str:
    return str(Path(get_packing_dir()) / f"{name}.json")


def list_packings() -> list[str]:
    """Return available packing names."""
    path = ensure_packing_dir()
    files = [f[:-5] for f in os.listdir(path) if f.endswith(".json")]
    files.sort()
    return files


def _item_to_dict(item: Item) -> Dict[str, Any]:
    data = {
        "id": item.id,
        "label": item.label,
        "width": item.width,
        "height": item.height,
        "color": item.color,
    }
    if item.placed:
        data.update(
            {
                "x": item.x,
                "y": item.y,
                "placedWidth": item.placed_width,
                "placedHeight": item.placed_height,
            }
        )
    return data


def _item_from_dict(data: Dict[str, Any]) -> Item:
    item = Item(
        width=data["width"],
        height=data["height"],
        label=data.get("label", ""),
        id=str(data["id"]),
        color=data.get("color"),
    )
    if "x" in data:
        item.x = data["x"]
        item.y = data["y"]
        item.placed_width = data["placedWidth"]
        item.placed_height = data["placedHeight"]
    return item


def packing_to_dict(
    container_width: float,
    container_height: float,
    placed: Sequence[Item],
    unplaced: Sequence[Item] = (),
    name: str = "",
) -> Dict[str, Any]:
    """Collect a packing result as a JSON-serialisable dict."""
    return {
        "name": name,
        "container": {"width": container_width, "height": container_height},
        "items": [_item_to_dict(item) for item in placed],
        "unplaced": [_item_to_dict(item) for item in unplaced],
    }


def packing_from_dict(
    data: Dict[str, Any],
) -> Tuple[float, float, List[Item], List[Item]]:
    container = data.get("container", {})
    placed = [_item_from_dict(d) for d in data.get("items", [])]
    unplaced = [_item_from_dict(d) for d in data.get("unplaced", [])]
    return container.get("width", 0), container.get("height", 0), placed, unplaced


def load_packing(name: str) -> Any:
    with open(_packing_path(name), "r", encoding="utf-8") as f:
        return json.load(f)


def save_packing(name: str, payload: Any) -> None:
    ensure_packing_dir()
    with open(_packing_path(name), "w", encoding="utf-8") as f:
        json.dump(payload, f, ensure_ascii=False, indent=2)


__all__ = [
    "get_packing_dir",
    "ensure_packing_dir",
    "list_packings",
    "packing_to_dict",
    "packing_from_dict",
    "load_packing",
    "save_packing",
]
