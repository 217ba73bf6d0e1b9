from __future__ import annotations

import logging
import re
from typing import Iterable, List

from .models import Item, make_items
from .units import parse_count, parse_float

logger = logging.getLogger(__name__)

_NUMBER = r"\d+(?:[.,]\d+)?"
_SEP = r"\s*[xX×*]\s*"
ITEM_SPEC_RE = re.compile(
    rf"^\s*(?P<width>{_NUMBER}){_SEP}(?P<height>{_NUMBER})"
    rf"(?:{_SEP}(?P<count>\d+))?"
    r"(?:\s+(?P<label>.*?))?\s*$"
)


def parse_item_spec(text: str) -> List[Item]:
    """Parse ``"WxH"``, ``"WxHxN"`` or either followed by a label.

    ``N`` is the number of copies. Decimal commas are accepted. Raises
    :class:`ValueError` for malformed text or non-positive sizes.
    """

    match = ITEM_SPEC_RE.match(text)
    if match is None:
        raise ValueError(f"cannot parse item spec {text!r}")
    width = parse_float(match.group("width"))
    height = parse_float(match.group("height"))
    if width <= 0 or height <= 0:
        raise ValueError(f"item size must be positive, got {width}x{height}")
    count = 1
    if match.group("count") is not None:
        count = parse_count(match.group("count"))
    label = match.group("label") or ""
    return make_items(width, height, count=count, label=label)


def parse_item_specs(lines: Iterable[str]) -> List[Item]:
    """Parse one item spec per line, skipping blanks and ``#`` comments."""

    items: List[Item] = []
    for lineno, raw_line in enumerate(lines, start=1):
        line = raw_line.split("#", 1)[0].strip()
        if not line:
            continue
        try:
            items.extend(parse_item_spec(line))
        except ValueError as exc:
            raise ValueError(f"line {lineno}: {exc}") from exc
    logger.debug("Parsed %d items", len(items))
    return items
