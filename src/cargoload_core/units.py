CM = float


def parse_float(value: str) -> float:
    text = value.strip()
    if not text:
        raise ValueError("empty input")
    text = text.replace(",", ".")
    return float(text)


def parse_count(value: str) -> int:
    text = value.strip()
    if not text:
        raise ValueError("empty input")
    count = int(text)
    if count <= 0:
        raise ValueError(f"count must be positive, got {count}")
    return count


def format_float(value: float, ndigits: int = 2) -> str:
    return f"{value:.{ndigits}f}"


def format_dim(value: float) -> str:
    """Format a dimension without a trailing ``.0`` for whole numbers."""
    if float(value).is_integer():
        return str(int(value))
    return format_float(value).rstrip("0").rstrip(".")
