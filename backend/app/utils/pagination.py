"""List-size handling for the history and moderator session endpoints."""

from typing import Optional


def parse_limit(raw: Optional[str], default: int, maximum: int) -> int:
    """Parse a ``?limit=`` value, falling back to `default` when it is missing,
    not an integer, or not positive. Values above `maximum` are capped."""
    try:
        value = int(str(raw).strip())
    except (TypeError, ValueError):
        return default
    if value <= 0:
        return default
    return min(value, maximum)
