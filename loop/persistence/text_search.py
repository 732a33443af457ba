"""ILIKE helpers for substring search."""


def contains_pattern(query: str) -> str:
    """Build an ILIKE pattern matching `query` anywhere, with wildcards escaped."""
    escaped = query.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"
