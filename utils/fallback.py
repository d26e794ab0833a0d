from __future__ import annotations

from typing import Any, Callable, Optional


def is_empty(value: Any) -> bool:
    """True for None, blank strings and empty collections."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple, dict, set)):
        return len(value) == 0
    return False


def first_present(*accessors: Callable[[], Any], default: Optional[Any] = None) -> Any:
    """Evaluate accessors left to right and return the first non-empty result.

    Strings are returned trimmed. Falls back to ``default`` when every accessor
    yields an empty value.
    """
    for accessor in accessors:
        value = accessor()
        if is_empty(value):
            continue
        return value.strip() if isinstance(value, str) else value
    return default
