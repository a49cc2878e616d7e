"""
Case-insensitive helpers for questionnaire bucket values.

Clients send buckets in mixed casing ("High" / "high"), so every bucket
comparison in the engine goes through these helpers. A missing value
(None or "") never matches anything.
"""

from enum import Enum
from typing import Iterable, Optional


def norm(value: Optional[object]) -> str:
    if value is None:
        return ""
    if isinstance(value, Enum):
        value = value.value
    return str(value).strip().casefold()


def equals_any(value: Optional[object], *options: str) -> bool:
    """True if value equals one of options, ignoring case."""
    v = norm(value)
    if not v:
        return False
    return v in {norm(o) for o in options}


def differs_from(value: Optional[object], *options: str) -> bool:
    """True if value is present and equals none of options, ignoring case."""
    v = norm(value)
    if not v:
        return False
    return v not in {norm(o) for o in options}


def has_substring(value: Optional[object], needle: str) -> bool:
    """Case-insensitive substring test on a single bucket value."""
    v = norm(value)
    return bool(v) and norm(needle) in v


def has_any(items: Optional[Iterable[str]], *options: str) -> bool:
    """True if a multi-select list contains one of options, ignoring case."""
    if not items:
        return False
    wanted = {norm(o) for o in options}
    return any(norm(item) in wanted for item in items)


def contains_any(items: Optional[Iterable[str]], *needles: str) -> bool:
    """True if any list entry contains one of needles as a substring, ignoring case."""
    if not items:
        return False
    lowered = [norm(n) for n in needles]
    return any(n in norm(item) for item in items for n in lowered)
