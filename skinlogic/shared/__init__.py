"""SkinLogic Shared Utilities"""

from .hashing import (
    canonicalize,
    fingerprint,
    verify_fingerprint,
)
from .ordered_set import OrderedSet
from .text import norm, equals_any, differs_from, contains_any, has_any, has_substring

__all__ = [
    "canonicalize",
    "fingerprint",
    "verify_fingerprint",
    "OrderedSet",
    "norm",
    "equals_any",
    "differs_from",
    "contains_any",
    "has_any",
    "has_substring",
]
