"""
SkinLogic Canonical Hashing
Fingerprints for questionnaires, logs and computed profiles.

Engine output is a pure function of the questionnaire, so equal
questionnaire fingerprints must always map to equal profile fingerprints.
"""

import hashlib
import json
from typing import Any, Iterable

from pydantic import BaseModel

# Photos and wall-clock fields never feed the engine
VOLATILE_FIELDS = frozenset([
    "scan_images",
    "images",
    "photo_url",
    "timestamp",
    "created_at",
    "updated_at",
])


def _strip(value: Any, exclude: frozenset) -> Any:
    if isinstance(value, dict):
        return {k: _strip(v, exclude) for k, v in value.items() if k not in exclude}
    if isinstance(value, list):
        return [_strip(v, exclude) for v in value]
    return value


def canonicalize(obj: Any, exclude: Iterable[str] = VOLATILE_FIELDS) -> str:
    """
    Sorted-key compact JSON of a model (or plain JSON data) with the
    `exclude` keys removed at every nesting level.
    """
    if isinstance(obj, BaseModel):
        obj = obj.model_dump(mode="json")
    return json.dumps(
        _strip(obj, frozenset(exclude)),
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=True,
    )


def fingerprint(obj: Any, exclude: Iterable[str] = VOLATILE_FIELDS) -> str:
    """Returns: "sha256:<64-char-hex>" """
    digest = hashlib.sha256(canonicalize(obj, exclude).encode("utf-8")).hexdigest()
    return f"sha256:{digest}"


def verify_fingerprint(obj: Any, expected: str, exclude: Iterable[str] = VOLATILE_FIELDS) -> bool:
    return fingerprint(obj, exclude) == expected
