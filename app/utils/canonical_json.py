"""
Deterministic JSON serialization utilities.

Used to fingerprint search parameters so equivalent requests share a cache key.
"""

import json
from typing import Any, Mapping


def strip_empty(values: Mapping[str, Any]) -> dict:
    """Drop keys whose value is None or an empty string."""
    return {key: value for key, value in values.items() if value is not None and value != ""}


def canonical_dumps(value: Any) -> str:
    """Return deterministic JSON with sorted keys and tight separators."""
    return json.dumps(
        value,
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=True,
    )
