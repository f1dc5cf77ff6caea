"""
Canonical serialization of state trees.

Used for deterministic output and state digests. Key order is normalized, so
canonical output is not suitable for showing diff order; use the state itself
for that.
"""

import hashlib
import json
from collections.abc import Mapping
from typing import Any

from .actions import Action


def canonicalize(obj: Any) -> Any:
    """
    Convert a state tree (or action) to canonical plain data.

    Rules:
    - mapping keys stringified and sorted
    - tuples converted to lists
    - Actions converted to {"type": ..., **payload}
    """
    if isinstance(obj, Action):
        obj = obj.to_dict()
    if isinstance(obj, Mapping):
        return {str(k): canonicalize(v) for k, v in sorted(obj.items(), key=lambda kv: str(kv[0]))}
    if isinstance(obj, (list, tuple)):
        return [canonicalize(x) for x in obj]
    return obj


def canonical_json_str(obj: Any) -> str:
    """Deterministic compact JSON (sorted keys, no whitespace, UTF-8 kept)."""
    return json.dumps(canonicalize(obj), sort_keys=True, separators=(",", ":"), ensure_ascii=False)


def state_digest(state: Any) -> str:
    """
    SHA-256 hex digest of the canonical form of state.

    Two states with equal content have equal digests regardless of key order.
    """
    return hashlib.sha256(canonical_json_str(state).encode("utf-8")).hexdigest()
