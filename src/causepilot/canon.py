"""
Canonical JSON Serialization

Deterministic JSON for hashing causation inputs, results and rubrics:
- Sorted keys
- No whitespace
- Enums by value, dataclasses as dicts, tuples/sets as lists
- UTF-8 encoding

A stored claim analysis carries the hashes of the form it was computed
from and of the result itself, so a later re-run can be checked for
drift against the same rubric.
"""
from __future__ import annotations

import hashlib
import json
from dataclasses import asdict, is_dataclass
from datetime import date, datetime
from enum import Enum
from types import MappingProxyType
from typing import Any


def _default_serializer(obj: Any) -> Any:
    """Serialize the non-JSON types that appear in CausePilot models."""
    if isinstance(obj, datetime):
        return obj.isoformat()
    if isinstance(obj, date):
        return obj.isoformat()
    if isinstance(obj, Enum):
        return obj.value
    if isinstance(obj, MappingProxyType):
        return dict(obj)
    if is_dataclass(obj) and not isinstance(obj, type):
        return asdict(obj)
    if isinstance(obj, (set, frozenset)):
        return sorted(obj, key=str)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def canonical_json(obj: Any) -> str:
    """
    Serialize object to canonical JSON string.

    Example:
        >>> canonical_json({"b": 1, "a": 2})
        '{"a":2,"b":1}'
    """
    return json.dumps(
        obj,
        sort_keys=True,
        separators=(",", ":"),
        default=_default_serializer,
        ensure_ascii=False,
    )


def content_hash(obj: Any) -> str:
    """Hex-encoded SHA-256 of the canonical JSON representation."""
    return hashlib.sha256(canonical_json(obj).encode("utf-8")).hexdigest()


def content_hash_short(obj: Any, length: int = 12) -> str:
    """Truncated content hash for display and log lines."""
    return content_hash(obj)[:length]


# =============================================================================
# Domain Hashes
# =============================================================================

def compute_form_hash(form_data: Any) -> str:
    """Hash of a CausationFormData, independent of indicator key order."""
    return content_hash(form_data.to_dict())


def compute_result_hash(result: Any) -> str:
    """Hash of a CausationResult."""
    return content_hash(result.to_dict())


def compute_catalog_hash(catalog: Any) -> str:
    """
    Hash of the scoring-relevant parts of an IndicatorCatalog.

    Peril labels and descriptions are excluded: they change wording,
    not scores.
    """
    return content_hash({
        "decision_threshold": catalog.decision_threshold,
        "minimum_evidence_indicators": list(catalog.minimum_evidence_indicators),
        "indicators": [
            {
                "id": i.id,
                "category": i.category.value,
                "weight": i.weight,
                "is_positive": i.is_positive,
            }
            for i in catalog.indicators
        ],
    })
