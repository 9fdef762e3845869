"""
CausePilot Rubric Packs

Schema validation and loading for rubric packs.

Rubric packs are YAML or JSON files that define an indicator catalog:
weights, labels, active indicators, the decision threshold and the
minimum-evidence set.

Usage:
    from causepilot.packs import load_rubric_pack, RubricPackLoader

    catalog = load_rubric_pack("packs/wind_rubric.yaml")
    result = calculate_causation(form_data, catalog=catalog)
"""
from __future__ import annotations

from .loader import (
    RubricPackLoader,
    load_rubric_pack,
    load_rubric_pack_from_string,
)
from .schema import (
    SCHEMA_VERSION,
    IndicatorSchema,
    RubricPackSchema,
    check_schema_version,
    validate_rubric_pack,
)

__all__ = [
    "SCHEMA_VERSION",
    # Loader
    "RubricPackLoader",
    "load_rubric_pack",
    "load_rubric_pack_from_string",
    # Validation
    "validate_rubric_pack",
    "check_schema_version",
    # Schemas
    "RubricPackSchema",
    "IndicatorSchema",
]
