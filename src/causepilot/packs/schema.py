"""
CausePilot Rubric Pack Schemas

Pydantic models for validating rubric pack YAML/JSON files.

A rubric pack replaces the built-in indicator catalog: weights, labels,
which indicators are active, the decision threshold and the
minimum-evidence set. The schema maps to causepilot.models.IndicatorCatalog.

Schema versioning:
- schema_version field tracks breaking changes
- Loaders check major version compatibility
"""
from __future__ import annotations

from typing import Any, Literal, Optional

from pydantic import BaseModel, Field, field_validator, model_validator


# =============================================================================
# Schema Version
# =============================================================================

SCHEMA_VERSION = "1.0.0"


IndicatorCategoryValue = Literal[
    "core_evidence", "directional", "collateral",
    "event", "timeline", "physical", "alternative",
]


# =============================================================================
# Indicator Schema
# =============================================================================

class IndicatorSchema(BaseModel):
    """Schema for one rubric indicator."""
    id: str = Field(..., min_length=1, description="Unique indicator key")
    category: IndicatorCategoryValue = Field(..., description="Rubric grouping")
    label: str = Field(..., min_length=1, description="Human-readable description")
    weight: int = Field(..., gt=0, description="Points applied when present")
    is_positive: bool = Field(..., description="True if presence supports the tested peril")
    description: str = Field("", description="Adjuster guidance")
    is_active: bool = Field(True, description="Inactive indicators are not scored")

    model_config = {
        "extra": "forbid",
    }


# =============================================================================
# Rubric Pack Schema
# =============================================================================

class RubricPackSchema(BaseModel):
    """Complete rubric pack schema."""
    schema_version: str = Field(SCHEMA_VERSION, description="Pack schema version")
    id: str = Field(..., min_length=1, description="Rubric identifier")
    name: str = Field(..., description="Rubric name")
    version: str = Field("1.0", description="Rubric content version")
    description: Optional[str] = Field(None, description="Notes")

    decision_threshold: int = Field(15, gt=0, description="Net-score cutoff")
    indicators: list[IndicatorSchema] = Field(..., min_length=1)
    minimum_evidence_indicators: list[str] = Field(
        ..., min_length=1,
        description="Positive core_evidence ids; one must be present for SUPPORTED"
    )
    perils: dict[str, str] = Field(
        default_factory=dict,
        description="Peril code -> display label"
    )

    @field_validator("indicators")
    @classmethod
    def validate_unique_ids(cls, v: list[IndicatorSchema]) -> list[IndicatorSchema]:
        seen: set[str] = set()
        duplicates = []
        for indicator in v:
            if indicator.id in seen:
                duplicates.append(indicator.id)
            seen.add(indicator.id)
        if duplicates:
            raise ValueError(f"Duplicate indicator IDs: {duplicates}")
        return v

    @model_validator(mode="after")
    def validate_minimum_evidence(self) -> "RubricPackSchema":
        """Minimum-evidence ids must name positive core_evidence indicators."""
        by_id = {i.id: i for i in self.indicators}
        for indicator_id in self.minimum_evidence_indicators:
            indicator = by_id.get(indicator_id)
            if indicator is None:
                raise ValueError(
                    f"minimum_evidence_indicators references unknown indicator '{indicator_id}'"
                )
            if not indicator.is_positive or indicator.category != "core_evidence":
                raise ValueError(
                    f"minimum-evidence indicator '{indicator_id}' must be a positive "
                    f"core_evidence indicator"
                )
        return self

    model_config = {
        "extra": "forbid",  # Reject unknown fields
    }


# =============================================================================
# Validation Helpers
# =============================================================================

def validate_rubric_pack(data: dict[str, Any]) -> RubricPackSchema:
    """
    Validate a rubric pack dictionary against the schema.

    Raises:
        pydantic.ValidationError: If validation fails
    """
    return RubricPackSchema.model_validate(data)


def check_schema_version(data: dict[str, Any]) -> bool:
    """Check that a pack's schema major version matches ours."""
    pack_version = str(data.get("schema_version", SCHEMA_VERSION))
    pack_major = pack_version.split(".")[0]
    current_major = SCHEMA_VERSION.split(".")[0]
    return pack_major == current_major
