"""Request schemas for the API."""

from typing import Literal, Optional

from pydantic import BaseModel, Field


class IndicatorInput(BaseModel):
    """Observed state of one indicator."""
    state: Literal["present", "absent", "unknown"] = Field(
        default="unknown", description="present|absent|unknown"
    )
    notes: Optional[str] = Field(default=None, description="Adjuster notes")


class CausationRequest(BaseModel):
    """Causation form to evaluate."""
    indicators: dict[str, IndicatorInput] = Field(
        default_factory=dict,
        description="Indicator id -> state; omitted indicators are unknown",
    )
    peril_tested: str = Field(default="wind", description="Peril code, e.g. 'wind', 'hail'")
    damage_type: str = Field(default="", description="Damaged component")
    damage_types: list[str] = Field(default_factory=list, description="Damage categories")

    event_date: Optional[str] = None
    damage_noticed_date: Optional[str] = None
    weather_evidence: Optional[str] = None
    roof_age: Optional[str] = Field(default=None, description="Roof age in years (free text)")

    shingle_type: Optional[str] = None
    manufacturer: Optional[str] = None
    prior_repairs: Optional[str] = None
    observations_notes: Optional[str] = None

    carrier_blame_tactics: list[str] = Field(default_factory=list)
    blame_evidence_checked: dict[str, list[str]] = Field(default_factory=dict)

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "peril_tested": "wind",
                    "damage_type": "Missing shingles",
                    "event_date": "2024-06-15",
                    "roof_age": "12",
                    "indicators": {
                        "directional_pattern": {"state": "present"},
                        "lifted_tabs": {"state": "present"},
                        "uniform_wear_all_slopes": {"state": "absent"},
                    },
                    "carrier_blame_tactics": ["improper_nailing"],
                }
            ]
        }
    }


class CounterArgumentsRequest(BaseModel):
    """Tactics identified on a claim and the evidence already gathered."""
    tactic_ids: list[str] = Field(..., description="Carrier blame tactic IDs")
    checked_evidence: dict[str, list[str]] = Field(
        default_factory=dict,
        description="Tactic id -> evidence item names already gathered",
    )
