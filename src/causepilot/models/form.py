"""
CausePilot Form Models

Input to the causation evaluator, built fresh for each evaluation.

Stored claim analyses hold this form as camelCase JSON;
``CausationFormData.from_dict`` accepts that shape as well as
snake_case keys so they can be re-scored.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from ..exceptions import InvalidFormDataError
from .enums import IndicatorState


# =============================================================================
# Indicator Value
# =============================================================================

@dataclass(frozen=True)
class IndicatorValue:
    """Observed state of one indicator, with optional adjuster notes."""
    state: IndicatorState = IndicatorState.UNKNOWN
    notes: Optional[str] = None

    @classmethod
    def of(cls, value: Any) -> "IndicatorValue":
        """Build from a state literal, a {"state", "notes"} mapping, or an IndicatorValue."""
        if isinstance(value, IndicatorValue):
            return value
        notes = value.get("notes") if isinstance(value, dict) else None
        return cls(state=IndicatorState.coerce(value), notes=notes)


# =============================================================================
# Causation Form Data
# =============================================================================

_CAMEL_TO_SNAKE = {
    "perilTested": "peril_tested",
    "damageType": "damage_type",
    "damageTypes": "damage_types",
    "eventDate": "event_date",
    "damageNoticedDate": "damage_noticed_date",
    "weatherEvidence": "weather_evidence",
    "roofAge": "roof_age",
    "shingleType": "shingle_type",
    "priorRepairs": "prior_repairs",
    "observationsNotes": "observations_notes",
    "carrierBlameTactics": "carrier_blame_tactics",
    "blameEvidenceChecked": "blame_evidence_checked",
}


@dataclass
class CausationFormData:
    """
    Structured claim-investigation input.

    Attributes:
        indicators: Sparse map of indicator id -> IndicatorValue;
            indicators not listed are treated as UNKNOWN
        peril_tested: Peril code (e.g. "wind", "hail")
        damage_type: Damaged component description
        damage_types: Multi-select damage categories; used when
            damage_type is empty
        event_date: Date/time of the alleged event
        damage_noticed_date: When damage was first noticed
        weather_evidence: Weather/event documentation reference
        roof_age: Roof age in years, free text
        carrier_blame_tactics: Ordered carrier blame tactic ids
        blame_evidence_checked: Tactic id -> evidence items gathered

    Contextual fields (shingle_type, manufacturer, prior_repairs,
    observations_notes) are carried for the record and never scored.
    """
    indicators: dict[str, IndicatorValue] = field(default_factory=dict)
    peril_tested: str = "wind"
    damage_type: str = ""
    damage_types: list[str] = field(default_factory=list)

    # Documentation (absence is reported as an evidence gap)
    event_date: Optional[str] = None
    damage_noticed_date: Optional[str] = None
    weather_evidence: Optional[str] = None
    roof_age: Optional[str] = None

    # Contextual modifiers
    shingle_type: Optional[str] = None
    manufacturer: Optional[str] = None
    prior_repairs: Optional[str] = None
    observations_notes: Optional[str] = None

    # Carrier blame tactics
    carrier_blame_tactics: list[str] = field(default_factory=list)
    blame_evidence_checked: dict[str, list[str]] = field(default_factory=dict)

    def state_of(self, indicator_id: str) -> IndicatorState:
        """State of an indicator; a lookup miss is UNKNOWN."""
        value = self.indicators.get(indicator_id)
        if value is None:
            return IndicatorState.UNKNOWN
        return IndicatorState.coerce(value)

    @property
    def damage_label(self) -> str:
        if self.damage_type:
            return self.damage_type
        return ", ".join(d for d in self.damage_types if d)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CausationFormData":
        """
        Build form data from a JSON-like dict (camelCase or snake_case).

        Indicator entries may be bare state strings or {"state", "notes"}
        mappings. Unknown keys are ignored.

        Raises:
            InvalidFormDataError: if data or its collections have the wrong type
            InvalidIndicatorStateError: for an unrecognised state literal
        """
        if not isinstance(data, dict):
            raise InvalidFormDataError(
                message="Causation form data must be a mapping",
                details={"type": type(data).__name__},
            )

        normalized = {_CAMEL_TO_SNAKE.get(k, k): v for k, v in data.items()}

        raw_indicators = normalized.get("indicators") or {}
        if not isinstance(raw_indicators, dict):
            raise InvalidFormDataError(
                message="'indicators' must be a mapping of indicator id to state",
                details={"type": type(raw_indicators).__name__},
            )
        indicators = {
            str(k): IndicatorValue.of(v) for k, v in raw_indicators.items()
        }

        tactics = normalized.get("carrier_blame_tactics") or []
        damage_types = normalized.get("damage_types") or []
        checked = normalized.get("blame_evidence_checked") or {}
        if not isinstance(tactics, list) or not isinstance(damage_types, list):
            raise InvalidFormDataError(
                message="'carrier_blame_tactics' and 'damage_types' must be lists",
            )
        if not isinstance(checked, dict):
            raise InvalidFormDataError(
                message="'blame_evidence_checked' must be a mapping",
            )

        def _text(key: str) -> Optional[str]:
            value = normalized.get(key)
            if value is None:
                return None
            return str(value)

        return cls(
            indicators=indicators,
            peril_tested=str(normalized.get("peril_tested") or "wind"),
            damage_type=str(normalized.get("damage_type") or ""),
            damage_types=[str(d) for d in damage_types],
            event_date=_text("event_date"),
            damage_noticed_date=_text("damage_noticed_date"),
            weather_evidence=_text("weather_evidence"),
            roof_age=_text("roof_age"),
            shingle_type=_text("shingle_type"),
            manufacturer=_text("manufacturer"),
            prior_repairs=_text("prior_repairs"),
            observations_notes=_text("observations_notes"),
            carrier_blame_tactics=[str(t) for t in tactics],
            blame_evidence_checked={
                str(k): [str(item) for item in (v or [])] for k, v in checked.items()
            },
        )

    def to_dict(self) -> dict[str, Any]:
        """Snake_case dict with indicator states flattened to literals."""
        return {
            "indicators": {
                k: {"state": IndicatorState.coerce(v).value, "notes": getattr(v, "notes", None)}
                for k, v in sorted(self.indicators.items())
            },
            "peril_tested": self.peril_tested,
            "damage_type": self.damage_type,
            "damage_types": list(self.damage_types),
            "event_date": self.event_date,
            "damage_noticed_date": self.damage_noticed_date,
            "weather_evidence": self.weather_evidence,
            "roof_age": self.roof_age,
            "shingle_type": self.shingle_type,
            "manufacturer": self.manufacturer,
            "prior_repairs": self.prior_repairs,
            "observations_notes": self.observations_notes,
            "carrier_blame_tactics": list(self.carrier_blame_tactics),
            "blame_evidence_checked": {
                k: list(v) for k, v in sorted(self.blame_evidence_checked.items())
            },
        }
