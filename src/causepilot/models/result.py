"""
CausePilot Result Models

Immutable output of one causation evaluation.

Key components:
- IndicatorBreakdown: Audit trail row proving how each indicator scored
- ScoringResult: Wind-evidence, alternative-cause and net scores
- CausationResult: Decision, rationale, gaps and recommendations
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from .enums import CausationDecision, IndicatorState


def _camel(key: str) -> str:
    head, *rest = key.split("_")
    return head + "".join(part.title() for part in rest)


def _rekey(obj: Any, camel_case: bool) -> Any:
    if not camel_case:
        return obj
    if isinstance(obj, dict):
        return {_camel(k): _rekey(v, camel_case) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_rekey(v, camel_case) for v in obj]
    return obj


# =============================================================================
# Indicator Breakdown
# =============================================================================

@dataclass(frozen=True)
class IndicatorBreakdown:
    """
    Scoring of one catalog indicator.

    applied_weight equals weight only when state is PRESENT; otherwise 0.
    """
    id: str
    label: str
    state: IndicatorState
    weight: int
    applied_weight: int
    is_positive: bool

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "label": self.label,
            "state": self.state.value,
            "weight": self.weight,
            "applied_weight": self.applied_weight,
            "is_positive": self.is_positive,
        }


# =============================================================================
# Scoring
# =============================================================================

@dataclass(frozen=True)
class ScoringResult:
    """Accumulated scores. net_score = wind_evidence_score - alternative_cause_score."""
    wind_evidence_score: int
    alternative_cause_score: int
    net_score: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "wind_evidence_score": self.wind_evidence_score,
            "alternative_cause_score": self.alternative_cause_score,
            "net_score": self.net_score,
        }


# =============================================================================
# Causation Result
# =============================================================================

@dataclass(frozen=True)
class CausationResult:
    """
    Outcome of the but-for causation test.

    All list-valued fields are tuples so a result can be shared freely.
    counter_arguments_summary is None (not an empty string) when no
    carrier blame tactics were identified.
    """
    decision: CausationDecision
    decision_statement: str
    but_for_statement: str
    minimum_evidence_met: bool
    minimum_evidence_details: tuple[str, ...]
    top_supporting_indicators: tuple[IndicatorBreakdown, ...]
    top_opposing_indicators: tuple[IndicatorBreakdown, ...]
    evidence_gaps: tuple[str, ...]
    what_would_change: tuple[str, ...]
    scoring: ScoringResult
    indicator_breakdown: tuple[IndicatorBreakdown, ...]
    baseline_susceptibility: str
    counter_arguments_summary: Optional[str] = None

    @property
    def is_supported(self) -> bool:
        return self.decision == CausationDecision.SUPPORTED

    def breakdown_for(self, indicator_id: str) -> Optional[IndicatorBreakdown]:
        for row in self.indicator_breakdown:
            if row.id == indicator_id:
                return row
        return None

    def to_dict(self, camel_case: bool = False) -> dict[str, Any]:
        """
        Serialize for storage or API responses.

        camel_case=True produces the key style of the stored claim
        analysis records (decisionStatement, netScore, ...).
        """
        result: dict[str, Any] = {
            "decision": self.decision.value,
            "decision_statement": self.decision_statement,
            "but_for_statement": self.but_for_statement,
            "minimum_evidence_met": self.minimum_evidence_met,
            "minimum_evidence_details": list(self.minimum_evidence_details),
            "top_supporting_indicators": [i.to_dict() for i in self.top_supporting_indicators],
            "top_opposing_indicators": [i.to_dict() for i in self.top_opposing_indicators],
            "evidence_gaps": list(self.evidence_gaps),
            "what_would_change": list(self.what_would_change),
            "scoring": self.scoring.to_dict(),
            "indicator_breakdown": [i.to_dict() for i in self.indicator_breakdown],
            "baseline_susceptibility": self.baseline_susceptibility,
        }
        if self.counter_arguments_summary is not None:
            result["counter_arguments_summary"] = self.counter_arguments_summary
        return _rekey(result, camel_case)
