"""Response schemas for the API."""

from typing import Optional

from pydantic import BaseModel


class IndicatorBreakdownOut(BaseModel):
    """How one indicator scored."""
    id: str
    label: str
    state: str  # present|absent|unknown
    weight: int
    applied_weight: int
    is_positive: bool


class ScoringOut(BaseModel):
    wind_evidence_score: int
    alternative_cause_score: int
    net_score: int


class CausationResponse(BaseModel):
    """Result of the but-for causation test."""
    decision: str  # supported|not_supported|indeterminate
    decision_statement: str
    but_for_statement: str
    minimum_evidence_met: bool
    minimum_evidence_details: list[str]
    top_supporting_indicators: list[IndicatorBreakdownOut]
    top_opposing_indicators: list[IndicatorBreakdownOut]
    evidence_gaps: list[str]
    what_would_change: list[str]
    scoring: ScoringOut
    indicator_breakdown: list[IndicatorBreakdownOut]
    baseline_susceptibility: str
    counter_arguments_summary: Optional[str] = None

    # Provenance
    catalog_id: str
    catalog_hash: str
    input_hash: str
    result_hash: str
    evaluated_at: str
    engine_version: str


class IndicatorOut(BaseModel):
    id: str
    category: str
    label: str
    weight: int
    is_positive: bool
    description: str
    minimum_evidence: bool


class CatalogResponse(BaseModel):
    catalog_id: str
    name: str
    version: str
    catalog_hash: str
    decision_threshold: int
    minimum_evidence_indicators: list[str]
    indicators: list[IndicatorOut]


class PerilOut(BaseModel):
    value: str
    label: str


class EvidenceNeedOut(BaseModel):
    item: str
    description: str
    critical: bool
    photo_guidance: Optional[str] = None


class TacticOut(BaseModel):
    id: str
    type: str
    type_label: str
    label: str
    carrier_claim: str
    counter_arguments: list[str]
    evidence_needed: list[EvidenceNeedOut]
    technical_citations: list[str]


class CompletenessOut(BaseModel):
    checked: int
    total: int
    critical: int
    critical_checked: int
    critical_complete: bool
    percentage_complete: float


class CounterArgumentPackageOut(BaseModel):
    tactic: TacticOut
    completeness: CompletenessOut
    missing_critical: list[EvidenceNeedOut]
    rebuttal_text: str
