"""
CausePilot Causation Evaluator

Scores a causation form against an indicator catalog and decides whether
the tested peril is supported as the proximate cause.

Core scoring rule:
- PRESENT: apply the full weight to the wind-evidence score (positive
  indicators) or the alternative-cause score (negative indicators)
- ABSENT: apply zero weight, never a penalty
- UNKNOWN: apply zero weight; positive core-evidence indicators are
  reported as evidence gaps

Unknown information is never treated as evidence against causation.

Decision rule (minimum-evidence gate is a hard override):
- gate not met: NOT_SUPPORTED if alternative - wind >= threshold,
  otherwise INDETERMINATE; SUPPORTED is unreachable
- gate met: SUPPORTED if net >= threshold, else NOT_SUPPORTED if
  alternative - wind >= threshold, else INDETERMINATE
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from ..catalog import DEFAULT_CATALOG
from ..models import (
    CausationDecision,
    CausationFormData,
    CausationResult,
    IndicatorBreakdown,
    IndicatorCatalog,
    IndicatorState,
    ScoringResult,
)
from . import narrative

logger = logging.getLogger(__name__)

TOP_INDICATOR_LIMIT = 3
UNKNOWN_SUGGESTION_LIMIT = 2
HIGH_VALUE_WEIGHT = 12


# =============================================================================
# Causation Evaluator
# =============================================================================

@dataclass
class CausationEvaluator:
    """
    Evaluates the but-for causation test.

    The evaluator holds nothing but a read-only catalog, so one instance
    can serve any number of concurrent evaluations.

    Usage:
        evaluator = CausationEvaluator()
        result = evaluator.evaluate(form_data)

        if result.decision == CausationDecision.INDETERMINATE:
            for gap in result.evidence_gaps:
                print(gap)
    """

    catalog: IndicatorCatalog = field(default_factory=lambda: DEFAULT_CATALOG)

    def evaluate(self, form_data: CausationFormData) -> CausationResult:
        """
        Evaluate a causation form.

        Args:
            form_data: Indicator states and contextual claim fields

        Returns:
            CausationResult with decision, scoring, gaps and narrative
        """
        catalog = self.catalog

        breakdown, evidence_gaps, wind_score, alternative_score = self._score_indicators(
            form_data
        )
        evidence_gaps.extend(self._documentation_gaps(form_data))

        # Minimum-evidence gate
        states = {row.id: row.state for row in breakdown}
        core_present = [
            indicator for indicator in catalog.minimum_evidence
            if states.get(indicator.id) == IndicatorState.PRESENT
        ]
        minimum_met = len(core_present) >= 1
        minimum_details = narrative.minimum_evidence_lines(
            minimum_met, catalog.minimum_evidence, core_present
        )

        scoring = ScoringResult(
            wind_evidence_score=wind_score,
            alternative_cause_score=alternative_score,
            net_score=wind_score - alternative_score,
        )

        top_supporting, top_opposing = self._top_indicators(breakdown)

        decision = self._decide(scoring, minimum_met)

        peril = catalog.peril_label(form_data.peril_tested)
        damage = form_data.damage_label

        what_would_change = self._what_would_change(
            decision, minimum_met, breakdown, top_opposing
        )

        result = CausationResult(
            decision=decision,
            decision_statement=narrative.decision_statement(
                decision, peril, len(top_supporting), minimum_met
            ),
            but_for_statement=narrative.but_for_statement(decision, peril, damage),
            minimum_evidence_met=minimum_met,
            minimum_evidence_details=tuple(minimum_details),
            top_supporting_indicators=top_supporting,
            top_opposing_indicators=top_opposing,
            evidence_gaps=tuple(evidence_gaps),
            what_would_change=tuple(what_would_change),
            scoring=scoring,
            indicator_breakdown=tuple(breakdown),
            baseline_susceptibility=narrative.baseline_susceptibility(
                narrative.parse_roof_age(form_data.roof_age), decision, peril
            ),
            counter_arguments_summary=narrative.counter_arguments_summary(
                len(form_data.carrier_blame_tactics)
            ),
        )

        logger.debug(
            "Causation evaluated: decision=%s wind=%d alternative=%d net=%d "
            "minimum_evidence_met=%s gaps=%d",
            decision.value,
            scoring.wind_evidence_score,
            scoring.alternative_cause_score,
            scoring.net_score,
            minimum_met,
            len(result.evidence_gaps),
        )
        return result

    def _score_indicators(
        self,
        form_data: CausationFormData,
    ) -> tuple[list[IndicatorBreakdown], list[str], int, int]:
        """Score every catalog indicator in catalog order."""
        breakdown: list[IndicatorBreakdown] = []
        gaps: list[str] = []
        wind_score = 0
        alternative_score = 0

        for indicator in self.catalog:
            state = form_data.state_of(indicator.id)
            applied_weight = 0

            if state == IndicatorState.PRESENT:
                applied_weight = indicator.weight
                if indicator.is_positive:
                    wind_score += indicator.weight
                else:
                    alternative_score += indicator.weight
            elif state == IndicatorState.UNKNOWN:
                if indicator.is_positive and indicator.is_core_evidence:
                    gaps.append(narrative.gap_line(indicator.label))
            # ABSENT: zero weight, no gap

            breakdown.append(IndicatorBreakdown(
                id=indicator.id,
                label=indicator.label,
                state=state,
                weight=indicator.weight,
                applied_weight=applied_weight,
                is_positive=indicator.is_positive,
            ))

        return breakdown, gaps, wind_score, alternative_score

    def _documentation_gaps(self, form_data: CausationFormData) -> list[str]:
        """General documentation gaps, in fixed order."""
        gaps: list[str] = []
        if narrative.is_missing(form_data.event_date):
            gaps.append(narrative.EVENT_DATE_GAP)
        if narrative.is_missing(form_data.damage_noticed_date):
            gaps.append(narrative.NOTICED_DATE_GAP)
        if narrative.is_missing(form_data.weather_evidence):
            gaps.append(narrative.WEATHER_EVIDENCE_GAP)
        if narrative.is_missing(form_data.roof_age):
            gaps.append(narrative.ROOF_AGE_GAP)
        return gaps

    def _top_indicators(
        self,
        breakdown: list[IndicatorBreakdown],
    ) -> tuple[tuple[IndicatorBreakdown, ...], tuple[IndicatorBreakdown, ...]]:
        """Top present indicators on each side; sorted() is stable so ties keep catalog order."""
        present = [row for row in breakdown if row.state == IndicatorState.PRESENT]
        supporting = sorted(
            (row for row in present if row.is_positive),
            key=lambda row: row.applied_weight,
            reverse=True,
        )
        opposing = sorted(
            (row for row in present if not row.is_positive),
            key=lambda row: row.applied_weight,
            reverse=True,
        )
        return (
            tuple(supporting[:TOP_INDICATOR_LIMIT]),
            tuple(opposing[:TOP_INDICATOR_LIMIT]),
        )

    def _decide(self, scoring: ScoringResult, minimum_met: bool) -> CausationDecision:
        threshold = self.catalog.decision_threshold
        alternative_margin = scoring.alternative_cause_score - scoring.wind_evidence_score

        # SUPPORTED requires the minimum-evidence gate regardless of score
        if minimum_met and scoring.net_score >= threshold:
            return CausationDecision.SUPPORTED
        if alternative_margin >= threshold:
            return CausationDecision.NOT_SUPPORTED
        return CausationDecision.INDETERMINATE

    def _what_would_change(
        self,
        decision: CausationDecision,
        minimum_met: bool,
        breakdown: list[IndicatorBreakdown],
        top_opposing: tuple[IndicatorBreakdown, ...],
    ) -> list[str]:
        """Recommendations that would move or strengthen the decision."""
        lines: list[str] = []

        if decision != CausationDecision.SUPPORTED:
            if not minimum_met:
                lines.append(narrative.CORE_INDICATOR_INSTRUCTION)

            high_value_unknown = [
                row for row in breakdown
                if row.state == IndicatorState.UNKNOWN
                and row.is_positive
                and row.weight >= HIGH_VALUE_WEIGHT
            ][:UNKNOWN_SUGGESTION_LIMIT]
            for row in high_value_unknown:
                indicator = self.catalog.get(row.id)
                if indicator is not None:
                    lines.append(narrative.document_indicator_line(indicator))
        else:
            for row in top_opposing:
                lines.append(narrative.address_indicator_line(row.label))

        return lines


# =============================================================================
# Convenience Functions
# =============================================================================

_DEFAULT_EVALUATOR = CausationEvaluator()


def calculate_causation(
    form_data: CausationFormData,
    catalog: Optional[IndicatorCatalog] = None,
) -> CausationResult:
    """
    Run the but-for causation test.

    Deterministic and side-effect free. Uses the built-in wind/storm
    rubric unless a catalog is given.
    """
    if catalog is None:
        return _DEFAULT_EVALUATOR.evaluate(form_data)
    return CausationEvaluator(catalog=catalog).evaluate(form_data)
