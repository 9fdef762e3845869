"""
CausePilot Narrative

Pure text-formatting functions for causation results.

Scoring never depends on anything here. Statements use hedged language
("suggests", "LIKELY"); they are pasted into carrier correspondence.
"""
from __future__ import annotations

import re
from typing import Iterable, Optional

from ..models import CausationDecision, Indicator


_LEADING_INT = re.compile(r"\s*([+-]?)0*(\d+)")

# Longer digit runs (after leading zeros) parse as 0, never reaching int()
MAX_ROOF_AGE_DIGITS = 4

GAP_SUFFIX = "not observed, not documented, or not evaluated"

MINIMUM_EVIDENCE_HEADER = "At least ONE of the following must be present to support causation:"

CORE_INDICATOR_INSTRUCTION = (
    "Document at least ONE core evidence indicator (directional pattern, displaced "
    "materials, collateral damage, or storm + localized damage)"
)

EVENT_DATE_GAP = "Date/time of alleged event not specified"
NOTICED_DATE_GAP = "Date damage was first noticed not specified"
WEATHER_EVIDENCE_GAP = "Weather/event documentation not provided"
ROOF_AGE_GAP = "Roof age unknown"


# =============================================================================
# Label Resolution
# =============================================================================

def resolve_peril_label(peril_label: str) -> str:
    """Peril label as used inside sentences."""
    return peril_label.lower()


def resolve_damage_label(damage_label: str) -> str:
    """Damage description as used inside sentences."""
    return damage_label.lower() if damage_label else "reported damage"


# =============================================================================
# Lenient Input Parsing
# =============================================================================

def parse_roof_age(roof_age: Optional[str]) -> int:
    """
    Parse roof age in years from free text.

    Reads the leading integer ("12", "12 years", "7.5" -> 7). Anything
    unparseable, including None, "" and digit runs longer than
    MAX_ROOF_AGE_DIGITS, is 0, which suppresses the baseline
    susceptibility statement. Roof age is never scored.
    """
    if not roof_age:
        return 0
    match = _LEADING_INT.match(roof_age)
    if not match:
        return 0
    sign, digits = match.groups()
    if len(digits) > MAX_ROOF_AGE_DIGITS:
        return 0
    years = int(digits)
    return -years if sign == "-" else years


def is_missing(value: Optional[str]) -> bool:
    """None and "" are missing; any other text counts as supplied."""
    return not value


# =============================================================================
# Line Templates
# =============================================================================

def gap_line(label: str) -> str:
    return f"{label} — {GAP_SUFFIX}"


def document_indicator_line(indicator: Indicator) -> str:
    return f'Document "{indicator.label}" (+{indicator.weight} points if present)'


def address_indicator_line(label: str) -> str:
    return f'Address "{label}" with counter-evidence to strengthen position'


def minimum_evidence_lines(
    met: bool,
    required: Iterable[Indicator],
    present: Iterable[Indicator],
) -> list[str]:
    """
    Lines explaining the minimum-evidence gate.

    Not met: the header followed by one bullet per qualifying indicator.
    Met: one checkmark line per qualifying indicator that is present.
    """
    if not met:
        return [MINIMUM_EVIDENCE_HEADER] + [f"• {i.label}" for i in required]
    return [f"✓ {i.label}" for i in present]


# =============================================================================
# Decision Statements
# =============================================================================

def but_for_statement(decision: CausationDecision, peril: str, damage: str) -> str:
    """The "but for X, would Y have happened" sentence."""
    peril = resolve_peril_label(peril)
    damage = resolve_damage_label(damage)

    if decision == CausationDecision.SUPPORTED:
        return (
            f"If not for the {peril} event, the {damage} would LIKELY NOT have occurred. "
            f"The documented evidence is consistent with {peril}-induced damage."
        )
    if decision == CausationDecision.NOT_SUPPORTED:
        return (
            f"The evidence is INSUFFICIENT to conclude that {peril} was the proximate "
            f"cause of the {damage}."
        )
    return (
        f"Insufficient evidence exists to conclusively determine whether the {damage} "
        f"would have occurred without the {peril} event."
    )


def decision_statement(
    decision: CausationDecision,
    peril: str,
    supporting_count: int,
    minimum_evidence_met: bool,
) -> str:
    """Summary of the decision; the indeterminate case depends on the gate."""
    peril = resolve_peril_label(peril)

    if decision == CausationDecision.SUPPORTED:
        return (
            f"The available evidence suggests {peril} as the proximate cause. "
            f"{supporting_count} key indicators support this conclusion. "
            "Pre-existing conditions, if present, do not exclude coverage—the covered "
            "peril appears to be the triggering event."
        )
    if decision == CausationDecision.NOT_SUPPORTED:
        return (
            "Available evidence suggests alternative causation factors. However, if the "
            "carrier is relying on competing causes (installation, maintenance, "
            "manufacturing), specific counter-arguments and evidence requirements "
            "should be reviewed."
        )
    if minimum_evidence_met:
        return (
            "Additional documentation is recommended to strengthen the causation "
            "argument. Focus on filling the identified evidence gaps."
        )
    return (
        "Minimum evidence requirements are not met. At least one core indicator must "
        "be documented before causation can be supported."
    )


# =============================================================================
# Contextual Statements
# =============================================================================

def baseline_susceptibility(
    roof_age_years: int,
    decision: CausationDecision,
    peril: str,
) -> str:
    """
    Contextual statement on expected deterioration for the roof's age.

    Returns "" when the age is unknown (0 or less).
    """
    if roof_age_years <= 0:
        return ""

    if roof_age_years < 5:
        return (
            f"Given the roof's relatively young age ({roof_age_years} years), minimal "
            "deterioration would be expected absent the covered peril."
        )
    if roof_age_years < 15:
        return (
            f"Given the roof's age ({roof_age_years} years) and material, some seal strip "
            "degradation per ARMA TB-201 would be expected; however, this increases "
            "susceptibility to wind damage rather than causing it independently."
        )

    framing = (
        "observed damage pattern is"
        if decision == CausationDecision.SUPPORTED
        else "question is whether damage is"
    )
    return (
        f"Given the roof's age ({roof_age_years} years), deterioration and reduced wind "
        f"resistance would be expected absent the peril; however, the {framing} "
        f"consistent with {resolve_peril_label(peril)}-induced failure versus normal aging."
    )


def counter_arguments_summary(tactic_count: int) -> Optional[str]:
    """One-line summary of identified carrier tactics, or None when there are none."""
    if tactic_count <= 0:
        return None
    return (
        f"Carrier blame-shifting tactics identified: {tactic_count} defensive "
        "arguments prepared."
    )
