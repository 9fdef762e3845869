"""
CausePilot Counter-Argument Builder

Turns the carrier blame tactics identified on a claim into rebuttal
packages: the prepared counter-arguments, how much of the rebutting
evidence has been gathered, and which critical items are still missing.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Mapping, Optional

from ..tactics import BlameTactic, EvidenceNeed, get_tactic


# =============================================================================
# Evidence Completeness
# =============================================================================

@dataclass(frozen=True)
class EvidenceCompleteness:
    """Gathered vs. needed evidence for one tactic."""
    checked: int
    total: int
    critical: int
    critical_checked: int

    @property
    def critical_complete(self) -> bool:
        return self.critical_checked == self.critical

    @property
    def percentage_complete(self) -> float:
        if self.total == 0:
            return 100.0
        return self.checked / self.total * 100

    def to_dict(self) -> dict:
        return {
            "checked": self.checked,
            "total": self.total,
            "critical": self.critical,
            "critical_checked": self.critical_checked,
            "critical_complete": self.critical_complete,
            "percentage_complete": self.percentage_complete,
        }


def evidence_completeness(
    tactic: BlameTactic,
    checked_items: Optional[Iterable[str]] = None,
) -> EvidenceCompleteness:
    """
    Count how much of a tactic's rebutting evidence has been gathered.

    Only items that belong to the tactic's checklist count; duplicates
    and unrelated names are ignored.
    """
    checked = set(checked_items or ())
    needed = {e.item for e in tactic.evidence_needed}
    critical = tactic.critical_items
    return EvidenceCompleteness(
        checked=len(checked & needed),
        total=len(tactic.evidence_needed),
        critical=len(critical),
        critical_checked=len([e for e in critical if e.item in checked]),
    )


# =============================================================================
# Counter-Argument Packages
# =============================================================================

@dataclass(frozen=True)
class CounterArgumentPackage:
    """Rebuttal material for one identified carrier tactic."""
    tactic: BlameTactic
    completeness: EvidenceCompleteness
    missing_critical: tuple[EvidenceNeed, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        return {
            "tactic": self.tactic.to_dict(),
            "completeness": self.completeness.to_dict(),
            "missing_critical": [e.to_dict() for e in self.missing_critical],
        }


def build_counter_arguments(
    tactic_ids: Iterable[str],
    checked_evidence: Optional[Mapping[str, Iterable[str]]] = None,
) -> list[CounterArgumentPackage]:
    """
    Build rebuttal packages for the identified tactics, in the given order.

    Args:
        tactic_ids: Carrier blame tactic IDs
        checked_evidence: Tactic ID -> evidence items already gathered

    Raises:
        UnknownTacticError: if any tactic ID is not in the catalogue
    """
    checked_evidence = checked_evidence or {}
    packages: list[CounterArgumentPackage] = []
    seen: set[str] = set()

    for tactic_id in tactic_ids:
        if tactic_id in seen:
            continue
        seen.add(tactic_id)

        tactic = get_tactic(tactic_id)
        checked = set(checked_evidence.get(tactic_id, ()))
        packages.append(CounterArgumentPackage(
            tactic=tactic,
            completeness=evidence_completeness(tactic, checked),
            missing_critical=tuple(
                e for e in tactic.critical_items if e.item not in checked
            ),
        ))

    return packages


def render_counter_arguments_text(tactic: BlameTactic) -> str:
    """
    Plain-text rebuttal sheet for pasting into correspondence.

    Layout: title, rule line, the carrier's claim in quotes, numbered
    rebuttal points, then bulleted technical citations.
    """
    lines = [
        f"COUNTER-ARGUMENTS: {tactic.label}",
        "=" * 50,
        "",
        "CARRIER CLAIM:",
        f'"{tactic.carrier_claim}"',
        "",
        "REBUTTAL POINTS:",
    ]
    for number, argument in enumerate(tactic.counter_arguments, start=1):
        lines.append(f"{number}. {argument}")
        lines.append("")
    lines.append("TECHNICAL CITATIONS:")
    for citation in tactic.technical_citations:
        lines.append(f"• {citation}")
    return "\n".join(lines) + "\n"
