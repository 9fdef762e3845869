"""
Carrier Blame Tactics

Alternative-cause arguments carriers raise against storm claims, with
prepared counter-arguments, the evidence that defeats each one, and the
technical citations behind them.

Tactics are grouped by TacticType (installation, maintenance,
manufacturing, manipulation). BLAME_TACTICS order is the display order.
"""
from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Optional

from .exceptions import UnknownTacticError
from .models import TacticType


@dataclass(frozen=True)
class EvidenceNeed:
    """One item of evidence that rebuts a blame tactic."""
    item: str
    description: str
    critical: bool
    photo_guidance: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "item": self.item,
            "description": self.description,
            "critical": self.critical,
            "photo_guidance": self.photo_guidance,
        }


@dataclass(frozen=True)
class BlameTactic:
    """A carrier's alternative-cause argument and the prepared rebuttal."""
    id: str
    type: TacticType
    label: str
    carrier_claim: str
    counter_arguments: tuple[str, ...]
    evidence_needed: tuple[EvidenceNeed, ...]
    technical_citations: tuple[str, ...]

    @property
    def critical_items(self) -> list[EvidenceNeed]:
        return [e for e in self.evidence_needed if e.critical]

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "type": self.type.value,
            "type_label": self.type.display_label,
            "label": self.label,
            "carrier_claim": self.carrier_claim,
            "counter_arguments": list(self.counter_arguments),
            "evidence_needed": [e.to_dict() for e in self.evidence_needed],
            "technical_citations": list(self.technical_citations),
        }


# =============================================================================
# Installation Defects
# =============================================================================

_IMPROPER_NAILING = BlameTactic(
    id="improper_nailing",
    type=TacticType.INSTALLATION,
    label="Improper Nailing Pattern",
    carrier_claim="Shingles failed due to high nailing, overdriven fasteners, or insufficient fastener count.",
    counter_arguments=(
        "If improper nailing were the proximate cause, damage would have manifested during the first significant wind event after installation—not years later.",
        "Per ARMA Technical Bulletin 201, aged shingles with factory seal strip degradation can lift even when properly fastened.",
        "High nailing alone does not cause shingle loss; it becomes a factor ONLY when combined with wind forces that exceed the diminished resistance of aged materials.",
        "The burden is on the carrier to prove the specific fastener pattern at the EXACT location of each damaged shingle—not to extrapolate from a sample.",
        "Wind damage patterns (directional consistency, edge concentration) are inconsistent with random installation defect patterns.",
    ),
    evidence_needed=(
        EvidenceNeed("Original permit/inspection records", "Shows roof passed inspection at installation", True),
        EvidenceNeed(
            "Photos of intact fasteners on damaged shingles",
            "Document that fasteners are still in place even though shingle is damaged",
            True,
            "Photograph the nail strip area showing fastener holes and any remaining nail shafts. Include a ruler for scale.",
        ),
        EvidenceNeed(
            "Pattern documentation",
            "Show damage is directionally consistent, not random",
            True,
            "Wide shots showing damage concentrated on specific exposures (e.g., west-facing slopes)",
        ),
        EvidenceNeed("Shingle age documentation", "Invoices, permits, or manufacturer date codes", False),
        EvidenceNeed("Weather event documentation", "NOAA data, NWS reports showing wind event", True),
    ),
    technical_citations=(
        "ARMA TB-201: Factory seal strips degrade with atmospheric exposure",
        "ASTM D3161 ratings apply to NEW materials, not aged shingles",
        "IRC R905.2.6: Four fasteners per shingle is code-minimum, not warranty standard",
    ),
)

_SEAL_STRIP_FAILURE = BlameTactic(
    id="seal_strip_failure",
    type=TacticType.INSTALLATION,
    label="Seal Strip Never Activated",
    carrier_claim="Shingles lifted because seal strips never properly bonded after installation.",
    counter_arguments=(
        "If seal strips never activated, the first post-installation windstorm would have caused failures—not an event years later.",
        "Manufacturer guidelines require installation during warm weather for immediate seal; however, thermal cycling and summer heat will activate seals over subsequent months.",
        "Per ARMA, seal strips naturally degrade over time even when properly activated—this is atmospheric aging, not installation failure.",
        "Photos of the seal strip area will show residue or tar patterns indicating prior adhesion that subsequently failed due to age and UV exposure.",
        'The carrier cannot prove seal strips "never" activated without destructive testing at the time of installation.',
    ),
    evidence_needed=(
        EvidenceNeed(
            "Photos of seal strip residue",
            "Shows tar or adhesive residue indicating prior bond",
            True,
            "Close-up photos of the underside of lifted tabs showing adhesive residue patterns, staining, or transfer marks",
        ),
        EvidenceNeed("Installation date/season", "If installed in warm months, sealing would have occurred", False),
        EvidenceNeed("Roof age documentation", "Extended service life proves initial bonding occurred", True),
        EvidenceNeed("No prior wind damage claims", "Shows roof survived previous storms", False),
    ),
    technical_citations=(
        "ARMA: Seal strips require 70°F+ and direct sunlight; thermal cycling achieves this",
        "Manufacturer installation guidelines specify conditions, not guarantees",
        "Atmospheric aging degrades seal strip adhesion over time regardless of initial bond strength",
    ),
)


# =============================================================================
# Maintenance Failures
# =============================================================================

_LACK_OF_MAINTENANCE = BlameTactic(
    id="lack_of_maintenance",
    type=TacticType.MAINTENANCE,
    label="Lack of Maintenance",
    carrier_claim="Damage resulted from failure to maintain the roof, not a covered peril.",
    counter_arguments=(
        'Homeowners have no duty to "maintain" shingles—they are designed to be maintenance-free for their rated lifespan.',
        'There is no industry-standard "maintenance schedule" for residential asphalt shingles that would have prevented wind/hail damage.',
        "The carrier must identify the SPECIFIC maintenance task that was omitted AND prove that task would have prevented THIS damage.",
        "Normal weathering and aging is NOT lack of maintenance—it is expected material degradation.",
        "Pre-existing wear does not exclude coverage for subsequent storm damage; the peril accelerates or completes the failure.",
    ),
    evidence_needed=(
        EvidenceNeed("Manufacturer maintenance requirements", "Most manufacturers have NONE for residential shingles", True),
        EvidenceNeed(
            "Photos of non-damaged areas",
            "Shows overall roof condition was acceptable",
            True,
            "Wide shots of undamaged slopes showing shingles are generally intact and functional",
        ),
        EvidenceNeed("Storm damage patterns", "Directional damage proves external force, not neglect", True),
        EvidenceNeed("Policy language review", "Most policies do not require specific maintenance", False),
    ),
    technical_citations=(
        "Asphalt shingle manufacturers do not prescribe homeowner maintenance schedules",
        "NRCA: Shingle roofs require professional inspection only after significant events",
        "Wear and tear exclusion does not apply to sudden/accidental storm damage",
    ),
)

_DEBRIS_ACCUMULATION = BlameTactic(
    id="debris_accumulation",
    type=TacticType.MAINTENANCE,
    label="Debris/Moss Accumulation",
    carrier_claim="Debris accumulation or organic growth caused shingle deterioration.",
    counter_arguments=(
        "Debris accumulation in valleys is NORMAL and does not void coverage for wind or hail damage.",
        "Moss/algae growth affects aesthetics but does not compromise shingle structural integrity per manufacturer literature.",
        "The carrier must prove a CAUSAL link between debris and THIS specific damage—not merely the presence of debris.",
        "Wind can blow debris ONTO the roof during the same event that causes damage—debris presence is evidence of the storm, not neglect.",
        "If debris caused the damage, the pattern would be localized to accumulation areas, not directionally consistent.",
    ),
    evidence_needed=(
        EvidenceNeed(
            "Photos showing damage away from debris areas",
            "Damage in clean areas proves debris is not the cause",
            True,
            "Document damage locations relative to valleys and debris accumulation areas",
        ),
        EvidenceNeed("Directional damage pattern", "Wind/hail patterns are independent of debris location", True),
        EvidenceNeed(
            "Photos of debris deposited by storm",
            "Fresh debris from the event itself",
            False,
            "Photograph leaves, branches, or debris that appear freshly deposited",
        ),
    ),
    technical_citations=(
        "ARMA: Algae discoloration is cosmetic; does not affect performance",
        "Manufacturer warranties exclude ONLY staining, not functional failure from growth",
        "Debris in valleys is a natural occurrence, not maintenance failure",
    ),
)


# =============================================================================
# Manufacturing Defects
# =============================================================================

_MANUFACTURING_DEFECT = BlameTactic(
    id="manufacturing_defect",
    type=TacticType.MANUFACTURING,
    label="Manufacturing Defect",
    carrier_claim="Shingles failed due to manufacturing defects, not storm damage.",
    counter_arguments=(
        "If a manufacturing defect exists, the carrier should pursue subrogation against the manufacturer—not deny the insured.",
        "Manufacturing defects manifest uniformly across the installation, not in directional patterns consistent with wind.",
        "The carrier must produce metallurgical/laboratory analysis proving the specific defect—not speculation.",
        "Class action settlements (IKO, Atlas, etc.) do not mean every roof has defective shingles—specific proof is required.",
        "Even if a latent defect exists, the COVERED PERIL (wind/hail) was the proximate cause that exploited the defect.",
    ),
    evidence_needed=(
        EvidenceNeed(
            "Photos showing non-uniform damage",
            "Defects would affect all shingles equally; storm damage is directional",
            True,
            "Wide shots showing damage concentrated on windward slopes, not random distribution",
        ),
        EvidenceNeed("Sample shingles for lab analysis", "Physical samples from damaged vs. undamaged areas", True),
        EvidenceNeed("Manufacturer batch/lot information", "From packaging or date codes on shingles", False),
        EvidenceNeed("No prior class action involvement", "This specific product may not be affected", False),
        EvidenceNeed("Weather event documentation", "Proves external force coincided with failure", True),
    ),
    technical_citations=(
        "Concurrent causation doctrine: covered peril can exploit latent defect",
        "ASTM D3018: Defines shingle composition standards—carrier must prove deviation",
        'Insurance policy covers "direct physical loss"—the wind/hail IS the loss trigger',
    ),
)


# =============================================================================
# Manipulation / Fraud Allegations
# =============================================================================

_MANIPULATION_FRAUD = BlameTactic(
    id="manipulation_fraud",
    type=TacticType.MANIPULATION,
    label="Manipulation / Fraudulent Damage",
    carrier_claim="Damage was caused by human manipulation, not natural causes.",
    counter_arguments=(
        "Fraud allegations require PROOF BEYOND SPECULATION—the carrier must identify the specific individual, means, and opportunity.",
        "Creasing patterns from foot traffic are distinguishable from wind creasing: foot traffic creates random, multi-directional marks; wind creates linear, directional patterns.",
        "If manipulation occurred, the carrier should file a police report and pursue criminal charges—not merely deny coverage.",
        "The presence of a contractor or adjuster on the roof does not prove manipulation; walking inspections are industry standard.",
        "Manipulation allegations without forensic evidence are bad faith claim handling tactics.",
        "Time-stamped photos from initial inspection can prove damage existed before any alleged manipulation.",
    ),
    evidence_needed=(
        EvidenceNeed(
            "Time-stamped initial inspection photos",
            "Proves damage existed before access by others",
            True,
            "Ensure camera/phone timestamps are visible; photograph date-stamped newspapers if needed",
        ),
        EvidenceNeed(
            "Directional consistency documentation",
            "Manipulation would be random; wind is directional",
            True,
            "Wide shots showing damage concentrated on specific exposures",
        ),
        EvidenceNeed(
            "Collateral damage photos",
            "Siding, fences, outbuildings showing same event damage",
            True,
            "Photograph all property damage in consistent direction",
        ),
        EvidenceNeed("Neighbor reports/photos", "Area-wide damage proves natural event", False),
        EvidenceNeed("Weather event documentation", "NOAA/NWS data proving significant wind/hail event occurred", True),
        EvidenceNeed("Chain of custody log", "Document who accessed the roof and when", True),
    ),
    technical_citations=(
        "HAAG Engineering: Wind creasing creates linear patterns along shingle length",
        "Foot traffic damage: circular/oval depressions, multi-directional scuffing",
        "Bad faith: Fraud allegations without evidence may constitute unfair claims practice",
    ),
)

_CONTRACTOR_CAUSED = BlameTactic(
    id="contractor_caused",
    type=TacticType.MANIPULATION,
    label="Contractor-Caused Damage",
    carrier_claim="The roofing contractor or inspector caused or exaggerated the damage.",
    counter_arguments=(
        "Initial inspection photos predate any contractor involvement and document pre-existing damage.",
        "Contractors walking a roof for inspection follow industry-standard practices; minimal foot traffic does not cause shingle failure.",
        "If the carrier believes the contractor caused damage, they should pursue the contractor directly—not deny the insured.",
        "The damage pattern is inconsistent with localized foot traffic: it spans multiple slopes and aligns with prevailing wind direction.",
        "Carriers who raise this defense should be required to produce their OWN initial inspection documentation for comparison.",
    ),
    evidence_needed=(
        EvidenceNeed(
            "Homeowner photos before contractor visit",
            "Damage documented before any professional access",
            True,
            "Have homeowner take photos immediately after the storm, before calling anyone",
        ),
        EvidenceNeed("Dated documentation timeline", "Shows damage reported before contractor involvement", True),
        EvidenceNeed("Carrier adjuster photos", "Their own documentation confirms pre-existing damage", True),
        EvidenceNeed("Multi-slope damage documentation", "Foot traffic would be localized; wind affects multiple areas", True),
        EvidenceNeed("Contractor insurance/license", "Licensed professionals follow industry standards", False),
    ),
    technical_citations=(
        "NRCA: Roof inspections require walking the surface—industry standard practice",
        "Proper inspection technique distributes weight and avoids damage",
        "Insurance bad faith: Blaming the contractor without evidence is dilatory tactic",
    ),
)


BLAME_TACTICS: tuple[BlameTactic, ...] = (
    _IMPROPER_NAILING,
    _SEAL_STRIP_FAILURE,
    _LACK_OF_MAINTENANCE,
    _DEBRIS_ACCUMULATION,
    _MANUFACTURING_DEFECT,
    _MANIPULATION_FRAUD,
    _CONTRACTOR_CAUSED,
)

_TACTICS_BY_ID = MappingProxyType({t.id: t for t in BLAME_TACTICS})


def get_tactic(tactic_id: str) -> BlameTactic:
    """
    Look up a blame tactic by ID.

    Raises:
        UnknownTacticError: if no tactic has this ID
    """
    tactic = _TACTICS_BY_ID.get(tactic_id)
    if tactic is None:
        raise UnknownTacticError(
            message=f"Unknown carrier blame tactic: '{tactic_id}'",
            details={"tactic_id": tactic_id, "available": list(_TACTICS_BY_ID)},
        )
    return tactic


def tactics_by_type() -> dict[TacticType, list[BlameTactic]]:
    """Tactics grouped by type, in first-appearance order."""
    grouped: dict[TacticType, list[BlameTactic]] = {}
    for tactic in BLAME_TACTICS:
        grouped.setdefault(tactic.type, []).append(tactic)
    return grouped
