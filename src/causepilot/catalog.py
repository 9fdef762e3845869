"""
CausePilot Indicator Catalog

The built-in wind/storm rubric.

Order matters: ALL_INDICATORS is the supporting indicators followed by
the alternative-cause indicators, and every CausationResult lists its
indicator breakdown in exactly this order.

Supporting (is_positive=True):
    directional_pattern            20  core_evidence
    displaced_missing_materials    20  core_evidence
    collateral_same_exposure       18  core_evidence
    storm_plus_localized_damage    18  core_evidence
    lifted_tabs                    12  directional
    debris_scatter_pattern         10  directional
    edge_damage_concentration      10  directional
    neighboring_property_damage    12  collateral
    fence_siding_damage            10  collateral
    verified_weather_event         15  event
    immediate_notice                8  timeline
    fresh_fractures                10  physical

Alternative cause (is_positive=False, category alternative):
    uniform_wear_all_slopes        15
    damage_predates_event          20
    no_weather_event_documented    12
    installation_defect_documented 15
    prior_damage_same_location     10
"""
from __future__ import annotations

from types import MappingProxyType

from .models import Indicator, IndicatorCatalog, IndicatorCategory


# =============================================================================
# Thresholds
# =============================================================================

DECISION_THRESHOLD = 15
MINIMUM_EVIDENCE_THRESHOLD = 1  # At least one core indicator must be present

MINIMUM_EVIDENCE_INDICATORS: tuple[str, ...] = (
    "directional_pattern",
    "displaced_missing_materials",
    "collateral_same_exposure",
    "storm_plus_localized_damage",
)


# =============================================================================
# Indicators Supporting the Tested Peril
# =============================================================================

PERIL_SUPPORTING_INDICATORS: tuple[Indicator, ...] = (
    # Core evidence (satisfies the minimum-evidence requirement)
    Indicator(
        id="directional_pattern",
        category=IndicatorCategory.CORE_EVIDENCE,
        label="Directional damage pattern documented",
        weight=20,
        description="Damage shows consistent directional pattern aligned with reported wind/weather event",
        is_positive=True,
    ),
    Indicator(
        id="displaced_missing_materials",
        category=IndicatorCategory.CORE_EVIDENCE,
        label="Displaced/missing roofing materials consistent with wind",
        weight=20,
        description="Shingles, flashing, or other materials displaced or missing in pattern consistent with wind forces",
        is_positive=True,
    ),
    Indicator(
        id="collateral_same_exposure",
        category=IndicatorCategory.CORE_EVIDENCE,
        label="Collateral damage on same exposure (gutters, flashing, siding)",
        weight=18,
        description="Other property components on same exposure show consistent damage",
        is_positive=True,
    ),
    Indicator(
        id="storm_plus_localized_damage",
        category=IndicatorCategory.CORE_EVIDENCE,
        label="Verified storm event plus localized damage inconsistent with uniform aging",
        weight=18,
        description="Confirmed weather event AND damage pattern inconsistent with general wear",
        is_positive=True,
    ),
    # Secondary
    Indicator(
        id="lifted_tabs",
        category=IndicatorCategory.DIRECTIONAL,
        label="Lifted/creased tabs in consistent direction",
        weight=12,
        description="Shingle tabs lifted or creased with directional consistency",
        is_positive=True,
    ),
    Indicator(
        id="debris_scatter_pattern",
        category=IndicatorCategory.DIRECTIONAL,
        label="Debris scatter pattern aligned with wind direction",
        weight=10,
        description="Debris distribution indicates wind direction consistent with damage",
        is_positive=True,
    ),
    Indicator(
        id="edge_damage_concentration",
        category=IndicatorCategory.DIRECTIONAL,
        label="Damage concentrated at edges/ridges (high wind exposure)",
        weight=10,
        description="Damage pattern shows concentration at areas of highest wind exposure",
        is_positive=True,
    ),
    Indicator(
        id="neighboring_property_damage",
        category=IndicatorCategory.COLLATERAL,
        label="Neighboring properties show similar damage",
        weight=12,
        description="Area-wide damage consistent with weather event",
        is_positive=True,
    ),
    Indicator(
        id="fence_siding_damage",
        category=IndicatorCategory.COLLATERAL,
        label="Fence/siding damage on same exposure",
        weight=10,
        description="Non-roof structures damaged on same side of property",
        is_positive=True,
    ),
    Indicator(
        id="verified_weather_event",
        category=IndicatorCategory.EVENT,
        label="NOAA/NWS verified weather event on date of loss",
        weight=15,
        description="Official weather documentation confirms event occurrence",
        is_positive=True,
    ),
    Indicator(
        id="immediate_notice",
        category=IndicatorCategory.TIMELINE,
        label="Damage noticed within 24 hours of event",
        weight=8,
        description="Prompt discovery supports event causation",
        is_positive=True,
    ),
    Indicator(
        id="fresh_fractures",
        category=IndicatorCategory.PHYSICAL,
        label="Fresh fractures/breaks visible (not weathered)",
        weight=10,
        description="Material failures appear recent, not aged",
        is_positive=True,
    ),
)


# =============================================================================
# Indicators Supporting an Alternative Cause
# =============================================================================

ALTERNATIVE_CAUSE_INDICATORS: tuple[Indicator, ...] = (
    Indicator(
        id="uniform_wear_all_slopes",
        category=IndicatorCategory.ALTERNATIVE,
        label="Uniform wear across ALL slopes (not directional)",
        weight=15,
        description="Affirmative evidence that damage is uniform, indicating age rather than event",
        is_positive=False,
    ),
    Indicator(
        id="damage_predates_event",
        category=IndicatorCategory.ALTERNATIVE,
        label="Documented evidence damage predates reported event",
        weight=20,
        description="Photos, inspections, or records showing damage existed before event",
        is_positive=False,
    ),
    Indicator(
        id="no_weather_event_documented",
        category=IndicatorCategory.ALTERNATIVE,
        label="No weather event recorded on date of loss",
        weight=12,
        description="Official records show no significant weather event occurred",
        is_positive=False,
    ),
    Indicator(
        id="installation_defect_documented",
        category=IndicatorCategory.ALTERNATIVE,
        label="Documented installation defect as primary cause",
        weight=15,
        description="Evidence of improper installation directly causing this specific damage",
        is_positive=False,
    ),
    Indicator(
        id="prior_damage_same_location",
        category=IndicatorCategory.ALTERNATIVE,
        label="Prior claim/repair at same location documented",
        weight=10,
        description="Records show previous damage and repair at exact damage location",
        is_positive=False,
    ),
)

ALL_INDICATORS: tuple[Indicator, ...] = PERIL_SUPPORTING_INDICATORS + ALTERNATIVE_CAUSE_INDICATORS


# =============================================================================
# Lookup Tables
# =============================================================================

PERILS = MappingProxyType({
    "wind": "Wind",
    "hail": "Hail",
    "water": "Water/Rain",
    "fire": "Fire",
    "ice": "Ice/Snow",
    "falling_object": "Falling Object/Tree",
})

DAMAGE_TYPES: tuple[str, ...] = (
    "Shingle creasing/lifting",
    "Missing shingles",
    "Granule loss",
    "Punctures/holes",
    "Flashing damage",
    "Gutter damage",
    "Siding damage",
    "Bruising/soft spots",
    "Water intrusion",
    "Structural damage",
    "Other",
)

SHINGLE_TYPES = MappingProxyType({
    "3_tab": "3-Tab Shingles",
    "architectural": "Architectural/Dimensional",
    "metal": "Metal Roofing",
    "tile": "Tile Roofing",
    "slate": "Slate",
    "wood_shake": "Wood Shake",
    "unknown": "Unknown",
})


DEFAULT_CATALOG = IndicatorCatalog(
    indicators=ALL_INDICATORS,
    perils=PERILS,
    decision_threshold=DECISION_THRESHOLD,
    minimum_evidence_indicators=MINIMUM_EVIDENCE_INDICATORS,
)
