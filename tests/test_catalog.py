"""
Built-in Catalog Tests

Pins the default wind/storm rubric: indicator order, weights, the
minimum-evidence set and lookup tables.
"""
from __future__ import annotations

import pytest

from causepilot.catalog import (
    ALL_INDICATORS,
    ALTERNATIVE_CAUSE_INDICATORS,
    DAMAGE_TYPES,
    DECISION_THRESHOLD,
    DEFAULT_CATALOG,
    MINIMUM_EVIDENCE_INDICATORS,
    MINIMUM_EVIDENCE_THRESHOLD,
    PERIL_SUPPORTING_INDICATORS,
    PERILS,
    SHINGLE_TYPES,
)
from causepilot.models import IndicatorCategory


EXPECTED_WEIGHTS = [
    ("directional_pattern", 20, True),
    ("displaced_missing_materials", 20, True),
    ("collateral_same_exposure", 18, True),
    ("storm_plus_localized_damage", 18, True),
    ("lifted_tabs", 12, True),
    ("debris_scatter_pattern", 10, True),
    ("edge_damage_concentration", 10, True),
    ("neighboring_property_damage", 12, True),
    ("fence_siding_damage", 10, True),
    ("verified_weather_event", 15, True),
    ("immediate_notice", 8, True),
    ("fresh_fractures", 10, True),
    ("uniform_wear_all_slopes", 15, False),
    ("damage_predates_event", 20, False),
    ("no_weather_event_documented", 12, False),
    ("installation_defect_documented", 15, False),
    ("prior_damage_same_location", 10, False),
]


class TestDefaultCatalog:
    """Tests for the built-in indicator catalog."""

    def test_order_and_weights(self) -> None:
        actual = [(i.id, i.weight, i.is_positive) for i in ALL_INDICATORS]
        assert actual == EXPECTED_WEIGHTS

    def test_supporting_precede_alternative(self) -> None:
        assert ALL_INDICATORS == PERIL_SUPPORTING_INDICATORS + ALTERNATIVE_CAUSE_INDICATORS
        assert len(PERIL_SUPPORTING_INDICATORS) == 12
        assert len(ALTERNATIVE_CAUSE_INDICATORS) == 5
        assert all(i.category == IndicatorCategory.ALTERNATIVE for i in ALTERNATIVE_CAUSE_INDICATORS)

    def test_core_evidence_is_the_minimum_evidence_set(self) -> None:
        core = [i.id for i in ALL_INDICATORS if i.category == IndicatorCategory.CORE_EVIDENCE]
        assert core == list(MINIMUM_EVIDENCE_INDICATORS)
        assert [i.id for i in DEFAULT_CATALOG.minimum_evidence] == core

    def test_constants(self) -> None:
        assert DECISION_THRESHOLD == 15
        assert MINIMUM_EVIDENCE_THRESHOLD == 1
        assert DEFAULT_CATALOG.decision_threshold == DECISION_THRESHOLD
        assert len(DEFAULT_CATALOG) == 17

    def test_ids_unique(self) -> None:
        ids = [i.id for i in ALL_INDICATORS]
        assert len(ids) == len(set(ids))

    def test_labels(self) -> None:
        assert DEFAULT_CATALOG.get("directional_pattern").label == "Directional damage pattern documented"
        assert DEFAULT_CATALOG.get("uniform_wear_all_slopes").label == (
            "Uniform wear across ALL slopes (not directional)"
        )


class TestLookupTables:

    @pytest.mark.parametrize("code,label", [
        ("wind", "Wind"),
        ("hail", "Hail"),
        ("water", "Water/Rain"),
        ("fire", "Fire"),
        ("ice", "Ice/Snow"),
        ("falling_object", "Falling Object/Tree"),
    ])
    def test_peril_labels(self, code, label) -> None:
        assert PERILS[code] == label
        assert DEFAULT_CATALOG.peril_label(code) == label

    def test_unknown_peril_falls_back_to_code(self) -> None:
        assert DEFAULT_CATALOG.peril_label("tornado") == "tornado"

    def test_perils_read_only(self) -> None:
        with pytest.raises(TypeError):
            PERILS["tornado"] = "Tornado"

    def test_damage_and_shingle_types(self) -> None:
        assert len(DAMAGE_TYPES) == 11
        assert DAMAGE_TYPES[-1] == "Other"
        assert SHINGLE_TYPES["architectural"] == "Architectural/Dimensional"
