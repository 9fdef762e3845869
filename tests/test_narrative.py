"""Tests for the narrative text templates."""
from __future__ import annotations

import pytest

from causepilot.catalog import DEFAULT_CATALOG
from causepilot.engine import narrative
from causepilot.models import CausationDecision


class TestParseRoofAge:

    @pytest.mark.parametrize("text,years", [
        ("12", 12),
        ("12 years", 12),
        ("  7", 7),
        ("7.5", 7),
        ("15+", 15),
        ("about 20", 0),
        ("", 0),
        (None, 0),
        ("-3", -3),
        ("0012", 12),
        ("12345", 0),
        ("9" * 5000, 0),
        ("0" * 5000 + "20", 20),
    ])
    def test_leading_integer(self, text, years) -> None:
        assert narrative.parse_roof_age(text) == years


class TestBaselineSusceptibility:

    def test_unknown_age_is_empty(self) -> None:
        assert narrative.baseline_susceptibility(0, CausationDecision.SUPPORTED, "Wind") == ""
        assert narrative.baseline_susceptibility(-3, CausationDecision.SUPPORTED, "Wind") == ""

    def test_young_roof(self) -> None:
        text = narrative.baseline_susceptibility(4, CausationDecision.INDETERMINATE, "Wind")
        assert text == (
            "Given the roof's relatively young age (4 years), minimal deterioration "
            "would be expected absent the covered peril."
        )

    @pytest.mark.parametrize("years", [5, 14])
    def test_middle_aged_roof(self, years) -> None:
        text = narrative.baseline_susceptibility(years, CausationDecision.SUPPORTED, "Wind")
        assert text.startswith(f"Given the roof's age ({years} years) and material")
        assert "ARMA TB-201" in text

    def test_old_roof_supported(self) -> None:
        text = narrative.baseline_susceptibility(15, CausationDecision.SUPPORTED, "Hail")
        assert "the observed damage pattern is consistent with hail-induced failure" in text

    def test_old_roof_not_supported(self) -> None:
        text = narrative.baseline_susceptibility(22, CausationDecision.NOT_SUPPORTED, "Wind")
        assert "the question is whether damage is consistent with wind-induced failure" in text


class TestLineTemplates:

    def test_gap_line(self) -> None:
        assert narrative.gap_line("Roof X") == "Roof X — not observed, not documented, or not evaluated"

    def test_document_indicator_line(self) -> None:
        indicator = DEFAULT_CATALOG.get("lifted_tabs")
        assert narrative.document_indicator_line(indicator) == (
            'Document "Lifted/creased tabs in consistent direction" (+12 points if present)'
        )

    def test_minimum_evidence_lines_met(self) -> None:
        present = [DEFAULT_CATALOG.get("collateral_same_exposure")]
        lines = narrative.minimum_evidence_lines(True, DEFAULT_CATALOG.minimum_evidence, present)
        assert lines == ["✓ Collateral damage on same exposure (gutters, flashing, siding)"]

    def test_is_missing(self) -> None:
        assert narrative.is_missing(None)
        assert narrative.is_missing("")
        assert not narrative.is_missing(" ")
        assert not narrative.is_missing("2024-06-15")

    def test_counter_arguments_summary(self) -> None:
        assert narrative.counter_arguments_summary(0) is None
        assert narrative.counter_arguments_summary(3) == (
            "Carrier blame-shifting tactics identified: 3 defensive arguments prepared."
        )
