"""
Blame Tactic and Counter-Argument Tests
"""
from __future__ import annotations

import pytest

from causepilot.engine import (
    build_counter_arguments,
    evidence_completeness,
    render_counter_arguments_text,
)
from causepilot.exceptions import UnknownTacticError
from causepilot.models import TacticType
from causepilot.tactics import BLAME_TACTICS, get_tactic, tactics_by_type


class TestTacticCatalogue:

    def test_ids_in_display_order(self) -> None:
        assert [t.id for t in BLAME_TACTICS] == [
            "improper_nailing",
            "seal_strip_failure",
            "lack_of_maintenance",
            "debris_accumulation",
            "manufacturing_defect",
            "manipulation_fraud",
            "contractor_caused",
        ]

    @pytest.mark.parametrize("tactic_id,evidence,critical", [
        ("improper_nailing", 5, 4),
        ("seal_strip_failure", 4, 2),
        ("lack_of_maintenance", 4, 3),
        ("debris_accumulation", 3, 2),
        ("manufacturing_defect", 5, 3),
        ("manipulation_fraud", 6, 5),
        ("contractor_caused", 5, 4),
    ])
    def test_evidence_checklists(self, tactic_id, evidence, critical) -> None:
        tactic = get_tactic(tactic_id)
        assert len(tactic.evidence_needed) == evidence
        assert len(tactic.critical_items) == critical
        assert len(tactic.technical_citations) == 3

    def test_unknown_tactic(self) -> None:
        with pytest.raises(UnknownTacticError) as exc_info:
            get_tactic("act_of_god")
        assert exc_info.value.code == "CP_UNKNOWN_TACTIC"
        assert "improper_nailing" in exc_info.value.details["available"]

    def test_grouped_by_type(self) -> None:
        grouped = tactics_by_type()
        assert list(grouped) == [
            TacticType.INSTALLATION,
            TacticType.MAINTENANCE,
            TacticType.MANUFACTURING,
            TacticType.MANIPULATION,
        ]
        assert [t.id for t in grouped[TacticType.INSTALLATION]] == ["improper_nailing", "seal_strip_failure"]
        assert [t.id for t in grouped[TacticType.MANIPULATION]] == ["manipulation_fraud", "contractor_caused"]

    def test_to_dict_has_type_label(self) -> None:
        data = get_tactic("manufacturing_defect").to_dict()
        assert data["type"] == "manufacturing"
        assert data["type_label"] == "Manufacturing Defect"


class TestEvidenceCompleteness:

    def test_nothing_checked(self) -> None:
        completeness = evidence_completeness(get_tactic("improper_nailing"))
        assert completeness.checked == 0
        assert completeness.total == 5
        assert completeness.critical == 4
        assert not completeness.critical_complete
        assert completeness.percentage_complete == 0.0

    def test_all_critical_checked(self) -> None:
        tactic = get_tactic("improper_nailing")
        checked = [e.item for e in tactic.critical_items] + ["Something unrelated"]
        completeness = evidence_completeness(tactic, checked)
        assert completeness.checked == 4
        assert completeness.critical_checked == 4
        assert completeness.critical_complete
        assert completeness.percentage_complete == 80.0


class TestBuildCounterArguments:

    def test_packages_follow_input_order_and_dedupe(self) -> None:
        packages = build_counter_arguments(
            ["lack_of_maintenance", "improper_nailing", "lack_of_maintenance"]
        )
        assert [p.tactic.id for p in packages] == ["lack_of_maintenance", "improper_nailing"]

    def test_missing_critical_items(self) -> None:
        packages = build_counter_arguments(
            ["improper_nailing"],
            {"improper_nailing": ["Original permit/inspection records", "Pattern documentation"]},
        )
        package = packages[0]
        assert package.completeness.critical_checked == 2
        assert [e.item for e in package.missing_critical] == [
            "Photos of intact fasteners on damaged shingles",
            "Weather event documentation",
        ]

    def test_unknown_tactic_raises(self) -> None:
        with pytest.raises(UnknownTacticError):
            build_counter_arguments(["improper_nailing", "act_of_god"])

    def test_empty(self) -> None:
        assert build_counter_arguments([]) == []


class TestRenderText:

    def test_layout(self) -> None:
        tactic = get_tactic("improper_nailing")
        text = render_counter_arguments_text(tactic)
        lines = text.split("\n")

        assert lines[0] == "COUNTER-ARGUMENTS: Improper Nailing Pattern"
        assert lines[1] == "=" * 50
        assert lines[2] == ""
        assert lines[3] == "CARRIER CLAIM:"
        assert lines[4] == f'"{tactic.carrier_claim}"'
        assert lines[6] == "REBUTTAL POINTS:"
        assert lines[7].startswith("1. If improper nailing were the proximate cause")
        assert "TECHNICAL CITATIONS:" in lines
        assert text.endswith(
            "• IRC R905.2.6: Four fasteners per shingle is code-minimum, not warranty standard\n"
        )

    def test_numbers_every_counter_argument(self) -> None:
        tactic = get_tactic("manipulation_fraud")
        text = render_counter_arguments_text(tactic)
        assert len(tactic.counter_arguments) == 6
        assert "\n6. " in text
        assert "\n7. " not in text
