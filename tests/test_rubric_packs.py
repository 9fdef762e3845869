"""
Rubric Pack Tests

Tests for loading and validating rubric packs from YAML/JSON.
"""
from __future__ import annotations

import json

import pytest
import yaml

from causepilot.canon import compute_catalog_hash
from causepilot.catalog import DEFAULT_CATALOG
from causepilot.engine import calculate_causation
from causepilot.exceptions import CatalogLoadError, CatalogValidationError, CatalogVersionMismatch
from causepilot.models import CausationDecision
from causepilot.packs import (
    RubricPackLoader,
    check_schema_version,
    load_rubric_pack,
    load_rubric_pack_from_string,
)
from tests.conftest import PACKS_DIR, make_form


def _pack(**overrides) -> dict:
    """A small valid pack: two core indicators, one alternative."""
    pack = {
        "schema_version": "1.0.0",
        "id": "test-pack",
        "name": "Test Pack",
        "decision_threshold": 10,
        "minimum_evidence_indicators": ["directional_pattern", "collateral_same_exposure"],
        "indicators": [
            {"id": "directional_pattern", "category": "core_evidence", "label": "Directional",
             "weight": 12, "is_positive": True},
            {"id": "collateral_same_exposure", "category": "core_evidence", "label": "Collateral",
             "weight": 8, "is_positive": True},
            {"id": "uniform_wear_all_slopes", "category": "alternative", "label": "Uniform wear",
             "weight": 10, "is_positive": False},
        ],
    }
    pack.update(overrides)
    return pack


def _write_yaml(tmp_path, data, name="pack.yaml"):
    path = tmp_path / name
    path.write_text(yaml.safe_dump(data, sort_keys=False), encoding="utf-8")
    return path


# =============================================================================
# Shipped Pack
# =============================================================================

class TestShippedPack:
    """The bundled pack must reproduce the built-in catalog."""

    def test_pack_file_exists(self, rubric_path) -> None:
        assert rubric_path.exists()

    def test_matches_default_catalog(self, rubric_path) -> None:
        catalog = load_rubric_pack(rubric_path)
        assert catalog.id == "wind-storm-default"
        assert [i.id for i in catalog] == [i.id for i in DEFAULT_CATALOG]
        assert compute_catalog_hash(catalog) == compute_catalog_hash(DEFAULT_CATALOG)
        assert dict(catalog.perils) == dict(DEFAULT_CATALOG.perils)

    def test_same_results_as_default(self, rubric_path) -> None:
        catalog = load_rubric_pack(rubric_path)
        form = make_form(present=("directional_pattern", "lifted_tabs", "uniform_wear_all_slopes"))
        assert calculate_causation(form, catalog=catalog) == calculate_causation(form)

    @pytest.mark.parametrize("path", sorted(PACKS_DIR.glob("*.yaml")), ids=lambda p: p.name)
    def test_all_packs_load(self, path) -> None:
        assert len(load_rubric_pack(path)) > 0


# =============================================================================
# Loader
# =============================================================================

class TestRubricPackLoader:

    def test_load_yaml(self, tmp_path) -> None:
        loader = RubricPackLoader()
        catalog = loader.load(_write_yaml(tmp_path, _pack()))

        assert catalog.id == "test-pack"
        assert catalog.decision_threshold == 10

    def test_load_json(self, tmp_path) -> None:
        path = tmp_path / "pack.json"
        path.write_text(json.dumps(_pack()), encoding="utf-8")
        assert load_rubric_pack(path).id == "test-pack"

    def test_default_perils_when_none_given(self, tmp_path) -> None:
        catalog = load_rubric_pack(_write_yaml(tmp_path, _pack()))
        assert catalog.peril_label("hail") == "Hail"

    def test_pack_weights_drive_scoring(self, tmp_path) -> None:
        catalog = load_rubric_pack(_write_yaml(tmp_path, _pack()))
        result = calculate_causation(make_form(present=("directional_pattern",)), catalog=catalog)
        assert result.scoring.wind_evidence_score == 12
        assert result.decision == CausationDecision.SUPPORTED
        assert len(result.indicator_breakdown) == 3

    def test_inactive_indicators_dropped(self, tmp_path) -> None:
        pack = _pack()
        pack["indicators"][1]["is_active"] = False
        catalog = load_rubric_pack(_write_yaml(tmp_path, pack))

        assert catalog.get("collateral_same_exposure") is None
        assert catalog.minimum_evidence_indicators == ("directional_pattern",)
        result = calculate_causation(make_form(present=("collateral_same_exposure",)), catalog=catalog)
        assert result.scoring.wind_evidence_score == 0

    def test_all_minimum_indicators_inactive_rejected(self, tmp_path) -> None:
        pack = _pack()
        pack["indicators"][0]["is_active"] = False
        pack["indicators"][1]["is_active"] = False
        with pytest.raises(CatalogValidationError):
            load_rubric_pack(_write_yaml(tmp_path, pack))

    def test_missing_file(self, tmp_path) -> None:
        with pytest.raises(CatalogLoadError) as exc_info:
            load_rubric_pack(tmp_path / "nope.yaml")
        assert exc_info.value.code == "CP_CATALOG_LOAD_ERROR"

    def test_malformed_yaml(self, tmp_path) -> None:
        path = tmp_path / "bad.yaml"
        path.write_text("id: [unclosed", encoding="utf-8")
        with pytest.raises(CatalogLoadError):
            load_rubric_pack(path)

    def test_version_mismatch(self, tmp_path) -> None:
        path = _write_yaml(tmp_path, _pack(schema_version="2.0.0"))
        with pytest.raises(CatalogVersionMismatch) as exc_info:
            load_rubric_pack(path)
        assert exc_info.value.details["pack_version"] == "2.0.0"

    def test_version_mismatch_allowed_when_not_strict(self, tmp_path) -> None:
        path = _write_yaml(tmp_path, _pack(schema_version="2.0.0"))
        catalog = RubricPackLoader(strict_version=False).load(path)
        assert catalog.id == "test-pack"

    def test_minor_version_compatible(self) -> None:
        assert check_schema_version({"schema_version": "1.4.2"})
        assert check_schema_version({})
        assert not check_schema_version({"schema_version": "0.9"})


# =============================================================================
# Schema Validation
# =============================================================================

class TestSchemaValidation:

    def _assert_invalid(self, data) -> CatalogValidationError:
        with pytest.raises(CatalogValidationError) as exc_info:
            load_rubric_pack_from_string(json.dumps(data), format="json")
        return exc_info.value

    def test_duplicate_ids(self) -> None:
        pack = _pack()
        pack["indicators"].append(dict(pack["indicators"][0]))
        error = self._assert_invalid(pack)
        assert "Duplicate" in str(error.details["errors"])

    def test_zero_weight(self) -> None:
        pack = _pack()
        pack["indicators"][2]["weight"] = 0
        self._assert_invalid(pack)

    def test_unknown_category(self) -> None:
        pack = _pack()
        pack["indicators"][0]["category"] = "vibes"
        self._assert_invalid(pack)

    def test_minimum_evidence_must_exist(self) -> None:
        self._assert_invalid(_pack(minimum_evidence_indicators=["not_there"]))

    def test_minimum_evidence_must_be_positive_core(self) -> None:
        self._assert_invalid(_pack(minimum_evidence_indicators=["uniform_wear_all_slopes"]))

    def test_extra_fields_rejected(self) -> None:
        self._assert_invalid(_pack(surprise=True))

    def test_not_a_mapping(self) -> None:
        with pytest.raises(CatalogValidationError):
            load_rubric_pack_from_string("- just\n- a list\n")

    def test_parse_error(self) -> None:
        with pytest.raises(CatalogLoadError):
            load_rubric_pack_from_string("{not json", format="json")

    def test_errors_are_serializable(self) -> None:
        error = self._assert_invalid(_pack(decision_threshold=-1))
        json.dumps(error.to_dict())
