"""Tests for canonical JSON and content hashing."""
from __future__ import annotations

from causepilot.canon import (
    canonical_json,
    compute_catalog_hash,
    compute_form_hash,
    content_hash,
    content_hash_short,
)
from causepilot.catalog import DEFAULT_CATALOG
from causepilot.models import CausationFormData, IndicatorCatalog, IndicatorState


class TestCanonicalJson:

    def test_sorted_compact(self) -> None:
        assert canonical_json({"b": 1, "a": 2}) == '{"a":2,"b":1}'

    def test_enums_serialized_by_value(self) -> None:
        assert canonical_json({"s": IndicatorState.PRESENT}) == '{"s":"present"}'

    def test_hash_is_sha256_hex(self) -> None:
        digest = content_hash({"a": 1})
        assert len(digest) == 64
        assert content_hash_short({"a": 1}) == digest[:12]


class TestDomainHashes:

    def test_form_hash_ignores_key_order(self) -> None:
        a = CausationFormData.from_dict({"roofAge": "12", "indicators": {"lifted_tabs": "present", "fresh_fractures": "absent"}})
        b = CausationFormData.from_dict({"indicators": {"fresh_fractures": "absent", "lifted_tabs": "present"}, "roof_age": "12"})
        assert compute_form_hash(a) == compute_form_hash(b)

    def test_form_hash_changes_with_state(self) -> None:
        a = CausationFormData.from_dict({"indicators": {"lifted_tabs": "present"}})
        b = CausationFormData.from_dict({"indicators": {"lifted_tabs": "absent"}})
        assert compute_form_hash(a) != compute_form_hash(b)

    def test_catalog_hash_tracks_scoring_changes(self) -> None:
        relabeled = IndicatorCatalog(
            indicators=DEFAULT_CATALOG.indicators,
            perils={"wind": "Windstorm"},
            decision_threshold=DEFAULT_CATALOG.decision_threshold,
            minimum_evidence_indicators=DEFAULT_CATALOG.minimum_evidence_indicators,
        )
        stricter = IndicatorCatalog(
            indicators=DEFAULT_CATALOG.indicators,
            perils=DEFAULT_CATALOG.perils,
            decision_threshold=20,
            minimum_evidence_indicators=DEFAULT_CATALOG.minimum_evidence_indicators,
        )
        assert compute_catalog_hash(relabeled) == compute_catalog_hash(DEFAULT_CATALOG)
        assert compute_catalog_hash(stricter) != compute_catalog_hash(DEFAULT_CATALOG)
