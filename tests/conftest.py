"""
Pytest configuration and fixtures for CausePilot tests.

Provides form factories and common fixtures matching the model definitions.
"""
from pathlib import Path

import pytest

from causepilot.catalog import ALL_INDICATORS, DEFAULT_CATALOG
from causepilot.engine import CausationEvaluator
from causepilot.models import CausationFormData, IndicatorState, IndicatorValue


PACKS_DIR = Path(__file__).parent.parent / "packs"


# =============================================================================
# Factory Helpers
# =============================================================================

def make_form(
    present: tuple = (),
    absent: tuple = (),
    **fields,
) -> CausationFormData:
    """
    Create a form with the given indicators present/absent.

    Every other indicator is left out, i.e. UNKNOWN. Documentation
    fields default to filled in so that only indicator gaps show up;
    pass event_date=None etc. to leave one empty.
    """
    indicators = {i: IndicatorValue(IndicatorState.PRESENT) for i in present}
    indicators.update({i: IndicatorValue(IndicatorState.ABSENT) for i in absent})

    defaults = {
        "peril_tested": "wind",
        "damage_type": "Missing shingles",
        "event_date": "2024-06-15",
        "damage_noticed_date": "2024-06-16",
        "weather_evidence": "NWS storm report 2024-06-15",
        "roof_age": "12",
    }
    defaults.update(fields)
    return CausationFormData(indicators=indicators, **defaults)


def all_ids(positive: bool) -> tuple:
    return tuple(i.id for i in ALL_INDICATORS if i.is_positive == positive)


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def evaluator() -> CausationEvaluator:
    return CausationEvaluator(catalog=DEFAULT_CATALOG)


@pytest.fixture
def empty_form() -> CausationFormData:
    """A form with no indicators and no documentation."""
    return CausationFormData()


@pytest.fixture
def rubric_path() -> Path:
    return PACKS_DIR / "wind_rubric.yaml"
