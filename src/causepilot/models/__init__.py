"""
CausePilot Models

Value objects for the causation engine:

    from causepilot.models import (
        # Enums
        IndicatorState, IndicatorCategory, CausationDecision, TacticType,
        # Rubric
        Indicator, IndicatorCatalog,
        # Input
        CausationFormData, IndicatorValue,
        # Output
        CausationResult, IndicatorBreakdown, ScoringResult,
    )
"""
from __future__ import annotations

from .enums import (
    CausationDecision,
    IndicatorCategory,
    IndicatorState,
    TacticType,
)
from .form import (
    CausationFormData,
    IndicatorValue,
)
from .indicator import (
    Indicator,
    IndicatorCatalog,
)
from .result import (
    CausationResult,
    IndicatorBreakdown,
    ScoringResult,
)

__all__ = [
    # Enums
    "CausationDecision",
    "IndicatorCategory",
    "IndicatorState",
    "TacticType",
    # Rubric
    "Indicator",
    "IndicatorCatalog",
    # Input
    "CausationFormData",
    "IndicatorValue",
    # Output
    "CausationResult",
    "IndicatorBreakdown",
    "ScoringResult",
]
