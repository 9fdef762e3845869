"""
CausePilot - But-For Causation Scoring for Storm Claims

CausePilot scores structured claim-investigation evidence and reports
whether wind/storm causation is supported, not supported, or
indeterminate. It produces a DETERMINATION WITH ITS AUDIT TRAIL, not a
coverage decision: the adjuster reviews the score breakdown, the
evidence gaps and the recommended next steps.

Core Principle: "Unknown is never evidence against causation."

Key Features:
- Weighted three-state indicator rubric (present / absent / unknown)
- Minimum-evidence gate: no SUPPORTED without a core indicator
- Evidence-gap reporting and "what would change" recommendations
- Cautious, templated rationale for correspondence
- Configurable rubric packs (YAML/JSON)
- Carrier blame-tactic counter-arguments and evidence checklists

Quick Start:
    from causepilot import CausationFormData, IndicatorState, calculate_causation

    form = CausationFormData.from_dict({
        "perilTested": "wind",
        "damageType": "Missing shingles",
        "indicators": {"directional_pattern": {"state": "present"}},
    })
    result = calculate_causation(form)
    print(result.decision, result.scoring.net_score)

Version: 0.1.0
"""
from __future__ import annotations

__version__ = "0.1.0"
__author__ = "CausePilot Team"

# =============================================================================
# Models (Re-exported for convenience)
# =============================================================================
from .models import (
    CausationDecision,
    CausationFormData,
    CausationResult,
    Indicator,
    IndicatorBreakdown,
    IndicatorCatalog,
    IndicatorCategory,
    IndicatorState,
    IndicatorValue,
    ScoringResult,
    TacticType,
)

# =============================================================================
# Catalog
# =============================================================================
from .catalog import (
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

# =============================================================================
# Engine
# =============================================================================
from .engine import (
    CausationEvaluator,
    CounterArgumentPackage,
    EvidenceCompleteness,
    build_counter_arguments,
    calculate_causation,
    evidence_completeness,
    render_counter_arguments_text,
)

# =============================================================================
# Blame Tactics
# =============================================================================
from .tactics import (
    BLAME_TACTICS,
    BlameTactic,
    EvidenceNeed,
    get_tactic,
    tactics_by_type,
)

# =============================================================================
# Exceptions
# =============================================================================
from .exceptions import (
    CatalogLoadError,
    CatalogValidationError,
    CatalogVersionMismatch,
    CausePilotError,
    InvalidFormDataError,
    InvalidIndicatorStateError,
    UnknownTacticError,
)

__all__ = [
    "__version__",
    # Models
    "CausationDecision",
    "CausationFormData",
    "CausationResult",
    "Indicator",
    "IndicatorBreakdown",
    "IndicatorCatalog",
    "IndicatorCategory",
    "IndicatorState",
    "IndicatorValue",
    "ScoringResult",
    "TacticType",
    # Catalog
    "ALL_INDICATORS",
    "ALTERNATIVE_CAUSE_INDICATORS",
    "DAMAGE_TYPES",
    "DECISION_THRESHOLD",
    "DEFAULT_CATALOG",
    "MINIMUM_EVIDENCE_INDICATORS",
    "MINIMUM_EVIDENCE_THRESHOLD",
    "PERIL_SUPPORTING_INDICATORS",
    "PERILS",
    "SHINGLE_TYPES",
    # Engine
    "CausationEvaluator",
    "CounterArgumentPackage",
    "EvidenceCompleteness",
    "build_counter_arguments",
    "calculate_causation",
    "evidence_completeness",
    "render_counter_arguments_text",
    # Tactics
    "BLAME_TACTICS",
    "BlameTactic",
    "EvidenceNeed",
    "get_tactic",
    "tactics_by_type",
    # Exceptions
    "CatalogLoadError",
    "CatalogValidationError",
    "CatalogVersionMismatch",
    "CausePilotError",
    "InvalidFormDataError",
    "InvalidIndicatorStateError",
    "UnknownTacticError",
]
