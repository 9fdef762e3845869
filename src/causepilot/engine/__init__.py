"""
CausePilot Engine

Services:
- CausationEvaluator: Score a causation form and decide causation
- narrative: Pure text templates for results
- Counter-argument builder for carrier blame tactics

Usage:
    from causepilot.engine import calculate_causation, build_counter_arguments
"""
from __future__ import annotations

from .causation_evaluator import (
    CausationEvaluator,
    calculate_causation,
)
from .counter_arguments import (
    CounterArgumentPackage,
    EvidenceCompleteness,
    build_counter_arguments,
    evidence_completeness,
    render_counter_arguments_text,
)

__all__ = [
    # Causation
    "CausationEvaluator",
    "calculate_causation",
    # Counter-arguments
    "CounterArgumentPackage",
    "EvidenceCompleteness",
    "build_counter_arguments",
    "evidence_completeness",
    "render_counter_arguments_text",
]
