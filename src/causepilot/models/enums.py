"""
CausePilot Enumerations

All enums inherit from (str, Enum) for JSON serialization compatibility.
"""
from __future__ import annotations

from enum import Enum
from typing import Any

from ..exceptions import InvalidIndicatorStateError


# =============================================================================
# Indicator State
# =============================================================================

class IndicatorState(str, Enum):
    """
    Three-state observation of an evidence indicator.

    PRESENT applies the indicator's full weight. ABSENT and UNKNOWN both
    apply zero: the absence of evidence is never evidence against
    causation. UNKNOWN additionally surfaces an evidence gap for core
    indicators.
    """
    PRESENT = "present"
    ABSENT = "absent"
    UNKNOWN = "unknown"

    @classmethod
    def coerce(cls, value: Any) -> "IndicatorState":
        """
        Normalize a caller-supplied value to a state.

        None, empty strings and mappings without a state become UNKNOWN.
        Objects carrying a ``state`` attribute (IndicatorValue) or a
        ``"state"`` key are unwrapped first.

        Raises:
            InvalidIndicatorStateError: for an unrecognised literal
        """
        if isinstance(value, cls):
            return value
        if value is None:
            return cls.UNKNOWN
        if isinstance(value, dict):
            return cls.coerce(value.get("state"))
        if hasattr(value, "state"):
            return cls.coerce(value.state)
        if isinstance(value, str):
            text = value.strip().lower()
            if not text:
                return cls.UNKNOWN
            try:
                return cls(text)
            except ValueError:
                pass
        raise InvalidIndicatorStateError(
            message=f"Invalid indicator state: {value!r}",
            details={"value": repr(value), "allowed": [s.value for s in cls]},
        )


# =============================================================================
# Indicator Category
# =============================================================================

class IndicatorCategory(str, Enum):
    """Grouping of indicators in the rubric."""
    CORE_EVIDENCE = "core_evidence"    # Satisfies the minimum-evidence gate
    DIRECTIONAL = "directional"
    COLLATERAL = "collateral"
    EVENT = "event"
    TIMELINE = "timeline"
    PHYSICAL = "physical"
    ALTERNATIVE = "alternative"        # Supports a non-covered cause


# =============================================================================
# Decision
# =============================================================================

class CausationDecision(str, Enum):
    """
    Outcome of the but-for causation test.

    Note: SUPPORTED is unreachable unless the minimum-evidence gate is met.
    """
    SUPPORTED = "supported"
    NOT_SUPPORTED = "not_supported"
    INDETERMINATE = "indeterminate"


# =============================================================================
# Carrier Blame Tactics
# =============================================================================

class TacticType(str, Enum):
    """Family of alternative-cause argument a carrier relies on."""
    INSTALLATION = "installation"
    MAINTENANCE = "maintenance"
    MANUFACTURING = "manufacturing"
    MANIPULATION = "manipulation"

    @property
    def display_label(self) -> str:
        return {
            TacticType.INSTALLATION: "Installation Defect",
            TacticType.MAINTENANCE: "Maintenance Failure",
            TacticType.MANUFACTURING: "Manufacturing Defect",
            TacticType.MANIPULATION: "Manipulation/Fraud",
        }[self]
