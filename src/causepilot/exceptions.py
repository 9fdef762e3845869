"""
CausePilot Exception Hierarchy

Boundary exceptions for the causation engine.

The evaluator itself is total over well-typed input and raises nothing.
These exceptions belong to the edges: loading rubric packs, coercing
caller-supplied indicator states, and looking up blame tactics.

Exception codes follow the pattern: CP_<CATEGORY>_<SPECIFIC>
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class CausePilotError(Exception):
    """
    Base exception for all CausePilot errors.

    Attributes:
        message: Human-readable error description
        code: Machine-readable error code (CP_*)
        details: Additional context about the error
    """
    message: str
    code: str = "CP_INTERNAL_ERROR"
    details: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Serialize exception for logging/API responses."""
        result: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# Catalog / Rubric Pack Errors
# =============================================================================

@dataclass
class CatalogLoadError(CausePilotError):
    """Failed to read a rubric pack from file."""
    code: str = "CP_CATALOG_LOAD_ERROR"


@dataclass
class CatalogValidationError(CausePilotError):
    """Rubric pack or indicator catalog failed validation."""
    code: str = "CP_CATALOG_VALIDATION_ERROR"


@dataclass
class CatalogVersionMismatch(CausePilotError):
    """Rubric pack schema version is not supported."""
    code: str = "CP_CATALOG_VERSION_MISMATCH"


# =============================================================================
# Form Data Errors
# =============================================================================

@dataclass
class InvalidIndicatorStateError(CausePilotError):
    """Indicator state literal is not present/absent/unknown."""
    code: str = "CP_INVALID_INDICATOR_STATE"


@dataclass
class InvalidFormDataError(CausePilotError):
    """Causation form data has the wrong shape."""
    code: str = "CP_INVALID_FORM_DATA"


# =============================================================================
# Blame Tactic Errors
# =============================================================================

@dataclass
class UnknownTacticError(CausePilotError):
    """Referenced carrier blame tactic does not exist."""
    code: str = "CP_UNKNOWN_TACTIC"
