"""
CausePilot Indicator Models

Static rubric configuration consumed read-only by the evaluator.

Key components:
- Indicator: A single named piece of evidence with a fixed weight
- IndicatorCatalog: An ordered, validated set of indicators plus the
  decision threshold, minimum-evidence ids and peril labels
"""
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterator, Mapping, Optional

from ..exceptions import CatalogValidationError
from .enums import IndicatorCategory


# =============================================================================
# Indicator
# =============================================================================

@dataclass(frozen=True)
class Indicator:
    """
    A single evidence indicator in the causation rubric.

    Attributes:
        id: Unique symbolic key
        category: Rubric grouping; CORE_EVIDENCE drives gaps and the gate
        label: Human-readable description
        weight: Points applied when the indicator is present
        is_positive: True if presence supports the tested peril,
            False if it supports an alternative (non-covered) cause
        description: Longer guidance text for the adjuster
    """
    id: str
    category: IndicatorCategory
    label: str
    weight: int
    is_positive: bool
    description: str = ""

    @property
    def is_core_evidence(self) -> bool:
        return self.category == IndicatorCategory.CORE_EVIDENCE

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "category": self.category.value,
            "label": self.label,
            "weight": self.weight,
            "is_positive": self.is_positive,
            "description": self.description,
        }


# =============================================================================
# Indicator Catalog
# =============================================================================

@dataclass(frozen=True)
class IndicatorCatalog:
    """
    Immutable rubric used for one or many evaluations.

    Iteration order of ``indicators`` is the order of the indicator
    breakdown in every result. The id lookup table is built once on
    construction and never mutated.

    Raises:
        CatalogValidationError: on duplicate ids, non-positive weights or
            threshold, or a minimum-evidence id that is not a positive
            core-evidence indicator of this catalog
    """
    indicators: tuple[Indicator, ...]
    perils: Mapping[str, str]
    decision_threshold: int
    minimum_evidence_indicators: tuple[str, ...]
    id: str = "default"
    name: str = "Default wind/storm rubric"
    version: str = "1.0"

    _by_id: Mapping[str, Indicator] = field(
        default_factory=lambda: MappingProxyType({}), init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        object.__setattr__(self, "indicators", tuple(self.indicators))
        object.__setattr__(
            self, "minimum_evidence_indicators", tuple(self.minimum_evidence_indicators)
        )
        object.__setattr__(self, "perils", MappingProxyType(dict(self.perils)))

        errors: list[str] = []
        by_id: dict[str, Indicator] = {}
        for indicator in self.indicators:
            if indicator.id in by_id:
                errors.append(f"Duplicate indicator ID: '{indicator.id}'")
            if indicator.weight <= 0:
                errors.append(
                    f"Indicator '{indicator.id}' has non-positive weight {indicator.weight}"
                )
            by_id[indicator.id] = indicator

        if self.decision_threshold <= 0:
            errors.append(f"Decision threshold must be positive, got {self.decision_threshold}")

        if not self.minimum_evidence_indicators:
            errors.append("At least one minimum-evidence indicator is required")
        for indicator_id in self.minimum_evidence_indicators:
            indicator = by_id.get(indicator_id)
            if indicator is None:
                errors.append(f"Minimum-evidence indicator '{indicator_id}' is not in the catalog")
            elif not (indicator.is_positive and indicator.is_core_evidence):
                errors.append(
                    f"Minimum-evidence indicator '{indicator_id}' must be a positive "
                    f"core_evidence indicator"
                )

        if errors:
            raise CatalogValidationError(
                message=f"Indicator catalog '{self.id}' is invalid",
                details={"errors": errors},
            )

        object.__setattr__(self, "_by_id", MappingProxyType(by_id))

    def __iter__(self) -> Iterator[Indicator]:
        return iter(self.indicators)

    def __len__(self) -> int:
        return len(self.indicators)

    def get(self, indicator_id: str) -> Optional[Indicator]:
        """Get an indicator by ID."""
        return self._by_id.get(indicator_id)

    def peril_label(self, peril_code: str) -> str:
        """Display label for a peril code; unknown codes fall back to the raw code."""
        if peril_code in self.perils:
            return self.perils[peril_code]
        return peril_code

    @property
    def minimum_evidence(self) -> list[Indicator]:
        """Minimum-evidence indicators in gate order."""
        return [self._by_id[i] for i in self.minimum_evidence_indicators]
