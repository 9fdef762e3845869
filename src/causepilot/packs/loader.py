"""
CausePilot Rubric Pack Loader

Loads and validates rubric packs from YAML or JSON files.

Converts Pydantic schema models to an IndicatorCatalog.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Union

import yaml
from pydantic import ValidationError

from ..catalog import PERILS
from ..exceptions import CatalogLoadError, CatalogValidationError, CatalogVersionMismatch
from ..models import Indicator, IndicatorCatalog, IndicatorCategory
from .schema import (
    SCHEMA_VERSION,
    IndicatorSchema,
    RubricPackSchema,
    check_schema_version,
    validate_rubric_pack,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Schema to Model Converters
# =============================================================================

def _convert_indicator(schema: IndicatorSchema) -> Indicator:
    """Convert IndicatorSchema to Indicator model."""
    return Indicator(
        id=schema.id,
        category=IndicatorCategory(schema.category),
        label=schema.label,
        weight=schema.weight,
        is_positive=schema.is_positive,
        description=schema.description,
    )


def _convert_rubric_pack(schema: RubricPackSchema) -> IndicatorCatalog:
    """
    Convert a validated pack to a catalog.

    Inactive indicators are dropped, along with their minimum-evidence
    entries. The built-in peril labels are used when the pack has none.
    """
    indicators = [_convert_indicator(i) for i in schema.indicators if i.is_active]
    active_ids = {i.id for i in indicators}
    minimum = [i for i in schema.minimum_evidence_indicators if i in active_ids]

    return IndicatorCatalog(
        indicators=tuple(indicators),
        perils=schema.perils or dict(PERILS),
        decision_threshold=schema.decision_threshold,
        minimum_evidence_indicators=tuple(minimum),
        id=schema.id,
        name=schema.name,
        version=schema.version,
    )


def _validate(data: Any, path: str = "") -> RubricPackSchema:
    if not isinstance(data, dict):
        raise CatalogValidationError(
            message="Rubric pack must be a mapping",
            details={"path": path, "type": type(data).__name__},
        )
    try:
        return validate_rubric_pack(data)
    except ValidationError as e:
        raise CatalogValidationError(
            message=f"Rubric pack validation failed: {e.error_count()} errors",
            details={"errors": e.errors(include_url=False, include_context=False), "path": path},
        )


# =============================================================================
# Rubric Pack Loader
# =============================================================================

class RubricPackLoader:
    """
    Loads rubric packs from YAML or JSON files.

    Usage:
        loader = RubricPackLoader()
        catalog = loader.load("packs/wind_rubric.yaml")
    """

    def __init__(self, strict_version: bool = True):
        """
        Initialize the loader.

        Args:
            strict_version: If True, reject packs with incompatible schema versions
        """
        self.strict_version = strict_version

    def load(self, path: Union[str, Path]) -> IndicatorCatalog:
        """
        Load a rubric pack from a file.

        Raises:
            CatalogLoadError: If file cannot be read
            CatalogValidationError: If validation fails
            CatalogVersionMismatch: If schema version incompatible
        """
        path = Path(path)

        try:
            data = self._load_file(path)
        except (OSError, yaml.YAMLError, json.JSONDecodeError) as e:
            raise CatalogLoadError(
                message=f"Failed to load rubric pack: {e}",
                details={"path": str(path), "error": str(e)},
            )

        if self.strict_version and isinstance(data, dict) and not check_schema_version(data):
            pack_version = data.get("schema_version", "unknown")
            raise CatalogVersionMismatch(
                message=f"Schema version mismatch: pack has {pack_version}, expected {SCHEMA_VERSION}",
                details={
                    "pack_version": pack_version,
                    "expected_version": SCHEMA_VERSION,
                },
            )

        schema = _validate(data, str(path))
        catalog = _convert_rubric_pack(schema)

        logger.info(
            "Loaded rubric pack %s v%s (%d indicators) from %s",
            catalog.id, catalog.version, len(catalog), path,
        )
        return catalog

    def _load_file(self, path: Path) -> Any:
        """Load data from YAML or JSON file."""
        with open(path, "r", encoding="utf-8") as f:
            if path.suffix.lower() in {".yaml", ".yml"}:
                return yaml.safe_load(f)
            elif path.suffix.lower() == ".json":
                return json.load(f)
            else:
                # Try YAML first, then JSON
                content = f.read()
                try:
                    return yaml.safe_load(content)
                except yaml.YAMLError:
                    return json.loads(content)


# =============================================================================
# Convenience Functions
# =============================================================================

def load_rubric_pack(path: Union[str, Path]) -> IndicatorCatalog:
    """Load a rubric pack from a file with a temporary loader."""
    loader = RubricPackLoader()
    return loader.load(path)


def load_rubric_pack_from_string(
    content: str,
    format: str = "yaml",
) -> IndicatorCatalog:
    """
    Load a rubric pack from a string.

    Args:
        content: YAML or JSON string
        format: "yaml" or "json"
    """
    try:
        if format.lower() == "json":
            data = json.loads(content)
        else:
            data = yaml.safe_load(content)
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise CatalogLoadError(
            message=f"Failed to parse rubric pack: {e}",
            details={"format": format},
        )

    schema = _validate(data)
    return _convert_rubric_pack(schema)
