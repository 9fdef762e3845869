"""Indicator catalog endpoints."""

from fastapi import APIRouter

from api.schemas.responses import CatalogResponse, IndicatorOut, PerilOut
from causepilot.canon import compute_catalog_hash
from causepilot.catalog import DEFAULT_CATALOG
from causepilot.models import IndicatorCatalog

router = APIRouter(prefix="/catalog", tags=["Catalog"])

# Active catalog (set by main.py)
catalog: IndicatorCatalog = DEFAULT_CATALOG


def set_catalog(c: IndicatorCatalog):
    global catalog
    catalog = c


@router.get("/indicators", response_model=CatalogResponse)
async def list_indicators():
    """
    List the active indicator catalog in scoring order.

    The order here is the order of indicator_breakdown in every
    causation result.
    """
    minimum = set(catalog.minimum_evidence_indicators)
    return CatalogResponse(
        catalog_id=catalog.id,
        name=catalog.name,
        version=catalog.version,
        catalog_hash=compute_catalog_hash(catalog),
        decision_threshold=catalog.decision_threshold,
        minimum_evidence_indicators=list(catalog.minimum_evidence_indicators),
        indicators=[
            IndicatorOut(**i.to_dict(), minimum_evidence=i.id in minimum)
            for i in catalog
        ],
    )


@router.get("/perils", response_model=list[PerilOut])
async def list_perils():
    """Peril codes accepted as peril_tested, with display labels."""
    return [PerilOut(value=code, label=label) for code, label in catalog.perils.items()]
