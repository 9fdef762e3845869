"""Causation evaluation endpoint."""

import logging
import time
from datetime import datetime, timezone

from fastapi import APIRouter

from api import config
from api.routes import catalog as catalog_routes
from api.schemas.requests import CausationRequest
from api.schemas.responses import CausationResponse
from causepilot.canon import compute_catalog_hash, compute_form_hash, compute_result_hash
from causepilot.engine import CausationEvaluator
from causepilot.models import CausationFormData

router = APIRouter(prefix="/causation", tags=["Causation"])

logger = logging.getLogger("causepilot.api")


@router.post("/evaluate", response_model=CausationResponse)
async def evaluate_causation(request: CausationRequest):
    """
    Run the but-for causation test.

    Indicators omitted from the request are treated as unknown. Absent
    indicators never lower the score. A SUPPORTED decision requires at
    least one core evidence indicator to be present.
    """
    started = time.perf_counter()
    catalog = catalog_routes.catalog

    form = CausationFormData.from_dict(request.model_dump())
    result = CausationEvaluator(catalog=catalog).evaluate(form)

    input_hash = compute_form_hash(form)
    duration_ms = round((time.perf_counter() - started) * 1000, 2)
    logger.info(
        "Causation evaluated",
        extra={
            "decision": result.decision.value,
            "net_score": result.scoring.net_score,
            "input_hash_short": input_hash[:12],
            "catalog_id": catalog.id,
            "duration_ms": duration_ms,
        },
    )

    return CausationResponse(
        **result.to_dict(),
        catalog_id=catalog.id,
        catalog_hash=compute_catalog_hash(catalog),
        input_hash=input_hash,
        result_hash=compute_result_hash(result),
        evaluated_at=datetime.now(timezone.utc).isoformat(),
        engine_version=config.CP_ENGINE_VERSION,
    )
