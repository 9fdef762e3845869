"""Carrier blame tactic endpoints."""

from typing import Optional

from fastapi import APIRouter, HTTPException

from api.schemas.requests import CounterArgumentsRequest
from api.schemas.responses import CounterArgumentPackageOut, TacticOut
from causepilot.engine import build_counter_arguments, render_counter_arguments_text
from causepilot.models import TacticType
from causepilot.tactics import BLAME_TACTICS

router = APIRouter(prefix="/tactics", tags=["Blame Tactics"])


@router.get("", response_model=list[TacticOut])
async def list_tactics(type: Optional[str] = None):
    """
    List carrier blame tactics.

    Optionally filter by type: installation, maintenance, manufacturing,
    manipulation
    """
    tactics = list(BLAME_TACTICS)
    if type:
        try:
            tactic_type = TacticType(type)
        except ValueError:
            raise HTTPException(
                status_code=400,
                detail=f"Unknown tactic type '{type}'. "
                       f"Available: {[t.value for t in TacticType]}",
            )
        tactics = [t for t in tactics if t.type == tactic_type]
    return [t.to_dict() for t in tactics]


@router.post("/counter-arguments", response_model=list[CounterArgumentPackageOut])
async def counter_arguments(request: CounterArgumentsRequest):
    """
    Build rebuttal packages for the tactics a carrier is relying on.

    Each package reports evidence completeness and the critical items
    still missing. Unknown tactic IDs return 404.
    """
    packages = build_counter_arguments(request.tactic_ids, request.checked_evidence)
    return [
        {
            **package.to_dict(),
            "rebuttal_text": render_counter_arguments_text(package.tactic),
        }
        for package in packages
    ]
