"""
BloomFlow Safety — Escalation Routes
"""

from fastapi import APIRouter, Depends

from ...escalation import EscalationResult, compare_snapshots
from ..dependencies import get_engine, EngineManager
from ..models import EscalationRequest

router = APIRouter(prefix="/escalation", tags=["Escalation"])


@router.post("", response_model=EscalationResult)
async def check_escalation(
    request: EscalationRequest,
    engine: EngineManager = Depends(get_engine)
) -> EscalationResult:
    """Compare the worst severity of the current snapshot with the previous one"""
    return compare_snapshots(request.current, request.previous, engine.settings.escalation)
