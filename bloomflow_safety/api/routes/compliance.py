"""
BloomFlow Safety — Compliance Routes

Endpoints:
- score only
- full report with issues
"""

from fastapi import APIRouter, Depends

from ..dependencies import get_engine, EngineManager
from ..models import ComplianceRequest, ReportResponse, ScoreResponse

router = APIRouter(prefix="/compliance", tags=["Compliance"])


@router.post("/score", response_model=ScoreResponse)
async def compliance_score(
    request: ComplianceRequest,
    engine: EngineManager = Depends(get_engine)
) -> ScoreResponse:
    """Compliance score (0-100) and its dashboard band"""
    score = engine.scorer.calculate_score(
        request.disclaimer_views,
        request.red_flag_events,
        request.privacy_events,
    )
    return ScoreResponse(compliance_score=score, band=engine.scorer.band(score))


@router.post("/report", response_model=ReportResponse)
async def compliance_report(
    request: ComplianceRequest,
    engine: EngineManager = Depends(get_engine)
) -> ReportResponse:
    """
    Full compliance report.

    Issues look at unacknowledged disclaimers of the last 7 days (by
    default), critical red flags without a proper response and shares
    without consent.
    """
    report = engine.scorer.generate_report(
        request.disclaimer_views,
        request.red_flag_events,
        request.privacy_events,
        request.ethical_metrics,
    )
    return ReportResponse(
        report=report,
        issues=engine.scorer.check_issues(report, now=report.last_updated),
        band=engine.scorer.band(report.compliance_score),
    )
