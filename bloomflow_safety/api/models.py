"""
BloomFlow Safety — API Models

Pydantic models for API requests and responses. Engine records
(Symptom, DisclaimerView, ...) are used directly as request fields.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..compliance import ScoreBand
from ..schemas import (
    ComplianceReport,
    DisclaimerView,
    EthicalAIMetric,
    PrivacyEvent,
    RedFlagEvent,
    Symptom,
)


# ============================================================
# Requests
# ============================================================

class DetectRequest(BaseModel):
    """Symptoms to check for red flags"""
    symptoms: List[Symptom] = Field(default_factory=list)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "symptoms": [
                    {"name": "fever 102F", "severity": "moderate", "category": "other"},
                    {"name": "cramps", "severity": "mild", "category": "pain"},
                ]
            }
        }
    )


class EscalationRequest(BaseModel):
    """Two symptom snapshots"""
    current: List[Symptom] = Field(default_factory=list)
    previous: List[Symptom] = Field(default_factory=list)


class ComplianceRequest(BaseModel):
    """Event records read from storage by the app"""
    disclaimer_views: List[DisclaimerView] = Field(default_factory=list)
    red_flag_events: List[RedFlagEvent] = Field(default_factory=list)
    privacy_events: List[PrivacyEvent] = Field(default_factory=list)
    ethical_metrics: List[EthicalAIMetric] = Field(default_factory=list)


# ============================================================
# Responses
# ============================================================

class ScoreResponse(BaseModel):
    compliance_score: int
    band: ScoreBand


class ReportResponse(BaseModel):
    report: ComplianceReport
    issues: List[str]
    band: ScoreBand


class CatalogResponse(BaseModel):
    version: str
    patterns: Dict[str, Any]


class HealthResponse(BaseModel):
    """Health check response"""
    status: str = "ok"
    version: str
    engine_loaded: bool
    catalog_version: Optional[str] = None
    catalog_patterns: int = 0


class ErrorResponse(BaseModel):
    """Error response"""
    error: str
    detail: Optional[str] = None
