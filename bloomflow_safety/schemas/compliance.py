"""
BloomFlow Safety — Compliance schemas

Append-only event records created by the surrounding application:
- DisclaimerView: a legal/medical notice was shown
- RedFlagEvent: a red flag was surfaced and how the system responded
- PrivacyEvent: a data-handling action
- EthicalAIMetric: a free-form metric sample

ComplianceReport is the scorer's output and is rebuilt on every
recomputation.
"""

import uuid
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from pydantic import ConfigDict, Field

from ..clock import utc_now
from .base import FrozenModel


def _new_id(prefix: str) -> str:
    return f"{prefix}-{uuid.uuid4().hex}"


# =============================================================================
# ENUMS
# =============================================================================

class DisclaimerType(str, Enum):
    """Kind of notice"""
    MEDICAL = "medical"
    DATA_PRIVACY = "data_privacy"
    AI_LIMITATION = "ai_limitation"
    EMERGENCY = "emergency"


class RedFlagEventSeverity(str, Enum):
    """Severity recorded on a red-flag event"""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class UserAction(str, Enum):
    """What the user did after seeing a red flag"""
    ACKNOWLEDGED = "acknowledged"
    DISMISSED = "dismissed"
    SOUGHT_CARE = "sought_care"
    EMERGENCY_CONTACTED = "emergency_contacted"


class AIResponse(str, Enum):
    """How the system responded to a red flag"""
    APPROPRIATE = "appropriate"
    INAPPROPRIATE = "inappropriate"
    MISSING = "missing"


class PrivacyAction(str, Enum):
    """Data-handling action"""
    DATA_ENCRYPTED = "data_encrypted"
    DATA_SHARED = "data_shared"
    CONSENT_GRANTED = "consent_granted"
    CONSENT_REVOKED = "consent_revoked"
    AUDIT_ACCESSED = "audit_accessed"


class DataSensitivity(str, Enum):
    """Sensitivity tag of the data involved"""
    SENSITIVE = "sensitive"
    NON_SENSITIVE = "non-sensitive"


class EthicalCategory(str, Enum):
    """Ethical AI metric category"""
    BIAS = "bias"
    TRANSPARENCY = "transparency"
    SAFETY = "safety"
    PRIVACY = "privacy"
    ACCOUNTABILITY = "accountability"


# =============================================================================
# EVENTS
# =============================================================================

class DisclaimerView(FrozenModel):
    """
    A disclaimer was shown to the user.

    Example:
        view = DisclaimerView(
            type=DisclaimerType.MEDICAL,
            acknowledged=True,
            time_spent=12.5,
        )
    """
    id: str = Field(default_factory=lambda: _new_id("disclaimer"))
    timestamp: datetime = Field(default_factory=utc_now)
    type: DisclaimerType
    viewed: bool = True
    acknowledged: bool
    time_spent: float = Field(..., ge=0.0, description="Seconds")


class RedFlagEvent(FrozenModel):
    """A red flag was surfaced to the user"""
    id: str = Field(default_factory=lambda: _new_id("redflag"))
    timestamp: datetime = Field(default_factory=utc_now)
    symptom: str = Field(default="", description="Display name of the flag")
    severity: RedFlagEventSeverity
    user_action: UserAction
    ai_response: AIResponse
    recommendation_id: Optional[str] = None

    @property
    def is_critical_unhandled(self) -> bool:
        """Critical flag with a missing or inappropriate response"""
        return (
            self.severity == RedFlagEventSeverity.CRITICAL
            and self.ai_response in (AIResponse.MISSING, AIResponse.INAPPROPRIATE)
        )


class PrivacyEvent(FrozenModel):
    """
    A data-handling action.

    `details` is free-form; for DATA_SHARED it must carry a truthy
    "consent" entry, otherwise the share counts as a violation.
    """
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "action": "data_shared",
                "data_type": "sensitive",
                "details": {"consent": True, "recipient": "clinician"},
            }
        }
    )

    id: str = Field(default_factory=lambda: _new_id("privacy"))
    timestamp: datetime = Field(default_factory=utc_now)
    action: PrivacyAction
    data_type: DataSensitivity
    details: Dict[str, Any] = Field(default_factory=dict)

    @property
    def has_consent(self) -> bool:
        return bool(self.details.get("consent"))

    @property
    def is_unconsented_share(self) -> bool:
        return self.action == PrivacyAction.DATA_SHARED and not self.has_consent


class EthicalAIMetric(FrozenModel):
    """Ethical AI metric sample, carried through reports untouched"""
    timestamp: datetime = Field(default_factory=utc_now)
    metric: str
    value: float
    category: EthicalCategory


# =============================================================================
# REPORT
# =============================================================================

class ComplianceReport(FrozenModel):
    """Inputs of a compliance computation plus the derived score"""
    disclaimer_views: Tuple[DisclaimerView, ...] = ()
    red_flag_events: Tuple[RedFlagEvent, ...] = ()
    privacy_events: Tuple[PrivacyEvent, ...] = ()
    ethical_metrics: Tuple[EthicalAIMetric, ...] = ()
    compliance_score: int = Field(..., ge=0, le=100)
    last_updated: datetime
