"""
BloomFlow Safety — Event tracking

Factories for the records the application appends when a user action
happens. The engine only builds them; persisting is up to the caller.
"""

from datetime import datetime
from typing import Any, Mapping, Optional

from ..clock import resolve_now
from ..schemas import (
    AIResponse,
    DataSensitivity,
    DisclaimerType,
    DisclaimerView,
    PrivacyAction,
    PrivacyEvent,
    RedFlagEvent,
    RedFlagEventSeverity,
    UserAction,
)


def track_disclaimer_view(
    type: DisclaimerType,
    acknowledged: bool,
    time_spent: float,
    now: Optional[datetime] = None,
) -> DisclaimerView:
    return DisclaimerView(
        timestamp=resolve_now(now),
        type=type,
        viewed=True,
        acknowledged=acknowledged,
        time_spent=time_spent,
    )


def track_red_flag(
    symptom: str,
    severity: RedFlagEventSeverity,
    user_action: UserAction,
    ai_response: AIResponse,
    recommendation_id: Optional[str] = None,
    now: Optional[datetime] = None,
) -> RedFlagEvent:
    return RedFlagEvent(
        timestamp=resolve_now(now),
        symptom=symptom,
        severity=severity,
        user_action=user_action,
        ai_response=ai_response,
        recommendation_id=recommendation_id,
    )


def track_privacy_event(
    action: PrivacyAction,
    data_type: DataSensitivity,
    details: Optional[Mapping[str, Any]] = None,
    now: Optional[datetime] = None,
) -> PrivacyEvent:
    """details is copied, later changes to the caller's dict don't leak in"""
    return PrivacyEvent(
        timestamp=resolve_now(now),
        action=action,
        data_type=data_type,
        details=dict(details or {}),
    )
