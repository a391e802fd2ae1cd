"""
BloomFlow Safety — Symptom schemas

Pydantic models for:
- Symptom: a single reported observation (user input)
- RedFlagSymptom: a matched dangerous pattern (rule output)

Severity and recommended action are ordered enums; compare them through
`rank`, never through the string values.
"""

import uuid
from datetime import datetime
from enum import Enum
from typing import Iterable, Optional

from pydantic import ConfigDict, Field, field_validator

from ..clock import utc_now
from .base import FrozenModel


class SymptomSeverity(str, Enum):
    """Symptom severity, ordered none < mild < moderate < severe < critical"""
    NONE = "none"
    MILD = "mild"
    MODERATE = "moderate"
    SEVERE = "severe"
    CRITICAL = "critical"

    @property
    def rank(self) -> int:
        return _SEVERITY_ORDER.index(self)

    @classmethod
    def max_of(cls, severities: Iterable["SymptomSeverity"]) -> "SymptomSeverity":
        """Worst severity of the collection (NONE when empty)"""
        worst = cls.NONE
        for severity in severities:
            if severity.rank > worst.rank:
                worst = severity
        return worst


_SEVERITY_ORDER = list(SymptomSeverity)


class SymptomCategory(str, Enum):
    """Symptom category"""
    PAIN = "pain"
    BLEEDING = "bleeding"
    MOOD = "mood"
    DIGESTIVE = "digestive"
    OTHER = "other"


class RecommendedAction(str, Enum):
    """What the user should do, ordered by urgency"""
    MONITOR = "monitor"
    CONSULT = "consult"
    URGENT = "urgent"
    EMERGENCY = "emergency"

    @property
    def rank(self) -> int:
        return _ACTION_ORDER.index(self)


_ACTION_ORDER = list(RecommendedAction)


class Symptom(FrozenModel):
    """
    Reported symptom.

    Example:
        symptom = Symptom(
            name="pelvic pain",
            severity=SymptomSeverity.SEVERE,
            category=SymptomCategory.PAIN,
        )
    """
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "pelvic pain",
                "severity": "severe",
                "category": "pain",
                "notes": "started this morning",
            }
        }
    )

    id: str = Field(default_factory=lambda: uuid.uuid4().hex)
    name: str = Field(..., description="Free-text label, e.g. 'fever'")
    severity: SymptomSeverity
    category: SymptomCategory
    notes: Optional[str] = None
    timestamp: datetime = Field(default_factory=utc_now)

    @field_validator("name")
    @classmethod
    def check_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("symptom name must not be empty")
        return v


class RedFlagSymptom(FrozenModel):
    """
    A matched red-flag pattern.

    `severity` is the pattern's own severity, not the severity of the
    symptom that triggered it.
    """
    symptom: str = Field(..., description="Display name of the pattern")
    severity: SymptomSeverity
    description: str
    recommended_action: RecommendedAction
    pattern_id: Optional[str] = Field(
        default=None,
        description="Catalog key of the rule that produced this flag"
    )
