"""
BloomFlow Safety — Data schemas

Pydantic models shared by all engine components.

Components:
- symptom.py: Symptom, RedFlagSymptom and the severity/category enums
- compliance.py: DisclaimerView, RedFlagEvent, PrivacyEvent,
  EthicalAIMetric, ComplianceReport

Example:
    from bloomflow_safety.schemas import Symptom, SymptomSeverity, SymptomCategory

    symptom = Symptom(
        name="cramps",
        severity=SymptomSeverity.MILD,
        category=SymptomCategory.PAIN,
    )

    json_data = symptom.model_dump_json()
    restored = Symptom.model_validate_json(json_data)
"""

from .base import FrozenModel, parse_records

# Symptom schemas
from .symptom import (
    SymptomSeverity,
    SymptomCategory,
    RecommendedAction,
    Symptom,
    RedFlagSymptom,
)

# Compliance schemas
from .compliance import (
    DisclaimerType,
    RedFlagEventSeverity,
    UserAction,
    AIResponse,
    PrivacyAction,
    DataSensitivity,
    EthicalCategory,
    DisclaimerView,
    RedFlagEvent,
    PrivacyEvent,
    EthicalAIMetric,
    ComplianceReport,
)


__all__ = [
    "FrozenModel",
    "parse_records",

    # Symptom
    "SymptomSeverity",
    "SymptomCategory",
    "RecommendedAction",
    "Symptom",
    "RedFlagSymptom",

    # Compliance
    "DisclaimerType",
    "RedFlagEventSeverity",
    "UserAction",
    "AIResponse",
    "PrivacyAction",
    "DataSensitivity",
    "EthicalCategory",
    "DisclaimerView",
    "RedFlagEvent",
    "PrivacyEvent",
    "EthicalAIMetric",
    "ComplianceReport",
]
