"""
Tests for the schemas module

Run: pytest tests/test_schemas.py -v
Or demo: python tests/test_schemas.py
"""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError


def test_symptom():
    """Symptom model"""
    from bloomflow_safety.schemas import Symptom, SymptomSeverity, SymptomCategory

    symptom = Symptom(name="  Cramps ", severity="mild", category="pain")

    assert symptom.name == "Cramps"  # stripped, case kept
    assert symptom.severity == SymptomSeverity.MILD
    assert symptom.category == SymptomCategory.PAIN
    assert symptom.notes is None
    assert symptom.id
    assert symptom.timestamp.tzinfo is not None

    print(f"✓ Symptom: {symptom.name}, severity={symptom.severity.value}")


def test_symptom_rejects_bad_input():
    """Empty name, unknown enums and unknown fields fail fast"""
    from bloomflow_safety.schemas import Symptom

    with pytest.raises(ValidationError):
        Symptom(name="   ", severity="mild", category="pain")

    with pytest.raises(ValidationError):
        Symptom(name="cramps", severity="extreme", category="pain")

    with pytest.raises(ValidationError):
        Symptom(name="cramps", severity="mild", category="skin")

    with pytest.raises(ValidationError):
        Symptom(name="cramps", category="pain")  # severity is required

    with pytest.raises(ValidationError):
        Symptom(name="cramps", severity="mild", category="pain", colour="red")

    print("✓ Invalid symptoms rejected")


def test_symptom_is_immutable():
    from bloomflow_safety.schemas import Symptom

    symptom = Symptom(name="cramps", severity="mild", category="pain")

    with pytest.raises(ValidationError):
        symptom.severity = "severe"


def test_naive_timestamp_is_utc():
    from bloomflow_safety.schemas import Symptom

    symptom = Symptom(
        name="headache",
        severity="moderate",
        category="other",
        timestamp=datetime(2025, 3, 1, 12, 0),
    )

    assert symptom.timestamp == datetime(2025, 3, 1, 12, 0, tzinfo=timezone.utc)


def test_severity_order():
    """Severity and action ranks"""
    from bloomflow_safety.schemas import SymptomSeverity, RecommendedAction

    assert [s.rank for s in SymptomSeverity] == [0, 1, 2, 3, 4]
    assert SymptomSeverity.max_of([]) == SymptomSeverity.NONE
    assert SymptomSeverity.max_of([
        SymptomSeverity.MILD, SymptomSeverity.CRITICAL, SymptomSeverity.MODERATE,
    ]) == SymptomSeverity.CRITICAL

    assert RecommendedAction.EMERGENCY.rank > RecommendedAction.URGENT.rank
    assert RecommendedAction.CONSULT.rank > RecommendedAction.MONITOR.rank

    print("✓ Severity order: " + " < ".join(s.value for s in SymptomSeverity))


def test_privacy_event_consent():
    from bloomflow_safety.schemas import PrivacyEvent

    shared = PrivacyEvent(action="data_shared", data_type="sensitive", details={"consent": True})
    assert shared.has_consent
    assert not shared.is_unconsented_share

    no_details = PrivacyEvent(action="data_shared", data_type="sensitive")
    assert not no_details.has_consent
    assert no_details.is_unconsented_share

    falsy = PrivacyEvent(action="data_shared", data_type="non-sensitive", details={"consent": 0})
    assert falsy.is_unconsented_share

    encrypted = PrivacyEvent(action="data_encrypted", data_type="sensitive")
    assert not encrypted.is_unconsented_share

    print("✓ PrivacyEvent consent checks")


def test_red_flag_event():
    from bloomflow_safety.schemas import RedFlagEvent

    unhandled = RedFlagEvent(
        symptom="Severe Bleeding",
        severity="critical",
        user_action="dismissed",
        ai_response="missing",
    )
    assert unhandled.is_critical_unhandled
    assert unhandled.id.startswith("redflag-")

    handled = RedFlagEvent(
        severity="critical",
        user_action="sought_care",
        ai_response="appropriate",
    )
    assert not handled.is_critical_unhandled

    high = RedFlagEvent(severity="high", user_action="acknowledged", ai_response="inappropriate")
    assert not high.is_critical_unhandled


def test_disclaimer_view_requires_time_spent():
    from bloomflow_safety.schemas import DisclaimerView

    with pytest.raises(ValidationError):
        DisclaimerView(type="medical", acknowledged=True)

    with pytest.raises(ValidationError):
        DisclaimerView(type="medical", acknowledged=True, time_spent=-1)

    assert DisclaimerView(type="medical", acknowledged=True, time_spent=0).time_spent == 0


def test_json_roundtrip():
    from bloomflow_safety.schemas import DisclaimerView

    view = DisclaimerView(type="ai_limitation", acknowledged=False, time_spent=4.2)

    restored = DisclaimerView.model_validate_json(view.model_dump_json())

    assert restored == view
    print(f"✓ JSON: {view.model_dump_json()}")


def test_parse_records():
    """Instances pass through, mappings are validated"""
    from bloomflow_safety.schemas import Symptom, parse_records

    existing = Symptom(name="bloating", severity="mild", category="digestive")

    records = parse_records(Symptom, [
        existing,
        {"name": "low mood", "severity": "moderate", "category": "mood"},
    ])

    assert records[0] is existing
    assert isinstance(records[1], Symptom)
    assert records[1].name == "low mood"

    with pytest.raises(ValidationError):
        parse_records(Symptom, [{"name": "low mood", "severity": "sad", "category": "mood"}])


def demo():
    print("=" * 60)
    print("BloomFlow Safety — schemas")
    print("=" * 60)

    test_symptom()
    test_symptom_rejects_bad_input()
    test_severity_order()
    test_privacy_event_consent()
    test_json_roundtrip()

    print("\n✅ Done")


if __name__ == "__main__":
    demo()
