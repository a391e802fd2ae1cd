"""
Tests for the compliance module

Run: pytest tests/test_compliance.py -v
Or demo: python tests/test_compliance.py
"""

from datetime import datetime, timedelta, timezone

import pytest

NOW = datetime(2025, 3, 1, 12, 0, tzinfo=timezone.utc)


def _view(acknowledged, days_ago=1):
    from bloomflow_safety.schemas import DisclaimerView
    return DisclaimerView(
        type="medical",
        acknowledged=acknowledged,
        time_spent=3.0,
        timestamp=NOW - timedelta(days=days_ago),
    )


def _red_flag(severity, ai_response):
    from bloomflow_safety.schemas import RedFlagEvent
    return RedFlagEvent(
        symptom="Severe Bleeding",
        severity=severity,
        user_action="acknowledged",
        ai_response=ai_response,
        timestamp=NOW,
    )


def _privacy(action, **details):
    from bloomflow_safety.schemas import PrivacyEvent
    return PrivacyEvent(action=action, data_type="sensitive", details=details, timestamp=NOW)


# =============================================================================
# SCORE
# =============================================================================

def test_empty_inputs():
    from bloomflow_safety.compliance import calculate_compliance_score, generate_report, check_compliance_issues

    assert calculate_compliance_score([], [], []) == 100

    report = generate_report(now=NOW)
    assert report.compliance_score == 100
    assert check_compliance_issues(report, now=NOW) == []


def test_scenario_score():
    """3 unacknowledged, 1 inappropriate, 1 share without consent → 55"""
    from bloomflow_safety.compliance import calculate_compliance_score

    score = calculate_compliance_score(
        [_view(False), _view(False), _view(False), _view(True)],
        [_red_flag("high", "inappropriate"), _red_flag("critical", "appropriate")],
        [_privacy("data_shared"), _privacy("data_shared", consent=True), _privacy("data_encrypted")],
    )

    assert score == 55
    print(f"✓ Score: {score}")


def test_score_clamps_to_zero():
    from bloomflow_safety.compliance import calculate_compliance_score

    assert calculate_compliance_score([_view(False)] * 25, [], []) == 0


def test_red_flag_deductions():
    from bloomflow_safety.compliance import calculate_compliance_score

    assert calculate_compliance_score([], [_red_flag("critical", "missing")], []) == 85
    assert calculate_compliance_score([], [_red_flag("high", "missing")], []) == 100
    assert calculate_compliance_score([], [_red_flag("low", "inappropriate")], []) == 90
    assert calculate_compliance_score([], [_red_flag("critical", "inappropriate")], []) == 90


def test_privacy_deductions():
    from bloomflow_safety.compliance import calculate_compliance_score

    assert calculate_compliance_score([], [], [_privacy("data_shared")]) == 80
    assert calculate_compliance_score([], [], [_privacy("data_shared", consent=False)]) == 80
    assert calculate_compliance_score([], [], [_privacy("data_shared", consent="yes")]) == 100
    assert calculate_compliance_score([], [], [_privacy("consent_revoked")]) == 100


def test_score_never_increases_with_more_violations():
    from bloomflow_safety.compliance import calculate_compliance_score

    views, red_flags, privacy = [], [], []
    additions = [
        lambda: views.append(_view(False)),
        lambda: red_flags.append(_red_flag("critical", "missing")),
        lambda: red_flags.append(_red_flag("medium", "inappropriate")),
        lambda: privacy.append(_privacy("data_shared")),
    ]

    previous = calculate_compliance_score(views, red_flags, privacy)
    for step in range(20):
        additions[step % len(additions)]()
        score = calculate_compliance_score(views, red_flags, privacy)
        assert 0 <= score <= 100
        assert score <= previous
        previous = score

    assert previous == 0


def test_mapping_records():
    from bloomflow_safety.compliance import calculate_compliance_score

    score = calculate_compliance_score(
        [{"type": "emergency", "acknowledged": False, "time_spent": 1.5}],
        [{"severity": "critical", "user_action": "dismissed", "ai_response": "missing"}],
        [{"action": "data_shared", "data_type": "sensitive", "details": {"consent": True}}],
    )

    assert score == 80


def test_custom_deductions():
    from bloomflow_safety.compliance import ComplianceScorer
    from bloomflow_safety.config import ComplianceConfig, DeductionConfig

    scorer = ComplianceScorer(ComplianceConfig(deductions=DeductionConfig(unacknowledged_disclaimer=1)))

    assert scorer.calculate_score([_view(False)] * 3, [], []) == 97


# =============================================================================
# REPORT & ISSUES
# =============================================================================

def test_generate_report():
    from bloomflow_safety.compliance import generate_report
    from bloomflow_safety.schemas import EthicalAIMetric

    metric = EthicalAIMetric(metric="explanations_shown", value=0.92, category="transparency", timestamp=NOW)
    report = generate_report(
        [_view(False)],
        [_red_flag("critical", "appropriate")],
        [_privacy("data_encrypted")],
        [metric],
        now=NOW,
    )

    assert report.compliance_score == 95
    assert report.last_updated == NOW
    assert len(report.disclaimer_views) == 1
    assert report.ethical_metrics == (metric,)

    with pytest.raises(Exception):
        report.compliance_score = 100


def test_report_uses_clock():
    from bloomflow_safety.compliance import ComplianceScorer

    scorer = ComplianceScorer(clock=lambda: NOW)

    assert scorer.generate_report().last_updated == NOW


def test_issues_in_fixed_order():
    from bloomflow_safety.compliance import generate_report, check_compliance_issues

    report = generate_report(
        [_view(False, days_ago=1), _view(False, days_ago=8), _view(True, days_ago=1)],
        [
            _red_flag("critical", "missing"),
            _red_flag("critical", "inappropriate"),
            _red_flag("critical", "appropriate"),
            _red_flag("high", "missing"),
        ],
        [_privacy("data_shared"), _privacy("data_shared", consent=True)],
        now=NOW,
    )

    issues = check_compliance_issues(report, now=NOW)

    assert issues == [
        "1 unacknowledged disclaimers in last 7 days",
        "2 critical red flags with inappropriate/missing AI response",
        "1 potential privacy violations detected",
    ]
    for issue in issues:
        print(f"⚠ {issue}")


def test_issue_window_boundary():
    from bloomflow_safety.compliance import generate_report, check_compliance_issues

    report = generate_report([_view(False, days_ago=7)], now=NOW)

    assert check_compliance_issues(report, now=NOW) == []
    assert check_compliance_issues(report, now=NOW - timedelta(seconds=1)) == [
        "1 unacknowledged disclaimers in last 7 days"
    ]


def test_issue_window_is_configurable():
    from bloomflow_safety.compliance import generate_report, check_compliance_issues, ComplianceScorer
    from bloomflow_safety.config import ComplianceConfig

    report = generate_report([_view(False, days_ago=1), _view(False, days_ago=20)], now=NOW)

    assert check_compliance_issues(report, now=NOW, window=timedelta(days=30)) == [
        "2 unacknowledged disclaimers in last 30 days"
    ]

    scorer = ComplianceScorer(ComplianceConfig(issue_window_days=2), clock=lambda: NOW)
    assert scorer.check_issues(report) == ["1 unacknowledged disclaimers in last 2 days"]


def test_issues_without_score_impact():
    """Issues are read from the report, independent of the score"""
    from bloomflow_safety.compliance import check_compliance_issues
    from bloomflow_safety.schemas import ComplianceReport

    report = ComplianceReport(
        red_flag_events=(_red_flag("critical", "inappropriate"),),
        compliance_score=100,
        last_updated=NOW,
    )

    assert check_compliance_issues(report, now=NOW.replace(tzinfo=None)) == [
        "1 critical red flags with inappropriate/missing AI response"
    ]


def test_score_band():
    from bloomflow_safety.compliance import score_band, ScoreBand

    assert score_band(100) == ScoreBand.GOOD
    assert score_band(90) == ScoreBand.GOOD
    assert score_band(89) == ScoreBand.WARNING
    assert score_band(70) == ScoreBand.WARNING
    assert score_band(69) == ScoreBand.CRITICAL
    assert score_band(0) == ScoreBand.CRITICAL


# =============================================================================
# TRACKING
# =============================================================================

def test_tracking_factories():
    from bloomflow_safety.compliance import track_disclaimer_view, track_red_flag, track_privacy_event
    from bloomflow_safety.schemas import DisclaimerType, PrivacyAction, DataSensitivity

    view = track_disclaimer_view(DisclaimerType.MEDICAL, False, 3.5, now=NOW)
    assert view.id.startswith("disclaimer-")
    assert view.viewed
    assert view.timestamp == NOW

    event = track_red_flag("Chest Pain", "critical", "emergency_contacted", "appropriate", "rec-1", now=NOW)
    assert event.id.startswith("redflag-")
    assert event.recommendation_id == "rec-1"

    details = {"consent": True}
    privacy = track_privacy_event(PrivacyAction.DATA_SHARED, DataSensitivity.SENSITIVE, details, now=NOW)
    details["consent"] = False
    assert privacy.id.startswith("privacy-")
    assert privacy.has_consent

    assert track_disclaimer_view("medical", True, 1.0).id != track_disclaimer_view("medical", True, 1.0).id


def demo():
    from bloomflow_safety.compliance import ComplianceScorer

    print("=" * 60)
    print("BloomFlow Safety — compliance")
    print("=" * 60)

    scorer = ComplianceScorer(clock=lambda: NOW)
    report = scorer.generate_report(
        [_view(False), _view(False), _view(False)],
        [_red_flag("high", "inappropriate")],
        [_privacy("data_shared")],
    )

    print(f"Score: {report.compliance_score} ({scorer.band(report.compliance_score).value})")
    for issue in scorer.check_issues(report):
        print(f"  ⚠ {issue}")


if __name__ == "__main__":
    demo()
