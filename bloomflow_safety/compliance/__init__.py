"""
BloomFlow Safety — Compliance

Modules:
- scorer: compliance score, report generation, issue detection
- tracking: factories for disclaimer / red-flag / privacy records

Example:
    from bloomflow_safety.compliance import generate_report, check_compliance_issues

    report = generate_report(views, red_flag_events, privacy_events)
    print(f"Score: {report.compliance_score}")
    for issue in check_compliance_issues(report):
        print(issue)
"""

from .scorer import (
    ScoreBand,
    ComplianceScorer,
    calculate_compliance_score,
    generate_report,
    check_compliance_issues,
    score_band,
)

from .tracking import (
    track_disclaimer_view,
    track_red_flag,
    track_privacy_event,
)


__all__ = [
    # Scorer
    'ScoreBand',
    'ComplianceScorer',
    'calculate_compliance_score',
    'generate_report',
    'check_compliance_issues',
    'score_band',

    # Tracking
    'track_disclaimer_view',
    'track_red_flag',
    'track_privacy_event',
]
