"""
BloomFlow Safety — Compliance scorer

Score starts at 100 and loses points per offending event:
- unacknowledged disclaimer                     -5
- inappropriate response to a red flag          -10
- missing response to a critical red flag       -15
- data shared without consent                   -20

The result is clamped to [0, 100]. Issue detection is a separate read of
a ComplianceReport and does not depend on the score.
"""

import logging
from datetime import datetime, timedelta
from enum import Enum
from typing import Any, Iterable, List, Mapping, Optional, Union

from pydantic import BaseModel

from ..clock import Clock, resolve_now
from ..config import ComplianceConfig
from ..schemas import (
    AIResponse,
    ComplianceReport,
    DisclaimerView,
    EthicalAIMetric,
    PrivacyEvent,
    RedFlagEvent,
    RedFlagEventSeverity,
    parse_records,
)

logger = logging.getLogger(__name__)

Record = Union[BaseModel, Mapping[str, Any]]


class ScoreBand(str, Enum):
    """Dashboard band of a compliance score"""
    GOOD = "good"
    WARNING = "warning"
    CRITICAL = "critical"


class ComplianceScorer:
    """
    Compliance scoring, report generation and issue detection.

    Example:
        scorer = ComplianceScorer()

        report = scorer.generate_report(
            disclaimer_views=views,
            red_flag_events=red_flags,
            privacy_events=privacy,
        )
        print(report.compliance_score, scorer.band(report.compliance_score).value)

        for issue in scorer.check_issues(report):
            print(f"⚠ {issue}")
    """

    def __init__(
        self,
        config: Optional[ComplianceConfig] = None,
        clock: Optional[Clock] = None,
    ):
        self.config = config or ComplianceConfig()
        self.clock = clock

    def calculate_score(
        self,
        disclaimer_views: Iterable[Record],
        red_flag_events: Iterable[Record],
        privacy_events: Iterable[Record],
    ) -> int:
        """
        Compliance score of the given events.

        Returns:
            int in [min_score, max_score]
        """
        views = parse_records(DisclaimerView, disclaimer_views)
        red_flags = parse_records(RedFlagEvent, red_flag_events)
        privacy = parse_records(PrivacyEvent, privacy_events)
        deductions = self.config.deductions

        unacknowledged = sum(1 for v in views if not v.acknowledged)
        inappropriate = sum(1 for e in red_flags if e.ai_response == AIResponse.INAPPROPRIATE)
        missing_critical = sum(
            1 for e in red_flags
            if e.severity == RedFlagEventSeverity.CRITICAL and e.ai_response == AIResponse.MISSING
        )
        unconsented = sum(1 for e in privacy if e.is_unconsented_share)

        score = self.config.max_score
        score -= unacknowledged * deductions.unacknowledged_disclaimer
        score -= inappropriate * deductions.inappropriate_response
        score -= missing_critical * deductions.missing_critical_response
        score -= unconsented * deductions.unconsented_share

        clamped = max(self.config.min_score, min(self.config.max_score, score))
        logger.debug(
            "Compliance score %d (raw %d): %d unacknowledged, %d inappropriate, "
            "%d missing critical, %d unconsented shares",
            clamped, score, unacknowledged, inappropriate, missing_critical, unconsented,
        )
        return clamped

    def generate_report(
        self,
        disclaimer_views: Iterable[Record] = (),
        red_flag_events: Iterable[Record] = (),
        privacy_events: Iterable[Record] = (),
        ethical_metrics: Iterable[Record] = (),
        now: Optional[datetime] = None,
    ) -> ComplianceReport:
        """Fresh report: inputs + score + last_updated"""
        views = parse_records(DisclaimerView, disclaimer_views)
        red_flags = parse_records(RedFlagEvent, red_flag_events)
        privacy = parse_records(PrivacyEvent, privacy_events)
        metrics = parse_records(EthicalAIMetric, ethical_metrics)

        return ComplianceReport(
            disclaimer_views=tuple(views),
            red_flag_events=tuple(red_flags),
            privacy_events=tuple(privacy),
            ethical_metrics=tuple(metrics),
            compliance_score=self.calculate_score(views, red_flags, privacy),
            last_updated=resolve_now(now, self.clock),
        )

    def check_issues(
        self,
        report: Union[ComplianceReport, Mapping[str, Any]],
        now: Optional[datetime] = None,
        window: Optional[timedelta] = None,
    ) -> List[str]:
        """
        Actionable warnings of a report, in fixed order:
        disclaimers, red flags, privacy.

        Args:
            report: ComplianceReport (or mapping)
            now: Reference time for the disclaimer window (default: clock)
            window: Disclaimer window (default: config.issue_window, 7 days)
        """
        if not isinstance(report, ComplianceReport):
            report = ComplianceReport.model_validate(report)

        now = resolve_now(now, self.clock)
        window = window if window is not None else self.config.issue_window
        issues = []

        recent_unacknowledged = [
            v for v in report.disclaimer_views
            if not v.acknowledged and now - v.timestamp < window
        ]
        if recent_unacknowledged:
            issues.append(
                f"{len(recent_unacknowledged)} unacknowledged disclaimers "
                f"in last {_format_days(window)} days"
            )

        critical_unhandled = [e for e in report.red_flag_events if e.is_critical_unhandled]
        if critical_unhandled:
            issues.append(
                f"{len(critical_unhandled)} critical red flags "
                f"with inappropriate/missing AI response"
            )

        violations = [e for e in report.privacy_events if e.is_unconsented_share]
        if violations:
            issues.append(f"{len(violations)} potential privacy violations detected")

        if issues:
            logger.warning("Compliance issues: %s", "; ".join(issues))
        return issues

    def band(self, score: int) -> ScoreBand:
        bands = self.config.bands
        if score >= bands.good:
            return ScoreBand.GOOD
        if score >= bands.warning:
            return ScoreBand.WARNING
        return ScoreBand.CRITICAL


def _format_days(window: timedelta) -> str:
    return f"{window / timedelta(days=1):g}"


# =============================================================================
# SHORTCUTS
# =============================================================================

def calculate_compliance_score(
    disclaimer_views: Iterable[Record],
    red_flag_events: Iterable[Record],
    privacy_events: Iterable[Record],
    config: Optional[ComplianceConfig] = None,
) -> int:
    return ComplianceScorer(config).calculate_score(
        disclaimer_views, red_flag_events, privacy_events
    )


def generate_report(
    disclaimer_views: Iterable[Record] = (),
    red_flag_events: Iterable[Record] = (),
    privacy_events: Iterable[Record] = (),
    ethical_metrics: Iterable[Record] = (),
    now: Optional[datetime] = None,
    config: Optional[ComplianceConfig] = None,
) -> ComplianceReport:
    return ComplianceScorer(config).generate_report(
        disclaimer_views, red_flag_events, privacy_events, ethical_metrics, now=now
    )


def check_compliance_issues(
    report: Union[ComplianceReport, Mapping[str, Any]],
    now: Optional[datetime] = None,
    window: Optional[timedelta] = None,
    config: Optional[ComplianceConfig] = None,
) -> List[str]:
    return ComplianceScorer(config).check_issues(report, now=now, window=window)


def score_band(score: int, config: Optional[ComplianceConfig] = None) -> ScoreBand:
    return ComplianceScorer(config).band(score)
