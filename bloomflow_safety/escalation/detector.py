"""
BloomFlow Safety — Escalation detector

Compares the worst severity of two symptom snapshots. Only the single
worst symptom of each snapshot counts: a new mild symptom next to an
existing critical one is not an escalation.
"""

import logging
from typing import Any, Iterable, Mapping, Optional, Union

from pydantic import computed_field

from ..config import EscalationConfig
from ..schemas import FrozenModel, Symptom, SymptomSeverity, parse_records

logger = logging.getLogger(__name__)

SymptomInput = Union[Symptom, Mapping[str, Any]]


class EscalationResult(FrozenModel):
    """Outcome of comparing two snapshots"""
    escalated: bool
    current_max: SymptomSeverity
    previous_max: SymptomSeverity

    @computed_field
    @property
    def delta(self) -> int:
        """Rank change, negative when symptoms eased"""
        return self.current_max.rank - self.previous_max.rank


def max_severity(symptoms: Iterable[SymptomInput]) -> SymptomSeverity:
    """Worst severity in the snapshot, NONE for an empty one"""
    return SymptomSeverity.max_of(s.severity for s in parse_records(Symptom, symptoms))


def compare_snapshots(
    current: Iterable[SymptomInput],
    previous: Iterable[SymptomInput],
    config: Optional[EscalationConfig] = None,
) -> EscalationResult:
    """
    Compare the worst severity of `current` against `previous`.

    Args:
        current: Newest snapshot
        previous: Snapshot it is compared to
        config: EscalationConfig (min_rank_increase, default 1 = strictly greater)

    Returns:
        EscalationResult
    """
    config = config or EscalationConfig()

    current_max = max_severity(current)
    previous_max = max_severity(previous)
    escalated = current_max.rank - previous_max.rank >= config.min_rank_increase

    if escalated:
        logger.info("Severity escalated: %s → %s", previous_max.value, current_max.value)

    return EscalationResult(
        escalated=escalated,
        current_max=current_max,
        previous_max=previous_max,
    )


def detect_escalation(
    current: Iterable[SymptomInput],
    previous: Iterable[SymptomInput],
) -> bool:
    """True iff the worst current severity ranks above the worst previous one"""
    return compare_snapshots(current, previous).escalated
