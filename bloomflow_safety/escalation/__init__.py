"""
BloomFlow Safety — Escalation detection

Example:
    from bloomflow_safety.escalation import detect_escalation

    if detect_escalation(current_snapshot, previous_snapshot):
        print("Symptoms are getting worse")
"""

from .detector import (
    EscalationResult,
    max_severity,
    compare_snapshots,
    detect_escalation,
)


__all__ = [
    'EscalationResult',
    'max_severity',
    'compare_snapshots',
    'detect_escalation',
]
