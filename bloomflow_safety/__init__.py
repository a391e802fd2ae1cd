"""
BloomFlow Safety — Symptom safety & compliance engine

Rule-based checks behind the BloomFlow wellness app.

Modules:
- config: Settings and the bundled red-flag catalog
- schemas: Symptom and compliance event models
- red_flags: Red-flag catalog, classifier, emergency resources
- escalation: Worst-severity escalation between snapshots
- compliance: Compliance score, reports, issue detection
- api: FastAPI adapter
"""

__version__ = "1.0.0"

from .config import SafetyConfig, get_default_config
from .exceptions import BloomFlowSafetyError, CatalogError, ConfigError
from .red_flags import RedFlagClassifier, detect_red_flags, check_symptoms
from .escalation import detect_escalation
from .compliance import (
    ComplianceScorer,
    calculate_compliance_score,
    generate_report,
    check_compliance_issues,
)
