"""
BloomFlow Safety — Settings

All engine parameters live in dataclasses for:
- Typed access through config.compliance.deductions.inappropriate_response
- Serialization to YAML/JSON
- Validation on construction (ConfigError)
"""

from dataclasses import dataclass, field
from datetime import timedelta
from enum import Enum
from typing import Mapping, Optional

from ..exceptions import ConfigError


# =============================================================================
# ENUMS
# =============================================================================

class DedupeKey(str, Enum):
    """How matched red flags are collapsed"""
    SYMPTOM = "symptom"     # by display name, last match wins
    PATTERN = "pattern"     # by catalog rule id


# =============================================================================
# RED-FLAG CLASSIFIER CONFIGURATION
# =============================================================================

@dataclass
class ClassifierConfig:
    """Red-flag classifier parameters"""

    # None → bundled catalog (bloomflow_safety/config/red_flags.yaml)
    catalog_path: Optional[str] = None
    dedupe_by: DedupeKey = DedupeKey.SYMPTOM

    def __post_init__(self):
        self.dedupe_by = DedupeKey(self.dedupe_by)


# =============================================================================
# ESCALATION CONFIGURATION
# =============================================================================

@dataclass
class EscalationConfig:
    """Escalation detector parameters"""

    # Minimum rank difference that counts as escalation
    min_rank_increase: int = 1

    def __post_init__(self):
        if self.min_rank_increase < 1:
            raise ConfigError("min_rank_increase must be >= 1")


# =============================================================================
# COMPLIANCE CONFIGURATION
# =============================================================================

@dataclass
class DeductionConfig:
    """Points deducted per offending event"""
    unacknowledged_disclaimer: int = 5
    inappropriate_response: int = 10
    missing_critical_response: int = 15
    unconsented_share: int = 20

    def __post_init__(self):
        for name, value in vars(self).items():
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigError(f"deduction '{name}' must be an integer, got {value!r}")
            if value < 0:
                raise ConfigError(f"deduction '{name}' must be >= 0, got {value}")


@dataclass
class ScoreBands:
    """Dashboard bands: score >= good → good, >= warning → warning"""
    good: int = 90
    warning: int = 70

    def __post_init__(self):
        if self.warning > self.good:
            raise ConfigError(f"warning band ({self.warning}) must not exceed good band ({self.good})")


@dataclass
class ComplianceConfig:
    """Compliance scorer parameters"""

    max_score: int = 100
    min_score: int = 0
    deductions: DeductionConfig = field(default_factory=DeductionConfig)
    bands: ScoreBands = field(default_factory=ScoreBands)

    # Window for "recent" unacknowledged disclaimers
    issue_window_days: float = 7.0

    def __post_init__(self):
        if isinstance(self.deductions, dict):
            self.deductions = DeductionConfig(**self.deductions)
        if isinstance(self.bands, dict):
            self.bands = ScoreBands(**self.bands)
        if self.min_score > self.max_score:
            raise ConfigError("min_score must not exceed max_score")
        if self.issue_window_days <= 0:
            raise ConfigError("issue_window_days must be positive")

    @property
    def issue_window(self) -> timedelta:
        return timedelta(days=self.issue_window_days)


# =============================================================================
# MAIN CONFIGURATION
# =============================================================================

@dataclass
class SafetyConfig:
    """
    Main BloomFlow Safety configuration.

    Example:
        config = SafetyConfig()
        print(config.compliance.deductions.unconsented_share)  # 20
        print(config.compliance.issue_window)  # 7 days, 0:00:00
    """

    version: str = "1.0.0"
    project_name: str = "BloomFlow Safety"

    classifier: ClassifierConfig = field(default_factory=ClassifierConfig)
    escalation: EscalationConfig = field(default_factory=EscalationConfig)
    compliance: ComplianceConfig = field(default_factory=ComplianceConfig)

    @classmethod
    def from_dict(cls, data: dict) -> "SafetyConfig":
        """Build from a plain mapping (e.g. loaded YAML)"""
        if data is None:
            data = {}
        if not isinstance(data, Mapping):
            raise ConfigError(f"configuration must be a mapping, got {type(data).__name__}")
        data = dict(data)
        try:
            return cls(
                version=str(data.get("version", cls.version)),
                project_name=data.get("project_name", cls.project_name),
                classifier=ClassifierConfig(**(data.get("classifier") or {})),
                escalation=EscalationConfig(**(data.get("escalation") or {})),
                compliance=ComplianceConfig(**(data.get("compliance") or {})),
            )
        except (TypeError, ValueError) as e:
            raise ConfigError(f"invalid configuration: {e}") from e


def get_default_config() -> SafetyConfig:
    """Default configuration: bundled catalog, standard deductions, 7-day window"""
    return SafetyConfig()
