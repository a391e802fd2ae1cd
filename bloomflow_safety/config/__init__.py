"""BloomFlow Safety — Configuration module"""
from pathlib import Path

from .settings import (
    SafetyConfig,
    get_default_config,
    ClassifierConfig,
    EscalationConfig,
    ComplianceConfig,
    DeductionConfig,
    ScoreBands,
    DedupeKey,
)
from .loader import save_config, load_config, save_yaml, load_yaml

DEFAULT_CATALOG_PATH = Path(__file__).parent / "red_flags.yaml"

__all__ = [
    "SafetyConfig",
    "get_default_config",
    "ClassifierConfig",
    "EscalationConfig",
    "ComplianceConfig",
    "DeductionConfig",
    "ScoreBands",
    "DedupeKey",
    "DEFAULT_CATALOG_PATH",
    "save_config",
    "load_config",
    "save_yaml",
    "load_yaml",
]
