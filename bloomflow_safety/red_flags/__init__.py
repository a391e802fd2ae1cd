"""
BloomFlow Safety — Red flags

Modules:
- catalog: versioned red-flag patterns (data, loaded from YAML)
- classifier: symptom set → triggered red flags
- emergency: emergency contacts by severity

Example:
    from bloomflow_safety.red_flags import check_symptoms

    result = check_symptoms([
        {"name": "fever 102F", "severity": "moderate", "category": "other"},
        {"name": "cramps", "severity": "mild", "category": "pain"},
    ])
    for flag in result.red_flags:
        print(flag.symptom, flag.recommended_action.value)
"""

from .catalog import (
    SymptomCondition,
    SymptomTrigger,
    CombinationTrigger,
    ManualTrigger,
    RedFlagPattern,
    RedFlagCatalog,
    load_catalog,
    load_default_catalog,
)

from .classifier import (
    SymptomCheckResult,
    RedFlagClassifier,
    highest_severity,
    detect_red_flags,
    check_symptoms,
)

from .emergency import (
    EmergencyResource,
    EmergencyResources,
    get_emergency_resources,
)


__all__ = [
    # Catalog
    'SymptomCondition',
    'SymptomTrigger',
    'CombinationTrigger',
    'ManualTrigger',
    'RedFlagPattern',
    'RedFlagCatalog',
    'load_catalog',
    'load_default_catalog',

    # Classifier
    'SymptomCheckResult',
    'RedFlagClassifier',
    'highest_severity',
    'detect_red_flags',
    'check_symptoms',

    # Emergency
    'EmergencyResource',
    'EmergencyResources',
    'get_emergency_resources',
]
