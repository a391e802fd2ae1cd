"""
BloomFlow Safety — Exceptions

Invalid symptom/event data is rejected by the pydantic schemas
(pydantic.ValidationError); the errors below cover what the schemas can't.
"""


class BloomFlowSafetyError(Exception):
    """Base error of the safety engine"""


class CatalogError(BloomFlowSafetyError):
    """Red-flag catalog can't be loaded or is inconsistent"""


class ConfigError(BloomFlowSafetyError):
    """Invalid configuration value"""
