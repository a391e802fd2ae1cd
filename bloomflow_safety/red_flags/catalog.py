"""
BloomFlow Safety — Red-flag catalog

The catalog is data: a versioned mapping pattern key → rule definition,
shipped as bloomflow_safety/config/red_flags.yaml. New patterns are added
by editing (or extending) the catalog, the matching code stays the same.

Trigger kinds (tagged by `kind`):
- symptom: fires for every symptom matching `when`
- combination: fires once when each condition in `all_of` is met by some symptom
- manual: reference entry, looked up by callers, never fired automatically
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Annotated, Any, Dict, Iterator, List, Literal, Mapping, Optional, Sequence, Tuple, Union

import yaml
from pydantic import Field, ValidationError, model_validator

from ..config import DEFAULT_CATALOG_PATH, save_yaml
from ..exceptions import CatalogError
from ..schemas import (
    FrozenModel,
    RecommendedAction,
    RedFlagSymptom,
    Symptom,
    SymptomCategory,
    SymptomSeverity,
)

logger = logging.getLogger(__name__)

NAME_PLACEHOLDER = "{name}"


# =============================================================================
# CONDITIONS & TRIGGERS
# =============================================================================

class SymptomCondition(FrozenModel):
    """
    Condition on a single symptom. Every field that is set must hold.

    Example:
        SymptomCondition(category="pain", min_severity="mild")
    """
    category: Optional[SymptomCategory] = None
    severity: Optional[SymptomSeverity] = None
    min_severity: Optional[SymptomSeverity] = None
    name_contains: Optional[str] = None

    @model_validator(mode="after")
    def check_not_empty(self) -> "SymptomCondition":
        if (
            self.category is None
            and self.severity is None
            and self.min_severity is None
            and not self.name_contains
        ):
            raise ValueError("condition must constrain at least one field")
        return self

    def matches(self, symptom: Symptom) -> bool:
        if self.category is not None and symptom.category != self.category:
            return False
        if self.severity is not None and symptom.severity != self.severity:
            return False
        if self.min_severity is not None and symptom.severity.rank < self.min_severity.rank:
            return False
        if self.name_contains and self.name_contains.casefold() not in symptom.name.casefold():
            return False
        return True


class SymptomTrigger(FrozenModel):
    kind: Literal["symptom"] = "symptom"
    when: SymptomCondition
    # Take display name/description from the triggering symptom
    synthesize: bool = False


class CombinationTrigger(FrozenModel):
    kind: Literal["combination"] = "combination"
    all_of: Tuple[SymptomCondition, ...] = Field(..., min_length=1)

    def is_satisfied(self, symptoms: Sequence[Symptom]) -> bool:
        return all(
            any(condition.matches(s) for s in symptoms)
            for condition in self.all_of
        )


class ManualTrigger(FrozenModel):
    kind: Literal["manual"] = "manual"


Trigger = Annotated[
    Union[SymptomTrigger, CombinationTrigger, ManualTrigger],
    Field(discriminator="kind"),
]


# =============================================================================
# PATTERN
# =============================================================================

class RedFlagPattern(FrozenModel):
    """Catalog entry: what the flag looks like and when it fires"""
    key: str = Field(..., min_length=1)
    symptom: str = Field(..., min_length=1)
    severity: SymptomSeverity
    description: str
    recommended_action: RecommendedAction
    trigger: Trigger = Field(default_factory=ManualTrigger)

    @property
    def synthesized(self) -> bool:
        return isinstance(self.trigger, SymptomTrigger) and self.trigger.synthesize

    def build_flag(self, source: Optional[Symptom] = None) -> RedFlagSymptom:
        """Red flag emitted by this pattern (source = triggering symptom)"""
        symptom = self.symptom
        description = self.description
        if self.synthesized and source is not None:
            symptom = symptom.replace(NAME_PLACEHOLDER, source.name)
            description = description.replace(NAME_PLACEHOLDER, source.name)
        return RedFlagSymptom(
            symptom=symptom,
            severity=self.severity,
            description=description,
            recommended_action=self.recommended_action,
            pattern_id=self.key,
        )


# =============================================================================
# CATALOG
# =============================================================================

class RedFlagCatalog:
    """
    Versioned, ordered set of red-flag patterns.

    Example:
        catalog = RedFlagCatalog.from_yaml("red_flags.yaml")
        print(catalog.version, len(catalog))
        chest = catalog.get("chest_pain").build_flag()
    """

    def __init__(self, version: str, patterns: Sequence[RedFlagPattern]):
        if not version:
            raise CatalogError("catalog version is required")
        if not patterns:
            raise CatalogError("catalog has no patterns")

        self.version = str(version)
        self._patterns: Dict[str, RedFlagPattern] = {}
        names: Dict[str, str] = {}

        for pattern in patterns:
            if pattern.key in self._patterns:
                raise CatalogError(f"duplicate pattern key '{pattern.key}'")
            # Synthesized names come from symptoms, static ones must be unique
            if not pattern.synthesized:
                if pattern.symptom in names:
                    raise CatalogError(
                        f"patterns '{names[pattern.symptom]}' and '{pattern.key}' "
                        f"share the display name '{pattern.symptom}'"
                    )
                names[pattern.symptom] = pattern.key
            self._patterns[pattern.key] = pattern

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "RedFlagCatalog":
        if not isinstance(data, Mapping):
            raise CatalogError("catalog must be a mapping")

        raw_patterns = data.get("patterns")
        if not isinstance(raw_patterns, Mapping):
            raise CatalogError("catalog 'patterns' must be a mapping of key → pattern")

        return cls(data.get("version"), _parse_patterns(raw_patterns))

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> "RedFlagCatalog":
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise CatalogError(f"can't read catalog {path}: {e}") from e

        catalog = cls.from_dict(data or {})
        logger.info("Loaded red-flag catalog %s (%d patterns) from %s",
                    catalog.version, len(catalog), path)
        return catalog

    def extend(self, patterns: Mapping[str, Mapping[str, Any]], version: str) -> "RedFlagCatalog":
        """New catalog with extra (or replaced) patterns appended"""
        if version == self.version:
            raise CatalogError("extended catalog needs a new version")

        merged = dict(self._patterns)
        for pattern in _parse_patterns(patterns):
            merged[pattern.key] = pattern
        return RedFlagCatalog(version, list(merged.values()))

    # -------------------------------------------------------------------------
    # Serialization
    # -------------------------------------------------------------------------

    def to_dict(self) -> Dict[str, Any]:
        return {
            "version": self.version,
            "patterns": {
                key: pattern.model_dump(mode="json", exclude={"key"}, exclude_none=True)
                for key, pattern in self._patterns.items()
            },
        }

    def save_yaml(self, path: Union[str, Path]) -> None:
        save_yaml(self.to_dict(), path)

    # -------------------------------------------------------------------------
    # Access
    # -------------------------------------------------------------------------

    def get(self, key: str) -> RedFlagPattern:
        try:
            return self._patterns[key]
        except KeyError:
            raise CatalogError(f"unknown red-flag pattern '{key}'") from None

    @property
    def keys(self) -> List[str]:
        return list(self._patterns)

    @property
    def symptom_patterns(self) -> List[RedFlagPattern]:
        """Per-symptom rules, catalog order"""
        return [p for p in self._patterns.values() if isinstance(p.trigger, SymptomTrigger)]

    @property
    def combination_patterns(self) -> List[RedFlagPattern]:
        """Cross-symptom rules, catalog order"""
        return [p for p in self._patterns.values() if isinstance(p.trigger, CombinationTrigger)]

    def __iter__(self) -> Iterator[RedFlagPattern]:
        return iter(self._patterns.values())

    def __len__(self) -> int:
        return len(self._patterns)

    def __contains__(self, key: object) -> bool:
        return key in self._patterns

    def __repr__(self) -> str:
        return f"RedFlagCatalog(version={self.version!r}, patterns={len(self)})"


def _parse_patterns(raw_patterns: Mapping[str, Any]) -> List[RedFlagPattern]:
    patterns = []
    for key, body in raw_patterns.items():
        if not isinstance(body, Mapping):
            raise CatalogError(f"pattern '{key}' must be a mapping")
        try:
            patterns.append(RedFlagPattern.model_validate({**body, "key": key}))
        except ValidationError as e:
            raise CatalogError(f"invalid pattern '{key}': {e}") from e
    return patterns


def load_catalog(path: Optional[Union[str, Path]] = None) -> RedFlagCatalog:
    """Catalog from `path`, or the bundled one"""
    if path is None:
        return load_default_catalog()
    return RedFlagCatalog.from_yaml(path)


@lru_cache(maxsize=1)
def load_default_catalog() -> RedFlagCatalog:
    return RedFlagCatalog.from_yaml(DEFAULT_CATALOG_PATH)
