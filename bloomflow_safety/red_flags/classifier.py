"""
BloomFlow Safety — Red-flag classifier

Maps reported symptoms to the red-flag patterns they trigger.

Evaluation order:
1. for each symptom (input order), each per-symptom pattern (catalog order)
2. each combination pattern (catalog order)

Matches are collapsed by a dedupe key: the last match for a key wins and
the key keeps the position of its first match. With the default key
(display name) no two returned flags share a `symptom`.
"""

import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple, Union

from ..config import ClassifierConfig, DedupeKey
from ..schemas import FrozenModel, RedFlagSymptom, Symptom, SymptomSeverity, parse_records
from .catalog import RedFlagCatalog, RedFlagPattern, load_catalog
from .emergency import EmergencyResources, get_emergency_resources

logger = logging.getLogger(__name__)

SymptomInput = Union[Symptom, Mapping[str, Any]]


class SymptomCheckResult(FrozenModel):
    """Red flags of a symptom set plus what to show the user"""
    red_flags: Tuple[RedFlagSymptom, ...] = ()
    highest_severity: SymptomSeverity = SymptomSeverity.NONE
    emergency_resources: Optional[EmergencyResources] = None

    @property
    def has_red_flags(self) -> bool:
        return len(self.red_flags) > 0


class RedFlagClassifier:
    """
    Red-flag classifier bound to a catalog.

    Example:
        classifier = RedFlagClassifier()

        flags = classifier.detect([
            Symptom(name="heavy flow", severity="severe", category="bleeding"),
        ])
        print(flags[0].symptom)  # Severe Bleeding
    """

    def __init__(
        self,
        catalog: Optional[RedFlagCatalog] = None,
        config: Optional[ClassifierConfig] = None,
    ):
        self.config = config or ClassifierConfig()
        if catalog is None:
            catalog = load_catalog(self.config.catalog_path)
        self.catalog = catalog

    def detect(self, symptoms: Iterable[SymptomInput]) -> List[RedFlagSymptom]:
        """
        Red flags triggered by `symptoms`.

        Args:
            symptoms: Symptom instances or mappings (validated, fail fast)

        Returns:
            Deduplicated red flags, empty for empty input
        """
        symptoms = parse_records(Symptom, symptoms)
        matches: Dict[str, RedFlagSymptom] = {}

        symptom_patterns = self.catalog.symptom_patterns
        for symptom in symptoms:
            for pattern in symptom_patterns:
                if pattern.trigger.when.matches(symptom):
                    flag = pattern.build_flag(symptom)
                    matches[self._dedupe_key(pattern, flag)] = flag

        for pattern in self.catalog.combination_patterns:
            if pattern.trigger.is_satisfied(symptoms):
                flag = pattern.build_flag()
                matches[self._dedupe_key(pattern, flag)] = flag

        flags = list(matches.values())
        logger.debug("%d symptoms → %d red flags (catalog %s)",
                     len(symptoms), len(flags), self.catalog.version)
        return flags

    def check(self, symptoms: Iterable[SymptomInput]) -> SymptomCheckResult:
        """
        Classify and pick emergency resources for the worst flag.

        Flags are logged by pattern id only, symptom text stays out of logs.
        """
        flags = self.detect(symptoms)
        if not flags:
            return SymptomCheckResult()

        worst = highest_severity(flags)
        logger.warning(
            "Red flags detected (%s): %s",
            worst.value,
            ", ".join(flag.pattern_id or "?" for flag in flags),
        )
        return SymptomCheckResult(
            red_flags=tuple(flags),
            highest_severity=worst,
            emergency_resources=get_emergency_resources(worst),
        )

    def _dedupe_key(self, pattern: RedFlagPattern, flag: RedFlagSymptom) -> str:
        if self.config.dedupe_by == DedupeKey.SYMPTOM:
            return flag.symptom
        if pattern.synthesized:
            return f"{pattern.key}:{flag.symptom.casefold()}"
        return pattern.key


def highest_severity(flags: Iterable[RedFlagSymptom]) -> SymptomSeverity:
    """Most severe flag severity (NONE for no flags)"""
    return SymptomSeverity.max_of(flag.severity for flag in flags)


def detect_red_flags(
    symptoms: Iterable[SymptomInput],
    catalog: Optional[RedFlagCatalog] = None,
    dedupe_by: DedupeKey = DedupeKey.SYMPTOM,
) -> List[RedFlagSymptom]:
    """Shortcut for RedFlagClassifier(catalog).detect(symptoms)"""
    classifier = RedFlagClassifier(catalog, ClassifierConfig(dedupe_by=dedupe_by))
    return classifier.detect(symptoms)


def check_symptoms(
    symptoms: Iterable[SymptomInput],
    catalog: Optional[RedFlagCatalog] = None,
) -> SymptomCheckResult:
    """Shortcut for RedFlagClassifier(catalog).check(symptoms)"""
    return RedFlagClassifier(catalog).check(symptoms)
