"""
BloomFlow Safety — Emergency resources

Contacts shown next to red flags, chosen by the highest flag severity.
"""

from typing import Tuple

from ..schemas import FrozenModel, SymptomSeverity


class EmergencyResource(FrozenModel):
    name: str
    contact: str
    description: str


class EmergencyResources(FrozenModel):
    title: str
    resources: Tuple[EmergencyResource, ...]


BASE_RESOURCES = (
    EmergencyResource(
        name="Emergency Services",
        contact="911",
        description="Call for life-threatening emergencies",
    ),
    EmergencyResource(
        name="National Suicide Prevention Lifeline",
        contact="988",
        description="24/7 crisis support",
    ),
)

POISON_CONTROL = EmergencyResource(
    name="Poison Control",
    contact="1-800-222-1222",
    description="24/7 poison emergency help",
)

NURSE_LINE = EmergencyResource(
    name="Nurse Line",
    contact="Check with your insurance",
    description="24/7 nurse consultation",
)


def get_emergency_resources(severity: SymptomSeverity) -> EmergencyResources:
    """
    Resources for a severity level.

    critical → immediate attention + Poison Control
    severe   → urgent care + Nurse Line
    other    → consult your provider (base resources only)
    """
    severity = SymptomSeverity(severity)

    if severity == SymptomSeverity.CRITICAL:
        return EmergencyResources(
            title="Immediate Medical Attention Required",
            resources=BASE_RESOURCES + (POISON_CONTROL,),
        )

    if severity == SymptomSeverity.SEVERE:
        return EmergencyResources(
            title="Urgent Care Recommended",
            resources=BASE_RESOURCES + (NURSE_LINE,),
        )

    return EmergencyResources(
        title="Consult Your Healthcare Provider",
        resources=BASE_RESOURCES,
    )
