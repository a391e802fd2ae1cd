"""
BloomFlow Safety — Base schema

All records handed to the engine are immutable snapshots.
"""

from datetime import datetime
from typing import Any, Iterable, List, Mapping, Type, TypeVar, Union

from pydantic import BaseModel, ConfigDict, field_validator

from ..clock import as_utc


ModelT = TypeVar("ModelT", bound="FrozenModel")


class FrozenModel(BaseModel):
    """Immutable pydantic model, unknown fields are rejected"""

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator("timestamp", "last_updated", check_fields=False)
    @classmethod
    def normalize_timestamps(cls, v: datetime) -> datetime:
        """Naive timestamps are taken as UTC"""
        return as_utc(v)


def parse_records(
    model: Type[ModelT],
    items: Iterable[Union[ModelT, Mapping[str, Any]]],
) -> List[ModelT]:
    """
    Validate a sequence of records.

    Model instances pass through, mappings are validated with
    model.model_validate (pydantic.ValidationError on bad data).
    """
    records = []
    for item in items:
        if isinstance(item, model):
            records.append(item)
        else:
            records.append(model.model_validate(item))
    return records
