"""
Shared document behaviour for stored records.

The document models below act as the storage schema: they enforce presence of
required fields and cast values the way a document ODM would (numbers to
strings, numeric strings to numbers, ISO dates to datetimes). They do not
apply any business validation.
"""
import math
from datetime import date, datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, model_validator


def coerce_datetime(value: Any) -> Any:
    """Cast a plain date or a date-only ISO string to midnight of that day."""
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if isinstance(value, str):
        try:
            day = date.fromisoformat(value)
        except ValueError:
            # Full timestamps are left to pydantic's datetime parser
            return value
        return datetime(day.year, day.month, day.day)
    return value


class RecordDocument(BaseModel):
    """Base schema for documents written to a record collection."""

    model_config = ConfigDict(coerce_numbers_to_str=True, extra="ignore")

    @model_validator(mode="after")
    def reject_nan(self):
        """NaN does not cast to a number, even though it parses as a float"""
        for name, value in self:
            if isinstance(value, float) and math.isnan(value):
                raise ValueError(f"{name}: Cast to Number failed for value \"NaN\"")
        return self


class RecordResponse(BaseModel):
    """Base for serialized records; every field but the id may be null after an update."""

    id: str
    userId: Optional[str] = None
