"""
Income Models - storage schema, update casting and response shape
"""
from datetime import datetime
from typing import Optional

from pydantic import field_validator

from .base import RecordDocument, RecordResponse, coerce_datetime


class IncomeDocument(RecordDocument):
    """Income as written on create"""
    userId: str
    dateReceived: datetime
    amountReceived: float
    note: Optional[str] = None

    @field_validator("dateReceived", mode="before")
    @classmethod
    def cast_date_received(cls, v):
        return coerce_datetime(v)


class IncomePatch(RecordDocument):
    """Income fields replaced on update"""
    dateReceived: Optional[datetime] = None
    amountReceived: Optional[float] = None
    note: Optional[str] = None

    @field_validator("dateReceived", mode="before")
    @classmethod
    def cast_date_received(cls, v):
        return coerce_datetime(v)


class IncomeResponse(RecordResponse):
    """Income response"""
    dateReceived: Optional[datetime] = None
    amountReceived: Optional[float] = None
    note: Optional[str] = None
