"""
Expense Models - storage schema, update casting and response shape
"""
from datetime import datetime
from typing import Optional

from pydantic import field_validator

from .base import RecordDocument, RecordResponse, coerce_datetime


class ExpenseDocument(RecordDocument):
    """Expense as written on create"""
    userId: str
    dateBought: datetime
    itemBought: str
    amount: float
    note: Optional[str] = None

    @field_validator("dateBought", mode="before")
    @classmethod
    def cast_date_bought(cls, v):
        return coerce_datetime(v)


class ExpensePatch(RecordDocument):
    """Expense fields replaced on update; omitted fields are written as null"""
    dateBought: Optional[datetime] = None
    itemBought: Optional[str] = None
    amount: Optional[float] = None
    note: Optional[str] = None

    @field_validator("dateBought", mode="before")
    @classmethod
    def cast_date_bought(cls, v):
        return coerce_datetime(v)


class ExpenseResponse(RecordResponse):
    """Expense response"""
    dateBought: Optional[datetime] = None
    itemBought: Optional[str] = None
    amount: Optional[float] = None
    note: Optional[str] = None
