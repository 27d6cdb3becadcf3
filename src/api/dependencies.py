"""
FastAPI dependencies binding routers to the store and the identity provider
"""
from fastapi import Depends

from .database import get_db
from .identity import IdentityProvider, get_identity_provider
from .models import ExpenseDocument, ExpensePatch, IncomeDocument, IncomePatch
from .services.identity_gateway import IdentityGateway
from .store import RecordStore

EXPENSES_COLLECTION = "expenses"
INCOMES_COLLECTION = "incomes"
USERS_COLLECTION = "users"


def get_expense_store(db=Depends(get_db)) -> RecordStore:
    return RecordStore(db[EXPENSES_COLLECTION], ExpenseDocument, ExpensePatch)


def get_income_store(db=Depends(get_db)) -> RecordStore:
    return RecordStore(db[INCOMES_COLLECTION], IncomeDocument, IncomePatch)


def get_identity_gateway(
    provider: IdentityProvider = Depends(get_identity_provider),
    db=Depends(get_db),
) -> IdentityGateway:
    return IdentityGateway(provider, db[USERS_COLLECTION])
