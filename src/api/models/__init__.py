"""
API Models module.

Contains storage schemas and response shapes for users, expenses and incomes.
"""

from .expense import ExpenseDocument, ExpensePatch, ExpenseResponse
from .income import IncomeDocument, IncomePatch, IncomeResponse
from .user import Credentials, UserResponse

__all__ = [
    'ExpenseDocument',
    'ExpensePatch',
    'ExpenseResponse',
    'IncomeDocument',
    'IncomePatch',
    'IncomeResponse',
    'Credentials',
    'UserResponse',
]
