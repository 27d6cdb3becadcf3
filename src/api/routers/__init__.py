"""
API Routers
"""
from . import auth, expenses, incomes

__all__ = ['auth', 'expenses', 'incomes']
