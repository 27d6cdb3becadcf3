"""
Expenses Router - create, list by user, replace and delete expense records
"""
from typing import List, Optional

from fastapi import APIRouter, Body, Depends, Response, status

from ..dependencies import get_expense_store
from ..errors import STORE_ERRORS, error_response
from ..models import ExpenseResponse
from ..store import RecordStore

router = APIRouter()


@router.post("", response_model=ExpenseResponse, status_code=status.HTTP_201_CREATED)
async def create_expense(
    expense: dict = Body(...),
    store: RecordStore = Depends(get_expense_store)
):
    """Create a new expense record from the request body"""
    try:
        return await store.create(expense)
    except STORE_ERRORS as e:
        return error_response(e)


@router.get("/{user_id}", response_model=List[ExpenseResponse])
async def list_expenses(user_id: str, store: RecordStore = Depends(get_expense_store)):
    """List a user's expenses"""
    try:
        return await store.list_by_user(user_id)
    except STORE_ERRORS as e:
        return error_response(e)


@router.put("/{expense_id}", response_model=Optional[ExpenseResponse])
async def update_expense(
    expense_id: str,
    expense: dict = Body(...),
    store: RecordStore = Depends(get_expense_store)
):
    """Replace an expense's fields; returns null if the id matches nothing"""
    try:
        return await store.replace_fields(expense_id, expense)
    except STORE_ERRORS as e:
        return error_response(e)


@router.delete("/{expense_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_expense(expense_id: str, store: RecordStore = Depends(get_expense_store)):
    """Delete an expense"""
    try:
        await store.delete(expense_id)
    except STORE_ERRORS as e:
        return error_response(e)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
