"""
Incomes Router - create, list by user, replace and delete income records
"""
from typing import List, Optional

from fastapi import APIRouter, Body, Depends, Response, status

from ..dependencies import get_income_store
from ..errors import STORE_ERRORS, error_response
from ..models import IncomeResponse
from ..store import RecordStore

router = APIRouter()


@router.post("", response_model=IncomeResponse, status_code=status.HTTP_201_CREATED)
async def create_income(
    income: dict = Body(...),
    store: RecordStore = Depends(get_income_store)
):
    """Create a new income record from the request body"""
    try:
        return await store.create(income)
    except STORE_ERRORS as e:
        return error_response(e)


@router.get("/{user_id}", response_model=List[IncomeResponse])
async def list_incomes(user_id: str, store: RecordStore = Depends(get_income_store)):
    """List a user's incomes"""
    try:
        return await store.list_by_user(user_id)
    except STORE_ERRORS as e:
        return error_response(e)


@router.put("/{income_id}", response_model=Optional[IncomeResponse])
async def update_income(
    income_id: str,
    income: dict = Body(...),
    store: RecordStore = Depends(get_income_store)
):
    """Replace an income's fields; returns null if the id matches nothing"""
    try:
        return await store.replace_fields(income_id, income)
    except STORE_ERRORS as e:
        return error_response(e)


@router.delete("/{income_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_income(income_id: str, store: RecordStore = Depends(get_income_store)):
    """Delete an income"""
    try:
        await store.delete(income_id)
    except STORE_ERRORS as e:
        return error_response(e)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
