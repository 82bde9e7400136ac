from typing import Any, List

from fastapi import APIRouter, Body, Depends, status

from trackify.models.expense import ExpensePublic
from trackify.routers.deps import get_current_user_id, get_expense_service
from trackify.services.expenses import ExpenseService
from trackify.validation.validator import validate_expense_create

router = APIRouter()


@router.get("", response_model=List[ExpensePublic])
def list_expenses(
    user_id: int = Depends(get_current_user_id),
    expenses: ExpenseService = Depends(get_expense_service),
):
    """Newest first, each expense with its category."""
    return expenses.list_expenses(user_id)


@router.post("", response_model=ExpensePublic, status_code=status.HTTP_201_CREATED)
def create_expense(
    payload: Any = Body(...),
    user_id: int = Depends(get_current_user_id),
    expenses: ExpenseService = Depends(get_expense_service),
):
    # user_id always comes from the token, never from the body
    expense = validate_expense_create(payload).unwrap()
    return expenses.create_expense(user_id, expense)
