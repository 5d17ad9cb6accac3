"""API endpoints for recurring expense management."""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from typing import List

from fintrack.dependencies import get_current_user_id, get_db
from fintrack.models.account import Account
from fintrack.repositories import RecurringExpenseRepository
from fintrack.schemas.recurring_expense import (
    RecurringExpenseCreate,
    RecurringExpenseResponse,
    RecurringExpenseUpdate,
)

router = APIRouter(prefix="/recurring-expenses", tags=["recurring-expenses"])

repository = RecurringExpenseRepository()


def get_owned_expense(db: Session, expense_id: str, user_id: str):
    expense = repository.get_for_user(db, expense_id, user_id)
    if not expense:
        raise HTTPException(status_code=404, detail="Recurring expense not found")
    return expense


@router.get("", response_model=List[RecurringExpenseResponse])
def list_recurring_expenses(
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    """Get all recurring expenses of the user."""
    return repository.list_for_user(db, user_id)


@router.get("/{expense_id}", response_model=RecurringExpenseResponse)
def get_recurring_expense(
    expense_id: str,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    return get_owned_expense(db, expense_id, user_id)


@router.post("", response_model=RecurringExpenseResponse)
def create_recurring_expense(
    data: RecurringExpenseCreate,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    """Create a recurring expense on one of the user's accounts."""
    account = db.query(Account).filter(
        Account.id == data.account_id,
        Account.user_id == user_id
    ).first()
    if not account:
        raise HTTPException(status_code=404, detail="Account not found")

    return repository.create(db, data.model_dump())


@router.patch("/{expense_id}", response_model=RecurringExpenseResponse)
def update_recurring_expense(
    expense_id: str,
    update: RecurringExpenseUpdate,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    """Update a recurring expense."""
    expense = get_owned_expense(db, expense_id, user_id)

    update_data = update.model_dump(exclude_unset=True)
    start_date = update_data.get("start_date", expense.start_date)
    end_date = update_data.get("end_date", expense.end_date)
    if end_date is not None and start_date is not None and end_date < start_date:
        raise HTTPException(status_code=400, detail="end_date must not be before start_date")

    return repository.update(db, expense, update_data)


@router.delete("/{expense_id}")
def delete_recurring_expense(
    expense_id: str,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    """Delete a recurring expense together with its reconciliation checks."""
    expense = get_owned_expense(db, expense_id, user_id)
    repository.delete(db, expense)
    return {"deleted": True}
