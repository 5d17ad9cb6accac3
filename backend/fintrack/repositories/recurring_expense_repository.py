"""Recurring expense queries, always scoped to the owning user."""

from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from fintrack.models.account import Account
from fintrack.models.recurring_expense import RecurringExpense


class RecurringExpenseRepository:

    def _user_query(self, db: Session, user_id: str):
        return db.query(RecurringExpense).join(
            Account, RecurringExpense.account_id == Account.id
        ).filter(Account.user_id == user_id)

    def list_for_user(self, db: Session, user_id: str) -> List[RecurringExpense]:
        return self._user_query(db, user_id).order_by(RecurringExpense.name).all()

    def list_active(self, db: Session, user_id: str) -> List[RecurringExpense]:
        return self._user_query(db, user_id).filter(
            RecurringExpense.active == True
        ).order_by(RecurringExpense.name).all()

    def get_for_user(self, db: Session, expense_id: str, user_id: str) -> Optional[RecurringExpense]:
        return self._user_query(db, user_id).filter(RecurringExpense.id == expense_id).first()

    def create(self, db: Session, fields: Dict[str, Any]) -> RecurringExpense:
        expense = RecurringExpense(**fields)
        db.add(expense)
        db.commit()
        db.refresh(expense)
        return expense

    def update(self, db: Session, expense: RecurringExpense, fields: Dict[str, Any]) -> RecurringExpense:
        for field, value in fields.items():
            setattr(expense, field, value)
        db.commit()
        db.refresh(expense)
        return expense

    def delete(self, db: Session, expense: RecurringExpense) -> None:
        db.delete(expense)
        db.commit()
