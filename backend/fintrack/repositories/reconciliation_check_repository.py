"""Persistence of reconciliation checks keyed by (expense, month, year)."""

import logging
from typing import Any, Dict, List, NamedTuple

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from fintrack.models.account import Account
from fintrack.models.recurring_expense import RecurringExpense
from fintrack.models.reconciliation_check import CheckStatus, ReconciliationCheck

logger = logging.getLogger(__name__)


class CheckKey(NamedTuple):
    recurring_expense_id: str
    month: int
    year: int


class ReconciliationCheckRepository:

    def _find(self, db: Session, key: CheckKey):
        return db.query(ReconciliationCheck).filter(
            ReconciliationCheck.recurring_expense_id == key.recurring_expense_id,
            ReconciliationCheck.month == key.month,
            ReconciliationCheck.year == key.year,
        ).first()

    def _write(self, db: Session, key: CheckKey, fields: Dict[str, Any]) -> ReconciliationCheck:
        check = self._find(db, key)
        if check is None:
            check = ReconciliationCheck(**key._asdict())
            db.add(check)
        for field, value in fields.items():
            setattr(check, field, value)
        db.commit()
        db.refresh(check)
        return check

    def upsert(self, db: Session, key: CheckKey, fields: Dict[str, Any]) -> ReconciliationCheck:
        """
        Insert or overwrite the check for `key`.

        Two runs racing on the same key can both miss the existing row; the
        loser's insert hits the unique constraint and is replayed as an
        update, so the last writer wins.
        """
        try:
            return self._write(db, key, fields)
        except IntegrityError:
            db.rollback()
            logger.info(f"Check {tuple(key)} inserted concurrently, retrying as update")
            try:
                return self._write(db, key, fields)
            except SQLAlchemyError:
                db.rollback()
                raise
        except SQLAlchemyError:
            db.rollback()
            raise

    def _user_query(self, db: Session, user_id: str):
        return db.query(ReconciliationCheck).join(
            RecurringExpense, ReconciliationCheck.recurring_expense_id == RecurringExpense.id
        ).join(
            Account, RecurringExpense.account_id == Account.id
        ).filter(Account.user_id == user_id)

    def list_for_month(self, db: Session, user_id: str, year: int, month: int) -> List[ReconciliationCheck]:
        return self._user_query(db, user_id).filter(
            ReconciliationCheck.year == year,
            ReconciliationCheck.month == month,
        ).all()

    def list_for_user(self, db: Session, user_id: str) -> List[ReconciliationCheck]:
        return self._user_query(db, user_id).order_by(
            ReconciliationCheck.year, ReconciliationCheck.month
        ).all()

    def list_missing(self, db: Session, user_id: str) -> List[Dict[str, Any]]:
        """MISSING checks of the user with the expense and account they belong to, newest first."""
        rows = db.query(
            ReconciliationCheck,
            RecurringExpense.name,
            RecurringExpense.amount,
            RecurringExpense.day_of_month,
            Account.name.label("account_name"),
        ).join(
            RecurringExpense, ReconciliationCheck.recurring_expense_id == RecurringExpense.id
        ).join(
            Account, RecurringExpense.account_id == Account.id
        ).filter(
            Account.user_id == user_id,
            ReconciliationCheck.status == CheckStatus.MISSING,
        ).order_by(
            ReconciliationCheck.year.desc(),
            ReconciliationCheck.month.desc(),
            RecurringExpense.name,
        ).all()

        return [
            {
                "id": check.id,
                "recurring_expense_id": check.recurring_expense_id,
                "month": check.month,
                "year": check.year,
                "status": check.status,
                "name": name,
                "amount": amount,
                "day_of_month": day_of_month,
                "account_name": account_name,
            }
            for check, name, amount, day_of_month, account_name in rows
        ]
