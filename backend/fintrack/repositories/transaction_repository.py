"""Transaction queries used by reconciliation and bank sync."""

from datetime import date
from typing import Any, Dict, List

from sqlalchemy.orm import Session

from fintrack.models.account import Account
from fintrack.models.transaction import Transaction


class TransactionRepository:

    def list_in_range(self, db: Session, user_id: str, start: date, end: date) -> List[Transaction]:
        """All of the user's transactions dated within [start, end]."""
        return db.query(Transaction).join(
            Account, Transaction.account_id == Account.id
        ).filter(
            Account.user_id == user_id,
            Transaction.date >= start,
            Transaction.date <= end,
        ).order_by(Transaction.date, Transaction.created_at).all()

    def list_for_account(self, db: Session, account_id: str) -> List[Transaction]:
        return db.query(Transaction).filter(
            Transaction.account_id == account_id
        ).order_by(Transaction.date, Transaction.created_at).all()

    def create(self, db: Session, fields: Dict[str, Any]) -> Transaction:
        txn = Transaction(**fields)
        db.add(txn)
        db.flush()
        return txn

    def link_external_id(self, db: Session, transaction: Transaction, external_id: str) -> Transaction:
        transaction.external_id = external_id
        db.flush()
        return transaction
