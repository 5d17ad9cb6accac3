"""
Reconciliation check database model.
"""

import uuid
from datetime import datetime
from sqlalchemy import Column, String, DateTime, Date, Integer, Numeric, Enum, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
import enum
from fintrack.database import Base


class CheckStatus(str, enum.Enum):
    """Outcome of checking one recurring expense for one month."""
    MATCHED = "MATCHED"
    MISSING = "MISSING"
    PENDING = "PENDING"


class ReconciliationCheck(Base):
    """
    Result of reconciling a recurring expense against a month of transactions.
    One row per (recurring_expense_id, month, year); re-runs overwrite it.
    """

    __tablename__ = "reconciliation_checks"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    recurring_expense_id = Column(String(36), ForeignKey("recurring_expenses.id"), nullable=False)
    month = Column(Integer, nullable=False)
    year = Column(Integer, nullable=False)
    status = Column(Enum(CheckStatus), nullable=False)
    matched_transaction_id = Column(String(36), ForeignKey("transactions.id"), nullable=True)
    matched_date = Column(Date, nullable=True)
    matched_amount = Column(Numeric(12, 2), nullable=True)
    checked_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    # Relationships
    recurring_expense = relationship("RecurringExpense", back_populates="checks")
    matched_transaction = relationship("Transaction")

    __table_args__ = (
        UniqueConstraint("recurring_expense_id", "month", "year", name="uq_reconciliation_check_period"),
    )
