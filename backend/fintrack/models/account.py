"""
Account database model.
"""

import uuid
from datetime import datetime
from sqlalchemy import Column, String, Boolean, DateTime, Enum
from sqlalchemy.orm import relationship
import enum
from fintrack.database import Base


class AccountType(str, enum.Enum):
    """Account type enumeration."""
    checking = "checking"
    savings = "savings"
    credit = "credit"
    cash = "cash"
    investment = "investment"
    other = "other"


class Account(Base):
    """Account model. Ownership of every user-scoped row flows through user_id."""

    __tablename__ = "accounts"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(String(36), nullable=False, index=True)
    name = Column(String(100), nullable=False)
    account_type = Column(Enum(AccountType), nullable=False)
    external_account_id = Column(String(100), nullable=True)  # Bank feed account
    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    # Relationships
    transactions = relationship("Transaction", back_populates="account")
    recurring_expenses = relationship("RecurringExpense", back_populates="account")
