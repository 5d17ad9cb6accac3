"""
Recurring expense database model.
"""

import uuid
from datetime import datetime
from sqlalchemy import Column, String, Boolean, DateTime, Date, Integer, Numeric, ForeignKey
from sqlalchemy.orm import relationship
from fintrack.database import Base


class RecurringExpense(Base):
    """A monthly obligation (rent, subscriptions) expected on a fixed day."""

    __tablename__ = "recurring_expenses"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    account_id = Column(String(36), ForeignKey("accounts.id"), nullable=False)
    category_id = Column(String(36), ForeignKey("categories.id"), nullable=True)
    name = Column(String(100), nullable=False)
    amount = Column(Numeric(12, 2), nullable=False)
    day_of_month = Column(Integer, nullable=False)  # 1-31, clamped to month length
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=True)
    active = Column(Boolean, default=True, nullable=False)
    match_pattern = Column(String(255), nullable=True)  # Overrides name for description matching
    is_variable_amount = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    # Relationships
    account = relationship("Account", back_populates="recurring_expenses")
    category = relationship("Category", back_populates="recurring_expenses")
    checks = relationship(
        "ReconciliationCheck",
        back_populates="recurring_expense",
        cascade="all, delete-orphan",
    )
