"""
Transaction database model.
"""

import uuid
from datetime import datetime
from sqlalchemy import Column, String, DateTime, Date, Numeric, Text, Enum, ForeignKey, Index
from sqlalchemy.orm import relationship
import enum
from fintrack.database import Base


class TransactionType(str, enum.Enum):
    """Direction of a transaction. Amounts are stored as magnitudes."""
    income = "income"
    expense = "expense"


class Transaction(Base):
    """Transaction model."""

    __tablename__ = "transactions"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    date = Column(Date, nullable=False, index=True)
    amount = Column(Numeric(12, 2), nullable=False)  # Always positive, see transaction_type
    transaction_type = Column(Enum(TransactionType), nullable=False)
    description = Column(Text, nullable=False)
    account_id = Column(String(36), ForeignKey("accounts.id"), nullable=False)
    category_id = Column(String(36), ForeignKey("categories.id"), nullable=True)
    external_id = Column(String(100), nullable=True, index=True)  # Bank feed transaction id
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    # Relationships
    account = relationship("Account", back_populates="transactions")
    category = relationship("Category", back_populates="transactions")

    # Indexes for common queries
    __table_args__ = (
        Index("idx_transaction_date_account", "date", "account_id"),
    )
