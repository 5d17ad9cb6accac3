"""
Category database model.
"""

import uuid
from datetime import datetime
from sqlalchemy import Column, String, DateTime, Enum
from sqlalchemy.orm import relationship
import enum
from fintrack.database import Base


class CategoryType(str, enum.Enum):
    """Category type enumeration."""
    income = "income"
    expense = "expense"
    transfer = "transfer"


class Category(Base):
    """Category model."""

    __tablename__ = "categories"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(String(100), nullable=False)
    category_type = Column(Enum(CategoryType), nullable=False, default=CategoryType.expense)
    color = Column(String(7), nullable=True)  # Hex color
    icon = Column(String(50), nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    # Relationships
    transactions = relationship("Transaction", back_populates="category")
    recurring_expenses = relationship("RecurringExpense", back_populates="category")
