"""
Data access for the reconciliation engine and bank sync.
"""

from fintrack.repositories.recurring_expense_repository import RecurringExpenseRepository
from fintrack.repositories.transaction_repository import TransactionRepository
from fintrack.repositories.reconciliation_check_repository import (
    CheckKey,
    ReconciliationCheckRepository,
)

__all__ = [
    "RecurringExpenseRepository",
    "TransactionRepository",
    "CheckKey",
    "ReconciliationCheckRepository",
]
