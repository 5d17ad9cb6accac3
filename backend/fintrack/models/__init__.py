"""
Database models package.
"""

from fintrack.models.account import Account, AccountType
from fintrack.models.category import Category, CategoryType
from fintrack.models.transaction import Transaction, TransactionType
from fintrack.models.recurring_expense import RecurringExpense
from fintrack.models.reconciliation_check import ReconciliationCheck, CheckStatus

__all__ = [
    "Account",
    "AccountType",
    "Category",
    "CategoryType",
    "Transaction",
    "TransactionType",
    "RecurringExpense",
    "ReconciliationCheck",
    "CheckStatus",
]
