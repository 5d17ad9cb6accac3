"""
Pydantic schemas package.
"""

from fintrack.schemas.recurring_expense import (
    RecurringExpenseBase,
    RecurringExpenseCreate,
    RecurringExpenseUpdate,
    RecurringExpenseResponse,
)
from fintrack.schemas.reconciliation import (
    ReconciliationRunRequest,
    ReconciliationRunResponse,
    ReconciliationCheckResponse,
    MissingCheckResponse,
    MissingChecksResponse,
)
from fintrack.schemas.bank_sync import (
    BookedTransaction,
    BankSyncRequest,
    BankSyncResponse,
)

__all__ = [
    "RecurringExpenseBase",
    "RecurringExpenseCreate",
    "RecurringExpenseUpdate",
    "RecurringExpenseResponse",
    "ReconciliationRunRequest",
    "ReconciliationRunResponse",
    "ReconciliationCheckResponse",
    "MissingCheckResponse",
    "MissingChecksResponse",
    "BookedTransaction",
    "BankSyncRequest",
    "BankSyncResponse",
]
