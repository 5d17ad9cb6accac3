"""Service for reconciling recurring expenses against actual transactions."""

import logging
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Callable, Optional, Sequence

from sqlalchemy.orm import Session

from fintrack.config import settings
from fintrack.models.reconciliation_check import CheckStatus, ReconciliationCheck
from fintrack.models.recurring_expense import RecurringExpense
from fintrack.models.transaction import Transaction
from fintrack.repositories import (
    CheckKey,
    ReconciliationCheckRepository,
    RecurringExpenseRepository,
    TransactionRepository,
)
from fintrack.services.dates import as_date, expected_occurrence, month_window
from fintrack.services.matching import MatchTarget, MatchTolerances, find_candidates

logger = logging.getLogger(__name__)


@dataclass
class ReconciliationSummary:
    """Counts for one batch run. The persisted checks are the real output."""
    checked: int = 0
    skipped: int = 0
    failed: int = 0


def derive_status(candidate_count: int, today: date, expected_date: date) -> CheckStatus:
    """
    Status of an expense for a month.

    Any candidate means the payment was found. With none, a due date still
    in the future is PENDING and anything else is MISSING.
    """
    if candidate_count > 0:
        return CheckStatus.MATCHED
    if today < expected_date:
        return CheckStatus.PENDING
    return CheckStatus.MISSING


class ReconciliationService:
    """
    Checks each active recurring expense of a user against a month of transactions.

    Holds configuration only, so one instance serves the whole process.
    """

    def __init__(
        self,
        recurring_expenses: Optional[RecurringExpenseRepository] = None,
        transactions: Optional[TransactionRepository] = None,
        checks: Optional[ReconciliationCheckRepository] = None,
        tolerances: Optional[MatchTolerances] = None,
        fetch_padding_days: int = 10,
        today: Callable[[], date] = date.today,
    ):
        self.recurring_expenses = recurring_expenses or RecurringExpenseRepository()
        self.transactions = transactions or TransactionRepository()
        self.checks = checks or ReconciliationCheckRepository()
        self.tolerances = tolerances or MatchTolerances()
        self.fetch_padding_days = fetch_padding_days
        self.today = today

        # Transactions outside the fetched window can never be matched
        if fetch_padding_days < self.tolerances.date_window_days:
            raise ValueError(
                f"fetch_padding_days ({fetch_padding_days}) must be at least the "
                f"match window ({self.tolerances.date_window_days} days)"
            )

    @classmethod
    def from_settings(cls) -> "ReconciliationService":
        return cls(
            tolerances=MatchTolerances(
                amount_absolute=settings.reconciliation_amount_tolerance,
                date_window_days=settings.reconciliation_date_window_days,
            ),
            fetch_padding_days=settings.reconciliation_fetch_padding_days,
        )

    def check_recurring_expenses(
        self,
        db: Session,
        user_id: str,
        year: int,
        month: int
    ) -> ReconciliationSummary:
        """
        Reconcile every active recurring expense of the user for (year, month).

        Safe to re-run: each expense's check for the month is overwritten.
        Failing to load expenses or transactions aborts the run; a failure on
        a single expense is logged and the remaining expenses still run.
        """
        if not 1 <= month <= 12:
            raise ValueError(f"Month must be between 1 and 12, got {month}")

        expenses = [e for e in self.recurring_expenses.list_active(db, user_id) if e.active]
        start, end = month_window(year, month, self.fetch_padding_days)
        transactions = self.transactions.list_in_range(db, user_id, start, end)

        logger.info(
            f"Reconciling {len(expenses)} recurring expenses for user {user_id} "
            f"{year}-{month:02d} against {len(transactions)} transactions"
        )

        summary = ReconciliationSummary()
        for expense in expenses:
            try:
                check = self.check_expense(db, expense, year, month, transactions)
            except Exception:
                logger.exception(
                    f"Reconciliation failed for recurring expense {expense.id} ({expense.name}), skipping"
                )
                summary.failed += 1
                continue

            if check is None:
                summary.skipped += 1
            else:
                summary.checked += 1

        logger.info(
            f"Reconciliation {year}-{month:02d} for user {user_id}: "
            f"{summary.checked} checked, {summary.skipped} skipped, {summary.failed} failed"
        )
        return summary

    # Name used by the HTTP layer
    run_reconciliation = check_recurring_expenses

    def check_expense(
        self,
        db: Session,
        expense: RecurringExpense,
        year: int,
        month: int,
        transactions: Sequence[Transaction]
    ) -> Optional[ReconciliationCheck]:
        """
        Match one expense against the transaction window and store the outcome.
        Returns None without writing anything for months before the expense starts.
        """
        expected_date = expected_occurrence(year, month, expense.day_of_month)

        if expected_date < as_date(expense.start_date):
            logger.debug(
                f"Skipping {expense.name}: {expected_date} is before start date {expense.start_date}"
            )
            return None

        target = MatchTarget(
            amount=Decimal(str(expense.amount)),
            date=expected_date,
            reference_name=expense.name,
            description_pattern=expense.match_pattern or None,
        )
        candidates = find_candidates(transactions, target, self.tolerances)
        status = derive_status(len(candidates), self.today(), expected_date)

        best = candidates[0] if candidates else None
        fields = {
            "status": status,
            "matched_transaction_id": best.id if best else None,
            "matched_date": as_date(best.date) if best else None,
            "matched_amount": best.amount if best else None,
        }

        logger.debug(
            f"{expense.name} expected {expected_date}: {status.value} "
            f"({len(candidates)} candidates)"
        )

        return self.checks.upsert(db, CheckKey(expense.id, month, year), fields)
