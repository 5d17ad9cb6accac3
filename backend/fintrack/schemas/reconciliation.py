"""Pydantic schemas for reconciliation checks."""

from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import date, datetime
from decimal import Decimal

from fintrack.models.reconciliation_check import CheckStatus


class ReconciliationRunRequest(BaseModel):
    """Request to reconcile a month."""
    year: int = Field(..., ge=1900, le=9999)
    month: int = Field(..., ge=1, le=12)


class ReconciliationRunResponse(BaseModel):
    success: bool
    checked: int = 0
    skipped: int = 0
    failed: int = 0


class ReconciliationCheckResponse(BaseModel):
    id: str
    recurring_expense_id: str
    month: int
    year: int
    status: CheckStatus
    matched_transaction_id: Optional[str] = None
    matched_date: Optional[date] = None
    matched_amount: Optional[Decimal] = None
    checked_at: datetime

    class Config:
        from_attributes = True


class MissingCheckResponse(BaseModel):
    """A MISSING check together with what was expected and where."""
    id: str
    recurring_expense_id: str
    month: int
    year: int
    status: CheckStatus
    name: str
    amount: Decimal
    day_of_month: int
    account_name: str


class MissingChecksResponse(BaseModel):
    count: int
    missing: List[MissingCheckResponse]
