"""Pydantic schemas for bank feed synchronization."""

from pydantic import BaseModel, model_validator
from typing import List, Optional
from datetime import date
from decimal import Decimal


class BookedTransaction(BaseModel):
    """A booked transaction as delivered by the bank aggregator."""
    transaction_id: Optional[str] = None
    booking_date: Optional[date] = None
    value_date: Optional[date] = None
    amount: Decimal  # Signed: negative = money out
    remittance_information: Optional[str] = None

    @model_validator(mode="after")
    def check_has_date(self):
        if self.booking_date is None and self.value_date is None:
            raise ValueError("booking_date or value_date is required")
        return self


class BankSyncRequest(BaseModel):
    transactions: List[BookedTransaction]


class BankSyncResponse(BaseModel):
    added: int
    linked: int
    total: int
