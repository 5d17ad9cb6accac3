"""Pydantic schemas for recurring expenses."""

from pydantic import BaseModel, Field, field_validator, model_validator
from typing import Optional
from datetime import date, datetime
from decimal import Decimal


class RecurringExpenseBase(BaseModel):
    account_id: str
    category_id: Optional[str] = None
    name: str = Field(..., min_length=1, max_length=100)
    amount: Decimal = Field(..., ge=0)
    day_of_month: int = Field(..., ge=1, le=31)
    start_date: date
    end_date: Optional[date] = None
    active: bool = True
    match_pattern: Optional[str] = Field(None, max_length=255)
    is_variable_amount: bool = False

    @model_validator(mode="after")
    def check_dates(self):
        if self.end_date is not None and self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self


class RecurringExpenseCreate(RecurringExpenseBase):
    pass


class RecurringExpenseUpdate(BaseModel):
    category_id: Optional[str] = None
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    amount: Optional[Decimal] = Field(None, ge=0)
    day_of_month: Optional[int] = Field(None, ge=1, le=31)
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    active: Optional[bool] = None
    match_pattern: Optional[str] = Field(None, max_length=255)
    is_variable_amount: Optional[bool] = None

    @field_validator("name", "amount", "day_of_month", "start_date", "active", "is_variable_amount")
    @classmethod
    def reject_null(cls, value):
        # Omit a field to leave it unchanged; these columns cannot be cleared
        if value is None:
            raise ValueError("may not be null")
        return value


class RecurringExpenseResponse(RecurringExpenseBase):
    id: str
    created_at: datetime

    class Config:
        from_attributes = True
