"""
Main API router.
"""

from fastapi import APIRouter
from fintrack.api import accounts, reconciliation, recurring_expenses

api_router = APIRouter()

api_router.include_router(accounts.router, prefix="/accounts", tags=["accounts"])
api_router.include_router(recurring_expenses.router)
api_router.include_router(reconciliation.router)
