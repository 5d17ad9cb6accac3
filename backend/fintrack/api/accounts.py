"""
Account API endpoints.
"""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from fintrack.dependencies import get_current_user_id, get_db
from fintrack.models.account import Account
from fintrack.schemas.bank_sync import BankSyncRequest, BankSyncResponse
from fintrack.services import bank_sync_service

router = APIRouter()


@router.post("/{account_id}/sync", response_model=BankSyncResponse)
def sync_account(
    account_id: str,
    request: BankSyncRequest,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    """Import booked bank transactions, linking ones that already exist locally."""
    account = db.query(Account).filter(
        Account.id == account_id,
        Account.user_id == user_id
    ).first()
    if not account:
        raise HTTPException(status_code=404, detail="Account not found")

    result = bank_sync_service.sync_booked_transactions(db, account, request.transactions)
    return BankSyncResponse(**result)
