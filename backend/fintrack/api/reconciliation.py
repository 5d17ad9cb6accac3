"""API endpoints for recurring expense reconciliation."""

import logging
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session
from typing import List

from fintrack.dependencies import get_current_user_id, get_db, get_reconciliation_service
from fintrack.repositories import ReconciliationCheckRepository
from fintrack.schemas.reconciliation import (
    MissingChecksResponse,
    ReconciliationCheckResponse,
    ReconciliationRunRequest,
    ReconciliationRunResponse,
)
from fintrack.services.reconciliation_service import ReconciliationService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/reconciliation", tags=["reconciliation"])

checks_repository = ReconciliationCheckRepository()


@router.post("/check", response_model=ReconciliationRunResponse)
def run_reconciliation_check(
    request: ReconciliationRunRequest,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
    service: ReconciliationService = Depends(get_reconciliation_service),
):
    """Reconcile the user's recurring expenses for a month. Safe to repeat."""
    try:
        summary = service.run_reconciliation(db, user_id, request.year, request.month)
    except Exception:
        logger.exception(f"Reconciliation check error for {request.year}-{request.month:02d}")
        raise HTTPException(status_code=500, detail="Failed to run reconciliation check")

    return ReconciliationRunResponse(
        success=True,
        checked=summary.checked,
        skipped=summary.skipped,
        failed=summary.failed,
    )


@router.get("/status", response_model=List[ReconciliationCheckResponse])
def get_reconciliation_status(
    year: int = Query(..., ge=1900, le=9999),
    month: int = Query(..., ge=1, le=12),
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    """Get the checks of one month."""
    return checks_repository.list_for_month(db, user_id, year, month)


@router.get("/checks", response_model=List[ReconciliationCheckResponse])
def get_all_checks(
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    """Get every check of the user."""
    return checks_repository.list_for_user(db, user_id)


@router.get("/missing", response_model=MissingChecksResponse)
def get_missing_checks(
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    """Get every recurring expense occurrence that was due but not found."""
    missing = checks_repository.list_missing(db, user_id)
    return MissingChecksResponse(count=len(missing), missing=missing)
