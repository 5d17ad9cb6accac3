"""
FastAPI dependencies.
"""

from functools import lru_cache
from typing import Generator

from fastapi import Header
from sqlalchemy.orm import Session

from fintrack.database import SessionLocal
from fintrack.services.reconciliation_service import ReconciliationService


def get_db() -> Generator[Session, None, None]:
    """
    Dependency for getting database sessions.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_current_user_id(x_user_id: str = Header(...)) -> str:
    """
    Identify the caller. Authentication happens upstream; the gateway
    forwards the authenticated user id in the X-User-Id header.
    """
    return x_user_id


@lru_cache
def get_reconciliation_service() -> ReconciliationService:
    """Process-wide reconciliation service, built once from settings."""
    return ReconciliationService.from_settings()
