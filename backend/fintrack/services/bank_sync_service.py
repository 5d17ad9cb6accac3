"""
Deduplication of booked bank-feed transactions against the local ledger.

Transactions entered by hand or imported from a file carry no bank id, so an
incoming booked transaction is first matched by amount and date against the
account's existing transactions. A match gets the bank id attached instead of
a duplicate row being created.
"""

import logging
from datetime import date
from decimal import Decimal
from typing import Dict, List, Optional

from sqlalchemy.orm import Session

from fintrack.config import settings
from fintrack.models.account import Account
from fintrack.models.category import Category
from fintrack.models.transaction import TransactionType
from fintrack.repositories import TransactionRepository
from fintrack.schemas.bank_sync import BookedTransaction
from fintrack.services.matching import (
    MatchTarget,
    MatchTolerances,
    find_candidates,
    looks_like_bank_uuid,
)

logger = logging.getLogger(__name__)

DEFAULT_DESCRIPTION = "Bank Transaction"


def default_tolerances() -> MatchTolerances:
    return MatchTolerances(
        amount_absolute=settings.bank_sync_amount_tolerance,
        date_window_days=settings.bank_sync_date_window_days,
    )


def get_fallback_category_id(db: Session) -> Optional[str]:
    """First category by creation date, used for new bank transactions."""
    category = db.query(Category).order_by(Category.created_at).first()
    return category.id if category else None


def sync_booked_transactions(
    db: Session,
    account: Account,
    booked: List[BookedTransaction],
    tolerances: Optional[MatchTolerances] = None,
    repository: Optional[TransactionRepository] = None,
) -> Dict[str, int]:
    """
    Import booked bank transactions into an account.

    Already imported rows are skipped, rows matching an unlinked local
    transaction are linked to it, and the rest are created.
    """
    tolerances = tolerances or default_tolerances()
    repository = repository or TransactionRepository()

    existing = repository.list_for_account(db, account.id)
    known_ids = {t.external_id for t in existing if t.external_id}
    fallback_category_id = get_fallback_category_id(db)

    # Local rows that received a bank id during this run, whatever its length
    claimed_ids = set()

    added = 0
    linked = 0

    for tx in booked:
        if not tx.transaction_id or tx.transaction_id in known_ids:
            continue

        amount = Decimal(str(tx.amount))
        booking_date: date = tx.booking_date or tx.value_date
        description = tx.remittance_information or DEFAULT_DESCRIPTION

        target = MatchTarget(amount=abs(amount), date=booking_date)
        candidates = find_candidates(
            existing,
            target,
            tolerances,
            exclude=lambda t: t.id in claimed_ids or looks_like_bank_uuid(t.external_id),
        )

        if candidates:
            match = candidates[0]
            logger.info(f"Linking bank transaction {tx.transaction_id} to existing transaction {match.id}")
            repository.link_external_id(db, match, tx.transaction_id)
            claimed_ids.add(match.id)
            linked += 1
        else:
            logger.info(f"Creating new transaction for bank transaction {tx.transaction_id}")
            created = repository.create(db, {
                "account_id": account.id,
                "date": booking_date,
                "amount": abs(amount),
                "transaction_type": TransactionType.expense if amount < 0 else TransactionType.income,
                "description": description,
                "category_id": fallback_category_id,
                "external_id": tx.transaction_id,
            })
            existing.append(created)
            claimed_ids.add(created.id)
            added += 1

        known_ids.add(tx.transaction_id)

    db.commit()

    return {"added": added, "linked": linked, "total": len(booked)}
