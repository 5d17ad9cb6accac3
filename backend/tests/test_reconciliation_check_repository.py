"""Tests for reconciliation check persistence."""

import pytest
from datetime import date
from decimal import Decimal
from unittest.mock import patch

from sqlalchemy.exc import IntegrityError, OperationalError

from fintrack.models.reconciliation_check import CheckStatus, ReconciliationCheck
from fintrack.repositories import CheckKey, ReconciliationCheckRepository


@pytest.fixture
def repository():
    return ReconciliationCheckRepository()


MISSING = {
    "status": CheckStatus.MISSING,
    "matched_transaction_id": None,
    "matched_date": None,
    "matched_amount": None,
}


class TestUpsert:

    def test_inserts_new_row(self, db_session, repository, netflix):
        check = repository.upsert(db_session, CheckKey(netflix.id, 3, 2024), MISSING)
        assert check.id is not None
        assert check.status == CheckStatus.MISSING
        assert db_session.query(ReconciliationCheck).count() == 1

    def test_overwrites_existing_row(self, db_session, repository, netflix, make_transaction):
        key = CheckKey(netflix.id, 3, 2024)
        first = repository.upsert(db_session, key, MISSING)

        txn = make_transaction(date(2024, 3, 5), "15.00", "NETFLIX")
        second = repository.upsert(db_session, key, {
            "status": CheckStatus.MATCHED,
            "matched_transaction_id": txn.id,
            "matched_date": txn.date,
            "matched_amount": txn.amount,
        })

        assert second.id == first.id
        assert second.status == CheckStatus.MATCHED
        assert second.matched_amount == Decimal("15.00")
        assert db_session.query(ReconciliationCheck).count() == 1

    def test_concurrent_insert_retried_as_update(self, db_session, repository, netflix):
        """Losing an insert race replays the write against the winner's row."""
        key = CheckKey(netflix.id, 3, 2024)
        original_write = repository._write
        calls = []

        def racing_write(db, k, fields):
            calls.append(k)
            if len(calls) == 1:
                # Another run commits the same key first
                db.add(ReconciliationCheck(**k._asdict(), status=CheckStatus.PENDING))
                db.commit()
                raise IntegrityError("INSERT", {}, Exception("UNIQUE constraint failed"))
            return original_write(db, k, fields)

        with patch.object(repository, "_write", side_effect=racing_write):
            check = repository.upsert(db_session, key, MISSING)

        assert len(calls) == 2
        assert check.status == CheckStatus.MISSING
        assert db_session.query(ReconciliationCheck).count() == 1

    def test_unique_constraint_enforced(self, db_session, netflix):
        db_session.add(ReconciliationCheck(recurring_expense_id=netflix.id, month=3, year=2024, status=CheckStatus.MISSING))
        db_session.commit()
        db_session.add(ReconciliationCheck(recurring_expense_id=netflix.id, month=3, year=2024, status=CheckStatus.PENDING))
        with pytest.raises(IntegrityError):
            db_session.commit()
        db_session.rollback()

    def test_write_failure_rolls_back_and_raises(self, db_session, repository, netflix):
        with patch.object(repository, "_write", side_effect=OperationalError("UPDATE", {}, Exception("locked"))):
            with pytest.raises(OperationalError):
                repository.upsert(db_session, CheckKey(netflix.id, 3, 2024), MISSING)


class TestListing:

    def test_list_for_month_scoped_to_user(self, db_session, repository, netflix, other_account, make_expense):
        theirs = make_expense("Netflix", "15.00", 5, account=other_account)
        repository.upsert(db_session, CheckKey(netflix.id, 3, 2024), MISSING)
        repository.upsert(db_session, CheckKey(netflix.id, 2, 2024), MISSING)
        repository.upsert(db_session, CheckKey(theirs.id, 3, 2024), MISSING)

        checks = repository.list_for_month(db_session, "user-1", 2024, 3)
        assert [(c.recurring_expense_id, c.month) for c in checks] == [(netflix.id, 3)]

    def test_list_for_user(self, db_session, repository, netflix):
        repository.upsert(db_session, CheckKey(netflix.id, 3, 2024), MISSING)
        repository.upsert(db_session, CheckKey(netflix.id, 1, 2024), MISSING)

        checks = repository.list_for_user(db_session, "user-1")
        assert [c.month for c in checks] == [1, 3]
        assert repository.list_for_user(db_session, "user-2") == []


class TestListMissing:

    def test_joins_expense_and_account(self, db_session, repository, netflix, sample_account):
        repository.upsert(db_session, CheckKey(netflix.id, 3, 2024), MISSING)

        missing = repository.list_missing(db_session, "user-1")
        assert len(missing) == 1
        row = missing[0]
        assert row["recurring_expense_id"] == netflix.id
        assert (row["month"], row["year"]) == (3, 2024)
        assert row["status"] == CheckStatus.MISSING
        assert row["name"] == "Netflix"
        assert row["amount"] == Decimal("15.00")
        assert row["day_of_month"] == 5
        assert row["account_name"] == sample_account.name

    def test_only_missing_newest_first(self, db_session, repository, netflix, make_expense):
        rent = make_expense("Rent", "950.00", 1)
        repository.upsert(db_session, CheckKey(netflix.id, 1, 2024), MISSING)
        repository.upsert(db_session, CheckKey(netflix.id, 3, 2024), MISSING)
        repository.upsert(db_session, CheckKey(rent.id, 3, 2024), {**MISSING, "status": CheckStatus.PENDING})

        missing = repository.list_missing(db_session, "user-1")
        assert [(r["name"], r["month"]) for r in missing] == [("Netflix", 3), ("Netflix", 1)]

    def test_scoped_to_user(self, db_session, repository, other_account, make_expense):
        theirs = make_expense("Netflix", "15.00", 5, account=other_account)
        repository.upsert(db_session, CheckKey(theirs.id, 3, 2024), MISSING)

        assert repository.list_missing(db_session, "user-1") == []
