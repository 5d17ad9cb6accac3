"""Shared test fixtures."""

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from fastapi.testclient import TestClient
from datetime import date
from decimal import Decimal
import uuid

from fintrack.database import Base
from fintrack.dependencies import get_db, get_reconciliation_service
from fintrack.main import app
from fintrack.models.account import Account, AccountType
from fintrack.models.category import Category, CategoryType
from fintrack.models.transaction import Transaction, TransactionType
from fintrack.models.recurring_expense import RecurringExpense
from fintrack.services.reconciliation_service import ReconciliationService

USER_ID = "user-1"
OTHER_USER_ID = "user-2"


@pytest.fixture(scope="function")
def db_session():
    """Create a fresh database for each test using in-memory SQLite."""
    # Use StaticPool to ensure all connections use the same in-memory database
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # Create all tables
    Base.metadata.create_all(bind=engine)

    # Create session
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()

    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def fixed_today():
    """Reconciliation runs as if today were 2024-03-20."""
    return date(2024, 3, 20)


@pytest.fixture
def service(fixed_today):
    return ReconciliationService(today=lambda: fixed_today)


@pytest.fixture(scope="function")
def client(db_session, service):
    """Create a test client with database and service overrides."""
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_reconciliation_service] = lambda: service
    with TestClient(app, headers={"X-User-Id": USER_ID}) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def sample_account(db_session):
    """Create a sample account owned by USER_ID."""
    account = Account(id=str(uuid.uuid4()), user_id=USER_ID, name="Main Checking")
    account.account_type = AccountType.checking
    account.is_active = True

    db_session.add(account)
    db_session.commit()
    db_session.refresh(account)
    return account


@pytest.fixture
def other_account(db_session):
    """An account that belongs to somebody else."""
    account = Account(
        id=str(uuid.uuid4()),
        user_id=OTHER_USER_ID,
        name="Other Checking",
        account_type=AccountType.checking,
    )
    db_session.add(account)
    db_session.commit()
    db_session.refresh(account)
    return account


@pytest.fixture
def sample_category(db_session):
    """Create a sample category."""
    category = Category(
        id=str(uuid.uuid4()),
        name="Subscriptions",
        category_type=CategoryType.expense,
        color="#6366f1",
        icon="repeat",
    )
    db_session.add(category)
    db_session.commit()
    db_session.refresh(category)
    return category


@pytest.fixture
def make_transaction(db_session, sample_account):
    """Factory for transactions on the sample account."""
    def _make(txn_date, amount, description, account=None, external_id=None, txn_type=TransactionType.expense):
        txn = Transaction(
            id=str(uuid.uuid4()),
            date=txn_date,
            amount=Decimal(str(amount)),
            transaction_type=txn_type,
            description=description,
            account_id=(account or sample_account).id,
            external_id=external_id,
        )
        db_session.add(txn)
        db_session.commit()
        db_session.refresh(txn)
        return txn
    return _make


@pytest.fixture
def make_expense(db_session, sample_account, sample_category):
    """Factory for recurring expenses on the sample account."""
    def _make(name, amount, day_of_month, start_date=date(2024, 1, 1), account=None, **kwargs):
        expense = RecurringExpense(
            id=str(uuid.uuid4()),
            account_id=(account or sample_account).id,
            category_id=sample_category.id,
            name=name,
            amount=Decimal(str(amount)),
            day_of_month=day_of_month,
            start_date=start_date,
            active=kwargs.pop("active", True),
            **kwargs
        )
        db_session.add(expense)
        db_session.commit()
        db_session.refresh(expense)
        return expense
    return _make


@pytest.fixture
def netflix(make_expense):
    return make_expense("Netflix", "15.00", 5)
