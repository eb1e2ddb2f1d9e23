"""Pytest fixtures for testing"""

import os

# Keep the application engine off PostgreSQL during tests
os.environ.setdefault("DATABASE_URL", "sqlite:///./test.db")

import pytest
from datetime import date
from typing import Generator
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from budget_gateway.api.main import create_app
from budget_gateway.infrastructure.database.models import Base
from budget_gateway.infrastructure.database.session import get_db
from budget_gateway.domain.models import BudgetSnapshot, DebtRecord, ExpenseRecord, IncomeRecord


# Test database
TEST_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db() -> Generator[Session, None, None]:
    """Create test database and session"""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db: Session) -> TestClient:
    """Create FastAPI test client with test database"""
    app = create_app()

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    return TestClient(app)


@pytest.fixture
def as_of() -> date:
    """Fixed reference day so period filtering does not depend on the clock"""
    return date(2024, 3, 15)


@pytest.fixture
def sample_snapshot() -> BudgetSnapshot:
    """Salary, rent, a gym membership, a one-off purchase, and a credit card"""
    return BudgetSnapshot(
        incomes=[
            IncomeRecord(amount=1500, frequency="biweekly"),  # 3255.00 / month
            IncomeRecord(amount=1200, frequency="yearly"),  # 100.00 / month
        ],
        expenses=[
            ExpenseRecord(amount=1200, is_recurring=True, recurring_frequency="monthly", category_id="housing"),
            ExpenseRecord(amount=10, is_recurring=True, recurring_frequency="weekly", category_id="fitness"),
            ExpenseRecord(amount=250, is_recurring=False, category_id="electronics"),
        ],
        debts=[
            DebtRecord(minimum_payment=150, interest_rate=24.99, remaining_amount=4000),
        ],
    )
