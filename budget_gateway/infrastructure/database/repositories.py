"""Data access layer for budget records, scoped per user"""

import uuid
from datetime import date
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar
from sqlalchemy.orm import Session

from budget_gateway.config import settings
from budget_gateway.domain.exceptions import InvalidRecordError, RecordNotFoundError
from budget_gateway.domain.models import (
    BudgetSnapshot,
    DebtRecord,
    ExpenseRecord,
    IncomeRecord,
    SavingsGoalRecord,
)
from budget_gateway.infrastructure.database.models import (
    Base,
    Debt,
    Expense,
    ExpenseCategory,
    Income,
    SavingsGoal,
)

ModelT = TypeVar("ModelT", bound=Base)

# Built-in categories every user starts with
DEFAULT_CATEGORIES = [
    "Food",
    "Device",
    "Service",
    "Rent",
    "Medical",
    "Dental",
    "Sports",
    "Leisure",
    "Travel",
    "Gasoline",
    "Groceries",
    "Home Essentials",
    "Materials",
    "Worker Salary",
    "Food & Dining",
    "Transportation",
    "Bills & Utilities",
    "Shopping",
    "Entertainment",
    "Healthcare",
    "Education",
    "Personal Care",
    "Subscriptions",
    "Other",
]


def parse_record_id(record_id: str) -> uuid.UUID:
    """Validate a path identifier"""
    try:
        return uuid.UUID(record_id)
    except ValueError as e:
        raise InvalidRecordError(f"Invalid record ID format: {record_id}") from e


class UserScopedRepository(Generic[ModelT]):
    """CRUD over one table, every query filtered by owner"""

    model: Type[ModelT]

    def __init__(self, db: Session, user_id: str):
        self.db = db
        self.user_id = user_id

    def create(self, fields: Dict[str, Any]) -> ModelT:
        """Persist a new record owned by the current user"""
        record = self.model(user_id=self.user_id, **fields)
        self.db.add(record)
        self.db.flush()  # Get ID without committing
        return record

    def get(self, record_id: str) -> ModelT:
        """Fetch one record; other users' records are reported as missing"""
        record = (
            self.db.query(self.model)
            .filter(self.model.id == parse_record_id(record_id), self.model.user_id == self.user_id)
            .first()
        )
        if record is None:
            raise RecordNotFoundError(f"{self.model.__tablename__} {record_id} not found")
        return record

    def update(self, record_id: str, changes: Dict[str, Any]) -> ModelT:
        """Apply a partial update"""
        record = self.get(record_id)
        for name, value in changes.items():
            setattr(record, name, value)
        self.db.flush()
        return record

    def delete(self, record_id: str) -> None:
        record = self.get(record_id)
        self.db.delete(record)
        self.db.flush()

    def list(self, limit: Optional[int] = settings.list_limit) -> List[ModelT]:
        """Newest records first; `limit=None` returns everything"""
        query = (
            self.db.query(self.model)
            .filter(self.model.user_id == self.user_id)
            .order_by(self.model.created_at.desc())
        )
        if limit is not None:
            query = query.limit(limit)
        return query.all()


class DatedRepository(UserScopedRepository[ModelT]):
    """Records carrying a `date` column, listable by period"""

    def list(
        self,
        start: Optional[date] = None,
        end: Optional[date] = None,
        limit: Optional[int] = settings.list_limit,
    ) -> List[ModelT]:
        """Records by date descending, optionally within [start, end]"""
        query = self.db.query(self.model).filter(self.model.user_id == self.user_id)
        if start is not None:
            query = query.filter(self.model.date >= start)
        if end is not None:
            query = query.filter(self.model.date <= end)
        query = query.order_by(self.model.date.desc())
        if limit is not None:
            query = query.limit(limit)
        return query.all()


class IncomeRepository(DatedRepository[Income]):
    """Repository for incomes"""

    model = Income


class ExpenseRepository(DatedRepository[Expense]):
    """Repository for expenses"""

    model = Expense


class DebtRepository(UserScopedRepository[Debt]):
    """Repository for debts"""

    model = Debt


class SavingsGoalRepository(UserScopedRepository[SavingsGoal]):
    """Repository for savings goals"""

    model = SavingsGoal


class CategoryRepository(UserScopedRepository[ExpenseCategory]):
    """Repository for expense categories"""

    model = ExpenseCategory

    def ensure_defaults(self) -> bool:
        """Seed DEFAULT_CATEGORIES for a user who has none; True if rows were added"""
        has_any = (
            self.db.query(ExpenseCategory.id)
            .filter(ExpenseCategory.user_id == self.user_id)
            .first()
        )
        if has_any is not None:
            return False

        for name in DEFAULT_CATEGORIES:
            self.db.add(ExpenseCategory(user_id=self.user_id, name=name, is_custom=False))
        self.db.flush()
        return True

    def list(self, limit: Optional[int] = settings.list_limit) -> List[ExpenseCategory]:
        query = (
            self.db.query(ExpenseCategory)
            .filter(ExpenseCategory.user_id == self.user_id)
            .order_by(ExpenseCategory.name)
        )
        if limit is not None:
            query = query.limit(limit)
        return query.all()


class BudgetRepository:
    """Assembles engine inputs from the record tables"""

    def __init__(self, db: Session, user_id: str):
        self.incomes = IncomeRepository(db, user_id)
        self.expenses = ExpenseRepository(db, user_id)
        self.debts = DebtRepository(db, user_id)
        self.savings_goals = SavingsGoalRepository(db, user_id)

    def load_snapshot(self, period_start: date, period_end: date) -> BudgetSnapshot:
        """
        Current-period snapshot for the affordability engine.

        Incomes and expenses are limited to the period; debts are not.
        """
        return BudgetSnapshot(
            incomes=[
                IncomeRecord(amount=i.amount, frequency=i.frequency)
                for i in self.incomes.list(period_start, period_end, limit=None)
            ],
            expenses=[
                ExpenseRecord(
                    amount=e.amount,
                    is_recurring=e.is_recurring,
                    recurring_frequency=e.recurring_frequency,
                    category_id=e.category_id,
                )
                for e in self.expenses.list(period_start, period_end, limit=None)
            ],
            debts=[
                DebtRecord(
                    minimum_payment=d.minimum_payment,
                    interest_rate=d.interest_rate,
                    remaining_amount=d.remaining_amount,
                )
                for d in self.debts.list(limit=None)
            ],
        )

    def load_savings_goals(self) -> List[SavingsGoalRecord]:
        return [
            SavingsGoalRecord(target_amount=g.target_amount, current_amount=g.current_amount)
            for g in self.savings_goals.list(limit=None)
        ]
