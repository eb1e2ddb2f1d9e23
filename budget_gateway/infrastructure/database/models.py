"""SQLAlchemy ORM models for budget records"""

import uuid
from sqlalchemy import Column, Boolean, Float, DateTime, Date, Integer, Text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func

Base = declarative_base()


class OwnedRecordMixin:
    """Owner and audit columns shared by every user-scoped table"""

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(Text, nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())


class Income(OwnedRecordMixin, Base):
    """Income entry"""

    __tablename__ = "income"

    amount = Column(Float, nullable=False)
    source = Column(Text, nullable=False)
    frequency = Column(Text, nullable=False)
    date = Column(Date, nullable=False, index=True)
    notes = Column(Text, nullable=True)


class Expense(OwnedRecordMixin, Base):
    """Expense entry, optionally recurring"""

    __tablename__ = "expense"

    amount = Column(Float, nullable=False)
    category_id = Column(Text, nullable=False, default="")
    description = Column(Text, nullable=False)
    date = Column(Date, nullable=False, index=True)
    is_recurring = Column(Boolean, nullable=False, default=False)
    recurring_frequency = Column(Text, nullable=True)
    next_due_date = Column(Date, nullable=True)
    notes = Column(Text, nullable=True)


class Debt(OwnedRecordMixin, Base):
    """Outstanding debt"""

    __tablename__ = "debt"

    type = Column(Text, nullable=False)  # credit_card | loan | other
    creditor = Column(Text, nullable=False)
    total_amount = Column(Float, nullable=False)
    remaining_amount = Column(Float, nullable=False)
    minimum_payment = Column(Float, nullable=False)
    interest_rate = Column(Float, nullable=True)
    due_date = Column(Integer, nullable=False)  # Day of month (1-31)
    notes = Column(Text, nullable=True)


class SavingsGoal(OwnedRecordMixin, Base):
    """Savings target"""

    __tablename__ = "savings_goal"

    name = Column(Text, nullable=False)
    target_amount = Column(Float, nullable=False)
    current_amount = Column(Float, nullable=False, default=0.0)
    target_date = Column(Date, nullable=True)
    notes = Column(Text, nullable=True)


class ExpenseCategory(OwnedRecordMixin, Base):
    """User-defined or default expense category"""

    __tablename__ = "expense_category"

    name = Column(Text, nullable=False)
    is_custom = Column(Boolean, nullable=False, default=True)
    color = Column(Text, nullable=True)
    icon = Column(Text, nullable=True)
