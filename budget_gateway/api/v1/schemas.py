"""Pydantic schemas for API request/response validation"""

import uuid
import datetime as dt
from typing import Annotated, Dict, List, Literal, Optional, Union
from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator, model_validator

from budget_gateway.domain.dashboard import savings_progress
from budget_gateway.domain.models import SavingsGoalRecord

IncomeFrequency = Literal["daily", "weekly", "biweekly", "monthly", "yearly"]
ExpenseFrequency = Literal["daily", "weekly", "monthly", "yearly"]
DebtType = Literal["credit_card", "loan", "other"]

Amount = Annotated[float, Field(ge=0, allow_inf_nan=False)]


def reject_null(value):
    """Explicit null is only allowed on nullable columns; omit the field instead"""
    if value is None:
        raise ValueError("field may be omitted but not null")
    return value


class RecordResponse(BaseModel):
    """Fields common to every stored record"""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    created_at: dt.datetime
    updated_at: dt.datetime


# Incomes

class IncomeCreate(BaseModel):
    """Request body for POST /v1/incomes"""

    amount: Amount
    source: str = Field(..., min_length=1)
    frequency: IncomeFrequency
    date: dt.date
    notes: Optional[str] = None


class IncomeUpdate(BaseModel):
    """Request body for PATCH /v1/incomes/{id}"""

    amount: Optional[Amount] = None
    source: Optional[str] = Field(None, min_length=1)
    frequency: Optional[IncomeFrequency] = None
    date: Optional[dt.date] = None
    notes: Optional[str] = None

    @field_validator("amount", "source", "frequency", "date")
    @classmethod
    def check_not_null(cls, value):
        return reject_null(value)


class IncomeResponse(RecordResponse):
    amount: float
    source: str
    frequency: str
    date: dt.date
    notes: Optional[str] = None


# Expenses

class ExpenseCreate(BaseModel):
    """Request body for POST /v1/expenses"""

    amount: Amount
    category_id: str = ""
    description: str = Field(..., min_length=1)
    date: dt.date
    is_recurring: bool = False
    recurring_frequency: Optional[ExpenseFrequency] = None
    next_due_date: Optional[dt.date] = None
    notes: Optional[str] = None

    @model_validator(mode="after")
    def check_recurrence(self) -> "ExpenseCreate":
        if self.is_recurring and self.recurring_frequency is None:
            raise ValueError("recurring_frequency is required for recurring expenses")
        if not self.is_recurring and self.recurring_frequency is not None:
            raise ValueError("recurring_frequency is only allowed for recurring expenses")
        return self


class ExpenseUpdate(BaseModel):
    """Request body for PATCH /v1/expenses/{id}"""

    amount: Optional[Amount] = None
    category_id: Optional[str] = None
    description: Optional[str] = Field(None, min_length=1)
    date: Optional[dt.date] = None
    is_recurring: Optional[bool] = None
    recurring_frequency: Optional[ExpenseFrequency] = None
    next_due_date: Optional[dt.date] = None
    notes: Optional[str] = None

    @field_validator("amount", "category_id", "description", "date", "is_recurring")
    @classmethod
    def check_not_null(cls, value):
        return reject_null(value)


class ExpenseResponse(RecordResponse):
    amount: float
    category_id: str
    description: str
    date: dt.date
    is_recurring: bool
    recurring_frequency: Optional[str] = None
    next_due_date: Optional[dt.date] = None
    notes: Optional[str] = None


# Debts

class DebtCreate(BaseModel):
    """Request body for POST /v1/debts"""

    type: DebtType
    creditor: str = Field(..., min_length=1)
    total_amount: Amount
    remaining_amount: Amount
    minimum_payment: Amount
    interest_rate: Optional[Amount] = None
    due_date: int = Field(..., ge=1, le=31, description="Day of month")
    notes: Optional[str] = None


class DebtUpdate(BaseModel):
    """Request body for PATCH /v1/debts/{id}"""

    type: Optional[DebtType] = None
    creditor: Optional[str] = Field(None, min_length=1)
    total_amount: Optional[Amount] = None
    remaining_amount: Optional[Amount] = None
    minimum_payment: Optional[Amount] = None
    interest_rate: Optional[Amount] = None
    due_date: Optional[int] = Field(None, ge=1, le=31)
    notes: Optional[str] = None

    @field_validator("type", "creditor", "total_amount", "remaining_amount", "minimum_payment", "due_date")
    @classmethod
    def check_not_null(cls, value):
        return reject_null(value)


class DebtResponse(RecordResponse):
    type: str
    creditor: str
    total_amount: float
    remaining_amount: float
    minimum_payment: float
    interest_rate: Optional[float] = None
    due_date: int
    notes: Optional[str] = None


# Savings goals

class SavingsGoalCreate(BaseModel):
    """Request body for POST /v1/savings-goals"""

    name: str = Field(..., min_length=1)
    target_amount: Amount
    current_amount: Amount = 0.0
    target_date: Optional[dt.date] = None
    notes: Optional[str] = None


class SavingsGoalUpdate(BaseModel):
    """Request body for PATCH /v1/savings-goals/{id}"""

    name: Optional[str] = Field(None, min_length=1)
    target_amount: Optional[Amount] = None
    current_amount: Optional[Amount] = None
    target_date: Optional[dt.date] = None
    notes: Optional[str] = None

    @field_validator("name", "target_amount", "current_amount")
    @classmethod
    def check_not_null(cls, value):
        return reject_null(value)


class SavingsGoalResponse(RecordResponse):
    name: str
    target_amount: float
    current_amount: float
    target_date: Optional[dt.date] = None
    notes: Optional[str] = None

    @computed_field
    @property
    def progress_percent(self) -> float:
        return savings_progress(SavingsGoalRecord(self.target_amount, self.current_amount)).progress_percent

    @computed_field
    @property
    def remaining_amount(self) -> float:
        return savings_progress(SavingsGoalRecord(self.target_amount, self.current_amount)).remaining_amount


# Categories

class CategoryCreate(BaseModel):
    """Request body for POST /v1/categories"""

    name: str = Field(..., min_length=1)
    is_custom: bool = True
    color: Optional[str] = None
    icon: Optional[str] = None


class CategoryResponse(RecordResponse):
    name: str
    is_custom: bool
    color: Optional[str] = None
    icon: Optional[str] = None


# Dashboard

class DashboardResponse(BaseModel):
    """Response for GET /v1/dashboard"""

    period_start: dt.date
    period_end: dt.date
    currency_symbol: str
    monthly_income: float
    monthly_expenses: float
    monthly_debt_payments: float
    available_budget: float
    total_debt: float
    total_savings: float
    expenses_by_category: Dict[str, float]


# Consult

class ExpenseConsultRequest(BaseModel):
    """Proposed new expense"""

    type: Literal["expense"]
    amount: Amount
    is_recurring: bool = False
    recurring_frequency: Optional[ExpenseFrequency] = None


class DebtConsultRequest(BaseModel):
    """Proposed new debt"""

    type: Literal["debt"]
    amount: Amount
    minimum_payment: Optional[Amount] = None
    months: Optional[int] = Field(None, ge=0, description="Loan term in months")
    interest_rate: Optional[Amount] = Field(None, description="Percent per year")
    down_payment: Optional[Amount] = None


class SubscriptionConsultRequest(BaseModel):
    """Proposed new subscription"""

    type: Literal["subscription"]
    amount: Amount
    billing_frequency: Literal["monthly", "yearly"] = "monthly"


ConsultRequest = Annotated[
    Union[ExpenseConsultRequest, DebtConsultRequest, SubscriptionConsultRequest],
    Field(discriminator="type"),
]


class ConsultResponse(BaseModel):
    """Response for POST /v1/consult"""

    monthly_payment_impact: float
    total_cost_over_time: float
    effect_on_available_budget: float
    warnings: List[str]
    can_afford: bool
