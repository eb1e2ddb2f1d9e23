"""Domain models - pure Python dataclasses representing budget entities"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional


@dataclass
class IncomeRecord:
    """Recurring or one-time income entry for the active period"""

    amount: float
    frequency: str  # daily | weekly | biweekly | monthly | yearly


@dataclass
class ExpenseRecord:
    """Tracked expense; only recurring ones count toward the monthly burn rate"""

    amount: float
    is_recurring: bool = False
    recurring_frequency: Optional[str] = None
    category_id: str = ""


@dataclass
class DebtRecord:
    """Outstanding debt with a monthly minimum payment"""

    minimum_payment: float
    interest_rate: Optional[float] = None  # percent per year
    remaining_amount: float = 0.0


@dataclass
class SavingsGoalRecord:
    """Savings target and progress"""

    target_amount: float
    current_amount: float = 0.0


@dataclass
class BudgetSnapshot:
    """Current-period financial records the engine reads"""

    incomes: List[IncomeRecord] = field(default_factory=list)
    expenses: List[ExpenseRecord] = field(default_factory=list)
    debts: List[DebtRecord] = field(default_factory=list)


@dataclass
class ExpenseConsult:
    """Proposed new expense"""

    amount: float
    is_recurring: bool = False
    recurring_frequency: Optional[str] = None


@dataclass
class DebtConsult:
    """Proposed new debt or loan"""

    amount: float
    minimum_payment: Optional[float] = None
    months: Optional[int] = None
    interest_rate: Optional[float] = None  # percent per year
    down_payment: Optional[float] = None


@dataclass
class SubscriptionConsult:
    """Proposed new subscription"""

    amount: float
    billing_frequency: str = "monthly"  # monthly | yearly


ConsultInput = ExpenseConsult | DebtConsult | SubscriptionConsult


@dataclass
class BudgetBaseline:
    """Monthly-equivalent totals for a snapshot"""

    monthly_income: float
    monthly_expenses: float
    monthly_debt_payments: float
    current_available_budget: float


@dataclass
class ConsultResult:
    """Output of an affordability check"""

    monthly_payment_impact: float
    total_cost_over_time: float
    effect_on_available_budget: float
    warnings: List[str]
    can_afford: bool


@dataclass
class DashboardSummary:
    """Aggregated numbers for the budget dashboard"""

    baseline: BudgetBaseline
    total_debt: float
    total_savings: float
    expenses_by_category: Dict[str, float]


@dataclass
class SavingsProgress:
    """How far a savings goal has come"""

    progress_percent: float  # capped at 100
    remaining_amount: float
