"""Affordability engine - core business logic for consult decisions"""

from typing import List, Optional
from budget_gateway.domain.models import (
    BudgetBaseline,
    BudgetSnapshot,
    ConsultInput,
    ConsultResult,
    DebtConsult,
    ExpenseConsult,
    SubscriptionConsult,
)

# Approximate number of occurrences per month for each recurring frequency
FREQUENCY_MULTIPLIERS = {
    "daily": 30,
    "weekly": 4.33,  # 52 / 12
    "biweekly": 2.17,  # 26 / 12
    "monthly": 1,
    "yearly": 1 / 12,
}

INCOME_SHARE_THRESHOLD = 0.3
HIGH_INTEREST_RATE = 20

WARNING_EXCEEDS_BUDGET = "This will exceed your available budget"
WARNING_INCOME_SHARE = "This payment represents more than 30% of your monthly income"
WARNING_HIGH_INTEREST = "High interest rate detected. Consider alternatives if possible."


def monthly_multiplier(frequency: Optional[str]) -> float:
    """Map a recurring frequency to its monthly multiplier (unknown -> 1)"""
    return FREQUENCY_MULTIPLIERS.get(frequency, 1)


def monthly_equivalent(amount: float, frequency: Optional[str]) -> float:
    """Normalize an amount paid at `frequency` onto a monthly basis"""
    return amount * monthly_multiplier(frequency)


def compute_baseline(snapshot: BudgetSnapshot) -> BudgetBaseline:
    """
    Reduce a period snapshot to monthly totals.

    - Incomes are converted by their frequency
    - Only recurring expenses count; one-off expenses are already spent
    - Debt minimum payments are monthly by definition
    """
    monthly_income = sum(
        monthly_equivalent(income.amount, income.frequency) for income in snapshot.incomes
    )
    monthly_expenses = sum(
        monthly_equivalent(expense.amount, expense.recurring_frequency)
        for expense in snapshot.expenses
        if expense.is_recurring
    )
    monthly_debt_payments = sum(debt.minimum_payment for debt in snapshot.debts)

    return BudgetBaseline(
        monthly_income=monthly_income,
        monthly_expenses=monthly_expenses,
        monthly_debt_payments=monthly_debt_payments,
        current_available_budget=monthly_income - monthly_expenses - monthly_debt_payments,
    )


def _expense_impact(consult: ExpenseConsult) -> tuple[float, float]:
    if consult.is_recurring and consult.recurring_frequency:
        monthly_impact = monthly_equivalent(consult.amount, consult.recurring_frequency)
    else:
        # One-time hit counts as a full month's impact
        monthly_impact = consult.amount
    return monthly_impact, monthly_impact


def _debt_impact(consult: DebtConsult) -> tuple[float, float]:
    monthly_impact = consult.minimum_payment or 0.0

    total_cost = 0.0
    if consult.amount and consult.months:
        principal = consult.amount - (consult.down_payment or 0.0)
        if consult.interest_rate:
            # Flat simple interest over the whole term, not amortized
            monthly_rate = consult.interest_rate / 100 / 12
            total_cost = principal * (1 + monthly_rate * consult.months)
        else:
            total_cost = principal
        if consult.down_payment:
            total_cost += consult.down_payment

    return monthly_impact, total_cost


def _subscription_impact(consult: SubscriptionConsult) -> tuple[float, float]:
    if consult.billing_frequency == "yearly":
        return consult.amount / 12, consult.amount
    # Monthly, and the fallback for anything unrecognized
    return consult.amount, consult.amount * 12


def calculate_impact(consult: ConsultInput) -> tuple[float, float]:
    """
    Compute the proposed commitment's cost.

    Returns: (monthly_payment_impact, total_cost_over_time)
    """
    match consult:
        case ExpenseConsult():
            return _expense_impact(consult)
        case DebtConsult():
            return _debt_impact(consult)
        case SubscriptionConsult():
            return _subscription_impact(consult)
        case _:
            raise TypeError(f"Unsupported consult input: {type(consult).__name__}")


def collect_warnings(
    consult: ConsultInput,
    can_afford: bool,
    monthly_payment_impact: float,
    monthly_income: float,
) -> List[str]:
    """Advisory warnings, always in the same order"""
    warnings = []

    if not can_afford:
        warnings.append(WARNING_EXCEEDS_BUDGET)

    if monthly_payment_impact > monthly_income * INCOME_SHARE_THRESHOLD:
        warnings.append(WARNING_INCOME_SHARE)

    if (
        isinstance(consult, DebtConsult)
        and consult.interest_rate is not None
        and consult.interest_rate > HIGH_INTEREST_RATE
    ):
        warnings.append(WARNING_HIGH_INTEREST)

    return warnings


def compute_affordability(snapshot: BudgetSnapshot, consult: ConsultInput) -> ConsultResult:
    """
    Main entry point: measure a proposed commitment against the current budget.

    Unaffordable or risky commitments are reported through `can_afford` and
    `warnings`, never raised. Zero budget left over counts as affordable.
    """
    baseline = compute_baseline(snapshot)
    monthly_payment_impact, total_cost_over_time = calculate_impact(consult)

    effect = baseline.current_available_budget - monthly_payment_impact
    can_afford = effect >= 0

    return ConsultResult(
        monthly_payment_impact=monthly_payment_impact,
        total_cost_over_time=total_cost_over_time,
        effect_on_available_budget=effect,
        warnings=collect_warnings(consult, can_afford, monthly_payment_impact, baseline.monthly_income),
        can_afford=can_afford,
    )
