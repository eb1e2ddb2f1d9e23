"""Dashboard aggregation over a budget period"""

from typing import Dict, List
from budget_gateway.domain.affordability import compute_baseline
from budget_gateway.domain.models import BudgetSnapshot, DashboardSummary, SavingsGoalRecord, SavingsProgress

UNCATEGORIZED = "Other"


def expenses_by_category(snapshot: BudgetSnapshot) -> Dict[str, float]:
    """Sum every expense in the period (recurring or not) per category"""
    totals: Dict[str, float] = {}
    for expense in snapshot.expenses:
        category = expense.category_id or UNCATEGORIZED
        totals[category] = totals.get(category, 0.0) + expense.amount

    return {category: round(total, 2) for category, total in totals.items()}


def summarize_budget(snapshot: BudgetSnapshot, savings_goals: List[SavingsGoalRecord]) -> DashboardSummary:
    """Build the dashboard numbers from the same baseline the consult engine uses"""
    return DashboardSummary(
        baseline=compute_baseline(snapshot),
        total_debt=sum(debt.remaining_amount for debt in snapshot.debts),
        total_savings=sum(goal.current_amount for goal in savings_goals),
        expenses_by_category=expenses_by_category(snapshot),
    )


def savings_progress(goal: SavingsGoalRecord) -> SavingsProgress:
    """Percent of target reached (capped at 100) and amount still to save"""
    if goal.target_amount == 0:
        percent = 0.0
    else:
        percent = min(goal.current_amount / goal.target_amount * 100, 100.0)

    return SavingsProgress(
        progress_percent=percent,
        remaining_amount=goal.target_amount - goal.current_amount,
    )
