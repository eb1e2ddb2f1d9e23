"""Unit tests for dashboard aggregation"""

import pytest
from datetime import date
from budget_gateway.domain.dashboard import expenses_by_category, savings_progress, summarize_budget
from budget_gateway.domain.models import BudgetSnapshot, ExpenseRecord, SavingsGoalRecord
from budget_gateway.utils.date_utils import month_bounds


def test_summarize_budget(sample_snapshot):
    goals = [
        SavingsGoalRecord(target_amount=10000, current_amount=2500),
        SavingsGoalRecord(target_amount=1500, current_amount=300.5),
    ]

    summary = summarize_budget(sample_snapshot, goals)

    assert summary.baseline.monthly_income == pytest.approx(3355.0)
    assert summary.baseline.current_available_budget == pytest.approx(1961.7)
    assert summary.total_debt == 4000
    assert summary.total_savings == pytest.approx(2800.5)


def test_expenses_by_category_includes_one_off_spending(sample_snapshot):
    """Category totals use raw amounts of every expense in the period"""
    assert expenses_by_category(sample_snapshot) == {
        "housing": 1200,
        "fitness": 10,
        "electronics": 250,
    }


def test_expenses_by_category_groups_uncategorized():
    snapshot = BudgetSnapshot(
        expenses=[
            ExpenseRecord(amount=10.105),
            ExpenseRecord(amount=5.2, category_id=""),
            ExpenseRecord(amount=40, category_id="food"),
            ExpenseRecord(amount=2.5, category_id="food"),
        ]
    )

    totals = expenses_by_category(snapshot)

    assert totals["Other"] == pytest.approx(15.31, abs=0.01)
    assert totals["food"] == 42.5


def test_summarize_empty_budget():
    summary = summarize_budget(BudgetSnapshot(), [])

    assert summary.baseline.current_available_budget == 0
    assert summary.total_debt == 0
    assert summary.total_savings == 0
    assert summary.expenses_by_category == {}


def test_savings_progress():
    progress = savings_progress(SavingsGoalRecord(target_amount=1500, current_amount=300.5))

    assert progress.progress_percent == pytest.approx(20.0333, rel=1e-4)
    assert progress.remaining_amount == pytest.approx(1199.5)


def test_savings_progress_caps_at_100():
    progress = savings_progress(SavingsGoalRecord(target_amount=1000, current_amount=1250))

    assert progress.progress_percent == 100.0
    assert progress.remaining_amount == -250


def test_savings_progress_zero_target():
    progress = savings_progress(SavingsGoalRecord(target_amount=0, current_amount=40))

    assert progress.progress_percent == 0.0
    assert progress.remaining_amount == -40


def test_month_bounds():
    """Test first/last day including leap-year February"""
    assert month_bounds(date(2024, 2, 10)) == (date(2024, 2, 1), date(2024, 2, 29))
    assert month_bounds(date(2023, 2, 28)) == (date(2023, 2, 1), date(2023, 2, 28))
    assert month_bounds(date(2024, 12, 31)) == (date(2024, 12, 1), date(2024, 12, 31))
    assert month_bounds(date(2024, 4, 1)) == (date(2024, 4, 1), date(2024, 4, 30))
