"""Unit tests for the affordability engine"""

import pytest
from budget_gateway.domain.models import (
    BudgetSnapshot,
    DebtConsult,
    DebtRecord,
    ExpenseConsult,
    ExpenseRecord,
    IncomeRecord,
    SubscriptionConsult,
)
from budget_gateway.domain.affordability import (
    WARNING_EXCEEDS_BUDGET,
    WARNING_HIGH_INTEREST,
    WARNING_INCOME_SHARE,
    calculate_impact,
    compute_affordability,
    compute_baseline,
    monthly_equivalent,
    monthly_multiplier,
)


def income_only(monthly_amount: float) -> BudgetSnapshot:
    return BudgetSnapshot(incomes=[IncomeRecord(amount=monthly_amount, frequency="monthly")])


def test_monthly_multiplier_known_frequencies():
    """Test each recurring frequency maps to its per-month factor"""
    assert monthly_multiplier("daily") == 30
    assert monthly_multiplier("weekly") == 4.33
    assert monthly_multiplier("biweekly") == 2.17
    assert monthly_multiplier("monthly") == 1
    assert monthly_multiplier("yearly") == pytest.approx(0.0833, abs=1e-4)


def test_monthly_multiplier_unknown_defaults_to_one():
    """Test unrecognized or missing frequency falls back to monthly"""
    assert monthly_multiplier("fortnightly") == 1
    assert monthly_multiplier("") == 1
    assert monthly_multiplier(None) == 1


@pytest.mark.parametrize("frequency", ["daily", "weekly", "biweekly", "monthly", "yearly", "unknown"])
@pytest.mark.parametrize("amount", [0, 0.01, 19.99, 2500])
def test_monthly_equivalent_non_negative(amount, frequency):
    assert monthly_equivalent(amount, frequency) >= 0


def test_monthly_equivalent_monthly_is_identity():
    assert monthly_equivalent(1234.56, "monthly") == 1234.56
    assert monthly_equivalent(100, "weekly") == pytest.approx(433.0)
    assert monthly_equivalent(1200, "yearly") == pytest.approx(100.0)


def test_compute_baseline(sample_snapshot):
    """Test income conversion, recurring-only expenses, and raw debt payments"""
    baseline = compute_baseline(sample_snapshot)

    assert baseline.monthly_income == pytest.approx(3355.0)  # 1500*2.17 + 1200/12
    assert baseline.monthly_expenses == pytest.approx(1243.3)  # 1200 + 10*4.33, one-off ignored
    assert baseline.monthly_debt_payments == pytest.approx(150.0)
    assert baseline.current_available_budget == pytest.approx(1961.7)


def test_compute_baseline_empty_snapshot():
    baseline = compute_baseline(BudgetSnapshot())

    assert baseline.monthly_income == 0
    assert baseline.monthly_expenses == 0
    assert baseline.monthly_debt_payments == 0
    assert baseline.current_available_budget == 0


def test_expense_affordable():
    """$5000/mo income, one-off $500 expense"""
    result = compute_affordability(income_only(5000), ExpenseConsult(amount=500, is_recurring=False))

    assert result.monthly_payment_impact == 500
    assert result.total_cost_over_time == 500
    assert result.effect_on_available_budget == 4500
    assert result.can_afford is True
    assert result.warnings == []


def test_expense_exceeds_budget():
    """$1000/mo income with $900/mo already committed cannot take a $200 expense"""
    snapshot = BudgetSnapshot(
        incomes=[IncomeRecord(amount=1000, frequency="monthly")],
        expenses=[ExpenseRecord(amount=900, is_recurring=True, recurring_frequency="monthly")],
    )
    assert compute_baseline(snapshot).current_available_budget == 100

    result = compute_affordability(snapshot, ExpenseConsult(amount=200, is_recurring=False))

    assert result.monthly_payment_impact == 200
    assert result.effect_on_available_budget == -100
    assert result.can_afford is False
    assert result.warnings == [WARNING_EXCEEDS_BUDGET]


def test_recurring_expense_is_normalized():
    result = compute_affordability(
        income_only(5000),
        ExpenseConsult(amount=20, is_recurring=True, recurring_frequency="daily"),
    )

    assert result.monthly_payment_impact == 600
    assert result.total_cost_over_time == 600  # one month horizon
    assert result.effect_on_available_budget == 4400


def test_recurring_expense_without_frequency_counts_once():
    impact, total = calculate_impact(ExpenseConsult(amount=75, is_recurring=True, recurring_frequency=None))
    assert impact == 75
    assert total == 75


def test_debt_with_high_interest():
    """$12000 over 12 months at 24% simple interest"""
    consult = DebtConsult(amount=12000, months=12, interest_rate=24, down_payment=0)

    result = compute_affordability(BudgetSnapshot(), consult)

    assert result.total_cost_over_time == pytest.approx(14880.0)  # 12000 * (1 + 0.02 * 12)
    assert result.monthly_payment_impact == 0
    assert WARNING_HIGH_INTEREST in result.warnings


def test_debt_down_payment_reduces_financed_principal():
    """Interest accrues on principal net of down payment; down payment is added back"""
    consult = DebtConsult(amount=10000, months=24, interest_rate=12, down_payment=2000, minimum_payment=400)

    impact, total = calculate_impact(consult)

    assert impact == 400
    # 8000 * (1 + 0.01 * 24) + 2000
    assert total == pytest.approx(11920.0)


def test_debt_without_interest_costs_principal():
    impact, total = calculate_impact(DebtConsult(amount=3000, months=6, minimum_payment=500))
    assert impact == 500
    assert total == 3000


def test_debt_without_term_has_no_projection():
    """Missing months leaves total cost at zero instead of failing"""
    impact, total = calculate_impact(DebtConsult(amount=5000, interest_rate=10, minimum_payment=150))
    assert impact == 150
    assert total == 0


def test_debt_interest_at_threshold_is_not_flagged():
    result = compute_affordability(income_only(5000), DebtConsult(amount=1000, months=10, interest_rate=20))
    assert WARNING_HIGH_INTEREST not in result.warnings


def test_subscription_yearly():
    result = compute_affordability(income_only(3000), SubscriptionConsult(amount=120, billing_frequency="yearly"))

    assert result.monthly_payment_impact == pytest.approx(10.0)
    assert result.total_cost_over_time == 120


def test_subscription_monthly_projects_one_year():
    impact, total = calculate_impact(SubscriptionConsult(amount=15, billing_frequency="monthly"))
    assert impact == 15
    assert total == 180


def test_subscription_unknown_billing_treated_as_monthly():
    impact, total = calculate_impact(SubscriptionConsult(amount=15, billing_frequency="quarterly"))
    assert impact == 15
    assert total == 180


def test_income_share_warning_when_affordable():
    """More than 30% of income warns even when the budget can absorb it"""
    result = compute_affordability(income_only(1000), ExpenseConsult(amount=301))

    assert result.can_afford is True
    assert result.warnings == [WARNING_INCOME_SHARE]


def test_income_share_at_exactly_thirty_percent_is_not_flagged():
    result = compute_affordability(income_only(1000), ExpenseConsult(amount=300))
    assert result.warnings == []


def test_zero_remaining_budget_is_affordable():
    result = compute_affordability(income_only(1000), ExpenseConsult(amount=1000))

    assert result.effect_on_available_budget == 0
    assert result.can_afford is True
    assert WARNING_EXCEEDS_BUDGET not in result.warnings


def test_warnings_keep_fixed_order():
    """All three warnings fire together in a deterministic order"""
    snapshot = BudgetSnapshot(
        incomes=[IncomeRecord(amount=1000, frequency="monthly")],
        debts=[DebtRecord(minimum_payment=800)],
    )
    consult = DebtConsult(amount=9000, months=36, interest_rate=29.9, minimum_payment=400)

    result = compute_affordability(snapshot, consult)

    assert result.can_afford is False
    assert result.warnings == [WARNING_EXCEEDS_BUDGET, WARNING_INCOME_SHARE, WARNING_HIGH_INTEREST]


def test_compute_affordability_is_repeatable(sample_snapshot):
    consult = DebtConsult(amount=6000, months=18, interest_rate=21, minimum_payment=380)

    first = compute_affordability(sample_snapshot, consult)
    second = compute_affordability(sample_snapshot, consult)

    assert first == second


def test_unsupported_consult_input():
    with pytest.raises(TypeError):
        calculate_impact({"type": "expense", "amount": 10})
