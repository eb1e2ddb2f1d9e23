"""GET /v1/dashboard - monthly budget overview"""

import logging
from datetime import date
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query, Request
from sqlalchemy.orm import Session

from budget_gateway.api.v1.schemas import DashboardResponse
from budget_gateway.api.dependencies import get_request_id, get_user_id
from budget_gateway.config import settings
from budget_gateway.domain.dashboard import summarize_budget
from budget_gateway.infrastructure.database.session import get_db
from budget_gateway.infrastructure.database.repositories import BudgetRepository
from budget_gateway.utils.date_utils import month_bounds

router = APIRouter()


@router.get("/dashboard", response_model=DashboardResponse)
def get_dashboard(
    request: Request,
    as_of: Optional[date] = Query(None, description="Any day in the budget month (default: today)"),
    db: Session = Depends(get_db),
    user_id: str = Depends(get_user_id),
):
    """
    Monthly totals for the user's budget.

    Returns:
        Income, recurring expenses, and debt payments normalized to a month,
        what is left over, outstanding debt, savings, and spend per category
    """
    request_id = get_request_id(request)

    try:
        period_start, period_end = month_bounds(as_of or date.today())
        budget = BudgetRepository(db, user_id)
        summary = summarize_budget(budget.load_snapshot(period_start, period_end), budget.load_savings_goals())

        return DashboardResponse(
            period_start=period_start,
            period_end=period_end,
            currency_symbol=settings.currency_symbol,
            monthly_income=summary.baseline.monthly_income,
            monthly_expenses=summary.baseline.monthly_expenses,
            monthly_debt_payments=summary.baseline.monthly_debt_payments,
            available_budget=summary.baseline.current_available_budget,
            total_debt=summary.total_debt,
            total_savings=summary.total_savings,
            expenses_by_category=summary.expenses_by_category,
        )

    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")
