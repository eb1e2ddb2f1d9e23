"""POST /v1/consult - affordability check for a proposed commitment"""

import time
import logging
from datetime import date
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query, Request
from sqlalchemy.orm import Session

from budget_gateway.api.v1.schemas import (
    ConsultRequest,
    ConsultResponse,
    DebtConsultRequest,
    ExpenseConsultRequest,
    SubscriptionConsultRequest,
)
from budget_gateway.api.dependencies import get_request_id, get_user_id
from budget_gateway.infrastructure.database.session import get_db
from budget_gateway.infrastructure.database.repositories import BudgetRepository
from budget_gateway.domain.affordability import compute_affordability
from budget_gateway.domain.models import ConsultInput, DebtConsult, ExpenseConsult, SubscriptionConsult
from budget_gateway.infrastructure.observability.metrics import record_consult
from budget_gateway.infrastructure.observability.logging import log_consult
from budget_gateway.utils.date_utils import month_bounds

router = APIRouter()


def to_consult_input(body: ConsultRequest) -> ConsultInput:
    """Translate the validated request variant into its domain counterpart"""
    match body:
        case ExpenseConsultRequest():
            return ExpenseConsult(
                amount=body.amount,
                is_recurring=body.is_recurring,
                recurring_frequency=body.recurring_frequency if body.is_recurring else None,
            )
        case DebtConsultRequest():
            return DebtConsult(
                amount=body.amount,
                minimum_payment=body.minimum_payment,
                months=body.months,
                interest_rate=body.interest_rate,
                down_payment=body.down_payment,
            )
        case SubscriptionConsultRequest():
            return SubscriptionConsult(amount=body.amount, billing_frequency=body.billing_frequency)
        case _:
            raise TypeError(f"Unsupported consult request: {type(body).__name__}")


@router.post("/consult", response_model=ConsultResponse)
def create_consult(
    request: Request,
    body: ConsultRequest,
    as_of: Optional[date] = Query(None, description="Any day in the budget month (default: today)"),
    db: Session = Depends(get_db),
    user_id: str = Depends(get_user_id),
):
    """
    Measure a proposed expense, debt, or subscription against this month's budget.

    Flow:
    1. Load incomes and expenses dated in the month, plus all debts
    2. Compute monthly baseline and the proposal's impact
    3. Return verdict and warnings
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        period_start, period_end = month_bounds(as_of or date.today())
        snapshot = BudgetRepository(db, user_id).load_snapshot(period_start, period_end)

        result = compute_affordability(snapshot, to_consult_input(body))

        duration_ms = (time.time() - start_time) * 1000
        record_consult(body.type, result.can_afford, result.warnings)
        log_consult(request_id, user_id, body.type, result.can_afford, len(result.warnings), duration_ms)

        return ConsultResponse(
            monthly_payment_impact=result.monthly_payment_impact,
            total_cost_over_time=result.total_cost_over_time,
            effect_on_available_budget=result.effect_on_available_budget,
            warnings=result.warnings,
            can_afford=result.can_afford,
        )

    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")
