"""/v1/expenses - expense records"""

from datetime import date
from typing import List, Optional
from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy.orm import Session

from budget_gateway.api.v1.schemas import ExpenseCreate, ExpenseResponse, ExpenseUpdate
from budget_gateway.api.dependencies import get_user_id
from budget_gateway.domain.exceptions import InvalidRecordError
from budget_gateway.infrastructure.database.session import get_db
from budget_gateway.infrastructure.database.repositories import ExpenseRepository
from budget_gateway.infrastructure.observability.metrics import record_write

router = APIRouter()


@router.post("/expenses", response_model=ExpenseResponse, status_code=201)
def create_expense(
    body: ExpenseCreate,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_user_id),
):
    try:
        expense = ExpenseRepository(db, user_id).create(body.model_dump())
        db.commit()
    except Exception:
        db.rollback()
        raise

    db.refresh(expense)
    record_write("expense", "create")
    return expense


@router.get("/expenses", response_model=List[ExpenseResponse])
def list_expenses(
    start: Optional[date] = Query(None, description="Earliest expense date (inclusive)"),
    end: Optional[date] = Query(None, description="Latest expense date (inclusive)"),
    db: Session = Depends(get_db),
    user_id: str = Depends(get_user_id),
):
    """Expenses for the user, most recent first"""
    return ExpenseRepository(db, user_id).list(start, end)


@router.patch("/expenses/{expense_id}", response_model=ExpenseResponse)
def update_expense(
    expense_id: str,
    body: ExpenseUpdate,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_user_id),
):
    """
    Partially update an expense.

    Turning recurrence off clears the frequency; turning it on requires one,
    either in the same request or already stored.
    """
    repo = ExpenseRepository(db, user_id)
    changes = body.model_dump(exclude_unset=True)

    try:
        current = repo.get(expense_id)
        is_recurring = changes.get("is_recurring", current.is_recurring)
        if not is_recurring:
            if changes.get("recurring_frequency") is not None:
                raise InvalidRecordError("recurring_frequency is only allowed for recurring expenses")
            changes["recurring_frequency"] = None
        elif changes.get("recurring_frequency", current.recurring_frequency) is None:
            raise InvalidRecordError("recurring_frequency is required for recurring expenses")

        expense = repo.update(expense_id, changes)
        db.commit()
    except Exception:
        db.rollback()
        raise

    db.refresh(expense)
    record_write("expense", "update")
    return expense


@router.delete("/expenses/{expense_id}", status_code=204)
def delete_expense(
    expense_id: str,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_user_id),
):
    try:
        ExpenseRepository(db, user_id).delete(expense_id)
        db.commit()
    except Exception:
        db.rollback()
        raise

    record_write("expense", "delete")
    return Response(status_code=204)
