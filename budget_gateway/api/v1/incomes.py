"""/v1/incomes - income records"""

from datetime import date
from typing import List, Optional
from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy.orm import Session

from budget_gateway.api.v1.schemas import IncomeCreate, IncomeResponse, IncomeUpdate
from budget_gateway.api.dependencies import get_user_id
from budget_gateway.infrastructure.database.session import get_db
from budget_gateway.infrastructure.database.repositories import IncomeRepository
from budget_gateway.infrastructure.observability.metrics import record_write

router = APIRouter()


@router.post("/incomes", response_model=IncomeResponse, status_code=201)
def create_income(
    body: IncomeCreate,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_user_id),
):
    try:
        income = IncomeRepository(db, user_id).create(body.model_dump())
        db.commit()
    except Exception:
        db.rollback()
        raise

    db.refresh(income)
    record_write("income", "create")
    return income


@router.get("/incomes", response_model=List[IncomeResponse])
def list_incomes(
    start: Optional[date] = Query(None, description="Earliest income date (inclusive)"),
    end: Optional[date] = Query(None, description="Latest income date (inclusive)"),
    db: Session = Depends(get_db),
    user_id: str = Depends(get_user_id),
):
    """Incomes for the user, most recent first"""
    return IncomeRepository(db, user_id).list(start, end)


@router.patch("/incomes/{income_id}", response_model=IncomeResponse)
def update_income(
    income_id: str,
    body: IncomeUpdate,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_user_id),
):
    try:
        income = IncomeRepository(db, user_id).update(income_id, body.model_dump(exclude_unset=True))
        db.commit()
    except Exception:
        db.rollback()
        raise

    db.refresh(income)
    record_write("income", "update")
    return income


@router.delete("/incomes/{income_id}", status_code=204)
def delete_income(
    income_id: str,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_user_id),
):
    try:
        IncomeRepository(db, user_id).delete(income_id)
        db.commit()
    except Exception:
        db.rollback()
        raise

    record_write("income", "delete")
    return Response(status_code=204)
