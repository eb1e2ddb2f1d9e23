"""/v1/debts - outstanding debts"""

from typing import List
from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from budget_gateway.api.v1.schemas import DebtCreate, DebtResponse, DebtUpdate
from budget_gateway.api.dependencies import get_user_id
from budget_gateway.infrastructure.database.session import get_db
from budget_gateway.infrastructure.database.repositories import DebtRepository
from budget_gateway.infrastructure.observability.metrics import record_write

router = APIRouter()


@router.post("/debts", response_model=DebtResponse, status_code=201)
def create_debt(
    body: DebtCreate,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_user_id),
):
    try:
        debt = DebtRepository(db, user_id).create(body.model_dump())
        db.commit()
    except Exception:
        db.rollback()
        raise

    db.refresh(debt)
    record_write("debt", "create")
    return debt


@router.get("/debts", response_model=List[DebtResponse])
def list_debts(db: Session = Depends(get_db), user_id: str = Depends(get_user_id)):
    return DebtRepository(db, user_id).list()


@router.patch("/debts/{debt_id}", response_model=DebtResponse)
def update_debt(
    debt_id: str,
    body: DebtUpdate,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_user_id),
):
    """Fields sent as null clear nullable columns (interest_rate, notes)"""
    try:
        debt = DebtRepository(db, user_id).update(debt_id, body.model_dump(exclude_unset=True))
        db.commit()
    except Exception:
        db.rollback()
        raise

    db.refresh(debt)
    record_write("debt", "update")
    return debt


@router.delete("/debts/{debt_id}", status_code=204)
def delete_debt(
    debt_id: str,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_user_id),
):
    try:
        DebtRepository(db, user_id).delete(debt_id)
        db.commit()
    except Exception:
        db.rollback()
        raise

    record_write("debt", "delete")
    return Response(status_code=204)
