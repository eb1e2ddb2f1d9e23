"""/v1/savings-goals - savings targets"""

from typing import List
from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from budget_gateway.api.v1.schemas import SavingsGoalCreate, SavingsGoalResponse, SavingsGoalUpdate
from budget_gateway.api.dependencies import get_user_id
from budget_gateway.infrastructure.database.session import get_db
from budget_gateway.infrastructure.database.repositories import SavingsGoalRepository
from budget_gateway.infrastructure.observability.metrics import record_write

router = APIRouter()


@router.post("/savings-goals", response_model=SavingsGoalResponse, status_code=201)
def create_savings_goal(
    body: SavingsGoalCreate,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_user_id),
):
    try:
        goal = SavingsGoalRepository(db, user_id).create(body.model_dump())
        db.commit()
    except Exception:
        db.rollback()
        raise

    db.refresh(goal)
    record_write("savings_goal", "create")
    return goal


@router.get("/savings-goals", response_model=List[SavingsGoalResponse])
def list_savings_goals(db: Session = Depends(get_db), user_id: str = Depends(get_user_id)):
    """Goals with progress toward each target"""
    return SavingsGoalRepository(db, user_id).list()


@router.patch("/savings-goals/{goal_id}", response_model=SavingsGoalResponse)
def update_savings_goal(
    goal_id: str,
    body: SavingsGoalUpdate,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_user_id),
):
    try:
        goal = SavingsGoalRepository(db, user_id).update(goal_id, body.model_dump(exclude_unset=True))
        db.commit()
    except Exception:
        db.rollback()
        raise

    db.refresh(goal)
    record_write("savings_goal", "update")
    return goal


@router.delete("/savings-goals/{goal_id}", status_code=204)
def delete_savings_goal(
    goal_id: str,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_user_id),
):
    try:
        SavingsGoalRepository(db, user_id).delete(goal_id)
        db.commit()
    except Exception:
        db.rollback()
        raise

    record_write("savings_goal", "delete")
    return Response(status_code=204)
