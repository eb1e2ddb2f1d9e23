"""/v1/categories - expense categories"""

from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from budget_gateway.api.v1.schemas import CategoryCreate, CategoryResponse
from budget_gateway.api.dependencies import get_user_id
from budget_gateway.infrastructure.database.session import get_db
from budget_gateway.infrastructure.database.repositories import CategoryRepository
from budget_gateway.infrastructure.observability.metrics import record_write

router = APIRouter()


@router.post("/categories", response_model=CategoryResponse, status_code=201)
def create_category(
    body: CategoryCreate,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_user_id),
):
    try:
        category = CategoryRepository(db, user_id).create(body.model_dump())
        db.commit()
    except Exception:
        db.rollback()
        raise

    db.refresh(category)
    record_write("category", "create")
    return category


@router.get("/categories", response_model=List[CategoryResponse])
def list_categories(db: Session = Depends(get_db), user_id: str = Depends(get_user_id)):
    """Categories sorted by name; a user with none gets the default set first"""
    repo = CategoryRepository(db, user_id)
    try:
        if repo.ensure_defaults():
            db.commit()
    except Exception:
        db.rollback()
        raise

    return repo.list()
