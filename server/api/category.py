# server/api/category.py

from pydantic import BaseModel
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from core import categories
from database import get_db


router = APIRouter()


class CategoryRequest(BaseModel):
    """
    Body of add_category / edit_category.
    Leaving `parent` out of an edit keeps the current parent; sending null makes
    the category a root.
    """
    name: str | None = None
    parent: str | None = None


@router.post("/add_category", status_code=status.HTTP_201_CREATED)
def add_category(req: CategoryRequest, db: Session = Depends(get_db)):
    category = categories.create_category(db, req.name, req.parent)
    return {"message": "Category added successfully", "category": category.to_dict()}


@router.get("/get_categories")
def get_categories(db: Session = Depends(get_db)):
    return {"categories": categories.list_categories(db)}


@router.put("/edit_category/{category_id}")
def edit_category(category_id: str, req: CategoryRequest, db: Session = Depends(get_db)):
    parent = req.parent if "parent" in req.model_fields_set else categories.UNSET
    category = categories.update_category(db, category_id, req.name, parent)
    return {"message": "Category updated successfully", "category": category.to_dict()}


@router.delete("/delete_category/{category_id}")
def delete_category(category_id: str, db: Session = Depends(get_db)):
    categories.delete_category(db, category_id)
    return {"message": "Category deleted successfully"}
