from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List, Optional
from store_admin.dependencies import get_db, get_current_user_id
from store_admin.db.crud import category as category_crud
from store_admin.db.schemas.category import CategoryCreate, CategoryUpdate, Category, CategoryWithBillboard
from store_admin.lock_guard import require_entity_id, require_store_owner

router = APIRouter(
    prefix="/api/{store_id}/categories",
    tags=["categories"]
)

@router.get("", response_model=List[CategoryWithBillboard], name="categories_get")
def get_categories(
    store_id: str,
    db: Session = Depends(get_db)
):
    """Get all categories of a store with their billboard"""
    require_entity_id(store_id, "Store")
    return category_crud.get_categories(db, store_id)

@router.post("", response_model=Category, name="categories_post")
def create_category(
    store_id: str,
    category: CategoryCreate,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """Create a new category"""
    category.ensure_required()
    require_entity_id(store_id, "Store")
    require_store_owner(db, store_id, user_id)
    return category_crud.create_category(db, store_id, category)

@router.get("/{category_id}", response_model=Optional[CategoryWithBillboard], name="category_get")
def get_category(
    category_id: str,
    db: Session = Depends(get_db)
):
    """Get a specific category, billboard included"""
    require_entity_id(category_id, "Category")
    return category_crud.get_category(db, category_id)

@router.patch("/{category_id}", response_model=Category, name="category_patch")
def update_category(
    store_id: str,
    category_id: str,
    category: CategoryUpdate,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """Update a category unless it is locked"""
    category.ensure_required()
    require_store_owner(db, store_id, user_id)
    require_entity_id(category_id, "Category")
    return category_crud.update_category(db, store_id, category_id, category)

@router.delete("/{category_id}", response_model=Category, name="category_delete")
def delete_category(
    store_id: str,
    category_id: str,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """Delete a category unless it is locked; fails while subcategories or products use it"""
    require_store_owner(db, store_id, user_id)
    require_entity_id(category_id, "Category")
    return category_crud.delete_category(db, store_id, category_id)
