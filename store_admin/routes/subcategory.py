from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List, Optional
from store_admin.dependencies import get_db, get_current_user_id
from store_admin.db.crud import subcategory as subcategory_crud
from store_admin.db.schemas.subcategory import SubcategoryCreate, SubcategoryUpdate, Subcategory
from store_admin.lock_guard import require_entity_id, require_store_owner

router = APIRouter(
    prefix="/api/{store_id}/subcategories",
    tags=["subcategories"]
)

@router.get("", response_model=List[Subcategory], name="subcategories_get")
def get_subcategories(
    store_id: str,
    category_id: Optional[str] = Query(None, alias="categoryId"),
    db: Session = Depends(get_db)
):
    """Get all subcategories of a store, optionally only those of one category"""
    require_entity_id(store_id, "Store")
    return subcategory_crud.get_subcategories(db, store_id, category_id=category_id)

@router.post("", response_model=Subcategory, name="subcategories_post")
def create_subcategory(
    store_id: str,
    subcategory: SubcategoryCreate,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """Create a new subcategory"""
    subcategory.ensure_required()
    require_entity_id(store_id, "Store")
    require_store_owner(db, store_id, user_id)
    return subcategory_crud.create_subcategory(db, store_id, subcategory)

@router.get("/{subcategory_id}", response_model=Optional[Subcategory], name="subcategory_get")
def get_subcategory(
    subcategory_id: str,
    db: Session = Depends(get_db)
):
    """Get a specific subcategory (null if it does not exist)"""
    require_entity_id(subcategory_id, "Subcategory")
    return subcategory_crud.get_subcategory(db, subcategory_id)

@router.patch("/{subcategory_id}", response_model=Subcategory, name="subcategory_patch")
def update_subcategory(
    store_id: str,
    subcategory_id: str,
    subcategory: SubcategoryUpdate,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """Update a subcategory unless it is locked"""
    subcategory.ensure_required()
    require_store_owner(db, store_id, user_id)
    require_entity_id(subcategory_id, "Subcategory")
    return subcategory_crud.update_subcategory(db, store_id, subcategory_id, subcategory)

@router.delete("/{subcategory_id}", response_model=Subcategory, name="subcategory_delete")
def delete_subcategory(
    store_id: str,
    subcategory_id: str,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """Delete a subcategory unless it is locked"""
    require_store_owner(db, store_id, user_id)
    require_entity_id(subcategory_id, "Subcategory")
    return subcategory_crud.delete_subcategory(db, store_id, subcategory_id)
