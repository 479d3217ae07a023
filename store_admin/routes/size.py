from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List, Optional
from store_admin.dependencies import get_db, get_current_user_id
from store_admin.db.crud import size as size_crud
from store_admin.db.schemas.size import SizeCreate, SizeUpdate, Size
from store_admin.lock_guard import require_entity_id, require_store_owner

router = APIRouter(
    prefix="/api/{store_id}/sizes",
    tags=["sizes"]
)

@router.get("", response_model=List[Size], name="sizes_get")
def get_sizes(
    store_id: str,
    db: Session = Depends(get_db)
):
    """Get all sizes of a store"""
    require_entity_id(store_id, "Store")
    return size_crud.get_sizes(db, store_id)

@router.post("", response_model=Size, name="sizes_post")
def create_size(
    store_id: str,
    size: SizeCreate,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """Create a new size"""
    size.ensure_required()
    require_entity_id(store_id, "Store")
    require_store_owner(db, store_id, user_id)
    return size_crud.create_size(db, store_id, size)

@router.get("/{size_id}", response_model=Optional[Size], name="size_get")
def get_size(
    size_id: str,
    db: Session = Depends(get_db)
):
    """Get a specific size"""
    require_entity_id(size_id, "Size")
    return size_crud.get_size(db, size_id)

@router.patch("/{size_id}", response_model=Size, name="size_patch")
def update_size(
    store_id: str,
    size_id: str,
    size: SizeUpdate,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """Update a size unless it is locked"""
    size.ensure_required()
    require_store_owner(db, store_id, user_id)
    require_entity_id(size_id, "Size")
    return size_crud.update_size(db, store_id, size_id, size)

@router.delete("/{size_id}", response_model=Size, name="size_delete")
def delete_size(
    store_id: str,
    size_id: str,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """Delete a size unless it is locked"""
    require_store_owner(db, store_id, user_id)
    require_entity_id(size_id, "Size")
    return size_crud.delete_size(db, store_id, size_id)
