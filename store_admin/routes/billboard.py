from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List, Optional
from store_admin.dependencies import get_db, get_current_user_id
from store_admin.db.crud import billboard as billboard_crud
from store_admin.db.schemas.billboard import BillboardCreate, BillboardUpdate, Billboard
from store_admin.lock_guard import require_entity_id, require_store_owner

router = APIRouter(
    prefix="/api/{store_id}/billboards",
    tags=["billboards"]
)

@router.get("", response_model=List[Billboard], name="billboards_get")
def get_billboards(
    store_id: str,
    db: Session = Depends(get_db)
):
    """Get all billboards of a store"""
    require_entity_id(store_id, "Store")
    return billboard_crud.get_billboards(db, store_id)

@router.post("", response_model=Billboard, name="billboards_post")
def create_billboard(
    store_id: str,
    billboard: BillboardCreate,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """Create a new billboard"""
    billboard.ensure_required()
    require_entity_id(store_id, "Store")
    require_store_owner(db, store_id, user_id)
    return billboard_crud.create_billboard(db, store_id, billboard)

@router.get("/{billboard_id}", response_model=Optional[Billboard], name="billboard_get")
def get_billboard(
    billboard_id: str,
    db: Session = Depends(get_db)
):
    """Get a specific billboard (null if it does not exist)"""
    require_entity_id(billboard_id, "Billboard")
    return billboard_crud.get_billboard(db, billboard_id)

@router.patch("/{billboard_id}", response_model=Billboard, name="billboard_patch")
def update_billboard(
    store_id: str,
    billboard_id: str,
    billboard: BillboardUpdate,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """Update a billboard unless it is locked"""
    billboard.ensure_required()
    require_store_owner(db, store_id, user_id)
    require_entity_id(billboard_id, "Billboard")
    return billboard_crud.update_billboard(db, store_id, billboard_id, billboard)

@router.delete("/{billboard_id}", response_model=Billboard, name="billboard_delete")
def delete_billboard(
    store_id: str,
    billboard_id: str,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """Delete a billboard unless it is locked"""
    require_store_owner(db, store_id, user_id)
    require_entity_id(billboard_id, "Billboard")
    return billboard_crud.delete_billboard(db, store_id, billboard_id)
