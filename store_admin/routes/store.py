# routers/store.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List
from store_admin.db.crud import store as store_crud
from store_admin.db.schemas.store import StoreSchema, StoreResponse
from store_admin.dependencies import get_db, get_current_user_id
from store_admin.lock_guard import require_entity_id, require_store_owner

router = APIRouter(
    prefix="/api/stores",
    tags=["stores"]
)

@router.get("", response_model=List[StoreResponse], name="stores_get")
def get_stores(
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """Stores owned by the caller"""
    return store_crud.get_stores_by_user(db, user_id)

@router.post("", response_model=StoreResponse, name="stores_post")
def create_store(
    store: StoreSchema,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    store.ensure_required()
    return store_crud.create_store(db, user_id, store)

@router.patch("/{store_id}", response_model=StoreResponse, name="store_patch")
def update_store(
    store_id: str,
    store: StoreSchema,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """Rename a store"""
    store.ensure_required()
    require_entity_id(store_id, "Store")
    db_store = require_store_owner(db, store_id, user_id)
    return store_crud.update_store(db, db_store, store)

@router.delete("/{store_id}", response_model=StoreResponse, name="store_delete")
def delete_store(
    store_id: str,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """Delete a store; fails while it still has catalog rows"""
    require_entity_id(store_id, "Store")
    db_store = require_store_owner(db, store_id, user_id)
    return store_crud.delete_store(db, db_store)
