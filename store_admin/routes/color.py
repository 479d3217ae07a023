from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List, Optional
from store_admin.dependencies import get_db, get_current_user_id
from store_admin.db.crud import color as color_crud
from store_admin.db.schemas.color import ColorCreate, ColorUpdate, Color
from store_admin.lock_guard import require_entity_id, require_store_owner

router = APIRouter(
    prefix="/api/{store_id}/colors",
    tags=["colors"]
)

@router.get("", response_model=List[Color], name="colors_get")
def get_colors(
    store_id: str,
    db: Session = Depends(get_db)
):
    """Get all colors"""
    require_entity_id(store_id, "Store")
    return color_crud.get_colors(db, store_id)

@router.post("", response_model=Color, name="colors_post")
def create_color(
    store_id: str,
    color: ColorCreate,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """Create a new color"""
    color.ensure_required()
    require_entity_id(store_id, "Store")
    require_store_owner(db, store_id, user_id)
    return color_crud.create_color(db, store_id, color)

@router.get("/{color_id}", response_model=Optional[Color], name="color_get")
def get_color(
    color_id: str,
    db: Session = Depends(get_db)
):
    """Get a specific color (null if it does not exist)"""
    require_entity_id(color_id, "Color")
    return color_crud.get_color(db, color_id)

@router.patch("/{color_id}", response_model=Color, name="color_patch")
def update_color(
    store_id: str,
    color_id: str,
    color: ColorUpdate,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """Update a color unless it is locked"""
    color.ensure_required()
    require_store_owner(db, store_id, user_id)
    require_entity_id(color_id, "Color")
    return color_crud.update_color(db, store_id, color_id, color)

@router.delete("/{color_id}", response_model=Color, name="color_delete")
def delete_color(
    store_id: str,
    color_id: str,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """Delete a color unless it is locked"""
    require_store_owner(db, store_id, user_id)
    require_entity_id(color_id, "Color")
    return color_crud.delete_color(db, store_id, color_id)
