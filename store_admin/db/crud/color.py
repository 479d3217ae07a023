from sqlalchemy.orm import Session
from typing import List, Optional
from store_admin.db.models.color import Color
from store_admin.db.schemas.color import ColorCreate, ColorUpdate
from store_admin.lock_guard import guarded_update, guarded_delete

def get_color(db: Session, color_id: str) -> Optional[Color]:
    return db.query(Color).filter(Color.id == color_id).first()

def get_colors(db: Session, store_id: str) -> List[Color]:
    return db.query(Color).filter(Color.store_id == store_id).order_by(Color.created_at.desc()).all()

def create_color(db: Session, store_id: str, color: ColorCreate) -> Color:
    db_color = Color(store_id=store_id, **color.scalar_values())
    db.add(db_color)
    db.commit()
    db.refresh(db_color)
    return db_color

def update_color(db: Session, store_id: str, color_id: str, color: ColorUpdate) -> Optional[Color]:
    guarded_update(db, Color, store_id, color_id, color.scalar_values())
    return db.get(Color, color_id, populate_existing=True)

def delete_color(db: Session, store_id: str, color_id: str) -> Color:
    return guarded_delete(db, Color, store_id, color_id)
