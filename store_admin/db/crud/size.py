from sqlalchemy.orm import Session
from typing import List, Optional
from store_admin.db.models.size import Size
from store_admin.db.schemas.size import SizeCreate, SizeUpdate
from store_admin.lock_guard import guarded_update, guarded_delete

def get_size(db: Session, size_id: str) -> Optional[Size]:
    return db.query(Size).filter(Size.id == size_id).first()

def get_sizes(db: Session, store_id: str) -> List[Size]:
    return db.query(Size).filter(Size.store_id == store_id).order_by(Size.created_at.desc()).all()

def create_size(db: Session, store_id: str, size: SizeCreate) -> Size:
    db_size = Size(store_id=store_id, **size.scalar_values())
    db.add(db_size)
    db.commit()
    db.refresh(db_size)
    return db_size

def update_size(db: Session, store_id: str, size_id: str, size: SizeUpdate) -> Optional[Size]:
    guarded_update(db, Size, store_id, size_id, size.scalar_values())
    return db.get(Size, size_id, populate_existing=True)

def delete_size(db: Session, store_id: str, size_id: str) -> Size:
    return guarded_delete(db, Size, store_id, size_id)
