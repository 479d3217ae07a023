from sqlalchemy.orm import Session
from typing import List, Optional
from store_admin.db.models.billboard import Billboard
from store_admin.db.schemas.billboard import BillboardCreate, BillboardUpdate
from store_admin.lock_guard import guarded_update, guarded_delete

def get_billboard(db: Session, billboard_id: str) -> Optional[Billboard]:
    return db.query(Billboard).filter(Billboard.id == billboard_id).first()

def get_billboards(db: Session, store_id: str) -> List[Billboard]:
    return db.query(Billboard).filter(Billboard.store_id == store_id).order_by(Billboard.created_at.desc()).all()

def create_billboard(db: Session, store_id: str, billboard: BillboardCreate) -> Billboard:
    db_billboard = Billboard(store_id=store_id, **billboard.scalar_values())
    db.add(db_billboard)
    db.commit()
    db.refresh(db_billboard)
    return db_billboard

def update_billboard(db: Session, store_id: str, billboard_id: str, billboard: BillboardUpdate) -> Optional[Billboard]:
    guarded_update(db, Billboard, store_id, billboard_id, billboard.scalar_values())
    return db.get(Billboard, billboard_id, populate_existing=True)

def delete_billboard(db: Session, store_id: str, billboard_id: str) -> Billboard:
    return guarded_delete(db, Billboard, store_id, billboard_id)
