from sqlalchemy.orm import Session
from typing import List, Optional
from store_admin.db.models.subcategory import Subcategory
from store_admin.db.schemas.subcategory import SubcategoryCreate, SubcategoryUpdate
from store_admin.lock_guard import guarded_update, guarded_delete, require_references_in_store

def get_subcategory(db: Session, subcategory_id: str) -> Optional[Subcategory]:
    return db.query(Subcategory).filter(Subcategory.id == subcategory_id).first()

def get_subcategories(db: Session, store_id: str, category_id: Optional[str] = None) -> List[Subcategory]:
    query = db.query(Subcategory).filter(Subcategory.store_id == store_id)
    if category_id:
        query = query.filter(Subcategory.category_id == category_id)
    return query.order_by(Subcategory.created_at.desc()).all()

def create_subcategory(db: Session, store_id: str, subcategory: SubcategoryCreate) -> Subcategory:
    values = subcategory.scalar_values()
    require_references_in_store(db, store_id, values)
    db_subcategory = Subcategory(store_id=store_id, **values)
    db.add(db_subcategory)
    db.commit()
    db.refresh(db_subcategory)
    return db_subcategory

def update_subcategory(db: Session, store_id: str, subcategory_id: str, subcategory: SubcategoryUpdate) -> Optional[Subcategory]:
    values = subcategory.scalar_values()
    require_references_in_store(db, store_id, values)
    guarded_update(db, Subcategory, store_id, subcategory_id, values)
    return db.get(Subcategory, subcategory_id, populate_existing=True)

def delete_subcategory(db: Session, store_id: str, subcategory_id: str) -> Subcategory:
    return guarded_delete(db, Subcategory, store_id, subcategory_id)
