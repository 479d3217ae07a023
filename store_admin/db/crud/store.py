from sqlalchemy.orm import Session
from typing import List, Optional
from store_admin.db.models.store import Store
from store_admin.db.schemas.store import StoreSchema

def get_store(db: Session, store_id: str) -> Optional[Store]:
    return db.query(Store).filter(Store.id == store_id).first()

def get_stores_by_user(db: Session, user_id: str) -> List[Store]:
    return db.query(Store).filter(Store.user_id == user_id).order_by(Store.created_at).all()

def create_store(db: Session, user_id: str, store: StoreSchema) -> Store:
    db_store = Store(name=store.name, user_id=user_id)
    db.add(db_store)
    db.commit()
    db.refresh(db_store)
    return db_store

def update_store(db: Session, db_store: Store, store: StoreSchema) -> Store:
    db_store.name = store.name
    db.commit()
    db.refresh(db_store)
    return db_store

def delete_store(db: Session, db_store: Store) -> Store:
    db.delete(db_store)
    db.commit()
    return db_store
