from sqlalchemy.orm import Session, joinedload
from typing import List, Optional
from store_admin.db.models.category import Category
from store_admin.db.schemas.category import CategoryCreate, CategoryUpdate
from store_admin.lock_guard import guarded_update, guarded_delete, require_references_in_store

def get_category(db: Session, category_id: str) -> Optional[Category]:
    return (
        db.query(Category)
        .options(joinedload(Category.billboard))
        .filter(Category.id == category_id)
        .first()
    )

def get_categories(db: Session, store_id: str) -> List[Category]:
    return (
        db.query(Category)
        .options(joinedload(Category.billboard))
        .filter(Category.store_id == store_id)
        .order_by(Category.created_at.desc())
        .all()
    )

def create_category(db: Session, store_id: str, category: CategoryCreate) -> Category:
    values = category.scalar_values()
    require_references_in_store(db, store_id, values)
    db_category = Category(store_id=store_id, **values)
    db.add(db_category)
    db.commit()
    db.refresh(db_category)
    return db_category

def update_category(db: Session, store_id: str, category_id: str, category: CategoryUpdate) -> Optional[Category]:
    values = category.scalar_values()
    require_references_in_store(db, store_id, values)
    guarded_update(db, Category, store_id, category_id, values)
    return db.get(Category, category_id, populate_existing=True)

def delete_category(db: Session, store_id: str, category_id: str) -> Category:
    return guarded_delete(db, Category, store_id, category_id)
