from sqlalchemy import delete
from sqlalchemy.orm import Session, selectinload
from typing import List, Optional
from store_admin.db.models.image import Image
from store_admin.db.models.product import Product
from store_admin.db.schemas.product import ProductCreate, ProductUpdate
from store_admin.lock_guard import guarded_update, guarded_delete, require_references_in_store

_DETAIL_OPTIONS = (
    selectinload(Product.images),
    selectinload(Product.category),
    selectinload(Product.subcategory),
    selectinload(Product.size),
    selectinload(Product.color),
)

def get_product(db: Session, product_id: str) -> Optional[Product]:
    return db.query(Product).options(*_DETAIL_OPTIONS).filter(Product.id == product_id).first()

def get_products(
    db: Session,
    store_id: str,
    category_id: Optional[str] = None,
    subcategory_id: Optional[str] = None,
    color_id: Optional[str] = None,
    size_id: Optional[str] = None,
    is_featured: Optional[bool] = None,
) -> List[Product]:
    """Storefront listing: archived products are never returned"""
    query = db.query(Product).options(*_DETAIL_OPTIONS).filter(
        Product.store_id == store_id,
        Product.is_archived == False,  # noqa: E712
    )
    if category_id:
        query = query.filter(Product.category_id == category_id)
    if subcategory_id:
        query = query.filter(Product.subcategory_id == subcategory_id)
    if color_id:
        query = query.filter(Product.color_id == color_id)
    if size_id:
        query = query.filter(Product.size_id == size_id)
    if is_featured is not None:
        query = query.filter(Product.is_featured == is_featured)
    return query.order_by(Product.created_at.desc()).all()

def create_product(db: Session, store_id: str, product: ProductCreate) -> Product:
    values = product.scalar_values()
    require_references_in_store(db, store_id, values)
    db_product = Product(store_id=store_id, **values)
    db_product.images = [Image(url=url) for url in product.image_urls()]
    db.add(db_product)
    db.commit()
    return db.get(Product, db_product.id, options=[selectinload(Product.images)], populate_existing=True)

def update_product(db: Session, store_id: str, product_id: str, product: ProductUpdate) -> Optional[Product]:
    values = product.scalar_values()
    require_references_in_store(db, store_id, values)
    # Scalar update, image wipe and image insert share one transaction
    guarded_update(db, Product, store_id, product_id, values, commit=False)
    db.execute(delete(Image).where(Image.product_id == product_id))
    db.add_all([Image(product_id=product_id, url=url) for url in product.image_urls()])
    db.commit()
    return db.get(Product, product_id, options=[selectinload(Product.images)], populate_existing=True)

def delete_product(db: Session, store_id: str, product_id: str) -> Product:
    return guarded_delete(db, Product, store_id, product_id)
