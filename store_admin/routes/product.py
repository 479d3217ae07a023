from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List, Optional
from store_admin.dependencies import get_db, get_current_user_id
from store_admin.db.crud import product as product_crud
from store_admin.db.schemas.product import (
    ProductCreate,
    ProductUpdate,
    Product,
    ProductWithImages,
    ProductDetail,
)
from store_admin.lock_guard import require_entity_id, require_store_owner

router = APIRouter(
    prefix="/api/{store_id}/products",
    tags=["products"]
)

@router.get("", response_model=List[ProductDetail], name="products_get")
def get_products(
    store_id: str,
    category_id: Optional[str] = Query(None, alias="categoryId"),
    subcategory_id: Optional[str] = Query(None, alias="subcategoryId"),
    color_id: Optional[str] = Query(None, alias="colorId"),
    size_id: Optional[str] = Query(None, alias="sizeId"),
    is_featured: Optional[bool] = Query(None, alias="isFeatured"),
    db: Session = Depends(get_db)
):
    """List the store's non-archived products, with optional filters"""
    require_entity_id(store_id, "Store")
    return product_crud.get_products(
        db,
        store_id,
        category_id=category_id,
        subcategory_id=subcategory_id,
        color_id=color_id,
        size_id=size_id,
        is_featured=is_featured,
    )

@router.post("", response_model=ProductWithImages, name="products_post")
def create_product(
    store_id: str,
    product: ProductCreate,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """Create a new product together with its images"""
    product.ensure_required()
    require_entity_id(store_id, "Store")
    require_store_owner(db, store_id, user_id)
    return product_crud.create_product(db, store_id, product)

@router.get("/{product_id}", response_model=Optional[ProductDetail], name="product_get")
def get_product(
    product_id: str,
    db: Session = Depends(get_db)
):
    """Get a product with images, category, subcategory, size and color"""
    require_entity_id(product_id, "Product")
    return product_crud.get_product(db, product_id)

@router.patch("/{product_id}", response_model=ProductWithImages, name="product_patch")
def update_product(
    store_id: str,
    product_id: str,
    product: ProductUpdate,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """Update a product unless it is locked; the image list is replaced as a whole"""
    product.ensure_required()
    require_store_owner(db, store_id, user_id)
    require_entity_id(product_id, "Product")
    return product_crud.update_product(db, store_id, product_id, product)

@router.delete("/{product_id}", response_model=Product, name="product_delete")
def delete_product(
    store_id: str,
    product_id: str,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """Delete a product and its images unless it is locked"""
    require_store_owner(db, store_id, user_id)
    require_entity_id(product_id, "Product")
    return product_crud.delete_product(db, store_id, product_id)
