from typing import Optional
from datetime import datetime

from .base import CatalogPayload, CatalogRead


class SubcategoryPayload(CatalogPayload):
    name: Optional[str] = None
    category_id: Optional[str] = None
    is_locked: Optional[bool] = None

    required_fields = (
        ("name", "Name is required"),
        ("category_id", "Category id is required"),
    )


class SubcategoryCreate(SubcategoryPayload):
    pass


class SubcategoryUpdate(SubcategoryPayload):
    pass


class Subcategory(CatalogRead):
    id: str
    store_id: str
    category_id: str
    name: str
    is_locked: bool = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
