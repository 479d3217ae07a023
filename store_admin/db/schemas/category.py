from typing import Optional
from datetime import datetime

from .base import CatalogPayload, CatalogRead
from .billboard import Billboard


class CategoryPayload(CatalogPayload):
    name: Optional[str] = None
    billboard_id: Optional[str] = None
    is_locked: Optional[bool] = None

    required_fields = (
        ("name", "Name is required"),
        ("billboard_id", "Billboard id is required"),
    )


class CategoryCreate(CategoryPayload):
    pass


class CategoryUpdate(CategoryPayload):
    pass


class Category(CatalogRead):
    id: str
    store_id: str
    billboard_id: str
    name: str
    is_locked: bool = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class CategoryWithBillboard(Category):
    billboard: Optional[Billboard] = None
