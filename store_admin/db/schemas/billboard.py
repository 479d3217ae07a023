from typing import Optional
from datetime import datetime

from .base import CatalogPayload, CatalogRead


class BillboardPayload(CatalogPayload):
    label: Optional[str] = None
    image_url: Optional[str] = None
    is_featured: Optional[bool] = None
    is_locked: Optional[bool] = None

    required_fields = (
        ("label", "Label is required"),
        ("image_url", "Image URL is required"),
    )


class BillboardCreate(BillboardPayload):
    pass


class BillboardUpdate(BillboardPayload):
    pass


class Billboard(CatalogRead):
    id: str
    store_id: str
    label: str
    image_url: str
    is_featured: bool = False
    is_locked: bool = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
