from typing import Optional
from datetime import datetime

from .base import CatalogPayload, CatalogRead


class ColorPayload(CatalogPayload):
    name: Optional[str] = None
    value: Optional[str] = None
    is_locked: Optional[bool] = None

    required_fields = (
        ("name", "Name is required"),
        ("value", "Value is required"),
    )


class ColorCreate(ColorPayload):
    pass


class ColorUpdate(ColorPayload):
    pass


class Color(CatalogRead):
    id: str
    store_id: str
    name: str
    value: str
    is_locked: bool = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
