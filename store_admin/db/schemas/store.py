from typing import Optional
from datetime import datetime

from .base import CatalogPayload, CatalogRead


class StoreSchema(CatalogPayload):
    name: Optional[str] = None

    required_fields = (("name", "Name is required"),)


class StoreResponse(CatalogRead):
    id: str
    name: str
    user_id: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
