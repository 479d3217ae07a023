from decimal import Decimal
from typing import List, Optional
from datetime import datetime

from pydantic import Field

from .base import CamelModel, CatalogPayload, CatalogRead
from .category import Category
from .subcategory import Subcategory
from .size import Size
from .color import Color


class ImageIn(CamelModel):
    url: str = Field(..., min_length=1)


class ProductPayload(CatalogPayload):
    name: Optional[str] = None
    price: Optional[Decimal] = None
    category_id: Optional[str] = None
    subcategory_id: Optional[str] = None
    color_id: Optional[str] = None
    size_id: Optional[str] = None
    description: Optional[str] = None
    images: Optional[List[ImageIn]] = None
    is_featured: Optional[bool] = None
    is_archived: Optional[bool] = None
    is_locked: Optional[bool] = None

    required_fields = (
        ("name", "Name is required"),
        ("images", "Images are required"),
        ("price", "Price is required"),
        ("category_id", "Category id is required"),
        ("subcategory_id", "Subcategory id is required"),
    )

    nullable_fields = ("color_id", "size_id", "description")

    def scalar_values(self) -> dict:
        # Images live in their own table and are replaced separately
        values = super().scalar_values()
        values.pop("images", None)
        return values

    def image_urls(self) -> List[str]:
        return [image.url for image in self.images or []]


class ProductCreate(ProductPayload):
    pass


class ProductUpdate(ProductPayload):
    pass


class Image(CatalogRead):
    id: str
    product_id: str
    url: str
    created_at: Optional[datetime] = None


class Product(CatalogRead):
    id: str
    store_id: str
    category_id: str
    subcategory_id: str
    size_id: Optional[str] = None
    color_id: Optional[str] = None
    name: str
    price: Decimal
    description: Optional[str] = None
    is_featured: bool = False
    is_archived: bool = False
    is_locked: bool = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ProductWithImages(Product):
    images: List[Image] = []


class ProductDetail(ProductWithImages):
    category: Optional[Category] = None
    subcategory: Optional[Subcategory] = None
    size: Optional[Size] = None
    color: Optional[Color] = None
