"""Client-side form schemas: what the dashboard checks before submitting."""

from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class FormValues(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    def to_payload(self) -> dict:
        return self.model_dump(by_alias=True, mode="json")


class BillboardFormValues(FormValues):
    label: str = Field(..., min_length=1)
    image_url: str = Field(..., min_length=1)
    is_featured: bool = False
    is_locked: bool = False


class CategoryFormValues(FormValues):
    name: str = Field(..., min_length=1)
    billboard_id: str = Field(..., min_length=1)
    is_locked: bool = False


class SubcategoryFormValues(FormValues):
    name: str = Field(..., min_length=1)
    category_id: str = Field(..., min_length=1)
    is_locked: bool = False


class SizeFormValues(FormValues):
    name: str = Field(..., min_length=1)
    value: str = Field(..., min_length=1)
    is_locked: bool = False


class ColorFormValues(FormValues):
    name: str = Field(..., min_length=1)
    value: str = Field(..., min_length=4, max_length=9, pattern=r"^#")
    is_locked: bool = False


class ImageValue(FormValues):
    url: str = Field(..., min_length=1)


class ProductFormValues(FormValues):
    name: str = Field(..., min_length=1)
    images: List[ImageValue] = Field(..., min_length=1)
    price: Decimal = Field(..., ge=1)
    category_id: str = Field(..., min_length=1)
    subcategory_id: str = Field(..., min_length=1)
    color_id: Optional[str] = None
    size_id: Optional[str] = None
    description: Optional[str] = None
    is_featured: bool = False
    is_archived: bool = False
    is_locked: bool = False
