from dataclasses import dataclass
from typing import Dict, Type

from .schemas import (
    FormValues,
    BillboardFormValues,
    CategoryFormValues,
    SubcategoryFormValues,
    SizeFormValues,
    ColorFormValues,
    ProductFormValues,
)


@dataclass(frozen=True)
class EntityForm:
    """Static description of one entity's form."""

    entity: str            # URL segment, e.g. "billboards"
    label: str             # e.g. "Billboard"
    values: Type[FormValues]
    delete_blocked_message: str

    @property
    def label_lower(self) -> str:
        return self.label.lower()


BILLBOARD_FORM = EntityForm(
    entity="billboards",
    label="Billboard",
    values=BillboardFormValues,
    delete_blocked_message="Make sure you removed all categories using this billboard first.",
)

CATEGORY_FORM = EntityForm(
    entity="categories",
    label="Category",
    values=CategoryFormValues,
    delete_blocked_message="Make sure you removed all products and subcategories using this category first.",
)

SUBCATEGORY_FORM = EntityForm(
    entity="subcategories",
    label="Subcategory",
    values=SubcategoryFormValues,
    delete_blocked_message="Make sure you removed all products using this subcategory first.",
)

SIZE_FORM = EntityForm(
    entity="sizes",
    label="Size",
    values=SizeFormValues,
    delete_blocked_message="Make sure you removed all products using this size first.",
)

COLOR_FORM = EntityForm(
    entity="colors",
    label="Color",
    values=ColorFormValues,
    delete_blocked_message="Make sure you removed all products using this color first.",
)

PRODUCT_FORM = EntityForm(
    entity="products",
    label="Product",
    values=ProductFormValues,
    delete_blocked_message="Something went wrong.",
)

FORMS: Dict[str, EntityForm] = {
    form.entity: form
    for form in (BILLBOARD_FORM, CATEGORY_FORM, SUBCATEGORY_FORM, SIZE_FORM, COLOR_FORM, PRODUCT_FORM)
}
