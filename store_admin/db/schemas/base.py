from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing import ClassVar, Tuple

from store_admin.errors import ValidationError


class CamelModel(BaseModel):
    """Wire format is camelCase (imageUrl, isLocked, storeId, ...)."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CatalogPayload(CamelModel):
    """Request body for create/update.

    Fields are optional at the schema level so a missing one is reported by
    ensure_required() as "<Field> is required" instead of a generic error.
    """

    # (attribute, message) pairs, checked in order
    required_fields: ClassVar[Tuple[Tuple[str, str], ...]] = ()
    # Columns that may be cleared by sending null
    nullable_fields: ClassVar[Tuple[str, ...]] = ()

    def ensure_required(self) -> None:
        for field, message in self.required_fields:
            if not getattr(self, field):
                raise ValidationError(message)

    def scalar_values(self) -> dict:
        """Column values explicitly sent by the caller."""
        values = self.model_dump(exclude_unset=True)
        return {
            field: value for field, value in values.items()
            if value is not None or field in self.nullable_fields
        }


class CatalogRead(CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)
