"""Lock-guarded mutations shared by every catalog entity.

Every update and delete runs the same checks in the same order: caller
identity (done by the get_current_user_id dependency), required fields,
store ownership, entity id, then a single conditional write keyed on
``store_id = :store_id AND is_locked = false``. Keying the write on the
flag means a row locked after it was read can never be modified, and
keying it on the store means a row of another store is never touched.
"""

import logging
from typing import Any, Dict, Optional, Type

from sqlalchemy import delete, select, update
from sqlalchemy.orm import Session

from store_admin.db.models import Billboard, Category, Color, Size, Store, Subcategory
from store_admin.errors import (
    AuthorizationError,
    InternalError,
    LockConflictError,
    ValidationError,
)

logger = logging.getLogger(__name__)

# Payload foreign keys that must point at rows of the same store
REFERENCE_FIELDS = {
    "billboard_id": (Billboard, "Billboard"),
    "category_id": (Category, "Category"),
    "subcategory_id": (Subcategory, "Subcategory"),
    "size_id": (Size, "Size"),
    "color_id": (Color, "Color"),
}


def require_entity_id(entity_id: Optional[str], label: str) -> str:
    """Reject an empty path id with "<Label> id is required"."""
    if not entity_id or not entity_id.strip():
        raise ValidationError(f"{label} id is required")
    return entity_id


def require_store_owner(db: Session, store_id: str, user_id: str) -> Store:
    """Return the store if the caller owns it, otherwise raise AuthorizationError (405)."""
    store = db.query(Store).filter(Store.id == store_id, Store.user_id == user_id).first()
    if not store:
        logger.info(
            "Store ownership check failed",
            extra={"store_id": store_id, "user_id": user_id},
        )
        raise AuthorizationError()
    return store


def _raise_for_untouched_row(db: Session, model: Type[Any], store_id: str, entity_id: str) -> None:
    """A guarded write matched nothing: the row is locked, in another store, or gone."""
    row = db.execute(
        select(model.store_id, model.is_locked).where(model.id == entity_id)
    ).first()
    db.rollback()
    if row is not None and row.store_id != store_id:
        logger.info(
            f"{model.__name__} belongs to another store, mutation rejected",
            extra={"store_id": store_id, "entity_id": entity_id},
        )
        raise AuthorizationError()
    if row is not None and row.is_locked:
        logger.warning(
            f"{model.__name__} is locked, mutation rejected",
            extra={"store_id": store_id, "entity_id": entity_id},
        )
        raise LockConflictError()
    # No dedicated not-found branch: reported like any other failed write
    raise InternalError(f"{model.__name__} {entity_id} not found")


def require_references_in_store(db: Session, store_id: str, values: Dict[str, Any]) -> None:
    """Reject foreign keys in a payload that point at another store's rows."""
    for field, (model, label) in REFERENCE_FIELDS.items():
        ref_id = values.get(field)
        if ref_id is None:
            continue
        found = db.execute(
            select(model.id).where(model.id == ref_id, model.store_id == store_id)
        ).first()
        if found is None:
            logger.info(
                f"{label} {ref_id} is not in store, write rejected",
                extra={"store_id": store_id, "entity_id": ref_id},
            )
            raise ValidationError(f"{label} id is invalid")


def guarded_update(
    db: Session,
    model: Type[Any],
    store_id: str,
    entity_id: str,
    values: Dict[str, Any],
    commit: bool = True,
) -> None:
    """UPDATE ... WHERE id = :id AND store_id = :store_id AND is_locked = false.

    Raises LockConflictError if the row is locked and AuthorizationError if
    it belongs to another store. With commit=False the caller finishes the
    transaction (product images are replaced in the same one).
    """
    stmt = (
        update(model)
        .where(model.id == entity_id, model.store_id == store_id, model.is_locked == False)  # noqa: E712
        .values(**values)
        .execution_options(synchronize_session=False)
    )
    result = db.execute(stmt)
    if result.rowcount == 0:
        _raise_for_untouched_row(db, model, store_id, entity_id)
    if commit:
        db.commit()
    logger.info(f"Updated {model.__name__}", extra={"store_id": store_id, "entity_id": entity_id})


def guarded_delete(db: Session, model: Type[Any], store_id: str, entity_id: str) -> Any:
    """DELETE ... WHERE id = :id AND store_id = :store_id AND is_locked = false, returning the deleted row."""
    row = db.query(model).filter(model.id == entity_id, model.store_id == store_id).first()
    stmt = (
        delete(model)
        .where(model.id == entity_id, model.store_id == store_id, model.is_locked == False)  # noqa: E712
        .execution_options(synchronize_session=False)
    )
    result = db.execute(stmt)
    if result.rowcount == 0:
        _raise_for_untouched_row(db, model, store_id, entity_id)
    db.commit()
    logger.info(f"Deleted {model.__name__}", extra={"store_id": store_id, "entity_id": entity_id})
    return row
