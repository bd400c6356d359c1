# catalog/lifecycle/field_hooks.py
"""
Hooks run by FieldCRUD around Field writes.

    pre_insert          -> defaults merged into the incoming values
    post_insert         -> FieldValues creation dispatched in the background
    post_update         -> FieldValues re-evaluated when a type column changed
    pre_cascade_delete  -> children, ForeignKeys and FieldValues removed first
"""
import logging
from typing import Any, Dict, Mapping

from sqlalchemy import delete, or_, select
from sqlalchemy.orm import Session

from catalog.core.exceptions import NotFound
from catalog.field_values import FieldProjection, FieldValuesManager, delete_field_values
from catalog.models import Field, FieldType, ForeignKey

logger = logging.getLogger("uvicorn")

FIELD_DEFAULTS: Dict[str, Any] = {
    "active": True,
    "preview_display": True,
    "field_type": FieldType.info,
    "position": 0,
}

# Updating any of these may change whether a Field should have FieldValues
VALUES_TRIGGER_COLUMNS = frozenset({"base_type", "field_type", "special_type"})


def pre_insert(values: Mapping[str, Any]) -> Dict[str, Any]:
    provided = {k: v for k, v in values.items() if not (k in FIELD_DEFAULTS and v is None)}
    return {**FIELD_DEFAULTS, **provided}


def post_insert(field: Field, dispatcher, values_manager: FieldValuesManager) -> Field:
    projection = FieldProjection.from_field(field)
    if values_manager.should_have_field_values(projection):
        dispatcher.submit(
            values_manager.create_field_values,
            projection,
            description=f"create FieldValues for field {field.id}",
        )
    return field


def post_update(
    db: Session,
    field_id: int,
    changes: Mapping[str, Any],
    dispatcher,
    values_manager: FieldValuesManager,
) -> None:
    if not VALUES_TRIGGER_COLUMNS.intersection(changes):
        return
    row = db.execute(
        select(Field.id, Field.table_id, Field.base_type, Field.special_type, Field.field_type)
        .where(Field.id == field_id)
    ).one_or_none()
    if row is None:
        raise NotFound("Field", field_id)
    dispatcher.submit(
        values_manager.create_field_values_if_needed,
        FieldProjection(*row),
        description=f"create FieldValues if needed for field {field_id}",
    )


def _cascade_delete_field(db: Session, field_id: int) -> int:
    """Delete a Field row and everything hanging off it. Returns the number of Fields removed."""
    removed = _delete_dependents(db, field_id)
    db.execute(
        delete(Field).where(Field.id == field_id),
        execution_options={"synchronize_session": "fetch"},
    )
    return removed + 1


def _delete_dependents(db: Session, field_id: int) -> int:
    child_ids = db.scalars(select(Field.id).where(Field.parent_id == field_id)).all()
    removed = sum(_cascade_delete_field(db, child_id) for child_id in child_ids)
    fk_count = db.execute(
        delete(ForeignKey).where(or_(ForeignKey.origin_id == field_id, ForeignKey.destination_id == field_id)),
        execution_options={"synchronize_session": "fetch"},
    ).rowcount or 0
    values_count = delete_field_values(db, field_id)
    logger.debug(
        f"Field {field_id}: removed {removed} nested fields, {fk_count} foreign keys, {values_count} FieldValues"
    )
    return removed


def pre_cascade_delete(db: Session, field: Field) -> int:
    """
    Remove the dependents of FIELD within the caller's transaction: nested Fields
    (recursively, each with its own dependents), ForeignKeys where FIELD is origin or
    destination, and its FieldValues. Returns the number of nested Fields removed.
    """
    return _delete_dependents(db, field.id)
