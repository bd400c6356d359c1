# catalog/crud/field.py
import logging
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Type

from sqlalchemy import select
from sqlalchemy.orm import Session

from catalog.core.exceptions import NotFound, ValidationError
from catalog.core.tasks import BackgroundDispatcher, background_dispatcher
from catalog.field_values import FieldValuesManager, field_values_manager
from catalog.lifecycle import post_insert, post_update, pre_cascade_delete, pre_insert
from catalog.models import BaseType, Field, FieldType, FieldValues, SpecialType
from catalog.utils.tree import unflatten_nested_fields

logger = logging.getLogger("uvicorn")

ENUM_COLUMNS: Dict[str, Type[Enum]] = {
    "base_type": BaseType,
    "special_type": SpecialType,
    "field_type": FieldType,
}
NULLABLE_COLUMNS = frozenset({"parent_id", "description", "special_type"})

INSERTABLE_COLUMNS = frozenset({
    "table_id", "parent_id", "name", "description",
    "base_type", "special_type", "field_type",
    "position", "active", "preview_display",
})
REQUIRED_COLUMNS = ("table_id", "name", "base_type")
# A Field never moves to another table or parent once created
IMMUTABLE_COLUMNS = frozenset({"id", "table_id", "parent_id"})
UPDATABLE_COLUMNS = INSERTABLE_COLUMNS - IMMUTABLE_COLUMNS

TREE_COLUMNS = (
    "id", "table_id", "parent_id", "name", "base_type", "special_type",
    "field_type", "position", "active", "preview_display",
)


def _coerce_enum(column: str, value: Any) -> Any:
    enum_cls = ENUM_COLUMNS[column]
    try:
        return enum_cls(value)
    except ValueError:
        raise ValidationError(column, value, f"not a valid {enum_cls.__name__}") from None


def validate_field_values(values: Mapping[str, Any], allowed: frozenset) -> Dict[str, Any]:
    """Reject unknown/immutable columns and out-of-enum types before anything reaches the session."""
    cleaned: Dict[str, Any] = {}
    for column, value in values.items():
        if column not in allowed:
            reason = "cannot be changed" if column in IMMUTABLE_COLUMNS else "unknown column"
            raise ValidationError(column, value, reason)
        if value is None:
            if column not in NULLABLE_COLUMNS:
                raise ValidationError(column, value, "may not be null")
            cleaned[column] = None
            continue
        cleaned[column] = _coerce_enum(column, value) if column in ENUM_COLUMNS else value
    return cleaned


class FieldCRUD:
    """Database operations for Fields, with the lifecycle hooks wired into the write path"""

    def __init__(
        self,
        dispatcher: Optional[BackgroundDispatcher] = None,
        values_manager: Optional[FieldValuesManager] = None,
    ):
        self.dispatcher = dispatcher or background_dispatcher
        self.values_manager = values_manager or field_values_manager

    # ---------- Reads ----------
    def get(self, db: Session, field_id: int) -> Field:
        field = db.get(Field, field_id)
        if field is None:
            raise NotFound("Field", field_id)
        return field

    def get_where(self, db: Session, *criteria) -> List[Field]:
        """Fields matching all CRITERIA (SQLAlchemy expressions), in table/position order."""
        query = select(Field).where(*criteria).order_by(Field.table_id, Field.position, Field.id)
        return list(db.scalars(query))

    def get_table_fields(self, db: Session, table_id: int, active_only: bool = True) -> List[Field]:
        criteria = [Field.table_id == table_id]
        if active_only:
            criteria.append(Field.active.is_(True))
        return self.get_where(db, *criteria)

    def get_table_field_tree(self, db: Session, table_id: int, active_only: bool = True) -> List[dict]:
        """Fields of a table nested under their parents"""
        rows = [
            {column: getattr(field, column) for column in TREE_COLUMNS}
            for field in self.get_table_fields(db, table_id, active_only=active_only)
        ]
        return unflatten_nested_fields(rows)

    def get_values(self, db: Session, field_id: int) -> Optional[FieldValues]:
        self.get(db, field_id)
        return self.values_manager.get_field_values(db, field_id)

    # ---------- Writes ----------
    def create(self, db: Session, values: Mapping[str, Any]) -> Field:
        missing = [column for column in REQUIRED_COLUMNS if values.get(column) is None]
        if missing:
            raise ValidationError(missing[0], None, "is required")
        values = validate_field_values(pre_insert(values), INSERTABLE_COLUMNS)
        if values.get("parent_id") is not None:
            self._check_parent(db, values["parent_id"], values["table_id"])

        field = Field(**values)
        db.add(field)
        db.commit()
        db.refresh(field)
        logger.info(f"➕ Created field {field.id} ({field.name!r}) on table {field.table_id}")

        return post_insert(field, self.dispatcher, self.values_manager)

    def update(self, db: Session, field_id: int, changes: Mapping[str, Any]) -> Field:
        changes = validate_field_values(changes, UPDATABLE_COLUMNS)
        field = self.get(db, field_id)
        for column, value in changes.items():
            setattr(field, column, value)
        db.commit()
        db.refresh(field)
        # Nested fields memoize their parent's name inside qualified_name
        for instance in list(db.identity_map.values()):
            if isinstance(instance, Field):
                instance.forget_derived()

        post_update(db, field_id, changes, self.dispatcher, self.values_manager)
        return field

    def _check_parent(self, db: Session, parent_id: int, table_id: int) -> None:
        parent = db.get(Field, parent_id)
        if parent is None:
            raise ValidationError("parent_id", parent_id, "no such field")
        if parent.table_id != table_id:
            raise ValidationError("parent_id", parent_id, "belongs to another table")

    def delete(self, db: Session, field_id: int) -> None:
        """Delete a Field together with its nested Fields, ForeignKeys and FieldValues, atomically."""
        field = self.get(db, field_id)
        try:
            nested = pre_cascade_delete(db, field)
            db.delete(field)
            db.commit()
        except Exception as e:
            db.rollback()
            logger.error(f"❌ Cascade delete of field {field_id} failed, rolled back: {e}")
            raise
        logger.info(f"🗑️ Deleted field {field_id} and {nested} nested fields")


# Create instance
field_crud = FieldCRUD()
