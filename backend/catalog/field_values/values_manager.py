# catalog/field_values/values_manager.py
import logging
from typing import Any, Callable, Iterable, List, NamedTuple, Optional

import pandas as pd
from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from catalog.core.config import settings
from catalog.core.database import SessionLocal
from catalog.models import BaseType, Field, FieldType, FieldValues, SpecialType

logger = logging.getLogger("uvicorn")

# Special types whose values are worth listing in a filter widget
CATEGORY_SPECIAL_TYPES = frozenset({
    SpecialType.category,
    SpecialType.city,
    SpecialType.state,
    SpecialType.country,
})


class FieldProjection(NamedTuple):
    """
    The minimal, session-free view of a Field handed to background tasks.
    """
    id: int
    table_id: int
    base_type: BaseType
    special_type: Optional[SpecialType]
    field_type: FieldType

    @classmethod
    def from_field(cls, field: Field) -> "FieldProjection":
        return cls(field.id, field.table_id, field.base_type, field.special_type, field.field_type)


def should_have_field_values(field) -> bool:
    """Should this Field get a FieldValues record? Sensitive fields never do."""
    if field.field_type == FieldType.sensitive:
        return False
    return field.special_type in CATEGORY_SPECIAL_TYPES or field.base_type == BaseType.BooleanField


def summarize_distinct_values(raw_values: Iterable[Any], limit: int) -> List[Any]:
    """Drop nulls and duplicates (first occurrence wins), cap at `limit` and unwrap numpy scalars."""
    series = pd.Series(list(raw_values), dtype="object").dropna()
    unique = series.drop_duplicates().head(limit)
    return [v.item() if hasattr(v, "item") else v for v in unique.tolist()]


def delete_field_values(db: Session, field_id: int) -> int:
    """Delete the FieldValues of a Field inside the caller's transaction."""
    result = db.execute(
        delete(FieldValues).where(FieldValues.field_id == field_id),
        execution_options={"synchronize_session": "fetch"},
    )
    return result.rowcount or 0


class FieldValuesManager:
    """
    Creates FieldValues records. Meant to run off the request thread: every call
    opens and closes its own session through `session_factory`.
    """

    def __init__(
        self,
        session_factory: Optional[Callable[[], Session]] = None,
        values_source: Optional[Callable[[FieldProjection, int], Iterable[Any]]] = None,
        max_distinct: Optional[int] = None,
    ):
        self.session_factory = session_factory or SessionLocal
        # Without a source nothing is stored, so a source wired in later still fills every field
        self.values_source = values_source
        self.max_distinct = max_distinct or settings.FIELD_VALUES_MAX_DISTINCT

    def should_have_field_values(self, field) -> bool:
        return should_have_field_values(field)

    def create_field_values(self, field: FieldProjection) -> Optional[FieldValues]:
        """(Re)compute the distinct values of FIELD and store them."""
        if self.values_source is None:
            logger.debug(f"No distinct values source configured, skipping field {field.id}")
            return None
        with self.session_factory() as db:
            if db.get(Field, field.id) is None:
                logger.warning(f"⚠️ Field {field.id} disappeared before its FieldValues could be created")
                return None

            values = summarize_distinct_values(self.values_source(field, self.max_distinct), self.max_distinct)
            field_values = db.scalar(select(FieldValues).where(FieldValues.field_id == field.id))
            if field_values is None:
                field_values = FieldValues(field_id=field.id, values=values)
                db.add(field_values)
            else:
                field_values.values = values
            db.commit()
            db.refresh(field_values)
            logger.info(f"✅ Stored {len(values):,} values for field {field.id}")
            return field_values

    def create_field_values_if_needed(self, field: FieldProjection) -> Optional[FieldValues]:
        """Create FieldValues for FIELD unless it should not have any or already has them."""
        if not self.should_have_field_values(field):
            return None
        with self.session_factory() as db:
            existing = db.scalar(select(FieldValues).where(FieldValues.field_id == field.id))
        if existing is not None:
            return existing
        return self.create_field_values(field)

    def get_field_values(self, db: Session, field_id: int) -> Optional[FieldValues]:
        return db.scalar(select(FieldValues).where(FieldValues.field_id == field_id))


field_values_manager = FieldValuesManager()
