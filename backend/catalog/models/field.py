# File: catalog/models/field.py
from functools import cached_property
from typing import Optional

from sqlalchemy import Boolean, Column, Enum, ForeignKey as SqlForeignKey, Index, Integer, String, Text, select
from sqlalchemy.orm import Session, object_session

from catalog.core.exceptions import DetachedRecordError, NotFound
from catalog.models.base import Base, TimestampMixin
from catalog.models.database import Database
from catalog.models.field_types import BaseType, FieldType, SpecialType
from catalog.models.foreign_key import ForeignKey
from catalog.models.table import Table
from catalog.utils.naming import name_to_human_readable_name


class Field(TimestampMixin, Base):
    """
    A column of a synced Table.

    Besides the stored columns a Field exposes derived relations (table, db, target,
    parent, permissions, names). They are resolved lazily through the session the
    instance belongs to and memoized for the lifetime of the instance; nothing derived
    is ever written back.
    """
    __tablename__ = "metabase_field"

    id = Column(Integer, primary_key=True, index=True)
    table_id = Column(Integer, SqlForeignKey("metabase_table.id"), nullable=False)
    parent_id = Column(Integer, SqlForeignKey("metabase_field.id"), nullable=True)

    name = Column(String(254), nullable=False)
    description = Column(Text, nullable=True)

    base_type = Column(Enum(BaseType, native_enum=False, length=32), nullable=False)
    special_type = Column(Enum(SpecialType, native_enum=False, length=32), nullable=True)
    field_type = Column(Enum(FieldType, native_enum=False, length=16), nullable=False, default=FieldType.info)

    position = Column(Integer, nullable=False, default=0)
    active = Column(Boolean, nullable=False, default=True)
    preview_display = Column(Boolean, nullable=False, default=True)

    __table_args__ = (
        Index("idx_field_table", "table_id"),
        Index("idx_field_parent", "parent_id"),
    )

    # Memoized in the instance __dict__ by cached_property
    DERIVED_ATTRIBUTES = (
        "table", "db", "target", "parent", "can_read", "can_write",
        "human_readable_name", "qualified_name",
    )

    def __repr__(self) -> str:
        return f"<Field id={self.id} table_id={self.table_id} name={self.name!r}>"

    def forget_derived(self) -> None:
        """Drop memoized relations so the next access recomputes them from the stored columns."""
        for attribute in self.DERIVED_ATTRIBUTES:
            self.__dict__.pop(attribute, None)

    # ---------- Derived relations ----------
    def _session(self) -> Session:
        session = object_session(self)
        if session is None:
            raise DetachedRecordError("Field", self.id)
        return session

    @cached_property
    def table(self) -> Table:
        table = self._session().get(Table, self.table_id)
        if table is None:
            raise NotFound("Table", self.table_id)
        return table

    @cached_property
    def db(self) -> Database:
        return self.table.db

    @cached_property
    def target(self) -> Optional["Field"]:
        """The Field this one points to through its ForeignKey, if it is an fk."""
        if self.special_type != SpecialType.fk:
            return None
        session = self._session()
        destination_id = session.scalar(
            select(ForeignKey.destination_id).where(ForeignKey.origin_id == self.id).limit(1)
        )
        if destination_id is None:
            return None
        destination = session.get(Field, destination_id)
        if destination is None:
            raise NotFound("Field", destination_id)
        return destination

    @cached_property
    def parent(self) -> Optional["Field"]:
        if self.parent_id is None:
            return None
        parent = self._session().get(Field, self.parent_id)
        if parent is None:
            raise NotFound("Field", self.parent_id)
        return parent

    @cached_property
    def can_read(self) -> bool:
        return self.table.can_read

    @cached_property
    def can_write(self) -> bool:
        return self.table.can_write

    @cached_property
    def human_readable_name(self) -> Optional[str]:
        if not self.name:
            return None
        return name_to_human_readable_name(self.name)

    @cached_property
    def qualified_name(self) -> str:
        """`table.field`, or `table.parent.field` for nested fields."""
        prefix = self.parent.qualified_name if self.parent_id is not None else self.table.name
        return f"{prefix}.{self.name}"
