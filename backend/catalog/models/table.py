# File: catalog/models/table.py
from functools import cached_property

from sqlalchemy import Boolean, Column, ForeignKey, Index, Integer, String
from sqlalchemy.orm import object_session

from catalog.core.exceptions import DetachedRecordError, NotFound
from catalog.models.base import Base, TimestampMixin
from catalog.models.database import Database


class Table(TimestampMixin, Base):
    __tablename__ = "metabase_table"

    id = Column(Integer, primary_key=True, index=True)
    db_id = Column(Integer, ForeignKey("metabase_database.id"), nullable=False)
    name = Column(String(254), nullable=False)
    active = Column(Boolean, nullable=False, default=True)

    # Permission flags read verbatim by the fields of this table
    can_read = Column(Boolean, nullable=False, default=True)
    can_write = Column(Boolean, nullable=False, default=True)

    __table_args__ = (
        Index("idx_table_db", "db_id"),
    )

    @cached_property
    def db(self) -> Database:
        session = object_session(self)
        if session is None:
            raise DetachedRecordError("Table", self.id)
        database = session.get(Database, self.db_id)
        if database is None:
            raise NotFound("Database", self.db_id)
        return database
